"""Analytics API routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.database import get_db
from fireprotect.dependencies import get_current_user_id
from fireprotect.schemas import AnalyticsSummary, TrendPoint
from fireprotect.services import get_alert_summary, get_alert_trends

MAX_TREND_DAYS = 365

router = APIRouter(
    prefix="/api/analytics",
    tags=["analytics"],
    dependencies=[Depends(get_current_user_id)],
)


@router.get("/summary", response_model=AnalyticsSummary)
async def summary(session: AsyncSession = Depends(get_db)) -> AnalyticsSummary:
    """Alert totals by status, type, location and month."""
    return await get_alert_summary(session)


@router.get("/trends", response_model=list[TrendPoint])
async def trends(
    days: int = Query(7, ge=1, le=MAX_TREND_DAYS, description="Trailing window in days"),
    location_id: str | None = Query(None, description="Restrict to one location"),
    session: AsyncSession = Depends(get_db),
) -> list[TrendPoint]:
    """Daily alert counts per type, one point per day in the window."""
    return await get_alert_trends(session, days=days, location_id=location_id)
