"""Alert API routes (read side; status changes go through alert-manager)."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.database import get_db
from fireprotect.dependencies import get_current_user_id
from fireprotect.schemas import AlertDetail, AlertOut
from fireprotect.services import get_alert_detail, list_alerts

DEFAULT_LIMIT = 100
MAX_LIMIT = 1000

router = APIRouter(
    prefix="/api/alerts",
    tags=["alerts"],
    dependencies=[Depends(get_current_user_id)],
)


@router.get("", response_model=list[AlertOut])
async def list_all_alerts(
    status: list[str] | None = Query(None, description="Filter by status (repeatable)"),
    location_id: str | None = Query(None, description="Filter by location"),
    alert_type: str | None = Query(None, description="Filter by alert type"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Max alerts to return"),
    session: AsyncSession = Depends(get_db),
) -> list[AlertOut]:
    """Get alerts newest first, e.g. ?status=active&status=in_queue for live alerts."""
    return await list_alerts(
        session,
        statuses=status,
        location_id=location_id,
        alert_type=alert_type,
        limit=limit,
    )


@router.get("/{alert_id}", response_model=AlertDetail)
async def get_alert(
    alert_id: str,
    session: AsyncSession = Depends(get_db),
) -> AlertDetail:
    """Get one alert with its location."""
    alert = await get_alert_detail(session, alert_id)
    if not alert:
        raise HTTPException(status_code=404, detail="Alert not found")
    return alert
