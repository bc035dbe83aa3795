"""Alert counts for the analytics dashboard charts."""

from datetime import UTC, date, datetime, time, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.models import Alert, Location
from fireprotect.schemas.alert import ALERT_TYPES
from fireprotect.schemas.analytics import (
    AnalyticsSummary,
    LocationCount,
    MonthCount,
    TrendPoint,
    TypeCount,
)

__all__ = ["get_alert_summary", "get_alert_trends"]

# Constants
DEFAULT_TREND_DAYS = 7


async def get_alert_summary(session: AsyncSession) -> AnalyticsSummary:
    """Totals by status, type, location and calendar month."""
    status_result = await session.execute(
        select(Alert.status, func.count(Alert.id)).group_by(Alert.status)
    )
    by_status = {status: count for status, count in status_result.all()}

    type_result = await session.execute(
        select(Alert.alert_type, func.count(Alert.id))
        .group_by(Alert.alert_type)
        .order_by(func.count(Alert.id).desc(), Alert.alert_type)
    )
    by_type = [TypeCount(alert_type=t, count=c) for t, c in type_result.all()]

    location_result = await session.execute(
        select(Location.id, Location.name, func.count(Alert.id))
        .join(Alert, Alert.location_id == Location.id)
        .group_by(Location.id, Location.name)
        .order_by(func.count(Alert.id).desc(), Location.name)
    )
    by_location = [
        LocationCount(location_id=lid, location_name=name, count=c)
        for lid, name, c in location_result.all()
    ]

    month_bucket = func.strftime("%Y-%m", Alert.timestamp)
    month_result = await session.execute(
        select(month_bucket.label("month"), func.count(Alert.id))
        .group_by(month_bucket)
        .order_by(month_bucket)
    )
    by_month = [MonthCount(month=m, count=c) for m, c in month_result.all()]

    return AnalyticsSummary(
        total_alerts=sum(by_status.values()),
        active_alerts=by_status.get("active", 0),
        resolved_alerts=by_status.get("resolved", 0),
        false_alarms=by_status.get("false_alarm", 0),
        by_type=by_type,
        by_location=by_location,
        by_month=by_month,
    )


async def get_alert_trends(
    session: AsyncSession,
    days: int = DEFAULT_TREND_DAYS,
    location_id: str | None = None,
    today: date | None = None,
) -> list[TrendPoint]:
    """
    Daily alert counts per type over the trailing ``days`` days (today included).

    Every day in the window is present, with zero counts where nothing fired.
    Alert types outside the known set only contribute to ``total``.
    """
    if today is None:
        today = datetime.now(UTC).date()
    first_day = today - timedelta(days=days - 1)

    query = select(Alert.alert_type, Alert.timestamp).where(
        Alert.timestamp >= datetime.combine(first_day, time.min),
        Alert.timestamp < datetime.combine(today + timedelta(days=1), time.min),
    )
    if location_id:
        query = query.where(Alert.location_id == location_id)

    result = await session.execute(query)

    window = [first_day + timedelta(days=offset) for offset in range(days)]
    points = {day: TrendPoint(date=day) for day in window}

    for alert_type, timestamp in result.all():
        point = points.get(timestamp.date())
        if point is None:
            continue
        if alert_type in ALERT_TYPES:
            setattr(point, alert_type, getattr(point, alert_type) + 1)
        point.total += 1

    return list(points.values())
