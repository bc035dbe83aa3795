"""Read-side queries over alert rows."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.models import Alert, Location
from fireprotect.schemas.alert import AlertDetail, AlertOut
from fireprotect.schemas.location import LocationOut

__all__ = ["list_alerts", "get_alert_detail"]

DEFAULT_LIMIT = 100


async def list_alerts(
    session: AsyncSession,
    statuses: list[str] | None = None,
    location_id: str | None = None,
    alert_type: str | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[AlertOut]:
    """Alerts newest first, with the location name joined in."""
    query = select(Alert, Location.name).join(Location, Alert.location_id == Location.id)

    if statuses:
        query = query.where(Alert.status.in_(statuses))
    if location_id:
        query = query.where(Alert.location_id == location_id)
    if alert_type:
        query = query.where(Alert.alert_type == alert_type)

    query = query.order_by(Alert.timestamp.desc()).limit(limit)

    result = await session.execute(query)
    alerts = []
    for alert, location_name in result.all():
        out = AlertOut.model_validate(alert)
        out.location_name = location_name
        alerts.append(out)
    return alerts


async def get_alert_detail(session: AsyncSession, alert_id: str) -> AlertDetail | None:
    """One alert with its full location record."""
    result = await session.execute(
        select(Alert, Location)
        .join(Location, Alert.location_id == Location.id)
        .where(Alert.id == alert_id)
    )
    row = result.one_or_none()
    if not row:
        return None

    alert, location = row
    detail = AlertDetail(
        **AlertOut.model_validate(alert).model_dump(),
        location=LocationOut.model_validate(location),
    )
    detail.location_name = location.name
    return detail
