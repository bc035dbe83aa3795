"""Alert evaluation — turns the latest sensor reading into an alert row."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Literal, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.config import DEDUPLICATE_ACTIVE_ALERTS, STRICT_ALERT_STATUS
from fireprotect.errors import InvalidStatusError, NotFoundError
from fireprotect.models import Alert, Location
from fireprotect.schemas.alert import ALERT_STATUSES, AlertOut
from fireprotect.schemas.sensor import SensorReading
from fireprotect.services._rules import AlertThresholds, classify_reading
from fireprotect.services.auth_service import resolve_user_id
from fireprotect.services.change_feed import ChangeFeed, change_feed
from fireprotect.services.thingspeak import SensorSource

__all__ = ["AlertEvaluator", "EvaluationResult", "SensorGateway"]

logger = logging.getLogger(__name__)

Outcome = Literal["no_data", "normal", "created", "existing"]


class SensorGateway(Protocol):
    async def latest(self, location: SensorSource) -> SensorReading | None: ...


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of one evaluation.

    - no_data: no reading available, nothing written
    - normal: reading within limits, nothing written
    - created: a new alert row was inserted
    - existing: deduplication found an active alert of the same type
    """

    outcome: Outcome
    reading: SensorReading | None = None
    alert: Alert | None = None

    @property
    def created(self) -> bool:
        return self.outcome == "created"


class AlertEvaluator:
    """Evaluates locations against the alert rules and updates alert status.

    Stateless across calls: every method takes the session it works in, and
    nothing guards concurrent evaluations of the same location.
    """

    def __init__(
        self,
        gateway: SensorGateway,
        thresholds: AlertThresholds | None = None,
        *,
        strict_status: bool = STRICT_ALERT_STATUS,
        deduplicate: bool = DEDUPLICATE_ACTIVE_ALERTS,
        feed: ChangeFeed | None = None,
    ) -> None:
        self.gateway = gateway
        self.thresholds = thresholds or AlertThresholds()
        self.strict_status = strict_status
        self.deduplicate = deduplicate
        self.feed = feed or change_feed

    async def evaluate(self, session: AsyncSession, location_id: str) -> EvaluationResult:
        """Read the location's latest sensors and insert an alert on a breach."""
        location = await session.get(Location, location_id)
        if location is None:
            raise NotFoundError("Location not found")

        logger.info(f"Evaluating location: {location.name}")

        if not location.sensor_enabled:
            logger.info(f"Location '{location.name}' is not sensor-enabled")
            return EvaluationResult(outcome="no_data")

        reading = await self.gateway.latest(location)
        if reading is None:
            logger.info(f"No sensor data for '{location.name}'")
            return EvaluationResult(outcome="no_data")

        rule = classify_reading(reading, self.thresholds)
        if rule is None:
            return EvaluationResult(outcome="normal", reading=reading)

        if self.deduplicate:
            existing = await self._find_active_alert(session, location.id, rule.alert_type)
            if existing is not None:
                logger.info(
                    f"Active {rule.alert_type} alert {existing.id} already open for '{location.name}'"
                )
                return EvaluationResult(outcome="existing", reading=reading, alert=existing)

        alert = Alert(
            location_id=location.id,
            alert_type=rule.alert_type,
            severity=rule.severity,
            status="active",
            sensor_values=reading.model_dump(),
            timestamp=datetime.now(UTC).replace(tzinfo=None),  # Use naive UTC for SQLite
        )
        session.add(alert)
        await session.commit()
        await session.refresh(alert)

        logger.warning(
            f"{rule.alert_type} alert ({rule.severity}) created for '{location.name}': {alert.id}"
        )
        self.feed.publish("alerts", "INSERT", _alert_record(alert))
        return EvaluationResult(outcome="created", reading=reading, alert=alert)

    async def update(
        self,
        session: AsyncSession,
        alert_id: str,
        status: str,
        caller_token: str | None,
    ) -> Alert:
        """Set an alert's status on behalf of an authenticated caller.

        Non-active statuses stamp resolved_at/resolved_by; "active" clears them.
        Any status may move to any other.
        """
        user_id = await resolve_user_id(session, caller_token)

        if self.strict_status and status not in ALERT_STATUSES:
            raise InvalidStatusError(
                f"Invalid status '{status}'. Expected one of: {', '.join(ALERT_STATUSES)}"
            )

        alert = await session.get(Alert, alert_id)
        if alert is None:
            raise NotFoundError("Alert not found")

        old = _alert_record(alert)
        alert.status = status
        if status != "active":
            alert.resolved_at = datetime.now(UTC).replace(tzinfo=None)
            alert.resolved_by = user_id
        else:
            alert.resolved_at = None
            alert.resolved_by = None

        await session.commit()
        await session.refresh(alert)

        logger.info(f"Alert updated: {alert_id} -> {status} by {user_id}")
        self.feed.publish("alerts", "UPDATE", _alert_record(alert), old=old)
        return alert

    async def _find_active_alert(
        self,
        session: AsyncSession,
        location_id: str,
        alert_type: str,
    ) -> Alert | None:
        result = await session.execute(
            select(Alert)
            .where(
                Alert.location_id == location_id,
                Alert.alert_type == alert_type,
                Alert.status == "active",
            )
            .order_by(Alert.timestamp.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()


def _alert_record(alert: Alert) -> dict:
    return AlertOut.model_validate(alert).model_dump(mode="json")
