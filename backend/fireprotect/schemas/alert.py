"""Pydantic schemas for alerts and the alert-manager function."""

from datetime import datetime
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

from fireprotect.schemas.location import LocationOut

AlertType = Literal["fire", "gas_leak", "temperature", "motion"]
Severity = Literal["low", "medium", "high", "critical"]
AlertStatus = Literal["active", "resolved", "false_alarm", "in_queue", "unsolved"]

ALERT_TYPES: tuple[str, ...] = get_args(AlertType)
ALERT_STATUSES: tuple[str, ...] = get_args(AlertStatus)


class AlertOut(BaseModel):
    """Alert row as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    location_id: str
    alert_type: str
    severity: str
    # Plain str: rows written with STRICT_ALERT_STATUS off may hold other values
    status: str
    sensor_values: dict[str, Any]
    timestamp: datetime
    resolved_at: datetime | None = None
    resolved_by: str | None = None
    location_name: str | None = None


class AlertDetail(AlertOut):
    """Alert with its full location record."""

    location: LocationOut | None = None


class EvaluateRequest(BaseModel):
    """alert-manager body for {action: "evaluate"}."""

    action: Literal["evaluate"]
    location_id: str = Field(alias="locationId", min_length=1)


class UpdateRequest(BaseModel):
    """alert-manager body for {action: "update"}."""

    action: Literal["update"]
    alert_id: str = Field(alias="alertId", min_length=1)
    status: str = Field(min_length=1)
