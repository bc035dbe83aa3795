"""Pydantic schemas for API request/response models."""

from fireprotect.schemas.alert import (
    ALERT_STATUSES,
    ALERT_TYPES,
    AlertDetail,
    AlertOut,
    AlertStatus,
    AlertType,
    EvaluateRequest,
    Severity,
    UpdateRequest,
)
from fireprotect.schemas.analytics import (
    AnalyticsSummary,
    LocationCount,
    MonthCount,
    TrendPoint,
    TypeCount,
)
from fireprotect.schemas.location import (
    LocationCreate,
    LocationOut,
    LocationRequestCreate,
    LocationRequestOut,
)
from fireprotect.schemas.profile import ProfileCreate, ProfileOut, ProfileUpdate
from fireprotect.schemas.sensor import LocationRef, SensorReading

__all__ = [
    # Sensor schemas
    "SensorReading",
    "LocationRef",
    # Alert schemas
    "AlertType",
    "Severity",
    "AlertStatus",
    "ALERT_TYPES",
    "ALERT_STATUSES",
    "AlertOut",
    "AlertDetail",
    "EvaluateRequest",
    "UpdateRequest",
    # Location schemas
    "LocationOut",
    "LocationCreate",
    "LocationRequestCreate",
    "LocationRequestOut",
    # Profile schemas
    "ProfileOut",
    "ProfileCreate",
    "ProfileUpdate",
    # Analytics schemas
    "AnalyticsSummary",
    "TypeCount",
    "LocationCount",
    "MonthCount",
    "TrendPoint",
]
