"""Service layer modules."""

from fireprotect.services.alert_evaluator import AlertEvaluator, EvaluationResult
from fireprotect.services.alert_service import get_alert_detail, list_alerts
from fireprotect.services.analytics_service import get_alert_summary, get_alert_trends
from fireprotect.services.change_feed import ChangeFeed, change_feed
from fireprotect.services.location_service import (
    create_location,
    create_location_request,
    delete_location,
    get_location,
    list_location_requests,
    list_locations,
    list_sensor_enabled_locations,
)
from fireprotect.services.profile_service import (
    create_profile,
    get_profile,
    is_authority,
    update_profile,
)
from fireprotect.services.thingspeak import ThingSpeakClient

__all__ = [
    "AlertEvaluator",
    "EvaluationResult",
    "ThingSpeakClient",
    "ChangeFeed",
    "change_feed",
    "list_alerts",
    "get_alert_detail",
    "get_alert_summary",
    "get_alert_trends",
    "list_locations",
    "get_location",
    "list_sensor_enabled_locations",
    "create_location",
    "delete_location",
    "list_location_requests",
    "create_location_request",
    "get_profile",
    "create_profile",
    "update_profile",
    "is_authority",
]
