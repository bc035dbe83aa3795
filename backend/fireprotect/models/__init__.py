"""SQLAlchemy models."""

from fireprotect.models.access_token import AccessToken
from fireprotect.models.alert import Alert
from fireprotect.models.location import Location
from fireprotect.models.location_request import LocationRequest
from fireprotect.models.profile import Profile

__all__ = [
    "Location",
    "Alert",
    "Profile",
    "LocationRequest",
    "AccessToken",
]
