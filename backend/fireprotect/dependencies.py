"""FastAPI dependencies shared by the routers."""

from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.database import get_db
from fireprotect.errors import UnauthorizedError
from fireprotect.services.alert_evaluator import AlertEvaluator
from fireprotect.services.auth_service import parse_bearer, resolve_user_id
from fireprotect.services.profile_service import is_authority
from fireprotect.services.thingspeak import ThingSpeakClient

_sensor_gateway = ThingSpeakClient()
_alert_evaluator = AlertEvaluator(gateway=_sensor_gateway)


def get_sensor_gateway() -> ThingSpeakClient:
    return _sensor_gateway


def get_alert_evaluator() -> AlertEvaluator:
    return _alert_evaluator


async def get_current_user_id(
    authorization: str | None = Header(None),
    session: AsyncSession = Depends(get_db),
) -> str:
    """Resolve the bearer token to a user id, or fail with 401."""
    try:
        return await resolve_user_id(session, parse_bearer(authorization))
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from None


async def require_authority(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> str:
    """Only fire authorities may manage locations."""
    if not await is_authority(session, user_id):
        raise HTTPException(status_code=403, detail="Only fire authorities can manage locations")
    return user_id
