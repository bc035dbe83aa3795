"""Monitoring locations and requests to add new ones."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.models import Location, LocationRequest
from fireprotect.schemas.location import (
    LocationCreate,
    LocationOut,
    LocationRequestCreate,
    LocationRequestOut,
)
from fireprotect.services.change_feed import change_feed

__all__ = [
    "list_locations",
    "get_location",
    "list_sensor_enabled_locations",
    "create_location",
    "delete_location",
    "list_location_requests",
    "create_location_request",
]

logger = logging.getLogger(__name__)


async def list_locations(session: AsyncSession) -> list[Location]:
    """All locations ordered by name."""
    result = await session.execute(select(Location).order_by(Location.name))
    return list(result.scalars().all())


async def get_location(session: AsyncSession, location_id: str) -> Location | None:
    return await session.get(Location, location_id)


async def list_sensor_enabled_locations(session: AsyncSession) -> list[Location]:
    """Locations with both a ThingSpeak channel id and read key."""
    result = await session.execute(
        select(Location)
        .where(
            Location.thingspeak_channel_id.is_not(None),
            Location.thingspeak_channel_id != "",
            Location.thingspeak_read_key.is_not(None),
            Location.thingspeak_read_key != "",
        )
        .order_by(Location.name)
    )
    return list(result.scalars().all())


async def create_location(session: AsyncSession, data: LocationCreate) -> Location:
    location = Location(**data.model_dump(), status="normal")
    session.add(location)
    await session.commit()
    await session.refresh(location)

    logger.info(f"Location created: {location.name} ({location.id})")
    change_feed.publish("locations", "INSERT", _location_record(location))
    return location


async def delete_location(session: AsyncSession, location_id: str) -> bool:
    """Delete a location; its alerts go with it via ON DELETE CASCADE.

    Returns False if it did not exist.
    """
    location = await session.get(Location, location_id)
    if location is None:
        return False

    old = _location_record(location)
    await session.delete(location)
    await session.commit()

    logger.info(f"Location deleted: {old['name']} ({location_id})")
    change_feed.publish("locations", "DELETE", None, old=old)
    return True


async def list_location_requests(session: AsyncSession, user_id: str) -> list[LocationRequest]:
    """A user's own requests, newest first."""
    result = await session.execute(
        select(LocationRequest)
        .where(LocationRequest.user_id == user_id)
        .order_by(LocationRequest.created_at.desc())
    )
    return list(result.scalars().all())


async def create_location_request(
    session: AsyncSession,
    user_id: str,
    data: LocationRequestCreate,
) -> LocationRequest:
    request = LocationRequest(**data.model_dump(), user_id=user_id, status="pending")
    session.add(request)
    await session.commit()
    await session.refresh(request)

    logger.info(f"Location request submitted: {request.location_name} by {user_id}")
    change_feed.publish(
        "location_requests",
        "INSERT",
        LocationRequestOut.model_validate(request).model_dump(mode="json"),
    )
    return request


def _location_record(location: Location) -> dict:
    return LocationOut.model_validate(location).model_dump(mode="json")
