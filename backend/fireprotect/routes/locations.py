"""Location API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.database import get_db
from fireprotect.dependencies import get_current_user_id, get_sensor_gateway, require_authority
from fireprotect.schemas import LocationCreate, LocationOut, SensorReading
from fireprotect.services import create_location, delete_location, get_location, list_locations
from fireprotect.services.thingspeak import (
    DEFAULT_HISTORY_RESULTS,
    MAX_HISTORY_RESULTS,
    ThingSpeakClient,
)

router = APIRouter(
    prefix="/api/locations",
    tags=["locations"],
    dependencies=[Depends(get_current_user_id)],
)


@router.get("", response_model=list[LocationOut])
async def list_all_locations(session: AsyncSession = Depends(get_db)) -> list[LocationOut]:
    """Get all monitoring locations ordered by name."""
    return await list_locations(session)


@router.post("", response_model=LocationOut, status_code=201)
async def add_location(
    data: LocationCreate,
    _: str = Depends(require_authority),
    session: AsyncSession = Depends(get_db),
) -> LocationOut:
    """Add a monitoring location (fire authorities only)."""
    return await create_location(session, data)


@router.get("/{location_id}", response_model=LocationOut)
async def get_single_location(
    location_id: str,
    session: AsyncSession = Depends(get_db),
) -> LocationOut:
    location = await get_location(session, location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return location


@router.delete("/{location_id}", status_code=204)
async def remove_location(
    location_id: str,
    _: str = Depends(require_authority),
    session: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a location and its alerts (fire authorities only)."""
    if not await delete_location(session, location_id):
        raise HTTPException(status_code=404, detail="Location not found")
    return Response(status_code=204)


@router.get("/{location_id}/readings/latest", response_model=SensorReading | None)
async def get_latest_reading(
    location_id: str,
    session: AsyncSession = Depends(get_db),
    gateway: ThingSpeakClient = Depends(get_sensor_gateway),
) -> SensorReading | None:
    """Latest ThingSpeak reading for a location; null when unavailable."""
    location = await get_location(session, location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return await gateway.latest(location)


@router.get("/{location_id}/readings/history", response_model=list[SensorReading])
async def get_reading_history(
    location_id: str,
    results: int = Query(
        DEFAULT_HISTORY_RESULTS, ge=1, le=MAX_HISTORY_RESULTS, description="Entries to fetch"
    ),
    session: AsyncSession = Depends(get_db),
    gateway: ThingSpeakClient = Depends(get_sensor_gateway),
) -> list[SensorReading]:
    """Recent ThingSpeak readings for a location, oldest first."""
    location = await get_location(session, location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return await gateway.history(location, results)
