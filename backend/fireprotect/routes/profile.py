"""Profile and location request API routes for the current user."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.database import get_db
from fireprotect.dependencies import get_current_user_id
from fireprotect.schemas import (
    LocationRequestCreate,
    LocationRequestOut,
    ProfileCreate,
    ProfileOut,
    ProfileUpdate,
)
from fireprotect.services import (
    create_location_request,
    create_profile,
    get_profile,
    list_location_requests,
    update_profile,
)

router = APIRouter(prefix="/api", tags=["profile"])


@router.get("/profile", response_model=ProfileOut)
async def read_profile(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> ProfileOut:
    profile = await get_profile(session, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post("/profile", response_model=ProfileOut, status_code=201)
async def add_profile(
    data: ProfileCreate,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> ProfileOut:
    """Create the caller's profile right after sign-up."""
    if await get_profile(session, user_id):
        raise HTTPException(status_code=409, detail="Profile already exists")
    return await create_profile(session, user_id, data)


@router.patch("/profile", response_model=ProfileOut)
async def edit_profile(
    data: ProfileUpdate,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> ProfileOut:
    profile = await get_profile(session, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return await update_profile(session, profile, data)


@router.get("/location-requests", response_model=list[LocationRequestOut])
async def list_my_location_requests(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> list[LocationRequestOut]:
    """The caller's location requests, newest first."""
    return await list_location_requests(session, user_id)


@router.post("/location-requests", response_model=LocationRequestOut, status_code=201)
async def submit_location_request(
    data: LocationRequestCreate,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> LocationRequestOut:
    """Ask the fire authorities to add a monitoring location."""
    return await create_location_request(session, user_id, data)
