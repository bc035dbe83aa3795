"""Profile service layer."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.models import Profile
from fireprotect.schemas.profile import ProfileCreate, ProfileOut, ProfileUpdate
from fireprotect.services.change_feed import change_feed

__all__ = ["get_profile", "create_profile", "update_profile", "is_authority"]

logger = logging.getLogger(__name__)


async def get_profile(session: AsyncSession, user_id: str) -> Profile | None:
    return await session.get(Profile, user_id)


async def is_authority(session: AsyncSession, user_id: str) -> bool:
    profile = await session.get(Profile, user_id)
    return profile is not None and profile.user_type == "authority"


async def create_profile(session: AsyncSession, user_id: str, data: ProfileCreate) -> Profile:
    profile = Profile(user_id=user_id, full_name=data.full_name, user_type=data.user_type)
    session.add(profile)
    await session.commit()
    await session.refresh(profile)

    logger.info(f"Profile created for {user_id} ({data.user_type})")
    change_feed.publish("profiles", "INSERT", _profile_record(profile))
    return profile


async def update_profile(session: AsyncSession, profile: Profile, data: ProfileUpdate) -> Profile:
    """Apply the fields present in ``data``; user_type is not editable here."""
    old = _profile_record(profile)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(profile, field, value)

    await session.commit()
    await session.refresh(profile)

    change_feed.publish("profiles", "UPDATE", _profile_record(profile), old=old)
    return profile


def _profile_record(profile: Profile) -> dict:
    return ProfileOut.model_validate(profile).model_dump(mode="json")
