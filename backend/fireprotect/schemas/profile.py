"""Pydantic schemas for user profiles."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UserType = Literal["civilian", "authority"]


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    full_name: str
    user_type: str
    phone: str | None = None
    avatar_url: str | None = None
    authority_name: str | None = None
    fire_station: str | None = None
    badge_number: str | None = None
    department: str | None = None
    created_at: datetime
    updated_at: datetime


class ProfileCreate(BaseModel):
    full_name: str = Field(min_length=1, max_length=200)
    user_type: UserType = "civilian"


class ProfileUpdate(BaseModel):
    """Editable profile fields; omitted fields are left unchanged."""

    full_name: str | None = Field(default=None, min_length=1, max_length=200)
    phone: str | None = None
    avatar_url: str | None = None
    authority_name: str | None = None
    fire_station: str | None = None
    badge_number: str | None = None
    department: str | None = None
