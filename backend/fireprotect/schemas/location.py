"""Pydantic schemas for locations and location requests."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LocationOut(BaseModel):
    """Monitoring location."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    region: str
    latitude: float
    longitude: float
    thingspeak_channel_id: str | None = None
    thingspeak_read_key: str | None = None
    status: str
    sensor_enabled: bool
    created_at: datetime


class LocationCreate(BaseModel):
    """Body for adding a monitoring location."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(min_length=1, max_length=200)
    region: str = Field(min_length=1, max_length=200)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    thingspeak_channel_id: str | None = None
    thingspeak_read_key: str | None = None


class LocationRequestCreate(BaseModel):
    """Body for requesting a new monitoring location."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    location_name: str = Field(min_length=1, max_length=200)
    region: str = Field(min_length=1, max_length=200)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    thingspeak_channel_id: str | None = None
    thingspeak_read_key: str | None = None
    reason: str | None = None


class LocationRequestOut(LocationRequestCreate):
    """Submitted location request."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    status: str
    created_at: datetime
