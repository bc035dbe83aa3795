"""Pydantic schemas for ThingSpeak sensor data."""

from pydantic import BaseModel, ConfigDict, Field


class SensorReading(BaseModel):
    """One normalized snapshot from a ThingSpeak channel.

    Flame and PIR flags keep the sensors' inverted polarity: "0" means
    flame/motion detected.
    """

    temperature: float  # °C
    humidity: float  # %
    gas: float  # ppm
    flame: str
    pir: str
    timestamp: str  # ThingSpeak created_at, passed through

    @property
    def flame_detected(self) -> bool:
        return self.flame == "0"

    @property
    def motion_detected(self) -> bool:
        return self.pir == "0"


class LocationRef(BaseModel):
    """Minimum location shape the sensor gateway needs to read a channel."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    id: str | None = None
    name: str = Field(min_length=1)
    thingspeak_channel_id: str = Field(min_length=1)
    thingspeak_read_key: str = Field(min_length=1)
