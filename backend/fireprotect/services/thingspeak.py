"""ThingSpeak sensor gateway — reads a location's channel and normalizes feeds."""

import logging
import math
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from fireprotect.config import THINGSPEAK_BASE_URL, THINGSPEAK_TIMEOUT
from fireprotect.schemas.sensor import SensorReading

__all__ = [
    "THINGSPEAK_FIELD_MAP",
    "DEFAULT_HISTORY_RESULTS",
    "MAX_HISTORY_RESULTS",
    "SensorSource",
    "ThingSpeakClient",
    "parse_feed",
]

logger = logging.getLogger(__name__)

# Channel layout written by the sensor node firmware. Must match the deployed
# firmware exactly; field1 is temperature, not flame.
THINGSPEAK_FIELD_MAP: dict[str, str] = {
    "field1": "temperature",
    "field2": "humidity",
    "field3": "flame",
    "field4": "gas",
    "field5": "pir",
}

NUMERIC_FIELDS = frozenset({"temperature", "humidity", "gas"})

DEFAULT_HISTORY_RESULTS = 100
# ThingSpeak caps a feeds.json read at 8000 entries
MAX_HISTORY_RESULTS = 8000


class SensorSource(Protocol):
    """Anything carrying ThingSpeak credentials (Location row or LocationRef)."""

    name: str
    thingspeak_channel_id: str | None
    thingspeak_read_key: str | None


def parse_feed(feed: Any) -> SensorReading | None:
    """Map one ThingSpeak feed entry onto a SensorReading.

    Returns None when the entry is not an object, a mapped field or
    ``created_at`` is missing, or a numeric field is unparseable or not finite.
    """
    if not isinstance(feed, dict) or not feed.get("created_at"):
        return None

    values: dict[str, Any] = {"timestamp": str(feed["created_at"])}
    for field_name, reading_name in THINGSPEAK_FIELD_MAP.items():
        raw = feed.get(field_name)
        if raw is None:
            return None
        if reading_name in NUMERIC_FIELDS:
            try:
                value = float(raw)
            except (TypeError, ValueError):
                return None
            # Firmware posts nan/inf after a failed sensor read
            if not math.isfinite(value):
                return None
            values[reading_name] = value
        else:
            values[reading_name] = str(raw).strip()

    try:
        return SensorReading(**values)
    except ValidationError:
        return None


class ThingSpeakClient:
    """Single-attempt reads against the ThingSpeak channel feed API.

    Upstream failures (network, HTTP status, bad JSON) are logged and
    absorbed: ``latest`` returns None and ``history`` returns an empty list.
    """

    def __init__(
        self,
        base_url: str = THINGSPEAK_BASE_URL,
        timeout: float = THINGSPEAK_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def latest(self, location: SensorSource) -> SensorReading | None:
        """Fetch the most recent entry of the location's channel."""
        if not _has_credentials(location):
            logger.info(f"Location '{location.name}' has no ThingSpeak credentials, skipping")
            return None

        payload = await self._get_json(
            f"/channels/{location.thingspeak_channel_id}/feeds/last.json",
            {"api_key": location.thingspeak_read_key},
            location.name,
        )
        if payload is None:
            return None

        reading = parse_feed(payload)
        if reading is None:
            logger.warning(f"Malformed ThingSpeak entry for '{location.name}'")
        return reading

    async def history(
        self,
        location: SensorSource,
        results: int = DEFAULT_HISTORY_RESULTS,
    ) -> list[SensorReading]:
        """Fetch up to ``results`` entries, in the order ThingSpeak returns them."""
        if not _has_credentials(location):
            logger.info(f"Location '{location.name}' has no ThingSpeak credentials, skipping")
            return []

        payload = await self._get_json(
            f"/channels/{location.thingspeak_channel_id}/feeds.json",
            {"api_key": location.thingspeak_read_key, "results": results},
            location.name,
        )
        if not isinstance(payload, dict) or not isinstance(payload.get("feeds"), list):
            if payload is not None:
                logger.warning(f"Malformed ThingSpeak history for '{location.name}'")
            return []

        readings = []
        for feed in payload["feeds"]:
            reading = parse_feed(feed)
            if reading is None:
                logger.debug(f"Skipping malformed feed entry for '{location.name}': {feed}")
                continue
            readings.append(reading)
        return readings

    async def _get_json(self, path: str, params: dict[str, Any], name: str) -> Any | None:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(path, params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            logger.warning(f"ThingSpeak request failed for '{name}': {e}")
        except ValueError as e:
            logger.warning(f"ThingSpeak returned invalid JSON for '{name}': {e}")
        return None


def _has_credentials(location: SensorSource) -> bool:
    return bool(location.thingspeak_channel_id) and bool(location.thingspeak_read_key)
