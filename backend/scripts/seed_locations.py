#!/usr/bin/env python3
"""Seed demo locations, profiles and access tokens into the database."""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from fireprotect.database import async_session
from fireprotect.models import Location, Profile
from fireprotect.services.auth_service import issue_token

# ThingSpeak credentials are placeholders; replace with real channel/read keys
LOCATIONS = [
    {
        "name": "Connaught Place Fire Post",
        "region": "Delhi",
        "latitude": 28.6315,
        "longitude": 77.2167,
        "thingspeak_channel_id": "1234567",
        "thingspeak_read_key": "DEMOREADKEY00001",
    },
    {
        "name": "Okhla Industrial Area",
        "region": "Delhi",
        "latitude": 28.5355,
        "longitude": 77.2710,
        "thingspeak_channel_id": "1234568",
        "thingspeak_read_key": "DEMOREADKEY00002",
    },
    {
        "name": "Sanjay Van Forest Edge",
        "region": "Delhi",
        "latitude": 28.5246,
        "longitude": 77.1955,
        "thingspeak_channel_id": None,  # Not sensor-enabled yet
        "thingspeak_read_key": None,
    },
]

PROFILES = [
    {
        "user_id": "00000000-0000-0000-0000-000000000001",
        "full_name": "Station Officer Demo",
        "user_type": "authority",
        "authority_name": "Delhi Fire Service",
        "fire_station": "Connaught Place",
        "badge_number": "DFS-0001",
        "department": "Operations",
    },
    {
        "user_id": "00000000-0000-0000-0000-000000000002",
        "full_name": "Civilian Demo",
        "user_type": "civilian",
    },
]


async def seed_locations_and_profiles() -> None:
    """Seed locations and profiles (idempotent); always issues fresh tokens."""
    async with async_session() as session:
        result = await session.execute(select(Location).limit(1))
        if result.scalar_one_or_none():
            print("Locations already seeded, skipping.")
        else:
            for location_data in LOCATIONS:
                session.add(Location(**location_data, status="normal"))
            await session.commit()
            print(f"Seeded {len(LOCATIONS)} locations.")

        result = await session.execute(select(Profile).limit(1))
        if result.scalar_one_or_none():
            print("Profiles already seeded, skipping.")
        else:
            for profile_data in PROFILES:
                session.add(Profile(**profile_data))
            await session.commit()
            print(f"Seeded {len(PROFILES)} profiles.")

        for profile_data in PROFILES:
            token = await issue_token(session, profile_data["user_id"])
            print(f"Token for {profile_data['full_name']} ({profile_data['user_type']}): {token}")


if __name__ == "__main__":
    asyncio.run(seed_locations_and_profiles())
