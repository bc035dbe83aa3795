#!/usr/bin/env python3
"""One-shot database setup: tables, demo locations and profiles, then tokens.

Usage: python scripts/setup_database.py [--reset]
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from scripts.init_db import init_db
from scripts.seed_locations import seed_locations_and_profiles


async def setup_all() -> None:
    """Run all setup steps."""
    print("=== Setting up FireProtect database ===")
    print()

    print("Step 1: Creating tables...")
    await init_db(reset="--reset" in sys.argv[1:])
    print()

    print("Step 2: Seeding locations, profiles and tokens...")
    await seed_locations_and_profiles()
    print()

    print("=== Setup complete! ===")
    print("Start the server with: uvicorn fireprotect.main:app --reload --port 8000")


if __name__ == "__main__":
    asyncio.run(setup_all())
