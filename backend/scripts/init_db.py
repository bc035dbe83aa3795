#!/usr/bin/env python3
"""Create the FireProtect tables, or drop and recreate them with --reset."""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import fireprotect.models  # noqa: F401 - registers tables on Base.metadata
from fireprotect.config import DATABASE_PATH
from fireprotect.database import create_tables, drop_tables


async def init_db(reset: bool = False) -> None:
    if reset:
        await drop_tables()
        print("Dropped existing tables.")
    await create_tables()
    print(f"Tables ready in {DATABASE_PATH}")


if __name__ == "__main__":
    asyncio.run(init_db(reset="--reset" in sys.argv[1:]))
