#!/usr/bin/env python3
"""Issue a bearer token for a user id."""

import argparse
import asyncio
import sys
from datetime import timedelta
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fireprotect.database import async_session
from fireprotect.services.auth_service import issue_token


async def issue(user_id: str, ttl_hours: int | None) -> None:
    ttl = timedelta(hours=ttl_hours) if ttl_hours else None
    async with async_session() as session:
        token = await issue_token(session, user_id, ttl)
    print(token)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Issue an access token")
    parser.add_argument("user_id", help="User id the token authenticates as")
    parser.add_argument("--ttl-hours", type=int, default=None, help="Expiry in hours (default: never)")
    args = parser.parse_args()

    asyncio.run(issue(args.user_id, args.ttl_hours))
