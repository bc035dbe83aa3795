#!/usr/bin/env python3
"""Evaluate every sensor-enabled location once (run from cron).

Usage: python scripts/evaluate_locations.py [--loop SECONDS]
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fireprotect.database import async_session
from fireprotect.errors import FireProtectError
from fireprotect.logging_config import setup_logging
from fireprotect.services import AlertEvaluator, ThingSpeakClient, list_sensor_enabled_locations


async def evaluate_all(evaluator: AlertEvaluator) -> int:
    """Evaluate all sensor-enabled locations. Returns the number of alerts created."""
    created = 0
    async with async_session() as session:
        locations = await list_sensor_enabled_locations(session)
        print(f"Evaluating {len(locations)} sensor-enabled locations...")

        for location in locations:
            try:
                result = await evaluator.evaluate(session, location.id)
            except FireProtectError as e:
                print(f"  {location.name}: error - {e}")
                continue

            if result.created:
                created += 1
                print(f"  {location.name}: {result.alert.alert_type} alert created ({result.alert.id})")
            else:
                print(f"  {location.name}: {result.outcome}")

    print(f"Done. {created} alert(s) created.")
    return created


async def main(loop_seconds: int | None) -> None:
    setup_logging("evaluator")
    evaluator = AlertEvaluator(gateway=ThingSpeakClient())
    while True:
        await evaluate_all(evaluator)
        if loop_seconds is None:
            break
        await asyncio.sleep(loop_seconds)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Evaluate sensor-enabled locations")
    parser.add_argument("--loop", type=int, default=None, help="Repeat every N seconds")
    args = parser.parse_args()

    asyncio.run(main(args.loop))
