#!/usr/bin/env python3  # noqa: EXE001
"""
Minimal demonstration of the Wynncraft API client

Shows the core interface: one call per endpoint, one outcome per call, and
pattern matching on that outcome.
"""  # noqa: D212, D415

import asyncio
import sys

from wynn_api import Ambiguous, DecodeFailure, Value, WynnClient


async def main(name: str):  # noqa: ANN201, D103
    print(f"Looking up {name}...\n")

    async with WynnClient() as wynn:
        outcome = await wynn.player_main_stats(name)

    match outcome:
        case Value(stats):
            print(f"{stats.username} ({stats.rank})")
            print(f"  online:      {stats.online}")
            print(f"  total level: {stats.global_data.total_level}")
            print(f"  playtime:    {stats.playtime:.0f}h")
        case Ambiguous(choices):
            print(f"'{name}' matches {len(choices)} players:")
            for uuid, record in choices.items():
                print(f"  {uuid}: {record.get('storedName', record)}")
        case DecodeFailure() as failure:
            print(failure.describe())


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "Salted"))
