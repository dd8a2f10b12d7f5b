#!/usr/bin/env python3
"""Minimal custom telemetry reporter example for wynn-api.
Shows how to print timing and metric events as they happen.
"""

import asyncio
import os

os.environ["WYNN_TELEMETRY"] = "1"

from typing import Any

from wynn_api import WynnClient
from wynn_api.models import GuildLbType


class PrintReporter:
    """A minimal telemetry reporter that prints events to the console."""

    def record_timing(self, scope: str, duration: float, **metadata: Any) -> None:
        """Prints timing-related events with indentation based on call depth."""
        depth = metadata.get("depth", 0)
        indent = "  " * depth
        print(
            f"[TIMING] {indent}{scope}: duration={duration:.4f}s (metadata: {metadata})",
        )

    def record_metric(self, scope: str, value: Any, **metadata: Any) -> None:
        """Prints a generic metric event."""
        print(f"[METRIC] {scope}: {value} (metadata: {metadata})")


async def main():
    async with WynnClient(reporters=[PrintReporter()]) as wynn:
        print("Fetching the guild level leaderboard...")
        outcome = await wynn.leaderboard_guild(GuildLbType.GUILD_LEVEL, limit=5)
        print("Outcome:", type(outcome).__name__)


if __name__ == "__main__":
    asyncio.run(main())
