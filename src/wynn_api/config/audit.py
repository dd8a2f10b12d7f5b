"""Configuration source tracking."""

from typing import Any

from .types import ConfigOrigin, SourceMap


class SourceTracker:
    """Tracks the origin of configuration values during resolution."""

    def __init__(self) -> None:
        self._origins: dict[str, ConfigOrigin] = {}

    def set_origin(self, field: str, origin: ConfigOrigin) -> None:
        self._origins[field] = origin

    def set_multiple(self, fields: dict[str, Any], origin: ConfigOrigin) -> None:
        """Record the origin for multiple fields at once.

        Args:
            fields: Dictionary of field names to values
            origin: Where all these values came from
        """
        for field in fields:
            self._origins[field] = origin

    def get_source_map(self) -> SourceMap:
        return dict(self._origins)  # Return a copy for immutability


def generate_telemetry_summary(source_map: SourceMap) -> dict[str, int]:
    """Count how many fields came from each origin (e.g. ``{"env": 2}``)."""
    counts: dict[str, int] = {}
    for origin in source_map.values():
        counts[origin] = counts.get(origin, 0) + 1
    return counts
