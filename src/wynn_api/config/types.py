"""Core configuration data types.

Configuration is resolved once, then frozen and handed to the client.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, NamedTuple

# --- Source Tracking Types ---

ConfigOrigin = Literal["programmatic", "env", "file", "default"]
SourceMap = Mapping[str, ConfigOrigin]

FIELD_ORDER = ("base_url", "timeout", "user_agent", "strict_decoding")

# --- Core Configuration Data ---


class ResolvedConfig(NamedTuple):
    """Configuration after resolution from all sources, before freezing.

    Carries the merged values plus the origin of each one for auditing.
    """

    base_url: str
    timeout: float
    user_agent: str
    strict_decoding: bool

    # Audit metadata - tracks where each field value came from
    origin: SourceMap

    def to_frozen(self) -> "FrozenConfig":
        """Convert to the immutable configuration held by the client.

        Returns:
            FrozenConfig with the same field values, excluding audit metadata.
        """
        return FrozenConfig(
            base_url=self.base_url,
            timeout=self.timeout,
            user_agent=self.user_agent,
            strict_decoding=self.strict_decoding,
        )

    def with_overrides(self, **overrides: object) -> "ResolvedConfig":
        """Create a new ResolvedConfig with programmatic overrides applied.

        Args:
            **overrides: Field values to override. Unknown fields are ignored.

        Returns:
            New ResolvedConfig with overrides applied and origin updated.
        """
        new_values = self._asdict()
        new_origin = dict(self.origin)

        for field, value in overrides.items():
            if field in FIELD_ORDER:
                new_values[field] = value
                new_origin[field] = "programmatic"

        new_values["origin"] = new_origin
        return ResolvedConfig(**new_values)

    def audit(self) -> str:
        """Generate a report showing the origin of each field."""
        lines = []
        for field in FIELD_ORDER:
            if field not in self.origin:
                continue
            origin = self.origin[field]
            value = getattr(self, field)
            if origin == "env":
                value_display = f"env:WYNN_{field.upper()}={value}"
            else:
                value_display = f"{origin}:{value}"
            lines.append(f"{field}: {value_display}")
        return "\n".join(lines)


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable configuration held by a client for its whole lifetime."""

    base_url: str
    timeout: float
    user_agent: str
    strict_decoding: bool
