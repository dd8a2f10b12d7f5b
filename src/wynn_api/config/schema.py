"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces client
configuration values from the environment, ``pyproject.toml`` and
programmatic overrides into the correct types with proper defaults.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.wynncraft.com/v3"
DEFAULT_USER_AGENT = "wynn-api-python"


class WynnSettings(BaseSettings):
    """Pydantic settings schema for the API client.

    Integrates with environment variables using the WYNN_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="WYNN_",
        env_file=None,
        case_sensitive=False,
        extra="ignore",  # Unknown keys in files and env are ignored
    )

    # --- Core Configuration Fields ---

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Root URL of the v3 API",
        min_length=1,
    )

    timeout: float = Field(
        default=30.0,
        description="Per-request timeout in seconds",
        gt=0,
    )

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request",
        min_length=1,
    )

    strict_decoding: bool = Field(
        default=True,
        description="Raise on responses that do not match their schema",
    )

    # --- Validation Rules ---

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are joined with a leading slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base_url: {v}. Must be an http(s) URL")
        return v.rstrip("/")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary suitable for SourceMap annotation."""
        return {
            "base_url": self.base_url,
            "timeout": self.timeout,
            "user_agent": self.user_agent,
            "strict_decoding": self.strict_decoding,
        }
