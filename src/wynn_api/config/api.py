"""Public API for the configuration system."""

from pathlib import Path
from typing import Any

from .resolver import ConfigResolver
from .types import ResolvedConfig

# Global resolver instance for efficient reuse
_resolver = ConfigResolver()


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    profile: str | None = None,
    project_root: Path | None = None,
) -> ResolvedConfig:
    """Resolve configuration from all sources with proper precedence.

    Precedence: Programmatic > Environment > Project file > Defaults

    Args:
        programmatic: Dictionary of programmatic overrides (highest precedence).
                     Only known configuration fields are used.
        profile: Profile name to load from ``[tool.wynn_api.profiles]``. If
                None, uses the WYNN_PROFILE environment variable if set.
        project_root: Directory to search for pyproject.toml. If None,
                     searches current directory and parents.

    Returns:
        ResolvedConfig with merged values and source tracking for audit.

    Raises:
        ConfigurationError: If configuration validation fails.
        ConfigFileError: If pyproject.toml exists but is malformed.

    Example:
        config = resolve_config({"timeout": 5})
        client = WynnClient(config.to_frozen())
    """
    return _resolver.resolve(
        programmatic=programmatic, profile=profile, project_root=project_root
    )


def list_available_profiles(project_root: Path | None = None) -> list[str]:
    """Profile names defined under ``[tool.wynn_api.profiles]``."""
    return _resolver.file_loader.list_available_profiles(project_root)


def check_environment() -> dict[str, str]:
    """Currently set WYNN_* environment variables."""
    return _resolver.env_loader.get_env_summary()
