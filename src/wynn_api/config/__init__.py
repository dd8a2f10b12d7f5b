"""Client configuration.

Configuration is resolved once from programmatic overrides, ``WYNN_*``
environment variables, ``[tool.wynn_api]`` in pyproject.toml and defaults,
then frozen and handed to the client.
"""

from .api import check_environment, list_available_profiles, resolve_config
from .audit import SourceTracker, generate_telemetry_summary
from .file_loader import ConfigFileError, FileConfigLoader
from .resolver import ConfigResolver
from .schema import WynnSettings
from .types import ConfigOrigin, FrozenConfig, ResolvedConfig, SourceMap

__all__ = [  # noqa: RUF022
    # Resolution
    "resolve_config",
    "list_available_profiles",
    "check_environment",
    "ConfigResolver",
    # Types
    "ResolvedConfig",
    "FrozenConfig",
    "ConfigOrigin",
    "SourceMap",
    "WynnSettings",
    # Loading and audit
    "FileConfigLoader",
    "ConfigFileError",
    "SourceTracker",
    "generate_telemetry_summary",
]
