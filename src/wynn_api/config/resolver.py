"""Configuration resolution with precedence handling.

Sources are merged in this order, later ones winning:
Defaults < Project file < Environment < Programmatic
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from wynn_api.exceptions import ConfigurationError

from .audit import SourceTracker
from .env_loader import EnvironmentConfigLoader
from .file_loader import FileConfigLoader
from .schema import WynnSettings
from .types import ConfigOrigin, ResolvedConfig

log = logging.getLogger(__name__)


class ConfigResolver:
    """Resolves configuration from multiple sources with proper precedence."""

    def __init__(self) -> None:
        self.file_loader = FileConfigLoader()
        self.env_loader = EnvironmentConfigLoader()

    def resolve(
        self,
        programmatic: dict[str, Any] | None = None,
        *,
        profile: str | None = None,
        project_root: Path | None = None,
    ) -> ResolvedConfig:
        """Resolve configuration from all sources with proper precedence.

        Args:
            programmatic: Programmatic overrides (highest precedence)
            profile: Profile name to load from pyproject.toml
            project_root: Directory to search for pyproject.toml

        Returns:
            ResolvedConfig with merged values and source tracking.

        Raises:
            ConfigurationError: If validation fails.
            ConfigFileError: If the configuration file is malformed.
        """
        source_tracker = SourceTracker()
        merged_config: dict[str, Any] = {}

        if profile is None:
            profile = os.getenv("WYNN_PROFILE")

        def apply(values: dict[str, Any], origin: ConfigOrigin) -> None:
            known = {k: v for k, v in values.items() if k in merged_config}
            merged_config.update(known)
            source_tracker.set_multiple(known, origin)

        # Step 1: Start with schema defaults
        defaults = WynnSettings.model_construct().to_dict()
        merged_config.update(defaults)
        source_tracker.set_multiple(defaults, "default")

        # Step 2: Project file
        apply(
            self.file_loader.load_project_config(
                project_root=project_root, profile=profile
            ),
            "file",
        )

        # Step 3: Environment variables
        apply(self.env_loader.load_env_config(), "env")

        # Step 4: Programmatic overrides
        if programmatic:
            apply(programmatic, "programmatic")

        # Step 5: Validate the merged result
        try:
            final_config = WynnSettings(**merged_config).to_dict()
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        resolved = ResolvedConfig(**final_config, origin=source_tracker.get_source_map())
        log.debug("Resolved configuration:\n%s", resolved.audit())
        return resolved
