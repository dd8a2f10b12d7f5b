"""File-based configuration loading with profile support.

Project configuration lives in the ``[tool.wynn_api]`` table of the nearest
``pyproject.toml``; named profiles sit under ``[tool.wynn_api.profiles.<name>]``.
"""

from pathlib import Path
import tomllib
from typing import Any

from wynn_api.exceptions import ConfigurationError


class ConfigFileError(ConfigurationError):
    """Raised when configuration file loading fails."""

    def __init__(
        self, file_path: Path, message: str, cause: Exception | None = None
    ) -> None:
        """Initialize with file path, message, and optional cause.

        Args:
            file_path: The file that failed to load
            message: Human-readable error message
            cause: The underlying exception that caused the failure
        """
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(f"Config file error in {file_path}: {message}")


class FileConfigLoader:
    """Loads the ``[tool.wynn_api]`` table from a project's pyproject.toml."""

    def load_project_config(
        self, project_root: Path | None = None, profile: str | None = None
    ) -> dict[str, Any]:
        """Load configuration from pyproject.toml in the project root.

        Args:
            project_root: Directory to search for pyproject.toml. If None,
                         searches current directory and parents.
            profile: Optional profile name to load from
                    [tool.wynn_api.profiles.<name>], layered over the base table.

        Returns:
            Dictionary of configuration values from the file.
            Empty dict if file doesn't exist or has no wynn_api section.

        Raises:
            ConfigFileError: If the file cannot be parsed or the profile
                doesn't exist.
        """
        pyproject_path = self._find_pyproject_toml(project_root)
        if not pyproject_path:
            return {}

        section = self._read_section(pyproject_path)
        profiles = section.pop("profiles", {})
        if not profile:
            return section

        if profile not in profiles:
            raise ConfigFileError(
                pyproject_path,
                f"Profile '{profile}' not found. Available profiles: {list(profiles)}",
            )
        return {**section, **profiles[profile]}

    def list_available_profiles(self, project_root: Path | None = None) -> list[str]:
        pyproject_path = self._find_pyproject_toml(project_root)
        if not pyproject_path:
            return []
        return list(self._read_section(pyproject_path).get("profiles", {}))

    def _read_section(self, pyproject_path: Path) -> dict[str, Any]:
        try:
            with pyproject_path.open(mode="rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigFileError(
                pyproject_path, f"Failed to parse TOML: {e}", cause=e
            ) from e

        section = data.get("tool", {}).get("wynn_api", {})
        if not isinstance(section, dict):
            raise ConfigFileError(pyproject_path, "[tool.wynn_api] must be a table")
        return dict(section)

    def _find_pyproject_toml(self, start_dir: Path | None = None) -> Path | None:
        """Find pyproject.toml by searching up the directory tree.

        Args:
            start_dir: Directory to start searching from. If None, uses current directory.

        Returns:
            Path to pyproject.toml if found, None otherwise.
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()
        while current != current.parent:  # Stop at filesystem root
            pyproject_path = current / "pyproject.toml"
            if pyproject_path.exists():
                return pyproject_path
            current = current.parent

        return None
