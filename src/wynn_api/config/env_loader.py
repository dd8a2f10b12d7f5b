"""Environment variable configuration loading.

Reads the ``WYNN_*`` variables and coerces them through the settings schema.
"""

import os
from typing import Any

from pydantic import ValidationError

from wynn_api.exceptions import ConfigurationError

from .schema import WynnSettings

ENV_VARS = {
    "WYNN_BASE_URL": "base_url",
    "WYNN_TIMEOUT": "timeout",
    "WYNN_USER_AGENT": "user_agent",
    "WYNN_STRICT_DECODING": "strict_decoding",
}


class EnvironmentConfigLoader:
    """Loads configuration from WYNN_* environment variables."""

    def load_env_config(self) -> dict[str, Any]:
        """Load configuration from environment variables.

        Returns:
            Dictionary of configuration values found in environment.
            Only includes fields that are actually set (not defaults).

        Raises:
            ConfigurationError: If environment variables contain invalid values.
        """
        env_values = {
            field_name: os.environ[env_var]
            for env_var, field_name in ENV_VARS.items()
            if env_var in os.environ
        }
        if not env_values:
            return {}

        try:
            settings = WynnSettings(**env_values)
        except ValidationError as e:
            env_var_list = [
                f"{env_var}={os.environ[env_var]}"
                for env_var, field_name in ENV_VARS.items()
                if field_name in env_values
            ]
            raise ConfigurationError(
                f"Invalid environment variable values: {', '.join(env_var_list)}. "
                f"Error: {e}"
            ) from e

        return {field_name: getattr(settings, field_name) for field_name in env_values}

    def get_env_summary(self) -> dict[str, str]:
        """Current WYNN_* environment variables."""
        return {k: os.environ[k] for k in ENV_VARS if k in os.environ}
