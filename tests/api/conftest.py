"""
Configuration for live API tests.
"""

import time

import pytest

from wynn_api import WynnClient
from wynn_api.config import FrozenConfig


@pytest.fixture
def live_config() -> FrozenConfig:
    """Strict client configuration against the public API."""
    return FrozenConfig(
        base_url="https://api.wynncraft.com/v3",
        timeout=30.0,
        user_agent="wynn-api-tests",
        strict_decoding=True,
    )


@pytest.fixture
def api_rate_limiter():
    """Keep live tests well under the public rate limit."""
    time.sleep(1)
    yield


@pytest.fixture
def live_client(live_config, api_rate_limiter):
    return WynnClient(live_config)
