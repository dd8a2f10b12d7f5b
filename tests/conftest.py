"""
Global test configuration with support for different test types.
"""

from collections.abc import Callable
import json
import logging
import os
from pathlib import Path
from typing import Any

import httpx
import pytest

from wynn_api import WynnClient
from wynn_api.config import FrozenConfig
from wynn_api.transport import HttpxTransport

FIXTURES = Path(__file__).parent / "fixtures"


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_wynn_env(request, monkeypatch):
    """Ensure a clean WYNN_* environment for each test.

    Escape hatches:
      - @pytest.mark.allow_env_pollution: keep current env unchanged
      - tests marked with @pytest.mark.api bypass isolation so the real
        environment can be used when explicitly running API tests.
    """
    if request.node.get_closest_marker("allow_env_pollution") or (
        "api" in request.node.keywords
    ):
        return

    for key in list(os.environ.keys()):
        if key.startswith("WYNN_"):
            monkeypatch.delenv(key, raising=False)
    # Avoid DEBUG toggles affecting telemetry
    monkeypatch.delenv("DEBUG", raising=False)


# --- Logging Fixtures ---
@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Sets the log level for noisy external libraries to WARNING."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "integration: Component integration tests with mocked transports",
        "api: Real API tests (hit api.wynncraft.com)",
        "allow_env_pollution: Keep WYNN_* environment variables for this test",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):  # noqa: ARG001
    """Automatically skip API tests unless explicitly enabled."""
    if not os.getenv("ENABLE_API_TESTS"):
        skip_api = pytest.mark.skip(reason="API tests require ENABLE_API_TESTS=1")
        for item in items:
            if "api" in item.keywords:
                item.add_marker(skip_api)


# --- Core Fixtures ---


@pytest.fixture
def load_fixture() -> Callable[[str], Any]:
    """Load a recorded response body from tests/fixtures."""

    def _load(name: str) -> Any:
        return json.loads((FIXTURES / name).read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def frozen_config() -> FrozenConfig:
    return FrozenConfig(
        base_url="https://api.test/v3",
        timeout=5.0,
        user_agent="wynn-api-tests",
        strict_decoding=True,
    )


@pytest.fixture
def mock_routes():
    """A mutable routing table served by ``httpx.MockTransport``.

    Keys are ``(method, path)``; values are ``httpx.Response`` objects or
    callables taking the request. Every handled request is appended to
    ``routes.requests``.
    """

    class _Routes(dict):
        def __init__(self) -> None:
            super().__init__()
            self.requests: list[httpx.Request] = []

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            route = self.get((request.method, request.url.path))
            if route is None:
                return httpx.Response(404, json={"error": "not found"})
            if callable(route):
                return route(request)
            return route

    return _Routes()


@pytest.fixture
def wynn(frozen_config, mock_routes):
    """A WynnClient whose transport is served by ``mock_routes``.

    The mock transport holds no connections, so nothing needs closing.
    """
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(mock_routes.handler),
        follow_redirects=False,
    )
    client = WynnClient(
        frozen_config,
        transport=HttpxTransport(timeout=5.0, user_agent="tests", client=http),
    )
    return client
