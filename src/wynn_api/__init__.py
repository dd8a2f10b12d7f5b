"""Typed async client for the Wynncraft v3 API."""

import importlib.metadata
import logging

from wynn_api.client import WynnClient
from wynn_api.config import (
    ConfigFileError,
    FrozenConfig,
    ResolvedConfig,
    WynnSettings,
    resolve_config,
)
from wynn_api.core.types import (
    Ambiguous,
    DecodeFailure,
    DecodeOutcome,
    Envelope,
    StatusClass,
    Value,
)
from wynn_api.decoding import decode
from wynn_api.exceptions import (
    ConfigurationError,
    SchemaMismatchError,
    TransportError,
    WynnApiError,
)
from wynn_api.models import Class, Identifier, ItemQuery
from wynn_api.telemetry import TelemetryContext, TelemetryReporter
from wynn_api.transport import HttpxTransport, Transport

# Version handling
try:
    __version__ = importlib.metadata.version("wynn-api")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Set up a null handler for the library's root logger.
# This prevents 'No handler found' errors if the consuming app has no logging configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [  # noqa: RUF022
    # Client
    "WynnClient",
    "Identifier",
    "Class",
    "ItemQuery",
    # Outcomes
    "decode",
    "DecodeOutcome",
    "Value",
    "Ambiguous",
    "DecodeFailure",
    "Envelope",
    "StatusClass",
    # Transport
    "Transport",
    "HttpxTransport",
    # Configuration
    "resolve_config",
    "ResolvedConfig",
    "FrozenConfig",
    "WynnSettings",
    # Exceptions
    "WynnApiError",
    "TransportError",
    "SchemaMismatchError",
    "ConfigurationError",
    "ConfigFileError",
    # Telemetry (extension points)
    "TelemetryContext",
    "TelemetryReporter",
]
