"""Exceptions raised by the Wynncraft API binding"""  # noqa: D415

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from wynn_api.core.types import DecodeFailure


class WynnApiError(Exception):
    """Base exception for Wynncraft API binding errors"""  # noqa: D415


class TransportError(WynnApiError):
    """Raised when the API could not be reached or answered with an error status.

    Covers refused connections, TLS and timeout failures, and 4xx/5xx answers.
    The underlying httpx exception, when there is one, is chained as
    ``__cause__``.
    """

    def __init__(
        self, message: str, *, url: str | None = None, status_code: int | None = None
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class SchemaMismatchError(WynnApiError):
    """Raised in strict mode when a response does not match the target schema.

    A mismatch means the binding's record schemas are stale relative to the
    live API.
    """

    def __init__(self, failure: DecodeFailure) -> None:
        self.failure = failure
        super().__init__(failure.describe())


class ConfigurationError(WynnApiError):
    """Raised when configuration values are missing or invalid"""  # noqa: D415
