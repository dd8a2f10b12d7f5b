"""Core data types that flow from the transport to the caller.

A request produces exactly one ``Envelope`` (status plus body bytes); the
decoder turns it into exactly one ``DecodeOutcome``. All of these are
immutable and owned by the caller once returned.
"""

from __future__ import annotations

import dataclasses
import enum
from types import MappingProxyType
import typing

T = typing.TypeVar("T")

# Excerpt window used for diagnostics on decode failures
EXCERPT_WIDTH = 400


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


class StatusClass(enum.Enum):
    """How an HTTP status is interpreted by the decoder."""

    SUCCESS = "success"
    MULTIPLE_CHOICES = "multiple_choices"
    ERROR = "error"

    @classmethod
    def from_code(cls, status_code: int) -> StatusClass:
        """Classify a numeric HTTP status code."""
        if 300 <= status_code < 400:
            return cls.MULTIPLE_CHOICES
        if 200 <= status_code < 300:
            return cls.SUCCESS
        return cls.ERROR


@dataclasses.dataclass(frozen=True, slots=True)
class Envelope:
    """The (status, body) pair produced by one request before decoding."""

    status_code: int
    body: bytes
    url: str | None = None

    def __post_init__(self) -> None:
        _require(
            condition=isinstance(self.body, bytes),
            message="must be bytes",
            field_name="body",
            exc=TypeError,
        )

    @property
    def status_class(self) -> StatusClass:
        return StatusClass.from_code(self.status_code)


# --- Decode outcomes ---


@dataclasses.dataclass(frozen=True, slots=True)
class Value[T]:
    """A response that decoded into the requested target type."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Ambiguous:
    """A multiple-choices response: several candidate records, none chosen.

    ``choices`` maps each disambiguating key to the raw candidate record
    exactly as the API sent it.
    """

    choices: typing.Mapping[str, typing.Mapping[str, typing.Any]]

    def __post_init__(self) -> None:
        if not isinstance(self.choices, MappingProxyType):
            object.__setattr__(self, "choices", MappingProxyType(dict(self.choices)))


@dataclasses.dataclass(frozen=True, slots=True)
class DecodeFailure:
    """A payload that is malformed or does not match the target schema.

    Attributes:
        offset: Byte offset into the body closest to the failure.
        cause: Human-readable reason.
        excerpt: The body around ``offset`` (the whole body when short).
        path: Location inside the JSON document for schema mismatches.
        url: The request URL, when known.
    """

    offset: int
    cause: str
    excerpt: str
    path: tuple[str | int, ...] = ()
    url: str | None = None

    def describe(self) -> str:
        where = ".".join(str(p) for p in self.path) or "<root>"
        target = f" on request `{self.url}`" if self.url else ""
        return (
            f"response does not match schema{target} at {where} "
            f"(byte {self.offset}): {self.cause}\n{self.excerpt}"
        )


type DecodeOutcome[T] = Value[T] | Ambiguous | DecodeFailure


def excerpt_around(text: str, position: int, width: int = EXCERPT_WIDTH) -> str:
    """Return ``text`` when short, else ``width`` characters centered on ``position``."""
    if len(text) <= width:
        return text
    half = width // 2
    start = max(0, min(position - half, len(text) - width))
    return text[start : start + width]
