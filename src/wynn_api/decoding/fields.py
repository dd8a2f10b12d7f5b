"""Field-level decoders for the API's irregular encodings.

The API omits many fields (or sends ``null``) instead of an empty/zero value,
and sends some numbers as quoted strings next to siblings sent as native
numbers. Each quirk is handled by an explicit decoder function; the
``Annotated`` aliases below only attach those functions to record fields.
"""

from __future__ import annotations

from collections.abc import Callable
import functools
import re
from typing import Annotated, Any, TypeVar

from pydantic import BeforeValidator, Field, PlainSerializer, PlainValidator, Strict

T = TypeVar("T")

# Records validate strictly; JSON arrays still have to become sets and tuples.
# Only the container is relaxed, its elements stay strict.
FROM_ARRAY = Strict(False)

ArraySet = Annotated[set[T], FROM_ARRAY]


# --- Default-filling ---


def fill_default(value: Any, factory: Callable[[], Any]) -> Any:
    """Substitute the type's default for an explicit ``null``.

    Absent fields get the same default through the field's default factory.
    Any other value is handed on unchanged to the target type's decoder, so a
    present but malformed value still fails.
    """
    if value is None:
        return factory()
    return value


def _null_to(factory: Callable[[], Any]) -> BeforeValidator:
    return BeforeValidator(functools.partial(fill_default, factory=factory))


DefaultStr = Annotated[str, _null_to(str), Field(default_factory=str)]
DefaultInt = Annotated[int, _null_to(int), Field(default_factory=int)]
DefaultBool = Annotated[bool, _null_to(bool), Field(default_factory=bool)]
DefaultList = Annotated[list[T], _null_to(list), Field(default_factory=list)]
DefaultSet = Annotated[set[T], FROM_ARRAY, _null_to(set), Field(default_factory=set)]
DefaultMap = Annotated[dict[str, T], _null_to(dict), Field(default_factory=dict)]


# --- String-coerced scalars ---


def parse_from_string[S](value: Any, target: Callable[[str], S]) -> S:
    """Parse a textually-encoded scalar with the target's own parse rule.

    Raises:
        ValueError: If ``value`` is not a string, or the text does not parse.
    """
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    try:
        return target(value)
    except ValueError as e:
        name = getattr(target, "__name__", repr(target))
        raise ValueError(f"cannot parse {value!r} as {name}") from e


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


def int64(text: str) -> int:
    """Parse ASCII decimal digits with an optional sign into a signed 64-bit integer.

    Unlike ``int()``, surrounding whitespace, ``_`` separators and non-ASCII
    digits are rejected.
    """
    if not _INTEGER_TEXT.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    number = int(text)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError(f"out of range for a 64-bit integer: {text}")
    return number


StringInt = Annotated[
    int,
    PlainValidator(functools.partial(parse_from_string, target=int64)),
    PlainSerializer(str, return_type=str),
]


# --- Game worlds ---

WORLD_PREFIX = "WC"


def parse_world(value: Any) -> int:
    """Decode a server name such as ``"WC12"`` into its world number."""
    if not isinstance(value, str):
        raise ValueError(f"expected a world name, got {type(value).__name__}")
    if not value.startswith(WORLD_PREFIX):
        raise ValueError(f"{value!r} is not a wynncraft world")
    number = parse_from_string(value[len(WORLD_PREFIX) :], int64)
    if not 0 <= number <= 255:
        raise ValueError(f"world number out of range: {number}")
    return number


def format_world(number: int) -> str:
    return f"{WORLD_PREFIX}{number}"


World = Annotated[
    int,
    PlainValidator(parse_world),
    PlainSerializer(format_world, return_type=str),
]
