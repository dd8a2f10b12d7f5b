"""Ordered map-to-sequence decoding.

The API serializes what are semantically arrays (leaderboard ranks, ability
pages, aspect tiers) as objects keyed by stringified indices, e.g.
``{"1": {...}, "2": {...}}``. Decoding recovers the array and rejects
payloads whose indices are malformed, repeated or have gaps, since those
would otherwise silently reorder or drop entries.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Any, TypeVar

from pydantic import BeforeValidator, SerializerFunctionWrapHandler, WrapSerializer

T = TypeVar("T")

# Ranks and pages are numbered from 1 on the wire.
SERIALIZED_BASE_INDEX = 1


class JsonObject(dict):
    """A decoded JSON object that remembers keys repeated in the source text.

    Plain ``dict`` keeps only the last value for a repeated key; index maps
    must instead reject the payload, so the JSON parser hook records them.
    """

    __slots__ = ("duplicate_keys",)

    def __init__(self, pairs: Iterable[tuple[str, Any]] = ()) -> None:
        super().__init__()
        duplicates = set()
        for key, value in pairs:
            if key in self:
                duplicates.add(key)
            self[key] = value
        self.duplicate_keys = frozenset(duplicates)


def object_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    """``json.loads`` object hook: plain dicts unless a key is repeated."""
    keys = {key for key, _ in pairs}
    if len(keys) == len(pairs):
        return dict(pairs)
    return JsonObject(pairs)


def _parse_index(key: Any) -> int:
    if not isinstance(key, str) or not key.isascii() or not key.isdigit():
        raise ValueError(f"invalid index key: {key!r}")
    return int(key)


def index_map_to_list(raw: Any) -> list[Any]:
    """Convert an object keyed by contiguous integer indices into a list.

    The base index is arbitrary; values come out in ascending key order.

    Raises:
        ValueError: On a non-object input, a key that is not a non-negative
            integer, a repeated index, or a gap in the index range.
    """
    if not isinstance(raw, dict):
        raise ValueError(
            f"expected an object keyed by indices, got {type(raw).__name__}"
        )
    repeated = getattr(raw, "duplicate_keys", frozenset())
    if repeated:
        raise ValueError(f"duplicate index: {sorted(repeated)[0]!r}")

    ordered: dict[int, Any] = {}
    for key, value in raw.items():
        index = _parse_index(key)
        if index in ordered:
            raise ValueError(f"duplicate index: {index}")
        ordered[index] = value

    if ordered:
        low, high = min(ordered), max(ordered)
        if high - low + 1 != len(ordered):
            missing = next(i for i in range(low, high + 1) if i not in ordered)
            raise ValueError(
                f"incomplete index range: {low}..{high} is missing {missing}"
            )

    return [ordered[index] for index in sorted(ordered)]


def list_to_index_map(
    value: list[Any], handler: SerializerFunctionWrapHandler
) -> dict[str, Any]:
    items = handler(value)
    return {
        str(index): item
        for index, item in enumerate(items, start=SERIALIZED_BASE_INDEX)
    }


# Repeated raw keys are only seen when the JSON was parsed with the
# ``object_pairs`` hook, as ``decode()`` does. Validating raw JSON directly
# (``model_validate_json``) keeps the last value for a repeated key.
IndexedList = Annotated[
    list[T],
    BeforeValidator(index_map_to_list),
    WrapSerializer(list_to_index_map),
]
