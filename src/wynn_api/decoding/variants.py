"""Polymorphic variant resolution.

Two resolution modes are supported:

* ``TaggedResolver`` reads an explicit discriminator field and dispatches to
  exactly one decoder in a closed set. The variant payload either sits under
  a fixed content field next to the tag, or is flattened into the same object
  as the tag.
* ``ShapeResolver`` has no tag to go on. It walks an ordered list of
  ``ShapeRule`` predicates and builds the first variant whose shape matches.
  Rule order is significant: ambiguous inputs resolve deterministically.

``ApiEnum`` covers the enumerated string tokens both modes bottom out in.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping, Sequence
import dataclasses
import enum
from typing import Any, ClassVar, Self

from pydantic import (
    BaseModel,
    GetCoreSchemaHandler,
    SerializerFunctionWrapHandler,
    ValidationError,
)
from pydantic_core import core_schema


class VariantError(ValueError):
    """Raised when a value cannot be resolved to any known variant."""


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors(include_url=False):
        where = ".".join(str(p) for p in item["loc"]) or "<value>"
        parts.append(f"{where}: {item['msg']}")
    return "; ".join(parts)


def _build(build: Callable[[Any], Any], payload: Any, variant: str) -> Any:
    try:
        return build(payload)
    except ValidationError as e:
        raise VariantError(f"invalid {variant} variant: {_summarize(e)}") from e


# --- Enumerated tokens ---


class ApiEnum(enum.StrEnum):
    """A case-sensitive API token with optional legacy spellings.

    Subclasses may define ``__legacy_aliases__`` mapping an old token to the
    current one; old tokens decode to the current member and every member
    serializes to its current token.
    """

    @classmethod
    def _missing_(cls, value: object) -> Self | None:
        aliases = getattr(cls, "__legacy_aliases__", None)
        if isinstance(aliases, Mapping) and value in aliases:
            return cls(aliases[value])
        return None

    @classmethod
    def decode(cls, value: Any) -> Self:
        if not isinstance(value, str):
            raise VariantError(
                f"expected a {cls.__name__} token, got {type(value).__name__}"
            )
        try:
            return cls(value)
        except ValueError:
            raise VariantError(f"unknown {cls.__name__} token: {value!r}") from None

    @classmethod
    def is_token(cls, value: Any) -> bool:
        try:
            cls.decode(value)
        except VariantError:
            return False
        return True

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.decode,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda member: member.value, return_schema=core_schema.str_schema()
            ),
        )


# --- Explicit-tag mode ---


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class TaggedResolver:
    """Dispatch on an exact-match discriminator field.

    Attributes:
        tag: Name of the discriminator field.
        variants: Discriminator value to the record type for that variant.
        content: Field holding the variant payload (tag-plus-content). When
            ``None`` the whole object is the payload (tag-plus-flatten).
    """

    tag: str
    variants: Mapping[str, type[BaseModel]]
    content: str | None = None

    def resolve(self, value: Any) -> Any:
        if not isinstance(value, dict):
            raise VariantError(
                f"expected an object tagged by {self.tag!r}, got {type(value).__name__}"
            )
        if self.tag not in value:
            raise VariantError(f"missing discriminator field {self.tag!r}")
        tag = value[self.tag]
        variant = self.variants.get(tag) if isinstance(tag, str) else None
        if variant is None:
            raise VariantError(f"unrecognized {self.tag!r} tag: {tag!r}")
        if self.content is None:
            return _build(variant.model_validate, value, tag)
        if self.content not in value:
            raise VariantError(f"{tag!r} variant is missing {self.content!r}")
        return _build(variant.model_validate, value[self.content], tag)

    def tag_of(self, instance: Any) -> str:
        for tag, variant in self.variants.items():
            if type(instance) is variant:
                return tag
        raise VariantError(f"{type(instance).__name__} is not a {self.tag!r} variant")

    def serialize(
        self, instance: Any, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        """Re-attach the discriminator when writing a variant back out."""
        payload = handler(instance)
        if self.content is None:
            return {self.tag: self.tag_of(instance), **payload}
        return {self.tag: self.tag_of(instance), self.content: payload}

    def __call__(self, value: Any) -> Any:
        return self.resolve(value)


# --- Shape-inference mode ---


def is_number(value: Any) -> bool:
    """A JSON integer (booleans are not numbers on the wire)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def has_exact_keys(keys: Collection[str]) -> Callable[[Any], bool]:
    """Predicate: a JSON object whose key set is exactly ``keys``."""
    expected = frozenset(keys)

    def matches(value: Any) -> bool:
        return isinstance(value, dict) and value.keys() == expected

    return matches


@dataclasses.dataclass(frozen=True, slots=True)
class ShapeRule:
    """Build ``name`` from a value when ``matches(value)`` holds."""

    name: str
    matches: Callable[[Any], bool]
    build: Callable[[Any], Any]


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class ShapeResolver:
    """Try each rule in order; the first structural match wins."""

    name: str
    rules: Sequence[ShapeRule]

    UNRECOGNIZED: ClassVar[str] = "unrecognized variant shape"

    def resolve(self, value: Any) -> Any:
        for rule in self.rules:
            if rule.matches(value):
                return _build(rule.build, value, rule.name)
        raise VariantError(f"{self.UNRECOGNIZED} for {self.name}: {value!r:.80}")

    def __call__(self, value: Any) -> Any:
        return self.resolve(value)
