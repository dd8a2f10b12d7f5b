"""Shared base for API record schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from wynn_api.decoding.variants import ApiEnum


class ApiModel(BaseModel):
    """A record decoded from the API.

    Wire names are camelCase; fields the API adds later are ignored so new
    upstream fields do not break decoding. Scalars validate strictly: a
    number sent as a string, or a boolean sent as a number, is a mismatch
    unless the field declares an explicit decoder for it.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        strict=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize back to the API's JSON shape."""
        return self.model_dump(mode="json", by_alias=True)


def lift_fields(data: Any, into: str, keys: tuple[str, ...] | None = None) -> Any:
    """Copy flattened variant fields of a raw object under ``into``.

    With ``keys`` only those fields move (and are removed from the outer
    object); without, the whole object is copied so the variant can pick its
    own fields out of it.
    """
    if not isinstance(data, dict):
        return data
    if keys is None:
        return {**data, into: dict(data)}
    outer = {k: v for k, v in data.items() if k not in keys}
    outer[into] = {k: data[k] for k in keys if k in data}
    return outer


class Identifier(ApiEnum):
    """How players are identified in guild and online-player listings."""

    USERNAME = "username"
    UUID = "uuid"
