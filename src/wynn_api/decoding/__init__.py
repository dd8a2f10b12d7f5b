"""Response decoding and schema resolution."""

from .envelope import decode
from .fields import (
    DefaultBool,
    DefaultInt,
    DefaultList,
    DefaultMap,
    DefaultSet,
    DefaultStr,
    StringInt,
    World,
    fill_default,
    parse_from_string,
    parse_world,
)
from .indexed import IndexedList, index_map_to_list
from .variants import (
    ApiEnum,
    ShapeResolver,
    ShapeRule,
    TaggedResolver,
    VariantError,
    has_exact_keys,
    is_array,
    is_number,
    is_string,
)

__all__ = [  # noqa: RUF022
    # Envelope
    "decode",
    # Field decoders
    "fill_default",
    "parse_from_string",
    "parse_world",
    "DefaultStr",
    "DefaultInt",
    "DefaultBool",
    "DefaultList",
    "DefaultSet",
    "DefaultMap",
    "StringInt",
    "World",
    # Index maps
    "index_map_to_list",
    "IndexedList",
    # Variants
    "ApiEnum",
    "TaggedResolver",
    "ShapeResolver",
    "ShapeRule",
    "VariantError",
    "is_number",
    "is_string",
    "is_array",
    "has_exact_keys",
]
