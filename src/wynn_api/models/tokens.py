"""Enumerated tokens used across record families.

Tokens are case-sensitive. Several categories were renamed upstream over
time (pluralized or snake_case spellings); older records still carry them,
so those spellings are accepted as legacy aliases of the current token.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Self

from pydantic import GetCoreSchemaHandler, PlainSerializer, PlainValidator
from pydantic_core import core_schema

from wynn_api.decoding.variants import (
    ApiEnum,
    ShapeResolver,
    ShapeRule,
    VariantError,
    is_array,
    is_number,
    is_string,
)


class Profession(ApiEnum):
    ALCHEMISM = "alchemism"
    ARMOURING = "armouring"
    COOKING = "cooking"
    JEWELING = "jeweling"
    SCRIBING = "scribing"
    TAILORING = "tailoring"
    WEAPONSMITHING = "weaponsmithing"
    WOODWORKING = "woodworking"
    MINING = "mining"
    FISHING = "fishing"
    FARMING = "farming"
    WOODCUTTING = "woodcutting"


class AttackSpeed(ApiEnum):
    SUPER_SLOW = "super_slow"
    VERY_SLOW = "very_slow"
    SLOW = "slow"
    NORMAL = "normal"
    FAST = "fast"
    VERY_FAST = "very_fast"
    SUPER_FAST = "super_fast"


class ItemRarity(ApiEnum):
    COMMON = "common"
    UNIQUE = "unique"
    RARE = "rare"
    LEGENDARY = "legendary"
    FABLED = "fabled"
    SET = "set"
    MYTHIC = "mythic"


class DropRestriction(ApiEnum):
    NEVER = "never"
    NORMAL = "normal"
    DUNGEON = "dungeon"
    LOOTCHEST = "lootchest"


class Restrictions(ApiEnum):
    QUEST_ITEM = "quest item"
    SOULBOUND = "soulbound"
    UNTRADABLE = "untradable"


class ArmourMaterial(ApiEnum):
    LEATHER = "leather"
    GOLDEN = "golden"
    CHAIN = "chain"
    IRON = "iron"
    DIAMOND = "diamond"


class ToolType(ApiEnum):
    AXE = "axe"
    ROD = "rod"
    PICKAXE = "pickaxe"
    SCYTHE = "scythe"


class TomeType(ApiEnum):
    WEAPON_TOME = "weaponTome"
    ARMOUR_TOME = "armourTome"
    GUILD_TOME = "guildTome"
    EXPERTISE_TOME = "expertiseTome"
    MYSTICISM_TOME = "mysticismTome"
    MARATHON_TOME = "marathonTome"
    LOOTRUN_TOME = "lootrunTome"

    __legacy_aliases__ = {
        "weapon_tome": "weaponTome",
        "armour_tome": "armourTome",
        "guild_tome": "guildTome",
        "expertise_tome": "expertiseTome",
        "mysticism_tome": "mysticismTome",
        "marathon_tome": "marathonTome",
        "lootrun_tome": "lootrunTome",
    }


class AccessoryType(ApiEnum):
    BRACELET = "bracelet"
    NECKLACE = "necklace"
    RING = "ring"

    __legacy_aliases__ = {
        "bracelets": "bracelet",
        "necklaces": "necklace",
        "rings": "ring",
    }


class WeaponType(ApiEnum):
    DAGGER = "dagger"
    BOW = "bow"
    SPEAR = "spear"
    RELIK = "relik"
    WAND = "wand"

    __legacy_aliases__ = {
        "daggers": "dagger",
        "bows": "bow",
        "spears": "spear",
        "reliks": "relik",
        "wands": "wand",
    }


class ArmourType(ApiEnum):
    HELMET = "helmet"
    CHESTPLATE = "chestplate"
    LEGGINGS = "leggings"
    BOOTS = "boots"

    __legacy_aliases__ = {"helmets": "helmet", "chestplates": "chestplate"}


class OtherCraftedItemType(ApiEnum):
    POTION = "potion"
    SCROLL = "scroll"
    FOOD = "food"

    __legacy_aliases__ = {"potions": "potion", "scrolls": "scroll"}


class OtherItemType(ApiEnum):
    CHARM = "charm"
    INGREDIENT = "ingredient"
    MATERIAL = "material"


# --- Ingredient tiers: sent as a number or as a numeric string ---


def parse_tier(value: Any) -> IngredientTier:
    """Decode a tier sent as ``2`` or ``"2"``; only 0 to 3 are tiers."""
    if isinstance(value, bool):
        raise VariantError("not a tier: boolean")
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise VariantError(f"not a tier: {value!r}")
        value = int(value)
    if not isinstance(value, int):
        raise VariantError(f"not a tier: {type(value).__name__}")
    try:
        return IngredientTier(value)
    except ValueError:
        raise VariantError(f"not a tier: {value}") from None


class IngredientTier(enum.IntEnum):
    ZERO_STARS = 0
    ONE_STAR = 1
    TWO_STARS = 2
    THREE_STARS = 3

    @classmethod
    def decode(cls, value: Any) -> Self:
        return parse_tier(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            parse_tier,
            serialization=core_schema.plain_serializer_function_ser_schema(
                int, return_schema=core_schema.int_schema()
            ),
        )


# --- Token families resolved by shape ---


def _token_rule(enum_cls: type[ApiEnum], name: str | None = None) -> ShapeRule:
    return ShapeRule(name or enum_cls.__name__, enum_cls.is_token, enum_cls.decode)


def _token_value(member: enum.Enum) -> Any:
    return member.value


def _is_tier_shape(value: Any) -> bool:
    return is_number(value) or (is_string(value) and value.isdigit())


CRAFTED_ITEM_TYPE = ShapeResolver(
    "CraftedItemType",
    [
        _token_rule(WeaponType),
        _token_rule(ArmourType),
        _token_rule(AccessoryType),
        _token_rule(OtherCraftedItemType),
    ],
)

ITEM_TYPE = ShapeResolver(
    "ItemType",
    [
        _token_rule(ToolType),
        _token_rule(WeaponType),
        _token_rule(ArmourType),
        _token_rule(AccessoryType),
        _token_rule(TomeType),
        _token_rule(OtherItemType),
    ],
)

RARITY = ShapeResolver(
    "Rarity",
    [
        _token_rule(ItemRarity),
        ShapeRule("IngredientTier", _is_tier_shape, parse_tier),
    ],
)

CraftedItemType = Annotated[
    WeaponType | ArmourType | AccessoryType | OtherCraftedItemType,
    PlainValidator(CRAFTED_ITEM_TYPE),
    PlainSerializer(_token_value),
]

ItemType = Annotated[
    ToolType | WeaponType | ArmourType | AccessoryType | TomeType | OtherItemType,
    PlainValidator(ITEM_TYPE),
    PlainSerializer(_token_value),
]

Rarity = Annotated[
    ItemRarity | IngredientTier,
    PlainValidator(RARITY),
    PlainSerializer(_token_value),
]


# --- Drop sources ---


class DropType(ApiEnum):
    MERCHANT = "merchant"
    LOOTRUN = "lootrun"
    RAID = "raid"
    MINIBOSS = "miniboss"
    GUILD = "guild"
    ALTAR = "altar"
    QUEST = "quest"
    DUNGEON_MERCHANT = "dungeonMerchant"
    DUNGEON = "dungeon"
    CHALLENGE = "challenge"
    # Event merchants are sent as an array of event details instead of a token
    EVENT_MERCHANT = "eventMerchant"


def _is_drop_token(value: Any) -> bool:
    return DropType.is_token(value) and value != DropType.EVENT_MERCHANT


def _to_wire_drop_type(member: DropType) -> Any:
    if member is DropType.EVENT_MERCHANT:
        return []
    return member.value


DROP_TYPE = ShapeResolver(
    "DropType",
    [
        ShapeRule("token", _is_drop_token, DropType.decode),
        ShapeRule("event", is_array, lambda _: DropType.EVENT_MERCHANT),
    ],
)

DropKind = Annotated[
    DropType, PlainValidator(DROP_TYPE), PlainSerializer(_to_wire_drop_type)
]
