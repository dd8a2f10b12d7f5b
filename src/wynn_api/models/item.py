"""Item database records.

Every item is one JSON object whose ``type`` field says which category it
belongs to; the category's fields sit flattened next to the common ones.
Which fields are present varies a lot by category and even between items of
the same category:

=========== ==============================================================
tool        gatheringSpeed, toolType, rarity, level-only requirements
accessory   accessoryType, rarity, base/identifications, majorIds
tome        tomeType, rarity, raidReward, level-only requirements
weapon      weaponType, attackSpeed, averageDps, powderSlots, ...
ingredient  tier, consumableOnlyIDs, itemOnlyIDs, position modifiers
charm       rarity, raidReward, levelRange requirements
armour      armourType, armourMaterial, armourColor, powderSlots, ...
material    tier, craftable, level-only requirements
=========== ==============================================================
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    ConfigDict,
    Field,
    PlainValidator,
    RootModel,
    WrapSerializer,
    model_serializer,
    model_validator,
)

from wynn_api.decoding.fields import FROM_ARRAY, ArraySet, DefaultBool, DefaultInt
from wynn_api.decoding.variants import (
    ShapeResolver,
    ShapeRule,
    TaggedResolver,
    has_exact_keys,
    is_number,
)

from .base import ApiModel, lift_fields
from .classes import Class
from .player import Icon
from .tokens import (
    AccessoryType,
    ArmourMaterial,
    ArmourType,
    AttackSpeed,
    CraftedItemType,
    DropKind,
    DropRestriction,
    IngredientTier,
    ItemRarity,
    ItemType,
    Profession,
    Rarity,
    Restrictions,
    TomeType,
    ToolType,
    WeaponType,
)

# --- Identification values: a fixed number or a rolled range ---


class StaticStat(RootModel[int]):
    """An identification with a fixed value."""

    model_config = ConfigDict(strict=True)


class DynamicStat(ApiModel):
    """An identification rolled between ``min`` and ``max``."""

    min: int
    raw: int
    max: int


IDENTIFICATION_STATS = ShapeResolver(
    "IdentificationStats",
    [
        ShapeRule("static", is_number, StaticStat.model_validate),
        ShapeRule(
            "dynamic", has_exact_keys({"min", "raw", "max"}), DynamicStat.model_validate
        ),
    ],
)

IdentificationStats = Annotated[
    StaticStat | DynamicStat, PlainValidator(IDENTIFICATION_STATS)
]

# Identification and major-id names are kept as their wire strings
Identifications = Annotated[
    dict[str, IdentificationStats], Field(default_factory=dict)
]
MajorIds = Annotated[dict[str, str], Field(default_factory=dict)]


# --- Requirements ---


class ItemRequirements(ApiModel):
    level: int
    strength: int | None = None
    dexterity: int | None = None
    intelligence: int | None = None
    defence: int | None = None
    agility: int | None = None
    quest: str | None = None
    class_requirement: Class | None = None


class IngredientRequirements(ApiModel):
    level: int
    skills: ArraySet[str]


class LevelOnlyRequirements(ApiModel):
    level: int


class LevelRange(ApiModel):
    min: int
    max: int


class CharmRequirements(ApiModel):
    level: int
    level_range: LevelRange


# --- Drops ---


class DropMeta(ApiModel):
    name: str
    # 3 or 4 entries
    coordinates: list[int]
    drop_type: DropKind = Field(alias="type")
    event: str | None = None


class DropLocation(ApiModel):
    name: str
    location: Annotated[tuple[int, int, int, int], FROM_ARRAY] | None = None


# --- Ingredient effects ---


class ConsumableOnlyIds(ApiModel):
    duration: int = 0
    charges: int = 0


class ItemOnlyIds(ApiModel):
    durability_modifier: int = 0
    strength_requirement: int = 0
    dexterity_requirement: int = 0
    intelligence_requirement: int = 0
    defence_requirement: int = 0
    agility_requirement: int = 0


class IngredientPositionModifiers(ApiModel):
    left: int = 0
    right: int = 0
    above: int = 0
    under: int = 0
    touching: int = 0
    not_touching: int = 0


# --- Category-specific fields ---


class ToolInfo(ApiModel):
    requirements: LevelOnlyRequirements
    tool_type: ToolType
    gathering_speed: int
    rarity: ItemRarity


class AccessoryInfo(ApiModel):
    requirements: ItemRequirements
    rarity: ItemRarity
    accessory_type: AccessoryType
    base: Identifications
    identifications: Identifications
    restrictions: Restrictions | None = None
    drop_meta: DropMeta | None = None
    major_ids: MajorIds


class TomeInfo(ApiModel):
    requirements: LevelOnlyRequirements
    rarity: ItemRarity
    tome_type: TomeType
    drop_meta: DropMeta | None = None
    raid_reward: bool
    restrictions: Restrictions | None = None
    identifications: Identifications


class WeaponInfo(ApiModel):
    requirements: ItemRequirements
    rarity: ItemRarity
    weapon_type: WeaponType
    attack_speed: AttackSpeed
    base: Identifications
    identifications: Identifications
    major_ids: MajorIds
    drop_meta: DropMeta | None = None
    restrictions: Restrictions | None = None
    average_dps: int | None = None
    powder_slots: DefaultInt
    allow_craftsman: DefaultBool


class IngredientInfo(ApiModel):
    requirements: IngredientRequirements
    tier: IngredientTier
    consumable_only_ids: ConsumableOnlyIds = Field(alias="consumableOnlyIDs")
    item_only_ids: ItemOnlyIds = Field(alias="itemOnlyIDs")
    ingredient_position_modifiers: IngredientPositionModifiers
    dropped_by: list[DropLocation] = Field(default_factory=list)
    identifications: Identifications


class CharmInfo(ApiModel):
    requirements: CharmRequirements
    rarity: ItemRarity
    restrictions: Restrictions | None = None
    drop_meta: DropMeta | None = None
    raid_reward: bool
    base: Identifications
    identifications: Identifications


class ArmourInfo(ApiModel):
    requirements: ItemRequirements
    armour_type: ArmourType
    rarity: ItemRarity
    armour_material: ArmourMaterial | None = None
    armour_color: str | None = None
    drop_meta: DropMeta | None = None
    restrictions: Restrictions | None = None
    major_ids: MajorIds
    base: Identifications
    identifications: Identifications
    powder_slots: DefaultInt
    allow_craftsman: DefaultBool


class MaterialInfo(ApiModel):
    requirements: LevelOnlyRequirements
    tier: IngredientTier
    identified: bool
    craftable: ArraySet[CraftedItemType]


ITEM_TYPE_INFO = TaggedResolver(
    "type",
    {
        "tool": ToolInfo,
        "accessory": AccessoryInfo,
        "tome": TomeInfo,
        "weapon": WeaponInfo,
        "ingredient": IngredientInfo,
        "charm": CharmInfo,
        "armour": ArmourInfo,
        "material": MaterialInfo,
    },
)

ItemTypeInfo = Annotated[
    ToolInfo
    | AccessoryInfo
    | TomeInfo
    | WeaponInfo
    | IngredientInfo
    | CharmInfo
    | ArmourInfo
    | MaterialInfo,
    PlainValidator(ITEM_TYPE_INFO),
    WrapSerializer(ITEM_TYPE_INFO.serialize),
]


class Item(ApiModel):
    internal_name: str
    # Only armour may lack an icon
    icon: Icon | None = None
    identified: bool | None = None
    drop_restriction: DropRestriction | None = None
    lore: str | None = None
    info: ItemTypeInfo

    @model_validator(mode="before")
    @classmethod
    def _lift_category(cls, data: Any) -> Any:
        return lift_fields(data, "info")

    @model_serializer(mode="wrap")
    def _flatten_category(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        info = data.pop("info")
        return {**info, **{k: v for k, v in data.items() if v is not None}}

    @property
    def category(self) -> str:
        return ITEM_TYPE_INFO.tag_of(self.info)

    def required_level(self) -> int:
        return self.info.requirements.level


# --- Paged database results ---


class LinksInfo(ApiModel):
    previous: str | None = None
    next: str | None = None


class ItemController(ApiModel):
    count: int
    pages: int
    previous: int | None = None
    current: int
    next: int | None = None
    links: LinksInfo


class ItemResult(ApiModel):
    controller: ItemController
    results: dict[str, Item]


# --- Search query (request body) ---


def _default_level_range() -> tuple[int, int]:
    return (0, 110)


class ItemQuery(ApiModel):
    """Body of an item search request."""

    attack_speed: ArraySet[AttackSpeed] = Field(default_factory=set)
    identifications: ArraySet[str] = Field(default_factory=set)
    level_range: Annotated[tuple[int, int], FROM_ARRAY] = Field(
        default_factory=_default_level_range
    )
    major_ids: ArraySet[str] = Field(default_factory=set)
    professions: ArraySet[Profession] = Field(default_factory=set)
    query: str | None = None
    tier: ArraySet[Rarity] = Field(default_factory=set)
    item_type: ArraySet[ItemType] = Field(default_factory=set, alias="type")

    @classmethod
    def with_query(cls, query: str) -> ItemQuery:
        return cls(query=query)

    def set_level_range(self, min_level: int, max_level: int) -> None:
        self.level_range = (min_level, max_level)

    def add_tier(self, tier: Rarity) -> bool:
        """Add a rarity or ingredient tier; False if it was already present."""
        return _add(self.tier, tier)

    def add_item_type(self, item_type: ItemType) -> bool:
        return _add(self.item_type, item_type)


def _add(items: set[Any], item: Any) -> bool:
    if item in items:
        return False
    items.add(item)
    return True
