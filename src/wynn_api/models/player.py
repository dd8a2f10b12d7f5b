"""Player, character and ability-node records."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    AliasChoices,
    Field,
    PlainValidator,
    RootModel,
    WrapSerializer,
    model_serializer,
    model_validator,
)

from wynn_api.decoding.fields import ArraySet, DefaultBool, DefaultStr, World
from wynn_api.decoding.variants import ApiEnum, TaggedResolver

from .base import ApiModel, lift_fields
from .classes import Class
from .tokens import Profession


class SupportRank(ApiEnum):
    VIP = "vip"
    VIP_PLUS = "vipplus"
    HERO = "hero"
    CHAMPION = "champion"


class LegacyRankColour(ApiModel):
    main: str
    sub: str


class GuildInfo(ApiModel):
    name: str
    prefix: DefaultStr
    rank: str
    rank_stars: str


class DungeonInfo(ApiModel):
    total: int
    list: dict[str, int]


class RaidInfo(ApiModel):
    total: int
    list: dict[str, int]


class Pvp(ApiModel):
    kills: int
    deaths: int


class GlobalData(ApiModel):
    """Totals across all of a player's characters."""

    wars: int
    total_level: int
    killed_mobs: int
    chests_found: int
    dungeons: DungeonInfo = Field(
        default_factory=lambda: DungeonInfo(total=0, list={})
    )
    raids: RaidInfo = Field(default_factory=lambda: RaidInfo(total=0, list={}))
    completed_quests: int
    pvp: Pvp


class PlayerStats(ApiModel):
    username: str
    online: bool
    server: World | None = None
    active_character: str | None = None
    uuid: str
    rank: str
    rank_badge: str | None = None
    legacy_rank_colour: LegacyRankColour | None = None
    shortened_rank: str | None = None
    support_rank: SupportRank | None = None
    veteran: DefaultBool
    first_join: str
    last_join: str
    # hours
    playtime: float
    guild: GuildInfo | None = None
    global_data: GlobalData
    forum_link: int | None = None
    ranking: dict[str, int]
    previous_ranking: dict[str, int]
    public_profile: bool


class SkillPoints(ApiModel):
    strength: int
    dexterity: int
    intelligence: int
    # Character records spell it `defense`; everywhere else it is `defence`
    defence: int = Field(validation_alias=AliasChoices("defence", "defense"))
    agility: int


class ProfessionInfo(ApiModel):
    level: int
    xp_percent: int


class Professions(ApiModel):
    fishing: ProfessionInfo
    woodcutting: ProfessionInfo
    mining: ProfessionInfo
    farming: ProfessionInfo
    scribing: ProfessionInfo
    jeweling: ProfessionInfo
    alchemism: ProfessionInfo
    cooking: ProfessionInfo
    weaponsmithing: ProfessionInfo
    tailoring: ProfessionInfo
    woodworking: ProfessionInfo
    armouring: ProfessionInfo

    def get(self, profession: Profession) -> ProfessionInfo:
        return getattr(self, profession.value)


class Character(ApiModel):
    class_type: Class = Field(alias="type")
    nickname: str | None = None
    level: int
    xp: int
    # 0-100 even past the level cap
    xp_percent: int
    total_level: int
    wars: int
    playtime: float
    mobs_killed: int
    chests_found: int
    blocks_walked: int
    items_identified: int
    logins: int
    deaths: int
    discoveries: int
    pre_economy: bool
    pvp: Pvp
    gamemode: ArraySet[str]
    skill_points: SkillPoints
    professions: Professions
    dungeons: DungeonInfo
    raids: RaidInfo
    quests: ArraySet[str]


class FullPlayerStats(PlayerStats):
    characters: dict[str, Character]


class Meta(ApiModel):
    died: bool | None = None


class CharacterInfo(ApiModel):
    class_type: Class = Field(alias="type")
    nickname: str | None = None
    level: int
    xp: int
    xp_percent: int
    total_level: int
    gamemode: ArraySet[str]
    meta: Meta


class OnlinePlayerList(ApiModel):
    total: int
    players: dict[str, World]


# --- Icons: tagged by `format`, payload under `value` ---


class AttributeIcon(ApiModel):
    id: str
    name: str
    custom_model_data: str


class SkinIcon(RootModel[str]):
    pass


class LegacyIcon(RootModel[str]):
    pass


ICON = TaggedResolver(
    "format",
    {
        "attribute": AttributeIcon,
        "skin": SkinIcon,
        "legacy": LegacyIcon,
    },
    content="value",
)

Icon = Annotated[
    AttributeIcon | SkinIcon | LegacyIcon,
    PlainValidator(ICON),
    WrapSerializer(ICON.serialize),
]


# --- Ability tree nodes: tagged by `type`, payload under `meta` ---


class AbilityNode(ApiModel):
    icon: Icon
    page: int
    id: str


class ConnectorNode(ApiModel):
    icon: str
    page: int


ABILITY_META = TaggedResolver(
    "type",
    {"ability": AbilityNode, "connector": ConnectorNode},
    content="meta",
)

AbilityMeta = Annotated[
    AbilityNode | ConnectorNode,
    PlainValidator(ABILITY_META),
    WrapSerializer(ABILITY_META.serialize),
]


class AbilityNodeCoordinate(ApiModel):
    x: int
    y: int


class Ability(ApiModel):
    """A node on a character's ability map.

    The wire object carries the node's ``type`` tag and ``meta`` payload next
    to its own fields; both are lifted into ``meta`` here.
    """

    coordinates: AbilityNodeCoordinate
    meta: AbilityMeta
    family: ArraySet[str]

    @model_validator(mode="before")
    @classmethod
    def _lift_meta(cls, data: Any) -> Any:
        return lift_fields(data, "meta", keys=("type", "meta"))

    @model_serializer(mode="wrap")
    def _flatten_meta(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        data.update(data.pop("meta"))
        return data
