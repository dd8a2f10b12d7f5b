"""Record schemas for every endpoint family."""

from .ability import (
    AbilityInfo,
    AbilityMap,
    AbilityRequirement,
    AbilityTree,
    ArchetypeInfo,
    ArchetypeRequirements,
    Aspect,
    AspectTier,
)
from .base import ApiModel, Identifier
from .classes import Archetype, Class, ClassDifficulty, ClassInfo, ClassList
from .guild import (
    Banner,
    BannerLayer,
    Guild,
    GuildDescription,
    GuildMembers,
    GuildPlayerInfo,
    SeasonRank,
    ShortGuildDescription,
    Territory,
    TerritoryLocation,
)
from .item import (
    AccessoryInfo,
    ArmourInfo,
    CharmInfo,
    DropLocation,
    DropMeta,
    DynamicStat,
    IdentificationStats,
    IngredientInfo,
    Item,
    ItemController,
    ItemQuery,
    ItemResult,
    ItemTypeInfo,
    MaterialInfo,
    StaticStat,
    TomeInfo,
    ToolInfo,
    WeaponInfo,
)
from .leaderboard import (
    GuildLbType,
    LbGuild,
    LbPlayerGlobal,
    LbPlayerProfile,
    LbRaidGuild,
    LbRaidPlayer,
    Leaderboard,
    PlayerGlobalLbType,
    PlayerProfileLbType,
    RaidGuildLbType,
    RaidPlayerLbType,
)
from .map import FriendLocation, MarkerLocation, PlayerLocation, Quests
from .news import NewsArticle
from .player import (
    Ability,
    AbilityMeta,
    AbilityNode,
    AttributeIcon,
    Character,
    CharacterInfo,
    ConnectorNode,
    FullPlayerStats,
    Icon,
    LegacyIcon,
    OnlinePlayerList,
    PlayerStats,
    Professions,
    SkinIcon,
    SupportRank,
)
from .search import SearchResult
from .tokens import (
    AccessoryType,
    ArmourMaterial,
    ArmourType,
    AttackSpeed,
    CraftedItemType,
    DropType,
    IngredientTier,
    ItemRarity,
    ItemType,
    OtherCraftedItemType,
    OtherItemType,
    Profession,
    Rarity,
    TomeType,
    ToolType,
    WeaponType,
)

__all__ = [  # noqa: RUF022
    # Base
    "ApiModel",
    "Identifier",
    # Player
    "PlayerStats",
    "FullPlayerStats",
    "Character",
    "CharacterInfo",
    "OnlinePlayerList",
    "Professions",
    "SupportRank",
    "Ability",
    "AbilityMeta",
    "AbilityNode",
    "ConnectorNode",
    "Icon",
    "AttributeIcon",
    "SkinIcon",
    "LegacyIcon",
    # Classes
    "Class",
    "ClassList",
    "ClassInfo",
    "ClassDifficulty",
    "Archetype",
    # Guild
    "Guild",
    "GuildMembers",
    "GuildPlayerInfo",
    "GuildDescription",
    "ShortGuildDescription",
    "SeasonRank",
    "Banner",
    "BannerLayer",
    "Territory",
    "TerritoryLocation",
    # Leaderboards
    "Leaderboard",
    "LbGuild",
    "LbPlayerGlobal",
    "LbPlayerProfile",
    "LbRaidPlayer",
    "LbRaidGuild",
    "GuildLbType",
    "PlayerProfileLbType",
    "PlayerGlobalLbType",
    "RaidPlayerLbType",
    "RaidGuildLbType",
    # Abilities
    "AbilityMap",
    "AbilityTree",
    "AbilityInfo",
    "AbilityRequirement",
    "ArchetypeInfo",
    "ArchetypeRequirements",
    "Aspect",
    "AspectTier",
    # Items
    "Item",
    "ItemTypeInfo",
    "ToolInfo",
    "AccessoryInfo",
    "TomeInfo",
    "WeaponInfo",
    "IngredientInfo",
    "CharmInfo",
    "ArmourInfo",
    "MaterialInfo",
    "IdentificationStats",
    "StaticStat",
    "DynamicStat",
    "DropMeta",
    "DropLocation",
    "ItemResult",
    "ItemController",
    "ItemQuery",
    # Tokens
    "Profession",
    "AttackSpeed",
    "ItemRarity",
    "IngredientTier",
    "Rarity",
    "DropType",
    "CraftedItemType",
    "ItemType",
    "WeaponType",
    "ArmourType",
    "ArmourMaterial",
    "AccessoryType",
    "TomeType",
    "ToolType",
    "OtherCraftedItemType",
    "OtherItemType",
    # Map, news, search
    "MarkerLocation",
    "PlayerLocation",
    "FriendLocation",
    "Quests",
    "NewsArticle",
    "SearchResult",
]
