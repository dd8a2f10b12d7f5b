"""Leaderboard records.

Leaderboards arrive as objects keyed by rank (``{"1": ..., "2": ...}``) and
decode into rank-ordered lists.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import RootModel

from wynn_api.decoding.fields import DefaultInt, DefaultStr
from wynn_api.decoding.indexed import IndexedList
from wynn_api.decoding.variants import ApiEnum

from .base import ApiModel
from .classes import Class
from .guild import Banner
from .player import LegacyRankColour, SupportRank

T = TypeVar("T")


class Leaderboard(RootModel[IndexedList[T]], Generic[T]):
    """Entries in rank order."""

    def get_ranking(self, n: int) -> T | None:
        """The entry at 1-based rank ``n``, if the leaderboard is that long."""
        if 1 <= n <= len(self.root):
            return self.root[n - 1]
        return None

    def __len__(self) -> int:
        return len(self.root)

    def __iter__(self):
        return iter(self.root)


class LbGuild(ApiModel):
    uuid: str
    name: str
    prefix: DefaultStr
    level: int
    xp: int
    members: int
    territories: int
    wars: DefaultInt
    created: str
    banner: Banner | None = None


class PlayerMetaData(ApiModel):
    # Documented, but some leaderboards omit it
    xp: int | None = None
    playtime: float


class RaidMetaData(ApiModel):
    completions: int
    gambits: float


class LbPlayerGlobal(ApiModel):
    name: str
    uuid: str
    score: int
    previous_ranking: int
    metadata: PlayerMetaData
    rank: str
    rank_badge: str | None = None
    support_rank: SupportRank | None = None
    legacy_rank_colour: LegacyRankColour | None = None


class LbPlayerProfile(LbPlayerGlobal):
    character_uuid: str
    character_type: Class


class LbRaidPlayer(ApiModel):
    name: str
    uuid: str
    score: int
    previous_ranking: int
    metadata: RaidMetaData
    rank: str
    rank_badge: str | None = None
    support_rank: SupportRank | None = None
    legacy_rank_colour: LegacyRankColour | None = None


class LbRaidGuild(ApiModel):
    name: str
    uuid: str
    score: DefaultInt
    previous_ranking: int
    metadata: RaidMetaData
    banner: Banner | None = None


# --- Leaderboard names (path tokens) ---


class GuildLbType(ApiEnum):
    GUILD_LEVEL = "guildLevel"
    GUILD_TERRITORIES = "guildTerritories"
    GUILD_WARS = "guildWars"


class PlayerProfileLbType(ApiEnum):
    WOODCUTTING_LEVEL = "woodcuttingLevel"
    MINING_LEVEL = "miningLevel"
    FISHING_LEVEL = "fishingLevel"
    FARMING_LEVEL = "farmingLevel"
    ALCHEMISM_LEVEL = "alchemismLevel"
    ARMOURING_LEVEL = "armouringLevel"
    COOKING_LEVEL = "cookingLevel"
    JEWELING_LEVEL = "jewelingLevel"
    SCRIBING_LEVEL = "scribingLevel"
    TAILORING_LEVEL = "tailoringLevel"
    WEAPONSMITHING_LEVEL = "weaponsmithingLevel"
    WOODWORKING_LEVEL = "woodworkingLevel"
    PLAYER_CONTENT = "playerContent"
    COMBAT_SOLO_LEVEL = "combatSoloLevel"
    PROFESSIONS_SOLO_LEVEL = "professionsSoloLevel"
    TOTAL_SOLO_LEVEL = "totalSoloLevel"
    HARDCORE_LEGACY_LEVEL = "hardcoreLegacyLevel"
    IRONMAN_CONTENT = "ironmanContent"
    ULTIMATE_IRONMAN_CONTENT = "ultimateIronmanContent"
    HARDCORE_CONTENT = "hardcoreContent"
    CRAFTSMAN_CONTENT = "craftsmanContent"
    HUNTED_CONTENT = "huntedContent"
    HUIC_CONTENT = "huicContent"
    HUICH_CONTENT = "huichContent"
    HICH_CONTENT = "hichContent"
    HIC_CONTENT = "hicContent"


class PlayerGlobalLbType(ApiEnum):
    PROFESSIONS_GLOBAL_LEVEL = "professionsGlobalLevel"
    COMBAT_GLOBAL_LEVEL = "combatGlobalLevel"
    TOTAL_GLOBAL_LEVEL = "totalGlobalLevel"
    GLOBAL_PLAYER_CONTENT = "globalPlayerContent"
    NOG_COMPLETION = "nogCompletion"
    TCC_COMPLETION = "tccCompletion"
    NOL_COMPLETION = "nolCompletion"
    WARS_COMPLETION = "warsCompletion"
    TNA_COMPLETION = "tnaCompletion"


class RaidPlayerLbType(ApiEnum):
    NOG_SR_PLAYERS = "nogSrPlayers"
    NOL_SR_PLAYERS = "nolSrPlayers"
    TCC_SR_PLAYERS = "tccSrPlayers"
    TNA_SR_PLAYERS = "tnaSrPlayers"


class RaidGuildLbType(ApiEnum):
    NOG_SR_GUILDS = "nogSrGuilds"
    NOL_SR_GUILDS = "nolSrGuilds"
    TCC_SR_GUILDS = "tccSrGuilds"
    TNA_SR_GUILDS = "tnaSrGuilds"
