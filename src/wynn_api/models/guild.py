"""Guild and territory records."""

from __future__ import annotations

from typing import Annotated

from pydantic import AliasChoices, Field

from wynn_api.decoding.fields import FROM_ARRAY, DefaultInt, DefaultStr, World

from .base import ApiModel


class GuildPlayerInfo(ApiModel):
    # Exactly one of username/uuid is set, depending on the requested identifier
    username: str | None = None
    uuid: str | None = None
    online: bool
    server: World | None = None
    contributed: int
    contribution_rank: int
    joined: str


class GuildMembers(ApiModel):
    total: int
    owner: dict[str, GuildPlayerInfo]
    chief: dict[str, GuildPlayerInfo]
    strategist: dict[str, GuildPlayerInfo]
    captain: dict[str, GuildPlayerInfo]
    recruiter: dict[str, GuildPlayerInfo]
    recruit: dict[str, GuildPlayerInfo]


class BannerLayer(ApiModel):
    colour: str
    pattern: str


class Banner(ApiModel):
    base: str
    tier: int
    structure: str
    layers: list[BannerLayer]


class SeasonRank(ApiModel):
    rating: int
    final_territories: int = Field(
        validation_alias=AliasChoices("finalTerritories", "finalTerretories")
    )


class Guild(ApiModel):
    uuid: str
    name: str
    prefix: DefaultStr
    level: int
    xp_percent: int
    territories: int
    wars: DefaultInt
    created: str
    members: GuildMembers
    online: int
    banner: Banner | None = None
    season_ranks: dict[str, SeasonRank]


class ShortGuildDescription(ApiModel):
    uuid: str
    prefix: DefaultStr


class GuildDescription(ApiModel):
    uuid: str
    name: str
    prefix: DefaultStr


class TerritoryLocation(ApiModel):
    start: Annotated[tuple[int, int], FROM_ARRAY]
    end: Annotated[tuple[int, int], FROM_ARRAY]


class Territory(ApiModel):
    guild: GuildDescription
    acquired: str
    location: TerritoryLocation
