"""Global search results."""

from __future__ import annotations

from typing import Annotated

from wynn_api.decoding.fields import FROM_ARRAY, DefaultMap

from .base import ApiModel
from .guild import TerritoryLocation
from .item import Item


class GuildSearchInfo(ApiModel):
    name: str
    prefix: str


class DiscoveryLocation(ApiModel):
    start: Annotated[tuple[int, int, int], FROM_ARRAY]
    end: Annotated[tuple[int, int, int], FROM_ARRAY]


class SearchResult(ApiModel):
    """Matches per category; categories without matches are omitted upstream."""

    query: str
    players: DefaultMap[str]
    guilds: DefaultMap[GuildSearchInfo]
    guilds_prefix: DefaultMap[GuildSearchInfo]
    territories: DefaultMap[TerritoryLocation]
    discoveries: DefaultMap[DiscoveryLocation]
    items: DefaultMap[Item]
