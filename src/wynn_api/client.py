"""Async client for the Wynncraft v3 API.

Every endpoint method performs exactly one request and one decode, and
returns the ``DecodeOutcome``: ``Value`` with the typed record, ``Ambiguous``
when the API answers with several candidates (e.g. a name shared by more than
one player), or, with lenient decoding, ``DecodeFailure``.

Example:
    async with WynnClient() as wynn:
        outcome = await wynn.player_main_stats("Salted")
        match outcome:
            case Value(stats):
                print(stats.global_data.total_level)
            case Ambiguous(choices):
                print("did you mean:", list(choices))
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from types import TracebackType
from typing import Any, Self
from urllib.parse import quote

from wynn_api.config import FrozenConfig, resolve_config
from wynn_api.core.types import (
    Ambiguous,
    DecodeFailure,
    DecodeOutcome,
    StatusClass,
    Value,
)
from wynn_api.decoding.envelope import decode
from wynn_api.models import (
    Ability,
    AbilityMap,
    AbilityTree,
    Character,
    CharacterInfo,
    Class,
    ClassInfo,
    ClassList,
    FullPlayerStats,
    Guild,
    GuildLbType,
    Identifier,
    Item,
    ItemQuery,
    ItemResult,
    LbGuild,
    LbPlayerGlobal,
    LbPlayerProfile,
    LbRaidGuild,
    LbRaidPlayer,
    Leaderboard,
    MarkerLocation,
    NewsArticle,
    OnlinePlayerList,
    PlayerGlobalLbType,
    PlayerLocation,
    PlayerProfileLbType,
    PlayerStats,
    Quests,
    RaidGuildLbType,
    RaidPlayerLbType,
    SearchResult,
    ShortGuildDescription,
    Territory,
)
from wynn_api.telemetry import TelemetryContext, TelemetryReporter
from wynn_api.transport import HttpxTransport, Transport

log = logging.getLogger(__name__)

# Appended to a path to ask for the unabridged variant of a record
FULL_RESULT = "?fullResult"


def _segment(value: str) -> str:
    return quote(value, safe="")


class WynnClient:
    """Typed access to the v3 endpoints over one shared transport.

    Args:
        config: Frozen client configuration. Resolved from the environment
            and pyproject.toml when omitted.
        transport: Transport to send requests through. An ``HttpxTransport``
            built from ``config`` is used when omitted.
        reporters: Telemetry reporters; only used when telemetry is enabled.
    """

    def __init__(
        self,
        config: FrozenConfig | None = None,
        *,
        transport: Transport | None = None,
        reporters: Iterable[TelemetryReporter] = (),
    ) -> None:
        self.config = config or resolve_config().to_frozen()
        self._transport = transport or HttpxTransport(
            timeout=self.config.timeout, user_agent=self.config.user_agent
        )
        self._tele = TelemetryContext(*reporters)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def request[T](
        self,
        target: type[T] | Any,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        method: str = "GET",
    ) -> DecodeOutcome[T]:
        """Send one request and decode its body as ``target``.

        Args:
            target: Type the success body decodes into.
            path: Endpoint path below the configured base URL.
            params: Query parameters.
            json: JSON request body.
            method: HTTP method.

        Raises:
            TransportError: If the API is unreachable or answers 4xx/5xx.
            SchemaMismatchError: With strict decoding, if the body does not
                match ``target``.
        """
        url = f"{self.config.base_url}{path}"
        with self._tele("wynn_api.request", method=method, path=path):
            envelope = await self._transport.send(
                method, url, params=params, json=json
            )
        status_class = StatusClass.from_code(envelope.status_code)
        with self._tele("wynn_api.decode", status=envelope.status_code):
            try:
                outcome = decode(
                    target,
                    status_class,
                    envelope.body,
                    strict=self.config.strict_decoding,
                    url=envelope.url or url,
                )
            except Exception:
                self._tele.count("wynn_api.outcome.failure")
                raise
        self._tele.count(f"wynn_api.outcome.{_outcome_kind(outcome)}")
        return outcome

    # --- Player ---

    async def player_main_stats(self, name_or_uuid: str) -> DecodeOutcome[PlayerStats]:
        return await self.request(PlayerStats, f"/player/{_segment(name_or_uuid)}")

    async def player_full_stats(
        self, name_or_uuid: str
    ) -> DecodeOutcome[FullPlayerStats]:
        return await self.request(
            FullPlayerStats, f"/player/{_segment(name_or_uuid)}{FULL_RESULT}"
        )

    async def player_character_list(
        self, name_or_uuid: str
    ) -> DecodeOutcome[dict[str, CharacterInfo]]:
        return await self.request(
            dict[str, CharacterInfo], f"/player/{_segment(name_or_uuid)}/characters"
        )

    async def player_character_data(
        self, name_or_uuid: str, character_uuid: str
    ) -> DecodeOutcome[Character]:
        return await self.request(
            Character,
            f"/player/{_segment(name_or_uuid)}/characters/{_segment(character_uuid)}",
        )

    async def player_character_abilities(
        self, name_or_uuid: str, character_uuid: str
    ) -> DecodeOutcome[list[Ability]]:
        return await self.request(
            list[Ability],
            f"/player/{_segment(name_or_uuid)}/characters/"
            f"{_segment(character_uuid)}/abilities",
        )

    async def online_player_list(
        self, identifier: Identifier, servers: Iterable[int] = ()
    ) -> DecodeOutcome[OnlinePlayerList]:
        """Players online, optionally restricted to the given world numbers."""
        params = {"identifier": identifier.value}
        worlds = ",".join(str(world) for world in servers)
        if worlds:
            params["server"] = worlds
        return await self.request(OnlinePlayerList, "/player", params=params)

    # --- Guild ---

    async def guild_by_name(
        self, name: str, identifier: Identifier = Identifier.USERNAME
    ) -> DecodeOutcome[Guild]:
        return await self.request(
            Guild, f"/guild/{_segment(name)}", params={"identifier": identifier.value}
        )

    async def guild_by_prefix(
        self, prefix: str, identifier: Identifier = Identifier.USERNAME
    ) -> DecodeOutcome[Guild]:
        return await self.request(
            Guild,
            f"/guild/prefix/{_segment(prefix)}",
            params={"identifier": identifier.value},
        )

    async def guild_list(self) -> DecodeOutcome[dict[str, ShortGuildDescription]]:
        return await self.request(dict[str, ShortGuildDescription], "/guild/list/guild")

    async def guild_territories(self) -> DecodeOutcome[dict[str, Territory]]:
        return await self.request(dict[str, Territory], "/guild/list/territory")

    # --- Leaderboards ---

    async def _leaderboard(
        self, entry: type[Any], name: str, limit: int
    ) -> DecodeOutcome[Any]:
        return await self.request(
            Leaderboard[entry],
            f"/leaderboards/{name}",
            params={"resultLimit": limit},
        )

    async def leaderboard_guild(
        self, board: GuildLbType, limit: int = 100
    ) -> DecodeOutcome[Leaderboard[LbGuild]]:
        return await self._leaderboard(LbGuild, board.value, limit)

    async def leaderboard_player_profile(
        self, board: PlayerProfileLbType, limit: int = 100
    ) -> DecodeOutcome[Leaderboard[LbPlayerProfile]]:
        return await self._leaderboard(LbPlayerProfile, board.value, limit)

    async def leaderboard_player_global(
        self, board: PlayerGlobalLbType, limit: int = 100
    ) -> DecodeOutcome[Leaderboard[LbPlayerGlobal]]:
        return await self._leaderboard(LbPlayerGlobal, board.value, limit)

    async def leaderboard_raid_player(
        self, board: RaidPlayerLbType, limit: int = 100
    ) -> DecodeOutcome[Leaderboard[LbRaidPlayer]]:
        return await self._leaderboard(LbRaidPlayer, board.value, limit)

    async def leaderboard_raid_guild(
        self, board: RaidGuildLbType, limit: int = 100
    ) -> DecodeOutcome[Leaderboard[LbRaidGuild]]:
        return await self._leaderboard(LbRaidGuild, board.value, limit)

    # --- Abilities and classes ---

    async def ability_map(self, class_type: Class) -> DecodeOutcome[AbilityMap]:
        return await self.request(
            AbilityMap, f"/ability/map/{class_type.main_class().value}"
        )

    async def ability_tree(self, class_type: Class) -> DecodeOutcome[AbilityTree]:
        return await self.request(
            AbilityTree, f"/ability/tree/{class_type.main_class().value}"
        )

    async def class_list(self) -> DecodeOutcome[ClassList]:
        return await self.request(ClassList, "/classes")

    async def class_info(self, class_type: Class) -> DecodeOutcome[ClassInfo]:
        return await self.request(
            ClassInfo, f"/classes/{class_type.main_class().value}"
        )

    # --- Items ---

    async def item_database(self, page: int = 1) -> DecodeOutcome[ItemResult]:
        return await self.request(ItemResult, "/item/database", params={"page": page})

    async def item_database_full(self) -> DecodeOutcome[dict[str, Item]]:
        return await self.request(dict[str, Item], f"/item/database{FULL_RESULT}")

    async def search_item(self, query: ItemQuery) -> DecodeOutcome[ItemResult]:
        return await self.request(
            ItemResult, "/item/search", json=query.to_wire(), method="POST"
        )

    async def search_item_full(self, query: ItemQuery) -> DecodeOutcome[dict[str, Item]]:
        return await self.request(
            dict[str, Item],
            f"/item/search{FULL_RESULT}",
            json=query.to_wire(),
            method="POST",
        )

    # --- Map, news and search ---

    async def marker_locations(self) -> DecodeOutcome[list[MarkerLocation]]:
        return await self.request(list[MarkerLocation], "/map/locations/markers")

    async def player_locations(self) -> DecodeOutcome[list[PlayerLocation]]:
        return await self.request(list[PlayerLocation], "/map/locations/player")

    async def quest_count(self) -> DecodeOutcome[Quests]:
        return await self.request(Quests, "/map/quests")

    async def latest_news(self) -> DecodeOutcome[list[NewsArticle]]:
        return await self.request(list[NewsArticle], "/latest-news")

    async def search(self, query: str) -> DecodeOutcome[SearchResult]:
        return await self.request(SearchResult, f"/search/{_segment(query)}")


def _outcome_kind(outcome: DecodeOutcome[Any]) -> str:
    match outcome:
        case Value():
            return "value"
        case Ambiguous():
            return "ambiguous"
        case DecodeFailure():
            return "failure"
    raise TypeError(f"not a decode outcome: {outcome!r}")
