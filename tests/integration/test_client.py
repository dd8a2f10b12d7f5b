"""WynnClient endpoints over a mocked HTTP transport."""

import dataclasses
import json

import httpx
import pytest

from wynn_api import (
    Ambiguous,
    Class,
    DecodeFailure,
    Identifier,
    ItemQuery,
    SchemaMismatchError,
    TransportError,
    Value,
    WynnClient,
)
from wynn_api.models import (
    AbilityNode,
    GuildLbType,
    ItemRarity,
    WeaponInfo,
    WeaponType,
)
from wynn_api.telemetry import SimpleReporter
from wynn_api.transport import HttpxTransport

pytestmark = pytest.mark.integration


def _json(payload, status=200):
    return httpx.Response(status, json=payload)


class TestPlayer:
    @pytest.mark.asyncio
    async def test_main_stats_value(self, wynn, mock_routes, load_fixture):
        mock_routes["GET", "/v3/player/Salted"] = _json(load_fixture("player_main.json"))

        outcome = await wynn.player_main_stats("Salted")

        assert isinstance(outcome, Value)
        stats = outcome.value
        assert stats.username == "Salted"
        assert stats.server == 12
        assert stats.veteran is False
        assert stats.global_data.raids.total == 0
        assert stats.guild.prefix == "Fst"

    @pytest.mark.asyncio
    async def test_shared_name_is_ambiguous(self, wynn, mock_routes):
        choices = {
            "uuid-a": {"username": "Salted", "rank": "Player"},
            "uuid-b": {"username": "Salted", "rank": "Media"},
        }
        mock_routes["GET", "/v3/player/Salted"] = _json(choices, status=300)

        outcome = await wynn.player_main_stats("Salted")

        assert isinstance(outcome, Ambiguous)
        assert set(outcome.choices) == {"uuid-a", "uuid-b"}
        assert outcome.choices["uuid-b"]["rank"] == "Media"

    @pytest.mark.asyncio
    async def test_full_stats_requests_full_result(self, wynn, mock_routes):
        mock_routes["GET", "/v3/player/Salted"] = _json({})

        with pytest.raises(SchemaMismatchError):
            await wynn.player_full_stats("Salted")

        assert mock_routes.requests[0].url.query == b"fullResult"

    @pytest.mark.asyncio
    async def test_path_segments_are_quoted(self, wynn, mock_routes):
        await _swallow(wynn.player_character_list("a b/c"))
        assert mock_routes.requests[0].url.raw_path == b"/v3/player/a%20b%2Fc/characters"

    @pytest.mark.asyncio
    async def test_online_players_with_worlds(self, wynn, mock_routes):
        mock_routes["GET", "/v3/player"] = _json(
            {"total": 2, "players": {"Salted": "WC1", "Other": "WC3"}}
        )

        outcome = await wynn.online_player_list(Identifier.UUID, servers=[1, 3])

        assert outcome.value.players == {"Salted": 1, "Other": 3}
        params = mock_routes.requests[0].url.params
        assert params["identifier"] == "uuid"
        assert params["server"] == "1,3"

    @pytest.mark.asyncio
    async def test_online_players_without_worlds(self, wynn, mock_routes):
        mock_routes["GET", "/v3/player"] = _json({"total": 0, "players": {}})

        await wynn.online_player_list(Identifier.USERNAME)

        assert "server" not in mock_routes.requests[0].url.params


class TestLeaderboardsAndAbilities:
    @pytest.mark.asyncio
    async def test_guild_leaderboard(self, wynn, mock_routes, load_fixture):
        mock_routes["GET", "/v3/leaderboards/guildLevel"] = _json(
            load_fixture("leaderboard_guild_level.json")
        )

        outcome = await wynn.leaderboard_guild(GuildLbType.GUILD_LEVEL, limit=3)

        assert [g.name for g in outcome.value] == ["First", "Second", "Third"]
        assert mock_routes.requests[0].url.params["resultLimit"] == "3"

    @pytest.mark.asyncio
    async def test_ability_map_uses_main_class(self, wynn, mock_routes, load_fixture):
        mock_routes["GET", "/v3/ability/map/shaman"] = _json(
            load_fixture("ability_map.json")
        )

        outcome = await wynn.ability_map(Class.SKYSEER)

        first_page = outcome.value.pages[0]
        assert isinstance(first_page[0].meta, AbilityNode)
        assert outcome.value.pages[1] == []


class TestItems:
    @pytest.mark.asyncio
    async def test_search_posts_query(self, wynn, mock_routes, load_fixture):
        def answer(request):
            return _json(
                {
                    "controller": {
                        "count": 8,
                        "pages": 1,
                        "current": 1,
                        "links": {},
                    },
                    "results": load_fixture("item_database.json"),
                }
            )

        mock_routes["POST", "/v3/item/search"] = answer
        query = ItemQuery.with_query("warp")
        query.add_item_type(WeaponType.WAND)
        query.add_tier(ItemRarity.LEGENDARY)
        query.set_level_range(80, 105)

        outcome = await wynn.search_item(query)

        assert isinstance(outcome.value.results["Warp"].info, WeaponInfo)
        body = json.loads(mock_routes.requests[0].content)
        assert body["query"] == "warp"
        assert body["type"] == ["wand"]
        assert body["tier"] == ["legendary"]
        assert body["levelRange"] == [80, 105]

    @pytest.mark.asyncio
    async def test_database_page_param(self, wynn, mock_routes):
        await _swallow(wynn.item_database(page=4))
        assert mock_routes.requests[0].url.params["page"] == "4"


class TestOutcomes:
    @pytest.mark.asyncio
    async def test_strict_mismatch_raises(self, wynn, mock_routes):
        mock_routes["GET", "/v3/map/quests"] = _json({"quests": "many"})

        with pytest.raises(SchemaMismatchError) as exc_info:
            await wynn.quest_count()

        failure = exc_info.value.failure
        assert failure.path == ("quests",)
        assert failure.url.endswith("/v3/map/quests")

    @pytest.mark.asyncio
    async def test_lenient_mismatch_returns_failure(self, frozen_config, mock_routes):
        mock_routes["GET", "/v3/map/quests"] = httpx.Response(200, content=b"{oops")
        client = _client(
            dataclasses.replace(frozen_config, strict_decoding=False),
            mock_routes,
        )

        outcome = await client.quest_count()

        assert isinstance(outcome, DecodeFailure)
        assert outcome.offset == 1
        assert outcome.excerpt == "{oops"

    @pytest.mark.asyncio
    async def test_error_status_raises_transport_error(self, wynn, mock_routes):
        with pytest.raises(TransportError) as exc_info:
            await wynn.guild_by_name("Nobody")
        assert exc_info.value.status_code == 404
        assert mock_routes.requests[0].url.params["identifier"] == "username"

    @pytest.mark.asyncio
    async def test_telemetry_counts_outcomes(self, frozen_config, mock_routes, monkeypatch):
        monkeypatch.setenv("WYNN_TELEMETRY", "1")
        mock_routes["GET", "/v3/map/quests"] = _json({"quests": 12})
        reporter = SimpleReporter()
        client = _client(frozen_config, mock_routes, reporters=(reporter,))

        outcome = await client.quest_count()

        assert outcome.value.quests == 12
        assert "wynn_api.request" in reporter.timings
        assert "wynn_api.decode" in reporter.timings
        assert "wynn_api.outcome.value" in reporter.metrics

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_transport(self, frozen_config):
        closed = []

        class RecordingTransport:
            async def send(self, method, url, *, params=None, json=None):
                raise AssertionError("not called")

            async def aclose(self):
                closed.append(True)

        async with WynnClient(frozen_config, transport=RecordingTransport()) as client:
            assert client.config is frozen_config
        assert closed == [True]


def _client(config, routes, reporters=()):
    http = httpx.AsyncClient(transport=httpx.MockTransport(routes.handler))
    return WynnClient(
        config,
        transport=HttpxTransport(timeout=5.0, user_agent="tests", client=http),
        reporters=reporters,
    )


async def _swallow(call):
    """Await an endpoint whose response body is irrelevant to the test."""
    try:
        await call
    except (SchemaMismatchError, TransportError):
        pass
