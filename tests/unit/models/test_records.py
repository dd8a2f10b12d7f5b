"""Guild, ability tree, class, map, news and search records."""

import pytest
from pydantic import TypeAdapter, ValidationError

from wynn_api.models import (
    AbilityTree,
    Aspect,
    ClassInfo,
    ItemRarity,
    MarkerLocation,
    NewsArticle,
    SearchResult,
    Territory,
)
from wynn_api.models.guild import GuildPlayerInfo, SeasonRank

pytestmark = pytest.mark.unit

ICON = {"format": "legacy", "value": "1:0"}


class TestGuild:
    @pytest.mark.parametrize("key", ["finalTerritories", "finalTerretories"])
    def test_season_rank_spellings(self, key):
        assert SeasonRank.model_validate({"rating": 5, key: 3}).final_territories == 3

    def test_member_by_username(self):
        member = GuildPlayerInfo.model_validate(
            {
                "username": "Salted",
                "online": False,
                "server": None,
                "contributed": 10,
                "contributionRank": 2,
                "joined": "2020-01-01",
            }
        )
        assert member.uuid is None
        assert member.contribution_rank == 2

    def test_territories(self):
        territories = TypeAdapter(dict[str, Territory]).validate_python(
            {
                "Ragni": {
                    "guild": {"uuid": "g1", "name": "First", "prefix": None},
                    "acquired": "2024-01-01",
                    "location": {"start": [0, 1], "end": [2, 3]},
                }
            }
        )
        assert territories["Ragni"].guild.prefix == ""
        assert territories["Ragni"].location.end == (2, 3)


class TestAbilityTree:
    def test_pages_and_requirements(self):
        tree = AbilityTree.model_validate(
            {
                "archetypes": {
                    "Boltslinger": {
                        "name": "Boltslinger",
                        "description": "d",
                        "shortDescription": "s",
                        "icon": ICON,
                        "slot": 1,
                    }
                },
                "pages": {
                    "1": {
                        "arrowBomb": {
                            "name": "Arrow Bomb",
                            "icon": ICON,
                            "slot": 0,
                            "coordinates": {"x": 5, "y": 1},
                            "description": ["boom"],
                            "requirements": {
                                "ABILITY_POINTS": 1,
                                "ARCHETYPE": {"name": "Boltslinger", "amount": 2},
                            },
                            "links": None,
                            "page": 1,
                        }
                    }
                },
            }
        )
        bomb = tree.pages[0]["arrowBomb"]
        assert bomb.requirements.ability_points == 1
        assert bomb.requirements.archetype.amount == 2
        assert bomb.requirements.node is None
        assert bomb.links == set()
        assert bomb.locks == set()

    def test_aspect_tiers(self):
        aspect = Aspect.model_validate(
            {
                "name": "Aspect of the Beacon",
                "icon": ICON,
                "rarity": "mythic",
                "requiredClass": "archer",
                "tiers": {
                    "1": {"threshold": 1, "description": ["a"]},
                    "2": {"threshold": 5, "description": ["b"]},
                },
            }
        )
        assert aspect.rarity is ItemRarity.MYTHIC
        assert [t.threshold for t in aspect.tiers] == [1, 5]


class TestClassInfo:
    def test_archetypes(self):
        info = ClassInfo.model_validate(
            {
                "id": "archer",
                "name": "Archer",
                "lore": "...",
                "archetypes": {
                    "sharpshooter": {
                        "name": "Sharpshooter",
                        "difficulty": 2,
                        "damage": 4,
                        "defence": 1,
                        "range": 5,
                        "speed": 2,
                    }
                },
            }
        )
        assert info.archetypes["sharpshooter"].range == 5


class TestMapAndNews:
    def test_marker_coordinates_are_strings(self):
        marker = MarkerLocation.model_validate(
            {"name": "Ragni", "icon": "x.png", "x": "-955", "y": "65", "z": "-1592"}
        )
        assert (marker.x, marker.y, marker.z) == (-955, 65, -1592)
        assert marker.to_wire()["x"] == "-955"

    def test_native_number_coordinate_fails(self):
        with pytest.raises(ValidationError, match="expected a string"):
            MarkerLocation.model_validate(
                {"name": "Ragni", "icon": "x.png", "x": -955, "y": "65", "z": "0"}
            )

    def test_news_comment_count(self):
        article = NewsArticle.model_validate(
            {
                "title": "Update",
                "date": "2024-01-01",
                "forumThread": "https://forums/1",
                "author": "Salted",
                "content": "<p>hi</p>",
                "comments": "12",
            }
        )
        assert article.comments == 12


class TestSearch:
    def test_missing_categories_are_empty(self):
        result = SearchResult.model_validate(
            {"query": "ragni", "territories": {"Ragni": {"start": [0, 0], "end": [1, 1]}}}
        )
        assert result.players == {}
        assert result.items == {}
        assert result.territories["Ragni"].start == (0, 0)

    def test_guild_matches(self):
        result = SearchResult.model_validate(
            {
                "query": "fst",
                "guildsPrefix": {"g1": {"name": "First", "prefix": "Fst"}},
                "players": None,
            }
        )
        assert result.guilds_prefix["g1"].name == "First"
        assert result.players == {}
