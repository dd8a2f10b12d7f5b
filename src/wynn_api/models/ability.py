"""Ability maps, ability trees and aspects."""

from __future__ import annotations

from pydantic import ConfigDict, RootModel

from wynn_api.decoding.fields import DefaultSet
from wynn_api.decoding.indexed import IndexedList

from .base import ApiModel
from .classes import Class
from .player import Ability, AbilityNodeCoordinate, Icon
from .tokens import ItemRarity


class AbilityMap(RootModel[IndexedList[list[Ability]]]):
    """A class's ability map, one list of nodes per page."""

    @property
    def pages(self) -> list[list[Ability]]:
        return self.root


class ArchetypeInfo(ApiModel):
    name: str
    description: str
    short_description: str
    icon: Icon
    slot: int


class ArchetypeRequirements(ApiModel):
    name: str
    amount: int


class AbilityRequirement(ApiModel):
    model_config = ConfigDict(alias_generator=str.upper)

    ability_points: int
    node: str | None = None
    archetype: ArchetypeRequirements | None = None


class AbilityInfo(ApiModel):
    name: str
    icon: Icon
    slot: int
    coordinates: AbilityNodeCoordinate
    description: list[str]
    requirements: AbilityRequirement
    links: DefaultSet[str]
    locks: DefaultSet[str]
    page: int


class AbilityTree(ApiModel):
    archetypes: dict[str, ArchetypeInfo]
    pages: IndexedList[dict[str, AbilityInfo]]


class AspectTier(ApiModel):
    threshold: int
    description: list[str]


class Aspect(ApiModel):
    name: str
    icon: Icon
    # legendary and above only
    rarity: ItemRarity
    required_class: Class
    tiers: IndexedList[AspectTier]
