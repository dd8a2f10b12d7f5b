"""Map markers and live player locations."""

from __future__ import annotations

from wynn_api.decoding.fields import StringInt, World

from .base import ApiModel


class Quests(ApiModel):
    quests: int


class MarkerLocation(ApiModel):
    name: str
    icon: str
    # Marker coordinates are sent as strings
    x: StringInt
    y: StringInt
    z: StringInt


class FriendLocation(ApiModel):
    uuid: str
    name: str
    nickname: str | None = None
    server: World | None = None
    x: int
    y: int
    z: int


class PlayerLocation(FriendLocation):
    friends: list[FriendLocation]
    party: list[FriendLocation]
    guild: list[FriendLocation]
