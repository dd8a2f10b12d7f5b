"""Character classes."""

from __future__ import annotations

from wynn_api.decoding.variants import ApiEnum

from .base import ApiModel
from .tokens import WeaponType


class Class(ApiEnum):
    ARCHER = "archer"
    HUNTER = "hunter"
    WARRIOR = "warrior"
    KNIGHT = "knight"
    MAGE = "mage"
    DARK_WIZARD = "darkwizard"
    ASSASSIN = "assassin"
    NINJA = "ninja"
    SHAMAN = "shaman"
    SKYSEER = "skyseer"

    # Character records spell classes in upper case
    __legacy_aliases__ = {
        "ARCHER": "archer",
        "HUNTER": "hunter",
        "WARRIOR": "warrior",
        "KNIGHT": "knight",
        "MAGE": "mage",
        "DARKWIZARD": "darkwizard",
        "ASSASSIN": "assassin",
        "NINJA": "ninja",
        "SHAMAN": "shaman",
        "SKYSEER": "skyseer",
    }

    def main_class(self) -> Class:
        """The base class a reskinned (donor) class belongs to."""
        return _DONOR_TO_MAIN.get(self, self)

    def donor_class(self) -> Class:
        """The reskinned variant of a base class."""
        return _MAIN_TO_DONOR.get(self, self)

    def weapon_type(self) -> WeaponType:
        return _WEAPONS[self.main_class()]


_MAIN_TO_DONOR = {
    Class.ARCHER: Class.HUNTER,
    Class.WARRIOR: Class.KNIGHT,
    Class.MAGE: Class.DARK_WIZARD,
    Class.ASSASSIN: Class.NINJA,
    Class.SHAMAN: Class.SKYSEER,
}
_DONOR_TO_MAIN = {donor: main for main, donor in _MAIN_TO_DONOR.items()}

_WEAPONS = {
    Class.ARCHER: WeaponType.BOW,
    Class.WARRIOR: WeaponType.SPEAR,
    Class.MAGE: WeaponType.WAND,
    Class.ASSASSIN: WeaponType.DAGGER,
    Class.SHAMAN: WeaponType.RELIK,
}


class ClassDifficulty(ApiModel):
    name: str
    overall_difficulty: int


class ClassList(ApiModel):
    archer: ClassDifficulty
    warrior: ClassDifficulty
    assassin: ClassDifficulty
    mage: ClassDifficulty
    shaman: ClassDifficulty


class Archetype(ApiModel):
    name: str
    difficulty: int
    damage: int
    defence: int
    range: int
    speed: int


class ClassInfo(ApiModel):
    id: str
    name: str
    lore: str
    archetypes: dict[str, Archetype]
