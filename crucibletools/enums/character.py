"""Character classes, genders, races and class selections."""

from __future__ import annotations

from enum import Enum


class CharacterClassSelection(Enum):
    """Which character(s) a query should cover."""

    TITAN = 0
    HUNTER = 1
    WARLOCK = 2
    LAST_ACTIVE = 3
    ALL = 4

    @classmethod
    def from_str(cls, s: str) -> CharacterClassSelection:
        """Parse a selection name (case insensitive)."""
        try:
            return _SELECTION_NAMES[s.lower()]
        except KeyError:
            raise ValueError("Unknown CharacterClassSelection type") from None


_SELECTION_NAMES: dict[str, CharacterClassSelection] = {
    "titan": CharacterClassSelection.TITAN,
    "hunter": CharacterClassSelection.HUNTER,
    "warlock": CharacterClassSelection.WARLOCK,
    "last_active": CharacterClassSelection.LAST_ACTIVE,
    "all": CharacterClassSelection.ALL,
}


class _DisplayEnum(Enum):
    """Enum whose str() is a display name and which honours format widths."""

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class CharacterGender(_DisplayEnum):
    """Character gender."""

    MASCULINE = 0
    FEMININE = 1

    def to_id(self) -> int:
        return self.value

    @classmethod
    def from_id(cls, gender_id: int) -> CharacterGender:
        """Return the gender for an id, raising ValueError if unknown."""
        try:
            return cls(gender_id)
        except ValueError:
            raise ValueError(f"Unknown Character Gender Id : {gender_id}") from None

    def __str__(self) -> str:
        return "Masculine" if self is CharacterGender.MASCULINE else "Feminine"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class CharacterClass(_DisplayEnum):
    """Character class."""

    TITAN = 0
    HUNTER = 1
    WARLOCK = 2
    UNKNOWN = 255

    def to_id(self) -> int:
        return self.value

    @classmethod
    def from_id(cls, class_id: int) -> CharacterClass:
        """Return the class for an id; unrecognised ids map to UNKNOWN."""
        try:
            return cls(class_id)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def from_hash(cls, class_hash: int) -> CharacterClass:
        """Return the class for a manifest class hash; unknown hashes map to UNKNOWN."""
        return _CLASS_HASHES.get(class_hash, cls.UNKNOWN)

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_CLASS_HASHES: dict[int, CharacterClass] = {
    3655393761: CharacterClass.TITAN,
    671679327: CharacterClass.HUNTER,
    2271682572: CharacterClass.WARLOCK,
}


class CharacterRace(_DisplayEnum):
    """Character race."""

    HUMAN = 0
    AWOKEN = 1
    EXO = 2

    def to_id(self) -> int:
        return self.value

    @classmethod
    def from_id(cls, race_id: int) -> CharacterRace:
        """Return the race for an id, raising ValueError if unknown."""
        try:
            return cls(race_id)
        except ValueError:
            raise ValueError(f"Unknown Character Race Id : {race_id}") from None

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)