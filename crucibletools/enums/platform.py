"""Gaming platforms (membership types)."""

from __future__ import annotations

from enum import Enum


class Platform(Enum):
    """Platform a player's account belongs to."""

    UNKNOWN = 0
    XBOX = 1
    PLAYSTATION = 2
    STEAM = 3
    BLIZZARD = 4
    STADIA = 5

    def to_id(self) -> int:
        return self.value

    @classmethod
    def from_id(cls, platform_id: int) -> Platform:
        """Return the platform for an id; unrecognised ids map to UNKNOWN."""
        try:
            return cls(platform_id)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def from_str(cls, s: str) -> Platform:
        """Parse a platform name (case insensitive); 'unknown' is not accepted."""
        try:
            return _PARSE_NAMES[s.lower()]
        except KeyError:
            raise ValueError("Unknown platform type") from None

    def __str__(self) -> str:
        return self.name.capitalize()


_PARSE_NAMES: dict[str, Platform] = {
    "xbox": Platform.XBOX,
    "playstation": Platform.PLAYSTATION,
    "steam": Platform.STEAM,
    "stadia": Platform.STADIA,
    "blizzard": Platform.BLIZZARD,
}