"""Match outcome for a player or team."""

from __future__ import annotations

from enum import Enum

from crucibletools.enums.mode import Mode

STANDING_UNKNOWN_MAGIC_NUMBER = 2325


class Standing(Enum):
    """Victory, defeat or unknown."""

    VICTORY = 0
    DEFEAT = 1
    UNKNOWN = STANDING_UNKNOWN_MAGIC_NUMBER

    @classmethod
    def from_value(cls, value: int) -> Standing:
        """Zero is a victory; any other value is a defeat."""
        return cls.VICTORY if value == 0 else cls.DEFEAT

    @classmethod
    def from_mode(cls, value: int, mode: Mode) -> Standing:
        """Interpret a standing value in the context of a mode.

        In Rumble, placing in the top three counts as a victory.
        """
        if value == 0:
            return cls.VICTORY
        if value == STANDING_UNKNOWN_MAGIC_NUMBER:
            return cls.UNKNOWN
        if value > 0 and mode is Mode.RUMBLE and value > 2:
            return cls.DEFEAT
        return cls.VICTORY

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[Standing, str] = {
    Standing.VICTORY: "Victory",
    Standing.DEFEAT: "Defeat",
    Standing.UNKNOWN: "Unknown",
}