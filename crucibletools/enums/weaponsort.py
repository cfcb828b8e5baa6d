"""Sort orders for weapon listings."""

from __future__ import annotations

from enum import Enum


class WeaponSort(Enum):
    """How to order weapon statistics."""

    NAME = "name"
    KILLS = "kills"
    GAMES = "games"
    KILLS_PER_GAME_KILLS = "kills_per_game_kills"
    KILLS_PER_GAME_TOTAL = "kills_per_game_total"
    PRECISION_TOTAL = "precision_total"
    PRECISION_PERCENT = "precision_percent"
    TYPE = "type"

    @classmethod
    def from_str(cls, s: str) -> WeaponSort:
        """Parse a sort name (case insensitive)."""
        try:
            return cls(s.lower())
        except ValueError:
            raise ValueError("Unknown WeaponSort type") from None