"""A player's characters and account information."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from crucibletools.enums.character import CharacterClass


@dataclass
class CharacterData:
    """A single character on an account."""

    id: str
    class_type: CharacterClass
    date_last_played: datetime


@dataclass
class Characters:
    """A player's characters, most recently played first."""

    characters: list[CharacterData] = field(default_factory=list)

    @classmethod
    def with_characters(cls, characters) -> Characters:
        """Build a collection sorted by last played date, newest first."""
        ordered = sorted(characters, key=lambda c: c.date_last_played, reverse=True)
        return cls(ordered)

    def get_by_class(self, class_type: CharacterClass) -> CharacterData | None:
        """Return the first (most recently played) character of a class."""
        return next((c for c in self.characters if c.class_type == class_type), None)

    def get_last_active(self) -> CharacterData | None:
        """Return the most recently played character."""
        return self.characters[0] if self.characters else None


@dataclass
class PlayerInfo:
    """A player's characters along with their account card."""

    characters: Characters
    user_info: Any