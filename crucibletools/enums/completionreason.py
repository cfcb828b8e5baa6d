"""Reasons an activity ended."""

from __future__ import annotations

from enum import Enum


class CompletionReason(Enum):
    """How an activity was completed."""

    OBJECTIVE_COMPLETE = 0
    TIMER_FINISHED = 1
    FAILED = 2
    NO_OPPONENTS = 3
    MERCY = 4
    UNKNOWN = 255

    @classmethod
    def from_id(cls, reason_id: int) -> CompletionReason:
        """Return the reason for an id; unrecognised ids map to UNKNOWN."""
        try:
            return cls(reason_id)
        except ValueError:
            return cls.UNKNOWN

    def to_id(self) -> int:
        return self.value

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[CompletionReason, str] = {
    CompletionReason.OBJECTIVE_COMPLETE: "Objective Complete",
    CompletionReason.TIMER_FINISHED: "Timer Finished",
    CompletionReason.FAILED: "Failed",
    CompletionReason.NO_OPPONENTS: "No Opponents",
    CompletionReason.MERCY: "Mercy",
    CompletionReason.UNKNOWN: "Unknown",
}