"""Named points in time and validated time periods."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

_RESET_HOUR = 17
_TUESDAY = 1
_FRIDAY = 4


class DateTimePeriodOrderError(ValueError):
    """Raised when a period's start is after its end."""


def _utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _last_reset(weekday: int | None = None) -> datetime:
    """Most recent reset time, optionally restricted to a given weekday."""
    now = _now()
    reset = now.replace(hour=_RESET_HOUR, minute=0, second=0, microsecond=0)
    if reset > now:
        reset -= timedelta(days=1)
    if weekday is not None:
        reset -= timedelta(days=(reset.weekday() - weekday) % 7)
    return reset


class Moment(Enum):
    """A named moment, parsed from and identified by its command-line name."""

    NOW = "now"
    DAILY = "daily"
    NEXT_DAILY = "next_daily"
    WEEKEND = "weekend"
    NEXT_WEEKEND = "next_weekend"
    WEEKLY = "weekly"
    NEXT_WEEKLY = "next_weekly"
    DAY = "day"
    NEXT_DAY = "next_day"
    WEEK = "week"
    NEXT_WEEK = "next_week"
    MONTH = "month"
    NEXT_MONTH = "next_month"
    ALL_TIME = "all_time"
    CUSTOM = "custom"

    LAUNCH = "launch"
    CURSE_OF_OSIRIS = "curse_of_osiris"
    WARMIND = "warmind"
    SEASON_OF_THE_OUTLAW = "season_of_the_outlaw"
    SEASON_OF_THE_FORGE = "season_of_the_forge"
    SEASON_OF_THE_DRIFTER = "season_of_the_drifter"
    SEASON_OF_OPULENCE = "season_of_opulence"
    SEASON_OF_THE_UNDYING = "season_of_the_undying"
    SEASON_OF_DAWN = "season_of_dawn"
    SEASON_OF_THE_WORTHY = "season_of_the_worthy"
    SEASON_OF_ARRIVALS = "season_of_arrivals"
    SEASON_OF_THE_HUNT = "season_of_the_hunt"
    SEASON_OF_THE_CHOSEN = "season_of_the_chosen"

    def get_date_time(self) -> datetime:
        """Return the UTC date and time this moment refers to."""
        fixed = _FIXED_DATES.get(self)
        if fixed is not None:
            return fixed

        one_day = timedelta(days=1)
        if self is Moment.NOW:
            return _now()
        if self is Moment.DAILY:
            return _last_reset()
        if self is Moment.NEXT_DAILY:
            return _last_reset() + one_day
        if self is Moment.WEEKEND:
            return _last_reset(_FRIDAY)
        if self is Moment.NEXT_WEEKEND:
            return _last_reset(_FRIDAY) + one_day
        if self is Moment.WEEKLY:
            return _last_reset(_TUESDAY)
        if self is Moment.NEXT_WEEKLY:
            return _last_reset(_TUESDAY) + one_day
        if self is Moment.DAY:
            return _now() - one_day
        if self is Moment.NEXT_DAY:
            return _now() + one_day
        if self is Moment.WEEK:
            return _now() - timedelta(weeks=1)
        if self is Moment.NEXT_WEEK:
            return _now() + timedelta(weeks=1)
        if self is Moment.MONTH:
            return _now() - timedelta(days=30)
        if self is Moment.NEXT_MONTH:
            return _now() + timedelta(days=30)
        if self is Moment.ALL_TIME:
            return _FIXED_DATES[Moment.LAUNCH]
        raise ValueError("The custom moment has no date and time of its own")

    @classmethod
    def from_str(cls, s: str) -> Moment:
        """Parse a moment name (case insensitive)."""
        try:
            return cls(s.lower())
        except ValueError:
            raise ValueError("Unknown Moment type") from None

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]


_FIXED_DATES: dict[Moment, datetime] = {
    Moment.LAUNCH: _utc(2017, 9, 6, 0, 0, 1),
    Moment.CURSE_OF_OSIRIS: _utc(2017, 12, 5, 18),
    Moment.WARMIND: _utc(2018, 5, 8, 18),
    Moment.SEASON_OF_THE_OUTLAW: _utc(2018, 9, 4, 18),
    Moment.SEASON_OF_THE_FORGE: _utc(2018, 12, 4, 18),
    Moment.SEASON_OF_THE_DRIFTER: _utc(2019, 3, 5, 18),
    Moment.SEASON_OF_OPULENCE: _utc(2019, 6, 4, 18),
    Moment.SEASON_OF_THE_UNDYING: _utc(2019, 10, 1, 18),
    Moment.SEASON_OF_DAWN: _utc(2019, 12, 10, 18),
    Moment.SEASON_OF_THE_WORTHY: _utc(2020, 3, 10, 18),
    Moment.SEASON_OF_ARRIVALS: _utc(2020, 6, 9, 18),
    Moment.SEASON_OF_THE_HUNT: _utc(2020, 11, 10, 18),
    Moment.SEASON_OF_THE_CHOSEN: _utc(2021, 2, 9, 18),
}

_DISPLAY_NAMES: dict[Moment, str] = {
    Moment.NOW: "now",
    Moment.DAILY: "last daily reset",
    Moment.NEXT_DAILY: "next daily reset",
    Moment.WEEKEND: "last weekend reset",
    Moment.NEXT_WEEKEND: "next weekend reset",
    Moment.WEEKLY: "last weekly reset",
    Moment.NEXT_WEEKLY: "next weekly reset",
    Moment.DAY: "last day",
    Moment.NEXT_DAY: "next day",
    Moment.WEEK: "last week",
    Moment.NEXT_WEEK: "next week",
    Moment.MONTH: "last month",
    Moment.NEXT_MONTH: "next month",
    Moment.ALL_TIME: "all time",
    Moment.CUSTOM: "custom",
    Moment.LAUNCH: "launch",
    Moment.CURSE_OF_OSIRIS: "Curse of Osiris",
    Moment.WARMIND: "Warmind",
    Moment.SEASON_OF_THE_OUTLAW: "Season of the Outlaw",
    Moment.SEASON_OF_THE_FORGE: "Season of the Forge",
    Moment.SEASON_OF_THE_DRIFTER: "Season of the Drifter",
    Moment.SEASON_OF_OPULENCE: "Season of Opulence",
    Moment.SEASON_OF_THE_UNDYING: "Season of the Undying",
    Moment.SEASON_OF_DAWN: "Season of Dawn",
    Moment.SEASON_OF_THE_WORTHY: "Season of the Worthy",
    Moment.SEASON_OF_ARRIVALS: "Season of Arrivals",
    Moment.SEASON_OF_THE_HUNT: "Season of the Hunt",
    Moment.SEASON_OF_THE_CHOSEN: "Season of the Chosen",
}


@dataclass(frozen=True)
class DateTimePeriod:
    """A span of time whose start is never after its end."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise DateTimePeriodOrderError("Period start is after its end")

    @classmethod
    def with_start_time(cls, start: datetime) -> DateTimePeriod:
        """A period from start until now."""
        return cls(start, _now())

    @classmethod
    def with_start_end_time(cls, start: datetime, end: datetime) -> DateTimePeriod:
        """A period between two explicit times."""
        return cls(start, end)