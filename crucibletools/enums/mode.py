"""Activity modes as reported by the game's stats service."""

from __future__ import annotations

from enum import Enum


class UnknownEnumValueError(ValueError):
    """Raised when a numeric id does not map to a known enum member."""


class Mode(Enum):
    """Activity mode types."""

    NONE = 0
    STORY = 2
    STRIKE = 3
    RAID = 4
    ALL_PVP = 5
    PATROL = 6
    ALL_PVE = 7
    RESERVED9 = 9
    CONTROL = 10
    RESERVED11 = 11
    CLASH = 12
    RESERVED13 = 13
    CRIMSON_DOUBLES = 15
    NIGHTFALL = 16
    HEROIC_NIGHTFALL = 17
    ALL_STRIKES = 18
    IRON_BANNER = 19
    RESERVED20 = 20
    RESERVED21 = 21
    RESERVED22 = 22
    RESERVED24 = 24
    ALL_MAYHEM = 25
    RESERVED26 = 26
    RESERVED27 = 27
    RESERVED28 = 28
    RESERVED29 = 29
    RESERVED30 = 30
    SUPREMACY = 31
    PRIVATE_MATCHES_ALL = 32
    SURVIVAL = 37
    COUNTDOWN = 38
    TRIALS_OF_THE_NINE = 39
    SOCIAL = 40
    TRIALS_COUNTDOWN = 41
    TRIALS_SURVIVAL = 42
    IRON_BANNER_CONTROL = 43
    IRON_BANNER_CLASH = 44
    IRON_BANNER_SUPREMACY = 45
    SCORED_NIGHTFALL = 46
    SCORED_HEROIC_NIGHTFALL = 47
    RUMBLE = 48
    ALL_DOUBLES = 49
    DOUBLES = 50
    PRIVATE_MATCHES_CLASH = 51
    PRIVATE_MATCHES_CONTROL = 52
    PRIVATE_MATCHES_SUPREMACY = 53
    PRIVATE_MATCHES_COUNTDOWN = 54
    PRIVATE_MATCHES_SURVIVAL = 55
    PRIVATE_MATCHES_MAYHEM = 56
    PRIVATE_MATCHES_RUMBLE = 57
    HEROIC_ADVENTURE = 58
    SHOWDOWN = 59
    LOCKDOWN = 60
    SCORCHED = 61
    SCORCHED_TEAM = 62
    GAMBIT = 63
    ALL_PVE_COMPETITIVE = 64
    BREAKTHROUGH = 65
    BLACK_ARMORY_RUN = 66
    SALVAGE = 67
    IRON_BANNER_SALVAGE = 68
    PVP_COMPETITIVE = 69
    PVP_QUICKPLAY = 70
    CLASH_QUICKPLAY = 71
    CLASH_COMPETITIVE = 72
    CONTROL_QUICKPLAY = 73
    CONTROL_COMPETITIVE = 74
    GAMBIT_PRIME = 75
    RECKONING = 76
    MENAGERIE = 77
    VEX_OFFENSIVE = 78
    NIGHTMARE_HUNT = 79
    ELIMINATION = 80
    MOMENTUM = 81
    DUNGEON = 82
    SUNDIAL = 83
    TRIALS_OF_OSIRIS = 84

    @classmethod
    def from_id(cls, mode_id: int) -> Mode:
        """Return the mode for a numeric id, raising UnknownEnumValueError if unknown."""
        try:
            return cls(mode_id)
        except ValueError:
            raise UnknownEnumValueError(f"Unknown mode id: {mode_id}") from None

    @classmethod
    def from_str(cls, s: str) -> Mode:
        """Parse a command-line style mode name (case insensitive)."""
        try:
            return _PARSE_NAMES[s.lower()]
        except KeyError:
            raise ValueError("Unknown Mode type") from None

    def to_id(self) -> int:
        return self.value

    def is_gambit(self) -> bool:
        return self in (Mode.GAMBIT, Mode.GAMBIT_PRIME)

    def is_rumble(self) -> bool:
        return self in (Mode.RUMBLE, Mode.PRIVATE_MATCHES_RUMBLE)

    def is_nightfall(self) -> bool:
        return self in _NIGHTFALL_MODES

    def is_crucible(self) -> bool:
        return self in _CRUCIBLE_MODES

    def is_private(self) -> bool:
        return self in _PRIVATE_MODES

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]


_NIGHTFALL_MODES = frozenset(
    {
        Mode.NIGHTFALL,
        Mode.HEROIC_NIGHTFALL,
        Mode.SCORED_NIGHTFALL,
        Mode.SCORED_HEROIC_NIGHTFALL,
    }
)

_PRIVATE_MODES = frozenset(
    {
        Mode.PRIVATE_MATCHES_ALL,
        Mode.PRIVATE_MATCHES_CLASH,
        Mode.PRIVATE_MATCHES_CONTROL,
        Mode.PRIVATE_MATCHES_SUPREMACY,
        Mode.PRIVATE_MATCHES_COUNTDOWN,
        Mode.PRIVATE_MATCHES_SURVIVAL,
        Mode.PRIVATE_MATCHES_MAYHEM,
        Mode.PRIVATE_MATCHES_RUMBLE,
    }
)

_CRUCIBLE_MODES = frozenset(
    {
        Mode.ALL_PVP,
        Mode.CONTROL,
        Mode.CLASH,
        Mode.CRIMSON_DOUBLES,
        Mode.IRON_BANNER,
        Mode.ALL_MAYHEM,
        Mode.SUPREMACY,
        Mode.SURVIVAL,
        Mode.COUNTDOWN,
        Mode.TRIALS_OF_THE_NINE,
        Mode.TRIALS_COUNTDOWN,
        Mode.TRIALS_SURVIVAL,
        Mode.IRON_BANNER_CONTROL,
        Mode.IRON_BANNER_CLASH,
        Mode.IRON_BANNER_SUPREMACY,
        Mode.RUMBLE,
        Mode.ALL_DOUBLES,
        Mode.DOUBLES,
        Mode.SHOWDOWN,
        Mode.LOCKDOWN,
        Mode.SCORCHED,
        Mode.SCORCHED_TEAM,
        Mode.BREAKTHROUGH,
        Mode.SALVAGE,
        Mode.IRON_BANNER_SALVAGE,
        Mode.PVP_COMPETITIVE,
        Mode.PVP_QUICKPLAY,
        Mode.CLASH_QUICKPLAY,
        Mode.CLASH_COMPETITIVE,
        Mode.CONTROL_QUICKPLAY,
        Mode.CONTROL_COMPETITIVE,
        Mode.TRIALS_OF_OSIRIS,
        Mode.MOMENTUM,
    }
    | _PRIVATE_MODES
)

_PARSE_NAMES: dict[str, Mode] = {
    "none": Mode.NONE,
    "story": Mode.STORY,
    "strike": Mode.STRIKE,
    "raid": Mode.RAID,
    "all_pvp": Mode.ALL_PVP,
    "patrol": Mode.PATROL,
    "all_pve": Mode.ALL_PVE,
    "control": Mode.CONTROL,
    "clash": Mode.CLASH,
    "crimsom_doubles": Mode.CRIMSON_DOUBLES,
    "nightfall": Mode.NIGHTFALL,
    "heroic_nightfall": Mode.HEROIC_NIGHTFALL,
    "all_strikes": Mode.ALL_STRIKES,
    "iron_banner": Mode.IRON_BANNER,
    "mayhem": Mode.ALL_MAYHEM,
    "supremacy": Mode.SUPREMACY,
    "all_private": Mode.PRIVATE_MATCHES_ALL,
    "survival": Mode.SURVIVAL,
    "countdown": Mode.COUNTDOWN,
    "trials_of_the_nine": Mode.TRIALS_OF_THE_NINE,
    "social": Mode.SOCIAL,
    "trials_countdown": Mode.TRIALS_COUNTDOWN,
    "trials_survival": Mode.TRIALS_SURVIVAL,
    "iron_banner_control": Mode.IRON_BANNER_CONTROL,
    "iron_banner_clash": Mode.IRON_BANNER_CLASH,
    "iron_banner_supremacy": Mode.IRON_BANNER_SUPREMACY,
    "scored_nightfall": Mode.SCORED_NIGHTFALL,
    "scored_heroic_nightfall": Mode.SCORED_HEROIC_NIGHTFALL,
    "rumble": Mode.RUMBLE,
    "all_doubles": Mode.ALL_DOUBLES,
    "doubles": Mode.DOUBLES,
    "private_clash": Mode.PRIVATE_MATCHES_CLASH,
    "private_control": Mode.PRIVATE_MATCHES_CONTROL,
    "private_supremacy": Mode.PRIVATE_MATCHES_SUPREMACY,
    "private_countdown": Mode.PRIVATE_MATCHES_COUNTDOWN,
    "private_survival": Mode.PRIVATE_MATCHES_SURVIVAL,
    "private_mayhem": Mode.PRIVATE_MATCHES_MAYHEM,
    "private_rumble": Mode.PRIVATE_MATCHES_RUMBLE,
    "heroic_adventures": Mode.HEROIC_ADVENTURE,
    "showdown": Mode.SHOWDOWN,
    "lockdown": Mode.LOCKDOWN,
    "scorched": Mode.SCORCHED,
    "scorched_team": Mode.SCORCHED_TEAM,
    "gambit": Mode.GAMBIT,
    "pve_competitive": Mode.ALL_PVE_COMPETITIVE,
    "breakthrough": Mode.BREAKTHROUGH,
    "black_armory_run": Mode.BLACK_ARMORY_RUN,
    "salvage": Mode.SALVAGE,
    "iron_banner_salvage": Mode.IRON_BANNER_SALVAGE,
    "pvp_competitive": Mode.PVP_COMPETITIVE,
    "quickplay": Mode.PVP_QUICKPLAY,
    "clash_quickplay": Mode.CLASH_QUICKPLAY,
    "clash_competitive": Mode.CLASH_COMPETITIVE,
    "control_quickplay": Mode.CONTROL_QUICKPLAY,
    "control_competitive": Mode.CONTROL_COMPETITIVE,
    "gambit_prime": Mode.GAMBIT_PRIME,
    "reckoning": Mode.RECKONING,
    "menagerie": Mode.MENAGERIE,
    "vex_offensive": Mode.VEX_OFFENSIVE,
    "nightmare_hunt": Mode.NIGHTMARE_HUNT,
    "elimination": Mode.ELIMINATION,
    "momentum": Mode.MOMENTUM,
    "dungeon": Mode.DUNGEON,
    "sundial": Mode.SUNDIAL,
    "trials_of_osiris": Mode.TRIALS_OF_OSIRIS,
}

_DISPLAY_NAMES: dict[Mode, str] = {
    Mode.NONE: "None",
    Mode.STORY: "Story",
    Mode.STRIKE: "Strike",
    Mode.RAID: "Raid",
    Mode.ALL_PVP: "All PvP",
    Mode.PATROL: "Patrol",
    Mode.ALL_PVE: "All PvE",
    Mode.RESERVED9: "Reserved9",
    Mode.CONTROL: "Control",
    Mode.RESERVED11: "Reserved11",
    Mode.CLASH: "Clash",
    Mode.RESERVED13: "Reserved13",
    Mode.CRIMSON_DOUBLES: "Crimson Doubles",
    Mode.NIGHTFALL: "Nightfall",
    Mode.HEROIC_NIGHTFALL: "Heroic Nightfall",
    Mode.ALL_STRIKES: "All Strikes",
    Mode.IRON_BANNER: "Iron Banner",
    Mode.RESERVED20: "Reserved20",
    Mode.RESERVED21: "Reserved21",
    Mode.RESERVED22: "Reserved22",
    Mode.RESERVED24: "Reserved24",
    Mode.ALL_MAYHEM: "All Mayhem",
    Mode.RESERVED26: "Reserved26",
    Mode.RESERVED27: "Reserved27",
    Mode.RESERVED28: "Reserved28",
    Mode.RESERVED29: "Reserved29",
    Mode.RESERVED30: "Reserved30",
    Mode.SUPREMACY: "Supremacy",
    Mode.PRIVATE_MATCHES_ALL: "Private Matches All",
    Mode.SURVIVAL: "Survival",
    Mode.COUNTDOWN: "Countdown",
    Mode.TRIALS_OF_THE_NINE: "Trials Of The Nine",
    Mode.SOCIAL: "Social",
    Mode.TRIALS_COUNTDOWN: "Trials Countdown",
    Mode.TRIALS_SURVIVAL: "Trials Survival",
    Mode.IRON_BANNER_CONTROL: "Iron Banner Control",
    Mode.IRON_BANNER_CLASH: "Iron Banner Clash",
    Mode.IRON_BANNER_SUPREMACY: "Iron Banner Supremacy",
    Mode.SCORED_NIGHTFALL: "Scored Nightfall",
    Mode.SCORED_HEROIC_NIGHTFALL: "Scored Heroic Nightfall",
    Mode.RUMBLE: "Rumble",
    Mode.ALL_DOUBLES: "All Doubles",
    Mode.DOUBLES: "Doubles",
    Mode.PRIVATE_MATCHES_CLASH: "Private Matches Clash",
    Mode.PRIVATE_MATCHES_CONTROL: "Private Matches Control",
    Mode.PRIVATE_MATCHES_SUPREMACY: "Private Matches Supremacy",
    Mode.PRIVATE_MATCHES_COUNTDOWN: "Private Matches Countdown",
    Mode.PRIVATE_MATCHES_SURVIVAL: "Private Matches Survival",
    Mode.PRIVATE_MATCHES_MAYHEM: "Private Matches Mayhem",
    Mode.PRIVATE_MATCHES_RUMBLE: "Private Matches Rumble",
    Mode.HEROIC_ADVENTURE: "Heroic Adventure",
    Mode.SHOWDOWN: "Showdown",
    Mode.LOCKDOWN: "Lockdown",
    Mode.SCORCHED: "Scorched",
    Mode.SCORCHED_TEAM: "Scorched Team",
    Mode.GAMBIT: "Gambit",
    Mode.ALL_PVE_COMPETITIVE: "All PvE Competitive",
    Mode.BREAKTHROUGH: "Breakthrough",
    Mode.BLACK_ARMORY_RUN: "Black Armory Run",
    Mode.SALVAGE: "Salvage",
    Mode.IRON_BANNER_SALVAGE: "Iron Banner Salvage",
    Mode.PVP_COMPETITIVE: "PvP Competitive",
    Mode.PVP_QUICKPLAY: "PvP Quickplay",
    Mode.CLASH_QUICKPLAY: "Clash Quickplay",
    Mode.CLASH_COMPETITIVE: "Clash Competitive",
    Mode.CONTROL_QUICKPLAY: "Control Quickplay",
    Mode.CONTROL_COMPETITIVE: "Control Competitive",
    Mode.GAMBIT_PRIME: "Gambit Prime",
    Mode.RECKONING: "Reckoning",
    Mode.MENAGERIE: "Menagerie",
    Mode.VEX_OFFENSIVE: "Vex Offensive",
    Mode.NIGHTMARE_HUNT: "Nightmare Hunt",
    Mode.ELIMINATION: "Elimination",
    Mode.MOMENTUM: "Momentum",
    Mode.DUNGEON: "Dungeon",
    Mode.SUNDIAL: "Sundial",
    Mode.TRIALS_OF_OSIRIS: "Trials Of Osiris",
}