"""Per-activity crucible results and aggregates across many activities."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime

from crucibletools.cruciblestats import (
    calculate_efficiency,
    calculate_kills_deaths_assists,
    calculate_kills_deaths_ratio,
)
from crucibletools.enums.character import CharacterClass
from crucibletools.enums.completionreason import CompletionReason
from crucibletools.enums.itemtype import ItemSubType, ItemType
from crucibletools.enums.medaltier import MedalTier
from crucibletools.enums.mode import Mode
from crucibletools.enums.platform import Platform
from crucibletools.enums.standing import Standing

PLAYER_START_BUFFER = 30


@dataclass(frozen=True)
class Player:
    """A player as they appeared in an activity."""

    member_id: str
    character_id: str
    platform: Platform
    display_name: str
    light_level: int
    class_type: CharacterClass

    def calculate_hash(self) -> int:
        """A stable 64-bit hash of the player's identifying fields."""
        key = "\x1f".join(
            (
                self.member_id,
                self.character_id,
                str(self.platform.to_id()),
                self.display_name,
                str(self.light_level),
                str(self.class_type.to_id()),
            )
        )
        digest = hashlib.blake2b(key.encode("utf-8"), digest_size=8).digest()
        return int.from_bytes(digest, "big")


@dataclass
class Item:
    """An inventory item, such as a weapon."""

    id: int
    name: str
    description: str
    item_type: ItemType
    item_sub_type: ItemSubType


@dataclass
class WeaponStat:
    """Kills with one weapon over one or more activities."""

    weapon: Item
    kills: int
    precision_kills: int
    precision_kills_percent: float
    activity_count: int


@dataclass
class Medal:
    """A medal definition."""

    id: str
    icon_image_path: str | None
    tier: MedalTier
    name: str
    description: str


@dataclass
class MedalStat:
    """How many times a medal was earned."""

    medal: Medal
    count: int


@dataclass
class ExtendedCrucibleStats:
    """Detailed stats for a single activity."""

    precision_kills: int = 0
    weapon_kills_ability: int = 0
    weapon_kills_grenade: int = 0
    weapon_kills_melee: int = 0
    weapon_kills_super: int = 0
    all_medals_earned: int = 0
    weapons: list[WeaponStat] = field(default_factory=list)
    medals: list[MedalStat] = field(default_factory=list)


@dataclass
class CrucibleStats:
    """A player's stats for a single activity."""

    assists: int = 0
    score: int = 0
    kills: int = 0
    deaths: int = 0
    average_score_per_kill: float = 0.0
    average_score_per_life: float = 0.0
    completed: bool = True
    opponents_defeated: int = 0
    efficiency: float = 0.0
    kills_deaths_ratio: float = 0.0
    kills_deaths_assists: float = 0.0
    activity_duration_seconds: int = 0
    standing: Standing = Standing.UNKNOWN
    team: int = 0
    completion_reason: CompletionReason = CompletionReason.UNKNOWN
    start_seconds: int = 0
    time_played_seconds: int = 0
    player_count: int = 0
    team_score: int = 0
    extended: ExtendedCrucibleStats | None = None

    def generate_status(self) -> str:
        """'L' if the player joined late, 'E' if they left early."""
        status = ""
        if self.start_seconds > PLAYER_START_BUFFER:
            status += "L"
        if not self.completed:
            status += "E"
        return status


@dataclass
class CruciblePlayerPerformance:
    """One player's result in an activity."""

    player: Player
    stats: CrucibleStats


@dataclass
class ActivityDetail:
    """Identifying details of an activity."""

    index_id: int
    id: int
    period: datetime
    map_name: str
    mode: Mode
    platform: Platform
    director_activity_hash: int
    reference_id: int


@dataclass
class CruciblePlayerActivityPerformance:
    """A player's performance together with the activity it happened in."""

    performance: CruciblePlayerPerformance
    activity_detail: ActivityDetail


@dataclass
class Team:
    """A team and the performances of its players."""

    id: int
    standing: Standing
    score: int
    player_performances: list[CruciblePlayerPerformance] = field(default_factory=list)
    display_name: str = ""


@dataclass
class CrucibleActivity:
    """An activity with all of its teams."""

    details: ActivityDetail
    teams: dict[int, Team] = field(default_factory=dict)

    def get_member_performance(self, member_id: str) -> CruciblePlayerPerformance | None:
        """Return the performance of the given member, if they took part."""
        return next(
            (
                p
                for team in self.teams.values()
                for p in team.player_performances
                if p.player.member_id == member_id
            ),
            None,
        )


@dataclass
class ExtendedCruciblePlayerActivityPerformances:
    """Detailed stats summed over many activities."""

    precision_kills: int = 0
    weapon_kills_ability: int = 0
    weapon_kills_grenade: int = 0
    weapon_kills_melee: int = 0
    weapon_kills_super: int = 0
    all_medals_earned: int = 0

    highest_precision_kills: int = 0
    highest_weapon_kills_ability: int = 0
    highest_weapon_kills_grenade: int = 0
    highest_weapon_kills_melee: int = 0
    highest_weapon_kills_super: int = 0
    highest_all_medals_earned: int = 0

    weapons: list[WeaponStat] = field(default_factory=list)
    medals: list[MedalStat] = field(default_factory=list)


@dataclass
class AggregateCruciblePerformances:
    """Totals, bests and streaks over a sequence of performances."""

    total_activities: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = 0.0

    assists: int = 0
    score: int = 0
    kills: int = 0
    deaths: int = 0
    opponents_defeated: int = 0
    efficiency: float = 0.0
    kills_deaths_ratio: float = 0.0
    kills_deaths_assists: float = 0.0
    activity_duration_seconds: int = 0
    time_played_seconds: int = 0

    highest_assists: int = 0
    highest_score: int = 0
    highest_kills: int = 0
    highest_deaths: int = 0
    highest_opponents_defeated: int = 0
    highest_efficiency: float = 0.0
    highest_kills_deaths_ratio: float = 0.0
    highest_kills_deaths_assists: float = 0.0

    longest_win_streak: int = 0
    longest_loss_streak: int = 0

    total_mercy: int = 0

    extended: ExtendedCruciblePlayerActivityPerformances | None = None

    @classmethod
    def with_performances(
        cls, performances: Iterable[CruciblePlayerPerformance]
    ) -> AggregateCruciblePerformances:
        """Aggregate performances, given in chronological order."""
        performances = list(performances)
        out = cls(total_activities=len(performances))
        extended = ExtendedCruciblePlayerActivityPerformances()

        medals: dict[str, MedalStat] = {}
        weapons: dict[int, WeaponStat] = {}

        streak = 0
        last_standing = Standing.UNKNOWN
        has_extended = False

        for p in performances:
            s = p.stats
            if s.completion_reason is CompletionReason.MERCY:
                out.total_mercy += 1

            out.assists += s.assists
            out.score += s.score
            out.kills += s.kills
            out.deaths += s.deaths
            out.opponents_defeated += s.opponents_defeated
            out.activity_duration_seconds += s.activity_duration_seconds
            out.time_played_seconds += s.time_played_seconds

            out.highest_assists = max(out.highest_assists, s.assists)
            out.highest_score = max(out.highest_score, s.score)
            out.highest_kills = max(out.highest_kills, s.kills)
            out.highest_deaths = max(out.highest_deaths, s.deaths)
            out.highest_opponents_defeated = max(out.highest_opponents_defeated, s.opponents_defeated)
            out.highest_efficiency = max(out.highest_efficiency, s.efficiency)
            out.highest_kills_deaths_ratio = max(out.highest_kills_deaths_ratio, s.kills_deaths_ratio)
            out.highest_kills_deaths_assists = max(out.highest_kills_deaths_assists, s.kills_deaths_assists)

            if s.standing is Standing.VICTORY:
                out.wins += 1
                streak = streak + 1 if last_standing is Standing.VICTORY else 1
            elif s.standing is Standing.DEFEAT:
                out.losses += 1
                streak = streak - 1 if last_standing is Standing.DEFEAT else -1

            if streak > 0:
                out.longest_win_streak = max(out.longest_win_streak, streak)
            elif streak < 0:
                out.longest_loss_streak = max(out.longest_loss_streak, -streak)

            last_standing = s.standing

            e = s.extended
            if e is None:
                continue
            has_extended = True

            extended.weapon_kills_ability += e.weapon_kills_ability
            extended.weapon_kills_grenade += e.weapon_kills_grenade
            extended.weapon_kills_melee += e.weapon_kills_melee
            extended.weapon_kills_super += e.weapon_kills_super
            extended.all_medals_earned += e.all_medals_earned
            extended.precision_kills += e.precision_kills

            extended.highest_precision_kills = max(extended.highest_precision_kills, e.precision_kills)
            extended.highest_weapon_kills_ability = max(
                extended.highest_weapon_kills_ability, e.weapon_kills_ability
            )
            extended.highest_weapon_kills_grenade = max(
                extended.highest_weapon_kills_grenade, e.weapon_kills_grenade
            )
            extended.highest_weapon_kills_melee = max(extended.highest_weapon_kills_melee, e.weapon_kills_melee)
            extended.highest_weapon_kills_super = max(extended.highest_weapon_kills_super, e.weapon_kills_super)
            extended.highest_all_medals_earned = max(extended.highest_all_medals_earned, e.all_medals_earned)

            for m in e.medals:
                existing = medals.get(m.medal.id)
                if existing is not None:
                    existing.count += m.count
                else:
                    medals[m.medal.id] = replace(m, count=m.count or 1)

            for w in e.weapons:
                ws = weapons.get(w.weapon.id)
                if ws is not None:
                    ws.activity_count += 1
                    ws.kills += w.kills
                    ws.precision_kills += w.precision_kills
                else:
                    ws = replace(w)
                    weapons[w.weapon.id] = ws
                ws.precision_kills_percent = (
                    0.0 if ws.kills == 0 else ws.precision_kills / ws.kills * 100.0
                )

        if has_extended:
            extended.medals = sorted(medals.values(), key=lambda m: m.count, reverse=True)
            extended.weapons = sorted(weapons.values(), key=lambda w: w.kills, reverse=True)
            out.extended = extended

        if out.total_activities > 0:
            out.win_rate = out.wins / out.total_activities * 100.0

        out.efficiency = calculate_efficiency(out.kills, out.deaths, out.assists)
        out.kills_deaths_ratio = calculate_kills_deaths_ratio(out.kills, out.deaths)
        out.kills_deaths_assists = calculate_kills_deaths_assists(out.kills, out.deaths, out.assists)
        return out

    def stat_per_game(self, value: float) -> float:
        """Average of a total over the number of activities."""
        if self.total_activities == 0:
            return 0.0
        return value / self.total_activities