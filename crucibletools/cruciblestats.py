"""Aggregate crucible statistics and the ratios derived from them."""

from __future__ import annotations

import math
from dataclasses import dataclass


def calculate_efficiency(kills: int, deaths: int, assists: int) -> float:
    """(kills + assists) per death; the raw total when there are no deaths."""
    total = float(kills + assists)
    return total / deaths if deaths > 0 else total


def calculate_kills_deaths_ratio(kills: int, deaths: int) -> float:
    """Kills per death; the raw kills when there are no deaths."""
    return kills / deaths if deaths > 0 else float(kills)


def calculate_kills_deaths_assists(kills: int, deaths: int, assists: int) -> float:
    """(kills + assists / 2) per death; the raw total when there are no deaths."""
    total = kills + assists / 2.0
    return total / deaths if deaths > 0 else total


def _ratio(numerator: float, denominator: float) -> float:
    """Float division that yields inf or nan instead of raising on zero."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


@dataclass
class CrucibleStats:
    """Crucible statistics that can be summed with +."""

    activities_entered: float = 0.0
    activities_won: float = 0.0
    activities_lost: float = 0.0
    assists: float = 0.0
    kills: float = 0.0
    average_kill_distance: float = 0.0
    total_kill_distance: float = 0.0
    seconds_played: float = 0.0
    deaths: float = 0.0
    average_lifespan: float = 0.0
    total_lifespan: float = 0.0
    best_single_game_kills: float | None = None
    opponents_defeated: float = 0.0
    efficiency: float = 0.0
    kills_deaths_ratio: float = 0.0
    kills_deaths_assists: float = 0.0
    suicides: float = 0.0
    precision_kills: float = 0.0

    def __add__(self, other: CrucibleStats) -> CrucibleStats:
        if not isinstance(other, CrucibleStats):
            return NotImplemented

        bests = [b for b in (self.best_single_game_kills, other.best_single_game_kills) if b is not None]
        best_single_game_kills = max(bests) if bests else None

        kills = self.kills + other.kills
        total_kill_distance = self.total_kill_distance + other.total_kill_distance
        assists = self.assists + other.assists
        deaths = self.deaths + other.deaths
        total_lifespan = self.total_lifespan + other.total_lifespan

        k, d, a = int(kills), int(deaths), int(assists)

        return CrucibleStats(
            activities_entered=self.activities_entered + other.activities_entered,
            activities_won=self.activities_won + other.activities_won,
            activities_lost=self.activities_lost + other.activities_lost,
            assists=assists,
            kills=kills,
            average_kill_distance=_ratio(total_kill_distance, kills),
            total_kill_distance=total_kill_distance,
            seconds_played=self.seconds_played + other.seconds_played,
            deaths=deaths,
            # An estimate: not every life ends in a death.
            average_lifespan=_ratio(total_lifespan, deaths),
            total_lifespan=total_lifespan,
            best_single_game_kills=best_single_game_kills,
            opponents_defeated=self.opponents_defeated + other.opponents_defeated,
            efficiency=calculate_efficiency(k, d, a),
            kills_deaths_ratio=calculate_kills_deaths_ratio(k, d),
            kills_deaths_assists=calculate_kills_deaths_assists(k, d, a),
            suicides=self.suicides + other.suicides,
            precision_kills=self.precision_kills + other.precision_kills,
        )