import math

import pytest

from crucibletools.cruciblestats import (
    CrucibleStats,
    calculate_efficiency,
    calculate_kills_deaths_assists,
    calculate_kills_deaths_ratio,
)


def test_ratios_with_no_deaths_return_totals():
    assert calculate_efficiency(7, 0, 3) == 10.0
    assert calculate_kills_deaths_ratio(7, 0) == 7.0
    assert calculate_kills_deaths_assists(8, 0, 4) == 10.0


@pytest.mark.parametrize("kills,deaths,assists", [(10, 5, 4), (3, 9, 0), (0, 2, 6)])
def test_ratio_invariants(kills, deaths, assists):
    eff = calculate_efficiency(kills, deaths, assists)
    kd = calculate_kills_deaths_ratio(kills, deaths)
    kda = calculate_kills_deaths_assists(kills, deaths, assists)
    assert eff * deaths == pytest.approx(kills + assists)
    assert kd * deaths == pytest.approx(kills)
    assert kd <= kda <= eff


def _stats(**kw):
    base = dict(kills=10.0, deaths=5.0, assists=4.0, total_kill_distance=150.0, total_lifespan=300.0)
    base.update(kw)
    return CrucibleStats(**base)


def test_add_sums_counts():
    a = _stats(activities_entered=2.0, suicides=1.0, precision_kills=3.0)
    b = _stats(activities_entered=3.0, suicides=2.0, precision_kills=4.0)
    total = a + b
    assert total.kills == a.kills + b.kills
    assert total.deaths == a.deaths + b.deaths
    assert total.activities_entered == a.activities_entered + b.activities_entered
    assert total.suicides == a.suicides + b.suicides
    assert total.precision_kills == a.precision_kills + b.precision_kills


def test_add_derived_values_consistent():
    total = _stats() + _stats(kills=6.0, deaths=3.0)
    assert total.average_kill_distance == pytest.approx(total.total_kill_distance / total.kills)
    assert total.average_lifespan == pytest.approx(total.total_lifespan / total.deaths)
    assert total.efficiency == pytest.approx(
        calculate_efficiency(int(total.kills), int(total.deaths), int(total.assists))
    )
    assert total.kills_deaths_ratio == pytest.approx(total.kills / total.deaths)


def test_add_with_default_is_identity_for_sums():
    a = _stats()
    total = a + CrucibleStats()
    assert total.kills == a.kills
    assert total.total_kill_distance == a.total_kill_distance


@pytest.mark.parametrize(
    "left,right,expected",
    [(None, None, None), (12.0, None, 12.0), (None, 9.0, 9.0), (12.0, 20.0, 20.0), (25.0, 20.0, 25.0)],
)
def test_best_single_game_kills(left, right, expected):
    total = _stats(best_single_game_kills=left) + _stats(best_single_game_kills=right)
    assert total.best_single_game_kills == expected


def test_add_with_zero_deaths_does_not_raise():
    total = _stats(deaths=0.0) + _stats(deaths=0.0)
    assert math.isinf(total.average_lifespan)
    assert total.kills_deaths_ratio == total.kills


def test_add_all_zero_gives_nan_averages():
    total = CrucibleStats() + CrucibleStats()
    assert math.isnan(total.average_kill_distance)
    assert math.isnan(total.average_lifespan)
    assert total.efficiency == 0.0


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        CrucibleStats() + 1