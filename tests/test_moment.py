from datetime import datetime, timedelta, timezone

import pytest

from crucibletools.enums.moment import DateTimePeriod, DateTimePeriodOrderError, Moment


@pytest.mark.parametrize("moment", list(Moment))
def test_from_str_round_trip(moment):
    assert Moment.from_str(moment.value) is moment
    assert Moment.from_str(moment.value.upper()) is moment


def test_from_str_unknown():
    with pytest.raises(ValueError, match="Unknown Moment type"):
        Moment.from_str("yesterday")


def test_display_names():
    assert str(Moment.from_str("daily")) == "last daily reset"
    assert str(Moment.from_str("season_of_the_chosen")) == "Season of the Chosen"
    assert str(Moment.from_str("all_time")) == "all time"


def test_fixed_season_date():
    assert Moment.SEASON_OF_THE_CHOSEN.get_date_time() == datetime(
        2021, 2, 9, 18, tzinfo=timezone.utc
    )


def test_all_time_is_launch():
    assert Moment.ALL_TIME.get_date_time() == Moment.LAUNCH.get_date_time()


def test_seasons_are_in_order():
    names = [
        "launch",
        "curse_of_osiris",
        "warmind",
        "season_of_the_outlaw",
        "season_of_the_forge",
        "season_of_the_drifter",
        "season_of_opulence",
        "season_of_the_undying",
        "season_of_dawn",
        "season_of_the_worthy",
        "season_of_arrivals",
        "season_of_the_hunt",
        "season_of_the_chosen",
    ]
    dates = [Moment.from_str(name).get_date_time() for name in names]
    assert dates == sorted(dates)
    assert len(set(dates)) == len(dates)


def test_daily_reset_within_last_day():
    now = datetime.now(timezone.utc)
    daily = Moment.DAILY.get_date_time()
    assert daily <= now
    assert now - daily < timedelta(days=1)


def test_next_daily_is_one_day_after_daily():
    assert Moment.NEXT_DAILY.get_date_time() - Moment.DAILY.get_date_time() == timedelta(days=1)


def test_weekly_reset_within_last_week():
    now = datetime.now(timezone.utc)
    weekly = Moment.WEEKLY.get_date_time()
    weekend = Moment.WEEKEND.get_date_time()
    assert weekly <= now and now - weekly < timedelta(days=7)
    assert weekend <= now and now - weekend < timedelta(days=7)
    assert weekly.weekday() != weekend.weekday()


def test_relative_moments():
    day = Moment.DAY.get_date_time()
    next_day = Moment.NEXT_DAY.get_date_time()
    assert next_day - day >= timedelta(days=2)
    assert Moment.MONTH.get_date_time() < Moment.WEEK.get_date_time() < day


def test_custom_has_no_date():
    with pytest.raises(ValueError):
        Moment.CUSTOM.get_date_time()


def test_period_with_start_end():
    start = Moment.LAUNCH.get_date_time()
    end = Moment.WARMIND.get_date_time()
    period = DateTimePeriod.with_start_end_time(start, end)
    assert period.start == start
    assert period.end == end


def test_period_order_error():
    start = Moment.WARMIND.get_date_time()
    end = Moment.LAUNCH.get_date_time()
    with pytest.raises(DateTimePeriodOrderError):
        DateTimePeriod.with_start_end_time(start, end)


def test_period_with_start_time_ends_now():
    start = Moment.LAUNCH.get_date_time()
    period = DateTimePeriod.with_start_time(start)
    assert period.start == start
    assert period.end <= datetime.now(timezone.utc)
    assert period.end > start


def test_period_with_future_start_fails():
    with pytest.raises(DateTimePeriodOrderError):
        DateTimePeriod.with_start_time(Moment.NEXT_MONTH.get_date_time())