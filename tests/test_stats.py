from datetime import datetime

import pytest

from healthquest.core.periods import InvalidPeriod
from healthquest.core.stats import average_steps, best_day, compose_activity_stats

MON = datetime(2026, 2, 16, 10)
TUE = datetime(2026, 2, 17, 10)
WED = datetime(2026, 2, 18, 10)


def test_week_average_uses_elapsed_days(frozen_now, steps_record):
    steps = [steps_record(MON, 1000), steps_record(TUE, 2000), steps_record(WED, 0)]
    report = compose_activity_stats("week", steps, [], frozen_now)
    assert report.average_steps == 1000


def test_week_average_on_sunday_divides_by_seven(steps_record):
    sunday = datetime(2026, 2, 22, 20)
    steps = [steps_record(MON, 7000)]
    assert compose_activity_stats("week", steps, [], sunday).average_steps == 1000


def test_month_average_divides_by_full_month(frozen_now, steps_record):
    steps = [steps_record(datetime(2026, 2, 2), 28000)]
    assert compose_activity_stats("month", steps, [], frozen_now).average_steps == 1000


def test_year_average_divides_by_twelve(frozen_now, steps_record):
    steps = [steps_record(datetime(2026, 1, 5), 12000), steps_record(datetime(2026, 2, 5), 12000)]
    assert compose_activity_stats("year", steps, [], frozen_now).average_steps == 2000


def test_average_of_empty_buckets_is_zero(frozen_now):
    assert average_steps("month", [], frozen_now) == 0


def test_sparse_previous_week_gives_flat_trend(frozen_now, steps_record):
    steps = [
        steps_record(datetime(2026, 2, 10), 500),   # previous week
        steps_record(MON, 90000),
    ]
    assert compose_activity_stats("week", steps, [], frozen_now).trend_percentage_text == "+0%"


def test_week_trend_against_previous_week(frozen_now, steps_record):
    steps = [
        steps_record(datetime(2026, 2, 9), 10000),
        steps_record(MON, 5000),
        steps_record(TUE, 7000),
    ]
    assert compose_activity_stats("week", steps, [], frozen_now).trend_percentage_text == "+20%"


def test_month_trend_against_previous_month(frozen_now, steps_record):
    steps = [
        steps_record(datetime(2026, 1, 20), 4000),
        steps_record(datetime(2026, 2, 3), 1000),
    ]
    assert compose_activity_stats("month", steps, [], frozen_now).trend_percentage_text == "-75%"


def test_best_day_takes_first_strict_maximum():
    assert best_day([0, 500, 900, 900, 0, 0, 0]) == "Wednesday"
    assert best_day([0] * 7) == "Monday"


def test_best_day_always_comes_from_current_week(frozen_now, steps_record):
    steps = [
        steps_record(datetime(2026, 2, 2), 50000),  # a Monday earlier this month
        steps_record(TUE, 3000),
    ]
    report = compose_activity_stats("month", steps, [], frozen_now)
    assert report.best_day_name == "Tuesday"


def test_activity_totals_are_open_ended_from_period_start(frozen_now, activity_record):
    activities = [
        activity_record(datetime(2026, 2, 15, 23), 99, 999.0),   # before Monday
        activity_record(MON, 30, 250.7),
        activity_record(WED, 45.9, 300.2),
        activity_record(datetime(2026, 3, 2), 20, 100.0),       # after the week, still counted
    ]
    report = compose_activity_stats("week", [], activities, frozen_now)

    assert report.total_activity_count == 3
    assert report.total_duration_minutes == 30 + 45 + 20
    assert report.total_calories_burned == 250 + 300 + 100


def test_activity_totals_for_year(frozen_now, activity_record):
    activities = [
        activity_record(datetime(2025, 12, 31, 23), 10, 10.0),
        activity_record(datetime(2026, 1, 1), 10, 10.0),
    ]
    report = compose_activity_stats("year", [], activities, frozen_now)
    assert report.total_activity_count == 1


def test_empty_history_degrades_to_zero(frozen_now):
    report = compose_activity_stats("week", [], [], frozen_now)
    assert report.to_dict() == {
        "average_steps": 0,
        "trend_percentage_text": "+0%",
        "best_day_name": "Monday",
        "total_activity_count": 0,
        "total_duration_minutes": 0,
        "total_calories_burned": 0,
    }


def test_invalid_period(frozen_now):
    with pytest.raises(InvalidPeriod):
        compose_activity_stats("fortnight", [], [], frozen_now)
