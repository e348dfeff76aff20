from datetime import date, datetime

import pytest

from healthquest.core.periods import (
    InvalidPeriod,
    bucket_labels,
    elapsed_week_days,
    normalize_period,
    previous_window_for,
    window_for,
)


def test_week_window_starts_monday_and_ends_sunday(frozen_now):
    w = window_for("week", frozen_now)
    assert w.start == datetime(2026, 2, 16, 0, 0, 0)
    assert w.end == datetime(2026, 2, 22, 23, 59, 59, 999000)
    assert w.bucket_count == 7


def test_sunday_rolls_back_to_previous_monday():
    w = window_for("week", datetime(2026, 2, 22, 23, 0))
    assert w.start == datetime(2026, 2, 16)


def test_previous_week_is_shifted_seven_days(frozen_now):
    cur = window_for("week", frozen_now)
    prev = previous_window_for("week", frozen_now)
    assert (cur.start - prev.start).days == 7
    assert prev.end == datetime(2026, 2, 15, 23, 59, 59, 999000)


def test_month_window_uses_days_in_month(frozen_now):
    w = window_for("month", frozen_now)
    assert w.start == datetime(2026, 2, 1)
    assert w.end == datetime(2026, 2, 28, 23, 59, 59, 999000)
    assert w.bucket_count == 28


def test_previous_month_wraps_year():
    prev = previous_window_for("month", datetime(2026, 1, 10))
    assert prev.start == datetime(2025, 12, 1)
    assert prev.bucket_count == 31


def test_leap_february():
    assert window_for("month", date(2028, 2, 3)).bucket_count == 29


def test_year_windows(frozen_now):
    cur = window_for("year", frozen_now)
    prev = previous_window_for("year", frozen_now)
    assert cur.start == datetime(2026, 1, 1)
    assert cur.end == datetime(2026, 12, 31, 23, 59, 59, 999000)
    assert cur.bucket_count == 12
    assert prev.start == datetime(2025, 1, 1)


@pytest.mark.parametrize("period,when,expected", [
    ("week", datetime(2026, 2, 16, 8), 0),
    ("week", datetime(2026, 2, 22, 8), 6),
    ("month", datetime(2026, 2, 1), 0),
    ("month", datetime(2026, 2, 28, 23), 27),
    ("year", datetime(2026, 1, 31), 0),
    ("year", datetime(2026, 12, 1), 11),
])
def test_index_of(period, when, expected, frozen_now):
    assert window_for(period, frozen_now).index_of(when) == expected


@pytest.mark.parametrize("raw", ["WEEK", " Month ", "year"])
def test_period_is_case_insensitive(raw):
    assert normalize_period(raw) in ("week", "month", "year")


@pytest.mark.parametrize("raw", ["day", "", None, "weekly"])
def test_unknown_period_raises(raw, frozen_now):
    with pytest.raises(InvalidPeriod):
        window_for(raw, frozen_now)


def test_invalid_period_is_value_error():
    assert issubclass(InvalidPeriod, ValueError)


def test_elapsed_week_days():
    assert elapsed_week_days(datetime(2026, 2, 16)) == 1
    assert elapsed_week_days(datetime(2026, 2, 18)) == 3
    assert elapsed_week_days(datetime(2026, 2, 22)) == 7


def test_bucket_labels(frozen_now):
    assert bucket_labels("week", frozen_now)[0] == "Mon"
    assert bucket_labels("month", frozen_now) == [str(d) for d in range(1, 29)]
    assert bucket_labels("year", frozen_now)[-1] == "Dec"
