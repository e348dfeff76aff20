# healthquest/core/stats.py
"""
Activity stats for one period.

`steps` items need `.date` and `.steps`; `activities` items need `.date`,
`.duration_minutes` and `.calories_burned`. The SQLAlchemy models in
`healthquest.models` satisfy both, but any object with those attributes works.
"""
from dataclasses import asdict, dataclass
from datetime import datetime
from operator import attrgetter
from typing import Iterable, List, Sequence

from .aggregation import bucket_totals
from .periods import (
    DAY_NAMES,
    WEEK,
    as_datetime,
    elapsed_week_days,
    normalize_period,
    period_start,
    previous_window_for,
    window_for,
)
from .trends import trend_percentage

_date = attrgetter("date")
_steps = attrgetter("steps")


@dataclass
class StatsReport:
    average_steps: int
    trend_percentage_text: str
    best_day_name: str
    total_activity_count: int
    total_duration_minutes: int
    total_calories_burned: int

    def to_dict(self):
        return asdict(self)


def step_buckets(period: str, steps: Iterable, now: datetime) -> List[int]:
    return bucket_totals(window_for(period, now), steps, _date, _steps)


def previous_step_buckets(period: str, steps: Iterable, now: datetime) -> List[int]:
    return bucket_totals(previous_window_for(period, now), steps, _date, _steps)


def average_steps(period: str, buckets: Sequence[int], now: datetime) -> int:
    """
    Week: mean over the days elapsed so far (Monday..today).
    Month / year: total divided by the full bucket count, elapsed or not.
    """
    if not buckets:
        return 0

    if period == WEEK:
        divisor = elapsed_week_days(now)
        total = sum(buckets[:divisor])
    else:
        divisor = len(buckets)
        total = sum(buckets)

    return int(total // divisor)


def best_day(week_buckets: Sequence[int]) -> str:
    best_index = 0
    best_value = 0
    for i, value in enumerate(week_buckets):
        if value > best_value:
            best_value = value
            best_index = i
    return DAY_NAMES[best_index]


def activity_totals(period: str, activities: Iterable, now: datetime):
    """(count, duration minutes, calories) of sessions since the period start."""
    start = period_start(period, now)
    count = duration = calories = 0

    for activity in activities:
        when = activity.date
        if when is None or as_datetime(when) < start:
            continue
        count += 1
        duration += int(activity.duration_minutes or 0)
        calories += int(activity.calories_burned or 0)

    return count, duration, calories


def compose_activity_stats(period: str, steps: Sequence, activities: Sequence, now: datetime) -> StatsReport:
    period = normalize_period(period)
    steps = list(steps)

    current = step_buckets(period, steps, now)
    previous = previous_step_buckets(period, steps, now)
    this_week = current if period == WEEK else step_buckets(WEEK, steps, now)

    count, duration, calories = activity_totals(period, activities, now)

    return StatsReport(
        average_steps=average_steps(period, current, now),
        trend_percentage_text=trend_percentage(current, previous),
        best_day_name=best_day(this_week),
        total_activity_count=count,
        total_duration_minutes=duration,
        total_calories_burned=calories,
    )
