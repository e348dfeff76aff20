# healthquest/core/hydration.py
"""
Hydration summary: today / yesterday, daily averages, progress towards the
daily objective and the streak of days with enough water.

Entries need `.date` and `.quantity_ml`.
"""
from collections import defaultdict
from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, Optional

from .periods import MONTH, WEEK, as_datetime, normalize_period, period_start

# a day counts towards the streak once 30% of the objective is reached
STREAK_THRESHOLD_RATIO = 0.3


@dataclass
class HydrationStats:
    today_ml: int
    yesterday_ml: int
    week_average_ml: int
    month_average_ml: int
    objective_ml: int
    percentage_today: int
    streak_days: int

    def to_dict(self):
        return asdict(self)


def daily_totals(entries: Iterable) -> Dict[date, int]:
    totals = defaultdict(int)
    for entry in entries:
        totals[as_datetime(entry.date).date()] += int(entry.quantity_ml or 0)
    return dict(totals)


def average_of_logged_days(totals: Dict[date, int], first_day: date, last_day: date) -> int:
    """Mean over the days in [first_day, last_day] that have any water logged."""
    logged = []
    day = first_day
    while day <= last_day:
        if totals.get(day, 0) > 0:
            logged.append(totals[day])
        day += timedelta(days=1)
    return sum(logged) // len(logged) if logged else 0


def streak_days(totals: Dict[date, int], objective_ml: int, today: date) -> int:
    """
    Consecutive days up to yesterday at or above the threshold, plus today
    if today already qualifies. No objective means no streak.
    """
    threshold = int(objective_ml * STREAK_THRESHOLD_RATIO)
    if threshold <= 0:
        return 0

    streak = 0
    day = today - timedelta(days=1)
    while totals.get(day, 0) >= threshold:
        streak += 1
        day -= timedelta(days=1)

    if totals.get(today, 0) >= threshold:
        streak += 1
    return streak


def percentage_of_objective(consumed_ml: int, objective_ml: int) -> int:
    if objective_ml <= 0:
        return 0
    return min(100, consumed_ml * 100 // objective_ml)


def compose_hydration_stats(
    entries: Iterable,
    objective_liters,
    now: datetime,
    period: Optional[str] = None,
) -> HydrationStats:
    entries = list(entries)
    if period is not None:
        start = period_start(normalize_period(period), now)
        entries = [e for e in entries if as_datetime(e.date) >= start]

    totals = daily_totals(entries)
    today = as_datetime(now).date()
    objective_ml = int((objective_liters or 0) * 1000)
    today_ml = totals.get(today, 0)

    return HydrationStats(
        today_ml=today_ml,
        yesterday_ml=totals.get(today - timedelta(days=1), 0),
        week_average_ml=average_of_logged_days(totals, period_start(WEEK, now).date(), today),
        month_average_ml=average_of_logged_days(totals, period_start(MONTH, now).date(), today),
        objective_ml=objective_ml,
        percentage_today=percentage_of_objective(today_ml, objective_ml),
        streak_days=streak_days(totals, objective_ml, today),
    )
