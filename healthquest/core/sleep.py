# healthquest/core/sleep.py
"""
Sleep summary over a period (or over the whole history when no period is
given).

Entries need `.start_time`, `.end_time`, `.hours` and `.quality`. A night
belongs to the day it ends on.
"""
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Iterable, Optional

from .periods import DAY_NAMES, as_datetime, normalize_period, period_start
from .trends import round_half_up

MINUTES_PER_DAY = 24 * 60
# bedtimes before noon belong to the night that started the day before
BEDTIME_WRAP_MINUTES = 12 * 60


@dataclass
class SleepStats:
    average_duration_hours: float
    average_quality: float
    best_sleep_day: str
    worst_sleep_day: str
    average_bedtime: str
    average_wake_time: str

    def to_dict(self):
        return asdict(self)


def _one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10.0


def _minutes_of_day(when: datetime) -> int:
    return when.hour * 60 + when.minute


def _clock(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def best_and_worst_day(entries) -> tuple:
    """Weekday names with the highest and lowest mean hours; ties go to the earlier weekday."""
    by_day = {}
    for entry in entries:
        by_day.setdefault(as_datetime(entry.end_time).weekday(), []).append(entry.hours or 0)

    days = sorted(by_day)
    means = {d: sum(by_day[d]) / len(by_day[d]) for d in days}
    best = max(days, key=means.get)
    worst = min(days, key=means.get)
    return DAY_NAMES[best], DAY_NAMES[worst]


def average_bedtime(entries) -> str:
    total = 0
    for entry in entries:
        minutes = _minutes_of_day(as_datetime(entry.start_time))
        if minutes < BEDTIME_WRAP_MINUTES:
            minutes += MINUTES_PER_DAY
        total += minutes

    avg = total // len(entries)
    if avg >= MINUTES_PER_DAY:
        avg -= MINUTES_PER_DAY
    return _clock(avg)


def average_wake_time(entries) -> str:
    total = sum(_minutes_of_day(as_datetime(e.end_time)) for e in entries)
    return _clock(total // len(entries))


def compose_sleep_stats(entries: Iterable, now: datetime, period: Optional[str] = None) -> SleepStats:
    entries = list(entries)
    if period is not None:
        start = period_start(normalize_period(period), now)
        entries = [e for e in entries if as_datetime(e.end_time) >= start]

    if not entries:
        return SleepStats(0.0, 0.0, "", "", "00:00", "00:00")

    n = len(entries)
    best, worst = best_and_worst_day(entries)

    return SleepStats(
        average_duration_hours=_one_decimal(sum(e.hours or 0 for e in entries) / n),
        average_quality=_one_decimal(sum(e.quality or 0 for e in entries) / n),
        best_sleep_day=best,
        worst_sleep_day=worst,
        average_bedtime=average_bedtime(entries),
        average_wake_time=average_wake_time(entries),
    )
