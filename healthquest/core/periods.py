# healthquest/core/periods.py
"""
Calendar windows for week / month / year aggregation.

Weeks start on Monday. Every window is inclusive on both ends, with the end
set to the last millisecond of the period (23:59:59.999).
"""
import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List

WEEK = "week"
MONTH = "month"
YEAR = "year"
PERIODS = (WEEK, MONTH, YEAR)

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
WEEK_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

_END_OF_DAY = time(23, 59, 59, 999000)


class InvalidPeriod(ValueError):
    def __init__(self, period):
        super().__init__(f"period must be 'week', 'month' or 'year' (got {period!r})")
        self.period = period


@dataclass(frozen=True)
class PeriodWindow:
    period: str
    start: datetime
    end: datetime
    bucket_count: int

    def contains(self, when: datetime) -> bool:
        return self.start <= when <= self.end

    def index_of(self, when: datetime) -> int:
        if self.period == WEEK:
            return when.weekday()
        if self.period == MONTH:
            return when.day - 1
        return when.month - 1


def normalize_period(period) -> str:
    value = (period or "").strip().lower() if isinstance(period, str) else None
    if value not in PERIODS:
        raise InvalidPeriod(period)
    return value


def as_datetime(when) -> datetime:
    # plain dates are treated as midnight
    if isinstance(when, datetime):
        return when
    return datetime.combine(when, time.min)


def _day_start(d: date) -> datetime:
    return datetime.combine(d, time.min)


def _day_end(d: date) -> datetime:
    return datetime.combine(d, _END_OF_DAY)


def _week_window(ref: date) -> PeriodWindow:
    monday = ref - timedelta(days=ref.weekday())
    return PeriodWindow(WEEK, _day_start(monday), _day_end(monday + timedelta(days=6)), 7)


def _month_window(year: int, month: int) -> PeriodWindow:
    days = calendar.monthrange(year, month)[1]
    return PeriodWindow(
        MONTH,
        _day_start(date(year, month, 1)),
        _day_end(date(year, month, days)),
        days,
    )


def _year_window(year: int) -> PeriodWindow:
    return PeriodWindow(YEAR, _day_start(date(year, 1, 1)), _day_end(date(year, 12, 31)), 12)


def window_for(period: str, reference) -> PeriodWindow:
    """Current window of `period` containing `reference`."""
    period = normalize_period(period)
    ref = as_datetime(reference).date()

    if period == WEEK:
        return _week_window(ref)
    if period == MONTH:
        return _month_window(ref.year, ref.month)
    return _year_window(ref.year)


def previous_window_for(period: str, reference) -> PeriodWindow:
    """The window immediately before the current one, same period kind."""
    period = normalize_period(period)
    ref = as_datetime(reference).date()

    if period == WEEK:
        return _week_window(ref - timedelta(days=7))
    if period == MONTH:
        if ref.month == 1:
            return _month_window(ref.year - 1, 12)
        return _month_window(ref.year, ref.month - 1)
    return _year_window(ref.year - 1)


def period_start(period: str, reference) -> datetime:
    return window_for(period, reference).start


def start_of_day(reference) -> datetime:
    return _day_start(as_datetime(reference).date())


def elapsed_week_days(reference) -> int:
    """Days since Monday of the current week, today included (Sunday = 7)."""
    return as_datetime(reference).weekday() + 1


def bucket_labels(period: str, reference) -> List[str]:
    window = window_for(period, reference)
    if window.period == WEEK:
        return list(WEEK_LABELS)
    if window.period == MONTH:
        return [str(day) for day in range(1, window.bucket_count + 1)]
    return list(MONTH_LABELS)
