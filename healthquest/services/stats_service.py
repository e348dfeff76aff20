# healthquest/services/stats_service.py
"""
Read-only analytics: activity, sleep and hydration stats plus per-period
trend series.

Each function validates the period first, then loads the user's records and
hands them to the pure functions in `healthquest.core`.
"""
from operator import attrgetter

from ..core.aggregation import bucket_means, bucket_totals
from ..core.hydration import HydrationStats, compose_hydration_stats
from ..core.periods import bucket_labels, normalize_period, window_for
from ..core.sleep import SleepStats, compose_sleep_stats
from ..core.stats import StatsReport, compose_activity_stats
from ..core.trends import TrendReport
from ..models.records import ActivitySession, DailySteps, HydrationEntry, SleepEntry
from .common import require_user, utcnow


def _steps_for(user_id):
    return DailySteps.query.filter_by(user_id=user_id).all()


def _activities_for(user_id):
    return ActivitySession.query.filter_by(user_id=user_id).all()


def _series(period, records, date_of, value_of, now, unit, mean=False):
    window = window_for(period, now)
    fold = bucket_means if mean else bucket_totals
    values = fold(window, records, date_of, value_of)
    return TrendReport(labels=bucket_labels(period, now), values=values, unit=unit)


# ------------------------------
# Stats
# ------------------------------
def get_activity_stats(user_id, period="week", now=None) -> StatsReport:
    period = normalize_period(period)
    now = now or utcnow()
    user = require_user(user_id)

    return compose_activity_stats(
        period,
        _steps_for(user.id),
        _activities_for(user.id),
        now,
    )


def get_sleep_stats(user_id, period=None, now=None) -> SleepStats:
    """Whole history when `period` is None, else nights ending since the period start."""
    if period is not None:
        period = normalize_period(period)
    now = now or utcnow()
    user = require_user(user_id)

    return compose_sleep_stats(
        SleepEntry.query.filter_by(user_id=user.id).all(),
        now,
        period,
    )


def get_hydration_stats(user_id, period=None, now=None) -> HydrationStats:
    if period is not None:
        period = normalize_period(period)
    now = now or utcnow()
    user = require_user(user_id)

    return compose_hydration_stats(
        HydrationEntry.query.filter_by(user_id=user.id).all(),
        user.water_objective_liters,
        now,
        period,
    )


# ------------------------------
# Trends
# ------------------------------
def get_activity_trends(user_id, period, now=None) -> TrendReport:
    period = normalize_period(period)
    now = now or utcnow()
    user = require_user(user_id)

    return _series(
        period,
        _activities_for(user.id),
        attrgetter("date"),
        lambda a: int(a.duration_minutes or 0),
        now,
        "minutes",
    )


def get_steps_trends(user_id, period, now=None) -> TrendReport:
    period = normalize_period(period)
    now = now or utcnow()
    user = require_user(user_id)

    return _series(
        period,
        _steps_for(user.id),
        attrgetter("date"),
        attrgetter("steps"),
        now,
        "steps",
    )


def get_sleep_trends(user_id, period, now=None) -> TrendReport:
    """Average hours slept per bucket; a night counts on the day it ends."""
    period = normalize_period(period)
    now = now or utcnow()
    user = require_user(user_id)

    return _series(
        period,
        SleepEntry.query.filter_by(user_id=user.id).all(),
        attrgetter("end_time"),
        attrgetter("hours"),
        now,
        "hours",
        mean=True,
    )


def get_sleep_quality_trends(user_id, period, now=None) -> TrendReport:
    period = normalize_period(period)
    now = now or utcnow()
    user = require_user(user_id)

    return _series(
        period,
        SleepEntry.query.filter_by(user_id=user.id).all(),
        attrgetter("end_time"),
        attrgetter("quality"),
        now,
        "quality",
        mean=True,
    )


def get_hydration_trends(user_id, period, now=None) -> TrendReport:
    """Milliliters per bucket, plus average / max / min and the daily objective."""
    period = normalize_period(period)
    now = now or utcnow()
    user = require_user(user_id)

    report = _series(
        period,
        HydrationEntry.query.filter_by(user_id=user.id).all(),
        attrgetter("date"),
        attrgetter("quantity_ml"),
        now,
        "ml",
    )

    logged = [v for v in report.values if v > 0]
    report.extra = {
        "average": sum(logged) // len(logged) if logged else 0,
        "max": max(report.values) if report.values else 0,
        "min": min(logged) if logged else 0,
        "objective": int((user.water_objective_liters or 0) * 1000),
    }
    return report
