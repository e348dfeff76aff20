# healthquest/core/__init__.py
from .hydration import HydrationStats, compose_hydration_stats
from .periods import InvalidPeriod, PeriodWindow, previous_window_for, window_for
from .sleep import SleepStats, compose_sleep_stats
from .stats import StatsReport, compose_activity_stats
from .trends import TrendReport, trend_percentage

__all__ = [
    "HydrationStats",
    "InvalidPeriod",
    "PeriodWindow",
    "SleepStats",
    "StatsReport",
    "TrendReport",
    "compose_activity_stats",
    "compose_hydration_stats",
    "compose_sleep_stats",
    "previous_window_for",
    "trend_percentage",
    "window_for",
]
