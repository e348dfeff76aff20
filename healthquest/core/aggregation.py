# healthquest/core/aggregation.py
from typing import Callable, Iterable, List

from .periods import PeriodWindow, as_datetime


def _bucketed(window: PeriodWindow, records: Iterable, date_of: Callable, value_of: Callable):
    for record in records:
        when = date_of(record)
        if when is None:
            continue
        when = as_datetime(when)
        if not window.contains(when):
            continue
        yield window.index_of(when), value_of(record)


def bucket_totals(
    window: PeriodWindow,
    records: Iterable,
    date_of: Callable,
    value_of: Callable,
) -> List:
    """
    Sum `value_of(record)` per bucket for records dated inside `window`.

    Returns `window.bucket_count` values; buckets with no records stay 0.
    """
    values = [0] * window.bucket_count
    for index, value in _bucketed(window, records, date_of, value_of):
        values[index] += value
    return values


def bucket_means(
    window: PeriodWindow,
    records: Iterable,
    date_of: Callable,
    value_of: Callable,
) -> List[float]:
    """Per-bucket mean rounded to one decimal (sleep hours, sleep quality)."""
    sums = [0.0] * window.bucket_count
    counts = [0] * window.bucket_count
    for index, value in _bucketed(window, records, date_of, value_of):
        sums[index] += value
        counts[index] += 1

    return [
        round(total / count, 1) if count else 0.0
        for total, count in zip(sums, counts)
    ]
