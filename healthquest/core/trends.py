# healthquest/core/trends.py
import math
from dataclasses import dataclass, field
from typing import List, Sequence

# below this previous-period total the ratio is meaningless
MIN_PREVIOUS_TOTAL = 1000
MAX_TREND_PCT = 95


@dataclass
class TrendReport:
    labels: List[str]
    values: List
    unit: str
    extra: dict = field(default_factory=dict)

    def to_dict(self):
        data = {
            "labels": list(self.labels),
            "values": list(self.values),
            "unit": self.unit,
        }
        data.update(self.extra)
        return data


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded towards +inf (-2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def trend_percentage(current: Sequence, previous: Sequence) -> str:
    """
    Signed percentage change between two periods, e.g. "+12%" or "-40%".

    Clamped to [-95, 95]. A sparse previous period (< 1000) yields "+0%".
    """
    cur_total = sum(current)
    prev_total = sum(previous)

    if prev_total < MIN_PREVIOUS_TOTAL:
        return "+0%"

    pct = round_half_up((cur_total - prev_total) / prev_total * 100)
    pct = max(-MAX_TREND_PCT, min(pct, MAX_TREND_PCT))

    return f"{'+' if pct >= 0 else ''}{pct}%"
