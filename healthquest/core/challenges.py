# healthquest/core/challenges.py
"""
Daily challenges: generation plan and progress updates.

Nothing here touches the database. `plan_daily_challenges` tells the caller
what to delete and what to create; `apply_progress` mutates the challenge
objects it is given and returns the ones that just completed, so the caller
can award experience and persist.

Existing challenges are duck-typed: anything with `kind`, `target_value`,
`current_value`, `completed`, `created_at`, `completed_at` and `exp_reward`.
"""
import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from .periods import as_datetime, start_of_day

STEPS = "steps"
ACTIVITY_DURATION = "activity_duration"
SLEEP_HOURS = "sleep_hours"
SLEEP_QUALITY = "sleep_quality"
HYDRATION = "hydration"

CHALLENGE_KINDS = (STEPS, ACTIVITY_DURATION, SLEEP_HOURS, SLEEP_QUALITY, HYDRATION)

EXP_REWARDS = {
    STEPS: 20,
    ACTIVITY_DURATION: 25,
    SLEEP_HOURS: 15,
    SLEEP_QUALITY: 30,
    HYDRATION: 15,
}

DAILY_CHALLENGE_COUNT = 3
DEFAULT_STEPS_BASELINE = 8000
STEPS_BONUS_RANGE = 2000
STEPS_LOOKBACK_DAYS = 7
DEFAULT_SLEEP_HOURS = 8.0
ACTIVITY_MINUTES_RANGE = (30, 60)
SLEEP_QUALITY_RANGE = (70, 90)
HYDRATION_ML_RANGE = (2000, 3000)


@dataclass
class NewChallenge:
    kind: str
    description: str
    target_value: int
    exp_reward: int
    created_at: datetime
    current_value: int = 0
    completed: bool = False
    completed_at: Optional[datetime] = None


@dataclass
class ChallengePlan:
    stale: list = field(default_factory=list)
    todays: list = field(default_factory=list)
    created: List[NewChallenge] = field(default_factory=list)

    @property
    def result(self) -> list:
        return list(self.created) if self.created else list(self.todays)


def normalize_kind(kind) -> Optional[str]:
    value = (kind or "").strip().lower().replace("-", "_") if isinstance(kind, str) else None
    return value if value in CHALLENGE_KINDS else None


# ------------------------------
# Targets
# ------------------------------
def steps_baseline(steps_history: Iterable, now: datetime) -> int:
    cutoff = now - timedelta(days=STEPS_LOOKBACK_DAYS)
    total = count = 0
    for record in steps_history:
        if as_datetime(record.date) > cutoff:
            total += record.steps
            count += 1
    if count == 0:
        return DEFAULT_STEPS_BASELINE
    return total // count


def sleep_target_hours(sleep_objective_hours) -> float:
    if sleep_objective_hours and sleep_objective_hours > 0:
        return round(float(sleep_objective_hours), 1)
    return DEFAULT_SLEEP_HOURS


def _build(kind: str, steps_history, sleep_objective_hours, now: datetime, rng) -> NewChallenge:
    if kind == STEPS:
        target = steps_baseline(steps_history, now) + rng.randrange(STEPS_BONUS_RANGE)
        description = f"Walk {target} steps today"
    elif kind == ACTIVITY_DURATION:
        target = rng.randint(*ACTIVITY_MINUTES_RANGE)
        description = f"Do {target} minutes of exercise"
    elif kind == SLEEP_HOURS:
        hours = sleep_target_hours(sleep_objective_hours)
        target = int(hours * 60)
        description = f"Sleep {hours} hours tonight"
    elif kind == SLEEP_QUALITY:
        target = rng.randint(*SLEEP_QUALITY_RANGE)
        description = f"Reach a sleep quality of {target}%"
    elif kind == HYDRATION:
        target = rng.randint(*HYDRATION_ML_RANGE)
        description = f"Drink {target} ml of water today"
    else:
        raise ValueError(f"unknown challenge kind: {kind}")

    return NewChallenge(
        kind=kind,
        description=description,
        target_value=target,
        exp_reward=EXP_REWARDS[kind],
        created_at=now,
    )


# ------------------------------
# Generation
# ------------------------------
def is_stale(challenge, now: datetime) -> bool:
    return not challenge.completed and challenge.created_at < now - timedelta(days=1)


def plan_daily_challenges(
    existing: Iterable,
    steps_history: Iterable,
    sleep_objective_hours,
    now: datetime,
    rng: Optional[random.Random] = None,
) -> ChallengePlan:
    """
    1. stale = incomplete challenges created before now - 1 day
    2. if 3+ challenges were created today, keep them and stop
    3. otherwise pick 3..5 distinct kinds at random and build one each
    """
    rng = rng or random.Random()
    existing = list(existing)

    stale = [c for c in existing if is_stale(c, now)]
    remaining = [c for c in existing if not is_stale(c, now)]

    today = start_of_day(now)
    todays = [c for c in remaining if c.created_at >= today]
    plan = ChallengePlan(stale=stale, todays=todays)

    if len(todays) >= DAILY_CHALLENGE_COUNT:
        return plan

    kinds = list(CHALLENGE_KINDS)
    rng.shuffle(kinds)
    n = rng.randint(DAILY_CHALLENGE_COUNT, len(kinds))

    steps_history = list(steps_history)
    plan.created = [
        _build(kind, steps_history, sleep_objective_hours, now, rng)
        for kind in kinds[:n]
    ]
    return plan


# ------------------------------
# Progress
# ------------------------------
def apply_progress(challenges: Iterable, kind: str, amount: int, now: datetime) -> list:
    """
    Add `amount` to every active challenge of `kind`.
    Returns the challenges that completed because of this event.
    """
    if amount < 0:
        raise ValueError("progress amount must be non-negative")

    just_completed = []
    for challenge in challenges:
        if challenge.kind != kind or challenge.completed:
            continue
        challenge.current_value = (challenge.current_value or 0) + amount
        if challenge.current_value >= challenge.target_value:
            challenge.completed = True
            challenge.completed_at = now
            just_completed.append(challenge)
    return just_completed
