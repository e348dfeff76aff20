# healthquest/services/challenge_service.py
from datetime import timedelta
from typing import List

from flask import current_app

from .. import db
from ..core.challenges import apply_progress, normalize_kind, plan_daily_challenges
from ..core.leveling import BASE_EXP_TO_NEXT_LEVEL, add_experience
from ..models.gamification import Challenge, Level
from ..models.records import DailySteps
from .common import commit, require_user, utcnow


def _level_for(user) -> Level:
    """The user's level row, created at level 1 the first time it is needed."""
    if user.level is None:
        user.level = Level(
            current_level=1,
            current_exp=0,
            exp_to_next_level=BASE_EXP_TO_NEXT_LEVEL,
        )
        db.session.add(user.level)
    return user.level


# ------------------------------
# Level
# ------------------------------
def get_user_level(user_id) -> Level:
    user = require_user(user_id)
    if user.level is None:
        # not persisted: reading the level is side-effect free
        return Level(
            user_id=user.id,
            current_level=1,
            current_exp=0,
            exp_to_next_level=BASE_EXP_TO_NEXT_LEVEL,
        )
    return user.level


def award_experience(user, exp: int) -> Level:
    level = _level_for(user)
    before = level.current_level
    gained = add_experience(level, exp)
    if gained:
        current_app.logger.info(
            f"[challenges] user_id={user.id} level up {before} -> {level.current_level}"
        )
    return level


# ------------------------------
# Daily challenges
# ------------------------------
def generate_daily_challenges(user_id, now=None, rng=None) -> List[Challenge]:
    now = now or utcnow()
    user = require_user(user_id, for_update=True)

    existing = Challenge.query.filter_by(user_id=user.id).all()
    steps_history = DailySteps.query.filter_by(user_id=user.id).all()

    plan = plan_daily_challenges(
        existing,
        steps_history,
        user.sleep_objective_hours,
        now,
        rng=rng,
    )

    for stale in plan.stale:
        db.session.delete(stale)
    if plan.stale:
        current_app.logger.info(
            f"[challenges] user_id={user.id} removed {len(plan.stale)} stale challenges"
        )

    if not plan.created:
        commit("challenges/generate")
        return plan.todays

    created = []
    for draft in plan.created:
        challenge = Challenge(
            user_id=user.id,
            description=draft.description,
            kind=draft.kind,
            target_value=draft.target_value,
            current_value=draft.current_value,
            exp_reward=draft.exp_reward,
            completed=draft.completed,
            created_at=draft.created_at,
        )
        db.session.add(challenge)
        created.append(challenge)

    commit("challenges/generate")
    current_app.logger.info(
        f"[challenges] user_id={user.id} generated kinds={[c.kind for c in created]}"
    )
    return created


def get_user_challenges(user_id, now=None) -> List[Challenge]:
    """Everything created in the last 24 hours, completed or not."""
    now = now or utcnow()
    user = require_user(user_id)

    return (
        Challenge.query.filter(
            Challenge.user_id == user.id,
            Challenge.created_at > now - timedelta(days=1),
        )
        .order_by(Challenge.created_at.asc(), Challenge.id.asc())
        .all()
    )


def apply_challenge_progress(user_id, kind, amount, now=None) -> None:
    """
    Advance every active challenge of `kind`; completed ones award their exp
    once. A kind with no active challenges is a no-op.
    """
    normalized = normalize_kind(kind)
    if normalized is None:
        raise ValueError(f"unknown challenge kind: {kind}")

    amount = int(amount)
    if amount < 0:
        raise ValueError("progress amount must be non-negative")

    now = now or utcnow()
    user = require_user(user_id, for_update=True)

    active = Challenge.query.filter_by(
        user_id=user.id, kind=normalized, completed=False
    ).all()

    for challenge in apply_progress(active, normalized, amount, now):
        current_app.logger.info(
            f"[challenges] user_id={user.id} completed challenge_id={challenge.id} "
            f"(+{challenge.exp_reward} exp)"
        )
        award_experience(user, challenge.exp_reward)

    commit("challenges/progress")
