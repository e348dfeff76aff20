# healthquest/services/records_service.py
"""
Logging of raw records. A record logged for today also feeds the matching
daily challenge progress event; back-dated records are stored only.
"""
from flask import current_app

from .. import db
from ..core import challenges as kinds
from ..core.calories import calories_burned
from ..core.periods import start_of_day
from ..models.records import ActivitySession, DailySteps, HydrationEntry, SleepEntry
from .challenge_service import apply_challenge_progress
from .common import commit, require_user, utcnow


def _is_today(when, now) -> bool:
    return start_of_day(when) == start_of_day(now)


def log_daily_steps(user_id, when, steps: int, duration_minutes: int = 0, now=None) -> DailySteps:
    now = now or utcnow()
    user = require_user(user_id)
    weight = float(user.weight_kg) if user.weight_kg is not None else None

    record = DailySteps(
        user_id=user.id,
        date=when,
        steps=steps,
        duration_minutes=duration_minutes,
        calories_burned=calories_burned("walking", duration_minutes, weight, user.gender),
    )
    db.session.add(record)
    commit("records/steps")

    if _is_today(when, now):
        apply_challenge_progress(user.id, kinds.STEPS, steps, now=now)
    return record


def log_activity(user_id, when, activity_kind: str, duration_minutes: float, description=None, now=None) -> ActivitySession:
    now = now or utcnow()
    user = require_user(user_id)
    weight = float(user.weight_kg) if user.weight_kg is not None else None

    record = ActivitySession(
        user_id=user.id,
        date=when,
        activity_kind=activity_kind,
        description=description,
        duration_minutes=duration_minutes,
        calories_burned=calories_burned(activity_kind, duration_minutes, weight, user.gender),
    )
    db.session.add(record)
    commit("records/activity")

    current_app.logger.info(
        f"[records] user_id={user.id} activity={activity_kind} "
        f"minutes={duration_minutes} kcal={record.calories_burned}"
    )
    if _is_today(when, now):
        apply_challenge_progress(user.id, kinds.ACTIVITY_DURATION, int(duration_minutes), now=now)
    return record


def log_sleep(user_id, start_time, end_time, quality: int, comment=None, now=None) -> SleepEntry:
    """The night counts for the day it ends on."""
    now = now or utcnow()
    user = require_user(user_id)
    seconds = (end_time - start_time).total_seconds()

    record = SleepEntry(
        user_id=user.id,
        start_time=start_time,
        end_time=end_time,
        hours=round(seconds / 3600.0, 2),
        quality=quality,
        comment=comment,
    )
    db.session.add(record)
    commit("records/sleep")

    if _is_today(end_time, now):
        apply_challenge_progress(user.id, kinds.SLEEP_HOURS, int(seconds // 60), now=now)
        apply_challenge_progress(user.id, kinds.SLEEP_QUALITY, quality, now=now)
    return record


def log_hydration(user_id, when, quantity_liters: float, now=None) -> HydrationEntry:
    now = now or utcnow()
    user = require_user(user_id)

    record = HydrationEntry(user_id=user.id, date=when, quantity_liters=quantity_liters)
    db.session.add(record)
    commit("records/water")

    if _is_today(when, now):
        apply_challenge_progress(user.id, kinds.HYDRATION, record.quantity_ml, now=now)
    return record
