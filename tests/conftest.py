"""Shared test fixtures for the HealthQuest backend test suite."""

import random
from datetime import datetime
from types import SimpleNamespace

import pytest
from flask_jwt_extended import create_access_token

from config import TestingConfig
from healthquest import create_app, db
from healthquest.models.records import ActivitySession, DailySteps, HydrationEntry, SleepEntry
from healthquest.models.user import User


# ── App / DB ────────────────────────────────────────────────────────────

@pytest.fixture
def app():
    """Fresh app + in-memory SQLite per test, with an app context pushed."""
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


# ── Time / randomness ───────────────────────────────────────────────────

@pytest.fixture
def frozen_now():
    """Fixed 'now': 2026-02-18T12:00:00, a Wednesday."""
    return datetime(2026, 2, 18, 12, 0, 0)


@pytest.fixture
def rng():
    return random.Random(1234)


# ── Plain records for the pure core ─────────────────────────────────────

@pytest.fixture
def steps_record():
    def _factory(when, steps, duration_minutes=0):
        return SimpleNamespace(date=when, steps=steps, duration_minutes=duration_minutes)
    return _factory


@pytest.fixture
def activity_record():
    def _factory(when, duration_minutes=30, calories_burned=100.0, activity_kind="running"):
        return SimpleNamespace(
            date=when,
            duration_minutes=duration_minutes,
            calories_burned=calories_burned,
            activity_kind=activity_kind,
        )
    return _factory


@pytest.fixture
def sleep_record():
    def _factory(start_time, end_time, hours, quality):
        return SimpleNamespace(start_time=start_time, end_time=end_time, hours=hours, quality=quality)
    return _factory


@pytest.fixture
def water_record():
    def _factory(when, quantity_ml):
        return SimpleNamespace(date=when, quantity_ml=quantity_ml)
    return _factory


# ── DB factories ────────────────────────────────────────────────────────

@pytest.fixture
def make_user(app):
    """
    Factory fixture that persists User rows with sensible defaults.

    Usage:
        user = make_user(weight_kg=70, sleep_objective_hours=7.5)
    """
    _counter = 0

    def _factory(**overrides):
        nonlocal _counter
        _counter += 1
        defaults = {
            "email": f"user{_counter}@example.com",
            "username": f"user{_counter}",
            "display_name": f"User {_counter}",
        }
        defaults.update(overrides)
        user = User(**defaults)
        db.session.add(user)
        db.session.commit()
        return user

    return _factory


@pytest.fixture
def user(make_user):
    return make_user(weight_kg=70, gender="male")


@pytest.fixture
def add_steps(app):
    def _add(user, when, steps, duration_minutes=0):
        row = DailySteps(user_id=user.id, date=when, steps=steps, duration_minutes=duration_minutes)
        db.session.add(row)
        db.session.commit()
        return row
    return _add


@pytest.fixture
def add_activity(app):
    def _add(user, when, duration_minutes=30, calories_burned=100.0, activity_kind="running"):
        row = ActivitySession(
            user_id=user.id,
            date=when,
            duration_minutes=duration_minutes,
            calories_burned=calories_burned,
            activity_kind=activity_kind,
        )
        db.session.add(row)
        db.session.commit()
        return row
    return _add


@pytest.fixture
def add_sleep(app):
    def _add(user, start_time, end_time, hours, quality):
        row = SleepEntry(
            user_id=user.id, start_time=start_time, end_time=end_time, hours=hours, quality=quality
        )
        db.session.add(row)
        db.session.commit()
        return row
    return _add


@pytest.fixture
def add_water(app):
    def _add(user, when, quantity_liters):
        row = HydrationEntry(user_id=user.id, date=when, quantity_liters=quantity_liters)
        db.session.add(row)
        db.session.commit()
        return row
    return _add


# ── Auth ────────────────────────────────────────────────────────────────

@pytest.fixture
def auth_headers(app):
    def _headers(user_or_id):
        identity = getattr(user_or_id, "id", user_or_id)
        token = create_access_token(identity=str(identity))
        return {"Authorization": f"Bearer {token}"}
    return _headers
