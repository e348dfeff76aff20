# healthquest/models/records.py
from datetime import datetime
from .. import db


# -----------------------------
# Steps (one row per user per day)
# -----------------------------
class DailySteps(db.Model):
    __tablename__ = "daily_steps"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    date = db.Column(db.DateTime, nullable=False)
    steps = db.Column(db.Integer, nullable=False, default=0)
    duration_minutes = db.Column(db.Integer, nullable=False, default=0)
    calories_burned = db.Column(db.Float, nullable=False, default=0)

    user = db.relationship("User", backref="daily_steps")

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat() if self.date else None,
            "steps": self.steps,
            "duration_minutes": self.duration_minutes,
            "calories_burned": self.calories_burned,
        }


# -----------------------------
# Activity sessions
# -----------------------------
class ActivitySession(db.Model):
    __tablename__ = "activity_sessions"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    date = db.Column(db.DateTime, nullable=False)
    activity_kind = db.Column(db.String(50), nullable=False, default="walking")
    description = db.Column(db.String(255))
    duration_minutes = db.Column(db.Float, nullable=False, default=0)
    calories_burned = db.Column(db.Float, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship("User", backref="activity_sessions")

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat() if self.date else None,
            "activity_kind": self.activity_kind,
            "description": self.description,
            "duration_minutes": self.duration_minutes,
            "calories_burned": self.calories_burned,
        }


# -----------------------------
# Sleep
# -----------------------------
class SleepEntry(db.Model):
    __tablename__ = "sleep_entries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    start_time = db.Column(db.DateTime, nullable=False)
    end_time = db.Column(db.DateTime, nullable=False)
    hours = db.Column(db.Float, nullable=False, default=0)
    quality = db.Column(db.Integer, nullable=False, default=0)  # 0..100
    comment = db.Column(db.String(255))

    user = db.relationship("User", backref="sleep_entries")

    def to_dict(self):
        return {
            "id": self.id,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "hours": self.hours,
            "quality": self.quality,
            "comment": self.comment,
        }


# -----------------------------
# Hydration
# -----------------------------
class HydrationEntry(db.Model):
    __tablename__ = "hydration_entries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    date = db.Column(db.DateTime, nullable=False)
    quantity_liters = db.Column(db.Float, nullable=False, default=0)

    user = db.relationship("User", backref="hydration_entries")

    @property
    def quantity_ml(self) -> int:
        return int((self.quantity_liters or 0) * 1000)

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat() if self.date else None,
            "quantity_liters": self.quantity_liters,
        }
