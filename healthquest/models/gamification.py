# healthquest/models/gamification.py
from datetime import datetime
from .. import db
from ..core.challenges import CHALLENGE_KINDS
from ..core.leveling import BASE_EXP_TO_NEXT_LEVEL


# -----------------------------
# Daily challenges
# -----------------------------
class Challenge(db.Model):
    __tablename__ = "challenges"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    description = db.Column(db.String(255))
    kind = db.Column(db.Enum(*CHALLENGE_KINDS, name="challenge_kind"), nullable=False)
    target_value = db.Column(db.Integer, nullable=False)
    current_value = db.Column(db.Integer, nullable=False, default=0)
    exp_reward = db.Column(db.Integer, nullable=False)
    completed = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    completed_at = db.Column(db.DateTime)

    user = db.relationship("User", backref="challenges")

    def to_dict(self):
        return {
            "id": self.id,
            "description": self.description,
            "kind": self.kind,
            "target_value": self.target_value,
            "current_value": self.current_value,
            "exp_reward": self.exp_reward,
            "completed": self.completed,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }


# -----------------------------
# Level (one per user)
# -----------------------------
class Level(db.Model):
    __tablename__ = "levels"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, unique=True)
    current_level = db.Column(db.Integer, nullable=False, default=1)
    current_exp = db.Column(db.Integer, nullable=False, default=0)
    exp_to_next_level = db.Column(
        db.Integer, nullable=False, default=BASE_EXP_TO_NEXT_LEVEL
    )

    user = db.relationship("User", back_populates="level")

    def to_dict(self):
        return {
            "current_level": self.current_level,
            "current_exp": self.current_exp,
            "exp_to_next_level": self.exp_to_next_level,
        }
