# healthquest/models/user.py
from datetime import datetime
from .. import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    username = db.Column(db.String(50), unique=True, nullable=False)
    display_name = db.Column(db.String(100))

    gender = db.Column(db.Enum("male", "female", "other", name="gender_enum"))
    birth_date = db.Column(db.Date)
    height_cm = db.Column(db.Numeric(5, 2))
    weight_kg = db.Column(db.Numeric(5, 2))

    # daily objectives
    sleep_objective_hours = db.Column(db.Float, nullable=False, default=0)
    water_objective_liters = db.Column(db.Float, nullable=False, default=2.5)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    level = db.relationship(
        "Level", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "username": self.username,
            "display_name": self.display_name,
            "gender": self.gender,
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "height_cm": float(self.height_cm) if self.height_cm is not None else None,
            "weight_kg": float(self.weight_kg) if self.weight_kg is not None else None,
            "sleep_objective_hours": self.sleep_objective_hours,
            "water_objective_liters": self.water_objective_liters,
        }
