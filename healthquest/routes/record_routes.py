# healthquest/routes/record_routes.py
from datetime import datetime
from typing import Any, Optional

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..services import records_service

records_bp = Blueprint("records", __name__)


# ------------------------------
# Helpers
# ------------------------------
def _parse_dt(v: Any) -> Optional[datetime]:
    if not v:
        return None
    try:
        return datetime.fromisoformat(str(v))
    except ValueError:
        return None


def _number(v: Any) -> Optional[float]:
    try:
        value = float(v)
    except (TypeError, ValueError):
        return None
    return value if value >= 0 else None


# ------------------------------
# POST /api/records/steps
# { "date": "2026-10-19", "steps": 8450, "duration_minutes": 70 }
# ------------------------------
@records_bp.route("/steps", methods=["POST"])
@jwt_required()
def log_steps():
    user_id = int(get_jwt_identity())
    data = request.get_json(silent=True) or {}

    when = _parse_dt(data.get("date"))
    steps = _number(data.get("steps"))
    duration = _number(data.get("duration_minutes", 0))

    if when is None or steps is None or duration is None:
        return jsonify({"message": "date, steps and duration_minutes are required"}), 400

    record = records_service.log_daily_steps(user_id, when, int(steps), int(duration))
    return jsonify({"steps": record.to_dict()}), 201


# ------------------------------
# POST /api/records/activities
# { "date": "...", "activity_kind": "running", "duration_minutes": 45 }
# ------------------------------
@records_bp.route("/activities", methods=["POST"])
@jwt_required()
def log_activity():
    user_id = int(get_jwt_identity())
    data = request.get_json(silent=True) or {}

    when = _parse_dt(data.get("date"))
    kind = (data.get("activity_kind") or "").strip().lower()
    duration = _number(data.get("duration_minutes"))
    description = (data.get("description") or "").strip() or None

    if when is None or not kind or duration is None:
        return jsonify({"message": "date, activity_kind and duration_minutes are required"}), 400

    record = records_service.log_activity(user_id, when, kind, duration, description)
    return jsonify({"activity": record.to_dict()}), 201


# ------------------------------
# POST /api/records/sleep
# { "start_time": "...", "end_time": "...", "quality": 82 }
# ------------------------------
@records_bp.route("/sleep", methods=["POST"])
@jwt_required()
def log_sleep():
    user_id = int(get_jwt_identity())
    data = request.get_json(silent=True) or {}

    start_time = _parse_dt(data.get("start_time"))
    end_time = _parse_dt(data.get("end_time"))
    quality = _number(data.get("quality", 0))
    comment = (data.get("comment") or "").strip() or None

    if start_time is None or end_time is None or quality is None:
        return jsonify({"message": "start_time, end_time and quality are required"}), 400

    if end_time <= start_time:
        return jsonify({"message": "end_time must be after start_time"}), 400

    if quality > 100:
        return jsonify({"message": "quality must be between 0 and 100"}), 400

    record = records_service.log_sleep(user_id, start_time, end_time, int(quality), comment)
    return jsonify({"sleep": record.to_dict()}), 201


# ------------------------------
# POST /api/records/water
# { "date": "...", "quantity_liters": 0.25 }
# ------------------------------
@records_bp.route("/water", methods=["POST"])
@jwt_required()
def log_water():
    user_id = int(get_jwt_identity())
    data = request.get_json(silent=True) or {}

    when = _parse_dt(data.get("date"))
    quantity = _number(data.get("quantity_liters"))

    if when is None or quantity is None:
        return jsonify({"message": "date and quantity_liters are required"}), 400

    record = records_service.log_hydration(user_id, when, quantity)
    return jsonify({"water": record.to_dict()}), 201
