# healthquest/routes/stats_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..services import stats_service

stats_bp = Blueprint("stats", __name__)


@stats_bp.route("/activity", methods=["GET"])
@stats_bp.route("/activity/<period>", methods=["GET"])
@jwt_required()
def activity_stats(period="week"):
    """
    Returns:
    {
      "average_steps": 6540,
      "trend_percentage_text": "+12%",
      "best_day_name": "Tuesday",
      "total_activity_count": 4,
      "total_duration_minutes": 185,
      "total_calories_burned": 1420
    }
    """
    user_id = int(get_jwt_identity())
    report = stats_service.get_activity_stats(user_id, period)
    return jsonify(report.to_dict()), 200


@stats_bp.route("/sleep", methods=["GET"])
@stats_bp.route("/sleep/<period>", methods=["GET"])
@jwt_required()
def sleep_stats(period=None):
    """
    Without a period the whole history is summarized.
    {
      "average_duration_hours": 7.4,
      "average_quality": 78.5,
      "best_sleep_day": "Saturday",
      "worst_sleep_day": "Tuesday",
      "average_bedtime": "23:40",
      "average_wake_time": "07:05"
    }
    """
    user_id = int(get_jwt_identity())
    stats = stats_service.get_sleep_stats(user_id, period)
    return jsonify(stats.to_dict()), 200


@stats_bp.route("/water", methods=["GET"])
@stats_bp.route("/water/<period>", methods=["GET"])
@jwt_required()
def hydration_stats(period=None):
    user_id = int(get_jwt_identity())
    stats = stats_service.get_hydration_stats(user_id, period)
    return jsonify(stats.to_dict()), 200
