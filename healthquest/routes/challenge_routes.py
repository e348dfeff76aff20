# healthquest/routes/challenge_routes.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..core.challenges import normalize_kind
from ..services import challenge_service

challenges_bp = Blueprint("challenges", __name__)


@challenges_bp.route("", methods=["GET"])
@jwt_required()
def list_challenges():
    """Challenges created in the last 24 hours."""
    user_id = int(get_jwt_identity())
    rows = challenge_service.get_user_challenges(user_id)
    return jsonify({"challenges": [c.to_dict() for c in rows]}), 200


@challenges_bp.route("/generate", methods=["GET"])
@jwt_required()
def generate_challenges():
    user_id = int(get_jwt_identity())
    rows = challenge_service.generate_daily_challenges(user_id)
    return jsonify({"challenges": [c.to_dict() for c in rows]}), 200


@challenges_bp.route("/level", methods=["GET"])
@jwt_required()
def user_level():
    user_id = int(get_jwt_identity())
    level = challenge_service.get_user_level(user_id)
    return jsonify({"level": level.to_dict()}), 200


@challenges_bp.route("/progress", methods=["POST"])
@jwt_required()
def challenge_progress():
    """
    JSON body:
    {
      "kind": "steps",   # steps | activity_duration | sleep_hours | sleep_quality | hydration
      "amount": 600      # >= 0
    }
    """
    user_id = int(get_jwt_identity())
    data = request.get_json(silent=True) or {}

    kind = normalize_kind(data.get("kind"))
    if kind is None:
        return jsonify({"message": "kind is required and must be a known challenge kind"}), 400

    try:
        amount = int(data.get("amount"))
    except (TypeError, ValueError):
        return jsonify({"message": "amount must be an integer"}), 400

    if amount < 0:
        return jsonify({"message": "amount must be non-negative"}), 400

    challenge_service.apply_challenge_progress(user_id, kind, amount)
    level = challenge_service.get_user_level(user_id)
    return jsonify({"level": level.to_dict()}), 200
