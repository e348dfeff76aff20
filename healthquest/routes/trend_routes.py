# healthquest/routes/trend_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from ..services import stats_service

trends_bp = Blueprint("trends", __name__)


# GET /api/trends/<metric>/<period>
#   { "labels": ["Mon", ...], "values": [..], "unit": "steps" }
@trends_bp.route("/activity/<period>", methods=["GET"])
@jwt_required()
def activity_trends(period):
    report = stats_service.get_activity_trends(int(get_jwt_identity()), period)
    return jsonify(report.to_dict()), 200


@trends_bp.route("/steps/<period>", methods=["GET"])
@jwt_required()
def steps_trends(period):
    report = stats_service.get_steps_trends(int(get_jwt_identity()), period)
    return jsonify(report.to_dict()), 200


@trends_bp.route("/sleep/<period>", methods=["GET"])
@jwt_required()
def sleep_trends(period):
    report = stats_service.get_sleep_trends(int(get_jwt_identity()), period)
    return jsonify(report.to_dict()), 200


@trends_bp.route("/sleep-quality/<period>", methods=["GET"])
@jwt_required()
def sleep_quality_trends(period):
    report = stats_service.get_sleep_quality_trends(int(get_jwt_identity()), period)
    return jsonify(report.to_dict()), 200


@trends_bp.route("/water/<period>", methods=["GET"])
@jwt_required()
def hydration_trends(period):
    # also carries average / max / min / objective
    report = stats_service.get_hydration_trends(int(get_jwt_identity()), period)
    return jsonify(report.to_dict()), 200
