# healthquest/__init__.py

from flask import Flask, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager

from config import Config

db = SQLAlchemy()
jwt = JWTManager()


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)

    # CORS: allow the mobile app (and others) to call /api/*
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    # -----------------------------
    # JWT error handlers
    # -----------------------------
    @jwt.unauthorized_loader
    def unauthorized_callback(reason):
        return (
            jsonify(
                {
                    "message": "Missing or invalid auth token",
                    "error": reason,
                }
            ),
            401,
        )

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        return (
            jsonify(
                {
                    "message": "Invalid auth token",
                    "error": reason,
                }
            ),
            422,
        )

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"message": "Token has expired"}), 401

    # -----------------------------
    # Domain error handlers
    # -----------------------------
    from .errors import InvalidPeriod, UserNotFound

    @app.errorhandler(InvalidPeriod)
    def invalid_period(err):
        return jsonify({"message": str(err), "error": "invalid_period"}), 400

    @app.errorhandler(UserNotFound)
    def user_not_found(err):
        return jsonify({"message": "user not found"}), 404

    # -----------------------------
    # IMPORT BLUEPRINTS (all routes)
    # -----------------------------
    from .routes.stats_routes import stats_bp
    from .routes.trend_routes import trends_bp
    from .routes.challenge_routes import challenges_bp
    from .routes.record_routes import records_bp

    # -----------------------------
    # REGISTER BLUEPRINTS
    # -----------------------------
    app.register_blueprint(stats_bp, url_prefix="/api/stats")
    app.register_blueprint(trends_bp, url_prefix="/api/trends")
    app.register_blueprint(challenges_bp, url_prefix="/api/challenges")
    app.register_blueprint(records_bp, url_prefix="/api/records")

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    # -----------------------------
    # DB init
    # -----------------------------
    from .models import user, records, gamification  # noqa: F401

    with app.app_context():
        db.create_all()

    return app
