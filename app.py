# app.py
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config.config import Config
from db.database import Database, get_database
from db.user_store import UserStore
from utils.errors import DirectoryError
from routes.auth import bp as auth_bp
from routes.profiles import bp as profiles_bp


def _configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.logger.setLevel(level)


def create_app(overrides: dict = None):
    app = Flask(__name__)

    # Load config values from Config, then any explicit overrides (tests)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    _configure_logging(app)

    # CORS
    CORS(
        app,
        origins=app.config["ALLOWED_ORIGINS"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        supports_credentials=True,
    )

    # One Database per app; nothing global
    database = Database(app=app)
    app.extensions["user_store"] = UserStore(database)
    try:
        database.connect()
    except Exception:
        app.logger.exception("Failed to connect to database; data endpoints will answer 503")

    # Ensure DB schema exists and apply safe auto-migrations (adds missing tables/columns)
    if database.connected:
        try:
            database.auto_migrate()
        except Exception:
            app.logger.exception("auto_migrate failed, falling back to init_db()")
            database.init_db()

    # register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(profiles_bp)

    @app.before_request
    def log_request():
        if app.config.get("LOG_REQUESTS"):
            app.logger.info(
                "%s %s - Origin: %s",
                request.method,
                request.full_path.rstrip("?"),
                request.headers.get("Origin", "no-origin"),
            )

    @app.errorhandler(DirectoryError)
    def handle_directory_error(error):
        return jsonify({"message": error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception("Unhandled error: %s", error)
        return jsonify({"message": "Unexpected server error."}), 500

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({"status": "ok"})

    @app.route("/health", methods=["GET"])
    def health():
        """Returns 200 if the database answers a SELECT 1, otherwise 503."""
        if get_database(app).ping():
            return jsonify({"status": "ok"})
        return jsonify({"status": "unavailable"}), 503

    return app


if __name__ == "__main__":
    app = create_app()
    try:
        app.run(host=Config.APP_HOST, port=Config.APP_PORT, debug=Config.DEBUG)
    finally:
        get_database(app).close()
