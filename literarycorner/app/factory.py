from __future__ import annotations

import logging
from datetime import datetime

from flask import Flask, render_template, request
from werkzeug.exceptions import HTTPException

from literarycorner.app.config import Config
from literarycorner.app.extensions import cors
from literarycorner.app.common.errors import ApiError, json_error, wants_json
from literarycorner.app.common.request_context import echo_request_id, init_request_id
from literarycorner.app.api.register import register_api_blueprints
from literarycorner.app.cli import cli_bp
from literarycorner.app.ui import ui_bp

NAVIGATION = [
    ("Home", "ui.home"),
    ("Catalog", "ui.catalog"),
    ("About", "ui.about"),
    ("Blog", "ui.blog"),
    ("Contact", "ui.contact"),
]

FOOTER_CATEGORIES = [
    ("Classic Literature", "Classic"),
    ("Fiction", "Fiction"),
    ("Romance", "Romance"),
    ("Science Fiction", "Science Fiction"),
]


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    # Extensions
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    app.after_request(echo_request_id)

    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    # Pages + API
    app.register_blueprint(ui_bp)
    register_api_blueprints(app)

    # CLI (flask check-data)
    app.register_blueprint(cli_bp)

    @app.context_processor
    def inject_layout():
        """Header/footer data for every template."""
        return {
            "site_name": app.config["SITE_NAME"],
            "site_url": app.config["SITE_URL"],
            "navigation": NAVIGATION,
            "footer_categories": FOOTER_CATEGORIES,
            "current_year": datetime.now().year,
        }

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return json_error(err.status_code, err.code, err.message, err.details)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = err.code or 500
        if wants_json():
            return json_error(status, "http_error", err.description or err.name, {"name": err.name})
        if status == 404:
            return render_template("404.html"), 404
        return render_template("error.html", error=err), status

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception on %s", request.path)
        if wants_json():
            return json_error(500, "internal_error", "Internal server error")
        return render_template("error.html", error=None), 500

    return app
