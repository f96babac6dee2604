"""Flask application configuration and blueprint registration."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask, jsonify

from i18n_layout.config import initialize_app
from i18n_layout.logger import get_logger

from .routes.projects import projects_bp
from .routes.languages import languages_bp
from .routes.settings import settings_bp

logger = get_logger(__name__)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        overrides: Flask config values applied after the defaults, e.g.
                   {"TESTING": True}
    """
    initialize_app()

    app = Flask(__name__)
    if overrides:
        app.config.update(overrides)

    # Ensure JSON responses keep Unicode data.
    app.json.ensure_ascii = False

    register_blueprints(app)
    register_default_routes(app)

    return app


def register_blueprints(app: Flask) -> None:
    """Register Flask blueprints."""
    app.register_blueprint(projects_bp, url_prefix="/api/projects")
    app.register_blueprint(languages_bp, url_prefix="/api/languages")
    app.register_blueprint(settings_bp, url_prefix="/api/settings")


def register_default_routes(app: Flask) -> None:
    """Register the health route and JSON error handlers."""

    @app.get("/health")
    def health_check():
        logger.debug("Health check requested")
        return jsonify({"status": "ok"})

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(e):
        logger.exception("Internal server error: %s", e)
        return jsonify({"error": "Unexpected error occurred"}), 500
