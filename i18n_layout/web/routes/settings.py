"""Settings management API routes."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, jsonify, request

import i18n_layout.config as config
from i18n_layout.logger import get_logger

settings_bp = Blueprint("settings", __name__)
logger = get_logger(__name__)


@settings_bp.get("/")
def get_settings():
    """Return current configuration with default values merged."""
    return jsonify({
        "config": config.load_config(),
        "meta": {"log_modes": list(config.LOG_MODES)},
    })


@settings_bp.put("/")
def update_settings():
    """Update log mode and accepted source extensions."""
    data: Dict[str, Any] = request.get_json(silent=True) or {}
    new_config = data.get("config")
    if not isinstance(new_config, dict):
        return jsonify({"error": "config is required"}), 400

    current_config = config.load_config()

    if "log_mode" in new_config:
        log_mode = new_config["log_mode"]
        if log_mode not in config.LOG_MODES:
            return jsonify({"error": f"Invalid log_mode, expected one of: {', '.join(config.LOG_MODES)}"}), 400
        current_config["log_mode"] = log_mode

    if "source_extensions" in new_config:
        extensions = new_config["source_extensions"]
        if (
            not isinstance(extensions, list)
            or not extensions
            or not all(isinstance(ext, str) and ext.startswith(".") and len(ext) > 1 for ext in extensions)
        ):
            return jsonify({"error": "source_extensions must be a non-empty list like [\".json\", \".arb\"]"}), 400
        current_config["source_extensions"] = extensions

    try:
        config.save_config(current_config)
    except OSError:
        logger.exception("Failed to save settings")
        return jsonify({"error": "Failed to save settings"}), 500

    logger.info("Settings updated")
    return jsonify({"config": current_config})
