"""Project API routes - structure detection, language scan and target paths."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from flask import Blueprint, jsonify, request

import i18n_layout.config as config
from i18n_layout.logger import get_logger
from i18n_layout.project.paths import (
    InvalidLanguageCodeError,
    get_unique_file_path,
    is_supported_source_file,
    plan_target_files,
    resolve_output_path,
)
from i18n_layout.project.scanner import scan_project

projects_bp = Blueprint("projects", __name__)
logger = get_logger(__name__)

ALL_LANGUAGES = "all"


def _error(message: str, status: int = 400):
    return jsonify({"error": message}), status


def _source_file_from(data: Dict[str, Any]) -> Tuple[Optional[Path], Optional[str]]:
    """Validate the source_file field; returns (path, error message)."""
    file_path_str = data.get("source_file")
    if not isinstance(file_path_str, str) or not file_path_str.strip():
        return None, "source_file is required"

    source_file = Path(file_path_str.strip())
    if not source_file.exists():
        return None, f"Source file does not exist: {source_file}"

    if not source_file.is_file():
        return None, f"Source path is not a file: {source_file}"

    extensions = config.get_source_extensions()
    if not is_supported_source_file(source_file, extensions):
        return None, f"Unsupported file type {source_file.suffix!r}, expected one of: {', '.join(extensions)}"

    return source_file, None


def _serialize_scan(scan_result) -> Dict[str, Any]:
    return {
        "source_file": str(scan_result.source_file),
        "structure": scan_result.structure.to_dict(),
        "languages": [
            {"language_code": language.language_code, "path": str(language.path)}
            for language in scan_result.detected
        ],
    }


@projects_bp.post("/structure")
def get_project_structure():
    """Return the detected structure and the languages found next to a source file."""
    data: Dict[str, Any] = request.get_json(silent=True) or {}
    source_file, error = _source_file_from(data)
    if error:
        logger.warning("Structure request rejected: %s", error)
        return _error(error)

    try:
        scan_result = scan_project(source_file)
    except Exception:
        logger.exception("Error detecting structure for %s", source_file)
        return _error("Failed to detect project structure", 500)

    return jsonify(_serialize_scan(scan_result))


@projects_bp.post("/languages")
def get_project_languages():
    """Return the languages already present in the project, source language excluded."""
    data: Dict[str, Any] = request.get_json(silent=True) or {}
    source_file, error = _source_file_from(data)
    if error:
        logger.warning("Languages request rejected: %s", error)
        return _error(error)

    try:
        scan_result = scan_project(source_file)
    except Exception:
        logger.exception("Error scanning languages for %s", source_file)
        return _error("Failed to detect project languages", 500)

    return jsonify(
        {
            "source_language": scan_result.structure.source_language,
            "languages": scan_result.language_codes,
        }
    )


@projects_bp.post("/targets")
def plan_targets():
    """
    Compute target files for one or more languages.

    Body:
        source_file: Source localization file
        target_languages: Language code, list of codes, or "all" for every
                          language detected in the project
        overwrite: Update existing files in place instead of writing copies
    """
    data: Dict[str, Any] = request.get_json(silent=True) or {}
    source_file, error = _source_file_from(data)
    if error:
        logger.warning("Target request rejected: %s", error)
        return _error(error)

    requested = data.get("target_languages")
    overwrite = data.get("overwrite", False)
    if not isinstance(overwrite, bool):
        return _error("overwrite must be true or false")

    if requested == ALL_LANGUAGES:
        target_languages: List[str] = scan_project(source_file).language_codes
        if not target_languages:
            return _error("No languages detected in project")
    elif isinstance(requested, str) and requested:
        target_languages = [requested]
    elif isinstance(requested, list) and requested and all(isinstance(code, str) for code in requested):
        target_languages = requested
    else:
        return _error("target_languages must be a language code, a list of codes or \"all\"")

    try:
        plans = plan_target_files(source_file, target_languages)
    except InvalidLanguageCodeError as err:
        return jsonify({"error": str(err), "language_code": err.language_code}), 400
    except OSError:
        logger.exception("Error planning target files for %s", source_file)
        return _error("Failed to prepare target files", 500)

    targets = [
        {
            "language_code": plan.language_code,
            "target_path": str(plan.path),
            "exists": plan.exists,
            "output_path": str(resolve_output_path(plan.path, overwrite)),
        }
        for plan in plans
    ]
    logger.info("Planned %s target(s) for %s (overwrite=%s)", len(targets), source_file, overwrite)
    return jsonify({"overwrite": overwrite, "targets": targets})


@projects_bp.post("/unique-path")
def unique_path():
    """Return a collision-free variant of a path."""
    data: Dict[str, Any] = request.get_json(silent=True) or {}
    path_str = data.get("path")
    if not isinstance(path_str, str) or not path_str.strip():
        return _error("path is required")

    return jsonify({"path": str(get_unique_file_path(path_str.strip()))})
