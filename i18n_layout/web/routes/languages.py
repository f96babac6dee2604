"""Language code API routes."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from i18n_layout import language_codes as lc

languages_bp = Blueprint("languages", __name__)


@languages_bp.get("/normalize")
def normalize():
    """Return the canonical form of a standard language code."""
    code = request.args.get("code", "")
    if not code:
        return jsonify({"error": "code is required"}), 400

    return jsonify({"code": code, "normalized": lc.normalize_language_code(code)})


@languages_bp.get("/validate")
def validate():
    """Check a language code against the standard or ARB grammar."""
    code = request.args.get("code", "")
    grammar_name = request.args.get("format", lc.STANDARD.name)
    grammar = lc.GRAMMARS.get(grammar_name)
    if grammar is None:
        return jsonify({"error": f"Unknown format {grammar_name!r}, expected one of: {', '.join(lc.GRAMMARS)}"}), 400

    return jsonify({
        "code": code,
        "format": grammar.name,
        "valid": lc.validate_language_code(code, grammar),
    })
