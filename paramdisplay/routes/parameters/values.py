"""Parameter value formatting endpoint."""

from __future__ import annotations

from flask import current_app, jsonify, request

from . import bp, get_formatter
from .helpers import read_format_request


@bp.route("/parameters/format", methods=["POST"])
def format_value():
    payload = request.get_json(silent=True)
    try:
        parameter, values, many = read_format_request(payload)
    except ValueError as exc:
        current_app.logger.info("Rejected format request: %s", exc)
        return jsonify({"ok": False, "error": str(exc)}), 400

    formatter = get_formatter()
    try:
        rendered = [formatter.format(value, parameter) for value in values]
    except Exception as exc:
        current_app.logger.exception("Formatting failed for parameter %s", parameter.id)
        return jsonify({"ok": False, "error": str(exc)}), 500

    if many:
        return jsonify({"values": rendered})
    return jsonify({"value": rendered[0]})
