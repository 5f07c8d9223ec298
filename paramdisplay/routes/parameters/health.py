"""Healthcheck endpoint."""

from __future__ import annotations

from flask import jsonify

from . import bp, get_formatter


@bp.route("/health", methods=["GET"])
def health():
    formatter = get_formatter()
    return (
        jsonify(
            {
                "ok": True,
                "max_fraction_digits": formatter.maximum_fraction_digits,
            }
        ),
        200,
    )
