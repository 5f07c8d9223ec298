"""Parameter blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("parameters", __name__)


def get_formatter():
    from flask import current_app

    return current_app.extensions["parameter_formatter"]


from . import health, values  # noqa: E402,F401

__all__ = ["bp", "get_formatter"]
