"""Application factory for the parameter display service."""

from __future__ import annotations

import logging

from typing import Any, Mapping, Optional, Union

from flask import Flask

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("paramdisplay")

from .config import Config
from .routes.parameters import bp as parameters_bp
from .services.date_formatting import DateFormatter
from .services.formatting import ParameterFormatter
from .services.value_formatter import ValueFormatter


def create_app(
    config_object: Optional[Union[str, Mapping[str, Any], type]] = None,
) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)

    app.config.from_object(Config)
    if isinstance(config_object, Mapping):
        app.config.from_mapping(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)

    logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    value_formatter = ValueFormatter(null_display=app.config["NULL_DISPLAY"])
    date_formatter = DateFormatter()
    formatter = ParameterFormatter(
        value_formatter=value_formatter,
        date_formatter=date_formatter,
        maximum_fraction_digits=int(app.config["MAX_FRACTION_DIGITS"]),
    )

    app.extensions["value_formatter"] = value_formatter
    app.extensions["date_formatter"] = date_formatter
    app.extensions["parameter_formatter"] = formatter

    app.register_blueprint(parameters_bp)

    logger.info(
        "Parameter display ready (max fraction digits=%s)",
        formatter.maximum_fraction_digits,
    )
    return app


__all__ = ["create_app"]
