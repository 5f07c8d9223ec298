"""Parameter value display package."""

from .config import Config  # noqa: F401
from .app import create_app  # noqa: F401
from .services.formatting import ParameterFormatter, format_parameter_value  # noqa: F401
from .utils.parameters import Field, Parameter  # noqa: F401

__all__ = [
    "Config",
    "Field",
    "Parameter",
    "ParameterFormatter",
    "create_app",
    "format_parameter_value",
]
