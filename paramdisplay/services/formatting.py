"""Choose how a parameter value is rendered for display."""

from __future__ import annotations

import logging
from typing import Any, Optional

from paramdisplay.services.date_formatting import DateFormatter
from paramdisplay.services.value_formatter import FormatOptions, ValueFormatter
from paramdisplay.utils.parameters import (
    NUMBER_BASE_TYPE,
    TEXT_BASE_TYPE,
    Field,
    Parameter,
    ParameterKind,
    classify_parameter,
    is_number_parameter,
)

logger = logging.getLogger("paramdisplay")

DEFAULT_MAXIMUM_FRACTION_DIGITS = 20


def infer_base_type(parameter: Parameter) -> str:
    if is_number_parameter(parameter):
        return NUMBER_BASE_TYPE
    return TEXT_BASE_TYPE


class ParameterFormatter:
    """Render parameter values through the date or value formatter.

    The formatter is stateless: every call reads only its arguments and the
    collaborators it was built with.
    """

    def __init__(
        self,
        value_formatter: Optional[ValueFormatter] = None,
        date_formatter: Optional[DateFormatter] = None,
        maximum_fraction_digits: int = DEFAULT_MAXIMUM_FRACTION_DIGITS,
    ):
        self.value_formatter = value_formatter or ValueFormatter()
        self.date_formatter = date_formatter or DateFormatter()
        self.maximum_fraction_digits = maximum_fraction_digits

    def format(self, value: Any, parameter: Parameter) -> Any:
        kind = classify_parameter(parameter)
        logger.debug("Formatting parameter %s as %s", parameter.id, kind.value)

        if kind is ParameterKind.DATE:
            return self.date_formatter.format(value, parameter)

        # field filters mapped to native query variables are left as-is
        if kind is ParameterKind.FIELD_FILTER_VARIABLE:
            return value

        if kind is ParameterKind.FIELD_FILTER:
            first_field = parameter.fields[0]
            # with several target fields we can't tell which one the value
            # belongs to, so it can't be remapped
            remap = len(parameter.fields) == 1
            return self.value_formatter.format(
                value,
                FormatOptions(
                    column=first_field,
                    maximum_fraction_digits=self.maximum_fraction_digits,
                    remap=remap,
                ),
            )

        # unbound field filters, numbers and text: infer from the parameter type
        return self._format_with_inferred_type(value, parameter)

    def _format_with_inferred_type(self, value: Any, parameter: Parameter) -> str:
        column = Field(base_type=infer_base_type(parameter))
        return self.value_formatter.format(
            value,
            FormatOptions(column=column, maximum_fraction_digits=self.maximum_fraction_digits),
        )


def format_parameter_value(
    value: Any,
    parameter: Parameter,
    formatter: Optional[ParameterFormatter] = None,
) -> Any:
    """Return the display text for ``value`` bound to ``parameter``."""
    return (formatter or ParameterFormatter()).format(value, parameter)


__all__ = [
    "DEFAULT_MAXIMUM_FRACTION_DIGITS",
    "ParameterFormatter",
    "format_parameter_value",
    "infer_base_type",
]
