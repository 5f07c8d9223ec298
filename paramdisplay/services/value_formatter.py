"""Generic value-to-text rendering."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext
from typing import Any, Optional

from paramdisplay.utils.parameters import Field

NUMERIC_BASE_TYPES = {
    "type/Number",
    "type/Integer",
    "type/BigInteger",
    "type/Float",
    "type/Decimal",
}

DEFAULT_NULL_DISPLAY = "(empty)"


@dataclass(frozen=True)
class FormatOptions:
    column: Field
    maximum_fraction_digits: int
    # None -> option not supplied
    remap: Optional[bool] = None


def _to_decimal(value: Any) -> Optional[Decimal]:
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        # repr gives the shortest round-tripping form (0.1 -> "0.1")
        value = repr(value)
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def format_number(value: Any, maximum_fraction_digits: int) -> Optional[str]:
    """Group thousands and cap fraction digits; ``None`` if not numeric."""
    number = _to_decimal(value)
    if number is None:
        return None

    digits = number.as_tuple()
    if isinstance(digits.exponent, int) and -digits.exponent > maximum_fraction_digits:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(digits.digits) + maximum_fraction_digits)
            number = number.quantize(Decimal(1).scaleb(-maximum_fraction_digits), rounding=ROUND_HALF_EVEN)

    text = format(number, ",f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


class ValueFormatter:
    """Render scalar parameter values using column metadata."""

    def __init__(self, null_display: str = DEFAULT_NULL_DISPLAY):
        self.null_display = null_display

    def format(self, value: Any, options: FormatOptions) -> str:
        if value is None:
            return self.null_display

        if isinstance(value, (list, tuple)):
            return ", ".join(self.format(v, options) for v in value)

        if options.remap:
            label = options.column.remapped_value(value)
            if label is not None:
                return str(label)

        if isinstance(value, bool):
            return "true" if value else "false"

        if options.column.base_type in NUMERIC_BASE_TYPES:
            text = format_number(value, options.maximum_fraction_digits)
            if text is not None:
                return text

        return str(value)


__all__ = [
    "DEFAULT_NULL_DISPLAY",
    "FormatOptions",
    "NUMERIC_BASE_TYPES",
    "ValueFormatter",
    "format_number",
]
