"""Shared helper functions for parameter routes."""

from __future__ import annotations

from typing import Any, List, Mapping, Tuple

from paramdisplay.utils.parameters import Parameter, parameter_from_dict


def read_format_request(payload: Any) -> Tuple[Parameter, List[Any], bool]:
    """Split a format request into ``(parameter, values, many)``.

    ``many`` is true when the caller sent a ``values`` list and expects a
    list back.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("request body must be a JSON object")
    if "parameter" not in payload:
        raise ValueError("request is missing 'parameter'")

    parameter = parameter_from_dict(payload["parameter"])

    if "values" in payload:
        values = payload["values"]
        if not isinstance(values, list):
            raise ValueError("'values' must be a list")
        return parameter, values, True
    if "value" not in payload:
        raise ValueError("request is missing 'value'")
    return parameter, [payload["value"]], False


__all__ = ["read_format_request"]
