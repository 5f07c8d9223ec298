# parameters.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

NUMBER_BASE_TYPE = "type/Number"
TEXT_BASE_TYPE = "type/Text"


@dataclass(frozen=True)
class Field:
    """Metadata for a data field a parameter can target."""

    base_type: str
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    display_name: Optional[str] = None
    semantic_type: Optional[str] = None
    # stored code -> human-readable label
    remapping: Dict[Any, str] = field(default_factory=dict)

    def remapped_value(self, value: Any) -> Optional[str]:
        if not self.remapping:
            return None
        try:
            if value in self.remapping:
                return self.remapping[value]
        except TypeError:  # unhashable value
            return None
        by_text = {str(k): v for k, v in self.remapping.items()}
        return by_text.get(str(value))


@dataclass(frozen=True)
class Parameter:
    id: str
    name: str
    # declared type string, e.g. "date/range", "number/=", "category"
    type: str
    slug: Optional[str] = None
    # None -> not a field filter (raw query variable)
    fields: Optional[List[Field]] = None
    has_only_field_targets: Optional[bool] = None


class ParameterKind(Enum):
    DATE = "date"
    FIELD_FILTER_VARIABLE = "field-filter-variable"
    FIELD_FILTER = "field-filter-with-fields"
    FIELD_FILTER_UNBOUND = "field-filter-without-fields"
    NUMBER = "number"
    TEXT = "text"


ParameterOrType = Union[Parameter, str, None]


def _split_type(parameter: ParameterOrType) -> List[str]:
    if isinstance(parameter, str):
        type_string = parameter
    else:
        type_string = getattr(parameter, "type", None) or ""
    return type_string.split("/", 1)


def get_parameter_type(parameter: ParameterOrType) -> str:
    """Return the type prefix: ``"date/range"`` -> ``"date"``."""
    return _split_type(parameter)[0]


def get_parameter_subtype(parameter: ParameterOrType) -> Optional[str]:
    parts = _split_type(parameter)
    return parts[1] if len(parts) > 1 else None


def is_date_parameter(parameter: ParameterOrType) -> bool:
    return get_parameter_type(parameter) == "date"


def is_number_parameter(parameter: ParameterOrType) -> bool:
    return get_parameter_type(parameter) == "number"


def is_field_filter_parameter(parameter: Parameter) -> bool:
    return parameter.fields is not None


def classify_parameter(parameter: Parameter) -> ParameterKind:
    """Map a parameter onto the closed set of formatting kinds.

    Order matters: a date parameter is DATE even when it carries fields, and a
    field filter that is also bound to a query variable is
    FIELD_FILTER_VARIABLE regardless of how many fields it has.
    """
    if is_date_parameter(parameter):
        return ParameterKind.DATE

    if is_field_filter_parameter(parameter):
        if parameter.has_only_field_targets is False:
            return ParameterKind.FIELD_FILTER_VARIABLE
        if parameter.fields:
            return ParameterKind.FIELD_FILTER
        return ParameterKind.FIELD_FILTER_UNBOUND

    if is_number_parameter(parameter):
        return ParameterKind.NUMBER
    return ParameterKind.TEXT


# -------- payload helpers --------
def field_from_dict(payload: Mapping[str, Any]) -> Field:
    if not isinstance(payload, Mapping):
        raise ValueError(f"field must be an object, got {type(payload).__name__}")
    base_type = payload.get("base_type")
    if not base_type:
        raise ValueError("field is missing 'base_type'")

    raw_remapping = payload.get("remapping") or {}
    if isinstance(raw_remapping, Mapping):
        remapping = dict(raw_remapping)
    elif isinstance(raw_remapping, (list, tuple)) and all(
        isinstance(pair, (list, tuple)) and len(pair) == 2 for pair in raw_remapping
    ):
        # [[code, label], ...] pairs as sent by the frontend
        try:
            remapping = {code: label for code, label in raw_remapping}
        except TypeError:  # unhashable code
            raise ValueError("field 'remapping' codes must be scalars") from None
    else:
        raise ValueError("field 'remapping' must be an object or a list of [code, label] pairs")

    return Field(
        base_type=str(base_type),
        id=payload.get("id"),
        name=payload.get("name"),
        display_name=payload.get("display_name"),
        semantic_type=payload.get("semantic_type"),
        remapping=remapping,
    )


def parameter_from_dict(payload: Mapping[str, Any]) -> Parameter:
    """Build a ``Parameter`` from a JSON-style mapping.

    Accepts both ``hasOnlyFieldTargets`` and ``has_only_field_targets``.
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"parameter must be an object, got {type(payload).__name__}")
    type_string = payload.get("type")
    if not type_string or not isinstance(type_string, str):
        raise ValueError("parameter is missing 'type'")

    raw_fields = payload.get("fields")
    fields: Optional[List[Field]] = None
    if raw_fields is not None:
        if not isinstance(raw_fields, (list, tuple)):
            raise ValueError("parameter 'fields' must be a list")
        fields = [field_from_dict(f) for f in raw_fields]

    targets = payload.get("hasOnlyFieldTargets", payload.get("has_only_field_targets"))
    if targets is not None and not isinstance(targets, bool):
        raise ValueError("'hasOnlyFieldTargets' must be a boolean")

    slug = payload.get("slug")
    return Parameter(
        id=str(payload.get("id") or slug or type_string),
        name=str(payload.get("name") or slug or type_string),
        type=type_string,
        slug=slug,
        fields=fields,
        has_only_field_targets=targets,
    )


__all__ = [
    "Field",
    "NUMBER_BASE_TYPE",
    "Parameter",
    "ParameterKind",
    "TEXT_BASE_TYPE",
    "classify_parameter",
    "field_from_dict",
    "get_parameter_subtype",
    "get_parameter_type",
    "is_date_parameter",
    "is_field_filter_parameter",
    "is_number_parameter",
    "parameter_from_dict",
]
