"""Display text for date parameter values."""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping, Optional

import pandas as pd

from paramdisplay.utils.parameters import Parameter, get_parameter_subtype

RANGE_SEPARATOR = "~"

RELATIVE_SHORTCUTS: Dict[str, str] = {
    "thisday": "Today",
    "today": "Today",
    "yesterday": "Yesterday",
    "past1days": "Yesterday",
    "lastweek": "Last Week",
    "past1weeks": "Last Week",
    "lastmonth": "Last Month",
    "past1months": "Last Month",
    "lastyear": "Last Year",
    "past1years": "Last Year",
}

RELATIVE_RE = re.compile(r"^(past|next)(\d+)(minute|hour|day|week|month|quarter|year)s(~)?$")
THIS_RE = re.compile(r"^this(minute|hour|day|week|month|quarter|year)$")
MONTH_YEAR_RE = re.compile(r"^(\d{4})-(\d{1,2})$")
QUARTER_YEAR_RE = re.compile(r"^Q([1-4])-(\d{4})$")
EXCLUDE_RE = re.compile(r"^exclude-(hours|days|months|quarters)-(.+)$")
TIME_RE = re.compile(r"[T ]\d{1,2}:\d{2}")


def _parse(value: Any) -> Optional[pd.Timestamp]:
    if value is None or value == "":
        return None
    parsed = pd.to_datetime(value, errors="coerce")
    return parsed if pd.notna(parsed) else None


def _has_time(value: Any) -> bool:
    return isinstance(value, str) and TIME_RE.search(value) is not None


def _format_day(ts: pd.Timestamp) -> str:
    return f"{ts:%B} {ts.day}, {ts.year}"


def _format_time(ts: pd.Timestamp) -> str:
    hour = ts.hour % 12 or 12
    meridiem = "AM" if ts.hour < 12 else "PM"
    return f"{hour}:{ts.minute:02d} {meridiem}"


def format_single_date(value: Any) -> str:
    ts = _parse(value)
    if ts is None:
        return ""
    if _has_time(value):
        return f"{_format_day(ts)} {_format_time(ts)}"
    return _format_day(ts)


def _range_bounds(value: Any):
    if isinstance(value, Mapping):
        return value.get("start"), value.get("end")
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return value[0], value[1]
    if isinstance(value, str) and RANGE_SEPARATOR in value:
        start, end = value.split(RANGE_SEPARATOR, 1)
        return start, end
    return None, None


def format_date_range(value: Any) -> str:
    start, end = _range_bounds(value)
    start_text = format_single_date(start)
    end_text = format_single_date(end)
    if start_text and end_text:
        return f"{start_text} - {end_text}"
    return start_text or end_text


def format_month_year(value: Any) -> str:
    match = MONTH_YEAR_RE.match(str(value))
    if not match:
        return ""
    ts = _parse(f"{match.group(1)}-{int(match.group(2)):02d}-01")
    return f"{ts:%B} {ts.year}" if ts is not None else ""


def format_quarter_year(value: Any) -> str:
    match = QUARTER_YEAR_RE.match(str(value))
    if not match:
        return ""
    return f"Q{match.group(1)} {match.group(2)}"


def format_relative(value: Any) -> Optional[str]:
    """Return the label for a relative expression, ``None`` if not one."""
    text = str(value)
    if text in RELATIVE_SHORTCUTS:
        return RELATIVE_SHORTCUTS[text]

    match = THIS_RE.match(text)
    if match:
        return f"This {match.group(1).capitalize()}"

    match = RELATIVE_RE.match(text)
    if match:
        direction, count, unit, _ = match.groups()
        n = int(count)
        unit_label = unit.capitalize() if n == 1 else f"{unit.capitalize()}s"
        return f"{direction.capitalize()} {n} {unit_label}"
    return None


def _hour_label(hour: str) -> str:
    h = int(hour)
    return f"{h % 12 or 12} {'AM' if h < 12 else 'PM'}"


def format_exclusion(value: Any) -> Optional[str]:
    match = EXCLUDE_RE.match(str(value))
    if not match:
        return None
    unit, raw = match.groups()
    items: List[str] = raw.split("-")
    if unit == "hours":
        labels = [_hour_label(h) for h in items if h.isdigit()]
    elif unit == "quarters":
        labels = [f"Q{q}" for q in items]
    else:
        labels = items
    return "Exclude " + ", ".join(labels)


def format_all_options(value: Any) -> str:
    if not isinstance(value, str):
        return format_date_range(value)

    for candidate in (format_relative, format_exclusion):
        label = candidate(value)
        if label is not None:
            return label

    if value.startswith(RANGE_SEPARATOR):
        bound = format_single_date(value[1:])
        return f"Before {bound}" if bound else ""
    if value.endswith(RANGE_SEPARATOR):
        bound = format_single_date(value[:-1])
        return f"After {bound}" if bound else ""
    if RANGE_SEPARATOR in value:
        return format_date_range(value)
    if QUARTER_YEAR_RE.match(value):
        return format_quarter_year(value)
    if MONTH_YEAR_RE.match(value):
        return format_month_year(value)
    return format_single_date(value)


class DateFormatter:
    """Format date parameter values according to the parameter's subtype."""

    def __init__(self):
        self._by_subtype: Dict[str, Callable[[Any], Any]] = {
            "single": format_single_date,
            "range": format_date_range,
            "month-year": format_month_year,
            "quarter-year": format_quarter_year,
            "relative": lambda v: format_relative(v) or str(v),
            "all-options": format_all_options,
        }

    def format(self, value: Any, parameter: Parameter) -> Any:
        handler = self._by_subtype.get(get_parameter_subtype(parameter) or "")
        if handler is None:
            return value
        return handler(value)


__all__ = [
    "DateFormatter",
    "format_all_options",
    "format_date_range",
    "format_exclusion",
    "format_month_year",
    "format_quarter_year",
    "format_relative",
    "format_single_date",
]
