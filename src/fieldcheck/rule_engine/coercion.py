"""Shared value coercion: numbers, dates, text, and equality."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as dateutil_parser

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_RADIX_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def to_number(value: Any) -> float:
    """Convert a scalar to a float, returning NaN when it has no numeric reading."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.copysign(math.inf, value)
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if text == "":
        return 0.0
    if _DECIMAL_RE.match(text):
        return float(text)
    if _RADIX_RE.match(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf
    return _INFINITY.get(text, math.nan)


def is_finite_number(value: Any) -> bool:
    return math.isfinite(to_number(value))


def to_datetime(value: Any) -> datetime | None:
    """Parse a date or date-time string; naive values are taken as UTC."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    # Numeric strings are numbers, not dates.
    if text == "" or _DECIMAL_RE.match(text):
        return None
    try:
        parsed = dateutil_parser.parse(text)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_date_like(value: Any) -> bool:
    return to_datetime(value) is not None


def format_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer():
        return str(int(number))
    return repr(number)


def to_text(value: Any) -> str:
    """Stringify a record value the way it appears in messages and pattern checks."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def is_blank(value: Any) -> bool:
    """True for None and the empty string (whitespace is not blank)."""
    return value is None or value == ""


def is_truthy(value: Any) -> bool:
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def loose_equals(left: Any, right: Any) -> bool:
    """Equality with numeric coercion between numbers, booleans and strings."""
    if left is None or right is None:
        return left is None and right is None
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    numeric = (bool, int, float)
    if isinstance(left, numeric) or isinstance(right, numeric):
        if isinstance(left, (*numeric, str)) and isinstance(right, (*numeric, str)):
            return to_number(left) == to_number(right)
    return left == right


def strict_equals(left: Any, right: Any) -> bool:
    """Equality without coercion; a boolean never equals a number."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    return type(left) is type(right) and left == right
