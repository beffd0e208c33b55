"""
Value coercion helpers shared by the rule library.

Request values arrive as raw strings (array-shaped fields are strings holding
serialized JSON). These helpers give the rules one consistent notion of
"absent", "numeric", "date" and "text".
"""

import json
import math
import re
from datetime import date, datetime, timezone
from typing import Any

from dateutil import parser as dateutil_parser

_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_RADIX_PATTERN = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}

# Fills the components a partial date string leaves out
DATE_DEFAULT = datetime(1970, 1, 1)


def is_absent(value: Any) -> bool:
    """
    Whether a value counts as not provided.

    None, False, the empty string, numeric zero and NaN are absent;
    anything else (including the string "0") is present.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


def to_number(value: Any) -> float | None:
    """
    Coerce a value to a float when it looks numeric.

    Args:
        value: Raw field value

    Returns:
        The numeric value, or None when the value is not numeric
        (blank strings are not numeric)
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return None if value != value else float(value)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if _DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    if _RADIX_PATTERN.fullmatch(text):
        return float(int(text, 0))
    return _INFINITY.get(text)


def format_number(number: float) -> str:
    """Render a number without a trailing ``.0`` for whole values."""
    if math.isfinite(number) and number.is_integer():
        return str(int(number))
    return str(number)


def as_text(value: Any) -> str | None:
    """
    Render a scalar as text for pattern rules.

    Strings pass through; numbers and booleans are rendered the way they
    appear in JSON. Other values (None, containers) have no text form.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(float(value))
    return None


def parse_date(value: Any) -> datetime | None:
    """
    Parse a value into a naive datetime.

    Components missing from a string come from DATE_DEFAULT, so "15" is
    1970-01-15 regardless of the current date. Timezone-aware results are
    converted to UTC and made naive so that any two parsed values can be
    compared.

    Returns:
        Parsed datetime, or None when the value is not a valid date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = dateutil_parser.parse(value, default=DATE_DEFAULT)
        except (ValueError, OverflowError):
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_json_array(value: Any) -> list | None:
    """
    Parse a string holding a serialized JSON array.

    Returns:
        The decoded list, or None when the value is not a string or does
        not decode to an array
    """
    if not isinstance(value, str):
        return None
    try:
        decoded = json.loads(value)
    except ValueError:
        return None
    return decoded if isinstance(decoded, list) else None
