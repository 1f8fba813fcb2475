"""Lenient coercion helpers for browser form payloads.

Form submissions arrive as loosely typed JSON: numbers may be strings,
optional fields may be empty strings. These helpers apply the same
leniency the web form expects: a field is missing when falsy, and
numbers are read from their leading numeric prefix.
"""

import math
import re
from typing import Any

_INT_PREFIX = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def is_missing(value: Any) -> bool:
    """True for None, False, empty strings, zero and NaN."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    return False


def form_fields(payload: Any) -> dict[str, Any]:
    """Submitted fields of a parsed JSON body.

    Arrays, strings, numbers and booleans carry no fields. A JSON null
    raises TypeError.
    """
    if payload is None:
        raise TypeError("Cannot read fields of a null request body")
    return payload if isinstance(payload, dict) else {}


def missing_fields(data: dict[str, Any], required: list[str]) -> list[str]:
    """Return the required field names that are missing, in ``required`` order."""
    return [field for field in required if is_missing(data.get(field))]


def _as_text(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def parse_int_prefix(value: Any) -> int | None:
    """Integer from the leading digits of ``value``; None if there are none.

    >>> parse_int_prefix("3 hours")
    3
    >>> parse_int_prefix("2.7")
    2
    """
    if value is None or isinstance(value, bool):
        return None
    match = _INT_PREFIX.match(_as_text(value))
    return int(match.group()) if match else None


def parse_float_prefix(value: Any) -> float | None:
    """Float from the leading decimal prefix of ``value``; None if there is none."""
    if value is None or isinstance(value, bool):
        return None
    match = _FLOAT_PREFIX.match(_as_text(value))
    if not match:
        return None
    return float(match.group().replace("Infinity", "inf"))
