"""Lenient conversions between loosely typed values."""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def as_string(value: Any) -> str:
    """Return a textual form of ``value``; ``None`` becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def _parse_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, (str, bytes, bytearray)):
        try:
            return float(as_string(value).strip())
        except ValueError:
            return None
    return None


def can_convert_to_float(value: Any) -> bool:
    """Tell whether ``value`` is a number or text holding one."""
    return _parse_float(value) is not None


def as_float(value: Any) -> float:
    """Convert ``value`` to a float, falling back to 0.0."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    parsed = _parse_float(value)
    return 0.0 if parsed is None else parsed


def as_int(value: Any) -> int:
    """Convert ``value`` to an int, falling back to 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return 0 if math.isnan(value) or math.isinf(value) else int(value)
    if isinstance(value, (str, bytes, bytearray)):
        text = as_string(value).strip()
        try:
            return int(text)
        except ValueError:
            return as_int(_parse_float(text) or 0.0)
    return 0


def as_boolean(value: Any) -> bool:
    """Convert ``value`` to a bool using the usual textual spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, (str, bytes, bytearray)):
        return as_string(value).strip() in _TRUE_WORDS
    return False


def _from_timestamp(seconds: float) -> datetime | None:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def as_time(value: Any, layout: str | None = None) -> datetime | None:
    """Convert ``value`` to a datetime, or return None when it cannot be read.

    Text is parsed with ``layout`` (a strptime format) when one is given,
    otherwise as ISO 8601 or as Unix seconds.  Numbers are Unix seconds.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _from_timestamp(value)
    if isinstance(value, (str, bytes, bytearray)):
        text = as_string(value).strip()
        if not text:
            return None
        if layout:
            try:
                return datetime.strptime(text, layout)
            except ValueError:
                return None
        iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
        try:
            return datetime.fromisoformat(iso_text)
        except ValueError:
            pass
        seconds = _parse_float(text)
        return None if seconds is None else _from_timestamp(seconds)
    return None