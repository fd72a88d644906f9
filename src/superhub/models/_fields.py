"""Conversion helpers shared by the API models."""

import re
from datetime import datetime
from typing import Any

# Go-style timestamps may carry up to nine fractional digits
_FRACTION = re.compile(r"(\.\d{6})\d+")


def parse_datetime(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime.

    Raises:
        ValueError: If ``value`` is not a valid RFC 3339 timestamp.
        TypeError: If ``value`` is not a string.
    """
    if not isinstance(value, str):
        raise TypeError(f"expected RFC 3339 string, got {type(value).__name__}")
    parsed = datetime.fromisoformat(_FRACTION.sub(r"\1", value))
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp without timezone: {value!r}")
    return parsed


def parse_optional_datetime(value: Any) -> datetime | None:
    if value is None:
        return None
    return parse_datetime(value)


def format_datetime(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def parse_bool(value: Any) -> bool:
    """Accept only JSON booleans; ``"false"`` or ``0`` raise TypeError."""
    if not isinstance(value, bool):
        raise TypeError(f"expected JSON boolean, got {type(value).__name__}")
    return value


def optional_bool(value: Any, default: bool = False) -> bool:
    return default if value is None else parse_bool(value)
