"""
Helper casts for the values returned by the DBF field functions.

Field values are plain Python objects (str, int, float, bool, date,
datetime, bytes). These helpers always return the requested type, falling
back to that type's zero value when the value has a different type.
"""

import datetime
from typing import Any

from dbf_module import DBF_ZERO_DATE, DBF_ZERO_DATETIME


def to_string(value: Any) -> str:
    """Always returns a string."""
    if isinstance(value, str):
        return value
    return ''


def to_trimmed_string(value: Any) -> str:
    """Always returns a string with surrounding whitespace removed."""
    if isinstance(value, str):
        return value.strip()
    return ''


def to_int(value: Any) -> int:
    """Always returns an int. Booleans are not treated as ints."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


def to_float(value: Any) -> float:
    """Always returns a float."""
    if isinstance(value, float):
        return value
    return 0.0


def to_datetime(value: Any) -> datetime.datetime:
    """Always returns a datetime; D field dates are promoted to midnight UTC."""
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day, tzinfo=datetime.timezone.utc)
    return DBF_ZERO_DATETIME


def to_date(value: Any) -> datetime.date:
    """Always returns a date; the time part of a datetime is dropped."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return DBF_ZERO_DATE


def to_bool(value: Any) -> bool:
    """Always returns a boolean."""
    if isinstance(value, bool):
        return value
    return False


def to_bytes(value: Any) -> bytes:
    """Always returns bytes (V fields and binary memos)."""
    if isinstance(value, bytes):
        return value
    return b''


__all__ = [
    'to_string', 'to_trimmed_string', 'to_int', 'to_float',
    'to_datetime', 'to_date', 'to_bool', 'to_bytes',
]
