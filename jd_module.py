"""
Julian day number conversion.

Visual FoxPro stores the date part of a DateTime (T) field as a Julian
day number. These are the integer Fliegel / Van Flandern formulas.
"""

from typing import Tuple


def _quot(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def jd_to_ymd(jd: int) -> Tuple[int, int, int]:
    """
    Convert a Julian day number to a calendar date.

    Example:
        jd_to_ymd(2453738) == (2006, 1, 2)

    Args:
        jd: Julian day number

    Returns:
        Tuple of (year, month, day)
    """
    l = jd + 68569
    n = _quot(4 * l, 146097)
    l = l - _quot(146097 * n + 3, 4)
    i = _quot(4000 * (l + 1), 1461001)
    l = l - _quot(1461 * i, 4) + 31
    j = _quot(80 * l, 2447)
    k = l - _quot(2447 * j, 80)
    l = _quot(j, 11)
    j = j + 2 - 12 * l
    i = 100 * (n - 49) + i + l
    return (i, j, k)


def ymd_to_jd(year: int, month: int, day: int) -> int:
    """Convert a calendar date to a Julian day number (inverse of jd_to_ymd)."""
    a = _quot(month - 14, 12)
    return (_quot(1461 * (year + 4800 + a), 4)
            + _quot(367 * (month - 2 - 12 * a), 12)
            - _quot(3 * _quot(year + 4900 + a, 100), 4)
            + day - 32075)


__all__ = ['jd_to_ymd', 'ymd_to_jd']
