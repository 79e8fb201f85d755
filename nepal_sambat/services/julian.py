"""Gregorian/Julian calendar dates to astronomical Julian Day numbers."""

from __future__ import annotations

from math import floor
from numbers import Integral
from typing import Any

from .errors import InvalidDateError

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_date(year: Any, month: Any, day: Any) -> None:
    """Raise :class:`InvalidDateError` unless ``(year, month, day)`` is a calendar date."""

    if not _is_int(year):
        raise InvalidDateError("Year must be an integer.", year, month, day)
    if not _is_int(month) or not 1 <= month <= 12:
        raise InvalidDateError("Month must be between 1 and 12.", year, month, day)
    if not _is_int(day) or day < 1:
        raise InvalidDateError("Day must be between 1 and 31.", year, month, day)
    if day > days_in_month(year, month):
        raise InvalidDateError(
            f"Invalid day {day} for month {month} in year {year}.", year, month, day
        )


def _is_gregorian(year: int, month: int, day: int) -> bool:
    return (year, month, day) >= (1582, 10, 15)


def gregorian_to_jd(year: int, month: int, day: int) -> float:
    """Return the Julian Day at 0h UT of a calendar date.

    Dates from 1582-10-15 on take the Gregorian correction; earlier dates are
    read as Julian calendar dates. The ten days dropped by the reform
    (1582-10-05 to 1582-10-14) exist in neither calendar; they are accepted
    and fall through to the Julian form, so the result carries no
    historical meaning.
    """

    validate_date(year, month, day)

    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12

    jd = floor(365.25 * (y + 4716)) + floor(30.6001 * (m + 1)) + day - 1524.5
    if _is_gregorian(year, month, day):
        a = floor(y / 100)
        jd += 2 - a + floor(a / 4)
    return float(jd)


def weekday_digit(jd: float) -> int:
    """Weekday digit of the numerical date code: ``floor(jd + 1.5) % 7``, with 0 read as 7."""
    return (floor(jd + 1.5) % 7) or 7


__all__ = [
    "is_leap_year",
    "days_in_month",
    "validate_date",
    "gregorian_to_jd",
    "weekday_digit",
]
