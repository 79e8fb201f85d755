"""Numerical and readable renderings of a Nepal Sambat date."""

from __future__ import annotations

import re

from .julian import weekday_digit
from .types import CalendarDate, FormattedDate

# year . month, month suffix, paksha . tithi (2 digits), tithi type, weekday
NUMERICAL_PATTERN = re.compile(r"^-?\d+\.\d{1,2}[034][12]\.\d{2}[089][1-7]$")


def numerical_code(date: CalendarDate) -> str:
    return (
        f"{date.year}."
        f"{date.month.number}{date.month.suffix_digit}{date.tithi.paksha.digit}."
        f"{date.tithi.adjusted_number:02d}{date.tithi.type.digit}{weekday_digit(date.julian_day)}"
    )


def readable_text(date: CalendarDate) -> str:
    return (
        f"{date.year} {date.month.native_name}{date.tithi.paksha.glyph} "
        f"{date.tithi.native_name} - {date.tithi.adjusted_number}"
    )


def format_date(date: CalendarDate) -> FormattedDate:
    return FormattedDate(numerical=numerical_code(date), readable=readable_text(date))


__all__ = ["NUMERICAL_PATTERN", "numerical_code", "readable_text", "format_date"]
