"""Gregorian date to Nepal Sambat conversion.

The public engine surface: every function validates the Gregorian date,
converts it to a Julian Day at 0h UT and composes the month, year and tithi
resolvers. Nothing is cached; repeated calls recompute from scratch and
return equal values.
"""

from __future__ import annotations

from typing import Optional

from .config import DEFAULT_CONFIG, EngineConfig
from .formatter import format_date
from .julian import gregorian_to_jd
from .lunar import lunar_longitude
from .ns_month import resolve_month
from .ns_year import resolve_year
from .solar import solar_longitude
from .sunrise import sunrise_jd
from .tithi import resolve_tithi
from .types import AstronomicalDetails, CalendarDate, CalendarMonth, FormattedDate, Tithi


def _details_at_sunrise(jd: float, config: EngineConfig) -> AstronomicalDetails:
    rise = sunrise_jd(jd, config.site)
    solar = solar_longitude(rise)
    lunar = lunar_longitude(rise)
    return AstronomicalDetails(
        solar_longitude=solar,
        lunar_longitude=lunar,
        elongation=(lunar - solar + 360.0) % 360.0,
    )


def convert_date(
    year: int, month: int, day: int, config: Optional[EngineConfig] = None
) -> CalendarDate:
    """Convert a Gregorian date to a full Nepal Sambat date."""

    config = config or DEFAULT_CONFIG
    jd = gregorian_to_jd(year, month, day)
    ns_month = resolve_month(jd, config)
    tithi = resolve_tithi(jd, config)
    astro = _details_at_sunrise(jd, config)
    return CalendarDate(
        year=resolve_year(jd, ns_month.number, config.epoch),
        month=ns_month,
        tithi=tithi,
        solar_longitude=astro.solar_longitude,
        lunar_longitude=astro.lunar_longitude,
        elongation=astro.elongation,
        julian_day=jd,
    )


def convert_year(year: int, month: int = 10, config: Optional[EngineConfig] = None) -> int:
    """NS year in progress on the first day of a Gregorian month (October by default)."""

    config = config or DEFAULT_CONFIG
    jd = gregorian_to_jd(year, month, 1)
    ns_month = resolve_month(jd, config)
    return resolve_year(jd, ns_month.number, config.epoch)


def convert_month(
    year: int, month: int, day: int, config: Optional[EngineConfig] = None
) -> CalendarMonth:
    return resolve_month(gregorian_to_jd(year, month, day), config or DEFAULT_CONFIG)


def convert_tithi(year: int, month: int, day: int, config: Optional[EngineConfig] = None) -> Tithi:
    return resolve_tithi(gregorian_to_jd(year, month, day), config or DEFAULT_CONFIG)


def astronomical_details(
    year: int, month: int, day: int, config: Optional[EngineConfig] = None
) -> AstronomicalDetails:
    """Solar and lunar longitude and their elongation at local sunrise."""
    return _details_at_sunrise(gregorian_to_jd(year, month, day), config or DEFAULT_CONFIG)


def format(date: CalendarDate) -> FormattedDate:  # noqa: A001
    return format_date(date)


__all__ = [
    "convert_date",
    "convert_year",
    "convert_month",
    "convert_tithi",
    "astronomical_details",
    "format",
    "format_date",
]
