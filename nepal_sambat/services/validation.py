"""Range checks and tolerance comparison for conversion results."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from .types import CalendarDate

SOLAR_LONGITUDE_ERROR_DEG = 0.1
LUNAR_LONGITUDE_ERROR_DEG = 0.2


def is_in_range(value: float, low: float, high: float) -> bool:
    return low <= value <= high


def is_valid_solar_longitude(longitude: float) -> bool:
    return is_in_range(longitude, 0, 360)


def is_valid_lunar_longitude(longitude: float) -> bool:
    return is_in_range(longitude, 0, 360)


def is_valid_tithi(number: int) -> bool:
    return is_in_range(number, 1, 30)


def is_valid_ns_month(number: int) -> bool:
    return is_in_range(number, 1, 12)


def is_valid_ns_year(year: int) -> bool:
    return 0 < year < 2000


def solar_longitude_error_bounds(longitude: float) -> Tuple[float, float]:
    return longitude - SOLAR_LONGITUDE_ERROR_DEG, longitude + SOLAR_LONGITUDE_ERROR_DEG


def lunar_longitude_error_bounds(longitude: float) -> Tuple[float, float]:
    return longitude - LUNAR_LONGITUDE_ERROR_DEG, longitude + LUNAR_LONGITUDE_ERROR_DEG


def _fields_match(actual: Any, expected: Optional[Mapping[str, Any]]) -> bool:
    if not expected:
        return True
    for key, value in expected.items():
        if value is None:
            continue
        if getattr(actual, key) != value:
            return False
    return True


def validate_conversion_result(result: CalendarDate, expected: Dict[str, Any]) -> bool:
    """Compare a conversion against reference values.

    ``expected`` may hold ``astronomical`` (``solar_longitude`` and
    ``lunar_longitude`` compared within ±0.1° and ±0.2°), ``tithi`` and
    ``month`` (field-by-field equality on the given keys) and ``year``.
    Keys that are missing or ``None`` are not checked.
    """

    astro = expected.get("astronomical") or {}
    solar = astro.get("solar_longitude")
    if solar is not None:
        low, high = solar_longitude_error_bounds(solar)
        if not is_in_range(result.solar_longitude, low, high):
            return False
    lunar = astro.get("lunar_longitude")
    if lunar is not None:
        low, high = lunar_longitude_error_bounds(lunar)
        if not is_in_range(result.lunar_longitude, low, high):
            return False

    if not _fields_match(result.tithi, expected.get("tithi")):
        return False
    if not _fields_match(result.month, expected.get("month")):
        return False

    year = expected.get("year")
    if year is not None and result.year != year:
        return False
    return True


__all__ = [
    "is_in_range",
    "is_valid_solar_longitude",
    "is_valid_lunar_longitude",
    "is_valid_tithi",
    "is_valid_ns_month",
    "is_valid_ns_year",
    "solar_longitude_error_bounds",
    "lunar_longitude_error_bounds",
    "validate_conversion_result",
]
