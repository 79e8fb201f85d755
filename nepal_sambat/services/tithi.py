"""Tithi (lunar day) resolution at sunrise."""

from __future__ import annotations

from math import ceil
from typing import Optional

from . import constants as C
from .config import DEFAULT_CONFIG, EngineConfig, ObserverSite
from .lunar import elongation
from .sunrise import sunrise_jd
from .types import Paksha, Tithi, TithiType


def tithi_from_elongation(elong: float) -> int:
    """Tithi number 1..30 for an elongation in degrees.

    Each tithi covers a 12° span closed at its upper end, so exactly 0°
    (and anything past 360°) folds back to tithi 1.
    """

    number = ceil(C.norm360(elong) / C.TITHI_SPAN_DEG)
    if number < 1 or number > 30:
        return 1
    return number


def tithi_at(jd: float) -> int:
    return tithi_from_elongation(elongation(jd))


def tithi_number_for_day(jd: float, site: Optional[ObserverSite] = None) -> int:
    """Governing tithi for the civil day starting at ``jd``.

    Candidates are taken at local sunrise and at ``jd + 0.95``; the larger
    one wins, so a tithi that has started by the later reference governs
    the day.
    """

    at_sunrise = tithi_at(sunrise_jd(jd, site))
    at_boundary = tithi_at(jd + C.TITHI_SECONDARY_OFFSET_DAYS)
    return max(at_sunrise, at_boundary)


def paksha_for(number: int) -> Paksha:
    return Paksha.WAXING if number <= 15 else Paksha.WANING


def adjusted_number_for(number: int) -> int:
    return ((number - 1) % 15) + 1


def tithi_names(adjusted: int, paksha: Paksha) -> tuple[str, str]:
    if adjusted == 15 and paksha is Paksha.WANING:
        return C.AMAI_NAME
    return C.tithi_entry(adjusted)


def build_tithi(number: int, tithi_type: TithiType = TithiType.NORMAL) -> Tithi:
    assert 1 <= number <= 30, f"tithi number out of range: {number}"
    adjusted = adjusted_number_for(number)
    paksha = paksha_for(number)
    name, native = tithi_names(adjusted, paksha)
    return Tithi(
        number=number,
        adjusted_number=adjusted,
        paksha=paksha,
        name=name,
        native_name=native,
        type=tithi_type,
    )


def resolve_tithi(jd: float, config: Optional[EngineConfig] = None) -> Tithi:
    """Resolve the tithi governing the day at ``jd`` and classify it against the previous day."""

    config = config or DEFAULT_CONFIG
    today = tithi_number_for_day(jd, config.site)
    yesterday = tithi_number_for_day(jd - 1.0, config.site)
    return build_tithi(today, config.tithi_rule.classify(today, yesterday))


__all__ = [
    "tithi_from_elongation",
    "tithi_at",
    "tithi_number_for_day",
    "paksha_for",
    "adjusted_number_for",
    "tithi_names",
    "build_tithi",
    "resolve_tithi",
]
