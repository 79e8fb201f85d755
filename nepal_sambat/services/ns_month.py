"""Nepal Sambat month resolution from solar sectors."""

from __future__ import annotations

from typing import Optional

from . import constants as C
from .config import DEFAULT_CONFIG, EngineConfig
from .new_moon import last_new_moon, next_new_moon
from .solar import solar_longitude
from .types import CalendarMonth


def month_index_for_longitude(longitude: float) -> int:
    """1-based month whose 30° sector contains ``longitude``.

    Sectors start at the table's starting degrees and end where the next
    month starts; the sector that crosses 0° is matched on either side.
    """

    lon = C.norm360(longitude)
    count = len(C.NS_MONTHS)
    for i in range(count):
        start = C.NS_MONTHS[i][2]
        end = C.NS_MONTHS[(i + 1) % count][2]
        if end > start:
            if start <= lon < end:
                return i + 1
        elif lon >= start or lon < end:
            return i + 1
    return 1


def month_index_at(jd: float) -> int:
    """Month of the sector the Sun occupies at ``jd``."""
    return month_index_for_longitude(solar_longitude(jd))


def current_month_index(jd: float, config: Optional[EngineConfig] = None) -> int:
    """Month anchored to the new moon preceding ``jd``."""
    config = config or DEFAULT_CONFIG
    return month_index_at(last_new_moon(jd, config.backward_lunation_density))


def next_month_index(jd: float, config: Optional[EngineConfig] = None) -> int:
    config = config or DEFAULT_CONFIG
    return month_index_at(next_new_moon(jd, config.forward_lunation_density))


def build_month(number: int, leap: bool = False, skipped: bool = False) -> CalendarMonth:
    name, native, _start = C.month_entry(number)
    return CalendarMonth(number=number, name=name, native_name=native, leap=leap, skipped=skipped)


def resolve_month(jd: float, config: Optional[EngineConfig] = None) -> CalendarMonth:
    """Resolve the NS month for ``jd`` with its leap (anala) and skipped (nhala) flags."""

    config = config or DEFAULT_CONFIG
    this_month = current_month_index(jd, config)
    following = next_month_index(jd, config)
    leap, skipped = config.month_rule.classify(this_month, following)
    return build_month(this_month, leap=leap, skipped=skipped)


__all__ = [
    "month_index_for_longitude",
    "month_index_at",
    "current_month_index",
    "next_month_index",
    "build_month",
    "resolve_month",
]
