"""Nepal Sambat year from days elapsed since the Kaliyuga epoch."""

from __future__ import annotations

from math import floor
from typing import Optional

from .config import YearEpoch


def kaliyuga_year(jd: float, month_number: int, epoch: Optional[YearEpoch] = None) -> int:
    """Completed Kaliyuga years, with the boundary shifted onto NS month numbering."""

    epoch = epoch or YearEpoch()
    days = jd - epoch.kaliyuga_epoch_jd
    return floor((days + (10 - month_number) * 30) / epoch.tropical_year)


def resolve_year(jd: float, month_number: int, epoch: Optional[YearEpoch] = None) -> int:
    epoch = epoch or YearEpoch()
    saka_year = kaliyuga_year(jd, month_number, epoch) - epoch.kaliyuga_to_saka
    return saka_year - epoch.saka_to_ns - epoch.offset


__all__ = ["kaliyuga_year", "resolve_year"]
