"""Pluggable rules for leap/skipped months and repeated/skipped tithis.

The defaults reproduce the thresholds of the reference methodology: a month
is leap (anala) when two consecutive lunations start in the same solar
sector and skipped (nhala) when the next lunation lands exactly two sectors
ahead; a tithi is repeated when it spans two sunrises and skipped when the
day's number jumps by two or more. None of these thresholds has been checked
against an independent ephemeris, so alternatives can be swapped in through
``EngineConfig``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

from .types import TithiType


class MonthAdjacencyRule(Protocol):
    def classify(self, this_month: int, next_month: int) -> Tuple[bool, bool]:
        """Return ``(leap, skipped)`` for a month and the month of the next lunation."""
        ...


class TithiTypeRule(Protocol):
    def classify(self, today: int, yesterday: int) -> TithiType:
        ...


@dataclass(frozen=True)
class EqualityMonthAdjacencyRule:
    skip_distance: int = 2

    def classify(self, this_month: int, next_month: int) -> Tuple[bool, bool]:
        leap = this_month == next_month
        skipped = next_month - this_month == self.skip_distance
        return leap, skipped


@dataclass(frozen=True)
class DifferenceTithiTypeRule:
    skip_threshold: int = 2

    def classify(self, today: int, yesterday: int) -> TithiType:
        if today == yesterday:
            return TithiType.REPEATED
        if today - yesterday >= self.skip_threshold:
            return TithiType.SKIPPED
        return TithiType.NORMAL


__all__ = [
    "MonthAdjacencyRule",
    "TithiTypeRule",
    "EqualityMonthAdjacencyRule",
    "DifferenceTithiTypeRule",
]
