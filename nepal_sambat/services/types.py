"""Value types returned by the Nepal Sambat engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class Paksha(str, Enum):
    WAXING = "waxing"
    WANING = "waning"

    @property
    def glyph(self) -> str:
        # Newar: thwa (bright half), gā (dark half)
        return "थ्व" if self is Paksha.WAXING else "गा"

    @property
    def digit(self) -> str:
        return "1" if self is Paksha.WAXING else "2"


class TithiType(str, Enum):
    NORMAL = "normal"
    REPEATED = "repeated"
    SKIPPED = "skipped"

    @property
    def digit(self) -> str:
        return {"normal": "0", "repeated": "8", "skipped": "9"}[self.value]


@dataclass(frozen=True)
class CalendarMonth:
    number: int
    name: str
    native_name: str
    leap: bool = False
    skipped: bool = False

    @property
    def anala(self) -> int:
        return int(self.leap)

    @property
    def nhala(self) -> int:
        return int(self.skipped)

    @property
    def suffix_digit(self) -> str:
        if self.leap:
            return "3"
        if self.skipped:
            return "4"
        return "0"


@dataclass(frozen=True)
class Tithi:
    number: int
    adjusted_number: int
    paksha: Paksha
    name: str
    native_name: str
    type: TithiType = TithiType.NORMAL


@dataclass(frozen=True)
class AstronomicalDetails:
    solar_longitude: float
    lunar_longitude: float
    elongation: float


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: CalendarMonth
    tithi: Tithi
    solar_longitude: float
    lunar_longitude: float
    elongation: float
    julian_day: float

    @property
    def astronomical(self) -> AstronomicalDetails:
        return AstronomicalDetails(self.solar_longitude, self.lunar_longitude, self.elongation)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FormattedDate:
    numerical: str
    readable: str


__all__ = [
    "Paksha",
    "TithiType",
    "CalendarMonth",
    "Tithi",
    "AstronomicalDetails",
    "CalendarDate",
    "FormattedDate",
]
