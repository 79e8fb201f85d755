"""Response schemas for the Nepal Sambat endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field
from typing import Dict, Literal


class LabelledValue(BaseModel):
    display_name: str
    aliases: Dict[str, str]


class MonthOut(BaseModel):
    number: int = Field(ge=1, le=12)
    name: str
    native_name: str
    leap: bool
    skipped: bool
    anala: int
    nhala: int
    label: LabelledValue


class TithiOut(BaseModel):
    number: int = Field(ge=1, le=30)
    adjusted_number: int = Field(ge=1, le=15)
    paksha: Literal["waxing", "waning"]
    name: str
    native_name: str
    type: Literal["normal", "repeated", "skipped"]
    label: LabelledValue
    paksha_label: LabelledValue


class AstronomicalOut(BaseModel):
    solar_longitude: float
    lunar_longitude: float
    elongation: float


class FormattedOut(BaseModel):
    numerical: str
    readable: str


class GregorianIn(BaseModel):
    year: int
    month: int
    day: int


class DateResponse(BaseModel):
    gregorian: GregorianIn
    year: int
    month: MonthOut
    tithi: TithiOut
    astronomical: AstronomicalOut
    julian_day: float
    formatted: FormattedOut


class YearResponse(BaseModel):
    gregorian_year: int
    gregorian_month: int
    year: int
