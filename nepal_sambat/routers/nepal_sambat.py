"""Nepal Sambat conversion endpoints."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..i18n.resolve import clamp_script, month_label, paksha_label, tithi_label
from ..schemas.nepal_sambat import (
    AstronomicalOut,
    DateResponse,
    FormattedOut,
    GregorianIn,
    LabelledValue,
    MonthOut,
    TithiOut,
    YearResponse,
)
from ..services import conversion
from ..services.config import DEFAULT_CONFIG
from ..services.errors import InvalidDateError
from ..services.types import CalendarMonth, Tithi


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/nepal-sambat", tags=["nepal-sambat"])


def _month_out(month: CalendarMonth, script: str) -> MonthOut:
    return MonthOut(
        number=month.number,
        name=month.name,
        native_name=month.native_name,
        leap=month.leap,
        skipped=month.skipped,
        anala=month.anala,
        nhala=month.nhala,
        label=LabelledValue(**month_label(month, script)),
    )


def _tithi_out(tithi: Tithi, script: str) -> TithiOut:
    return TithiOut(
        number=tithi.number,
        adjusted_number=tithi.adjusted_number,
        paksha=tithi.paksha.value,
        name=tithi.name,
        native_name=tithi.native_name,
        type=tithi.type.value,
        label=LabelledValue(**tithi_label(tithi, script)),
        paksha_label=LabelledValue(**paksha_label(tithi.paksha, script)),
    )


def _invalid(exc: InvalidDateError) -> HTTPException:
    logger.info("Rejected date %s-%s-%s: %s", exc.year, exc.month, exc.day, exc)
    return HTTPException(status_code=422, detail=str(exc))


def _date_response(year: int, month: int, day: int, script: Optional[str]) -> DateResponse:
    script = clamp_script(script)
    try:
        ns_date = conversion.convert_date(year, month, day)
    except InvalidDateError as exc:
        raise _invalid(exc) from exc
    formatted = conversion.format_date(ns_date)
    return DateResponse(
        gregorian=GregorianIn(year=year, month=month, day=day),
        year=ns_date.year,
        month=_month_out(ns_date.month, script),
        tithi=_tithi_out(ns_date.tithi, script),
        astronomical=AstronomicalOut(
            solar_longitude=ns_date.solar_longitude,
            lunar_longitude=ns_date.lunar_longitude,
            elongation=ns_date.elongation,
        ),
        julian_day=ns_date.julian_day,
        formatted=FormattedOut(numerical=formatted.numerical, readable=formatted.readable),
    )


@router.get("/date", response_model=DateResponse, summary="Convert a Gregorian date")
def nepal_sambat_date(
    year: int = Query(...),
    month: int = Query(..., ge=1, le=12),
    day: int = Query(..., ge=1, le=31),
    script: Optional[str] = Query(default="latin"),
) -> DateResponse:
    return _date_response(year, month, day, script)


@router.get("/today", response_model=DateResponse, summary="Convert today's date at the reference site")
def nepal_sambat_today(script: Optional[str] = Query(default="latin")) -> DateResponse:
    site_tz = timezone(timedelta(hours=DEFAULT_CONFIG.site.utc_offset_hours))
    today = datetime.now(site_tz).date()
    return _date_response(today.year, today.month, today.day, script)


@router.get("/year", response_model=YearResponse)
def nepal_sambat_year(
    year: int = Query(...),
    month: int = Query(default=10, ge=1, le=12),
) -> YearResponse:
    try:
        ns_year = conversion.convert_year(year, month)
    except InvalidDateError as exc:
        raise _invalid(exc) from exc
    return YearResponse(gregorian_year=year, gregorian_month=month, year=ns_year)


@router.get("/month", response_model=MonthOut)
def nepal_sambat_month(
    year: int = Query(...),
    month: int = Query(..., ge=1, le=12),
    day: int = Query(..., ge=1, le=31),
    script: Optional[str] = Query(default="latin"),
) -> MonthOut:
    try:
        ns_month = conversion.convert_month(year, month, day)
    except InvalidDateError as exc:
        raise _invalid(exc) from exc
    return _month_out(ns_month, clamp_script(script))


@router.get("/tithi", response_model=TithiOut)
def nepal_sambat_tithi(
    year: int = Query(...),
    month: int = Query(..., ge=1, le=12),
    day: int = Query(..., ge=1, le=31),
    script: Optional[str] = Query(default="latin"),
) -> TithiOut:
    try:
        tithi = conversion.convert_tithi(year, month, day)
    except InvalidDateError as exc:
        raise _invalid(exc) from exc
    return _tithi_out(tithi, clamp_script(script))


@router.get("/astronomy", response_model=AstronomicalOut)
def nepal_sambat_astronomy(
    year: int = Query(...),
    month: int = Query(..., ge=1, le=12),
    day: int = Query(..., ge=1, le=31),
) -> AstronomicalOut:
    try:
        details = conversion.astronomical_details(year, month, day)
    except InvalidDateError as exc:
        raise _invalid(exc) from exc
    return AstronomicalOut(
        solar_longitude=details.solar_longitude,
        lunar_longitude=details.lunar_longitude,
        elongation=details.elongation,
    )
