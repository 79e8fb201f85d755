from dataclasses import replace

from nepal_sambat.services.formatter import (
    NUMERICAL_PATTERN,
    format_date,
    numerical_code,
    readable_text,
)
from nepal_sambat.services.ns_month import build_month
from nepal_sambat.services.tithi import build_tithi
from nepal_sambat.services.types import CalendarDate, TithiType


def _date(month=None, tithi=None, julian_day=2460414.5):
    return CalendarDate(
        year=1144,
        month=month or build_month(6),
        tithi=tithi or build_tithi(6),
        solar_longitude=24.4,
        lunar_longitude=95.0,
        elongation=70.6,
        julian_day=julian_day,
    )


def test_numerical_code_plain_day():
    # 2024-04-14 was a Sunday, which the code renders as 7.
    assert numerical_code(_date()) == "1144.601.0607"


def test_numerical_code_leap_and_skipped_months():
    leap = build_month(6, leap=True)
    skipped = build_month(6, skipped=True)
    assert numerical_code(_date(month=leap)) == "1144.631.0607"
    assert numerical_code(_date(month=skipped)) == "1144.641.0607"


def test_numerical_code_tithi_type_and_paksha():
    repeated = build_tithi(21, TithiType.REPEATED)
    skipped = build_tithi(21, TithiType.SKIPPED)
    assert numerical_code(_date(tithi=repeated)) == "1144.602.0687"
    assert numerical_code(_date(tithi=skipped)) == "1144.602.0697"


def test_weekday_digit_advances():
    assert numerical_code(_date(julian_day=2460415.5)).endswith("1")
    assert numerical_code(_date(julian_day=2460420.5)).endswith("6")


def test_two_digit_month():
    code = numerical_code(_date(month=build_month(11), tithi=build_tithi(30)))
    assert code == "1144.1102.1507"
    assert NUMERICAL_PATTERN.match(code)


def test_readable_text():
    assert readable_text(_date()) == "1144 चौलाथ्व षष्ठी - 6"
    waning = _date(tithi=build_tithi(30))
    assert readable_text(waning) == "1144 चौलागा आमाइ - 15"


def test_format_date_bundles_both():
    date = _date()
    formatted = format_date(date)
    assert formatted.numerical == numerical_code(date)
    assert formatted.readable == readable_text(date)
    assert NUMERICAL_PATTERN.match(formatted.numerical)


def test_pattern_rejects_malformed_codes():
    assert not NUMERICAL_PATTERN.match("1144.651.0607")
    assert not NUMERICAL_PATTERN.match("1144.601.607")
    assert not NUMERICAL_PATTERN.match("1144.601.0608")
    assert NUMERICAL_PATTERN.match(numerical_code(replace(_date(), year=-3)))
