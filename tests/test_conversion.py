import pytest

from nepal_sambat import (
    EngineConfig,
    InvalidDateError,
    astronomical_details,
    convert_date,
    convert_month,
    convert_tithi,
    convert_year,
    format,
)
from nepal_sambat.services.formatter import NUMERICAL_PATTERN


def test_convert_date_april_2024():
    date = convert_date(2024, 4, 14)
    assert date.julian_day == 2460414.5
    assert date.year == 1144
    assert date.month.number == 6
    assert date.month.name == "Chaulā"
    assert date.month.native_name == "चौला"
    assert 1 <= date.tithi.number <= 30
    assert 0 <= date.solar_longitude < 360
    assert 0 <= date.lunar_longitude < 360
    assert date.elongation == pytest.approx(
        (date.lunar_longitude - date.solar_longitude) % 360.0
    )


def test_convert_date_is_repeatable():
    assert convert_date(2024, 4, 14) == convert_date(2024, 4, 14)


def test_component_functions_agree_with_convert_date():
    date = convert_date(2023, 11, 14)
    assert convert_month(2023, 11, 14) == date.month
    assert convert_tithi(2023, 11, 14) == date.tithi
    assert astronomical_details(2023, 11, 14) == date.astronomical


def test_convert_year():
    assert convert_year(2024) == 1144
    assert convert_year(2024, 12) == 1145


def test_format_output_shape():
    for day in range(1, 29):
        formatted = format(convert_date(2024, 2, day))
        assert NUMERICAL_PATTERN.match(formatted.numerical), formatted.numerical
        assert formatted.readable.startswith(str(convert_date(2024, 2, day).year))


@pytest.mark.parametrize(
    "year, month, day",
    [(2023, 2, 29), (2024, 13, 1), (2024, 0, 10), (2024, 4, 31), ("2024", 4, 1), (2024, 4, 1.5)],
)
def test_invalid_dates_raise(year, month, day):
    with pytest.raises(InvalidDateError):
        convert_date(year, month, day)
    with pytest.raises(ValueError):
        convert_tithi(year, month, day)


def test_site_changes_sunrise_dependent_values():
    base = EngineConfig()
    shifted = base.with_site(utc_offset_hours=-6.25, label="shifted")
    near = astronomical_details(2024, 4, 14, base)
    far = astronomical_details(2024, 4, 14, shifted)
    # reference noon twelve hours earlier moves the Moon about six degrees
    assert far.lunar_longitude != pytest.approx(near.lunar_longitude, abs=1.0)
    assert convert_month(2024, 4, 14, shifted).number == 6


def test_to_dict_is_plain_data():
    payload = convert_date(2024, 4, 14).to_dict()
    assert payload["year"] == 1144
    assert payload["month"]["name"] == "Chaulā"
    assert payload["tithi"]["paksha"] in ("waxing", "waning")
