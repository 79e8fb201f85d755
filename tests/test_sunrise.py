import math

import pytest

from nepal_sambat.services.config import ObserverSite
from nepal_sambat.services.julian import gregorian_to_jd
from nepal_sambat.services.sunrise import (
    hour_angle_deg,
    solar_declination,
    solar_noon_jd,
    sunrise_jd,
)


JUNE = gregorian_to_jd(2024, 6, 21)
DECEMBER = gregorian_to_jd(2024, 12, 21)


def test_sunrise_falls_within_half_a_day_of_input():
    for jd in (JUNE, DECEMBER, gregorian_to_jd(1990, 3, 20)):
        rise = sunrise_jd(jd)
        assert jd - 0.5 < rise < jd + 0.5


def test_sunrise_precedes_solar_noon():
    site = ObserverSite()
    assert sunrise_jd(JUNE) < solar_noon_jd(JUNE, site)


def test_declination_tracks_the_seasons():
    assert math.degrees(solar_declination(JUNE)) > 23.0
    assert math.degrees(solar_declination(DECEMBER)) < -23.0


def test_summer_day_arc_is_longer_at_kathmandu():
    site = ObserverSite()
    assert hour_angle_deg(JUNE, site) > 90.0 > hour_angle_deg(DECEMBER, site)


def test_polar_day_and_night_saturate_instead_of_raising():
    arctic = ObserverSite(latitude=89.0, longitude=0.0, utc_offset_hours=0.0)
    assert hour_angle_deg(JUNE, arctic) == pytest.approx(180.0)
    assert hour_angle_deg(DECEMBER, arctic) == 0.0
    assert sunrise_jd(JUNE, arctic) == pytest.approx(solar_noon_jd(JUNE, arctic) - 0.25)
    assert sunrise_jd(DECEMBER, arctic) == solar_noon_jd(DECEMBER, arctic)


def test_site_is_injectable():
    western = ObserverSite(latitude=27.7172, longitude=0.0, utc_offset_hours=0.0)
    assert sunrise_jd(JUNE, western) != sunrise_jd(JUNE)
