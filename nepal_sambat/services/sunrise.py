"""Sunrise for the reference site, driven by the low-precision solar model."""

from __future__ import annotations

import math
from typing import Optional

from . import constants as C
from .config import DEFAULT_CONFIG, ObserverSite
from .solar import equation_of_center, julian_centuries, mean_anomaly, mean_longitude


def solar_declination(jd: float) -> float:
    """Apparent declination of the Sun in radians."""

    t = julian_centuries(jd)
    c = equation_of_center(mean_anomaly(t) % 360.0)
    true_long = (mean_longitude(t) + c) % 360.0
    return math.asin(math.sin(math.radians(C.OBLIQUITY_DEG)) * math.sin(math.radians(true_long)))


def equation_of_time_minutes(jd: float) -> float:
    # equation of centre scaled at 4 minutes of time per degree
    t = julian_centuries(jd)
    return equation_of_center(mean_anomaly(t) % 360.0) * 4.0


def solar_noon_jd(jd: float, site: ObserverSite) -> float:
    return (
        jd
        + site.utc_offset_hours / 24.0
        - site.longitude / 360.0
        + equation_of_time_minutes(jd) / 1440.0
    )


def hour_angle_deg(jd: float, site: ObserverSite) -> float:
    """Sunrise hour angle in degrees.

    The cosine is clamped to [-1, 1] so polar day and polar night give a
    saturated angle (180° or 0°) instead of a domain error.
    """

    decl = solar_declination(jd)
    lat = math.radians(site.latitude)
    cos_h = (math.sin(math.radians(site.horizon_deg)) - math.sin(lat) * math.sin(decl)) / (
        math.cos(lat) * math.cos(decl)
    )
    cos_h = max(-1.0, min(1.0, cos_h))
    return math.degrees(math.acos(cos_h))


def sunrise_jd(jd: float, site: Optional[ObserverSite] = None) -> float:
    """Return the Julian Day of local sunrise for the day starting at ``jd``."""

    site = site or DEFAULT_CONFIG.site
    return solar_noon_jd(jd, site) - hour_angle_deg(jd, site) / 360.0 / 2.0


__all__ = [
    "solar_declination",
    "equation_of_time_minutes",
    "solar_noon_jd",
    "hour_angle_deg",
    "sunrise_jd",
]
