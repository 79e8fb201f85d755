"""Low-precision apparent solar longitude."""

from __future__ import annotations

import math

from . import constants as C


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - C.J2000) / C.DAYS_PER_CENTURY


def mean_anomaly(t: float) -> float:
    return C.SOLAR_M0 + C.SOLAR_M1 * t


def mean_longitude(t: float) -> float:
    return C.SOLAR_L0 + C.SOLAR_L1 * t


def equation_of_center(m_deg: float) -> float:
    """Three-term equation of centre (degrees) for mean anomaly ``m_deg``."""
    m = math.radians(m_deg)
    return (
        C.SOLAR_C1 * math.sin(m)
        + C.SOLAR_C2 * math.sin(2 * m)
        + C.SOLAR_C3 * math.sin(3 * m)
    )


def solar_longitude(jd: float) -> float:
    """Return the Sun's ecliptic longitude in degrees, normalised to [0, 360)."""

    t = julian_centuries(jd)
    return C.norm360(mean_longitude(t) + equation_of_center(mean_anomaly(t)))


__all__ = [
    "julian_centuries",
    "mean_anomaly",
    "mean_longitude",
    "equation_of_center",
    "solar_longitude",
]
