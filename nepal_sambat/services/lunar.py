"""Truncated lunar longitude series.

A short periodic series on top of the Moon's mean longitude: evection,
annual equation and variation followed by five further terms in the mean
elongation ``D``, the anomalies ``M``/``Mp`` and the node argument ``F``.
The coefficients are fixed literals; changing any of them changes every
tithi and new moon the engine reports.
"""

from __future__ import annotations

from math import radians, sin

from . import constants as C
from .solar import julian_centuries, mean_anomaly, mean_longitude, solar_longitude


def lunar_longitude(jd: float) -> float:
    """Return the Moon's ecliptic longitude in degrees, normalised to [0, 360)."""

    t = julian_centuries(jd)
    L = C.LUNAR_L0 + C.LUNAR_L1 * t
    D = L - mean_longitude(t)
    M = mean_anomaly(t)
    Mp = L - C.LUNAR_P0 - C.LUNAR_P1 * t
    F = C.LUNAR_N0 + C.LUNAR_N1 * t

    evection = C.LUNAR_EVECTION * sin(radians(2 * (D - Mp)))
    annual = C.LUNAR_YEARLY_EQ * sin(radians(M))
    variation = C.LUNAR_VARIATION * sin(radians(2 * D))
    a1 = 0.114 * sin(radians(2 * D - Mp))
    a2 = 0.1858 * sin(radians(F))
    a3 = 0.37 * sin(radians(2 * D + Mp))
    a4 = 0.2 * sin(radians(2 * F))
    a5 = 0.17 * sin(radians(2 * D - M))

    return C.norm360(L + evection - annual + variation + a1 + a2 + a3 + a4 + a5)


def elongation(jd: float) -> float:
    """Moon minus Sun longitude in [0, 360); zero at new moon."""
    return C.norm360(lunar_longitude(jd) - solar_longitude(jd) + 360.0)


def signed_elongation(jd: float) -> float:
    """Elongation folded into [-180, 180)."""
    return (lunar_longitude(jd) - solar_longitude(jd) + 540.0) % 360.0 - 180.0


__all__ = ["lunar_longitude", "elongation", "signed_elongation"]
