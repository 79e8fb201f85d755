"""Fixed astronomical constants and name tables for Nepal Sambat."""

from __future__ import annotations

import math
from typing import Tuple

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0
LUNAR_SYNODIC_MONTH = 29.530588861
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Solar model (mean longitude / mean anomaly and equation of centre).
SOLAR_L0 = 280.46646
SOLAR_L1 = 36000.76983
SOLAR_M0 = 357.52911
SOLAR_M1 = 35999.05029
SOLAR_C1 = 1.914602
SOLAR_C2 = 0.019993
SOLAR_C3 = 0.000289

# Lunar model (mean longitude, perigee and node, degrees and degrees/century).
LUNAR_L0 = 218.3164591
LUNAR_P0 = 83.353243
LUNAR_N0 = 125.044555
LUNAR_L1 = 481267.88134236
LUNAR_P1 = 4069.0136776
LUNAR_N1 = -1934.1361849
LUNAR_EVECTION = 1.2739
LUNAR_VARIATION = 0.6583
LUNAR_YEARLY_EQ = 0.1858

# Mean obliquity used by the sunrise model.
OBLIQUITY_DEG = 23.44

# Kathmandu, the reference site for sunrise.
KATHMANDU_LAT = 27.7172
KATHMANDU_LON = 85.324
NEPAL_UTC_OFFSET_HOURS = 5.75
SUNRISE_HORIZON_DEG = -0.83

# New moon search: 1900 January 0.5 reference lunation.
NEW_MOON_REF_JD = 2415020.75933
FORWARD_LUNATION_DENSITY = 12.985
BACKWARD_LUNATION_DENSITY = 12.3685
REFINEMENT_MAX_ITERATIONS = 10
REFINEMENT_TOLERANCE_DEG = 0.01
REFINEMENT_STEP_DAYS = 0.01

# Year epoch.
KALIYUGA_EPOCH_JD = 588465.5
TROPICAL_YEAR = 365.25636
KALIYUGA_TO_SAKA = 3179
SAKA_TO_NEPAL_SAMBAT = 800
NEPAL_SAMBAT_OFFSET = 2

# Tithi resolution: offset from midnight used as the second reference instant.
TITHI_SECONDARY_OFFSET_DAYS = 0.95
TITHI_SPAN_DEG = 12.0

# (transliterated name, Devanagari name, starting solar longitude)
NS_MONTHS: Tuple[Tuple[str, str, float], ...] = (
    ("Kachhalā", "कछला", 210.0),
    ("Thinlā", "थिंला", 240.0),
    ("Pwanhelā", "पोहेला", 270.0),
    ("Silā", "सिला", 300.0),
    ("Chilā", "चिला", 330.0),
    ("Chaulā", "चौला", 0.0),
    ("Bachhalā", "बछला", 30.0),
    ("Tachhalā", "तछला", 60.0),
    ("Dilā", "दिला", 90.0),
    ("Gunlā", "गुंला", 120.0),
    ("Yanlā", "ञंला", 150.0),
    ("Kaulā", "कौला", 180.0),
)

# (transliterated name, Devanagari name), indexed by adjusted tithi - 1
TITHI_NAMES: Tuple[Tuple[str, str], ...] = (
    ("Pāru", "पारु"),
    ("Dwitiyā", "द्वितीया"),
    ("Tritiyā", "तृतीया"),
    ("Chaturthi", "चतुर्थी"),
    ("Panchami", "पञ्चमी"),
    ("Shashthi", "षष्ठी"),
    ("Saptami", "सप्तमी"),
    ("Ashtami", "अष्टमी"),
    ("Navami", "नवमी"),
    ("Dashami", "दशमी"),
    ("Ekādashi", "एकादशी"),
    ("Dwādashi", "द्वादशी"),
    ("Trayodashi", "त्रयोदशी"),
    ("Chaturdashi", "चतुर्दशी"),
    ("Punhi", "पुन्हि"),
)

# Fifteenth tithi of the waning fortnight (new moon day).
AMAI_NAME: Tuple[str, str] = ("Amāi", "आमाइ")


def month_entry(number: int) -> Tuple[str, str, float]:
    """Return the (name, native name, start degree) row for a 1-based month."""
    assert 1 <= number <= len(NS_MONTHS), f"month number out of range: {number}"
    return NS_MONTHS[number - 1]


def tithi_entry(adjusted_number: int) -> Tuple[str, str]:
    assert 1 <= adjusted_number <= len(TITHI_NAMES), f"tithi out of range: {adjusted_number}"
    return TITHI_NAMES[adjusted_number - 1]


def norm360(x: float) -> float:
    """Normalise an angle to [0, 360)."""
    value = x % 360.0
    # x % 360.0 can round up to exactly 360.0 for tiny negative inputs
    return 0.0 if value >= 360.0 else value
