"""New moon search.

Both searches start from a lunation index counted from the 1900 January 0.5
new moon, evaluate the mean phase for that lunation and add periodic
corrections in the solar and lunar anomalies and the Moon's argument of
latitude. The forward estimate is closed form; the backward one is refined
against the engine's own solar and lunar models with a bounded Newton
iteration.

The two searches use different lunation densities (lunations per year) and
different century arguments. They are tuned independently and are not
inverses of each other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import floor, radians, sin
from typing import List, Optional, Tuple

from . import constants as C
from .lunar import signed_elongation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefinementResult:
    jd: float
    iterations: int
    elongation: float
    converged: bool
    history: Tuple[float, ...] = field(default_factory=tuple)


def decimal_year(jd: float) -> float:
    """Approximate Gregorian year (with fraction) for a Julian Day."""
    return 2000.0 + (jd - C.J2000) / 365.25


def lunation_index(jd: float, density: float) -> int:
    """Lunations since the 1900 reference new moon, rounded down."""
    return floor((decimal_year(jd) - 1900.0) * density)


def next_new_moon(jd: float, density: float = C.FORWARD_LUNATION_DENSITY) -> float:
    """Closed-form new moon estimate for the lunation following ``jd``.

    No refinement is applied.
    """

    k = lunation_index(jd, density)
    t = (jd - 2415021.0) / C.DAYS_PER_CENTURY
    t2 = t * t
    t3 = t2 * t

    nt = (
        C.NEW_MOON_REF_JD
        + 29.5306 * k
        + 0.0001178 * t2
        - 0.000000155 * t3
        + 0.00033 * sin(radians(166.56 + 132.87 * t - 0.009173 * t2))
    )
    M = 359.2242 + 29.10535608 * k - 0.0000333 * t2 - 0.00000347 * t3
    Mm = 306.0253 + 385.81691806 * k + 0.0107306 * t2 + 0.00001236 * t3
    Lm = 21.2964 + 390.67050646 * k - 0.0016528 * t2 - 0.00000239 * t3

    nt += (
        (0.1734 - 0.000393 * t) * sin(radians(M))
        + 0.0021 * sin(radians(2 * M))
        - 0.4068 * sin(radians(Mm))
        + 0.0161 * sin(radians(2 * Mm))
        - 0.0004 * sin(radians(3 * Mm))
        + 0.0104 * sin(radians(2 * Lm))
        - 0.0051 * sin(radians(M + Mm))
        - 0.0074 * sin(radians(M - Mm))
        + 0.0004 * sin(radians(2 * Lm + M))
        - 0.0004 * sin(radians(2 * Lm - M))
        - 0.0006 * sin(radians(2 * Lm + Mm))
        + 0.001 * sin(radians(2 * Lm - Mm))
    )
    return nt


def _corrected_new_moon(k: int, t: float) -> float:
    """Mean new moon of lunation ``k`` plus its periodic correction (J2000 centuries ``t``)."""

    t2 = t * t
    t3 = t2 * t
    M = (359.2242 + 29.10535608 * k - 0.0000333 * t2 - 0.00000347 * t3) % 360.0
    Mm = (306.0253 + 385.81691806 * k + 0.0107306 * t2 + 0.00001236 * t3) % 360.0
    F = (21.2964 + 390.67050646 * k - 0.0016528 * t2 - 0.00000239 * t3) % 360.0

    correction = 0.0
    correction += (0.1734 - 0.000393 * t) * sin(radians(M))
    correction += 0.0021 * sin(radians(2 * M))
    correction -= 0.4068 * sin(radians(Mm))
    correction += 0.0161 * sin(radians(2 * Mm))
    correction -= 0.0004 * sin(radians(3 * Mm))
    correction += 0.0104 * sin(radians(2 * F))
    correction -= 0.0051 * sin(radians(M + Mm))
    correction -= 0.0074 * sin(radians(M - Mm))
    correction += 0.0004 * sin(radians(2 * F + M))
    correction -= 0.0004 * sin(radians(2 * F - M))
    correction -= 0.0006 * sin(radians(2 * F + Mm))
    correction += 0.001 * sin(radians(2 * F - Mm))
    correction += 0.0005 * sin(radians(M + 2 * Mm))

    return C.NEW_MOON_REF_JD + k * C.LUNAR_SYNODIC_MONTH + correction


def _last_lunation(jd: float, density: float) -> Tuple[int, float, float]:
    """Return ``(k, t, estimate)`` for the latest lunation whose estimate is not after ``jd``."""

    t = (jd - C.J2000) / C.DAYS_PER_CENTURY
    k = lunation_index(jd, density)
    estimate = _corrected_new_moon(k, t)
    if estimate > jd:
        k -= 1
        estimate = _corrected_new_moon(k, t)
    return k, t, estimate


def estimate_last_new_moon(jd: float, density: float = C.BACKWARD_LUNATION_DENSITY) -> float:
    """Closed-form estimate of the new moon preceding ``jd``.

    When the estimate for the current lunation lands after ``jd`` the
    previous lunation is evaluated instead, with its own correction terms.
    """
    return _last_lunation(jd, density)[2]


def refine_new_moon(
    jd: float,
    max_iterations: int = C.REFINEMENT_MAX_ITERATIONS,
    tolerance: float = C.REFINEMENT_TOLERANCE_DEG,
    step: float = C.REFINEMENT_STEP_DAYS,
) -> RefinementResult:
    """Newton iteration on the Moon–Sun elongation.

    The slope comes from a backward finite difference over ``step`` days.
    The loop stops once ``|elongation| < tolerance`` or after
    ``max_iterations`` steps; a non-converged estimate is returned as is.
    """

    current = jd
    history: List[float] = []
    for iteration in range(max_iterations):
        e = signed_elongation(current)
        history.append(abs(e))
        if abs(e) < tolerance:
            return RefinementResult(current, iteration, e, True, tuple(history))
        slope = (e - signed_elongation(current - step)) / step
        if slope == 0.0:
            break
        current -= e / slope

    e = signed_elongation(current)
    converged = abs(e) < tolerance
    if not converged:
        logger.debug(
            "New moon refinement stopped after %d iterations at jd=%.5f (elongation %.4f°)",
            len(history),
            current,
            e,
        )
    return RefinementResult(current, len(history), e, converged, tuple(history))


def last_new_moon(jd: float, density: float = C.BACKWARD_LUNATION_DENSITY) -> float:
    """Julian Day of the new moon preceding ``jd``, refined against the engine models."""
    return last_new_moon_details(jd, density).jd


def last_new_moon_details(jd: float, density: Optional[float] = None) -> RefinementResult:
    """Refined new moon at or before ``jd``.

    An estimate just short of a conjunction refines forward onto it; when
    that conjunction falls after ``jd`` the previous lunation is refined
    instead.
    """

    k, t, estimate = _last_lunation(jd, density or C.BACKWARD_LUNATION_DENSITY)
    result = refine_new_moon(estimate)
    if result.jd > jd:
        logger.debug("Refined new moon %.5f is after jd=%.5f, using lunation %d", result.jd, jd, k - 1)
        result = refine_new_moon(_corrected_new_moon(k - 1, t))
    return result


__all__ = [
    "RefinementResult",
    "decimal_year",
    "lunation_index",
    "next_new_moon",
    "estimate_last_new_moon",
    "refine_new_moon",
    "last_new_moon",
    "last_new_moon_details",
]
