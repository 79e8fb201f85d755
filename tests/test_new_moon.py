"""Tests for the new moon search."""

import pytest

from nepal_sambat.services import constants as C
from nepal_sambat.services.julian import gregorian_to_jd
from nepal_sambat.services.lunar import signed_elongation
from nepal_sambat.services.new_moon import (
    decimal_year,
    estimate_last_new_moon,
    last_new_moon,
    last_new_moon_details,
    lunation_index,
    next_new_moon,
    refine_new_moon,
)


SPREAD = [gregorian_to_jd(year, month, 10) for year in range(1950, 2051, 10) for month in (1, 4, 7, 10)]


def test_decimal_year():
    assert decimal_year(C.J2000) == 2000.0
    assert decimal_year(C.J2000 + 365.25) == 2001.0


def test_lunation_index_uses_density():
    jd = gregorian_to_jd(2024, 4, 14)
    assert lunation_index(jd, C.BACKWARD_LUNATION_DENSITY) < lunation_index(jd, C.FORWARD_LUNATION_DENSITY)


def test_estimate_does_not_overshoot():
    for jd in SPREAD:
        estimate = estimate_last_new_moon(jd)
        assert jd - 31.0 < estimate <= jd


@pytest.mark.parametrize("jd", SPREAD)
def test_refinement_converges(jd):
    result = last_new_moon_details(jd)
    assert result.converged
    assert abs(result.elongation) < C.REFINEMENT_TOLERANCE_DEG
    assert result.iterations <= C.REFINEMENT_MAX_ITERATIONS
    assert result.history[-1] <= result.history[0]
    assert jd - 31.0 < result.jd <= jd


def test_last_new_moon_april_2024():
    jd = gregorian_to_jd(2024, 4, 14)
    nm = last_new_moon(jd)
    # New moon of 2024-04-08 (18:21 UT); the truncated models land within a day.
    assert gregorian_to_jd(2024, 4, 7) < nm < gregorian_to_jd(2024, 4, 10)
    assert abs(signed_elongation(nm)) < 0.01


@pytest.mark.parametrize("jd", [2458873.5, 2459198.5, 2459257.5, 2459641.5, 2459700.5])
def test_last_new_moon_never_follows_the_date(jd):
    # These estimates fall a few hours short of a conjunction that comes
    # later the same day; the previous lunation must be returned.
    nm = last_new_moon(jd)
    assert nm <= jd
    assert jd - nm > 27.0
    assert abs(signed_elongation(nm)) < C.REFINEMENT_TOLERANCE_DEG


def test_last_new_moon_holds_across_a_year():
    start = gregorian_to_jd(2020, 1, 1)
    for offset in range(366):
        jd = start + offset
        nm = last_new_moon(jd)
        assert jd - 31.0 < nm <= jd, jd


def test_refinement_gives_up_silently():
    jd = gregorian_to_jd(2024, 4, 20)
    result = refine_new_moon(jd, max_iterations=1)
    assert not result.converged
    assert result.iterations == 1
    assert isinstance(result.jd, float)


def test_refinement_returns_immediately_when_already_converged():
    nm = last_new_moon(gregorian_to_jd(2024, 4, 14))
    result = refine_new_moon(nm)
    assert result.converged
    assert result.iterations == 0
    assert result.jd == nm


def test_next_new_moon_is_a_conjunction_estimate():
    for jd in SPREAD:
        nt = next_new_moon(jd)
        assert nt > jd
        # Closed-form estimate against the engine's own truncated models.
        assert abs(signed_elongation(nt)) < 15.0


def test_forward_and_backward_searches_are_tuned_independently():
    jd = gregorian_to_jd(2024, 4, 14)
    assert next_new_moon(jd) != next_new_moon(jd, density=C.BACKWARD_LUNATION_DENSITY)
    assert last_new_moon(jd) == last_new_moon(jd)
