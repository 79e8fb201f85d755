from nepal_sambat.services.config import YearEpoch
from nepal_sambat.services.julian import gregorian_to_jd
from nepal_sambat.services.ns_year import kaliyuga_year, resolve_year


def test_year_for_april_2024():
    jd = gregorian_to_jd(2024, 4, 14)
    assert kaliyuga_year(jd, 6) == 5125
    assert resolve_year(jd, 6) == 1144


def test_year_rolls_over_with_kachhala():
    jd = gregorian_to_jd(2024, 12, 1)
    assert resolve_year(jd, 1) == 1145
    assert resolve_year(gregorian_to_jd(2024, 10, 1), 11) == 1144


def test_month_number_shifts_the_boundary():
    jd = gregorian_to_jd(2024, 12, 1)
    assert resolve_year(jd, 1) >= resolve_year(jd, 12)


def test_epoch_is_injectable():
    jd = gregorian_to_jd(2024, 4, 14)
    shifted = YearEpoch(offset=0)
    assert resolve_year(jd, 6, shifted) == resolve_year(jd, 6) + 2
