import pytest

from nepal_sambat.services import constants as C
from nepal_sambat.services.config import EngineConfig, ObserverSite
from nepal_sambat.services.errors import ConfigurationError, InvalidDateError, NepalSambatError


def test_defaults_are_kathmandu():
    config = EngineConfig()
    assert config.site == ObserverSite()
    assert config.site.latitude == C.KATHMANDU_LAT
    assert config.site.utc_offset_hours == 5.75
    assert config.forward_lunation_density == 12.985
    assert config.backward_lunation_density == 12.3685


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("NS_SITE_LAT", "40.7")
    monkeypatch.setenv("NS_SITE_LON", "-74.0")
    monkeypatch.setenv("NS_SITE_LABEL", "New York")
    monkeypatch.setenv("NS_BACKWARD_LUNATION_DENSITY", "12.37")
    config = EngineConfig.from_env()
    assert config.site.latitude == 40.7
    assert config.site.longitude == -74.0
    assert config.site.label == "New York"
    assert config.site.utc_offset_hours == C.NEPAL_UTC_OFFSET_HOURS
    assert config.backward_lunation_density == 12.37


def test_blank_override_keeps_default(monkeypatch):
    monkeypatch.setenv("NS_SITE_HORIZON", "  ")
    assert EngineConfig.from_env().site.horizon_deg == C.SUNRISE_HORIZON_DEG


def test_malformed_override_raises(monkeypatch):
    monkeypatch.setenv("NS_SITE_UTC_OFFSET", "five")
    with pytest.raises(ConfigurationError) as excinfo:
        EngineConfig.from_env()
    assert excinfo.value.key == "NS_SITE_UTC_OFFSET"
    assert str(excinfo.value).startswith("[NS_SITE_UTC_OFFSET]")


def test_with_site_keeps_other_fields():
    config = EngineConfig(forward_lunation_density=12.4)
    moved = config.with_site(latitude=0.0)
    assert moved.site.latitude == 0.0
    assert moved.site.longitude == C.KATHMANDU_LON
    assert moved.forward_lunation_density == 12.4
    assert config.site.latitude == C.KATHMANDU_LAT


def test_error_hierarchy():
    exc = InvalidDateError("bad day", year=2023, month=2, day=29)
    assert isinstance(exc, NepalSambatError)
    assert isinstance(exc, ValueError)
    assert str(exc) == "bad day"
    assert (exc.year, exc.month, exc.day) == (2023, 2, 29)
