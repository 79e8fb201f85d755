"""Engine configuration: observer site, year epoch and rule selection.

Defaults are read from the environment (and a local .env file) once at
import. Every public engine function accepts an explicit ``config`` so
tests can substitute any of the values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Optional

from dotenv import load_dotenv

from . import constants as C
from .errors import ConfigurationError
from .rules import (
    DifferenceTithiTypeRule,
    EqualityMonthAdjacencyRule,
    MonthAdjacencyRule,
    TithiTypeRule,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObserverSite:
    """Geographic reference point used for sunrise."""

    latitude: float = C.KATHMANDU_LAT
    longitude: float = C.KATHMANDU_LON
    utc_offset_hours: float = C.NEPAL_UTC_OFFSET_HOURS
    horizon_deg: float = C.SUNRISE_HORIZON_DEG
    label: str = "Kathmandu, Nepal"


@dataclass(frozen=True)
class YearEpoch:
    """Constants mapping days since the Kaliyuga epoch onto NS years."""

    kaliyuga_epoch_jd: float = C.KALIYUGA_EPOCH_JD
    tropical_year: float = C.TROPICAL_YEAR
    kaliyuga_to_saka: int = C.KALIYUGA_TO_SAKA
    saka_to_ns: int = C.SAKA_TO_NEPAL_SAMBAT
    offset: int = C.NEPAL_SAMBAT_OFFSET


@dataclass(frozen=True)
class EngineConfig:
    site: ObserverSite = field(default_factory=ObserverSite)
    epoch: YearEpoch = field(default_factory=YearEpoch)
    forward_lunation_density: float = C.FORWARD_LUNATION_DENSITY
    backward_lunation_density: float = C.BACKWARD_LUNATION_DENSITY
    month_rule: MonthAdjacencyRule = field(default_factory=EqualityMonthAdjacencyRule)
    tithi_rule: TithiTypeRule = field(default_factory=DifferenceTithiTypeRule)

    def with_site(self, **changes) -> "EngineConfig":
        return replace(self, site=replace(self.site, **changes))

    @classmethod
    def from_env(cls) -> "EngineConfig":
        load_dotenv(override=False)
        site = ObserverSite(
            latitude=_env_float("NS_SITE_LAT", C.KATHMANDU_LAT),
            longitude=_env_float("NS_SITE_LON", C.KATHMANDU_LON),
            utc_offset_hours=_env_float("NS_SITE_UTC_OFFSET", C.NEPAL_UTC_OFFSET_HOURS),
            horizon_deg=_env_float("NS_SITE_HORIZON", C.SUNRISE_HORIZON_DEG),
            label=os.getenv("NS_SITE_LABEL", "Kathmandu, Nepal"),
        )
        config = cls(
            site=site,
            forward_lunation_density=_env_float(
                "NS_FORWARD_LUNATION_DENSITY", C.FORWARD_LUNATION_DENSITY
            ),
            backward_lunation_density=_env_float(
                "NS_BACKWARD_LUNATION_DENSITY", C.BACKWARD_LUNATION_DENSITY
            ),
        )
        logger.debug("Engine configuration: site=%s", site)
        return config


def _env_float(key: str, default: float) -> float:
    raw: Optional[str] = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"expected a number, got {raw!r}", key=key) from exc


DEFAULT_CONFIG = EngineConfig.from_env()


__all__ = ["ObserverSite", "YearEpoch", "EngineConfig", "DEFAULT_CONFIG"]
