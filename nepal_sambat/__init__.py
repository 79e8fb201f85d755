"""Nepal Sambat: Gregorian to Nepal Sambat lunisolar date conversion."""

__version__ = "0.1.0"

from .services.config import DEFAULT_CONFIG, EngineConfig, ObserverSite, YearEpoch
from .services.conversion import (
    astronomical_details,
    convert_date,
    convert_month,
    convert_tithi,
    convert_year,
    format,
    format_date,
)
from .services.errors import ConfigurationError, InvalidDateError, NepalSambatError
from .services.types import (
    AstronomicalDetails,
    CalendarDate,
    CalendarMonth,
    FormattedDate,
    Paksha,
    Tithi,
    TithiType,
)
from .services.validation import (
    is_in_range,
    is_valid_lunar_longitude,
    is_valid_ns_month,
    is_valid_ns_year,
    is_valid_solar_longitude,
    is_valid_tithi,
    lunar_longitude_error_bounds,
    solar_longitude_error_bounds,
    validate_conversion_result,
)

__all__ = [
    "__version__",
    "convert_date",
    "convert_year",
    "convert_month",
    "convert_tithi",
    "astronomical_details",
    "format",
    "format_date",
    "EngineConfig",
    "ObserverSite",
    "YearEpoch",
    "DEFAULT_CONFIG",
    "NepalSambatError",
    "InvalidDateError",
    "ConfigurationError",
    "AstronomicalDetails",
    "CalendarDate",
    "CalendarMonth",
    "FormattedDate",
    "Paksha",
    "Tithi",
    "TithiType",
    "is_in_range",
    "is_valid_solar_longitude",
    "is_valid_lunar_longitude",
    "is_valid_tithi",
    "is_valid_ns_month",
    "is_valid_ns_year",
    "solar_longitude_error_bounds",
    "lunar_longitude_error_bounds",
    "validate_conversion_result",
]
