"""Configuration module."""

from netatmo_weather.config.measurements import (
    DEFAULT_SCALE,
    FLOAT_MEASUREMENTS,
    INTEGER_MEASUREMENTS,
    MEASUREMENT_TYPES,
    MEASUREMENT_UNITS,
    SCALES,
    build_type_string,
    validate_scale,
)
from netatmo_weather.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "MEASUREMENT_TYPES",
    "FLOAT_MEASUREMENTS",
    "INTEGER_MEASUREMENTS",
    "MEASUREMENT_UNITS",
    "SCALES",
    "DEFAULT_SCALE",
    "build_type_string",
    "validate_scale",
]
