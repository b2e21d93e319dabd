"""Netatmo API client module."""

from netatmo_weather.netatmo.client import NetatmoClient
from netatmo_weather.netatmo.decoding import (
    decode_measure_response,
    expand_series,
    parse_measure_response,
    resolve_float,
    resolve_int,
    resolve_value,
)
from netatmo_weather.netatmo.exceptions import (
    MeasureDecodeError,
    NetatmoAuthError,
    NetatmoError,
)
from netatmo_weather.netatmo.measures import Measure, MeasureSet
from netatmo_weather.netatmo.schemas import (
    Administrative,
    DashboardData,
    Device,
    GetMeasureResponse,
    GetStationsDataResponse,
    MeasureBlock,
    Module,
    Place,
    User,
)

__all__ = [
    "NetatmoClient",
    "Measure",
    "MeasureSet",
    "MeasureBlock",
    "GetMeasureResponse",
    "GetStationsDataResponse",
    "Device",
    "Module",
    "Place",
    "DashboardData",
    "Administrative",
    "User",
    "NetatmoError",
    "NetatmoAuthError",
    "MeasureDecodeError",
    "decode_measure_response",
    "expand_series",
    "parse_measure_response",
    "resolve_float",
    "resolve_int",
    "resolve_value",
]
