"""Netatmo getmeasure type configuration.

Single source of truth for the measurement types requested from the
getmeasure endpoint. The API returns one column per requested type, in the
order they were requested, so the same tuple drives both the ``type=`` query
parameter and the column mapping used when decoding rows.

Reference: https://dev.netatmo.com/apidocumentation/weather#getmeasure
"""

from typing import Dict, FrozenSet, Iterable, Tuple

# Column order of every getmeasure row. Tuple so it cannot be mutated at runtime.
MEASUREMENT_TYPES: Tuple[str, ...] = (
    "Temperature",
    "CO2",
    "Humidity",
    "Pressure",
    "Noise",
    "WindStrength",
    "WindAngle",
    "GustStrength",
    "GustAngle",
)

FLOAT_MEASUREMENTS: FrozenSet[str] = frozenset({"Temperature", "Pressure"})

# Integral domains, truncated toward zero on decode
INTEGER_MEASUREMENTS: FrozenSet[str] = frozenset({
    "CO2",
    "Humidity",
    "Noise",
    "WindStrength",
    "WindAngle",
    "GustStrength",
    "GustAngle",
})

MEASUREMENT_UNITS: Dict[str, str] = {
    "Temperature": "°C",
    "CO2": "ppm",
    "Humidity": "%",
    "Pressure": "mbar",
    "Noise": "dB",
    "WindStrength": "km/h",
    "WindAngle": "°",
    "GustStrength": "km/h",
    "GustAngle": "°",
}

# Aggregation scales accepted by getmeasure ("max" = raw ~5 minute readings)
SCALES: Tuple[str, ...] = ("max", "30min", "1hour", "3hours", "1day", "1week", "1month")
DEFAULT_SCALE = "max"


def build_type_string(types: Iterable[str] = MEASUREMENT_TYPES) -> str:
    """
    Build the comma-separated ``type`` parameter for getmeasure.

    Args:
        types: Measurement types in column order (default: MEASUREMENT_TYPES)

    Returns:
        Comma-separated type string
    """
    return ",".join(types)


def validate_scale(scale: str) -> str:
    """Return ``scale`` if the API accepts it, otherwise raise ValueError."""
    if scale not in SCALES:
        raise ValueError(f"Unknown scale: {scale} (expected one of {', '.join(SCALES)})")
    return scale
