"""
Decoder for Netatmo getmeasure responses.

The getmeasure endpoint packs readings as a list of blocks, each carrying a
begin timestamp, a step interval and a matrix of nullable cells:

    {"body": [{"beg_time": 1000, "step_time": 60,
               "value": [[21.5, null, 55, ...], [0, 400, 0, ...]]}],
     "status": "ok", "time_exec": 0.02, "time_server": 1700000000}

Each row becomes one Measure stamped ``beg_time + step_time * row_index``,
with columns mapped to MEASUREMENT_TYPES in order.

Zero readings:
    The API sends a bare 0 both for "no reading" and for a genuine zero.
    Every cell exactly equal to 0 is decoded as None, so a real 0° wind angle
    or 0 km/h gust is reported as missing. This matches the upstream data and
    is intentional.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from netatmo_weather.config import INTEGER_MEASUREMENTS, MEASUREMENT_TYPES
from netatmo_weather.netatmo.exceptions import MeasureDecodeError
from netatmo_weather.netatmo.measures import Measure, MeasureSet, MeasureValue
from netatmo_weather.netatmo.schemas import GetMeasureResponse, MeasureBlock

logger = logging.getLogger(__name__)

Payload = Union[bytes, str, Dict[str, Any]]


def _reject_constant(name: str) -> float:
    # NaN, Infinity and -Infinity are not valid JSON numbers
    raise ValueError(f"Unsupported JSON constant: {name}")


def resolve_float(value: Optional[float]) -> Optional[float]:
    """Return the reading, or None if it is missing or exactly 0."""
    if value is None:
        return None
    if value == 0.0:
        return None
    return float(value)


def resolve_int(value: Optional[float]) -> Optional[int]:
    """Like resolve_float, truncating the reading toward zero."""
    resolved = resolve_float(value)
    if resolved is None:
        return None
    return int(resolved)


def resolve_value(measurement_type: str, value: Optional[float]) -> MeasureValue:
    """Resolve one cell according to the domain of its measurement type."""
    if measurement_type in INTEGER_MEASUREMENTS:
        return resolve_int(value)
    return resolve_float(value)


def expand_series(
    blocks: Sequence[MeasureBlock],
    device_id: str,
    module_id: str,
    measurement_types: Sequence[str] = MEASUREMENT_TYPES,
) -> List[Measure]:
    """
    Flatten getmeasure blocks into one Measure per row.

    Blocks and rows keep their response order; nothing is sorted or
    deduplicated.

    Args:
        blocks: Parsed getmeasure blocks
        device_id: Device the query was made for (not present in the payload)
        module_id: Module the query was made for (not present in the payload)
        measurement_types: Column order of each row (default: MEASUREMENT_TYPES)

    Returns:
        List of Measure objects (empty if no block has rows)

    Raises:
        MeasureDecodeError: If a row's width differs from len(measurement_types)
    """
    width = len(measurement_types)
    measures: List[Measure] = []

    for block_index, block in enumerate(blocks):
        for row_index, row in enumerate(block.value):
            if len(row) != width:
                raise MeasureDecodeError(
                    f"Block {block_index} row {row_index} has {len(row)} values, "
                    f"expected {width} ({','.join(measurement_types)})"
                )

            values = {
                measurement_type: resolve_value(measurement_type, cell)
                for measurement_type, cell in zip(measurement_types, row)
            }
            measures.append(
                Measure(
                    device_id=device_id,
                    module_id=module_id,
                    timestamp=block.beg_time + block.step_time * row_index,
                    values=values,
                )
            )

    return measures


def parse_measure_response(payload: Payload) -> GetMeasureResponse:
    """
    Parse a raw getmeasure payload.

    Args:
        payload: Response body as bytes, str, or an already-decoded dict

    Raises:
        MeasureDecodeError: If the payload is not valid JSON or does not match
            the getmeasure envelope
    """
    if isinstance(payload, (bytes, bytearray, str)):
        try:
            payload = json.loads(payload, parse_constant=_reject_constant)
        except ValueError as e:
            raise MeasureDecodeError(f"Invalid getmeasure JSON: {e}") from e

    try:
        return GetMeasureResponse.model_validate(payload)
    except ValidationError as e:
        raise MeasureDecodeError(f"Unexpected getmeasure payload: {e}") from e


def decode_measure_response(
    payload: Payload,
    device_id: str,
    module_id: str,
    measurement_types: Sequence[str] = MEASUREMENT_TYPES,
) -> MeasureSet:
    """
    Decode a getmeasure response into a MeasureSet.

    A well-formed response with no blocks or no rows yields an empty
    MeasureSet. Any decoding problem raises and no partial result is returned.

    Args:
        payload: Response body as bytes, str, or an already-decoded dict
        device_id: Device identifier, copied onto every measure
        module_id: Module identifier, copied onto every measure
        measurement_types: Types requested, in request order

    Returns:
        MeasureSet in response order

    Raises:
        MeasureDecodeError: On invalid JSON, schema mismatch or row width mismatch
    """
    response = parse_measure_response(payload)
    measures = expand_series(response.body, device_id, module_id, measurement_types)

    logger.debug(
        f"Decoded {len(measures)} measures from {len(response.body)} blocks "
        f"for {device_id}/{module_id}"
    )

    return MeasureSet(measures, measurement_types)
