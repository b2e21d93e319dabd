"""
Decoded measurement records.

A Measure is one timestamp's worth of readings for one device/module pair.
A MeasureSet is the ordered result of decoding one getmeasure response.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from netatmo_weather.config import MEASUREMENT_TYPES

MeasureValue = Optional[Union[int, float]]


@dataclass(frozen=True)
class Measure:
    """Readings at a single timestamp.

    ``values`` maps measurement type (e.g. "Temperature") to its reading, or
    None when the API reported nothing. A reading of exactly 0 is also None;
    see ``netatmo_weather.netatmo.decoding.resolve_float``.
    """

    device_id: str
    module_id: str
    timestamp: int  # Unix seconds
    values: Mapping[str, MeasureValue] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only view so a returned record cannot be altered in place
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __getitem__(self, measurement_type: str) -> MeasureValue:
        return self.values[measurement_type]

    def get(self, measurement_type: str) -> MeasureValue:
        return self.values.get(measurement_type)

    @property
    def datetime_utc(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into a single row dict (identifiers, timestamp, one key per type)."""
        row: Dict[str, Any] = {
            "device_id": self.device_id,
            "module_id": self.module_id,
            "timestamp": self.timestamp,
        }
        row.update(self.values)
        return row


class MeasureSet:
    """Ordered, read-only sequence of decoded measures.

    Order is the order of blocks and rows in the response. ``newest()`` is
    the last record by position, which is chronologically latest only
    because the API returns blocks in time order.
    """

    def __init__(
        self,
        measures: Sequence[Measure] = (),
        measurement_types: Sequence[str] = MEASUREMENT_TYPES,
    ):
        self._measures: Tuple[Measure, ...] = tuple(measures)
        self.measurement_types: Tuple[str, ...] = tuple(measurement_types)

    def __len__(self) -> int:
        return len(self._measures)

    def __iter__(self) -> Iterator[Measure]:
        return iter(self._measures)

    def __bool__(self) -> bool:
        return bool(self._measures)

    def __getitem__(self, index: int) -> Measure:
        return self._measures[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeasureSet):
            return NotImplemented
        return (
            self._measures == other._measures
            and self.measurement_types == other.measurement_types
        )

    def __repr__(self) -> str:
        return f"MeasureSet({len(self._measures)} measures)"

    def all(self) -> List[Measure]:
        """Range read: every decoded measure, in response order."""
        return list(self._measures)

    def newest(self) -> Optional[Measure]:
        """Newest read: the last measure, or None when there is no data."""
        if not self._measures:
            return None
        return self._measures[-1]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert to a DataFrame with one row per measure.

        Columns: device_id, module_id, timestamp, ts_utc, then one column per
        measurement type. Missing readings become NaN.
        """
        columns = ["device_id", "module_id", "timestamp", "ts_utc", *self.measurement_types]

        if not self._measures:
            return pd.DataFrame(columns=columns)

        df = pd.DataFrame([m.to_dict() for m in self._measures])
        df["ts_utc"] = pd.to_datetime(df["timestamp"], unit="s", utc=True)
        return df.reindex(columns=columns)
