"""
Pydantic schemas for Netatmo Weather API responses.

Models mirror the getstationsdata and getmeasure JSON envelopes. Readings the
API may omit are Optional; absence is never encoded as an in-band value.

Reference: https://dev.netatmo.com/apidocumentation/weather
"""

from typing import Annotated, Any, List, Optional, Union

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, Strict, StrictInt, field_validator

# getmeasure cell: JSON number or null. Bools, strings, NaN and Infinity are rejected.
MeasureCell = Optional[Union[StrictInt, Annotated[float, Strict(), AllowInfNan(False)]]]


class MeasureBlock(BaseModel):
    """One getmeasure time-series block.

    Readings are evenly spaced: row ``i`` of ``value`` was taken at
    ``beg_time + step_time * i``. Each row holds one cell per requested
    measurement type, in request order.

    Example:
    {
        "beg_time": 1700000000,
        "step_time": 300,
        "value": [[21.5, 412, 48, ...], [21.4, null, 48, ...]]
    }
    """

    beg_time: StrictInt
    step_time: StrictInt = 0  # omitted by the API when the block has a single row
    value: List[List[MeasureCell]] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", allow_inf_nan=False)

    @field_validator("value", mode="before")
    @classmethod
    def null_value_is_empty(cls, v: Any) -> Any:
        """A null matrix means no rows."""
        return [] if v is None else v


class GetMeasureResponse(BaseModel):
    """Envelope returned by /api/getmeasure."""

    body: List[MeasureBlock] = Field(default_factory=list)
    status: Optional[str] = None
    time_exec: Optional[float] = None
    time_server: Optional[int] = None

    model_config = ConfigDict(extra="allow")

    @field_validator("body", mode="before")
    @classmethod
    def null_body_is_empty(cls, v: Any) -> Any:
        """A null body means no blocks."""
        return [] if v is None else v


class Place(BaseModel):
    """Station location."""

    altitude: Optional[int] = None
    city: Optional[str] = None  # e.g. 千代田区
    country: Optional[str] = None  # country code, e.g. JP
    timezone: Optional[str] = None  # TZ database name, e.g. Asia/Tokyo
    location: List[float] = Field(default_factory=list)  # coordinate pair, latitude first

    model_config = ConfigDict(extra="allow")

    @property
    def latitude(self) -> float:
        if len(self.location) != 2:
            return 0.0
        return self.location[0]

    @property
    def longitude(self) -> float:
        if len(self.location) != 2:
            return 0.0
        return self.location[1]


class DashboardData(BaseModel):
    """Newest readings reported by a device or module."""

    time_utc: Optional[int] = None

    # Temperature
    temperature: Optional[float] = Field(default=None, alias="Temperature")
    min_temp: Optional[float] = None
    max_temp: Optional[float] = None
    date_min_temp: Optional[int] = None
    date_max_temp: Optional[int] = None
    temp_trend: Optional[str] = None

    # Indoor air
    co2: Optional[int] = Field(default=None, alias="CO2")
    humidity: Optional[int] = Field(default=None, alias="Humidity")
    noise: Optional[int] = Field(default=None, alias="Noise")

    # Pressure
    pressure: Optional[float] = Field(default=None, alias="Pressure")
    absolute_pressure: Optional[float] = Field(default=None, alias="AbsolutePressure")
    pressure_trend: Optional[str] = None

    # Rain
    rain: Optional[float] = Field(default=None, alias="Rain")
    sum_rain_1: Optional[float] = None
    sum_rain_24: Optional[float] = None

    # Wind
    gust_angle: Optional[int] = Field(default=None, alias="GustAngle")
    gust_strength: Optional[int] = Field(default=None, alias="GustStrength")
    wind_angle: Optional[int] = Field(default=None, alias="WindAngle")
    wind_strength: Optional[int] = Field(default=None, alias="WindStrength")
    max_wind_str: Optional[int] = None
    date_max_wind_str: Optional[int] = None

    health_idx: Optional[int] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Module(BaseModel):
    """Module paired with a station (outdoor, wind gauge, rain gauge, ...)."""

    id: str = Field(alias="_id")
    type: str
    module_name: Optional[str] = None
    data_type: List[str] = Field(default_factory=list)
    last_setup: Optional[int] = None
    reachable: bool = False
    firmware: Optional[int] = None
    last_message: Optional[int] = None
    last_seen: Optional[int] = None
    rf_status: Optional[int] = None
    battery_vp: Optional[int] = None
    battery_percent: Optional[int] = None
    dashboard_data: Optional[DashboardData] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Device(BaseModel):
    """Main station device."""

    id: str = Field(alias="_id")
    cipher_id: Optional[str] = None
    date_setup: Optional[int] = None
    last_setup: Optional[int] = None
    type: str
    last_status_store: Optional[int] = None
    module_name: Optional[str] = None
    firmware: Optional[int] = None
    last_upgrade: Optional[int] = None
    wifi_status: Optional[int] = None
    reachable: bool = False
    co2_calibrating: bool = False
    station_name: Optional[str] = None
    data_type: List[str] = Field(default_factory=list)
    place: Place = Field(default_factory=Place)
    dashboard_data: Optional[DashboardData] = None
    modules: List[Module] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", populate_by_name=True)


UNIT_NAMES = {0: "metric system", 1: "imperial system"}
WIND_UNIT_NAMES = {0: "kph", 1: "mph", 2: "ms", 3: "beaufort", 4: "knot"}
PRESSURE_UNIT_NAMES = {0: "mbar", 1: "inHg", 2: "mmHg"}
FEEL_LIKE_ALGORITHM_NAMES = {0: "humidex", 1: "heat-index"}


class Administrative(BaseModel):
    """User locale and unit preferences."""

    lang: Optional[str] = None
    reg_locale: Optional[str] = None  # used for displaying dates
    country: Optional[str] = None
    unit: int = 0
    windunit: int = 0
    pressureunit: int = 0
    feel_like_algo: int = 0

    model_config = ConfigDict(extra="allow")

    def describe_unit(self) -> str:
        return UNIT_NAMES.get(self.unit, f"unknown unit: {self.unit}")

    def describe_wind_unit(self) -> str:
        return WIND_UNIT_NAMES.get(self.windunit, f"unknown wind unit: {self.windunit}")

    def describe_pressure_unit(self) -> str:
        return PRESSURE_UNIT_NAMES.get(
            self.pressureunit, f"unknown pressure unit: {self.pressureunit}"
        )

    def describe_feel_like_algorithm(self) -> str:
        return FEEL_LIKE_ALGORITHM_NAMES.get(
            self.feel_like_algo, f"unknown feel like algorithm: {self.feel_like_algo}"
        )


class User(BaseModel):
    """Account owning the stations."""

    mail: Optional[str] = None
    administrative: Administrative = Field(default_factory=Administrative)

    model_config = ConfigDict(extra="allow")


class StationsDataBody(BaseModel):
    devices: List[Device] = Field(default_factory=list)
    user: User = Field(default_factory=User)


class GetStationsDataResponse(BaseModel):
    """Envelope returned by /api/getstationsdata."""

    body: StationsDataBody = Field(default_factory=StationsDataBody)
    status: Optional[str] = None
    time_exec: Optional[float] = None
    time_server: Optional[int] = None

    model_config = ConfigDict(extra="allow")
