"""Magicseaweed marine forecast data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class UnitLength(StrEnum):
    FEET = "ft"
    METERS = "m"


class UnitSpeed(StrEnum):
    MPH = "mph"
    KPH = "kph"


class UnitTemperature(StrEnum):
    CELSIUS = "c"
    FAHRENHEIT = "f"

    @property
    def label(self) -> str:
        return f"°{self.value.upper()}"


class CompassDirection(StrEnum):
    N = "N"
    NNE = "NNE"
    NE = "NE"
    ENE = "ENE"
    E = "E"
    ESE = "ESE"
    SE = "SE"
    SSE = "SSE"
    S = "S"
    SSW = "SSW"
    SW = "SW"
    WSW = "WSW"
    W = "W"
    WNW = "WNW"
    NW = "NW"
    NNW = "NNW"


@dataclass(frozen=True)
class SwellComponent:
    height: float
    period: int  # seconds
    direction: float  # degrees
    compass_direction: CompassDirection


@dataclass(frozen=True)
class SwellComponents:
    combined: SwellComponent | None = None
    primary: SwellComponent | None = None
    secondary: SwellComponent | None = None
    tertiary: SwellComponent | None = None


@dataclass(frozen=True)
class Swell:
    unit: UnitLength
    min_breaking_height: float
    max_breaking_height: float
    abs_min_breaking_height: float
    abs_max_breaking_height: float
    components: SwellComponents = SwellComponents()
    probability: float | None = None


@dataclass(frozen=True)
class Wind:
    speed: int
    direction: float
    compass_direction: CompassDirection
    chill: int
    gusts: int
    unit: UnitSpeed


@dataclass(frozen=True)
class Condition:
    pressure: int
    temperature: int
    unit_pressure: str
    unit_temperature: UnitTemperature
    weather: str = ""


@dataclass(frozen=True)
class Charts:
    swell: str | None = None
    period: str | None = None
    wind: str | None = None
    pressure: str | None = None
    sst: str | None = None


@dataclass(frozen=True)
class Forecast:
    """One 3-hourly forecast sample for a surf spot.

    ``local_timestamp`` is naive wall-clock time at the spot; ``timestamp`` is
    the absolute UTC instant.
    """

    timestamp: datetime
    local_timestamp: datetime
    faded_rating: int
    solid_rating: int
    swell: Swell
    wind: Wind
    condition: Condition
    charts: Charts = field(default_factory=Charts)
    issue_timestamp: datetime | None = None
