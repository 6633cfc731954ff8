"""Parse MSW forecast JSON into Forecast records."""

import json
import logging
from pathlib import Path

from surfin.models.common import from_unix_local, from_unix_utc
from surfin.models.forecast import (
    Charts,
    CompassDirection,
    Condition,
    Forecast,
    Swell,
    SwellComponent,
    SwellComponents,
    UnitLength,
    UnitSpeed,
    UnitTemperature,
    Wind,
)

logger = logging.getLogger(__name__)


class ForecastParseError(ValueError):
    """Raised when a forecast record is missing fields or has bad values."""


def load_forecasts(path: str | Path) -> list[Forecast]:
    """Read an MSW forecast JSON file (a list of records)."""
    with open(path) as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ForecastParseError(f"Expected a list of forecast records in {path}")
    return parse_forecasts(raw)


def parse_forecasts(raw: list[dict]) -> list[Forecast]:
    """Parse records in order. Fails on the first malformed record."""
    forecasts = []
    for ix, item in enumerate(raw):
        try:
            forecasts.append(parse_forecast(item))
        except (KeyError, TypeError, ValueError) as e:
            raise ForecastParseError(f"Malformed forecast record at index {ix}: {e!r}") from e
    logger.debug("Parsed %d forecast records", len(forecasts))
    return forecasts


def parse_forecast(item: dict) -> Forecast:
    issued = item.get("issueTimestamp")
    return Forecast(
        timestamp=from_unix_utc(item["timestamp"]),
        local_timestamp=from_unix_local(item["localTimestamp"]),
        issue_timestamp=from_unix_utc(issued) if issued is not None else None,
        faded_rating=int(item["fadedRating"]),
        solid_rating=int(item["solidRating"]),
        swell=_parse_swell(item["swell"]),
        wind=_parse_wind(item["wind"]),
        condition=_parse_condition(item["condition"]),
        charts=_parse_charts(item.get("charts") or {}),
    )


def _parse_swell(raw: dict) -> Swell:
    components = raw.get("components") or {}
    probability = raw.get("probability")
    return Swell(
        unit=UnitLength(raw["unit"]),
        min_breaking_height=float(raw["minBreakingHeight"]),
        max_breaking_height=float(raw["maxBreakingHeight"]),
        abs_min_breaking_height=float(raw["absMinBreakingHeight"]),
        abs_max_breaking_height=float(raw["absMaxBreakingHeight"]),
        probability=float(probability) if probability is not None else None,
        components=SwellComponents(
            combined=_parse_component(components.get("combined")),
            primary=_parse_component(components.get("primary")),
            secondary=_parse_component(components.get("secondary")),
            tertiary=_parse_component(components.get("tertiary")),
        ),
    )


def _parse_component(raw: dict | None) -> SwellComponent | None:
    if not raw:
        return None
    return SwellComponent(
        height=float(raw["height"]),
        period=int(raw["period"]),
        direction=float(raw["direction"]),
        compass_direction=CompassDirection(raw["compassDirection"]),
    )


def _parse_wind(raw: dict) -> Wind:
    return Wind(
        speed=int(raw["speed"]),
        direction=float(raw["direction"]),
        compass_direction=CompassDirection(raw["compassDirection"]),
        chill=int(raw["chill"]),
        gusts=int(raw["gusts"]),
        unit=UnitSpeed(raw["unit"]),
    )


def _parse_condition(raw: dict) -> Condition:
    return Condition(
        pressure=int(raw["pressure"]),
        temperature=int(raw["temperature"]),
        weather=str(raw.get("weather", "")),
        unit_pressure=raw.get("unitPressure", "mb"),
        unit_temperature=UnitTemperature(raw["unit"]),
    )


def _parse_charts(raw: dict) -> Charts:
    return Charts(
        swell=raw.get("swell"),
        period=raw.get("period"),
        wind=raw.get("wind"),
        pressure=raw.get("pressure"),
        sst=raw.get("sst"),
    )
