"""Shared test fixtures."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import yaml

from surfin.models.forecast import (
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

# Sat Oct 19 2024, midnight local
WEEK_START = datetime(2024, 10, 19)


def build_forecast(
    local_timestamp: datetime = WEEK_START,
    max_height: float = 3.0,
    abs_max_height: float | None = None,
    unit: UnitLength = UnitLength.FEET,
    solid_rating: int = 1,
    faded_rating: int = 1,
    primary: bool = True,
    secondary: bool = False,
) -> Forecast:
    abs_max = max_height if abs_max_height is None else abs_max_height
    components = SwellComponents(
        primary=SwellComponent(
            height=max_height, period=12, direction=93.0,
            compass_direction=CompassDirection.W,
        ) if primary else None,
        secondary=SwellComponent(
            height=1.5, period=7, direction=180.0,
            compass_direction=CompassDirection.N,
        ) if secondary else None,
    )
    return Forecast(
        timestamp=local_timestamp.replace(tzinfo=UTC) + timedelta(hours=4),
        local_timestamp=local_timestamp,
        faded_rating=faded_rating,
        solid_rating=solid_rating,
        swell=Swell(
            unit=unit,
            min_breaking_height=max(max_height - 1, 0),
            max_breaking_height=max_height,
            abs_min_breaking_height=max(abs_max - 1, 0),
            abs_max_breaking_height=abs_max,
            components=components,
        ),
        wind=Wind(
            speed=12, direction=225.0, compass_direction=CompassDirection.SW,
            chill=60, gusts=18, unit=UnitSpeed.MPH,
        ),
        condition=Condition(
            pressure=1016, temperature=72, unit_pressure="mb",
            unit_temperature=UnitTemperature.FAHRENHEIT,
        ),
    )


def build_week(days: int = 5, heights: list[float] | None = None, **kwargs) -> list[Forecast]:
    """Eight 3-hourly forecasts per day starting at WEEK_START."""
    count = days * 8
    heights = heights or [1.0 + (ix % 7) for ix in range(count)]
    return [
        build_forecast(
            local_timestamp=WEEK_START + timedelta(hours=3 * ix),
            max_height=heights[ix],
            **kwargs,
        )
        for ix in range(count)
    ]


@pytest.fixture
def make_forecast() -> Callable[..., Forecast]:
    return build_forecast


@pytest.fixture
def make_week() -> Callable[..., list[Forecast]]:
    return build_week


@pytest.fixture
def forecast_week() -> list[Forecast]:
    return build_week(days=5)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "layout": {"viewport_width": 80, "graph_height": 8},
        "msw": {"api_key": "test-key", "max_retries": 1},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
