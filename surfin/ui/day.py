"""Per-day forecast table: time, swell, wind and air temperature rows."""

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime

from surfin.models.forecast import CompassDirection, Forecast, SwellComponent, SwellComponents
from surfin.ui.errors import EmptyInputError, InvariantViolationError
from surfin.ui.layout import DEFAULT_LAYOUT, Layout
from surfin.ui.view import Line, Span

ComponentGetter = Callable[[SwellComponents], SwellComponent | None]

# Arrows point the way the swell or wind travels, i.e. away from the compass
# point it comes from.
COMPASS_ARROWS: dict[CompassDirection, str] = {
    CompassDirection.N: "↓",
    CompassDirection.NNE: "↙",
    CompassDirection.NE: "↙",
    CompassDirection.ENE: "↙",
    CompassDirection.E: "←",
    CompassDirection.ESE: "↖",
    CompassDirection.SE: "↖",
    CompassDirection.SSE: "↖",
    CompassDirection.S: "↑",
    CompassDirection.SSW: "↗",
    CompassDirection.SW: "↗",
    CompassDirection.WSW: "↗",
    CompassDirection.W: "→",
    CompassDirection.WNW: "↘",
    CompassDirection.NW: "↘",
    CompassDirection.NNW: "↘",
}


def compass_to_arrow(direction: CompassDirection) -> str:
    return COMPASS_ARROWS[direction]


def format_hour(ts: datetime) -> str:
    """12-hour clock without leading zero, e.g. "3pm", "12am"."""
    hour = ts.hour % 12 or 12
    marker = "am" if ts.hour < 12 else "pm"
    return f"{hour}{marker}"


def format_direction(direction: CompassDirection, degrees: float) -> str:
    return f"{compass_to_arrow(direction)} {degrees:.0f}°"


class Day:
    """Detail table for one calendar day, one column per forecast."""

    # Fits "Secondary" with a space either side
    LEGEND_WIDTH = 11
    BOUNDARY_WIDTH = 1

    def __init__(self, forecast: Sequence[Forecast], layout: Layout = DEFAULT_LAYOUT):
        if not forecast:
            raise EmptyInputError("Cannot draw a day table from an empty forecast")
        self.forecast = forecast
        self.layout = layout

        # usually 8, at 3 hour intervals
        num_forecasts = len(forecast)
        # one before each column, including between legend and first column
        num_boundaries = num_forecasts
        interior = layout.interior_width
        budget = interior - num_boundaries * self.BOUNDARY_WIDTH - self.LEGEND_WIDTH
        if budget < 0:
            raise InvariantViolationError(
                f"{num_forecasts} forecasts do not fit in {interior} cells"
            )
        self.bin_width = budget // num_forecasts
        used_space = (
            self.LEGEND_WIDTH
            + num_boundaries * self.BOUNDARY_WIDTH
            + num_forecasts * self.bin_width
        )
        self.right_margin = interior - used_space

    def title(self) -> str:
        return f"{self.forecast[0].local_timestamp:%a %b %d}"

    def draw_inner(self) -> list[Line]:
        groups = [self.time()]
        if self.is_primary_present():
            groups.append(self.swell("Primary", lambda c: c.primary))
        if self.is_secondary_present():
            groups.append(self.swell("Secondary", lambda c: c.secondary))
        groups.append(self.wind())
        groups.append(self.weather())

        lines: list[Line] = []
        for ix, group in enumerate(groups):
            if ix:
                lines.append(self.skip_line())
            lines.extend(group)
        return lines

    def time(self) -> list[Line]:
        return [self._row("Time", (format_hour(fc.local_timestamp) for fc in self.forecast))]

    def swell(self, legend: str, component: ComponentGetter) -> list[Line]:
        heights, periods, directions = [], [], []
        for fc in self.forecast:
            c = component(fc.swell.components)
            if c is None:
                heights.append("")
                periods.append("")
                directions.append("")
                continue
            heights.append(f"{c.height:.1f} {fc.swell.unit}")
            periods.append(f"{c.period}s")
            directions.append(format_direction(c.compass_direction, c.direction))
        return [
            self._row("", heights),
            self._row(legend, periods),
            self._row("Swell", directions),
        ]

    def wind(self) -> list[Line]:
        return [
            self._row("", (f"{fc.wind.speed} {fc.wind.unit}" for fc in self.forecast)),
            self._row(
                "Wind",
                (
                    format_direction(fc.wind.compass_direction, fc.wind.direction)
                    for fc in self.forecast
                ),
            ),
        ]

    def weather(self) -> list[Line]:
        return [
            self._row(
                "Air",
                (
                    f"{fc.condition.temperature} {fc.condition.unit_temperature.label}"
                    for fc in self.forecast
                ),
            )
        ]

    def skip_line(self) -> Line:
        return [self.layout.blank(self.layout.interior_width)]

    def is_primary_present(self) -> bool:
        return any(fc.swell.components.primary is not None for fc in self.forecast)

    def is_secondary_present(self) -> bool:
        return any(fc.swell.components.secondary is not None for fc in self.forecast)

    def _row(self, legend: str, cells: Iterable[str]) -> Line:
        line: Line = [Span.new(self.layout.fit(legend, self.LEGEND_WIDTH))]
        for cell in cells:
            line.append(self.layout.blank(self.BOUNDARY_WIDTH))
            line.append(Span.new(self.layout.fit(cell, self.bin_width)))
        line.append(self.layout.blank(self.right_margin))
        return line
