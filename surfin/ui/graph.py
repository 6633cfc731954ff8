"""Swell height step chart spanning the whole forecast range."""

import math
from collections.abc import Sequence
from enum import IntEnum

from surfin.models.forecast import Forecast, UnitLength
from surfin.ui.errors import EmptyInputError, InvariantViolationError
from surfin.ui.layout import DEFAULT_LAYOUT, Align, Layout
from surfin.ui.view import (
    CORNER_BTM_LEFT,
    CORNER_BTM_RIGHT,
    CORNER_TOP_LEFT,
    CORNER_TOP_RIGHT,
    LINE_HORIZONTAL,
    LINE_VERT,
    Color,
    Line,
    Span,
)

# Headroom above the tallest forecast so the peak isn't drawn on the top row
SWELL_BUFFER = {
    UnitLength.FEET: 1.0,
    UnitLength.METERS: 0.5,
}

BELOW_FILL = "."
ABOVE_FILL = " "


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def cmp(a: int, b: int) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


_L, _E, _G = Ordering.LESS, Ordering.EQUAL, Ordering.GREATER

# Glyph for the boundary cell between bins x-1 and x at graph row y, keyed by
# (cmp(h[x], h[x-1]), cmp(h[x], y), cmp(h[x-1], y)). Row 0 is the top of the
# graph, so a greater height is drawn lower on screen.
BOUNDARY_GLYPHS: dict[tuple[Ordering, Ordering, Ordering], str] = {
    # stepping up from left to right
    (_L, _G, _G): ABOVE_FILL,
    (_L, _L, _L): BELOW_FILL,
    (_L, _G, _L): LINE_VERT,
    (_L, _L, _G): LINE_VERT,
    (_L, _E, _E): CORNER_TOP_LEFT,
    (_L, _E, _G): CORNER_TOP_LEFT,
    (_L, _E, _L): CORNER_TOP_LEFT,
    (_L, _G, _E): CORNER_BTM_RIGHT,
    (_L, _L, _E): CORNER_BTM_RIGHT,
    # level
    (_E, _G, _G): ABOVE_FILL,
    (_E, _L, _L): BELOW_FILL,
    (_E, _G, _L): LINE_VERT,
    (_E, _L, _G): LINE_VERT,
    (_E, _E, _E): LINE_HORIZONTAL,
    (_E, _E, _G): LINE_HORIZONTAL,
    (_E, _E, _L): LINE_HORIZONTAL,
    (_E, _G, _E): LINE_HORIZONTAL,
    (_E, _L, _E): LINE_HORIZONTAL,
    # stepping down from left to right
    (_G, _G, _G): ABOVE_FILL,
    (_G, _L, _L): BELOW_FILL,
    (_G, _G, _L): LINE_VERT,
    (_G, _L, _G): LINE_VERT,
    (_G, _E, _E): CORNER_BTM_LEFT,
    (_G, _E, _G): CORNER_BTM_LEFT,
    (_G, _E, _L): CORNER_BTM_LEFT,
    (_G, _G, _E): CORNER_TOP_RIGHT,
    (_G, _L, _E): CORNER_TOP_RIGHT,
}


def boundary_glyph(height: int, last_height: int, y: int) -> str:
    return BOUNDARY_GLYPHS[(cmp(height, last_height), cmp(height, y), cmp(last_height, y))]


def rating_color(fc: Forecast) -> Color:
    """Pick a color from the star ratings.

    There is no spot orientation data to tell on/off/cross-shore wind and
    swell apart, so the rating is the only proxy for quality.
    """
    if fc.solid_rating == 0:
        return Color.RED
    if fc.faded_rating == 0:
        return Color.GREEN
    return Color.BLUE


def format_height(value: float) -> str:
    """Shortest decimal form: 4.0 -> "4", 4.5 -> "4.5"."""
    return f"{value:g}"


class Graph:
    """The swell graph over a multi-day forecast."""

    def __init__(self, forecast: Sequence[Forecast], layout: Layout = DEFAULT_LAYOUT):
        if not forecast:
            raise EmptyInputError("Cannot draw a swell graph from an empty forecast")
        self.forecast = forecast
        self.layout = layout
        self.unit = forecast[0].swell.unit
        self.min_swell_height = 0.0
        self.max_swell_height = (
            max(fc.swell.max_breaking_height for fc in forecast) + SWELL_BUFFER[self.unit]
        )

    @property
    def graph_height(self) -> int:
        return self.layout.graph_height

    def title(self) -> str:
        timestamps = [fc.local_timestamp for fc in self.forecast]
        return f"{min(timestamps):%a %b %d} - {max(timestamps):%a %b %d}"

    def draw_inner(self) -> list[Line]:
        legend, legend_width = self.legend_column()
        interior = self.layout.interior_width
        num_bins = len(self.forecast)
        num_boundaries = num_bins - 1
        budget = interior - legend_width - num_boundaries
        if budget < 0:
            raise InvariantViolationError(
                f"{num_bins} forecasts do not fit in {interior} cells"
            )
        bin_width = budget // num_bins
        right_margin = interior - (legend_width + num_boundaries + num_bins * bin_width)

        heights = [self.graph_row(fc) for fc in self.forecast]
        colors = [rating_color(fc) for fc in self.forecast]

        lines = []
        for y in range(self.graph_height):
            line: Line = [legend[y]]
            for x, (height, color) in enumerate(zip(heights, colors)):
                if x > 0:
                    line.append(self._boundary(height, heights[x - 1], y, color))
                line.append(self._bin(height, y, bin_width, color))
            line.append(self.layout.blank(right_margin))
            lines.append(line)
        return lines

    def legend_column(self) -> tuple[list[Span], int]:
        """Legend spans for each graph row and the legend width.

        Only the top row (max) and bottom row (min) carry labels.
        """
        unit = str(self.unit)
        max_label = format_height(self.max_swell_height)
        min_label = format_height(self.min_swell_height)
        num_width = max(self.layout.width(max_label), self.layout.width(min_label))
        legend_max = f" {self.layout.fit(max_label, num_width, Align.RIGHT)} {unit} "
        legend_min = f" {self.layout.fit(min_label, num_width, Align.RIGHT)} {unit} "
        legend_width = self.layout.width(legend_max)
        if self.layout.width(legend_min) != legend_width:
            raise InvariantViolationError(
                f"Legend labels differ in width: {legend_max!r} vs {legend_min!r}"
            )

        legend = [self.layout.blank(legend_width) for _ in range(self.graph_height)]
        legend[0] = Span.new(legend_max)
        legend[-1] = Span.new(legend_min)
        return legend, legend_width

    def scale(self, height: float) -> int:
        """Map a swell height onto [0, graph_height], rounding half up."""
        swell_range = self.max_swell_height - self.min_swell_height
        proportion = (height - self.min_swell_height) / swell_range
        scaled = math.floor(proportion * self.graph_height + 0.5)
        return min(max(scaled, 0), self.graph_height)

    def graph_row(self, fc: Forecast) -> int:
        """Row of the wave line for a forecast; row 0 is the top."""
        return self.graph_height - self.scale(fc.swell.abs_max_breaking_height)

    def _bin(self, height: int, y: int, width: int, color: Color) -> Span:
        if height == y:
            fill = LINE_HORIZONTAL
        elif height < y:
            fill = BELOW_FILL
        else:
            fill = ABOVE_FILL
        span = Span.new(fill * width)
        span.style.fg(color)
        return span

    def _boundary(self, height: int, last_height: int, y: int, color: Color) -> Span:
        span = Span.new(boundary_glyph(height, last_height, y))
        span.style.fg(color)
        return span
