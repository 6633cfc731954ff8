"""Assemble the full forecast view: week graph, then one table per day."""

import logging
from collections.abc import Sequence

from surfin.models.forecast import Forecast
from surfin.ui.border import draw
from surfin.ui.day import Day
from surfin.ui.graph import Graph
from surfin.ui.layout import DEFAULT_LAYOUT, Layout
from surfin.ui.view import Span, View

logger = logging.getLogger(__name__)

# MSW forecasts come at 12am, 3, 6, 9, 12pm, 3, 6, 9pm; 9pm closes a day
DAY_END_HOUR = 21


def split_days(forecast: Sequence[Forecast]) -> list[list[Forecast]]:
    """Partition forecasts after each 9pm sample, keeping it in the earlier day."""
    days: list[list[Forecast]] = []
    current: list[Forecast] = []
    for fc in forecast:
        current.append(fc)
        if fc.local_timestamp.hour == DAY_END_HOUR:
            days.append(current)
            current = []
    if current:
        days.append(current)
    return days


def draw_forecast(forecast: Sequence[Forecast], layout: Layout = DEFAULT_LAYOUT) -> View:
    """Transform a forecast into styled spans."""
    # The graph is uninteresting by day, so it covers the full range
    spans = draw(Graph(forecast, layout))

    days = split_days(forecast)
    for day in days:
        spans.append(Span.newline())
        spans.extend(draw(Day(day, layout)))

    logger.debug(
        "Drew %d forecasts into a graph and %d day tables (%d spans)",
        len(forecast), len(days), len(spans),
    )
    return View(spans)
