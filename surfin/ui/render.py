"""Rendering entry points: forecast or view to a tagged output string."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from surfin.models.forecast import Forecast
from surfin.ui.browser import render_html
from surfin.ui.forecast_view import draw_forecast
from surfin.ui.layout import DEFAULT_LAYOUT, Layout
from surfin.ui.terminal import render_terminal
from surfin.ui.view import View


class Output(StrEnum):
    TERMINAL = "terminal"
    HTML = "html"


MEDIA_TYPES = {
    Output.TERMINAL: "text/plain; charset=utf-8",
    Output.HTML: "text/html; charset=utf-8",
}

RENDERERS: dict[Output, Callable[[View], str]] = {
    Output.TERMINAL: render_terminal,
    Output.HTML: render_html,
}


@dataclass(frozen=True)
class Rendered:
    output: Output
    body: str

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES[self.output]


def render(view: View, output: Output = Output.TERMINAL) -> Rendered:
    return Rendered(output=output, body=RENDERERS[output](view))


def render_forecast(
    forecast: Sequence[Forecast],
    output: Output = Output.TERMINAL,
    layout: Layout = DEFAULT_LAYOUT,
) -> Rendered:
    """Lay out a forecast and serialize it. Raises RenderError subclasses."""
    return render(draw_forecast(forecast, layout), output)
