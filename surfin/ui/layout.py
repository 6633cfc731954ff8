"""Fixed layout settings and cell-width accounting."""

import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum

from surfin.config.defaults import DEFAULT_GRAPH_HEIGHT, DEFAULT_VIEWPORT_WIDTH
from surfin.ui.view import Span

CellWidth = Callable[[str], int]


class Align(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def narrow_width(text: str) -> int:
    """One terminal cell per code point."""
    return len(text)


def east_asian_width(text: str) -> int:
    """Wide and fullwidth code points take two cells, combining marks none."""
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


@dataclass(frozen=True)
class Layout:
    viewport_width: int = DEFAULT_VIEWPORT_WIDTH
    graph_height: int = DEFAULT_GRAPH_HEIGHT
    cell_width: CellWidth = narrow_width

    def __post_init__(self):
        if self.viewport_width < 3:
            raise ValueError(f"viewport_width must be at least 3, got {self.viewport_width}")
        if self.graph_height < 2:
            raise ValueError(f"graph_height must be at least 2, got {self.graph_height}")

    @property
    def interior_width(self) -> int:
        """Viewport width minus the two border columns."""
        return self.viewport_width - 2

    def width(self, text: str) -> int:
        return self.cell_width(text)

    def line_width(self, spans: Iterable[Span]) -> int:
        return sum(self.width(span.text) for span in spans)

    def clip(self, text: str, width: int) -> str:
        if self.width(text) <= width:
            return text
        clipped = ""
        for ch in text:
            if self.width(clipped + ch) > width:
                break
            clipped += ch
        return clipped

    def fit(
        self,
        text: str,
        width: int,
        align: Align = Align.CENTER,
        fill: str = " ",
    ) -> str:
        """Clip ``text`` to ``width`` cells and pad it with ``fill``.

        Centering puts the odd leftover cell on the right. ``fill`` must be a
        single-cell character.
        """
        text = self.clip(text, width)
        gap = width - self.width(text)
        if align == Align.LEFT:
            return text + fill * gap
        if align == Align.RIGHT:
            return fill * gap + text
        left = gap // 2
        return fill * left + text + fill * (gap - left)

    def blank(self, width: int) -> Span:
        return Span.new(" " * width)


DEFAULT_LAYOUT = Layout()
