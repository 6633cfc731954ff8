"""Titled box drawing shared by every forecast section."""

import logging
from typing import Protocol

from surfin.ui.errors import InvariantViolationError
from surfin.ui.layout import Layout
from surfin.ui.view import (
    CORNER_BTM_LEFT,
    CORNER_BTM_RIGHT,
    CORNER_TOP_LEFT,
    CORNER_TOP_RIGHT,
    LINE_HORIZONTAL,
    LINE_VERT,
    TEE_LEFT,
    TEE_RIGHT,
    Line,
    Span,
)

logger = logging.getLogger(__name__)

ELLIPSIS = "…"
# Tees plus the padding spaces around the title
TITLE_CHROME_WIDTH = 4


class Section(Protocol):
    layout: Layout

    def title(self) -> str:
        """Title string (unpadded)."""
        ...

    def draw_inner(self) -> list[Line]:
        """Contents within the border."""
        ...


def draw(section: Section) -> list[Span]:
    """Border the section's contents with its title."""
    return border(section.title(), section.draw_inner(), section.layout)


def border(title: str, inner: list[Line], layout: Layout) -> list[Span]:
    """Wrap interior lines with a titled border."""
    for ix, line in enumerate(inner):
        check_line(line, layout, f"{title!r} line {ix}")

    spans = border_top(title, layout)
    spans.append(Span.newline())

    spans.append(Span.new(LINE_VERT))
    for ix, line in enumerate(inner):
        if ix:
            spans.extend([Span.new(LINE_VERT), Span.newline(), Span.new(LINE_VERT)])
        spans.extend(line)
    spans.append(Span.new(LINE_VERT))
    spans.append(Span.newline())

    spans.extend(border_bottom(layout))
    return spans


def border_top(title: str, layout: Layout) -> list[Span]:
    """Three header lines: title tab top, title row, title tab bottom."""
    padded = f" {fit_title(title, layout)} "
    tab_width = layout.width(padded)

    box_top = CORNER_TOP_LEFT + LINE_HORIZONTAL * tab_width + CORNER_TOP_RIGHT
    top = layout.fit(box_top, layout.viewport_width)

    box_mid = f"{TEE_LEFT}{padded}{TEE_RIGHT}"
    mid = (
        CORNER_TOP_LEFT
        + layout.fit(box_mid, layout.interior_width, fill=LINE_HORIZONTAL)
        + CORNER_TOP_RIGHT
    )

    box_btm = CORNER_BTM_LEFT + LINE_HORIZONTAL * tab_width + CORNER_BTM_RIGHT
    btm = LINE_VERT + layout.fit(box_btm, layout.interior_width) + LINE_VERT

    return [
        Span.new(top),
        Span.newline(),
        Span.new(mid),
        Span.newline(),
        Span.new(btm),
    ]


def border_bottom(layout: Layout) -> list[Span]:
    """Closing line for the bottom of the box."""
    return [
        Span.new(
            CORNER_BTM_LEFT
            + LINE_HORIZONTAL * layout.interior_width
            + CORNER_BTM_RIGHT
        )
    ]


def fit_title(title: str, layout: Layout) -> str:
    """Truncate a title with an ellipsis so its tab fits the viewport."""
    max_width = layout.interior_width - TITLE_CHROME_WIDTH
    if max_width < 1:
        raise InvariantViolationError(
            f"Viewport width {layout.viewport_width} cannot fit a section title"
        )
    if layout.width(title) <= max_width:
        return title
    logger.debug("Truncating title %r to %d cells", title, max_width)
    return layout.clip(title, max_width - layout.width(ELLIPSIS)) + ELLIPSIS


def check_line(line: Line, layout: Layout, where: str = "line") -> None:
    if any(span.is_newline for span in line):
        raise InvariantViolationError(f"{where} contains a line break")
    width = layout.line_width(line)
    if width != layout.interior_width:
        raise InvariantViolationError(
            f"{where} is {width} cells wide, expected {layout.interior_width}"
        )

