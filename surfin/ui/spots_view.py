"""Plain listing of known surf spots and their MSW ids."""

from collections.abc import Iterable

from surfin.models.common import SpotId, SpotName
from surfin.ui.layout import DEFAULT_LAYOUT, Align, Layout
from surfin.ui.view import Span, View

# Largest MSW spot id is four digits; leave room for one more
SPOT_ID_WIDTH = 5
EMPTY_NAME_WIDTH = 20


def draw_spots(spots: Iterable[tuple[SpotName, SpotId]], layout: Layout = DEFAULT_LAYOUT) -> View:
    rows = sorted(spots, key=lambda item: item[0])
    name_width = max((layout.width(name) for name, _ in rows), default=EMPTY_NAME_WIDTH)

    spans = []
    for name, spot_id in rows:
        spans.append(
            Span.new(
                f"{layout.fit(name, name_width, Align.RIGHT)} : "
                f"{layout.fit(str(spot_id), SPOT_ID_WIDTH, Align.LEFT)}"
            )
        )
        spans.append(Span.newline())
    return View(spans)
