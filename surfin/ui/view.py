"""Styled-span document model shared by every section and renderer.

A ``View`` is a flat list of ``Span`` values in reading order. Spans never
nest; a line break is its own ``Span`` rather than a character inside text,
so renderers can map it to whatever their output format needs.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

LINE_VERT = "│"
LINE_HORIZONTAL = "─"
CORNER_TOP_LEFT = "┌"
CORNER_TOP_RIGHT = "┐"
CORNER_BTM_LEFT = "└"
CORNER_BTM_RIGHT = "┘"
TEE_LEFT = "┤"
TEE_RIGHT = "├"


class Color(StrEnum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Newline:
    pass


Content: TypeAlias = Text | Newline


@dataclass
class Style:
    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False

    def fg(self, color: Color) -> "Style":
        self.foreground = color
        return self

    def bg(self, color: Color) -> "Style":
        self.background = color
        return self

    def set_bold(self) -> "Style":
        self.bold = True
        return self

    @property
    def is_plain(self) -> bool:
        return self.foreground is None and self.background is None and not self.bold


@dataclass
class Span:
    content: Content
    style: Style = field(default_factory=Style)

    @classmethod
    def new(cls, text: str) -> "Span":
        # Keep control characters out of text; use Span.newline() instead
        return cls(Text(text))

    @classmethod
    def newline(cls) -> "Span":
        return cls(Newline())

    @property
    def is_newline(self) -> bool:
        return isinstance(self.content, Newline)

    @property
    def text(self) -> str:
        """Text of the span; empty for a line break."""
        if isinstance(self.content, Text):
            return self.content.value
        return ""


# One row of section interior, without line breaks
Line: TypeAlias = list[Span]


@dataclass
class View:
    spans: list[Span] = field(default_factory=list)

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)
