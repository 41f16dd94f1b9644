"""Block widget - an optional bordered, titled frame around another widget."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from termflow.buffer import Buffer
from termflow.layout import Rect
from termflow.style import Style
from termflow.utils import graphemes, symbol_width


class Borders(enum.Flag):
    NONE = 0
    TOP = enum.auto()
    RIGHT = enum.auto()
    BOTTOM = enum.auto()
    LEFT = enum.auto()
    ALL = TOP | RIGHT | BOTTOM | LEFT


@dataclass(frozen=True)
class BorderSymbols:
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


class BorderType(enum.Enum):
    PLAIN = BorderSymbols("─", "│", "┌", "┐", "└", "┘")
    ROUNDED = BorderSymbols("─", "│", "╭", "╮", "╰", "╯")
    DOUBLE = BorderSymbols("═", "║", "╔", "╗", "╚", "╝")
    THICK = BorderSymbols("━", "┃", "┏", "┓", "┗", "┛")


class Block:
    """Draws borders and a title, and tells the wrapped widget where to draw."""

    def __init__(
        self,
        title: str | None = None,
        borders: Borders = Borders.NONE,
        border_style: Style | None = None,
        title_style: Style | None = None,
        style: Style | None = None,
        border_type: BorderType = BorderType.PLAIN,
    ) -> None:
        self.title = title
        self.borders = borders
        self.border_style = border_style or Style()
        self.title_style = title_style or Style()
        self.style = style or Style()
        self.border_type = border_type

    def inner(self, area: Rect) -> Rect:
        """The part of *area* left once borders are taken away."""
        x, y, width, height = area.x, area.y, area.width, area.height
        if Borders.LEFT in self.borders:
            x = min(x + 1, area.right)
            width = max(0, width - 1)
        if Borders.TOP in self.borders or self.title:
            y = min(y + 1, area.bottom)
            height = max(0, height - 1)
        if Borders.RIGHT in self.borders:
            width = max(0, width - 1)
        if Borders.BOTTOM in self.borders:
            height = max(0, height - 1)
        return Rect(x, y, width, height)

    def render(self, area: Rect, buf: Buffer) -> None:
        area = area.intersection(buf.area)
        if area.is_empty():
            return

        buf.set_style(area, self.style)
        symbols = self.border_type.value
        style = self.style.patch(self.border_style)

        if Borders.LEFT in self.borders:
            for y in range(area.top, area.bottom):
                buf.set_symbol(area.left, y, symbols.vertical, style)
        if Borders.TOP in self.borders:
            for x in range(area.left, area.right):
                buf.set_symbol(x, area.top, symbols.horizontal, style)
        if Borders.RIGHT in self.borders:
            for y in range(area.top, area.bottom):
                buf.set_symbol(area.right - 1, y, symbols.vertical, style)
        if Borders.BOTTOM in self.borders:
            for x in range(area.left, area.right):
                buf.set_symbol(x, area.bottom - 1, symbols.horizontal, style)

        # Corners
        if Borders.LEFT | Borders.TOP in self.borders:
            buf.set_symbol(area.left, area.top, symbols.top_left, style)
        if Borders.RIGHT | Borders.TOP in self.borders:
            buf.set_symbol(area.right - 1, area.top, symbols.top_right, style)
        if Borders.LEFT | Borders.BOTTOM in self.borders:
            buf.set_symbol(area.left, area.bottom - 1, symbols.bottom_left, style)
        if Borders.RIGHT | Borders.BOTTOM in self.borders:
            buf.set_symbol(area.right - 1, area.bottom - 1, symbols.bottom_right, style)

        if self.title:
            left = 1 if Borders.LEFT in self.borders else 0
            right = 1 if Borders.RIGHT in self.borders else 0
            title_width = area.width - left - right
            if title_width > 0:
                title_area = Rect(area.left + left, area.top, title_width, 1)
                self._draw_title(title_area, buf)

    def _draw_title(self, title_area: Rect, buf: Buffer) -> None:
        style = self.style.patch(self.title_style)
        x = title_area.left
        for g in graphemes(self.title or ""):
            width = symbol_width(g)
            if x + max(width, 1) > title_area.right:
                break
            buf.set_symbol(x, title_area.top, g, style)
            x += width
