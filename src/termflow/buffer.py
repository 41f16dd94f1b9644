"""The cell buffer widgets draw into.

A ``Buffer`` is a row-major grid of ``Cell`` objects covering a ``Rect``.
Wide glyphs occupy their own cell plus continuation cells whose symbol is the
empty string, so joining a row's symbols yields exactly what the terminal
shows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from termflow.layout import Rect
from termflow.style import Color, Modifier, Style
from termflow.utils import graphemes, symbol_width, visible_width

_RESET = "\x1b[0m"


@dataclass
class Cell:
    symbol: str = " "
    fg: Color | None = None
    bg: Color | None = None
    modifier: Modifier = field(default=Modifier.NONE)

    def set_symbol(self, symbol: str) -> Cell:
        self.symbol = symbol
        return self

    def set_fg(self, color: Color | None) -> Cell:
        self.fg = color
        return self

    def set_bg(self, color: Color | None) -> Cell:
        self.bg = color
        return self

    def set_style(self, style: Style) -> Cell:
        """Apply *style*: set colours override, the modifier is replaced."""
        if style.fg_color is not None:
            self.fg = style.fg_color
        if style.bg_color is not None:
            self.bg = style.bg_color
        self.modifier = style.modifier
        return self

    @property
    def style(self) -> Style:
        return Style(self.fg, self.bg, self.modifier)

    def reset(self) -> None:
        self.symbol = " "
        self.fg = None
        self.bg = None
        self.modifier = Modifier.NONE


class Buffer:
    """A grid of cells addressed by absolute ``(x, y)`` coordinates."""

    def __init__(self, area: Rect, content: list[Cell]) -> None:
        if len(content) != area.area:
            raise ValueError(
                f"buffer of {area.width}x{area.height} needs {area.area} cells, "
                f"got {len(content)}"
            )
        self.area = area
        self.content = content

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        return cls.filled(area, Cell())

    @classmethod
    def filled(cls, area: Rect, cell: Cell) -> Buffer:
        content = [
            Cell(cell.symbol, cell.fg, cell.bg, cell.modifier) for _ in range(area.area)
        ]
        return cls(area, content)

    @classmethod
    def with_lines(cls, lines: Iterable[str]) -> Buffer:
        """Build a buffer whose rows show *lines* in the default style."""
        rows = list(lines)
        width = max((visible_width(row) for row in rows), default=0)
        buf = cls.empty(Rect(0, 0, width, len(rows)))
        for y, row in enumerate(rows):
            buf.set_string(0, y, row, Style())
        return buf

    # -- addressing ---------------------------------------------------------

    def index_of(self, x: int, y: int) -> int:
        if not self.area.contains(x, y):
            raise IndexError(f"({x}, {y}) is outside of {self.area}")
        return (y - self.area.y) * self.area.width + (x - self.area.x)

    def get(self, x: int, y: int) -> Cell:
        return self.content[self.index_of(x, y)]

    # -- drawing ------------------------------------------------------------

    def set_symbol(self, x: int, y: int, symbol: str, style: Style) -> int:
        """Draw one grapheme at ``(x, y)`` and return the columns it took.

        Continuation cells of a wide glyph are blanked; a glyph that would
        cross the right edge is not drawn.
        """
        width = symbol_width(symbol)
        if x + max(width, 1) > self.area.right:
            return 0
        self.get(x, y).set_symbol(symbol).set_style(style)
        for i in range(1, width):
            self.get(x + i, y).set_symbol("").set_style(style)
        return width

    def set_string(self, x: int, y: int, text: str, style: Style) -> int:
        """Draw *text* from ``(x, y)`` rightwards, clipped to the buffer.

        Returns the column just after the last drawn glyph.
        """
        for g in graphemes(text):
            if x >= self.area.right:
                break
            drawn = self.set_symbol(x, y, g, style)
            if drawn == 0 and symbol_width(g) > 0:
                break
            x += drawn
        return x

    def set_style(self, area: Rect, style: Style) -> None:
        area = area.intersection(self.area)
        for y in range(area.top, area.bottom):
            for x in range(area.left, area.right):
                self.get(x, y).set_style(style)

    def set_background(self, area: Rect, color: Color | None) -> None:
        area = area.intersection(self.area)
        for y in range(area.top, area.bottom):
            for x in range(area.left, area.right):
                self.get(x, y).set_bg(color)

    def reset(self) -> None:
        for cell in self.content:
            cell.reset()

    # -- reading ------------------------------------------------------------

    def _rows(self) -> list[list[Cell]]:
        width = self.area.width
        return [self.content[y * width : (y + 1) * width] for y in range(self.area.height)]

    def lines(self) -> list[str]:
        """Plain text of every row, without styling."""
        return ["".join(cell.symbol for cell in row) for row in self._rows()]

    def to_ansi_lines(self) -> list[str]:
        """Every row as a string with SGR codes, reset at each line end."""
        result: list[str] = []
        for row in self._rows():
            parts: list[str] = []
            active = Style()
            for cell in row:
                if not cell.symbol:
                    continue
                style = cell.style
                if style != active:
                    if active != Style():
                        parts.append(_RESET)
                    parts.append(style.to_sgr())
                    active = style
                parts.append(cell.symbol)
            if active != Style():
                parts.append(_RESET)
            result.append("".join(parts))
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self.area == other.area and self.content == other.content

    def __repr__(self) -> str:
        rows = "\n".join(f"    {line!r}," for line in self.lines())
        return f"Buffer({self.area},\n{rows}\n)"
