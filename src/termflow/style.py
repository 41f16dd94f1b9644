"""Colours, modifiers and the ``Style`` attribute bag carried by every cell.

Styles are immutable values.  The layout engine copies them around but never
inspects them; only the cell buffer turns them into SGR escape sequences.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import ClassVar


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Color:
    """A terminal colour: one of the named ANSI colours, a palette index or RGB.

    ``kind`` is ``"named"``, ``"indexed"`` or ``"rgb"``.  Named colours carry
    their SGR foreground code in ``value`` (30-37, 90-97 or 39 for reset).
    """

    kind: str
    value: tuple[int, ...]

    RESET: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    GRAY: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]
    LIGHT_RED: ClassVar[Color]
    LIGHT_GREEN: ClassVar[Color]
    LIGHT_YELLOW: ClassVar[Color]
    LIGHT_BLUE: ClassVar[Color]
    LIGHT_MAGENTA: ClassVar[Color]
    LIGHT_CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]

    @staticmethod
    def indexed(n: int) -> Color:
        if not 0 <= n <= 255:
            raise ValueError(f"palette index out of range: {n}")
        return Color("indexed", (n,))

    @staticmethod
    def rgb(r: int, g: int, b: int) -> Color:
        for component in (r, g, b):
            if not 0 <= component <= 255:
                raise ValueError(f"rgb component out of range: {component}")
        return Color("rgb", (r, g, b))

    def fg_params(self) -> str:
        if self.kind == "named":
            return str(self.value[0])
        if self.kind == "indexed":
            return f"38;5;{self.value[0]}"
        r, g, b = self.value
        return f"38;2;{r};{g};{b}"

    def bg_params(self) -> str:
        if self.kind == "named":
            # Background codes are the foreground codes shifted by 10.
            return str(self.value[0] + 10)
        if self.kind == "indexed":
            return f"48;5;{self.value[0]}"
        r, g, b = self.value
        return f"48;2;{r};{g};{b}"


Color.RESET = Color("named", (39,))
Color.BLACK = Color("named", (30,))
Color.RED = Color("named", (31,))
Color.GREEN = Color("named", (32,))
Color.YELLOW = Color("named", (33,))
Color.BLUE = Color("named", (34,))
Color.MAGENTA = Color("named", (35,))
Color.CYAN = Color("named", (36,))
Color.GRAY = Color("named", (37,))
Color.DARK_GRAY = Color("named", (90,))
Color.LIGHT_RED = Color("named", (91,))
Color.LIGHT_GREEN = Color("named", (92,))
Color.LIGHT_YELLOW = Color("named", (93,))
Color.LIGHT_BLUE = Color("named", (94,))
Color.LIGHT_MAGENTA = Color("named", (95,))
Color.LIGHT_CYAN = Color("named", (96,))
Color.WHITE = Color("named", (97,))


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------


class Modifier(enum.Flag):
    NONE = 0
    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    SLOW_BLINK = enum.auto()
    RAPID_BLINK = enum.auto()
    REVERSED = enum.auto()
    HIDDEN = enum.auto()
    CROSSED_OUT = enum.auto()


_MODIFIER_SGR: list[tuple[Modifier, int]] = [
    (Modifier.BOLD, 1),
    (Modifier.DIM, 2),
    (Modifier.ITALIC, 3),
    (Modifier.UNDERLINED, 4),
    (Modifier.SLOW_BLINK, 5),
    (Modifier.RAPID_BLINK, 6),
    (Modifier.REVERSED, 7),
    (Modifier.HIDDEN, 8),
    (Modifier.CROSSED_OUT, 9),
]


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Style:
    """Foreground, background and modifiers.  ``None`` colours mean "unset"."""

    fg_color: Color | None = None
    bg_color: Color | None = None
    modifier: Modifier = field(default=Modifier.NONE)

    def fg(self, color: Color) -> Style:
        return replace(self, fg_color=color)

    def bg(self, color: Color) -> Style:
        return replace(self, bg_color=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        return replace(self, modifier=self.modifier | modifier)

    def remove_modifier(self, modifier: Modifier) -> Style:
        return replace(self, modifier=self.modifier & ~modifier)

    def patch(self, other: Style) -> Style:
        """Overlay *other* on this style; its set colours win, modifiers merge."""
        return Style(
            fg_color=other.fg_color if other.fg_color is not None else self.fg_color,
            bg_color=other.bg_color if other.bg_color is not None else self.bg_color,
            modifier=self.modifier | other.modifier,
        )

    def to_sgr(self) -> str:
        """Return the SGR sequence that activates this style, or ``""``."""
        params: list[str] = []
        for flag, code in _MODIFIER_SGR:
            if flag in self.modifier:
                params.append(str(code))
        if self.fg_color is not None:
            params.append(self.fg_color.fg_params())
        if self.bg_color is not None:
            params.append(self.bg_color.bg_params())
        if not params:
            return ""
        return f"\x1b[{';'.join(params)}m"
