"""Rectangles, alignment and scroll modes."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Alignment(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ScrollMode(enum.Enum):
    """Where a scroll offset of zero anchors the content."""

    NORMAL = "normal"  # first line at the top
    TAIL = "tail"  # newest line at the bottom


@dataclass(frozen=True)
class Rect:
    """A cell-addressed rectangle; ``x``/``y`` is the top-left corner."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"negative rectangle size: {self.width}x{self.height}")
        if self.x < 0 or self.y < 0:
            raise ValueError(f"negative rectangle origin: ({self.x}, {self.y})")

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def inner(self, horizontal: int = 0, vertical: int = 0) -> Rect:
        """Shrink by *horizontal* columns on each side and *vertical* rows."""
        if self.width < 2 * horizontal or self.height < 2 * vertical:
            return Rect(self.x, self.y, 0, 0)
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            self.width - 2 * horizontal,
            self.height - 2 * vertical,
        )

    def intersection(self, other: Rect) -> Rect:
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right, other.right)
        y2 = min(self.bottom, other.bottom)
        return Rect(x1, y1, max(0, x2 - x1), max(0, y2 - y1))

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


def line_offset(line_width: int, area_width: int, alignment: Alignment) -> int:
    """Start column of a line of *line_width* inside *area_width* columns.

    Saturates at zero when the line is wider than the area.
    """
    if alignment is Alignment.CENTER:
        return max(0, area_width // 2 - line_width // 2)
    if alignment is Alignment.RIGHT:
        return max(0, area_width - line_width)
    return 0
