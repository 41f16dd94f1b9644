"""Scrollers: vertical windowing policies over a line composer.

A scroller is asked for exactly one row per viewport line.  Each answer is a
``Line`` with content, the ``OVERFLOW`` sentinel (nothing to show because the
window lies outside the content), or ``None`` for a plain blank row.

``OffsetScroller`` counts the offset from the first line and stays lazy.
``TailScroller`` anchors the newest line to the bottom of the viewport and
counts the offset backwards into history, so it has to compose everything
up front.
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Final, Literal, Union

from termflow.reflow import Line, LineComposer

logger = logging.getLogger(__name__)

DEFAULT_NEAR_FULL_MARGIN = 2


class _Overflow(enum.Enum):
    OVERFLOW = "overflow"

    def __repr__(self) -> str:
        return "OVERFLOW"


OVERFLOW: Final = _Overflow.OVERFLOW

ScrolledLine = Union[Line, Literal[_Overflow.OVERFLOW]]


@dataclass
class ScrollStatus:
    """Flags a render reports back to its caller.

    ``overflowed`` -- the content is taller than (or close to) the viewport,
    so scrolling is meaningful.
    ``at_top`` -- a row above the oldest line was requested; the caller may
    want to fetch older history.
    """

    overflowed: bool = False
    at_top: bool = False

    def reset(self) -> None:
        self.overflowed = False
        self.at_top = False


def _check_offset(scroll_offset: int) -> None:
    if scroll_offset < 0:
        raise ValueError(f"scroll offset must not be negative: {scroll_offset}")


class Scroller(ABC):
    @abstractmethod
    def next_line(self) -> ScrolledLine | None:
        """Return what should be drawn on the next viewport row."""


class OffsetScroller(Scroller):
    """Skips *scroll_offset* lines from the top, then forwards the rest."""

    def __init__(self, scroll_offset: int, line_composer: LineComposer) -> None:
        _check_offset(scroll_offset)
        self._next_line_offset = scroll_offset
        self._line_composer = line_composer

    def next_line(self) -> ScrolledLine | None:
        if self._next_line_offset > 0:
            for _ in range(self._next_line_offset):
                self._line_composer.next_line()
            self._next_line_offset = 0
        line = self._line_composer.next_line()
        if line is None:
            return OVERFLOW
        return line


class TailScroller(Scroller):
    """Bottom-anchored scrolling for chat- and log-style content.

    With a scroll offset of zero the newest line sits on the last row.  Every
    step of offset moves the window one line back in history; once it passes
    the oldest line the rows above the content come back as ``OVERFLOW``.
    Content shorter than the viewport is drawn from the top, and scrolling it
    pushes it down under a growing run of ``OVERFLOW`` rows.
    """

    def __init__(
        self,
        scroll_offset: int,
        line_composer: LineComposer,
        area_height: int,
        status: ScrollStatus,
        near_full_margin: int = DEFAULT_NEAR_FULL_MARGIN,
    ) -> None:
        _check_offset(scroll_offset)
        self._status = status
        self._past_top = False
        # Reversed so that pop() yields lines in viewing order.
        self._all_lines = line_composer.collect_lines()
        self._all_lines.reverse()
        num_lines = len(self._all_lines)

        if num_lines <= area_height:
            if num_lines + near_full_margin >= area_height:
                status.overflowed = True
            self._next_line_offset = -scroll_offset
        else:
            status.overflowed = True
            self._next_line_offset = num_lines - (area_height + scroll_offset)

        logger.debug(
            "tail window: %d lines, height %d, scroll %d -> offset %d",
            num_lines,
            area_height,
            scroll_offset,
            self._next_line_offset,
        )

    def next_line(self) -> ScrolledLine | None:
        if self._next_line_offset < 0:
            self._next_line_offset += 1
            return OVERFLOW

        if self._next_line_offset > 0:
            del self._all_lines[-self._next_line_offset :]
            self._next_line_offset = 0
            if not self._all_lines:
                self._past_top = True

        if self._past_top:
            self._status.at_top = True
            return OVERFLOW
        if not self._all_lines:
            return None
        return self._all_lines.pop()
