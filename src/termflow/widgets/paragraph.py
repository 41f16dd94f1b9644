"""Paragraph widget - lays styled text out into a rectangle of the buffer.

Each render is computed from scratch: the text runs are flattened into
grapheme symbols, composed into lines (wrapped or truncated), windowed by a
scroller (from the top or from the bottom), and finally written cell by cell
with the requested horizontal alignment.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from termflow.buffer import Buffer
from termflow.layout import Alignment, Rect, ScrollMode, line_offset
from termflow.reflow import LineComposer, LineTruncator, WordWrapper
from termflow.scroll import (
    DEFAULT_NEAR_FULL_MARGIN,
    OVERFLOW,
    OffsetScroller,
    Scroller,
    ScrollStatus,
    TailScroller,
)
from termflow.style import Style
from termflow.text import Text, flatten
from termflow.utils import graphemes, symbol_width
from termflow.widgets.block import Block

logger = logging.getLogger(__name__)


def _check_overflow_char(char: str | None) -> None:
    if char is not None and len(list(graphemes(char))) != 1:
        raise ValueError(f"scroll overflow char must be a single grapheme: {char!r}")


class Paragraph:
    """A widget to display some text.

    Example::

        text = [
            Text.raw("First line\\n"),
            Text.styled("Second line\\n", Style().fg(Color.RED)),
        ]
        Paragraph(
            text,
            block=Block(title="Paragraph", borders=Borders.ALL),
            style=Style().fg(Color.WHITE).bg(Color.BLACK),
            alignment=Alignment.CENTER,
            wrap=True,
        ).render(area, buf)

    With ``scroll_mode=ScrollMode.TAIL`` the newest line is kept on the
    bottom row and ``scroll`` counts lines back into history.  Rows scrolled
    past the oldest line are marked with ``scroll_overflow_char`` if one is
    set.
    """

    def __init__(
        self,
        texts: Iterable[Text],
        *,
        block: Block | None = None,
        style: Style | None = None,
        wrap: bool = False,
        scroll: int = 0,
        scroll_mode: ScrollMode = ScrollMode.NORMAL,
        scroll_overflow_char: str | None = None,
        alignment: Alignment = Alignment.LEFT,
        near_full_margin: int = DEFAULT_NEAR_FULL_MARGIN,
    ) -> None:
        if scroll < 0:
            raise ValueError(f"scroll offset must not be negative: {scroll}")
        _check_overflow_char(scroll_overflow_char)
        self._texts: Sequence[Text] = list(texts)
        self._block = block
        self._style = style or Style()
        self._wrap = wrap
        self._scroll = scroll
        self._scroll_mode = scroll_mode
        self._scroll_overflow_char = scroll_overflow_char
        self._alignment = alignment
        self._near_full_margin = near_full_margin

    # -- builder ------------------------------------------------------------

    def block(self, block: Block | None) -> Paragraph:
        self._block = block
        return self

    def style(self, style: Style) -> Paragraph:
        self._style = style
        return self

    def wrap(self, flag: bool) -> Paragraph:
        self._wrap = flag
        return self

    def scroll(self, offset: int) -> Paragraph:
        if offset < 0:
            raise ValueError(f"scroll offset must not be negative: {offset}")
        self._scroll = offset
        return self

    def scroll_mode(self, scroll_mode: ScrollMode) -> Paragraph:
        self._scroll_mode = scroll_mode
        return self

    def scroll_overflow_char(self, char: str | None) -> Paragraph:
        _check_overflow_char(char)
        self._scroll_overflow_char = char
        return self

    def alignment(self, alignment: Alignment) -> Paragraph:
        self._alignment = alignment
        return self

    # -- rendering ----------------------------------------------------------

    def _line_composer(self, width: int) -> LineComposer:
        symbols = flatten(self._texts, self._style)
        if self._wrap:
            return WordWrapper(symbols, width)
        return LineTruncator(symbols, width)

    def _scroller(self, text_area: Rect, status: ScrollStatus) -> Scroller:
        composer = self._line_composer(text_area.width)
        if self._scroll_mode is ScrollMode.TAIL:
            return TailScroller(
                self._scroll,
                composer,
                text_area.height,
                status,
                near_full_margin=self._near_full_margin,
            )
        return OffsetScroller(self._scroll, composer)

    def render(
        self, area: Rect, buf: Buffer, status: ScrollStatus | None = None
    ) -> ScrollStatus:
        """Draw into *area* of *buf* and return the scroll flags.

        When *status* is given its flags are raised in place, so the caller
        can keep one ``ScrollStatus`` per widget.  Flags are never lowered.
        """
        if status is None:
            status = ScrollStatus()

        area = area.intersection(buf.area)
        if self._block is not None:
            self._block.render(area, buf)
            text_area = self._block.inner(area)
        else:
            text_area = area

        if text_area.is_empty():
            return status

        if self._style.bg_color is not None:
            buf.set_background(text_area, self._style.bg_color)

        logger.debug(
            "paragraph %dx%d at (%d, %d), wrap=%s, mode=%s, scroll=%d",
            text_area.width,
            text_area.height,
            text_area.x,
            text_area.y,
            self._wrap,
            self._scroll_mode.value,
            self._scroll,
        )

        scroller = self._scroller(text_area, status)
        for y in range(text_area.top, text_area.bottom):
            scrolled = scroller.next_line()
            if scrolled is None:
                continue
            if scrolled is OVERFLOW:
                status.at_top = True
                char = self._scroll_overflow_char
                if char is not None and symbol_width(char) <= text_area.width:
                    buf.set_symbol(text_area.left, y, char, self._style)
                continue

            x = text_area.left + line_offset(
                scrolled.width, text_area.width, self._alignment
            )
            for symbol, style in scrolled.symbols:
                width = symbol_width(symbol)
                # Wide glyphs must not spill their continuation cells past
                # the text area.
                if x + max(width, 1) > text_area.right:
                    break
                buf.set_symbol(x, y, symbol, style)
                x += width

        return status
