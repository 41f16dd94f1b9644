"""ParagraphView component - a scrollable paragraph for line-based UIs.

Renders a ``Paragraph`` into a private cell buffer of ``width x height`` and
hands back one ANSI-styled string per row, which is what line-oriented
containers expect from ``render(width)``.
"""

from __future__ import annotations

from typing import Callable, Iterable

from termflow.buffer import Buffer
from termflow.config import RenderSettings, load_settings
from termflow.layout import Alignment, Rect, ScrollMode
from termflow.scroll import ScrollStatus
from termflow.style import Style
from termflow.text import Text
from termflow.widgets.block import Block
from termflow.widgets.paragraph import Paragraph


class ParagraphView:
    """Scrollable, fixed-height view over styled text.

    In ``ScrollMode.TAIL`` the newest line stays at the bottom and
    :meth:`scroll_up` walks back into history; ``on_top_reached`` fires after
    any render that scrolled past the oldest line, which is the cue to load
    older content.

    Without *settings* the ``TERMFLOW_*`` environment variables are read via
    :func:`termflow.config.load_settings`.
    """

    def __init__(
        self,
        texts: Iterable[Text] = (),
        height: int = 10,
        wrap: bool = True,
        scroll_mode: ScrollMode = ScrollMode.TAIL,
        alignment: Alignment = Alignment.LEFT,
        style: Style | None = None,
        block: Block | None = None,
        settings: RenderSettings | None = None,
        on_top_reached: Callable[[], None] | None = None,
    ) -> None:
        if height < 0:
            raise ValueError(f"height must not be negative: {height}")
        self._texts = list(texts)
        self._height = height
        self._wrap = wrap
        self._scroll_mode = scroll_mode
        self._alignment = alignment
        self._style = style or Style()
        self._block = block
        self._settings = settings or load_settings()
        self._on_top_reached = on_top_reached
        self._scroll = 0
        self._status = ScrollStatus()

        # Cache
        self._cached_width: int | None = None
        self._cached_scroll: int | None = None
        self._cached_lines: list[str] | None = None

    # -- content ------------------------------------------------------------

    def set_texts(self, texts: Iterable[Text]) -> None:
        self._texts = list(texts)
        self._status.reset()
        self.invalidate()

    def append(self, text: Text) -> None:
        self._texts.append(text)
        self._status.reset()
        self.invalidate()

    def set_height(self, height: int) -> None:
        if height < 0:
            raise ValueError(f"height must not be negative: {height}")
        self._height = height
        self.invalidate()

    def invalidate(self) -> None:
        self._cached_width = None
        self._cached_scroll = None
        self._cached_lines = None

    # -- scrolling ----------------------------------------------------------

    @property
    def scroll_offset(self) -> int:
        return self._scroll

    @property
    def overflowed(self) -> bool:
        return self._status.overflowed

    @property
    def at_top(self) -> bool:
        return self._status.at_top

    def scroll_up(self, lines: int = 1) -> None:
        """Move the window towards older content."""
        if self._scroll_mode is ScrollMode.TAIL:
            if self._status.at_top:
                return
            self._scroll += lines
        else:
            self._scroll = max(0, self._scroll - lines)

    def scroll_down(self, lines: int = 1) -> None:
        """Move the window towards newer content."""
        if self._scroll_mode is ScrollMode.TAIL:
            self._scroll = max(0, self._scroll - lines)
        else:
            self._scroll += lines

    def scroll_to_latest(self) -> None:
        self._scroll = 0

    # -- rendering ----------------------------------------------------------

    def _expanded_texts(self) -> list[Text]:
        tab = " " * self._settings.tab_width
        return [Text(t.content.replace("\t", tab), t.style) for t in self._texts]

    def render(self, width: int) -> list[str]:
        if (
            self._cached_lines is not None
            and self._cached_width == width
            and self._cached_scroll == self._scroll
        ):
            return self._cached_lines

        area = Rect(0, 0, max(0, width), self._height)
        buf = Buffer.empty(area)
        paragraph = Paragraph(
            self._expanded_texts(),
            block=self._block,
            style=self._style,
            wrap=self._wrap,
            scroll=self._scroll,
            scroll_mode=self._scroll_mode,
            scroll_overflow_char=self._settings.scroll_overflow_char,
            alignment=self._alignment,
            near_full_margin=self._settings.near_full_margin,
        )
        self._status = paragraph.render(area, buf)

        if (
            self._scroll_mode is ScrollMode.TAIL
            and self._status.at_top
            and self._on_top_reached is not None
        ):
            self._on_top_reached()

        result = buf.to_ansi_lines()

        # Update cache
        self._cached_width = width
        self._cached_scroll = self._scroll
        self._cached_lines = result

        return result
