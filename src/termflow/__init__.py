"""termflow: terminal text layout and scrolling into a cell buffer."""

# Cell buffer
from termflow.buffer import Buffer, Cell

# Components
from termflow.components import ParagraphView

# Settings
from termflow.config import RenderSettings, load_settings

# Geometry
from termflow.layout import Alignment, Rect, ScrollMode, line_offset

# Line composition
from termflow.reflow import Line, LineComposer, LineTruncator, WordWrapper

# Scrolling
from termflow.scroll import (
    OVERFLOW,
    OffsetScroller,
    ScrolledLine,
    Scroller,
    ScrollStatus,
    TailScroller,
)

# Styles
from termflow.style import Color, Modifier, Style

# Styled text
from termflow.text import Styled, Text, flatten

# Utilities
from termflow.utils import grapheme_width, symbol_width, visible_width

# Widgets
from termflow.widgets import Block, Borders, BorderType, Paragraph

__all__ = [
    # Buffer
    "Buffer",
    "Cell",
    # Components
    "ParagraphView",
    # Settings
    "RenderSettings",
    "load_settings",
    # Layout
    "Alignment",
    "Rect",
    "ScrollMode",
    "line_offset",
    # Reflow
    "Line",
    "LineComposer",
    "LineTruncator",
    "WordWrapper",
    # Scroll
    "OVERFLOW",
    "OffsetScroller",
    "ScrolledLine",
    "Scroller",
    "ScrollStatus",
    "TailScroller",
    # Style
    "Color",
    "Modifier",
    "Style",
    # Text
    "Styled",
    "Text",
    "flatten",
    # Utilities
    "grapheme_width",
    "symbol_width",
    "visible_width",
    # Widgets
    "Block",
    "BorderType",
    "Borders",
    "Paragraph",
]
