"""Grapheme segmentation and terminal display-width measurement.

Every layout decision in termflow is made in terminal columns, measured one
grapheme cluster at a time.  ``grapheme`` provides the segmentation and
``wcwidth`` the east-asian-width table; the emoji heuristics on top of it
follow what modern terminals actually draw.
"""

from __future__ import annotations

import unicodedata
from typing import Iterator

import grapheme
import wcwidth as _wcwidth

# The escape marker is stored as a single symbol by upstream parsers and is
# always drawn one column wide.
ESCAPE_MARKER = "\x1b"
NBSP = "\u00a0"
NEWLINE = "\n"
CRLF = "\r\n"

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------


def graphemes(text: str) -> Iterator[str]:
    """Yield the grapheme clusters of *text* in order."""
    return grapheme.graphemes(text)


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (contains VS16 U+FE0F, ZWJ sequences, flags, skin tones) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    cached = _width_cache.get(g)
    if cached is not None:
        return cached

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return _cache_width(g, 2)
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return _cache_width(g, 2)
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return _cache_width(g, 2)

    first = g[0]
    first_cp = ord(first)
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return _cache_width(g, 2)

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return _cache_width(g, 0)

    # A base character followed by combining marks takes the base's width.
    return _cache_width(g, max(_wcwidth.wcwidth(first), 0))


def symbol_width(symbol: str) -> int:
    """Width of a layout symbol: a grapheme, with the escape marker as 1."""
    if symbol == ESCAPE_MARKER:
        return 1
    return grapheme_width(symbol)


def visible_width(text: str) -> int:
    """Return the total display width of *text*."""
    if not text:
        return 0
    if text.isascii() and text.isprintable():
        return len(text)
    return sum(symbol_width(g) for g in grapheme.graphemes(text))


# ---------------------------------------------------------------------------
# Character classification
# ---------------------------------------------------------------------------


def is_whitespace_symbol(symbol: str) -> bool:
    """Return ``True`` if every code point of *symbol* is whitespace."""
    return all(ch.isspace() for ch in symbol)


def is_newline_symbol(symbol: str) -> bool:
    """Return ``True`` for a line break, ``"\\r\\n"`` being a single grapheme."""
    return symbol == NEWLINE or symbol == CRLF
