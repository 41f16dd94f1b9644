"""Line composers: pack a stream of styled symbols into width-bounded lines.

Two strategies share one interface:

* ``WordWrapper`` -- greedy word wrap that breaks on whitespace and carries
  the overhanging word to the next line.
* ``LineTruncator`` -- one output line per source line, clipping whatever
  does not fit.

Both measure with :func:`termflow.utils.symbol_width`, so a renderer can swap
strategies without changing its alignment arithmetic.  A composer owns a
cursor into its symbol iterator: reading lines consumes it for good.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator

from termflow.text import Styled
from termflow.utils import (
    NBSP,
    is_newline_symbol,
    is_whitespace_symbol,
    symbol_width,
)


@dataclass(frozen=True)
class Line:
    """A composed line and its precomputed display width."""

    symbols: tuple[Styled, ...]
    width: int

    @property
    def text(self) -> str:
        return "".join(s.symbol for s in self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)


def _line_width(symbols: Iterable[Styled]) -> int:
    return sum(symbol_width(s.symbol) for s in symbols)


class LineComposer(ABC):
    """Pull-based producer of ``Line`` values over a symbol iterator."""

    def __init__(self, symbols: Iterable[Styled], max_line_width: int) -> None:
        self._symbols: Iterator[Styled] = iter(symbols)
        self.max_line_width = max_line_width

    @abstractmethod
    def next_line(self) -> Line | None:
        """Return the next line, or ``None`` once the symbols are exhausted."""

    def collect_lines(self) -> list[Line]:
        """Drain the composer and return every remaining line in order."""
        lines: list[Line] = []
        while True:
            line = self.next_line()
            if line is None:
                return lines
            lines.append(line)

    def __iter__(self) -> Iterator[Line]:
        return self

    def __next__(self) -> Line:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line


# ---------------------------------------------------------------------------
# WordWrapper
# ---------------------------------------------------------------------------


class WordWrapper(LineComposer):
    """Wraps lines on word boundaries.

    The line being built and the remainder pushed back by the previous break
    live in two buffers that swap on every call.
    """

    def __init__(self, symbols: Iterable[Styled], max_line_width: int) -> None:
        super().__init__(symbols, max_line_width)
        self._current_line: list[Styled] = []
        self._next_line: list[Styled] = []

    def next_line(self) -> Line | None:
        if self.max_line_width <= 0:
            return None

        self._current_line, self._next_line = self._next_line, []
        current = self._current_line
        current_width = _line_width(current)

        # A remainder carried past a zero-width break (a tab, say) can still
        # overhang; emit what fits and carry the rest again.
        if current_width > self.max_line_width:
            return self._split_overhang(current)

        symbols_to_last_word_end = 0
        width_to_last_word_end = 0
        prev_whitespace = False
        symbols_exhausted = True

        for styled in self._symbols:
            symbols_exhausted = False
            symbol = styled.symbol
            width = symbol_width(symbol)
            whitespace = is_whitespace_symbol(symbol)

            # Symbols wider than the whole line can never be drawn.
            if width > self.max_line_width:
                continue
            # Skip leading whitespace.
            if whitespace and not is_newline_symbol(symbol) and current_width == 0:
                continue

            if is_newline_symbol(symbol):
                if prev_whitespace:
                    current_width = width_to_last_word_end
                    del current[symbols_to_last_word_end:]
                break

            # The previous symbol ended a word.
            if whitespace and not prev_whitespace and symbol != NBSP:
                symbols_to_last_word_end = len(current)
                width_to_last_word_end = current_width

            current.append(styled)
            current_width += width

            if current_width > self.max_line_width:
                if symbols_to_last_word_end != 0:
                    truncate_at = symbols_to_last_word_end
                    truncated_width = width_to_last_word_end
                else:
                    # No word break on this line: cut right before the
                    # offending symbol.
                    truncate_at = len(current) - 1
                    truncated_width = current_width - width

                remainder = current[truncate_at:]
                for i, rest in enumerate(remainder):
                    if not is_whitespace_symbol(rest.symbol):
                        self._next_line.extend(remainder[i:])
                        break

                del current[truncate_at:]
                current_width = truncated_width
                break

            prev_whitespace = whitespace

        # A pending remainder is still flushed after the iterator runs dry.
        if symbols_exhausted and not current:
            return None
        return Line(tuple(current), current_width)

    def _split_overhang(self, current: list[Styled]) -> Line:
        fit = 0
        fit_width = 0
        for styled in current:
            width = symbol_width(styled.symbol)
            if fit_width + width > self.max_line_width:
                break
            fit += 1
            fit_width += width
        self._next_line = current[fit:]
        del current[fit:]
        return Line(tuple(current), fit_width)


# ---------------------------------------------------------------------------
# LineTruncator
# ---------------------------------------------------------------------------


class LineTruncator(LineComposer):
    """Emits one line per source line, dropping whatever overhangs."""

    def next_line(self) -> Line | None:
        if self.max_line_width <= 0:
            return None

        current: list[Styled] = []
        current_width = 0
        skip_rest = False
        symbols_exhausted = True

        for styled in self._symbols:
            symbols_exhausted = False
            symbol = styled.symbol
            width = symbol_width(symbol)

            if width > self.max_line_width:
                continue
            if is_newline_symbol(symbol):
                break
            if current_width + width > self.max_line_width:
                skip_rest = True
                break

            current_width += width
            current.append(styled)

        if skip_rest:
            for styled in self._symbols:
                if is_newline_symbol(styled.symbol):
                    break

        if symbols_exhausted and not current:
            return None
        return Line(tuple(current), current_width)
