"""Tests for termflow.buffer."""

from __future__ import annotations

import pytest

from termflow.buffer import Buffer, Cell
from termflow.layout import Rect
from termflow.style import Color, Modifier, Style


class TestBufferConstruction:
    def test_empty_buffer_is_blank(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 2))
        assert buf.lines() == ["   ", "   "]
        assert all(cell == Cell() for cell in buf.content)

    def test_with_lines_pads_short_rows(self) -> None:
        buf = Buffer.with_lines(["abc", "d"])
        assert buf.area == Rect(0, 0, 3, 2)
        assert buf.lines() == ["abc", "d  "]

    def test_content_size_is_checked(self) -> None:
        with pytest.raises(ValueError):
            Buffer(Rect(0, 0, 2, 2), [Cell()])

    def test_filled_copies_cells(self) -> None:
        buf = Buffer.filled(Rect(0, 0, 2, 1), Cell("x"))
        buf.get(0, 0).set_symbol("y")
        assert buf.lines() == ["yx"]


class TestBufferAddressing:
    def test_index_of_uses_absolute_coordinates(self) -> None:
        buf = Buffer.empty(Rect(2, 3, 4, 2))
        assert buf.index_of(2, 3) == 0
        assert buf.index_of(5, 4) == 7

    def test_outside_access_raises(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 2, 2))
        with pytest.raises(IndexError):
            buf.get(2, 0)
        with pytest.raises(IndexError):
            buf.get(0, 5)


class TestBufferDrawing:
    def test_set_string_is_clipped(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        end = buf.set_string(1, 0, "abcdef", Style())
        assert buf.lines() == [" abc"]
        assert end == 4

    def test_wide_glyph_blanks_continuation(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        buf.set_string(0, 0, "中b", Style())
        assert buf.get(0, 0).symbol == "中"
        assert buf.get(1, 0).symbol == ""
        assert buf.get(2, 0).symbol == "b"
        assert buf.lines() == ["中b"]

    def test_wide_glyph_at_edge_is_not_drawn(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        buf.set_string(0, 0, "ab中", Style())
        assert buf.lines() == ["ab "]

    def test_set_style_keeps_unset_colours(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 2, 1))
        buf.set_background(buf.area, Color.BLUE)
        buf.set_style(buf.area, Style().fg(Color.RED))
        cell = buf.get(0, 0)
        assert cell.fg == Color.RED
        assert cell.bg == Color.BLUE

    def test_set_background_is_clipped(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 2, 2))
        buf.set_background(Rect(1, 1, 5, 5), Color.RED)
        assert buf.get(1, 1).bg == Color.RED
        assert buf.get(0, 0).bg is None

    def test_reset(self) -> None:
        buf = Buffer.with_lines(["ab"])
        buf.reset()
        assert buf == Buffer.empty(Rect(0, 0, 2, 1))


class TestBufferAnsiOutput:
    def test_unstyled_rows_have_no_codes(self) -> None:
        assert Buffer.with_lines(["ab"]).to_ansi_lines() == ["ab"]

    def test_styled_run_is_wrapped_in_codes(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        buf.set_string(0, 0, "hi", Style().fg(Color.RED))
        assert buf.to_ansi_lines() == ["\x1b[31mhi\x1b[0m "]

    def test_style_is_reset_at_line_end(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 2, 1))
        buf.set_string(0, 0, "ab", Style().add_modifier(Modifier.BOLD))
        assert buf.to_ansi_lines() == ["\x1b[1mab\x1b[0m"]

    def test_continuation_cells_are_skipped(self) -> None:
        buf = Buffer.with_lines(["中"])
        assert buf.to_ansi_lines() == ["中"]
