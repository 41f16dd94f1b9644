"""Tests for termflow.layout."""

from __future__ import annotations

import pytest

from termflow.layout import Alignment, Rect, line_offset


class TestRect:
    def test_edges(self) -> None:
        rect = Rect(2, 3, 4, 5)
        assert (rect.left, rect.right, rect.top, rect.bottom) == (2, 6, 3, 8)
        assert rect.area == 20

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Rect(0, 0, -1, 2)

    def test_inner_margin(self) -> None:
        assert Rect(0, 0, 10, 6).inner(2, 1) == Rect(2, 1, 6, 4)

    def test_inner_margin_too_large(self) -> None:
        assert Rect(0, 0, 3, 3).inner(2, 2).is_empty()

    def test_intersection(self) -> None:
        assert Rect(0, 0, 5, 5).intersection(Rect(3, 3, 5, 5)) == Rect(3, 3, 2, 2)

    def test_disjoint_intersection_is_empty(self) -> None:
        assert Rect(0, 0, 2, 2).intersection(Rect(5, 5, 2, 2)).is_empty()


class TestLineOffset:
    """Horizontal start column per alignment."""

    def test_left(self) -> None:
        assert line_offset(3, 10, Alignment.LEFT) == 0

    def test_right_ends_at_last_column(self) -> None:
        assert line_offset(3, 10, Alignment.RIGHT) + 3 == 10

    def test_center_is_symmetric_within_one(self) -> None:
        for width in range(0, 12):
            for area in range(width, 14):
                start = line_offset(width, area, Alignment.CENTER)
                left = start
                right = area - start - width
                assert abs(left - right) <= 1

    def test_wider_line_saturates(self) -> None:
        assert line_offset(12, 10, Alignment.RIGHT) == 0
        assert line_offset(12, 10, Alignment.CENTER) == 0
