"""Tests for termflow.text -- flattening styled runs."""

from __future__ import annotations

import types

from termflow.style import Color, Style
from termflow.text import Styled, Text, flatten


class TestFlatten:
    """One symbol per grapheme, in source order, with its run's style."""

    def test_raw_runs_use_default_style(self) -> None:
        default = Style().fg(Color.WHITE)
        assert list(flatten([Text.raw("ab")], default)) == [
            Styled("a", default),
            Styled("b", default),
        ]

    def test_styled_runs_keep_their_style(self) -> None:
        red = Style().fg(Color.RED)
        symbols = list(flatten([Text.raw("a"), Text.styled("b", red)], Style()))
        assert symbols == [Styled("a", Style()), Styled("b", red)]

    def test_grapheme_clusters_are_single_symbols(self) -> None:
        symbols = list(flatten([Text.raw("e\u0301\U0001F44D\U0001F3FD")], Style()))
        assert [s.symbol for s in symbols] == ["e\u0301", "\U0001F44D\U0001F3FD"]

    def test_is_lazy(self) -> None:
        assert isinstance(flatten([Text.raw("ab")], Style()), types.GeneratorType)

    def test_empty_runs(self) -> None:
        assert list(flatten([Text.raw(""), Text.raw("")], Style())) == []
