"""Tests for termflow.utils -- grapheme segmentation and widths."""

from __future__ import annotations

from termflow.utils import (
    grapheme_width,
    graphemes,
    is_newline_symbol,
    is_whitespace_symbol,
    symbol_width,
    visible_width,
)


class TestGraphemeWidth:
    """Display width of one grapheme cluster."""

    def test_ascii(self) -> None:
        assert grapheme_width("a") == 1

    def test_wide_cjk(self) -> None:
        # U+4E16 is an east-asian wide character.
        assert grapheme_width("世") == 2

    def test_combining_sequence_takes_base_width(self) -> None:
        assert grapheme_width("e\u0301") == 1

    def test_emoji(self) -> None:
        assert grapheme_width("\U0001F44D") == 2

    def test_emoji_with_skin_tone(self) -> None:
        assert grapheme_width("\U0001F44D\U0001F3FD") == 2

    def test_flag(self) -> None:
        assert grapheme_width("\U0001F1FA\U0001F1F8") == 2

    def test_control_character(self) -> None:
        assert grapheme_width("\x07") == 0

    def test_empty(self) -> None:
        assert grapheme_width("") == 0


class TestSymbolWidth:
    def test_escape_marker_is_one_column(self) -> None:
        assert grapheme_width("\x1b") == 0
        assert symbol_width("\x1b") == 1

    def test_other_symbols_match_grapheme_width(self) -> None:
        for g in ("a", "世", "e\u0301", " "):
            assert symbol_width(g) == grapheme_width(g)


class TestGraphemes:
    def test_combining_mark_stays_with_base(self) -> None:
        assert list(graphemes("e\u0301x")) == ["e\u0301", "x"]

    def test_newline_is_its_own_grapheme(self) -> None:
        assert list(graphemes("a\nb")) == ["a", "\n", "b"]


class TestVisibleWidth:
    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_mixed_ascii_and_wide(self) -> None:
        # "A" (1) + U+4E16 (2) + "B" (1) = 4
        assert visible_width("A世B") == 4


class TestWhitespace:
    def test_space_and_newline(self) -> None:
        assert is_whitespace_symbol(" ")
        assert is_whitespace_symbol("\n")
        assert is_whitespace_symbol("\t")

    def test_non_breaking_space_is_whitespace(self) -> None:
        assert is_whitespace_symbol("\u00a0")

    def test_letters_are_not_whitespace(self) -> None:
        assert not is_whitespace_symbol("a")
        assert not is_whitespace_symbol("\x1b")

    def test_crlf_is_a_single_newline_symbol(self) -> None:
        assert list(graphemes("a\r\nb")) == ["a", "\r\n", "b"]
        assert is_newline_symbol("\r\n")
        assert is_newline_symbol("\n")
        assert not is_newline_symbol("\r")
