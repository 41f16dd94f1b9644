"""Styled text runs and their flattening into grapheme symbols."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple

from termflow.style import Style
from termflow.utils import graphemes


class Styled(NamedTuple):
    """One grapheme cluster and the style it is drawn with."""

    symbol: str
    style: Style


@dataclass(frozen=True)
class Text:
    """A run of text.  ``style is None`` means "use the widget's style"."""

    content: str
    style: Style | None = None

    @classmethod
    def raw(cls, content: str) -> Text:
        return cls(content)

    @classmethod
    def styled(cls, content: str, style: Style) -> Text:
        return cls(content, style)


def flatten(texts: Iterable[Text], default_style: Style) -> Iterator[Styled]:
    """Lazily turn *texts* into one ``Styled`` symbol per grapheme cluster."""
    for text in texts:
        style = default_style if text.style is None else text.style
        for g in graphemes(text.content):
            yield Styled(g, style)
