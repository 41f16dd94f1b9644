"""Widgets that draw into a cell buffer."""

from termflow.widgets.block import Block, Borders, BorderSymbols, BorderType
from termflow.widgets.paragraph import Paragraph

__all__ = [
    "Block",
    "BorderSymbols",
    "BorderType",
    "Borders",
    "Paragraph",
]
