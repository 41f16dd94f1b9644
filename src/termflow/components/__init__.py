"""Line-oriented components built on the cell widgets."""

from termflow.components.paragraph_view import ParagraphView

__all__ = [
    "ParagraphView",
]
