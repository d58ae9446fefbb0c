"""Justified grid layout engine."""

from collage.engine.config import LayoutConfig, Padding, Spacing, WidowLayoutStyle
from collage.engine.errors import InvalidAspectRatio
from collage.engine.items import LayoutItem, LayoutResult
from collage.engine.layout import compute
from collage.engine.row import Accepted, Rejected, Row

__all__ = [
    "LayoutConfig",
    "Padding",
    "Spacing",
    "WidowLayoutStyle",
    "InvalidAspectRatio",
    "LayoutItem",
    "LayoutResult",
    "compute",
    "Accepted",
    "Rejected",
    "Row",
]
