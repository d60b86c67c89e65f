"""Space-tagged value types consumed and produced by the transforms.

This module provides points, sizes and rectangles as immutable JAX
PyTrees, each parametrized over the coordinate space it belongs to.
"""

from .point import Point2D, TypedPoint2D
from .rect import Rect, TypedRect
from .size import Size2D, TypedSize2D

__all__ = [
    "Point2D",
    "TypedPoint2D",
    "Size2D",
    "TypedSize2D",
    "Rect",
    "TypedRect",
]
