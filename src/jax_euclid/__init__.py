"""
JAX Euclid: typed 2D geometry for layout engines, renderers and compositors.

This library provides immutable, JIT-compatible 2D affine matrices, points,
sizes and rectangles, each tagged with the coordinate space it belongs to so
that a static type checker can reject values mixed across spaces.
"""

import jax
jax.config.update("jax_enable_x64", True)

# Import core modules
from . import num
from . import units
from . import core
from . import transforms

from .core import Point2D, Rect, Size2D, TypedPoint2D, TypedRect, TypedSize2D
from .transforms import Matrix2D, TypedMatrix2D
from .units import Radians, UnknownUnit

__version__ = "0.1.0"
__all__ = [
    "num",
    "units",
    "core",
    "transforms",
    "Point2D",
    "Rect",
    "Size2D",
    "TypedPoint2D",
    "TypedRect",
    "TypedSize2D",
    "Matrix2D",
    "TypedMatrix2D",
    "Radians",
    "UnknownUnit",
]
