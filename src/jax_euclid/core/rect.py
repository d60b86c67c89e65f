"""Axis-aligned rectangle tagged with a coordinate space.

Corner names follow the y-down convention used by layout code: ``origin`` is
the top-left corner and ``height`` grows towards the bottom edge.
"""

from typing import Generic

from flax import struct

from ..units import T, U, UnknownUnit
from .point import TypedPoint2D
from .size import TypedSize2D


@struct.dataclass
class TypedRect(Generic[T, U]):
    """Rectangle given by its origin point and its size."""
    origin: TypedPoint2D
    size: TypedSize2D

    def __eq__(self, other):
        if not isinstance(other, TypedRect):
            return NotImplemented
        return self.origin == other.origin and self.size == other.size

    @classmethod
    def from_coords(cls, x, y, width, height) -> "TypedRect[T, U]":
        return cls(TypedPoint2D(x, y), TypedSize2D(width, height))

    # Edges
    def min_x(self):
        return self.origin.x

    def min_y(self):
        return self.origin.y

    def max_x(self):
        return self.origin.x + self.size.width

    def max_y(self):
        return self.origin.y + self.size.height

    # Corners
    def top_right(self) -> "TypedPoint2D[T, U]":
        return TypedPoint2D(self.max_x(), self.origin.y)

    def bottom_left(self) -> "TypedPoint2D[T, U]":
        return TypedPoint2D(self.origin.x, self.max_y())

    def bottom_right(self) -> "TypedPoint2D[T, U]":
        return TypedPoint2D(self.max_x(), self.max_y())

    def corners(self):
        """(origin, top_right, bottom_left, bottom_right)"""
        return (self.origin, self.top_right(), self.bottom_left(), self.bottom_right())

    def approx_eq(self, other: "TypedRect[T, U]"):
        return self.origin.approx_eq(other.origin) & self.size.approx_eq(other.size)

    def to_untyped(self) -> "TypedRect[T, UnknownUnit]":
        return TypedRect(self.origin.to_untyped(), self.size.to_untyped())

    @classmethod
    def from_untyped(cls, r: "TypedRect[T, UnknownUnit]") -> "TypedRect[T, U]":
        return cls(TypedPoint2D.from_untyped(r.origin), TypedSize2D.from_untyped(r.size))


Rect = TypedRect[T, UnknownUnit]
