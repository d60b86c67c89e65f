"""2D size tagged with a coordinate space."""

from typing import Generic

from flax import struct

from .. import num
from ..units import T, U, UnknownUnit


@struct.dataclass
class TypedSize2D(Generic[T, U]):
    width: T
    height: T

    def __eq__(self, other):
        if not isinstance(other, TypedSize2D):
            return NotImplemented
        return num.exact_eq(self.width, other.width) and num.exact_eq(self.height, other.height)

    def approx_eq(self, other: "TypedSize2D[T, U]"):
        return num.approx_eq(self.width, other.width) & num.approx_eq(self.height, other.height)

    def to_untyped(self) -> "TypedSize2D[T, UnknownUnit]":
        return TypedSize2D(self.width, self.height)

    @classmethod
    def from_untyped(cls, s: "TypedSize2D[T, UnknownUnit]") -> "TypedSize2D[T, U]":
        return cls(s.width, s.height)


Size2D = TypedSize2D[T, UnknownUnit]
