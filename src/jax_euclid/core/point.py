"""2D point tagged with the coordinate space it is expressed in."""

from typing import Generic

import jax.numpy as jnp
from flax import struct

from .. import num
from ..units import T, U, UnknownUnit


@struct.dataclass
class TypedPoint2D(Generic[T, U]):
    """Immutable point; ``U`` names its coordinate space."""
    x: T
    y: T

    def __eq__(self, other):
        if not isinstance(other, TypedPoint2D):
            return NotImplemented
        return num.exact_eq(self.x, other.x) and num.exact_eq(self.y, other.y)

    @classmethod
    def origin(cls, *, dtype=None) -> "TypedPoint2D[T, U]":
        zero = jnp.zeros((), dtype=dtype)
        return cls(zero, zero)

    def approx_eq(self, other: "TypedPoint2D[T, U]"):
        return num.approx_eq(self.x, other.x) & num.approx_eq(self.y, other.y)

    def to_array(self):
        return jnp.stack([jnp.asarray(self.x), jnp.asarray(self.y)], axis=-1)

    def to_untyped(self) -> "TypedPoint2D[T, UnknownUnit]":
        return TypedPoint2D(self.x, self.y)

    @classmethod
    def from_untyped(cls, p: "TypedPoint2D[T, UnknownUnit]") -> "TypedPoint2D[T, U]":
        return cls(p.x, p.y)


Point2D = TypedPoint2D[T, UnknownUnit]
