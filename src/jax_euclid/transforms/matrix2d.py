"""2D affine transforms between typed coordinate spaces, implemented with JAX."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Tuple, Type, TypeVar, Union

import jax
import jax.numpy as jnp
from jax.tree_util import register_pytree_node_class

from .. import num
from ..core import TypedPoint2D, TypedRect, TypedSize2D
from ..units import Dst, Radians, Src, T, UnknownUnit, angle_value

Array = jax.Array
Angle = Union[Radians, float, Array]

NewSrc = TypeVar("NewSrc")
NewDst = TypeVar("NewDst")


@register_pytree_node_class  # let matrices flow through jit / grad / vmap
@dataclass(frozen=True, eq=False, repr=False)
class TypedMatrix2D(Generic[T, Src, Dst]):
    """
    A 2D transform stored as a 2 by 3 matrix in row-major order.

    The matrix maps ``(x, y)`` to
    ``(x*m11 + y*m21 + m31, x*m12 + y*m22 + m32)``; the implicit third column
    is ``[0, 0, 1]``. ``Src`` is the space a point must be in before the
    transform and ``Dst`` the space it is in afterwards, so a
    ``TypedMatrix2D[T, WorldSpace, ScreenSpace]`` takes points in world
    space and returns points in screen space. The tags exist only for static
    type checkers.

    A pre-transformation adds an operation applied before the rest of the
    transformation, a post-transformation adds one applied after it.
    """
    m11: T
    m12: T
    m21: T
    m22: T
    m31: T
    m32: T

    # Constructors
    @classmethod
    def row_major(cls, m11, m12, m21, m22, m31, m32) -> "TypedMatrix2D[T, Src, Dst]":
        """
        Create a matrix from its components in row-major order.

        Components are broadcast against each other, so a scalar next to a
        batched component is repeated across the batch.
        """
        return cls(*jnp.broadcast_arrays(m11, m12, m21, m22, m31, m32))

    @classmethod
    def column_major(cls, m11, m21, m31, m12, m22, m32) -> "TypedMatrix2D[T, Src, Dst]":
        """Create a matrix from its components in column-major order."""
        return cls.row_major(m11, m12, m21, m22, m31, m32)

    @classmethod
    def identity(cls, batch_shape: Tuple[int, ...] = (), *, dtype=None) -> "TypedMatrix2D[T, Src, Dst]":
        _0 = jnp.zeros(batch_shape, dtype=dtype)
        _1 = jnp.ones(batch_shape, dtype=dtype)
        return cls.row_major(
            _1, _0,
            _0, _1,
            _0, _0,
        )

    @classmethod
    def create_translation(cls, x, y) -> "TypedMatrix2D[T, Src, Dst]":
        """Returns a translation matrix."""
        x, y = jnp.asarray(x), jnp.asarray(y)
        _0, _1 = num.zero(x), num.one(x)
        return cls.row_major(
            _1, _0,
            _0, _1,
             x,  y,
        )

    @classmethod
    def create_scale(cls, x, y) -> "TypedMatrix2D[T, Src, Dst]":
        """Returns a scale matrix."""
        x, y = jnp.asarray(x), jnp.asarray(y)
        _0 = num.zero(x)
        return cls.row_major(
             x, _0,
            _0,  y,
            _0, _0,
        )

    @classmethod
    def create_rotation(cls, theta: Angle) -> "TypedMatrix2D[T, Src, Dst]":
        """Returns a rotation matrix; *theta* is a Radians or a bare angle in radians."""
        theta = jnp.asarray(angle_value(theta))
        _0 = num.zero(theta)
        cos = num.cos(theta)
        sin = num.sin(theta)
        return cls.row_major(
            cos, _0 - sin,
            sin, cos,
             _0, _0,
        )

    @classmethod
    def from_array(cls, array: Array) -> "TypedMatrix2D[T, Src, Dst]":
        """Build from a (..., 3, 2) array whose rows are [m11 m12], [m21 m22], [m31 m32]."""
        array = jnp.asarray(array)
        if array.shape[-2:] != (3, 2):
            raise ValueError(f"array must have shape (...,3,2), got {array.shape}")
        return cls.row_major(
            array[..., 0, 0], array[..., 0, 1],
            array[..., 1, 0], array[..., 1, 1],
            array[..., 2, 0], array[..., 2, 1],
        )

    @classmethod
    def from_untyped(cls, mat: "TypedMatrix2D[T, UnknownUnit, UnknownUnit]") -> "TypedMatrix2D[T, Src, Dst]":
        """Tag a unitless matrix with units."""
        return cls(mat.m11, mat.m12, mat.m21, mat.m22, mat.m31, mat.m32)

    # PyTree boiler-plate
    def tree_flatten(self):
        return (self.m11, self.m12, self.m21, self.m22, self.m31, self.m32), None

    @classmethod
    def tree_unflatten(cls, aux, children):
        return cls(*children)

    # Serialization
    def to_row_major_array(self) -> Array:
        """Returns the terms in row-major order, the order they are stored in."""
        return jnp.stack([
            self.m11, self.m12,
            self.m21, self.m22,
            self.m31, self.m32,
        ], axis=-1)

    def to_column_major_array(self) -> Array:
        """Returns the terms in column-major order."""
        return jnp.stack([
            self.m11, self.m21, self.m31,
            self.m12, self.m22, self.m32,
        ], axis=-1)

    def to_array(self) -> Array:
        """Returns a (..., 3, 2) array, the inverse of from_array."""
        return self.to_row_major_array().reshape(jnp.shape(self.m11) + (3, 2))

    # Composition
    def post_mul(self, mat: "TypedMatrix2D[T, Dst, NewDst]") -> "TypedMatrix2D[T, Src, NewDst]":
        """Returns the product of the two matrices such that *mat* applies after self."""
        return TypedMatrix2D.row_major(
            self.m11 * mat.m11 + self.m12 * mat.m21,
            self.m11 * mat.m12 + self.m12 * mat.m22,
            self.m21 * mat.m11 + self.m22 * mat.m21,
            self.m21 * mat.m12 + self.m22 * mat.m22,
            self.m31 * mat.m11 + self.m32 * mat.m21 + mat.m31,
            self.m31 * mat.m12 + self.m32 * mat.m22 + mat.m32,
        )

    def pre_mul(self, mat: "TypedMatrix2D[T, NewSrc, Src]") -> "TypedMatrix2D[T, NewSrc, Dst]":
        """Returns the product of the two matrices such that *mat* applies before self."""
        return mat.post_mul(self)

    def post_translated(self, x, y) -> "TypedMatrix2D[T, Src, Dst]":
        """Applies a translation after self's transformation."""
        return self.post_mul(TypedMatrix2D.create_translation(x, y))

    def pre_translated(self, x, y) -> "TypedMatrix2D[T, Src, Dst]":
        """Applies a translation before self's transformation."""
        return self.pre_mul(TypedMatrix2D.create_translation(x, y))

    def post_scaled(self, x, y) -> "TypedMatrix2D[T, Src, Dst]":
        """Applies a scale after self's transformation."""
        return self.post_mul(TypedMatrix2D.create_scale(x, y))

    def pre_scaled(self, x, y) -> "TypedMatrix2D[T, Src, Dst]":
        """
        Applies a scale before self's transformation.

        Scaling the input point by (x, y) first multiplies the row that
        receives the input x coordinate by x and the one receiving y by y,
        which equals ``self.pre_mul(create_scale(x, y))`` without the full
        product.
        """
        return TypedMatrix2D.row_major(
            self.m11 * x, self.m12 * x,
            self.m21 * y, self.m22 * y,
            self.m31,     self.m32,
        )

    def post_rotated(self, theta: Angle) -> "TypedMatrix2D[T, Src, Dst]":
        """Applies a rotation after self's transformation."""
        return self.post_mul(TypedMatrix2D.create_rotation(theta))

    def pre_rotated(self, theta: Angle) -> "TypedMatrix2D[T, Src, Dst]":
        """Applies a rotation before self's transformation."""
        return self.pre_mul(TypedMatrix2D.create_rotation(theta))

    # Point transformation
    def transform_point(self, point: "TypedPoint2D[T, Src]") -> "TypedPoint2D[T, Dst]":
        """Returns the given point transformed by this matrix."""
        return TypedPoint2D(
            point.x * self.m11 + point.y * self.m21 + self.m31,
            point.x * self.m12 + point.y * self.m22 + self.m32,
        )

    def transform_rect(self, rect: "TypedRect[T, Src]") -> "TypedRect[T, Dst]":
        """
        Returns a rectangle that encompasses the transformed rectangle.

        The four corners are transformed and their axis-aligned bounding box
        is returned. Under rotation or shear the result is larger than the
        image of *rect*; it is exact for translations and scales only.
        """
        corners = [self.transform_point(p) for p in rect.corners()]
        min_x = max_x = corners[0].x
        min_y = max_y = corners[0].y
        for p in corners[1:]:
            min_x = jnp.minimum(min_x, p.x)
            max_x = jnp.maximum(max_x, p.x)
            min_y = jnp.minimum(min_y, p.y)
            max_y = jnp.maximum(max_y, p.y)
        return TypedRect(
            TypedPoint2D(min_x, min_y),
            TypedSize2D(max_x - min_x, max_y - min_y),
        )

    # Inversion
    def determinant(self):
        """Determinant of the linear part; translation does not contribute."""
        return self.m11 * self.m22 - self.m12 * self.m21

    def inverse(self) -> Optional["TypedMatrix2D[T, Dst, Src]"]:
        """
        Returns the inverse matrix, or None if the matrix is not invertible.

        A matrix is singular when its determinant is exactly zero. XLA flushes
        subnormal floats to zero, so a determinant that underflows into the
        subnormal range counts as zero too. Batched matrices return None if any
        member of the batch is singular. The check needs concrete values, so
        this cannot be traced by jax.jit.
        """
        det = self.determinant()

        _0 = num.zero(det)
        _1 = num.one(det)

        if bool(jnp.any(det == _0)):
            return None

        inv_det = _1 / det
        return TypedMatrix2D.row_major(
            inv_det * self.m22,
            inv_det * (_0 - self.m12),
            inv_det * (_0 - self.m21),
            inv_det * self.m11,
            inv_det * (self.m21 * self.m32 - self.m22 * self.m31),
            inv_det * (self.m31 * self.m12 - self.m11 * self.m32),
        )

    # Unit reinterpretation
    def with_destination(self, dst: Type[NewDst]) -> "TypedMatrix2D[T, Src, NewDst]":
        """Returns the same matrix with a different destination unit."""
        return TypedMatrix2D(self.m11, self.m12, self.m21, self.m22, self.m31, self.m32)

    def with_source(self, src: Type[NewSrc]) -> "TypedMatrix2D[T, NewSrc, Dst]":
        """Returns the same matrix with a different source unit."""
        return TypedMatrix2D(self.m11, self.m12, self.m21, self.m22, self.m31, self.m32)

    def to_untyped(self) -> "TypedMatrix2D[T, UnknownUnit, UnknownUnit]":
        """Drop the units, preserving only the numeric value."""
        return TypedMatrix2D(self.m11, self.m12, self.m21, self.m22, self.m31, self.m32)

    # Comparison
    def __eq__(self, other):
        if not isinstance(other, TypedMatrix2D):
            return NotImplemented
        return all(num.exact_eq(a, b) for a, b in zip(self.tree_flatten()[0], other.tree_flatten()[0]))

    def approx_eq(self, other: "TypedMatrix2D[T, Src, Dst]"):
        return (num.approx_eq(self.m11, other.m11) & num.approx_eq(self.m12, other.m12) &
                num.approx_eq(self.m21, other.m21) & num.approx_eq(self.m22, other.m22) &
                num.approx_eq(self.m31, other.m31) & num.approx_eq(self.m32, other.m32))

    def __repr__(self):
        return f"{type(self).__name__}({self.to_row_major_array()})"


# The default 2d matrix type with no units.
Matrix2D = TypedMatrix2D[T, UnknownUnit, UnknownUnit]
