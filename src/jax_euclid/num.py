"""Numeric capabilities consumed by the geometry types.

The matrix and value types are written once for any JAX dtype. This module
is the whole contract they rely on: additive and multiplicative identities
derived from a sample value, trigonometry for rotations, and an approximate
equality used to compare floating point results.
"""

from typing import Optional, Union

import jax
import jax.numpy as jnp

Array = jax.Array
Scalar = Union[float, int, Array]

# Same tolerance for every float width.
APPROX_EPSILON = 1.0e-6


def zero(like: Scalar) -> Array:
    """Additive identity with the dtype and shape of *like*."""
    return jnp.zeros_like(jnp.asarray(like))


def one(like: Scalar) -> Array:
    """Multiplicative identity with the dtype and shape of *like*."""
    return jnp.ones_like(jnp.asarray(like))


def sin(angle: Scalar) -> Array:
    return jnp.sin(angle)


def cos(angle: Scalar) -> Array:
    return jnp.cos(angle)


def approx_eq(a: Scalar, b: Scalar, epsilon: Optional[float] = None) -> Array:
    """
    Compare two scalars (or broadcastable arrays) up to a tolerance.

    Args:
        a: first value
        b: second value
        epsilon: tolerance, defaults to APPROX_EPSILON

    Returns:
        Boolean scalar array, true iff every element satisfies |a - b| < epsilon
    """
    if epsilon is None:
        epsilon = APPROX_EPSILON
    return jnp.all(jnp.abs(jnp.asarray(a) - jnp.asarray(b)) < epsilon)


def exact_eq(a: Scalar, b: Scalar) -> bool:
    """Exact elementwise equality, reduced over any batch dimensions."""
    return bool(jnp.all(jnp.asarray(a) == jnp.asarray(b)))
