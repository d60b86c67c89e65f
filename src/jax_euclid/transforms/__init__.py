"""
JAX-based 2D affine transforms between typed coordinate spaces.

This module provides the TypedMatrix2D type and its untyped alias Matrix2D.
All operations are pure, stateless, and work under jit and vmap.
"""

from .matrix2d import Matrix2D, TypedMatrix2D

__all__ = [
    "Matrix2D",
    "TypedMatrix2D",
]
