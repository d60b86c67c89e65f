"""Coordinate-space tags and angle units.

A space tag is any class used only as a type argument, e.g.::

    class WorldSpace: ...
    class ScreenSpace: ...

    world_to_screen: TypedMatrix2D[Array, WorldSpace, ScreenSpace]

Tags carry no data and are never instantiated. They are checked statically
by mypy or pyright; Python erases them at runtime.
"""

import math
from typing import Generic, TypeVar, Union

import jax
from flax import struct

Array = jax.Array

T = TypeVar("T")
U = TypeVar("U")
Src = TypeVar("Src")
Dst = TypeVar("Dst")


class UnknownUnit:
    """Tag for values whose coordinate space is not tracked."""


@struct.dataclass
class Radians(Generic[T]):
    """An angle in radians."""
    value: T

    def get(self) -> T:
        return self.value

    @classmethod
    def from_degrees(cls, degrees) -> "Radians":
        return cls(degrees * (math.pi / 180.0))

    def to_degrees(self):
        return self.value * (180.0 / math.pi)


def angle_value(theta: Union[Radians, float, Array]):
    """Unwrap a Radians, or pass through a bare scalar taken as radians."""
    if isinstance(theta, Radians):
        return theta.get()
    return theta
