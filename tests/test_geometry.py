"""Tests for the space-tagged value types."""

import jax
import jax.numpy as jnp
import numpy as np

from jax_euclid import Point2D, Radians, Rect, Size2D, TypedPoint2D, TypedRect


def test_rect_corners():
    """Corners follow the y-down naming convention."""
    rect = Rect.from_coords(1.0, 2.0, 3.0, 4.0)
    assert rect.origin == Point2D(1.0, 2.0)
    assert rect.top_right() == Point2D(4.0, 2.0)
    assert rect.bottom_left() == Point2D(1.0, 6.0)
    assert rect.bottom_right() == Point2D(4.0, 6.0)
    assert rect.corners()[0] == rect.origin


def test_rect_edges():
    rect = Rect(Point2D(-1.0, 0.5), Size2D(2.0, 1.5))
    assert rect.min_x() == -1.0
    assert rect.max_x() == 1.0
    assert rect.min_y() == 0.5
    assert rect.max_y() == 2.0


def test_point_equality():
    """Exact and approximate equality."""
    assert Point2D(1.0, 2.0) == Point2D(1.0, 2.0)
    assert Point2D(1.0, 2.0) != Point2D(1.0, 2.5)
    assert Point2D(1.0, 2.0).approx_eq(Point2D(1.0 + 1e-9, 2.0 - 1e-9))
    assert not Point2D(1.0, 2.0).approx_eq(Point2D(1.0 + 1e-3, 2.0))


def test_point_origin_and_array():
    p = TypedPoint2D.origin(dtype=jnp.float32)
    assert p.x.dtype == jnp.float32
    np.testing.assert_array_equal(Point2D(3.0, 4.0).to_array(), [3.0, 4.0])


def test_untyped_conversions_keep_values():
    """Dropping and re-attaching units never changes the numbers."""
    p = TypedPoint2D(1.5, -2.5)
    assert TypedPoint2D.from_untyped(p.to_untyped()) == p

    r = TypedRect.from_coords(1.0, 2.0, 3.0, 4.0)
    assert TypedRect.from_untyped(r.to_untyped()) == r


def test_value_types_are_pytrees():
    """Points and rects flatten to their scalar leaves."""
    rect = Rect.from_coords(1.0, 2.0, 3.0, 4.0)
    assert len(jax.tree_util.tree_leaves(rect)) == 4

    shifted = jax.tree_util.tree_map(lambda v: v + 1.0, Point2D(1.0, 2.0))
    assert shifted == Point2D(2.0, 3.0)


def test_radians_degrees():
    angle = Radians.from_degrees(180.0)
    np.testing.assert_allclose(angle.get(), np.pi, rtol=1e-12)
    np.testing.assert_allclose(angle.to_degrees(), 180.0, rtol=1e-12)
