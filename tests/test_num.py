"""Tests for the numeric capability helpers."""

import jax.numpy as jnp

from jax_euclid import num


def test_zero_one_follow_sample_dtype():
    x = jnp.asarray(3, dtype=jnp.int32)
    assert num.zero(x).dtype == jnp.int32
    assert num.one(x) == 1

    batch = jnp.ones((3,), dtype=jnp.float32)
    assert num.zero(batch).shape == (3,)
    assert num.one(batch).dtype == jnp.float32


def test_approx_eq_uses_epsilon():
    assert num.approx_eq(1.0, 1.0 + 0.5 * num.APPROX_EPSILON)
    assert not num.approx_eq(1.0, 1.0 + 2.0 * num.APPROX_EPSILON)
    assert num.approx_eq(1.0, 1.1, epsilon=0.2)


def test_approx_eq_reduces_over_batch():
    a = jnp.array([1.0, 2.0, 3.0])
    assert num.approx_eq(a, a + 1e-9)
    assert not num.approx_eq(a, a.at[1].set(2.5))


def test_exact_eq():
    assert num.exact_eq(0.0, -0.0)
    assert not num.exact_eq(jnp.array([1.0, 2.0]), jnp.array([1.0, 2.0 + 1e-12]))
