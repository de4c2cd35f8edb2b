"""Defines closed-form membership functions."""
from __future__ import annotations

import jax.numpy as jnp

from ..utils.types import Array


def gaussian(x: Array, mean: float, spread: float, truncate: float=4.0) -> Array:
    x = jnp.asarray(x)
    inside = jnp.abs(x - mean) <= truncate*spread

    return jnp.where(inside, jnp.exp(-0.5*((x - mean) / spread)**2), 0.0)

def interpolate(x: Array, xs: Array, degrees: Array, eps: float=1e-12) -> Array:
    """Piecewise-linear lookup over sorted samples.

    Values left of the first sample take the first degree, values right of
    the last sample are undefined (NaN). A value within ``eps`` to the right
    of a sample returns that sample's degree exactly.
    """
    x = jnp.asarray(x, dtype=xs.dtype)
    n = xs.shape[0]

    # first sample strictly right of x
    idx = jnp.searchsorted(xs, x, side="right")

    hi = jnp.clip(idx, 1, n - 1)
    lo = hi - 1
    mu = degrees[lo] + (degrees[hi] - degrees[lo]) * (x - xs[lo]) / (xs[hi] - xs[lo])

    prev = jnp.clip(idx - 1, 0, n - 1)
    exact = jnp.abs(x - xs[prev]) < eps

    mu = jnp.where(idx == 0, degrees[0], mu)
    mu = jnp.where(idx == n, jnp.nan, mu)

    return jnp.where(exact, degrees[prev], mu)
