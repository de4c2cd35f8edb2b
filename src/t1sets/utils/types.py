"""Defines types used throughout t1sets."""
from __future__ import annotations

from typing import NamedTuple, Union

import jax.numpy as jnp

Array = jnp.ndarray
ScalarLike = Union[float, int, Array]


class Interval(NamedTuple):
    """Closed domain interval, used for supports and alpha-cuts."""
    low: float
    high: float

    @property
    def width(self) -> float:
        return self.high - self.low

    def contains(self, x: float) -> bool:
        return self.low <= x <= self.high


class SamplePoint(NamedTuple):
    """A single (x, degree) sample of a discretised membership function."""
    x: float
    degree: float
