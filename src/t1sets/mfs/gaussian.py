"""Defines Gaussian Membership Function Class."""
from __future__ import annotations

import equinox as eqx
import jax.numpy as jnp

from .base_mf import BaseMF, check_alpha
from .functions import gaussian
from ..utils.errors import ConstructionError
from ..utils.types import Array, Interval, ScalarLike


class GaussianMF(BaseMF):
    """Gaussian membership function truncated to zero beyond four spreads."""
    mean: float
    spread: float

    name: str = eqx.field(static=True, default="gauss", kw_only=True)

    def __check_init__(self):
        if not self.spread > 0.0:
            raise ConstructionError(f"spread must be > 0.0, got {self.spread}.")

    def __call__(self, x: ScalarLike) -> Array:
        return gaussian(x, self.mean, self.spread)

    def get_fs(self, x: float) -> float:
        return float(self(x))

    @property
    def support(self) -> Interval:
        return Interval(float(self.mean - 4.0*self.spread), float(self.mean + 4.0*self.spread))

    def get_alpha_cut(self, alpha: float) -> Interval:
        check_alpha(alpha)
        supp = self.support

        if alpha == 0.0:
            return supp

        half_width = float(self.spread * jnp.sqrt(-2.0*jnp.log(alpha)))

        return Interval(max(supp.low, self.mean - half_width), min(supp.high, self.mean + half_width))

    def get_peak(self) -> float:
        return float(self.mean)

    def to_string_rep(self) -> str:
        return f"{self.name} - Gaussian with mean {self.mean}, standard deviation: {self.spread}"
