"""Defines Cylindrical Extension Membership Function Class."""
from __future__ import annotations

import equinox as eqx
import jax.numpy as jnp

from .base_mf import BaseMF, check_alpha
from ..utils.errors import ConstructionError
from ..utils.types import Array, Interval, ScalarLike


class CylinderMF(BaseMF):
    """Constant membership degree over the whole real line.

    Used as the cylindrical extension of a firing strength.
    """
    membership_degree: float

    name: str = eqx.field(static=True, default="cylinder", kw_only=True)

    def __check_init__(self):
        if not 0.0 <= self.membership_degree <= 1.0:
            raise ConstructionError(
                f"The membership degree should be between 0 and 1, got {self.membership_degree}."
            )

    def __call__(self, x: ScalarLike) -> Array:
        return jnp.full(jnp.shape(x), self.membership_degree)

    def get_fs(self, x: float) -> float:
        return float(self.membership_degree)

    @property
    def support(self) -> Interval:
        return Interval(-jnp.inf, jnp.inf)

    def get_alpha_cut(self, alpha: float) -> Interval | None:
        check_alpha(alpha)
        if alpha <= self.membership_degree:
            return self.support
        return None

    def to_string_rep(self) -> str:
        return f"{self.name} - Cylindrical extension at: {self.membership_degree}"
