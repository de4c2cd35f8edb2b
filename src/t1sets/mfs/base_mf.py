"""Define Base Membership Function Class."""
from __future__ import annotations

import abc

import equinox as eqx

from ..utils.errors import UnsupportedCapabilityError
from ..utils.types import Array, Interval, ScalarLike


class BaseMF(eqx.Module, abc.ABC):
    """Type-1 membership function interface.

    Every variant maps a real domain value to a membership degree in [0, 1].
    Calling the module evaluates it over an array, ``get_fs`` evaluates a
    single value.
    """
    name: str = eqx.field(static=True, default="", kw_only=True)
    eps: float = eqx.field(static=True, default=1e-12, kw_only=True)

    @abc.abstractmethod
    def __call__(self, x: ScalarLike) -> Array:
        raise NotImplementedError("__call__ is not implemented for base MF class.")

    @abc.abstractmethod
    def get_fs(self, x: float) -> float | None:
        raise NotImplementedError("get_fs is not implemented for base MF class.")

    @property
    @abc.abstractmethod
    def support(self) -> Interval:
        raise NotImplementedError("support is not implemented for base MF class.")

    @abc.abstractmethod
    def get_alpha_cut(self, alpha: float) -> Interval | None:
        raise NotImplementedError("get_alpha_cut is not implemented for base MF class.")

    @abc.abstractmethod
    def to_string_rep(self) -> str:
        raise NotImplementedError("to_string_rep is not implemented for base MF class.")

    @property
    def is_left_shoulder(self) -> bool:
        return False

    @property
    def is_right_shoulder(self) -> bool:
        return False

    def get_peak(self) -> float | None:
        raise UnsupportedCapabilityError("get_peak", type(self).__name__)

    def compare_to(self, other: BaseMF) -> int:
        raise UnsupportedCapabilityError("compare_to", type(self).__name__)


def check_alpha(alpha: float) -> None:
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be in [0, 1], got {alpha}.")
