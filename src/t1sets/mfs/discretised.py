"""Defines Discretised Membership Function Class.

A discretised membership function is built from arbitrary (x, degree) samples
and evaluated by linear interpolation between neighbouring samples. Samples
are kept sorted by x and samples sharing an x are merged, keeping the highest
degree.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

import equinox as eqx
import jax.numpy as jnp

from .base_mf import BaseMF, check_alpha
from .functions import interpolate
from ..utils.errors import ConstructionError
from ..utils.types import Array, Interval, SamplePoint, ScalarLike


logger = logging.getLogger(__name__)

DEFAULT_ALPHA_CUT_DISC_LEVEL = 60
DEFAULT_ALPHA_CUT_PRECISION_LIMIT = 0.01


def sort_and_merge(points: Iterable[Sequence[float]], eps: float=1e-12) -> tuple[SamplePoint, ...]:
    """Sorts samples by x and merges neighbours closer than ``eps``.

    A merged sample keeps the x of the first sample of its run and the
    maximum degree of the run.
    """
    ordered = sorted((SamplePoint(float(x), float(d)) for x, d in points), key=lambda p: p.x)
    if not ordered:
        return ()

    merged = [ordered[0]]
    for point in ordered[1:]:
        head = merged[-1]
        if abs(point.x - head.x) < eps:
            logger.debug("Merging duplicate sample at x=%s (degrees %s, %s).", head.x, head.degree, point.degree)
            merged[-1] = SamplePoint(head.x, max(head.degree, point.degree))
        else:
            merged.append(point)

    return tuple(merged)


class DiscretisedMF(BaseMF):
    """Piecewise-linear membership function over a set of samples.

    Instances are immutable: ``add_point``, ``add_points`` and the shoulder
    setters return a new function.

    Parameters
    ----------
    points : Iterable of (x, degree)
        Initial samples, in any order. ``SamplePoint`` or plain pairs.
    name : str
        Name of the function.
    left_shoulder_start, right_shoulder_start : float, optional
        Thresholds beyond which membership saturates at 1.0.
    alpha_cut_disc_level : int
        Number of probe points used by the alpha-cut search.
    alpha_cut_precision_limit : float
        Alpha-cut bounds closer than this collapse to a single point.
    eps : float
        Tolerance used when comparing x values and degrees.
    """
    xs: Array
    degrees: Array

    left_shoulder_start: float | None = eqx.field(static=True, default=None)
    right_shoulder_start: float | None = eqx.field(static=True, default=None)
    alpha_cut_disc_level: int = eqx.field(static=True, default=DEFAULT_ALPHA_CUT_DISC_LEVEL)
    alpha_cut_precision_limit: float = eqx.field(static=True, default=DEFAULT_ALPHA_CUT_PRECISION_LIMIT)

    def __init__(
        self,
        points: Iterable[Sequence[float]] = (),
        *,
        name: str = "discretised",
        left_shoulder_start: float | None = None,
        right_shoulder_start: float | None = None,
        alpha_cut_disc_level: int = DEFAULT_ALPHA_CUT_DISC_LEVEL,
        alpha_cut_precision_limit: float = DEFAULT_ALPHA_CUT_PRECISION_LIMIT,
        eps: float = 1e-12,
    ):
        if alpha_cut_disc_level < 2:
            raise ConstructionError(f"alpha_cut_disc_level must be >= 2, got {alpha_cut_disc_level}.")

        if alpha_cut_precision_limit < 0.0:
            raise ConstructionError(
                f"alpha_cut_precision_limit must be >= 0.0, got {alpha_cut_precision_limit}."
            )

        points = [SamplePoint(float(x), float(d)) for x, d in points]

        for p in points:
            if not jnp.isfinite(p.x):
                raise ConstructionError(f"Sample x values must be finite, got {p.x}.")
            if not 0.0 <= p.degree <= 1.0:
                raise ConstructionError(f"Sample degree at x={p.x} must be in [0, 1], got {p.degree}.")

        samples = sort_and_merge(points, eps)

        self.xs = jnp.array([p.x for p in samples], dtype=jnp.float64)
        self.degrees = jnp.array([p.degree for p in samples], dtype=jnp.float64)

        self.name = name
        self.eps = eps
        self.left_shoulder_start = None if left_shoulder_start is None else float(left_shoulder_start)
        self.right_shoulder_start = None if right_shoulder_start is None else float(right_shoulder_start)
        self.alpha_cut_disc_level = int(alpha_cut_disc_level)
        self.alpha_cut_precision_limit = float(alpha_cut_precision_limit)

    def __call__(self, x: ScalarLike) -> Array:
        x = jnp.asarray(x, dtype=self.xs.dtype)

        if self.n_points == 0:
            return jnp.full(x.shape, jnp.nan)

        low, high = self._support_bounds()

        mu = interpolate(x, self.xs, self.degrees, self.eps)
        mu = jnp.where((x < low) | (x > high), 0.0, mu)

        if self.is_right_shoulder:
            mu = jnp.where(x > self.right_shoulder_start, 1.0, mu)
        if self.is_left_shoulder:
            mu = jnp.where(x < self.left_shoulder_start, 1.0, mu)

        return mu

    def get_fs(self, x: float) -> float | None:
        """Membership degree of ``x``, or None where it is undefined."""
        if self.n_points == 0:
            return None

        mu = self(x)
        if jnp.isnan(mu):
            logger.debug("Membership of %s is undefined for set %s.", x, self.name)
            return None

        return float(mu)

    def _support_bounds(self) -> tuple[Array, Array]:
        if self.is_left_shoulder:
            return jnp.asarray(-jnp.inf), self.xs[-1]
        if self.is_right_shoulder:
            return self.xs[0], jnp.asarray(jnp.inf)
        return self.xs[0], self.xs[-1]

    @property
    def support(self) -> Interval:
        if self.n_points == 0:
            return Interval(0.0, 0.0)

        low, high = self._support_bounds()
        return Interval(float(low), float(high))

    @property
    def sample_span(self) -> Interval:
        """Interval between the first and last sample, ignoring shoulders."""
        if self.n_points == 0:
            return Interval(0.0, 0.0)
        return Interval(float(self.xs[0]), float(self.xs[-1]))

    @property
    def is_left_shoulder(self) -> bool:
        return self.left_shoulder_start is not None

    @property
    def is_right_shoulder(self) -> bool:
        return self.right_shoulder_start is not None

    @property
    def points(self) -> tuple[SamplePoint, ...]:
        return tuple(SamplePoint(x, d) for x, d in zip(self.xs.tolist(), self.degrees.tolist()))

    def point_at(self, index: int) -> SamplePoint:
        return self.points[index]

    @property
    def alpha_cut_discretisation_level(self) -> int:
        return self.alpha_cut_disc_level

    @property
    def n_points(self) -> int:
        return self.xs.shape[0]

    def __len__(self) -> int:
        return self.n_points

    def get_alpha_cut(self, alpha: float) -> Interval | None:
        """Domain interval where the membership degree is at least ``alpha``.

        For 0 < alpha < 1 the interval is found by probing an even grid over
        the samples from both ends, which assumes the function rises then
        falls. On multi-modal sets the result spans the outermost crossings.
        """
        check_alpha(alpha)

        if self.n_points == 0:
            return None

        if abs(alpha) < self.eps:
            return self.support

        if abs(alpha - 1.0) < self.eps:
            tops = [p.x for p in self.points if abs(p.degree - 1.0) < self.eps]
            if not tops:
                return Interval(0.0, 0.0)
            return Interval(tops[0], tops[-1])

        return self._search_alpha_cut(alpha)

    def _search_alpha_cut(self, alpha: float) -> Interval:
        supp = self.support
        span = self.sample_span

        probes = jnp.linspace(span.low, span.high, self.alpha_cut_disc_level)
        hits = jnp.nonzero(self(probes) - alpha >= 0.0)[0]

        if hits.size == 0:
            return Interval(supp.low, supp.high)

        first, last = int(hits[0]), int(hits[-1])

        # a saturated shoulder keeps the cut open on that side, unless an
        # undefined gap separates the last sample from the right threshold
        left_open = self.is_left_shoulder and first == 0
        right_open = (
            self.is_right_shoulder
            and self.right_shoulder_start <= span.high
            and last == self.alpha_cut_disc_level - 1
        )

        left = supp.low if left_open else float(probes[first])
        right = supp.high if right_open else float(probes[last])

        if abs(left - right) < self.alpha_cut_precision_limit:
            logger.debug("Collapsing alpha-cut at %s for set %s to a single point.", alpha, self.name)
            right = left

        return Interval(left, right)

    def get_peak(self) -> float | None:
        """Domain value of maximum membership.

        A run of samples tying the running maximum is treated as a plateau
        and its midpoint is returned. Only the first tied run is considered.
        """
        points = self.points
        if not points:
            return None

        peak_degree = points[0].degree
        peak_x = points[0].x

        i = 1
        while i < len(points):
            point = points[i]
            if point.degree > peak_degree:
                peak_degree = point.degree
                peak_x = point.x
            elif abs(point.degree - peak_degree) < self.eps:
                plateau_end = point.x
                while i < len(points) and abs(points[i].degree - peak_degree) < self.eps:
                    plateau_end = points[i].x
                    i += 1
                return (peak_x + plateau_end) / 2.0
            i += 1

        return peak_x

    def get_defuzzified_centroid(self) -> float:
        total = float(jnp.sum(self.degrees))
        if total == 0.0:
            return 0.0
        return float(jnp.sum(self.xs * self.degrees)) / total

    def to_string_rep(self) -> str:
        return "".join(f"{p.degree} / {p.x}\n" for p in self.points)

    def add_point(self, point: Sequence[float]) -> DiscretisedMF:
        return self.add_points([point])

    def add_points(self, points: Iterable[Sequence[float]]) -> DiscretisedMF:
        return self._rebuild(points=self.points + tuple(points))

    def set_left_shoulder_set(self, shoulder_start: float) -> DiscretisedMF:
        return self._rebuild(left_shoulder_start=shoulder_start)

    def set_right_shoulder_set(self, shoulder_start: float) -> DiscretisedMF:
        return self._rebuild(right_shoulder_start=shoulder_start)

    def with_alpha_cut_discretisation_level(self, level: int) -> DiscretisedMF:
        return self._rebuild(alpha_cut_disc_level=level)

    def write_to_file(self, path: str) -> str:
        from ..io.export import write_to_file

        return write_to_file(self, path)

    def write_to_file_high_res(self, path: str, resolution: int) -> str:
        from ..io.export import write_to_file_high_res

        return write_to_file_high_res(self, path, resolution)

    def _rebuild(self, **changes) -> DiscretisedMF:
        kwargs = dict(
            points=self.points,
            name=self.name,
            left_shoulder_start=self.left_shoulder_start,
            right_shoulder_start=self.right_shoulder_start,
            alpha_cut_disc_level=self.alpha_cut_disc_level,
            alpha_cut_precision_limit=self.alpha_cut_precision_limit,
            eps=self.eps,
        )
        kwargs.update(changes)

        return type(self)(**kwargs)
