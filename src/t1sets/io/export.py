"""Defines export of discretised membership functions to CSV-like files."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import jax.numpy as jnp

from ..utils.errors import ExportError

if TYPE_CHECKING:
    from ..mfs.discretised import DiscretisedMF


logger = logging.getLogger(__name__)


def _append_rows(path: str, rows: Iterable[str]) -> None:
    try:
        with open(path, "a", encoding="utf-8") as f:
            for row in rows:
                f.write(row + "\n")
    except OSError as err:
        raise ExportError(f"Error writing to output file {path}: {err}") from err

def write_to_file(mf: DiscretisedMF, path: str) -> str:
    """Appends one ``x,degree`` row per sample of ``mf`` to ``path``."""
    _append_rows(path, (f"{p.x},{p.degree}" for p in mf.points))

    msg = f"Discretised set {mf.name} was successfully written to {path}"
    logger.info(msg)
    return msg

def write_to_file_high_res(mf: DiscretisedMF, path: str, resolution: int) -> str:
    """Appends ``x,fs(x)`` rows for ``resolution`` evenly spaced points.

    The points span the samples of ``mf``. Undefined degrees are written as
    ``nan``.
    """
    if resolution < 2:
        raise ValueError(f"resolution must be >= 2, got {resolution}.")

    span = mf.sample_span
    xs = jnp.linspace(span.low, span.high, resolution)
    ys = mf(xs)

    _append_rows(path, (f"{x},{y}" for x, y in zip(xs.tolist(), ys.tolist())))

    msg = f"Discretised set {mf.name} was successfully written to {path}"
    logger.info(msg)
    return msg
