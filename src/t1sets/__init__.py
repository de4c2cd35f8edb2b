"""
Welcome to the t1sets documentation!

t1sets offers type-1 fuzzy membership functions as Equinox modules: a
closed-form Gaussian, a constant cylindrical extension, and a piecewise-linear
discretised function built from arbitrary samples.

Importing t1sets enables ``jax_enable_x64`` for the whole process, so other
JAX code in the same interpreter also defaults to 64-bit dtypes.
"""

__version__ = "0.1.0"

import jax

# sample degrees must round-trip exactly
jax.config.update("jax_enable_x64", True)

from .mfs import BaseMF, CylinderMF, DiscretisedMF, GaussianMF
from .utils.errors import (
    ConstructionError,
    ExportError,
    MembershipFunctionError,
    UnsupportedCapabilityError,
)
from .utils.types import Interval, SamplePoint
