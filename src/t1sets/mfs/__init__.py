from .base_mf import BaseMF
from .cylinder import CylinderMF
from .discretised import (
    DEFAULT_ALPHA_CUT_DISC_LEVEL,
    DEFAULT_ALPHA_CUT_PRECISION_LIMIT,
    DiscretisedMF,
    sort_and_merge,
)
from .gaussian import GaussianMF
