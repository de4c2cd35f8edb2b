from .errors import (
    ConstructionError,
    ExportError,
    MembershipFunctionError,
    UnsupportedCapabilityError,
)
from .types import Array, Interval, SamplePoint, ScalarLike
