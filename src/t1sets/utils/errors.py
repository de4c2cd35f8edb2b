"""Defines exceptions raised by membership functions."""
from __future__ import annotations


class MembershipFunctionError(Exception):
    """Base class for all t1sets errors."""


class ConstructionError(MembershipFunctionError, ValueError):
    """A membership function parameter is outside its valid domain."""


class UnsupportedCapabilityError(MembershipFunctionError, NotImplementedError):
    """The operation is not available for this membership function variant."""

    def __init__(self, operation: str, variant: str):
        super().__init__(f"{operation} is not supported for {variant}.")
        self.operation = operation
        self.variant = variant


class ExportError(MembershipFunctionError, OSError):
    """Writing a membership function to disk failed."""
