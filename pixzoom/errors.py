"""Exception types raised by pixzoom.

Only caller mistakes are reported; clamping of out-of-range channel values
during resampling is policy and never raises.
"""
from __future__ import annotations


class PixzoomError(Exception):
    """Base class for all pixzoom errors."""


class InvalidDimensions(PixzoomError, ValueError):
    """Raised for non-positive sizes, short buffers or mismatched geometry."""


class AllocationFailure(PixzoomError, MemoryError):
    """Raised when a destination or intermediate buffer cannot be allocated."""


__all__ = ["PixzoomError", "InvalidDimensions", "AllocationFailure"]
