"""Bell kernel: the quadratic B-spline, box (*) box (*) box.

This is the default kernel of :func:`pixzoom.resize`.
"""
from __future__ import annotations

import numpy as np

from .base import Filter

Array = np.ndarray

SUPPORT = 1.5


def bell_filter(t: Array) -> Array:
    t = np.abs(t)
    inner = 0.75 - t * t
    outer = 0.5 * (t - 1.5) * (t - 1.5)
    return np.where(t < 0.5, inner, np.where(t < 1.5, outer, 0.0))


BELL = Filter("bell", SUPPORT, bell_filter)
