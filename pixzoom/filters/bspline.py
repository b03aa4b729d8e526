"""Cubic B-spline kernel, box (*) box (*) box (*) box.

Smooth and never negative, so it blurs slightly but does not ring.
"""
from __future__ import annotations

import numpy as np

from .base import Filter

Array = np.ndarray

SUPPORT = 2.0


def bspline_filter(t: Array) -> Array:
    t = np.abs(t)
    tt = t * t
    near = 0.5 * tt * t - tt + (2.0 / 3.0)
    r = 2.0 - t
    far = (1.0 / 6.0) * (r * r * r)
    return np.where(t < 1.0, near, np.where(t < 2.0, far, 0.0))


BSPLINE = Filter("bspline", SUPPORT, bspline_filter)
