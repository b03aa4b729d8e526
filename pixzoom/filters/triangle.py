"""Triangle (tent) kernel, i.e. linear interpolation."""
from __future__ import annotations

import numpy as np

from .base import Filter

Array = np.ndarray

SUPPORT = 1.0


def triangle_filter(t: Array) -> Array:
    t = np.abs(t)
    return np.where(t < 1.0, 1.0 - t, 0.0)


TRIANGLE = Filter("triangle", SUPPORT, triangle_filter)
