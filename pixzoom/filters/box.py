"""Box kernel (nearest sample, area average when shrinking)."""
from __future__ import annotations

import numpy as np

from .base import Filter

Array = np.ndarray

SUPPORT = 0.5


def box_filter(t: Array) -> Array:
    # half-open: of t = -0.5 and t = 0.5 only the latter is inside
    return np.where((t > -0.5) & (t <= 0.5), 1.0, 0.0)


BOX = Filter("box", SUPPORT, box_filter)
