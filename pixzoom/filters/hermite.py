"""Cubic Hermite-like kernel, ``f(t) = 2|t|^3 - 3|t|^2 + 1`` on ``[-1, 1]``."""
from __future__ import annotations

import numpy as np

from .base import Filter

Array = np.ndarray

SUPPORT = 1.0


def hermite_filter(t: Array) -> Array:
    t = np.abs(t)
    return np.where(t < 1.0, (2.0 * t - 3.0) * t * t + 1.0, 0.0)


HERMITE = Filter("hermite", SUPPORT, hermite_filter)
