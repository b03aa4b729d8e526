"""Mitchell-Netravali cubic with ``B = C = 1/3``.

Two cubic segments in ``|t|``, on ``[0, 1)`` and ``[1, 2)``:

    (12 - 9B - 6C)|t|^3 + (-18 + 12B + 6C)|t|^2 + (6 - 2B)             / 6
    (-B - 6C)|t|^3 + (6B + 30C)|t|^2 + (-12B - 48C)|t| + (8B + 24C)    / 6
"""
from __future__ import annotations

import numpy as np

from .base import Filter

Array = np.ndarray

SUPPORT = 2.0

B = 1.0 / 3.0
C = 1.0 / 3.0


def mitchell_filter(t: Array) -> Array:
    tt = t * t
    t = np.abs(t)
    near = (
        (12.0 - 9.0 * B - 6.0 * C) * (t * tt)
        + (-18.0 + 12.0 * B + 6.0 * C) * tt
        + (6.0 - 2.0 * B)
    )
    far = (
        (-1.0 * B - 6.0 * C) * (t * tt)
        + (6.0 * B + 30.0 * C) * tt
        + (-12.0 * B - 48.0 * C) * t
        + (8.0 * B + 24.0 * C)
    )
    return np.where(t < 1.0, near / 6.0, np.where(t < 2.0, far / 6.0, 0.0))


MITCHELL = Filter("mitchell", SUPPORT, mitchell_filter)
