"""Lanczos-3 windowed sinc kernel.

Sharpest of the shipped kernels. Its negative lobes overshoot near hard
edges; the overshoot is clipped when pixels are written back as bytes.
"""
from __future__ import annotations

import numpy as np

from .base import Filter

Array = np.ndarray

SUPPORT = 3.0


def lanczos3_filter(t: Array) -> Array:
    t = np.abs(t)
    # np.sinc is the normalised sinc, sin(pi x) / (pi x), with sinc(0) == 1
    return np.where(t < 3.0, np.sinc(t) * np.sinc(t / 3.0), 0.0)


LANCZOS3 = Filter("lanczos3", SUPPORT, lanczos3_filter)
