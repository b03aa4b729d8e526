"""Row, column and pixel access on flat byte buffers.

These helpers sit in the resampler's inner loops, so they are compiled with
Numba and perform no bounds checking. The checked entry points are the
methods of :class:`pixzoom.image.Image`.

Byte layout: pixel ``(x, y)`` starts at ``y * span + x * bpp`` where ``span``
is the row stride in bytes and ``bpp`` the channel count.
"""
from __future__ import annotations

import numpy as np
from numba import njit


@njit(cache=True)
def get_row(row: np.ndarray, data: np.ndarray, y: int, span: int, nbytes: int) -> None:
    """Copy ``nbytes`` of scanline ``y`` into ``row``."""
    start = y * span
    for i in range(nbytes):
        row[i] = data[start + i]


@njit(cache=True)
def get_column(
    column: np.ndarray, data: np.ndarray, x: int, height: int, span: int, bpp: int
) -> None:
    """Gather the ``height`` pixels of column ``x`` into ``column``."""
    p = x * bpp
    k = 0
    for _ in range(height):
        for j in range(bpp):
            column[k] = data[p + j]
            k += 1
        p += span


@njit(cache=True)
def put_pixel(
    data: np.ndarray, x: int, y: int, span: int, bpp: int, values: np.ndarray
) -> None:
    """Clamp ``values`` to [0, 255], truncate to bytes and store at ``(x, y)``."""
    p = y * span + x * bpp
    for i in range(bpp):
        val = values[i]
        if val < 0.0:
            val = 0.0
        elif val > 255.0:
            val = 255.0
        data[p + i] = int(val)


__all__ = ["get_row", "get_column", "put_pixel"]
