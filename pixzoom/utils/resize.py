"""Nearest-neighbor resizing for NumPy arrays.

The fast, unfiltered alternative to :func:`pixzoom.resize_array`: each
destination pixel copies one source pixel, so there is no smoothing and no
protection against aliasing. Works for any channel count.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def resize_nearest(arr: Array, new_h: int, new_w: int) -> Array:
    """Resize an image to (new_h, new_w) via nearest-neighbor.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W) or (H, W, C), dtype=uint8.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).

    Returns
    -------
    np.ndarray
        Resized image with the same rank and channel count as ``arr``.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim not in (2, 3):
        raise ValueError("arr must be an image with shape (H, W) or (H, W, C)")
    if new_h < 1 or new_w < 1:
        raise ValueError("new_h and new_w must be >= 1")

    H, W = arr.shape[:2]
    if H == new_h and W == new_w:
        return arr.copy()

    # Source sample = floor(dest index * step), never past the last pixel
    yi = np.minimum((np.arange(new_h) * (H / new_h)).astype(np.int64), H - 1)
    xi = np.minimum((np.arange(new_w) * (W / new_w)).astype(np.int64), W - 1)

    out = arr[yi[:, None], xi[None, :]]
    return out.astype(np.uint8)


def resize_nearest_scale(arr: Array, scale: float) -> Array:
    """Resize an image by a float ``scale`` via nearest-neighbor.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W) or (H, W, C), dtype=uint8.
    scale : float
        Scale factor (>0). Values >1 upscale, <1 downscale.

    Returns
    -------
    np.ndarray
        Resized image.
    """
    if scale <= 0:
        raise ValueError("scale must be > 0")
    H, W = arr.shape[:2]
    new_h = max(1, int(round(H * scale)))
    new_w = max(1, int(round(W * scale)))
    return resize_nearest(arr, new_h, new_w)
