"""Public resize entry points.

- resize(buffer, width, height, channels, new_width, new_height)
    Flat byte buffer in, new flat byte buffer out, always the bell kernel.
- resize_array(arr, new_h, new_w, filter="bell")
    NumPy image in, NumPy image out, any registered kernel or "nearest".
- resize_array_scale(arr, scale, filter="bell")
"""
from __future__ import annotations

import numpy as np

from .errors import InvalidDimensions
from .filters import DEFAULT_FILTER, Filter, get_filter
from .image import Image, check_dimensions
from .utils.resize import resize_nearest
from .zoom import zoom

Array = np.ndarray

NEAREST = "nearest"


def resize(
    buffer,
    width: int,
    height: int,
    channels: int,
    new_width: int,
    new_height: int,
) -> Array:
    """Resample a packed image buffer with the bell filter.

    Parameters
    ----------
    buffer : bytes | bytearray | memoryview | np.ndarray
        Row-major pixels, ``width * height * channels`` bytes, no row
        padding. Aliased, never modified.
    width, height : int
        Source size in pixels (> 0).
    channels : int
        Bytes per pixel (> 0).
    new_width, new_height : int
        Destination size in pixels (> 0).

    Returns
    -------
    np.ndarray
        New flat uint8 buffer of ``new_width * new_height * channels`` bytes
        owned by the caller.

    Raises
    ------
    InvalidDimensions
        A size is not a positive integer or the buffer is too short.
        Raised before anything is allocated.
    AllocationFailure
        The destination or intermediate buffer could not be allocated.
    """
    check_dimensions(
        width=width,
        height=height,
        channels=channels,
        new_width=new_width,
        new_height=new_height,
    )
    src = Image.wrap(buffer, width, height, channels)
    dst = Image.allocate(new_width, new_height, channels)
    zoom(dst, src, get_filter(DEFAULT_FILTER))
    return dst.data


def resize_array(
    arr: Array, new_h: int, new_w: int, filter: str | Filter = DEFAULT_FILTER
) -> Array:
    """Resize an image array with a filtered (or nearest-neighbor) resampler.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W) or (H, W, C), dtype=uint8.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).
    filter : str | Filter
        Kernel name from :data:`pixzoom.filters.FILTERS`, a custom
        :class:`~pixzoom.filters.Filter`, or ``"nearest"``.

    Returns
    -------
    np.ndarray
        Resized image with the same rank and channel count as ``arr``.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim not in (2, 3):
        raise ValueError("arr must be an image with shape (H, W) or (H, W, C)")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    check_dimensions(new_h=new_h, new_w=new_w)
    if isinstance(filter, str) and filter.lower() == NEAREST:
        return resize_nearest(arr, new_h, new_w)

    filt = get_filter(filter)
    src = Image.from_array(arr)
    dst = Image.allocate(new_w, new_h, src.channels)
    zoom(dst, src, filt)

    out = dst.to_array()
    return out[:, :, 0] if arr.ndim == 2 else out


def resize_array_scale(
    arr: Array, scale: float, filter: str | Filter = DEFAULT_FILTER
) -> Array:
    """Resize an image array by a float ``scale``.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W) or (H, W, C), dtype=uint8.
    scale : float
        Scale factor (>0). Values >1 upscale, <1 downscale.
    filter : str | Filter
        As for :func:`resize_array`.

    Returns
    -------
    np.ndarray
        Resized image.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim not in (2, 3):
        raise ValueError("arr must be an image with shape (H, W) or (H, W, C)")
    # also rejects NaN
    if not scale > 0:
        raise InvalidDimensions(f"scale must be > 0, got {scale}")
    H, W = arr.shape[:2]
    new_h = max(1, int(round(H * scale)))
    new_w = max(1, int(round(W * scale)))
    return resize_array(arr, new_h, new_w, filter=filter)


__all__ = ["resize", "resize_array", "resize_array_scale", "NEAREST"]
