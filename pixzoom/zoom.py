"""Two-pass separable resampling.

Pass 1 filters every source row into an intermediate image that already has
the destination width; pass 2 filters every column of that image into the
destination. With a kernel of support ``s`` this costs
``O(dst_w * src_h * s + dst_w * dst_h * s)`` instead of the
``O(dst_w * dst_h * s^2)`` of a direct 2-D convolution.

Channels are accumulated independently in float32 and written back through
:func:`pixzoom.pixels.put_pixel`, which clamps to [0, 255].
"""
from __future__ import annotations

import logging

import numpy as np
from numba import njit

from .contrib import build_contributions
from .errors import InvalidDimensions
from .filters import Filter
from .image import Image
from .pixels import get_column, get_row, put_pixel

logger = logging.getLogger(__name__)


@njit(cache=True)
def _zoom_rows(
    src: np.ndarray,
    src_w: int,
    src_h: int,
    src_span: int,
    dst: np.ndarray,
    dst_w: int,
    dst_span: int,
    bpp: int,
    offsets: np.ndarray,
    pixels: np.ndarray,
    weights: np.ndarray,
) -> None:
    raster = np.empty(src_w * bpp, dtype=np.uint8)
    pixel = np.empty(bpp, dtype=np.float32)
    for k in range(src_h):
        get_row(raster, src, k, src_span, src_w * bpp)
        for i in range(dst_w):
            for b in range(bpp):
                pixel[b] = 0.0
            for j in range(offsets[i], offsets[i + 1]):
                p = pixels[j]
                w = weights[j]
                for b in range(bpp):
                    pixel[b] += np.float32(raster[p + b]) * w
            put_pixel(dst, i, k, dst_span, bpp, pixel)


@njit(cache=True)
def _zoom_columns(
    src: np.ndarray,
    src_h: int,
    src_span: int,
    dst: np.ndarray,
    dst_w: int,
    dst_h: int,
    dst_span: int,
    bpp: int,
    offsets: np.ndarray,
    pixels: np.ndarray,
    weights: np.ndarray,
) -> None:
    raster = np.empty(src_h * bpp, dtype=np.uint8)
    pixel = np.empty(bpp, dtype=np.float32)
    for k in range(dst_w):
        get_column(raster, src, k, src_h, src_span, bpp)
        for i in range(dst_h):
            for b in range(bpp):
                pixel[b] = 0.0
            for j in range(offsets[i], offsets[i + 1]):
                p = pixels[j]
                w = weights[j]
                for b in range(bpp):
                    pixel[b] += np.float32(raster[p + b]) * w
            put_pixel(dst, k, i, dst_span, bpp, pixel)


def zoom(dst: Image, src: Image, filt: Filter) -> Image:
    """Resample ``src`` into ``dst`` with kernel ``filt``.

    Parameters
    ----------
    dst : Image
        Destination; its width and height select the output size. Must be
        writable and have the same channel count as ``src``.
    src : Image
        Source image, only read.
    filt : Filter
        Kernel used on both axes.

    Returns
    -------
    Image
        ``dst``, filled.
    """
    if dst.channels != src.channels:
        raise InvalidDimensions(
            f"channel mismatch: source has {src.channels}, destination {dst.channels}"
        )
    if not dst.data.flags.writeable:
        raise ValueError("destination buffer is read-only")
    bpp = src.channels

    tmp = Image.allocate(dst.width, src.height, bpp)
    logger.debug(
        "zoom %dx%d -> %dx%d x%d via %s",
        src.width,
        src.height,
        dst.width,
        dst.height,
        bpp,
        filt.name,
    )

    table = build_contributions(src.width, tmp.width, filt, bpp)
    _zoom_rows(
        src.data,
        src.width,
        src.height,
        src.row_stride,
        tmp.data,
        tmp.width,
        tmp.row_stride,
        bpp,
        table.offsets,
        table.pixels,
        table.weights,
    )

    table = build_contributions(tmp.height, dst.height, filt, bpp)
    _zoom_columns(
        tmp.data,
        tmp.height,
        tmp.row_stride,
        dst.data,
        dst.width,
        dst.height,
        dst.row_stride,
        bpp,
        table.offsets,
        table.pixels,
        table.weights,
    )
    return dst


__all__ = ["zoom"]
