"""Image view over a flat byte buffer.

An :class:`Image` never copies pixel data. ``Image.wrap`` aliases memory the
caller owns (the source of a resize), ``Image.allocate`` creates a fresh,
uninitialised buffer (intermediate and destination images).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import AllocationFailure, InvalidDimensions
from .pixels import get_column, get_row, put_pixel

Array = np.ndarray


def check_dimensions(**dims: int) -> None:
    """Raise InvalidDimensions unless every keyword value is a positive integer."""
    for name, value in dims.items():
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidDimensions(f"{name} must be > 0, got {value}")


def _as_byte_array(buffer) -> Array:
    """Return a flat uint8 view of ``buffer`` without copying."""
    if isinstance(buffer, np.ndarray):
        if buffer.dtype != np.uint8:
            raise TypeError("buffer must have dtype=uint8")
        if not buffer.flags.c_contiguous:
            raise TypeError("buffer must be C-contiguous")
        return buffer.reshape(-1)
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return np.frombuffer(buffer, dtype=np.uint8)
    raise TypeError("buffer must be bytes, bytearray, memoryview or a uint8 NumPy array")


@dataclass
class Image:
    """A ``width x height`` raster with ``channels`` bytes per pixel.

    Attributes
    ----------
    data : np.ndarray
        Flat uint8 buffer, at least ``row_stride * height`` bytes long.
    width, height : int
        Size in pixels.
    channels : int
        Bytes per pixel (1 gray, 3 RGB, 4 RGBA, or any other count).
    row_stride : int
        Byte offset between two scanlines, ``>= width * channels``.
    """

    data: Array
    width: int
    height: int
    channels: int
    row_stride: int

    @classmethod
    def wrap(
        cls,
        buffer,
        width: int,
        height: int,
        channels: int,
        row_stride: Optional[int] = None,
    ) -> "Image":
        """Alias caller memory as an image. Nothing is copied."""
        check_dimensions(width=width, height=height, channels=channels)
        # Python ints from here on: NumPy scalars would wrap in the products
        width, height, channels = int(width), int(height), int(channels)
        if row_stride is None:
            row_stride = width * channels
        else:
            check_dimensions(row_stride=row_stride)
            row_stride = int(row_stride)
        if row_stride < width * channels:
            raise InvalidDimensions(
                f"row_stride {row_stride} is smaller than a row ({width * channels} bytes)"
            )
        data = _as_byte_array(buffer)
        needed = row_stride * height
        if data.size < needed:
            raise InvalidDimensions(
                f"buffer holds {data.size} bytes, {width}x{height}x{channels} needs {needed}"
            )
        return cls(data, width, height, channels, row_stride)

    @classmethod
    def allocate(cls, width: int, height: int, channels: int) -> "Image":
        """Create an image owning a fresh, uninitialised, unpadded buffer."""
        check_dimensions(width=width, height=height, channels=channels)
        width, height, channels = int(width), int(height), int(channels)
        span = width * channels
        try:
            data = np.empty(span * height, dtype=np.uint8)
        except (MemoryError, ValueError, OverflowError) as exc:
            raise AllocationFailure(
                f"cannot allocate {width}x{height}x{channels} image"
            ) from exc
        return cls(data, width, height, channels, span)

    @classmethod
    def from_array(cls, arr: Array) -> "Image":
        """Alias a contiguous ``(H, W)`` or ``(H, W, C)`` uint8 array."""
        if not isinstance(arr, np.ndarray):
            raise TypeError("arr must be a NumPy array")
        if arr.ndim == 2:
            h, w = arr.shape
            c = 1
        elif arr.ndim == 3:
            h, w, c = arr.shape
        else:
            raise ValueError("arr must have shape (H, W) or (H, W, C)")
        return cls.wrap(np.ascontiguousarray(arr), w, h, c)

    def to_array(self) -> Array:
        """Return an ``(H, W, C)`` view of the pixel data (padding dropped)."""
        span = self.width * self.channels
        rows = self.data[: self.row_stride * self.height]
        rows = rows.reshape(self.height, self.row_stride)[:, :span]
        return rows.reshape(self.height, self.width, self.channels)

    def read_row(self, y: int) -> Array:
        """Copy of scanline ``y`` (``width * channels`` bytes)."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside 0..{self.height - 1}")
        row = np.empty(self.width * self.channels, dtype=np.uint8)
        get_row(row, self.data, y, self.row_stride, row.size)
        return row

    def read_column(self, x: int) -> Array:
        """Copy of column ``x`` (``height`` pixels of ``channels`` bytes)."""
        if not 0 <= x < self.width:
            raise IndexError(f"column {x} outside 0..{self.width - 1}")
        column = np.empty(self.height * self.channels, dtype=np.uint8)
        get_column(column, self.data, x, self.height, self.row_stride, self.channels)
        return column

    def write_pixel(self, x: int, y: int, values) -> None:
        """Store one pixel, clamping each channel to [0, 255] first."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        if not self.data.flags.writeable:
            raise ValueError("image buffer is read-only")
        values = np.asarray(values, dtype=np.float32).reshape(-1)
        if values.size != self.channels:
            raise ValueError(f"expected {self.channels} channel values, got {values.size}")
        put_pixel(self.data, x, y, self.row_stride, self.channels, values)


__all__ = ["Image", "check_dimensions"]
