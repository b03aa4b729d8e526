"""Filtered image rescaling on byte rasters.

Two-pass separable resampling (rows, then columns) through precomputed
per-axis contribution tables, with a choice of seven kernels.
"""
from __future__ import annotations

from .errors import AllocationFailure, InvalidDimensions, PixzoomError
from .filters import DEFAULT_FILTER, FILTERS, Filter, available_filters, get_filter
from .image import Image
from .resample import resize, resize_array, resize_array_scale
from .zoom import zoom

__all__ = [
    "resize",
    "resize_array",
    "resize_array_scale",
    "zoom",
    "Image",
    "Filter",
    "FILTERS",
    "DEFAULT_FILTER",
    "available_filters",
    "get_filter",
    "PixzoomError",
    "InvalidDimensions",
    "AllocationFailure",
]
