from __future__ import annotations

# Alias package: re-export public API from the existing implementation.
from pixzoom import resize, resize_array, resize_array_scale, zoom  # noqa: F401
from pixzoom.errors import AllocationFailure, InvalidDimensions  # noqa: F401
from pixzoom.filters import available_filters, get_filter  # noqa: F401
from pixzoom.utils.loader import load_image, save_image  # noqa: F401
from pixzoom.utils.resize import resize_nearest, resize_nearest_scale  # noqa: F401

__all__ = [
    "resize",
    "resize_array",
    "resize_array_scale",
    "zoom",
    "InvalidDimensions",
    "AllocationFailure",
    "available_filters",
    "get_filter",
    "load_image",
    "save_image",
    "resize_nearest",
    "resize_nearest_scale",
]
