"""Utility functions for pixzoom.

Modules:
- loader: Load/save Pillow <-> NumPy conversion utilities.
- resize: Nearest-neighbor resizing for any channel count.
"""
from .loader import load_image, save_image
from .resize import resize_nearest, resize_nearest_scale

__all__ = [
    "load_image",
    "save_image",
    "resize_nearest",
    "resize_nearest_scale",
]
