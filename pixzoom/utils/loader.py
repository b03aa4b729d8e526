"""Image loading and saving utilities using Pillow, with NumPy arrays.

Resampling itself works on NumPy arrays only. These helpers convert between
Pillow images and ``(H, W, C)`` uint8 arrays for the command-line tool.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image


Array = np.ndarray

# Pillow modes kept as-is; everything else is converted
_KEEP_MODES = {"L": 1, "RGB": 3, "RGBA": 4}


def load_image(path: Union[str, Path]) -> Array:
    """Load an image file into an (H, W, C) NumPy array (uint8).

    Grayscale, RGB and RGBA images keep their channel count. Palette images
    and other modes become RGBA when they carry transparency, RGB otherwise.

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Returns
    -------
    np.ndarray
        Array of shape (H, W, C), dtype=uint8, C in {1, 3, 4}.
    """
    p = Path(path)
    with Image.open(p) as im:
        if im.mode not in _KEEP_MODES:
            has_alpha = "A" in im.getbands() or "transparency" in im.info
            im = im.convert("RGBA" if has_alpha else "RGB")
        arr = np.array(im, dtype=np.uint8)
    if arr.ndim == 2:
        arr = arr[:, :, None]
    return arr


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save a uint8 NumPy image to a file via Pillow.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W) or (H, W, C) with C in {1, 3, 4}, dtype=uint8.
    path : str | Path
        Output file path. The format is inferred from the extension.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim == 3 and arr.shape[2] == 1:
        arr = arr[:, :, 0]
    if not (arr.ndim == 2 or (arr.ndim == 3 and arr.shape[2] in (3, 4))):
        raise ValueError("arr must have shape (H, W) or (H, W, C) with C in {1, 3, 4}")

    p = Path(path)
    im = Image.fromarray(np.ascontiguousarray(arr))
    im.save(p)
