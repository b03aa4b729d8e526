"""Per-axis filter contribution tables.

For one axis and one scale factor, every destination sample gets the list of
``(source byte offset, weight)`` pairs that feed it. Tables are built fresh
for each axis of each resize and stored flat (CSR layout) so the compiled
passes in :mod:`pixzoom.zoom` can walk them without Python objects.

Window placement and weights are computed in float32. The ``ceil``/``floor``
of the window bounds follow single-precision rounding, and that decides
which samples take part at the ends of each window.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .filters import Filter

logger = logging.getLogger(__name__)

Array = np.ndarray


@dataclass(frozen=True)
class ContributionTable:
    """Contributions for ``len(table)`` destination samples.

    Entries of destination ``i`` are ``pixels[offsets[i]:offsets[i + 1]]``
    (byte offsets into one scanline or column) with the matching ``weights``.
    """

    offsets: Array
    pixels: Array
    weights: Array

    def __len__(self) -> int:
        return self.offsets.size - 1

    def counts(self) -> Array:
        """Number of entries per destination sample."""
        return np.diff(self.offsets)

    def entries(self, i: int) -> list[tuple[int, float]]:
        """Ordered ``(source_index, weight)`` pairs for destination ``i``."""
        s, e = self.offsets[i], self.offsets[i + 1]
        return list(zip(self.pixels[s:e].tolist(), self.weights[s:e].tolist()))

    def weight_sums(self) -> Array:
        """Sum of weights per destination sample (not renormalised)."""
        owner = np.repeat(np.arange(len(self)), self.counts())
        return np.bincount(owner, weights=self.weights, minlength=len(self))


def reflect_indices(j: Array, n: int) -> Array:
    """Fold sample indices back into ``[0, n)`` without repeating the edge.

    ``-1 -> 1``, ``-2 -> 2``, ``n -> n - 1``, ``n + 1 -> n - 2``. Indices
    that land outside again (kernels wider than the axis) are folded again
    until they are in range.
    """
    j = np.array(j, dtype=np.int64)
    while True:
        low = j < 0
        high = j >= n
        if not (low.any() or high.any()):
            return j
        j[low] = -j[low]
        j[high] = (n - j[high]) + n - 1


def build_contributions(
    source_length: int, dest_length: int, filt: Filter, channels: int = 1
) -> ContributionTable:
    """Build the contribution table for one axis.

    Parameters
    ----------
    source_length : int
        Number of samples along the source axis (>= 1).
    dest_length : int
        Number of samples along the destination axis (>= 1).
    filt : Filter
        Kernel and support.
    channels : int
        Bytes per pixel; stored offsets are sample index times this.

    Returns
    -------
    ContributionTable
        One entry list per destination sample. Zero weights are kept.
    """
    scale = np.float32(dest_length) / np.float32(source_length)
    center = np.arange(dest_length, dtype=np.float32) / scale

    if scale < 1.0:
        # Shrinking: stretch the kernel over 1/scale source samples and
        # scale it down by the same factor.
        width = np.float32(filt.support / scale)
        fscale = np.float32(1.0 / scale)
    else:
        width = np.float32(filt.support)
        fscale = np.float32(1.0)

    left = np.ceil(center - width).astype(np.int64)
    right = np.floor(center + width).astype(np.int64)
    counts = np.maximum(right - left + 1, 0)

    offsets = np.zeros(dest_length + 1, dtype=np.int64)
    np.cumsum(counts, out=offsets[1:])

    owner = np.repeat(np.arange(dest_length), counts)
    j = left[owner] + (np.arange(offsets[-1], dtype=np.int64) - offsets[owner])

    dist = center[owner] - j.astype(np.float32)
    if scale < 1.0:
        weights = filt.weight(dist / fscale) / fscale
    else:
        weights = filt.weight(dist)

    pixels = reflect_indices(j, source_length) * channels

    logger.debug(
        "contributions %d -> %d (%s): scale=%.4f width=%.3f entries=%d",
        source_length,
        dest_length,
        filt.name,
        scale,
        width,
        offsets[-1],
    )
    return ContributionTable(offsets, pixels, weights.astype(np.float32))


__all__ = ["ContributionTable", "build_contributions", "reflect_indices"]
