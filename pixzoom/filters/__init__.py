"""Resampling kernels and a name-based lookup.

Exported API
------------
- get_filter(name) -> Filter
- available_filters() -> list of names
- FILTERS, DEFAULT_FILTER

Supported kernels
-----------------
- "hermite"  : cubic 2|t|^3 - 3|t|^2 + 1, support 1.0
- "box"      : box, support 0.5
- "triangle" : tent / linear, support 1.0
- "bell"     : quadratic B-spline, support 1.5 (default)
- "bspline"  : cubic B-spline, support 2.0
- "lanczos3" : windowed sinc, support 3.0
- "mitchell" : Mitchell-Netravali B = C = 1/3, support 2.0

Implementation notes
--------------------
Every kernel is a pure function over float32 distances with NumPy
broadcasting, so a whole contribution table is weighted in one call.
Kernels are symmetric and zero beyond their support; callers never rely on
values outside ``[-support, support]``.
"""
from __future__ import annotations

from .base import Filter
from .bell import BELL
from .box import BOX
from .bspline import BSPLINE
from .hermite import HERMITE
from .lanczos import LANCZOS3
from .mitchell import MITCHELL
from .triangle import TRIANGLE

FILTERS: dict[str, Filter] = {
    f.name: f for f in (HERMITE, BOX, TRIANGLE, BELL, BSPLINE, LANCZOS3, MITCHELL)
}

DEFAULT_FILTER = "bell"


def available_filters() -> list[str]:
    """Return the registered kernel names in registration order."""
    return list(FILTERS)


def get_filter(name: str | Filter) -> Filter:
    """Look up a kernel by name.

    Parameters
    ----------
    name : str | Filter
        Registered name (case-insensitive). A :class:`Filter` instance is
        returned unchanged, which lets callers pass custom kernels.

    Returns
    -------
    Filter
        The kernel record.
    """
    if isinstance(name, Filter):
        return name
    try:
        return FILTERS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown filter: {name}") from None


__all__ = [
    "Filter",
    "FILTERS",
    "DEFAULT_FILTER",
    "available_filters",
    "get_filter",
]
