"""Filter record shared by all kernel modules."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

Array = np.ndarray


@dataclass(frozen=True)
class Filter:
    """A resampling kernel and the distance beyond which it is zero.

    Parameters
    ----------
    name : str
        Registry name, e.g. ``"bell"``.
    support : float
        Half-width of the kernel in source samples.
    func : callable
        Vectorised kernel ``func(t) -> weights`` over float32 distances.
    """

    name: str
    support: float
    func: Callable[[Array], Array]

    def weight(self, t) -> Array:
        """Evaluate the kernel at ``t`` (scalar or array), as float32."""
        t = np.asarray(t, dtype=np.float32)
        return np.asarray(self.func(t), dtype=np.float32)


__all__ = ["Filter"]
