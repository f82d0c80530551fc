"""Seeded uniform float source shared by scenery scatter and blast emission.

Wraps a numpy ``Generator`` so the whole scene draws from one stream. Pass a
``seed`` for reproducible runs; the default pulls entropy from the OS once at
construction and never reseeds.
"""

from __future__ import annotations

from typing import Optional

import numpy as np


class RandomSource:
    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, lo: float, hi: float) -> float:
        """Return a float in [lo, hi). Caller guarantees lo <= hi."""
        return float(self._rng.uniform(lo, hi))


__all__ = ["RandomSource"]
