"""Random sampling that accepts a set percentage of events."""

from __future__ import annotations

import random
import threading

_RANGE = 100000


class Sampler:
    """Accepts roughly ``pct`` percent of calls; thread safe."""

    def __init__(self, accept_pct: float, seed: int | None = None):
        self.pct = accept_pct
        self._threshold = int(accept_pct * 1000.0)
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def _draw(self) -> int:
        with self._lock:
            return self._random.randrange(_RANGE)

    def accept(self) -> bool:
        """Return True with a probability of ``pct`` percent."""
        return self._draw() < self._threshold

    def accept_with_threshold(self, threshold: float) -> bool:
        """Return True with a probability of ``threshold`` percent, ignoring ``pct``."""
        return self._draw() < int(threshold * 1000.0)