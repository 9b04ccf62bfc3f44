"""Frame timer measuring elapsed milliseconds between updates."""

from __future__ import annotations

import time
from typing import Callable


class GameTimer:
    """Tracks the time between successive calls to :meth:`update`."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last = clock()
        self.delta_time = 0.0

    def update(self) -> float:
        """Return the milliseconds elapsed since the previous update."""
        now = self._clock()
        self.delta_time = (now - self._last) * 1000.0
        self._last = now
        return self.delta_time