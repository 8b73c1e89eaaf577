"""Frame timing: delta time, application time and frames per second."""

from __future__ import annotations

import time
from typing import Callable

MAX_DELTA = 0.1


class FrameClock:
    """Tracks per-frame delta time (capped) and a once-a-second FPS count."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._curr = 0.0
        self._prev = 0.0
        self._delta = 0.0
        self._frames = 0
        self._fps_interval = 0.0
        self._fps = 0

    def start(self) -> None:
        """Reset timing, taking the current clock reading as the start."""
        self._prev = float(self._clock())
        self._curr = 0.0
        self._delta = 0.0
        self._frames = 0
        self._fps_interval = 0.0

    def tick(self, iconified: bool = False) -> bool:
        """Advance one frame; returns False (counting no frame) when iconified."""
        self._curr = float(self._clock())
        self._delta = min(self._curr - self._prev, MAX_DELTA)
        self._prev = self._curr

        if iconified:
            return False

        self._frames += 1
        self._fps_interval += self._delta
        if self._fps_interval >= 1.0:
            self._fps = self._frames
            self._frames = 0
            self._fps_interval -= 1.0
        return True

    @property
    def delta_time(self) -> float:
        return self._delta

    @property
    def app_time(self) -> float:
        return self._curr

    @property
    def fps(self) -> int:
        return self._fps