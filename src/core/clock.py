"""Frame clock: turns pygame's millisecond ticks into a bounded per-frame dt.

Pacing (sleeping between frames) is the engine's job; this only measures.
"""

from __future__ import annotations

from typing import Optional

import pygame

from config import MAX_FRAME_DT


class FrameClock:
    def __init__(self, clock: Optional[object] = None, *, max_dt: float = MAX_FRAME_DT) -> None:
        # Anything with tick() -> ms and get_fps(); pygame.time.Clock by default
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.max_dt = float(max_dt)
        # Unclamped delta of the most recent tick (seconds)
        self.raw_dt = 0.0

    def tick(self) -> float:
        """Return seconds since the previous tick, clamped to [0, max_dt].

        The clamp keeps one oversized step (window drag, debugger pause) from
        jumping past several collapse/expiry thresholds at once.
        """
        self.raw_dt = self.clock.tick() / 1000.0
        return max(0.0, min(self.max_dt, self.raw_dt))

    def get_fps(self) -> float:
        return float(self.clock.get_fps())


__all__ = ["FrameClock"]
