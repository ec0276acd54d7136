"""Frame timing utilities."""
from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass
class FrameClock:
    target_fps: int
    max_dt: float = 0.1

    def __post_init__(self) -> None:
        self._clock = pygame.time.Clock()

    def tick(self) -> float:
        # A dragged or stalled window must not become one huge simulation step.
        return min(self._clock.tick(self.target_fps) / 1000.0, self.max_dt)

    @property
    def fps(self) -> float:
        return self._clock.get_fps()
