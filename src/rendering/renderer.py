"""Layered renderer for the leaf field and HUD."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import pygame

from core.config import AppConfig
from physics.leaves import LeavesParticleSystem
from rendering.leaves import LeavesRenderer


@dataclass
class Renderer:
    config: AppConfig
    screen: pygame.Surface

    def __post_init__(self) -> None:
        self.leaves = LeavesRenderer(screen=self.screen)
        self._font = pygame.font.SysFont("consolas", 18, bold=True)

    def draw(
        self,
        field: LeavesParticleSystem,
        camera: Tuple[float, float],
        hud_lines: Sequence[str] = (),
    ) -> None:
        self.screen.fill(self.config.window.background_color)
        self.leaves.draw(field, camera)
        self._draw_hud(hud_lines)

    def _draw_hud(self, hud_lines: Sequence[str]) -> None:
        for index, line in enumerate(hud_lines):
            surf = self._font.render(line, True, (240, 240, 240))
            self.screen.blit(surf, (18, 12 + index * 22))
