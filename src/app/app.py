"""Top-level application orchestration."""
from __future__ import annotations

from dataclasses import dataclass
import random
from typing import List

import pygame
import pymunk

from core.config import AppConfig
from physics.leaves import LeavesParticleSystem
from rendering.renderer import Renderer
from utils.assets import load_leaf_textures
from utils.clock import FrameClock


@dataclass
class LeavesApp:
    app_config: AppConfig

    def __post_init__(self) -> None:
        pygame.init()
        pygame.display.set_caption(self.app_config.window.title)

        flags = pygame.FULLSCREEN if self.app_config.window.fullscreen else 0
        self.screen = pygame.display.set_mode(self.app_config.window.size, flags)

        # The world space owns gravity; leaves read it every frame.
        self.space = pymunk.Space()
        self.space.gravity = (0, self.app_config.world.gravity)

        self.clock = FrameClock(target_fps=self.app_config.window.target_fps)
        self.camera_x = 0.0
        self.leaves = LeavesParticleSystem.from_config(
            config=self.app_config.leaves,
            viewport_size=self.screen.get_size(),
            rng=random.Random(self.app_config.world.seed),
            textures=load_leaf_textures(),
        )
        self.renderer = Renderer(config=self.app_config, screen=self.screen)
        print(f"Spawned {len(self.leaves.particles())} leaves")

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    if event.key == pygame.K_SPACE:
                        self.leaves.set_enabled(not self.leaves.enabled)

            self._scroll_camera(dt)
            self.space.step(dt)
            self.leaves.update(dt, self.space.gravity.y)

            self.renderer.draw(
                field=self.leaves,
                camera=(self.camera_x, 0.0),
                hud_lines=self._hud_lines(),
            )

            pygame.display.flip()

        pygame.quit()

    def _scroll_camera(self, dt: float) -> None:
        keys = pygame.key.get_pressed()
        direction = keys[pygame.K_RIGHT] - keys[pygame.K_LEFT]
        self.camera_x += direction * self.app_config.camera.scroll_speed * dt

    def _hud_lines(self) -> List[str]:
        wind = self.leaves.wind
        return [
            "SPACE: toggle leaves   LEFT/RIGHT: pan   ESC: quit",
            f"Wind: {wind.state.name:<10} {wind.gust_current_velocity: .2f}",
            f"Leaves {'on' if self.leaves.enabled else 'frozen'}   {self.clock.fps:.0f} fps",
        ]
