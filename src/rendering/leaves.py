"""Draws the leaf field with wrap-around across the virtual world."""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Tuple

import pygame

from physics.leaves import LeavesParticleSystem


def wrap_to_screen(
    position: Tuple[float, float],
    camera: Tuple[float, float],
    virtual_size: Tuple[float, float],
    screen_size: Tuple[float, float],
) -> Tuple[float, float]:
    """
    Map a world position onto the screen, tiling the virtual area.

    Leaves that fall off one edge reappear on the opposite one, so the field
    never runs dry even though no leaf is ever respawned.
    """
    wrapped = []
    for value, offset, virtual, screen in zip(position, camera, virtual_size, screen_size):
        coord = math.fmod(value - offset, virtual)
        if coord < 0:
            coord += virtual
        if coord > screen:
            coord -= virtual
        wrapped.append(coord)
    return wrapped[0], wrapped[1]


@dataclass
class LeavesRenderer:
    screen: pygame.Surface

    def draw(self, field: LeavesParticleSystem, camera: Tuple[float, float]) -> None:
        screen_size = self.screen.get_size()
        virtual_size = (field.virtual_width, field.virtual_height)
        for leaf in field.particles():
            if leaf.texture is None:
                continue
            x, y = wrap_to_screen(leaf.position, camera, virtual_size, screen_size)
            image = pygame.transform.rotate(leaf.texture, leaf.angle)
            self.screen.blit(image, image.get_rect(center=(int(x), int(y))))
