"""Helpers for locating and loading asset files."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import numpy as np
import pygame

LEAF_SIZE_CLASSES = 18
LEAF_COLORS = [
    (196, 92, 38),
    (214, 148, 46),
    (168, 60, 32),
    (142, 118, 48),
]


def get_asset_path(*parts: str) -> Path:
    """Return a Path to an asset within the repository."""
    root = Path(__file__).resolve().parents[2]
    return root / "assets" / Path(*parts)


def leaf_image_name(size_class: int) -> str:
    # Slot 0 holds the last image on disk, slot 17 the first.
    return f"leaf{LEAF_SIZE_CLASSES - 1 - size_class}.png"


def make_placeholder_leaf(size_class: int) -> pygame.Surface:
    """
    Build a leaf-shaped RGBA surface for when no image is available.

    The ellipse grows with the size class so heavier leaves still look bigger.
    """
    width = 6 + size_class
    height = max(3, width // 2)
    ys = (np.arange(height, dtype=np.float32)[None, :] + 0.5 - height / 2) / (height / 2)
    xs = (np.arange(width, dtype=np.float32)[:, None] + 0.5 - width / 2) / (width / 2)
    mask = xs * xs + ys * ys <= 1.0

    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    rgb = np.zeros((width, height, 3), dtype=np.uint8)
    rgb[mask] = LEAF_COLORS[size_class % len(LEAF_COLORS)]
    pygame.surfarray.blit_array(surface, rgb)

    alpha = pygame.surfarray.pixels_alpha(surface)
    alpha[:] = np.where(mask, 255, 0).astype(np.uint8)
    del alpha  # Unlocks the surface
    return surface


def load_leaf_textures(directory: Optional[Path] = None) -> List[pygame.Surface]:
    """Return one surface per leaf size class, loading from disk where possible."""
    directory = directory or get_asset_path("images", "particles")
    textures: List[pygame.Surface] = []
    loaded = 0
    for size_class in range(LEAF_SIZE_CLASSES):
        path = directory / leaf_image_name(size_class)
        if path.exists():
            try:
                textures.append(pygame.image.load(str(path)))
                loaded += 1
                continue
            except pygame.error as e:
                print(f"Warning: Could not load leaf image {path}: {e}")
        textures.append(make_placeholder_leaf(size_class))

    print(f"Loaded {loaded} leaf images, generated {LEAF_SIZE_CLASSES - loaded} placeholders")
    return textures
