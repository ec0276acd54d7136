"""
Rendering and asset tests

Tests:
- Screen wrap-around of world positions
- Placeholder leaf generation and palette loading
- Leaf drawing onto an offscreen surface
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import random
import tempfile
import unittest
from pathlib import Path

import numpy as np
import pygame

from physics.leaves import LeavesParticleSystem, LEAF_SIZE_CLASSES
from rendering.leaves import LeavesRenderer, wrap_to_screen
from utils.assets import leaf_image_name, load_leaf_textures, make_placeholder_leaf

VIRTUAL = (1600.0, 600.0)
SCREEN = (800.0, 600.0)


class TestWrapToScreen(unittest.TestCase):

    def test_inside_screen_unchanged(self):
        self.assertEqual(wrap_to_screen((100.0, 50.0), (0.0, 0.0), VIRTUAL, SCREEN), (100.0, 50.0))

    def test_wraps_past_virtual_width(self):
        self.assertEqual(wrap_to_screen((1700.0, 50.0), (0.0, 0.0), VIRTUAL, SCREEN), (100.0, 50.0))

    def test_offscreen_half_goes_negative(self):
        x, _ = wrap_to_screen((900.0, 50.0), (0.0, 0.0), VIRTUAL, SCREEN)
        self.assertEqual(x, -700.0)

    def test_negative_positions(self):
        self.assertEqual(wrap_to_screen((-10.0, -20.0), (0.0, 0.0), VIRTUAL, SCREEN), (-10.0, 580.0))

    def test_fallen_leaves_reappear_at_top(self):
        _, y = wrap_to_screen((0.0, 650.0), (0.0, 0.0), VIRTUAL, SCREEN)
        self.assertEqual(y, 50.0)

    def test_camera_offset(self):
        self.assertEqual(wrap_to_screen((50.0, 10.0), (100.0, 0.0), VIRTUAL, SCREEN), (-50.0, 10.0))


class TestLeafAssets(unittest.TestCase):

    def test_image_names_reversed(self):
        self.assertEqual(leaf_image_name(0), "leaf17.png")
        self.assertEqual(leaf_image_name(17), "leaf0.png")

    def test_placeholder_grows_with_class(self):
        small = make_placeholder_leaf(0)
        large = make_placeholder_leaf(17)
        self.assertEqual(small.get_size(), (6, 3))
        self.assertEqual(large.get_size(), (23, 11))

    def test_placeholder_is_ellipse(self):
        leaf = make_placeholder_leaf(10)
        width, height = leaf.get_size()
        self.assertEqual(leaf.get_at((width // 2, height // 2)).a, 255)
        self.assertEqual(leaf.get_at((0, 0)).a, 0)

    def test_palette_from_empty_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            textures = load_leaf_textures(Path(tmp))
        self.assertEqual(len(textures), LEAF_SIZE_CLASSES)

    def test_palette_prefers_disk_images(self):
        image = pygame.Surface((40, 20))
        image.fill((0, 200, 0))
        with tempfile.TemporaryDirectory() as tmp:
            pygame.image.save(image, str(Path(tmp) / "leaf17.png"))
            textures = load_leaf_textures(Path(tmp))
        self.assertEqual(textures[0].get_size(), (40, 20))
        self.assertEqual(textures[1].get_size(), make_placeholder_leaf(1).get_size())


class TestLeavesRenderer(unittest.TestCase):

    def setUp(self):
        self.screen = pygame.Surface((800, 600))

    def test_draws_leaves(self):
        red = pygame.Surface((4, 4))
        red.fill((255, 0, 0))
        field = LeavesParticleSystem.create(800, 600, random.Random(6), textures=[red] * LEAF_SIZE_CLASSES)
        LeavesRenderer(screen=self.screen).draw(field, (0.0, 0.0))
        pixels = pygame.surfarray.array3d(self.screen)
        self.assertTrue(np.any(pixels[:, :, 0] > 0))

    def test_placeholder_handles_skipped(self):
        field = LeavesParticleSystem.create(800, 600, random.Random(6))
        LeavesRenderer(screen=self.screen).draw(field, (0.0, 0.0))
        pixels = pygame.surfarray.array3d(self.screen)
        self.assertFalse(np.any(pixels))


if __name__ == '__main__':
    unittest.main()
