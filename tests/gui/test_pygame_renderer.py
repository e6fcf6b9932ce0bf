"""
Unit tests for the world to screen camera
"""

import pygame
import pytest

from brick_breaker.core.entities import Body, Vector2D
from brick_breaker.gui.pygame_renderer import Camera


@pytest.fixture
def camera():
    return Camera(Vector2D(100, 100), (800, 600))


class TestCamera:
    """Test scaling, letterboxing and the y flip"""

    def test_scale_keeps_aspect_ratio(self, camera):
        """Test the world fits the smaller screen dimension"""
        assert camera.scale == 6.0
        assert camera.offset_x == 100.0
        assert camera.offset_y == 0.0

    def test_bottom_left_maps_to_screen_bottom(self, camera):
        """Test y grows upward in the world and downward on screen"""
        rect = camera.to_screen(Vector2D(0, 0), Vector2D(10, 3))
        assert rect == pygame.Rect(100, 582, 60, 18)

    def test_top_right(self, camera):
        """Test the top right corner of the world"""
        rect = camera.body_rect(Body(Vector2D(98, 98), Vector2D(2, 2)))
        assert rect == pygame.Rect(688, 0, 12, 12)

    def test_resize(self, camera):
        """Test a taller window letterboxes vertically"""
        camera.resize((400, 800))

        assert camera.scale == 4.0
        assert camera.offset_x == 0.0
        assert camera.offset_y == 200.0
