"""
GUI module for Brick Breaker - PyGame interface
"""

from brick_breaker.gui.game_app import BrickBreakerApp, main
from brick_breaker.gui.pygame_renderer import PygameRenderer
from brick_breaker.gui.sound import SoundSystem

__all__ = [
    "PygameRenderer",
    "SoundSystem",
    "BrickBreakerApp",
    "main",
]
