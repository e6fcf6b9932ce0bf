"""
Core module of Brick Breaker game
"""

from brick_breaker.core.entities import BRICK_STATUS
from brick_breaker.core.entities import Ball
from brick_breaker.core.entities import Body
from brick_breaker.core.entities import Brick
from brick_breaker.core.entities import Player
from brick_breaker.core.entities import Vector2D
from brick_breaker.core.state import GameState

__all__ = [
    "BRICK_STATUS",
    "Ball",
    "Body",
    "Brick",
    "Player",
    "GameState",
    "Vector2D",
]
