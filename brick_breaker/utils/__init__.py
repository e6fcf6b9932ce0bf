"""
Brick Breaker utility module
"""

from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import Settings
from brick_breaker.utils.config import game_config

__all__ = ["game_config", "GameConfig", "Settings"]
