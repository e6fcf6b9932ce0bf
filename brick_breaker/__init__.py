"""
Brick Breaker: paddle-and-ball brick-breaking arcade game
"""

__version__ = "0.1.0"
