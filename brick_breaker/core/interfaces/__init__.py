"""
Core interfaces and protocols for Brick Breaker

The simulation reads a controller snapshot and hands its state to a
renderer; both sides are described here as protocols.
"""

from brick_breaker.core.interfaces.controller import ControllerProtocol
from brick_breaker.core.interfaces.renderer import RendererProtocol

__all__ = ["ControllerProtocol", "RendererProtocol"]
