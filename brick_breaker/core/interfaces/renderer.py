"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from brick_breaker.core.menu import Menu
    from brick_breaker.core.state import GameState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The core only hands over authoritative positions, sizes and brick
    statuses; how they are drawn is up to the backend.
    """

    def render_game(self, state: "GameState") -> None:
        """
        Render a frame of the level being played.

        Args:
            state: Game state with paddle, ball and live bricks
        """
        ...

    def render_menu(self, menu: "Menu", fullscreen: bool) -> None:
        """
        Render a frame of the main menu.

        Args:
            menu: Menu with its current focus and layout
            fullscreen: Whether the fullscreen toggle is checked
        """
        ...

    def set_fullscreen(self, fullscreen: bool, size: tuple[int, int]) -> None:
        """Switch between fullscreen and a window of the given size"""
        ...

    def resize(self, size: tuple[int, int]) -> None:
        """Follow a window resize"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
