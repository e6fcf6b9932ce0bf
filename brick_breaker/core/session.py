"""
Game session: routes each tick to the menu or to the simulation
"""

import logging
from dataclasses import dataclass

from brick_breaker.core.input import Controller
from brick_breaker.core.menu import Menu
from brick_breaker.core.menu import MenuMessage
from brick_breaker.core.physics import GameMessage
from brick_breaker.core.physics import MovementSystem
from brick_breaker.core.state import GameState

logger = logging.getLogger(__name__)

Message = GameMessage | MenuMessage


@dataclass
class MenuMode:
    """The menu has the controller"""

    menu: Menu


@dataclass
class PlayingMode:
    """A level is being played"""

    state: GameState


class Session:
    """Explicit context owned by the host loop and ticked once per frame"""

    def __init__(
        self,
        state: GameState,
        menu: Menu,
        movement: MovementSystem,
        grid: tuple[int, int],
    ):
        self.state = state
        self.menu = menu
        self.movement = movement
        self.grid = grid
        self.mode: MenuMode | PlayingMode = MenuMode(menu)

    @property
    def is_playing(self) -> bool:
        return isinstance(self.mode, PlayingMode)

    def start_level(self) -> None:
        """Lays out a fresh level and hands the controller to the simulation"""
        num_x, num_y = self.grid
        self.state.setup(num_x, num_y)
        self.mode = PlayingMode(self.state)
        logger.debug("Level started with a %dx%d grid", num_x, num_y)

    def back_to_menu(self) -> None:
        self.mode = MenuMode(self.menu)
        logger.debug("Back to menu")

    def tick(self, controller: Controller, dt: float) -> list[Message]:
        """
        Runs one fixed time step

        Args:
            controller: Input state, its edges are cleared before returning
            dt: Time step in seconds

        Returns:
            Messages produced during the tick, in emission order
        """
        messages: list[Message] = []

        if isinstance(self.mode, MenuMode):
            menu_messages: list[MenuMessage] = []
            self.mode.menu.input(controller, menu_messages)
            messages.extend(menu_messages)
            if MenuMessage.START in menu_messages:
                self.start_level()
        elif controller.back_just_pressed():
            self.back_to_menu()
        else:
            game_messages: list[GameMessage] = []
            self.movement.input(controller)
            self.movement.update(self.mode.state, dt, game_messages)
            messages.extend(game_messages)
            if GameMessage.WIN in game_messages:
                logger.info("Level cleared")
                self.back_to_menu()

        controller.clear_edges()
        return messages
