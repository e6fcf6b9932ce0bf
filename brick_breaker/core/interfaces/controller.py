"""
Controller protocol - the input snapshot read by the simulation and the menu
"""

from typing import Protocol


class ControllerProtocol(Protocol):
    """
    Read-only view of the controller consumed every tick.

    Anything exposing these queries can drive the game: the keyboard
    Controller, a scripted test double, a replay, etc.
    """

    def dir(self) -> float:
        """
        Horizontal direction of the held movement input.

        Returns:
            right value minus left value, in [-1, 1]
        """
        ...

    def fire_just_pressed(self) -> bool:
        """True on the tick the fire input went down"""
        ...

    def back_just_pressed(self) -> bool:
        """True on the tick the back input went down"""
        ...

    def up_just_pressed(self) -> bool:
        """True on the tick the up input went down"""
        ...

    def down_just_pressed(self) -> bool:
        """True on the tick the down input went down"""
        ...
