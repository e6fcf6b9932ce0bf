"""
Edge-triggered input for Brick Breaker

Raw key and button events are folded into a handful of named axes. Each
axis keeps its held value plus a "just pressed" edge that stays raised
until the owner of the tick clears it.
"""

from dataclasses import dataclass

import pygame

from brick_breaker.utils.config import BACK_KEYS
from brick_breaker.utils.config import FIRE_BUTTONS
from brick_breaker.utils.config import FIRE_KEYS
from brick_breaker.utils.config import KeyboardLayout
from brick_breaker.utils.config import game_config

AXIS_NAMES = ("left", "right", "up", "down", "fire", "back")


@dataclass(frozen=True)
class KeyboardInput:
    """A key went down or up"""

    key: int
    pressed: bool


@dataclass(frozen=True)
class DeviceButton:
    """A gamepad/joystick button went down or up"""

    button: int
    pressed: bool


Input = KeyboardInput | DeviceButton


def input_from_pygame(event: pygame.event.Event) -> Input | None:
    """Translates a pygame event, returns None for events the controller ignores"""
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        return KeyboardInput(event.key, event.type == pygame.KEYDOWN)
    if event.type in (pygame.JOYBUTTONDOWN, pygame.JOYBUTTONUP):
        return DeviceButton(event.button, event.type == pygame.JOYBUTTONDOWN)
    return None


@dataclass
class Axis:
    """One logical input: a 0..1 value and a just-pressed edge"""

    value: float = 0.0
    new_input: bool = False

    def set(self, value: float) -> None:
        if value > 0.0 and self.value <= 0.0:
            self.new_input = True
        self.value = value

    def set_digital(self, pressed: bool) -> None:
        self.set(1.0 if pressed else 0.0)

    def press(self) -> None:
        self.set(1.0)

    def release(self) -> None:
        self.set(0.0)


def default_key_bindings(layout: KeyboardLayout | None = None) -> dict[int, str]:
    """Key code -> axis name for a keyboard layout (current config by default)"""
    if layout is None:
        layout = game_config.get_keyboard_layout()

    bindings: dict[int, str] = {}
    for axis_name, key in layout.arrow_keys.items():
        bindings[key] = axis_name
    for axis_name, key in layout.movement_keys.items():
        bindings[key] = axis_name
    for key in FIRE_KEYS:
        bindings[key] = "fire"
    for key in BACK_KEYS:
        bindings[key] = "back"
    return bindings


class Controller:
    """Logical controller state, mutated in place by raw input events"""

    def __init__(
        self,
        key_bindings: dict[int, str] | None = None,
        button_bindings: dict[int, str] | None = None,
    ):
        self.left = Axis()
        self.right = Axis()
        self.up = Axis()
        self.down = Axis()
        self.fire_axis = Axis()
        self.back = Axis()

        self.key_bindings = key_bindings if key_bindings is not None else default_key_bindings()
        if button_bindings is None:
            button_bindings = {button: "fire" for button in FIRE_BUTTONS}
        self.button_bindings = button_bindings

        for name in list(self.key_bindings.values()) + list(self.button_bindings.values()):
            if name not in AXIS_NAMES:
                raise ValueError(f"Unknown axis '{name}'. Available: {list(AXIS_NAMES)}")

    def axis(self, name: str) -> Axis:
        """Returns the axis with the given logical name"""
        if name == "fire":
            return self.fire_axis
        return getattr(self, name)  # type: ignore[no-any-return]

    def input(self, event: Input) -> None:
        """Updates the axis bound to the event, unbound keys/buttons are ignored"""
        if isinstance(event, KeyboardInput):
            name = self.key_bindings.get(event.key)
        else:
            name = self.button_bindings.get(event.button)

        if name is not None:
            self.axis(name).set_digital(event.pressed)

    def reset(self) -> None:
        """Clears the fire, back, left and right edges, axis values are kept"""
        self.left.new_input = False
        self.right.new_input = False
        self.fire_axis.new_input = False
        self.back.new_input = False

    def clear_edges(self) -> None:
        """Clears every edge, called once per tick boundary"""
        for name in AXIS_NAMES:
            self.axis(name).new_input = False

    def dir(self) -> float:
        return self.right.value - self.left.value

    def fire(self) -> float:
        return self.fire_axis.value

    def fire_just_pressed(self) -> bool:
        return self.fire_axis.new_input

    def back_just_pressed(self) -> bool:
        return self.back.new_input

    def up_just_pressed(self) -> bool:
        return self.up.new_input

    def down_just_pressed(self) -> bool:
        return self.down.new_input
