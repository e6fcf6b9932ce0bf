"""
Main menu focus state machine for Brick Breaker
"""

from dataclasses import dataclass
from enum import Enum

from brick_breaker.core.entities import Vector2D
from brick_breaker.core.interfaces.controller import ControllerProtocol

# Space around and between menu items
MENU_PADDING = 4.0

# Size used for a menu sprite missing from the atlas
DEFAULT_ITEM_SIZE = Vector2D(24.0, 6.0)


class Focus(Enum):
    """Selectable menu items, in navigation order"""

    START = "start"
    EXIT = "exit"
    FULLSCREEN = "fullscreen"

    def next(self) -> "Focus":
        items = list(Focus)
        return items[(items.index(self) + 1) % len(items)]

    def previous(self) -> "Focus":
        items = list(Focus)
        return items[(items.index(self) - 1) % len(items)]


class MenuMessage(Enum):
    """Requests emitted by the menu for the host loop"""

    START = "start"
    EXIT = "exit"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    FOCUS_CHANGED = "focus_changed"


_ACTIONS = {
    Focus.START: MenuMessage.START,
    Focus.EXIT: MenuMessage.EXIT,
    Focus.FULLSCREEN: MenuMessage.TOGGLE_FULLSCREEN,
}


@dataclass
class PlacedSprite:
    """A menu sprite at its layout position"""

    name: str
    pos: Vector2D
    size: Vector2D


class TopDownLayout:
    """Stacks items downward from a starting point"""

    def __init__(self, start: Vector2D, padding: float):
        self.cursor = start.copy()
        self.padding = padding

    def place(self, size: Vector2D) -> Vector2D:
        self.cursor.y -= size.y
        out = self.cursor.copy()
        self.cursor.y -= self.padding
        return out

    def place_with_offset(self, size: Vector2D, offset: Vector2D) -> Vector2D:
        return self.place(size) + offset

    def place_with_offset_x(self, size: Vector2D, offset_x: float) -> Vector2D:
        return self.place_with_offset(size, Vector2D(offset_x, 0.0))


class Menu:
    """Main menu: focus navigation plus the layout metadata used to draw it"""

    def __init__(self, item_sizes: dict[str, Vector2D], screen_size: Vector2D):
        self.focus = Focus.START
        self.item_sizes = item_sizes
        self.screen_size = screen_size.copy()

    def input(self, controller: ControllerProtocol, messages: list[MenuMessage]) -> None:
        """Moves the focus and emits the messages for this tick's input edges"""
        previous = self.focus

        if controller.down_just_pressed():
            self.focus = self.focus.next()
        if controller.up_just_pressed():
            self.focus = self.focus.previous()

        if self.focus != previous:
            messages.append(MenuMessage.FOCUS_CHANGED)

        if controller.fire_just_pressed():
            messages.append(_ACTIONS[self.focus])

    def size_of(self, name: str) -> Vector2D:
        return self.item_sizes.get(name, DEFAULT_ITEM_SIZE).copy()

    def _variant(self, name: str, focus: Focus) -> str:
        return name if self.focus == focus else f"{name}_alt"

    def layout(self, fullscreen: bool) -> list[PlacedSprite]:
        """Places the menu sprites: title and buttons top-down, fullscreen toggle bottom-left"""
        start = Vector2D(MENU_PADDING, self.screen_size.y - MENU_PADDING)
        layout = TopDownLayout(start, MENU_PADDING)
        placed = []

        title = self.size_of("title")
        placed.append(PlacedSprite("title", layout.place(title), title))

        for name, focus in (("start_button", Focus.START), ("exit_button", Focus.EXIT)):
            sprite = self._variant(name, focus)
            size = self.size_of(sprite)
            placed.append(
                PlacedSprite(sprite, layout.place_with_offset_x(size, MENU_PADDING), size)
            )

        label = self._variant("fullscreen", Focus.FULLSCREEN)
        label_size = self.size_of(label)
        placed.append(PlacedSprite(label, Vector2D(MENU_PADDING, MENU_PADDING), label_size))

        check = "check_box" if fullscreen else "check_box_alt"
        placed.append(
            PlacedSprite(
                check,
                Vector2D(MENU_PADDING * 2 + label_size.x, MENU_PADDING),
                self.size_of(check),
            )
        )

        return placed
