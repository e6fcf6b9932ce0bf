"""
Brick Breaker game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    movement_keys: dict[str, int]
    arrow_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
}

# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        movement_keys={
            "up": pygame.K_w,
            "down": pygame.K_s,
            "left": pygame.K_a,
            "right": pygame.K_d,
        },
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S", "left": "A", "right": "D"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        movement_keys={
            "up": pygame.K_z,  # Z instead of W
            "down": pygame.K_s,
            "left": pygame.K_q,  # Q instead of A
            "right": pygame.K_d,
        },
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "Z", "down": "S", "left": "Q", "right": "D"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        movement_keys={
            "up": pygame.K_w,
            "down": pygame.K_s,
            "left": pygame.K_a,
            "right": pygame.K_d,
        },
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S", "left": "A", "right": "D"},
    ),
}

# Keys shared by every layout
FIRE_KEYS = (pygame.K_SPACE, pygame.K_RETURN)
BACK_KEYS = (pygame.K_ESCAPE,)
FIRE_BUTTONS = (0,)


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Arena, in world units
    ARENA_WIDTH: float = Field(default=100.0, gt=0, description="Arena width in world units")
    ARENA_HEIGHT: float = Field(default=100.0, gt=0, description="Arena height in world units")

    # Entity sizes (fallbacks when the sprite atlas does not provide them)
    PADDLE_WIDTH: float = Field(default=10.0, gt=0, description="Paddle width")
    PADDLE_HEIGHT: float = Field(default=3.0, gt=0, description="Paddle height")
    BALL_SIZE: float = Field(default=2.0, gt=0, description="Ball side length")
    BRICK_WIDTH: float = Field(default=8.0, gt=0, description="Brick width")
    BRICK_HEIGHT: float = Field(default=4.0, gt=0, description="Brick height")

    # Level
    BRICK_COLUMNS: int = Field(default=12, gt=0, description="Bricks per row")
    BRICK_ROWS: int = Field(default=5, gt=0, description="Rows of bricks")

    # Gameplay
    PLAYER_SPEED: float = Field(default=10.0, gt=0, description="Paddle speed, ball uses half")
    FPS: int = Field(default=60, gt=0, description="Ticks per second")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(200, 200, 220), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    BRICK_COLORS: list[tuple[int, int, int]] = Field(
        default=[(120, 40, 40), (200, 90, 40), (220, 180, 50), (80, 180, 90)],
        min_length=1,
        description="Brick color by remaining status, lowest first",
    )
    MENU_COLOR: tuple[int, int, int] = Field(default=(90, 90, 110), description="RGB color")
    MENU_FOCUS_COLOR: tuple[int, int, int] = Field(default=(240, 200, 80), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_arena_dimensions(self) -> "GameConfig":
        """Validate the arena is large enough for the paddle and the brick grid"""
        if self.PADDLE_WIDTH >= self.ARENA_WIDTH:
            raise ValueError("PADDLE_WIDTH must be smaller than ARENA_WIDTH")

        if self.BRICK_COLUMNS * self.BRICK_WIDTH > self.ARENA_WIDTH:
            raise ValueError(
                f"{self.BRICK_COLUMNS} bricks of width {self.BRICK_WIDTH} "
                f"do not fit in ARENA_WIDTH {self.ARENA_WIDTH}"
            )

        # Leave room for the paddle and the resting ball under the bricks
        min_height = self.BRICK_ROWS * self.BRICK_HEIGHT + self.PADDLE_HEIGHT + self.BALL_SIZE + 1
        if self.ARENA_HEIGHT <= min_height:
            raise ValueError(f"ARENA_HEIGHT must be greater than {min_height}")

        return self

    @property
    def fixed_dt(self) -> float:
        """Fixed simulation time step in seconds"""
        return 1.0 / self.FPS

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "brick_breaker_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "brick_breaker_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


class Settings(BaseModel):
    """User settings kept between runs"""

    model_config = {"validate_assignment": True}

    fullscreen: bool = False
    width: int = Field(default=800, gt=0)
    height: int = Field(default=600, gt=0)

    @classmethod
    def load(cls, filepath: str = "settings.json") -> "Settings":
        """Load settings, falling back to defaults when missing or invalid"""
        path = Path(filepath)
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                return cls(**json.load(f))
        except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning("Ignoring invalid settings file %s: %s", filepath, e)
            return cls()

    def save(self, filepath: str = "settings.json") -> None:
        """Write settings as pretty-printed JSON"""
        with open(Path(filepath), "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, indent=2)


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "brick_breaker_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (ValidationError, ValueError, json.JSONDecodeError) as e:
        logger.error("Error loading config %s: %s", filepath, e)
        return False

    # Assign through a single validated copy so cross-field checks never see a half update
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
