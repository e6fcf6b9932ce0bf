"""
Sprite atlas lookup

Only sprite sizes are used by the game: they size the paddle, the ball,
the bricks and the menu items. The texture itself is left to the renderer.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel
from pydantic import Field

from brick_breaker.core.entities import Vector2D
from brick_breaker.utils.config import GameConfig

logger = logging.getLogger(__name__)

MENU_SPRITES = (
    "title",
    "start_button",
    "start_button_alt",
    "exit_button",
    "exit_button_alt",
    "fullscreen",
    "fullscreen_alt",
    "check_box",
    "check_box_alt",
)


class Sprite(BaseModel):
    """Region of the atlas texture"""

    min: tuple[float, float]
    size: tuple[float, float]

    def size_vector(self) -> Vector2D:
        return Vector2D(self.size[0], self.size[1])


class SpriteAtlas(BaseModel):
    """Texture atlas description loaded from JSON"""

    texture: str = ""
    sprites: dict[str, Sprite] = Field(default_factory=dict)

    @classmethod
    def load(cls, filepath: str) -> "SpriteAtlas":
        """Load an atlas description, raising FileNotFoundError when missing"""
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Sprite atlas not found: {filepath}")

        with open(path, encoding="utf-8") as f:
            atlas = cls(**json.load(f))

        logger.info("Loaded %d sprites from %s", len(atlas.sprites), filepath)
        return atlas

    def get_sprite(self, name: str) -> Sprite:
        """Returns a sprite, raising KeyError when the atlas lacks it"""
        try:
            return self.sprites[name]
        except KeyError:
            raise KeyError(f"Sprite '{name}' not found in atlas") from None

    def sprite_size(self, name: str, default: Vector2D) -> Vector2D:
        """Size of a sprite, or the default when the atlas does not define it"""
        sprite = self.sprites.get(name)
        if sprite is None:
            return default.copy()
        return sprite.size_vector()

    def entity_sizes(self, config: GameConfig) -> dict[str, Vector2D]:
        """Paddle, ball and brick sizes, falling back to the configured ones"""
        return {
            "player": self.sprite_size(
                "player", Vector2D(config.PADDLE_WIDTH, config.PADDLE_HEIGHT)
            ),
            "ball": self.sprite_size("ball", Vector2D(config.BALL_SIZE, config.BALL_SIZE)),
            "brick": self.sprite_size(
                "brick1", Vector2D(config.BRICK_WIDTH, config.BRICK_HEIGHT)
            ),
        }

    def menu_sizes(self) -> dict[str, Vector2D]:
        """Sizes of the menu sprites that the atlas defines"""
        return {
            name: self.sprites[name].size_vector() for name in MENU_SPRITES if name in self.sprites
        }
