"""
PyGame renderer for Brick Breaker game
"""

import pygame

from brick_breaker.core.entities import Body
from brick_breaker.core.entities import Vector2D
from brick_breaker.core.menu import Focus
from brick_breaker.core.menu import Menu
from brick_breaker.core.state import GameState
from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config

# Captions for menu sprites, keyed by sprite name without the "_alt" suffix
MENU_LABELS = {
    "title": "BRICK BREAKER",
    "start_button": "Start",
    "exit_button": "Exit",
    "fullscreen": "Fullscreen",
    "check_box": "[x]",
}
UNCHECKED_LABEL = "[ ]"


class Camera:
    """Maps world units (y up) to screen pixels (y down), keeping the aspect ratio"""

    def __init__(self, world_size: Vector2D, screen_size: tuple[int, int]):
        self.world_size = world_size.copy()
        self.resize(screen_size)

    def resize(self, screen_size: tuple[int, int]) -> None:
        width, height = screen_size
        self.scale = min(width / self.world_size.x, height / self.world_size.y)
        self.offset_x = (width - self.world_size.x * self.scale) / 2
        self.offset_y = (height - self.world_size.y * self.scale) / 2

    def to_screen(self, pos: Vector2D, size: Vector2D) -> pygame.Rect:
        """Screen rectangle of a world rectangle given by its bottom-left corner"""
        x = self.offset_x + pos.x * self.scale
        y = self.offset_y + (self.world_size.y - pos.y - size.y) * self.scale
        width = round(size.x * self.scale)
        height = round(size.y * self.scale)
        return pygame.Rect(round(x), round(y), width, height)

    def body_rect(self, body: Body) -> pygame.Rect:
        return self.to_screen(body.pos, body.size)


class PygameRenderer:
    """PyGame-based renderer for Brick Breaker"""

    def __init__(
        self,
        world_size: Vector2D,
        width: int = 800,
        height: int = 600,
        fullscreen: bool = False,
        config: GameConfig | None = None,
    ):
        """Initialize the PyGame renderer"""
        self.config = config or game_config

        pygame.init()
        pygame.display.set_caption("Brick Breaker")
        self.screen = self._create_display(fullscreen, (width, height))
        self.camera = Camera(world_size, self.screen.get_size())

        self.background_color = self.config.BACKGROUND_COLOR
        self.paddle_color = self.config.PADDLE_COLOR
        self.ball_color = self.config.BALL_COLOR
        self.brick_colors = self.config.BRICK_COLORS
        self.menu_color = self.config.MENU_COLOR
        self.menu_focus_color = self.config.MENU_FOCUS_COLOR
        self.text_color: tuple[int, int, int] = (255, 255, 255)

        self.font = pygame.font.Font(None, 36)

    def _create_display(self, fullscreen: bool, size: tuple[int, int]) -> pygame.Surface:
        if fullscreen:
            return pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        return pygame.display.set_mode(size, pygame.RESIZABLE)

    def set_fullscreen(self, fullscreen: bool, size: tuple[int, int]) -> None:
        """Switch between fullscreen and a window of the given size"""
        self.screen = self._create_display(fullscreen, size)
        self.camera.resize(self.screen.get_size())

    def resize(self, size: tuple[int, int]) -> None:
        """Follow a window resize"""
        self.camera.resize(size)

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def brick_color(self, status: int) -> tuple[int, int, int]:
        """Brick color for a remaining status, the last color for anything above"""
        index = max(0, min(status, len(self.brick_colors)) - 1)
        return self.brick_colors[index]

    def draw_bricks(self, state: GameState) -> None:
        for body, status in state.live_bricks():
            rect = self.camera.body_rect(body)
            pygame.draw.rect(self.screen, self.brick_color(status), rect)
            pygame.draw.rect(self.screen, self.background_color, rect, 1)

    def draw_paddle(self, state: GameState) -> None:
        pygame.draw.rect(self.screen, self.paddle_color, self.camera.body_rect(state.player.body))

    def draw_ball(self, state: GameState) -> None:
        pygame.draw.rect(self.screen, self.ball_color, self.camera.body_rect(state.ball.body))

    def render_game(self, state: GameState) -> None:
        """Render a frame of the level being played"""
        self.clear_screen()
        self.draw_bricks(state)
        self.draw_paddle(state)
        self.draw_ball(state)
        pygame.display.flip()

    def render_menu(self, menu: Menu, fullscreen: bool) -> None:
        """Render the main menu from its layout"""
        self.clear_screen()

        for sprite in menu.layout(fullscreen):
            rect = self.camera.to_screen(sprite.pos, sprite.size)
            focused = not sprite.name.endswith("_alt") and sprite.name != "title"
            if sprite.name.startswith("check_box"):
                focused = menu.focus == Focus.FULLSCREEN
            color = self.menu_focus_color if focused else self.menu_color
            pygame.draw.rect(self.screen, color, rect, 2)

            label = self._menu_label(sprite.name)
            text_surface = self.font.render(label, True, self.text_color)
            text_rect = text_surface.get_rect()
            text_rect.center = rect.center
            self.screen.blit(text_surface, text_rect)

        pygame.display.flip()

    def _menu_label(self, sprite_name: str) -> str:
        if sprite_name == "check_box_alt":
            return UNCHECKED_LABEL
        return MENU_LABELS.get(sprite_name.removesuffix("_alt"), sprite_name)

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
