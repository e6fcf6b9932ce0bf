"""
Main game application with PyGame GUI
"""

import argparse
import logging

import pygame

from brick_breaker.core.entities import Vector2D
from brick_breaker.core.input import Controller
from brick_breaker.core.input import input_from_pygame
from brick_breaker.core.interfaces import RendererProtocol
from brick_breaker.core.menu import Menu
from brick_breaker.core.menu import MenuMessage
from brick_breaker.core.physics import MovementSystem
from brick_breaker.core.session import Message
from brick_breaker.core.session import Session
from brick_breaker.core.state import GameState
from brick_breaker.gui.pygame_renderer import PygameRenderer
from brick_breaker.gui.sound import SoundSystem
from brick_breaker.utils.atlas import SpriteAtlas
from brick_breaker.utils.config import Settings
from brick_breaker.utils.config import game_config
from brick_breaker.utils.config import load_config_from_file

logger = logging.getLogger(__name__)


def build_session(atlas: SpriteAtlas) -> Session:
    """Creates the state, menu and movement system from the config and the atlas sizes"""
    arena = Vector2D(game_config.ARENA_WIDTH, game_config.ARENA_HEIGHT)
    sizes = atlas.entity_sizes(game_config)

    state = GameState(arena, sizes["player"], sizes["ball"], sizes["brick"])
    menu = Menu(atlas.menu_sizes(), arena)
    movement = MovementSystem(game_config.PLAYER_SPEED)
    return Session(state, menu, movement, (game_config.BRICK_COLUMNS, game_config.BRICK_ROWS))


class BrickBreakerApp:
    """Host loop: feeds input to the session and reacts to its messages"""

    def __init__(
        self,
        atlas: SpriteAtlas,
        sounds: SoundSystem,
        settings: Settings,
        settings_path: str = "settings.json",
    ):
        self.settings = settings
        self.settings_path = settings_path
        self.session = build_session(atlas)
        self.controller = Controller()
        self.sounds = sounds
        self.renderer: RendererProtocol = PygameRenderer(
            self.session.state.arena_size,
            settings.width,
            settings.height,
            settings.fullscreen,
        )
        self.clock = pygame.time.Clock()
        self.running = True

        for i in range(pygame.joystick.get_count()):
            pygame.joystick.Joystick(i).init()

        logger.info("Brick Breaker initialized with settings %s", settings.model_dump())

    def toggle_fullscreen(self) -> None:
        self.settings.fullscreen = not self.settings.fullscreen
        self.renderer.set_fullscreen(
            self.settings.fullscreen, (self.settings.width, self.settings.height)
        )

    def handle_event(self, event: pygame.event.Event) -> None:
        """Window events are handled here, everything else goes to the controller"""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE and not self.settings.fullscreen:
            self.settings.width = event.w
            self.settings.height = event.h
            self.renderer.resize((event.w, event.h))
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
            self.toggle_fullscreen()
        else:
            raw = input_from_pygame(event)
            if raw is not None:
                self.controller.input(raw)

    def handle_message(self, message: Message) -> None:
        self.sounds.play_message(message)

        if message == MenuMessage.EXIT:
            self.running = False
        elif message == MenuMessage.TOGGLE_FULLSCREEN:
            self.toggle_fullscreen()

    def step(self) -> None:
        """One frame: input, one fixed tick, messages, render"""
        for event in pygame.event.get():
            self.handle_event(event)

        for message in self.session.tick(self.controller, game_config.fixed_dt):
            self.handle_message(message)

        if self.session.is_playing:
            self.renderer.render_game(self.session.state)
        else:
            self.renderer.render_menu(self.session.menu, self.settings.fullscreen)

    def run(self) -> None:
        try:
            while self.running:
                self.step()
                self.clock.tick(game_config.FPS)
        finally:
            self.settings.save(self.settings_path)
            self.renderer.cleanup()
            logger.info("Settings saved to %s", self.settings_path)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Brick Breaker")
    parser.add_argument("--config", default="brick_breaker_config.json", help="Game config file")
    parser.add_argument("--settings", default="settings.json", help="User settings file")
    parser.add_argument("--atlas", default="assets/atlas.json", help="Sprite atlas description")
    parser.add_argument("--sounds", default="assets/sounds.json", help="Sound banks description")
    parser.add_argument("--mute", action="store_true", help="Disable audio")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if load_config_from_file(args.config):
        logger.info("Loaded config from %s", args.config)

    try:
        atlas = SpriteAtlas.load(args.atlas)
    except FileNotFoundError:
        logger.warning("No sprite atlas at %s, using configured sizes", args.atlas)
        atlas = SpriteAtlas()

    sounds = SoundSystem.disabled()
    if not args.mute:
        try:
            sounds = SoundSystem.from_json(args.sounds)
        except FileNotFoundError:
            logger.warning("No sound description at %s, audio disabled", args.sounds)

    settings = Settings.load(args.settings)
    BrickBreakerApp(atlas, sounds, settings, args.settings).run()
