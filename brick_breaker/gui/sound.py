"""
Sound effects for Brick Breaker

Each game or menu message is played from the sound bank of the same name,
picking one of the bank's files at random.
"""

import json
import logging
import random
from enum import Enum
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel

logger = logging.getLogger(__name__)

NUM_CHANNELS = 8


class SoundDef(BaseModel):
    """One bank in the sound description file"""

    files: list[str]


class SoundSystem:
    """Round-robin playback over a fixed set of mixer channels"""

    def __init__(
        self,
        banks: dict[str, list[Any]],
        channels: list[Any],
        rng: random.Random | None = None,
    ):
        self.banks = {name: sounds for name, sounds in banks.items() if sounds}
        self.channels = channels
        self.current_channel = 0
        self.rng = rng or random.Random()

    @property
    def enabled(self) -> bool:
        return bool(self.channels)

    @classmethod
    def disabled(cls) -> "SoundSystem":
        """A sound system that plays nothing"""
        return cls({}, [])

    @classmethod
    def from_json(cls, filepath: str) -> "SoundSystem":
        """
        Load the banks described in a JSON file

        The file maps bank names to {"files": [...]}. Audio is disabled, not
        fatal, when the mixer cannot start.
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Sound description not found: {filepath}")

        with open(path, encoding="utf-8") as f:
            defs = {name: SoundDef(**value) for name, value in json.load(f).items()}

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio disabled, mixer unavailable: %s", e)
            return cls.disabled()

        pygame.mixer.set_num_channels(NUM_CHANNELS)
        channels = [pygame.mixer.Channel(i) for i in range(NUM_CHANNELS)]
        banks = {name: cls._load_bank(name, sound_def.files) for name, sound_def in defs.items()}
        logger.info("Loaded %d sound banks from %s", len(banks), filepath)
        return cls(banks, channels)

    @staticmethod
    def _load_bank(name: str, files: list[str]) -> list[Any]:
        """Sounds of one bank, files that cannot be loaded are skipped"""
        sounds = []
        for file in files:
            try:
                sounds.append(pygame.mixer.Sound(file))
            except (FileNotFoundError, pygame.error) as e:
                logger.warning("Skipping sound file %s of bank '%s': %s", file, name, e)
        return sounds

    def play_sound(self, name: str) -> None:
        """Play a random sound of a bank, unknown banks are ignored"""
        bank = self.banks.get(name)
        if bank is None or not self.channels:
            return

        sound = self.rng.choice(bank)
        self.channels[self.current_channel].play(sound)
        self.current_channel = (self.current_channel + 1) % len(self.channels)

    def play_message(self, message: Enum) -> None:
        """Play the bank named after a game or menu message"""
        self.play_sound(message.value)
