"""
assets.py: Playable characters and their sprite / flap-sound handles.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import pygame

logger = logging.getLogger(__name__)


@dataclass
class Character:
    key: str
    image_file: str
    sound_file: str
    image: Optional[Any] = None     # pygame.Surface once loaded
    sound: Optional[Any] = None     # pygame.mixer.Sound once loaded


# SDL_mixer has no AAC decoder, so flap sounds ship as Ogg Vorbis
DEFAULT_CHARACTERS = {
    "nidha": ("nidha.png", "nidha.ogg"),
    "aami": ("aami.png", "aami.ogg"),
}


class CharacterRoster:
    """Holds the characters and which one is selected."""

    def __init__(self, characters: Optional[Dict[str, tuple]] = None, selected: str = "nidha"):
        specs = characters or DEFAULT_CHARACTERS
        self.characters: Dict[str, Character] = {
            key: Character(key=key, image_file=img, sound_file=snd)
            for key, (img, snd) in specs.items()
        }
        self.selected = ""
        self.select(selected)

    @property
    def current(self) -> Character:
        return self.characters[self.selected]

    def select(self, key: str):
        if key not in self.characters:
            raise KeyError(f"Unknown character: {key}")
        self.selected = key
        logger.info("Selected character %s", key)

    def sprite(self) -> Optional[Any]:
        return self.current.image

    def flap_sound(self) -> Optional[Any]:
        return self.current.sound

    @property
    def sprite_ready(self) -> bool:
        return self.current.image is not None

    def load(self, asset_dir: str):
        """
        Loads every image and sound found under asset_dir. Anything missing
        stays None: the sprite falls back to a circle, the flap stays silent.
        """
        for character in self.characters.values():
            image_path = os.path.join(asset_dir, character.image_file)
            try:
                character.image = pygame.image.load(image_path).convert_alpha()
            except (FileNotFoundError, pygame.error) as e:
                logger.warning("Sprite for %s unavailable: %s", character.key, e)
                character.image = None

            sound_path = os.path.join(asset_dir, character.sound_file)
            try:
                character.sound = pygame.mixer.Sound(sound_path)
            except (FileNotFoundError, pygame.error) as e:
                logger.warning("Sound for %s unavailable: %s", character.key, e)
                character.sound = None
