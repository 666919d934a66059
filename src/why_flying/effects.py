"""
effects.py: Fire-and-forget side effects triggered by the simulation.
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class EffectPort:
    """The loop calls into this and never looks at the outcome."""

    def play_flap(self, sound: Optional[Any]):
        raise NotImplementedError


class NullEffects(EffectPort):
    """Headless port. Used when audio is unavailable."""

    def play_flap(self, sound: Optional[Any]):
        return None


class PygameEffects(EffectPort):
    """
    Plays flap sounds through pygame.mixer on a free channel. Playback is
    cosmetic: any failure is dropped without retry so the tick never stops.
    """

    def play_flap(self, sound: Optional[Any]):
        if sound is None:
            return
        try:
            sound.play()
        except Exception as e:
            logger.debug("Flap sound discarded: %s", e)
