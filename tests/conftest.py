"""
conftest.py
-----------
Shared pytest fixtures for the game tests.

Contains:
- A default configuration and a seeded random generator
- An in-memory high score store
- A recording effects port that remembers every flap sound request
"""

import random

import pytest

from why_flying.effects import EffectPort
from why_flying.game_loop import GameLoop
from why_flying.score_db import HighScoreStore
from why_flying.settings import GameConfig


class RecordingEffects(EffectPort):
    """Effects port that only counts what it was asked to play."""

    def __init__(self):
        self.played = []

    def play_flap(self, sound):
        self.played.append(sound)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    db = HighScoreStore(":memory:")
    yield db
    db.close()


@pytest.fixture
def effects():
    return RecordingEffects()


@pytest.fixture
def game(config, store, effects, rng):
    return GameLoop(config=config, store=store, effects=effects,
                    flap_sound=lambda: "flap.ogg", rng=rng)
