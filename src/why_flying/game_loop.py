"""
game_loop.py: The single-player simulation and its Idle/Running/Over state machine.
"""

import logging
import random
from typing import Any, Callable, Optional

from .collision import CollisionDetector
from .data_models import CollisionKind, GamePhase, RunState, TickEvent, TickResult
from .effects import EffectPort, NullEffects
from .obstacle_engine import ObstacleGenerator
from .physics_core import PhysicsCore
from .score_db import HighScoreStore
from .scoring import ScoringController
from .settings import GameConfig

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Owns every piece of mutable game state. Components are handed the state
    they need on each call and keep no reference back to the loop.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        store: Optional[HighScoreStore] = None,
        effects: Optional[EffectPort] = None,
        flap_sound: Optional[Callable[[], Optional[Any]]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.store = store
        self.effects = effects or NullEffects()
        self.flap_sound = flap_sound or (lambda: None)

        self.physics = PhysicsCore(self.config)
        self.generator = ObstacleGenerator(self.config, rng)
        self.detector = CollisionDetector(self.config)
        self.scoring = ScoringController(self.config)

        self.body = self.physics.new_body()
        self.obstacles = self.generator.new_field()
        self.state = RunState(high_score=store.load() if store else 0)

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    # --- Input signals ---

    def activate(self):
        """Flap while running, start from idle, ignored once the run is over."""
        if self.state.over:
            return
        if self.state.running:
            self._flap()
            return
        self._start()

    def restart(self):
        self._start()

    def go_home(self):
        self._reset()
        self.state.phase = GamePhase.IDLE

    # --- Simulation ---

    def tick(self, width: float, height: float) -> TickResult:
        """
        One frame of simulation. Does nothing unless running, so a frame queued
        after the run stopped cannot touch the state.
        """
        state = self.state
        if not state.running:
            return TickResult(phase=state.phase)

        result = TickResult(phase=state.phase)

        # 1. Spawn and scroll pipes
        result.spawned = self.generator.update(state, self.obstacles, width, height)
        if result.spawned is not None:
            result.events.append(TickEvent.SPAWNED)
        state.frames += 1

        # 2. Player physics, 3. pipe collision
        collision = self.physics.integrate(self.body, height)
        if collision is None:
            collision = self.detector.check(self.body, self.obstacles)
        if collision is not None:
            result.collision = collision
            result.events.extend(self._game_over(collision))
            result.phase = state.phase
            return result

        # 4. Score pipes that left the screen
        result.passed, events = self.scoring.update(state, self.obstacles)
        result.events.extend(events)
        return result

    # --- Internal ---

    def _flap(self):
        self.physics.flap(self.body)
        self.effects.play_flap(self.flap_sound())

    def _reset(self):
        self.physics.reset(self.body)
        self.obstacles.clear()
        self.state.reset_run()

    def _start(self):
        self._reset()
        self.state.phase = GamePhase.RUNNING
        logger.info("Run started (best %d)", self.state.high_score)
        self._flap()

    def _game_over(self, collision: CollisionKind):
        state = self.state
        state.phase = GamePhase.OVER
        events = [TickEvent.GAME_OVER]
        logger.info("Game over by %s collision, score %d", collision.value, state.score)

        if state.score > state.high_score:
            state.high_score = state.score
            state.new_best = True
            if self.store is not None:
                self.store.save(state.high_score)
            events.append(TickEvent.NEW_HIGH_SCORE)
            logger.info("New high score %d", state.high_score)
        return events
