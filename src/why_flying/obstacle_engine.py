"""
obstacle_engine.py: Procedural pipe spawning and scrolling with difficulty scaling.
"""

import math
import random
from collections import deque
from typing import Deque, Optional, Tuple

from .data_models import Obstacle, RunState
from .settings import GameConfig


def difficulty_multiplier(score: int, per_point: float, cap: float) -> float:
    """1 + score * per_point, never above cap."""
    return min(1.0 + score * per_point, cap)


class ObstacleGenerator:
    """
    Spawns pipes at the right edge and scrolls the whole field left.
    Spawn interval shrinks and scroll speed grows with the score.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

    def new_field(self) -> Deque[Obstacle]:
        return deque()

    # --- Difficulty ---

    def multiplier(self, score: int) -> float:
        return difficulty_multiplier(
            score, self.config.difficulty_per_point, self.config.difficulty_cap)

    def scroll_speed(self, score: int) -> float:
        return self.config.base_speed * self.multiplier(score)

    def spawn_interval(self, score: int) -> int:
        if not self.config.dynamic_spawn:
            return self.config.base_interval
        return math.floor(self.config.base_interval / self.multiplier(score))

    # --- Spawning ---

    def gap_bounds(self, height: float) -> Optional[Tuple[int, int]]:
        """Inclusive range for gap_start, or None if the surface is too short."""
        low = self.config.pipe_min_segment
        high = int(height - self.config.pipe_gap - self.config.pipe_min_segment)
        if high < low:
            return None
        return low, high

    def _spawn_due(self, state: RunState) -> bool:
        if self.config.dynamic_spawn:
            return state.frames_since_spawn > self.spawn_interval(state.score)
        return state.frames % self.config.base_interval == 0

    def _spawn(self, state: RunState, obstacles: Deque[Obstacle],
               width: float, height: float) -> Optional[Obstacle]:
        bounds = self.gap_bounds(height)
        if bounds is None:
            return None
        gap_start = self.rng.randint(*bounds)
        obstacle = Obstacle(x=float(width), gap_start=gap_start)
        obstacles.append(obstacle)
        state.frames_since_spawn = 0
        return obstacle

    def update(self, state: RunState, obstacles: Deque[Obstacle],
               width: float, height: float) -> Optional[Obstacle]:
        """
        One tick: advance the spawn timer, spawn if due, then scroll every pipe.
        Returns the pipe spawned this tick, if any.
        """
        state.frames_since_spawn += 1
        spawned = None
        if self._spawn_due(state):
            spawned = self._spawn(state, obstacles, width, height)

        dx = self.scroll_speed(state.score)
        for obstacle in obstacles:
            obstacle.x -= dx

        return spawned
