"""
scoring.py: Score, level and pipe retirement.
"""

from typing import Deque, List, Optional, Tuple

from .data_models import Obstacle, RunState, TickEvent
from .settings import GameConfig


class ScoringController:
    """
    A pipe scores once its trailing edge leaves the screen, independent of
    where the player is. Pipes retire from the head of the field only.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def level_for(self, score: int) -> int:
        return score // self.config.points_per_level + 1

    def update(self, state: RunState, obstacles: Deque[Obstacle]) -> Tuple[int, List[TickEvent]]:
        passed = 0
        events: List[TickEvent] = []
        width = self.config.pipe_width

        while obstacles and obstacles[0].x + width <= 0:
            obstacles.popleft()
            state.score += 1
            passed += 1
            events.append(TickEvent.SCORED)

            level = self.level_for(state.score)
            if level > state.level:
                state.level = level
                events.append(TickEvent.LEVEL_UP)

        return passed, events
