"""
collision.py: Bounding-box tests between the player and the pipe field.
"""

from typing import Iterable, NamedTuple, Optional

from .data_models import PlayerBody, Obstacle, CollisionKind
from .settings import GameConfig


class Box(NamedTuple):
    left: float
    right: float
    top: float
    bottom: float


class CollisionDetector:
    """Checks an inset player hitbox against each pipe's two solid segments."""

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def hitbox(self, body: PlayerBody) -> Box:
        m = self.config.hitbox_margin
        return Box(
            left=body.x + m,
            right=body.x + body.w - m,
            top=body.y + m,
            bottom=body.y + body.h - m,
        )

    def hits(self, box: Box, obstacle: Obstacle) -> bool:
        pipe_left = obstacle.x
        pipe_right = obstacle.x + self.config.pipe_width
        if not (box.right > pipe_left and box.left < pipe_right):
            return False

        gap_top = obstacle.gap_start
        gap_bottom = obstacle.gap_start + self.config.pipe_gap
        return box.top < gap_top or box.bottom > gap_bottom

    def check(self, body: PlayerBody, obstacles: Iterable[Obstacle]) -> Optional[CollisionKind]:
        """Returns CollisionKind.PIPE on the first overlapping pipe, else None."""
        box = self.hitbox(body)
        for obstacle in obstacles:
            if self.hits(box, obstacle):
                return CollisionKind.PIPE
        return None
