"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .constants import BIRD_X, BIRD_START_Y, BIRD_SIZE, BIRD_RADIUS, GRAVITY, JUMP_IMPULSE


class GamePhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


class CollisionKind(Enum):
    """Terminal contact types. Both end the run."""
    GROUND = "ground"
    PIPE = "pipe"


class TickEvent(Enum):
    SPAWNED = "spawned"
    SCORED = "scored"
    LEVEL_UP = "level_up"
    GAME_OVER = "game_over"
    NEW_HIGH_SCORE = "new_high_score"


@dataclass
class PlayerBody:
    """The player sprite: fixed x, vertical motion only."""
    x: float = BIRD_X
    y: float = BIRD_START_Y
    w: float = BIRD_SIZE
    h: float = BIRD_SIZE
    radius: float = BIRD_RADIUS
    velocity: float = 0.0
    gravity: float = GRAVITY
    jump: float = JUMP_IMPULSE
    start_y: float = BIRD_START_Y

    # Presentation only
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def rotation(self) -> float:
        """Tilt in radians, proportional to velocity and clamped to +/-0.5."""
        return max(-0.5, min(0.5, self.velocity * 0.1))

    def reset(self):
        self.y = self.start_y
        self.velocity = 0.0
        self.scale_x = 1.0
        self.scale_y = 1.0


@dataclass
class Obstacle:
    """A pipe pair. Width and gap height are shared by the whole field."""
    x: float
    gap_start: int


@dataclass
class RunState:
    """Everything the loop mutates during a run, plus the process-wide best."""
    score: int = 0
    level: int = 1
    frames: int = 0
    frames_since_spawn: int = 0
    phase: GamePhase = GamePhase.IDLE
    high_score: int = 0
    new_best: bool = False

    @property
    def running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    @property
    def over(self) -> bool:
        return self.phase is GamePhase.OVER

    def reset_run(self):
        """Clears per-run counters. The high score survives."""
        self.score = 0
        self.level = 1
        self.frames = 0
        self.frames_since_spawn = 0
        self.new_best = False


@dataclass
class TickResult:
    """What happened during one tick, for the render pass and the HUD."""
    phase: GamePhase
    events: List[TickEvent] = field(default_factory=list)
    spawned: Optional[Obstacle] = None
    passed: int = 0
    collision: Optional[CollisionKind] = None
