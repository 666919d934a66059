"""
settings.py: Tunable game configuration built from the constants module.
"""

import os
from dataclasses import dataclass, replace

from .constants import (
    BIRD_X, BIRD_START_Y, BIRD_SIZE, BIRD_RADIUS, GRAVITY, JUMP_IMPULSE,
    HITBOX_MARGIN, FLAP_SCALE_X, FLAP_SCALE_Y, SCALE_RECOVERY,
    PIPE_WIDTH, PIPE_GAP, PIPE_MIN_SEGMENT, PIPE_BASE_SPEED, PIPE_BASE_INTERVAL,
    DIFFICULTY_PER_POINT, DIFFICULTY_CAP, POINTS_PER_LEVEL,
    DB_FILE, HIGH_SCORE_KEY,
)


@dataclass(frozen=True)
class GameConfig:
    """Every number the simulation reads. Defaults come from constants.py."""

    # Player
    bird_x: float = BIRD_X
    bird_start_y: float = BIRD_START_Y
    bird_size: float = BIRD_SIZE
    bird_radius: float = BIRD_RADIUS
    gravity: float = GRAVITY
    jump: float = JUMP_IMPULSE
    hitbox_margin: float = HITBOX_MARGIN
    flap_scale_x: float = FLAP_SCALE_X
    flap_scale_y: float = FLAP_SCALE_Y
    scale_recovery: float = SCALE_RECOVERY

    # Pipes
    pipe_width: float = PIPE_WIDTH
    pipe_gap: int = PIPE_GAP
    pipe_min_segment: int = PIPE_MIN_SEGMENT
    base_speed: float = PIPE_BASE_SPEED
    base_interval: int = PIPE_BASE_INTERVAL
    dynamic_spawn: bool = True      # False: fixed interval on the frame counter

    # Difficulty
    difficulty_per_point: float = DIFFICULTY_PER_POINT
    difficulty_cap: float = DIFFICULTY_CAP
    points_per_level: int = POINTS_PER_LEVEL

    # Persistence / assets
    db_file: str = DB_FILE
    high_score_key: str = HIGH_SCORE_KEY
    asset_dir: str = "assets"

    def with_overrides(self, **changes) -> "GameConfig":
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Reads WHY_FLYING_DB and WHY_FLYING_ASSETS, keeping defaults otherwise."""
        config = cls()
        overrides = {}
        if os.environ.get("WHY_FLYING_DB"):
            overrides["db_file"] = os.environ["WHY_FLYING_DB"]
        if os.environ.get("WHY_FLYING_ASSETS"):
            overrides["asset_dir"] = os.environ["WHY_FLYING_ASSETS"]
        return config.with_overrides(**overrides) if overrides else config
