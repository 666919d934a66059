"""
physics_core.py: Deterministic per-tick kinematics for the player body.
"""

from typing import Optional

from .data_models import PlayerBody, CollisionKind
from .settings import GameConfig


class PhysicsCore:
    """
    Fixed-step vertical physics. One call to integrate() is one tick;
    gravity is never scaled by wall-clock time.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def new_body(self) -> PlayerBody:
        cfg = self.config
        return PlayerBody(
            x=cfg.bird_x, y=cfg.bird_start_y, w=cfg.bird_size, h=cfg.bird_size,
            radius=cfg.bird_radius, gravity=cfg.gravity, jump=cfg.jump,
            start_y=cfg.bird_start_y,
        )

    def integrate(self, body: PlayerBody, floor: float) -> Optional[CollisionKind]:
        """
        Advances the body by one tick against a floor at y=floor.
        Returns CollisionKind.GROUND when the body lands, otherwise None.
        """
        body.velocity += body.gravity
        body.y += body.velocity

        recovery = self.config.scale_recovery
        body.scale_x += (1.0 - body.scale_x) * recovery
        body.scale_y += (1.0 - body.scale_y) * recovery

        if body.y + body.h > floor:
            body.y = floor - body.h
            return CollisionKind.GROUND

        # Ceiling is a clamp, not a death
        if body.y < 0:
            body.y = 0.0
            body.velocity = 0.0

        return None

    def flap(self, body: PlayerBody):
        """Overwrites the velocity with the upward impulse."""
        body.velocity = -body.jump
        body.scale_x = self.config.flap_scale_x
        body.scale_y = self.config.flap_scale_y

    def reset(self, body: PlayerBody):
        body.reset()
