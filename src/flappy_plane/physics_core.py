"""
physics_core.py: The plane and pipe objects with their kinematics and collision logic.
"""

import random
from dataclasses import dataclass, field
from typing import Optional

from .constants import (
    GRAVITY_ACCEL, JUMP_IMPULSE, PIPE_WIDTH, PIPE_GAP, PLANE_HALF_WIDTH, PLANE_HALF_HEIGHT
)
from .data_models import GameConfig


@dataclass
class Plane:
    """The player entity. x stays fixed, y is unbounded."""
    x: float
    y: float
    velocity: float = 0.0
    gravity: float = GRAVITY_ACCEL
    lift: float = JUMP_IMPULSE

    @classmethod
    def from_config(cls, config: GameConfig) -> "Plane":
        return cls(x=config.plane_x, y=config.spawn_y,
                   gravity=config.gravity, lift=config.lift)

    def integrate(self):
        """Advances one tick: velocity first, then position."""
        self.velocity += self.gravity
        self.y += self.velocity

    def apply_impulse(self):
        """Overwrites the velocity with the lift velocity."""
        self.velocity = self.lift


@dataclass
class Pipe:
    """
    A pipe pair with a gap between `top` and `bottom`.

    `top` is fixed at creation; `bottom` is always `top + gap`.
    """
    x: float
    top: float
    width: float = PIPE_WIDTH
    gap: float = PIPE_GAP
    scored: bool = field(default=False, compare=False)

    @classmethod
    def spawn(cls, config: GameConfig, rng: Optional[random.Random] = None) -> "Pipe":
        """Creates a pipe at the right screen edge with a random gap inside the margins."""
        rng = rng or random
        top = rng.randint(config.pipe_margin,
                          config.screen_height - config.pipe_gap - config.pipe_margin)
        return cls(x=config.screen_width, top=top,
                   width=config.pipe_width, gap=config.pipe_gap)

    @property
    def bottom(self) -> float:
        return self.top + self.gap

    def advance(self, speed: float):
        self.x -= speed

    def is_offscreen(self) -> bool:
        return self.x + self.width < 0

    def is_passed_by(self, plane: Plane) -> bool:
        """True once the trailing edge is left of the plane's anchor."""
        return self.x + self.width < plane.x

    def collides_with(self, plane: Plane) -> bool:
        """
        Hitbox-vs-gap test. The plane collides when its hitbox pokes out of the gap
        vertically while overlapping the pipe horizontally. Touching an edge exactly
        is not a collision.
        """
        outside_gap = (plane.y - PLANE_HALF_HEIGHT < self.top or
                       plane.y + PLANE_HALF_HEIGHT > self.bottom)
        if not outside_gap:
            return False
        return (plane.x + PLANE_HALF_WIDTH > self.x and
                plane.x - PLANE_HALF_WIDTH < self.x + self.width)
