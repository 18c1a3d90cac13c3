"""
data_models.py: Configuration and state types for the game.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, GRAVITY_ACCEL, JUMP_IMPULSE,
    PIPE_WIDTH, PIPE_GAP, PIPE_MARGIN, PIPE_SPEED, PIPE_SPAWN_INTERVAL_TICKS
)


class GameState(Enum):
    """The two states of a game session."""
    RUNNING = "running"
    TERMINAL = "terminal"       # Game over, waiting for an activation to reset


@dataclass(frozen=True)
class GameConfig:
    """Tunable values for one game. Defaults mirror constants.py."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    gravity: float = GRAVITY_ACCEL
    lift: float = JUMP_IMPULSE
    pipe_width: int = PIPE_WIDTH
    pipe_gap: int = PIPE_GAP
    pipe_margin: int = PIPE_MARGIN
    pipe_speed: float = PIPE_SPEED
    spawn_interval: int = PIPE_SPAWN_INTERVAL_TICKS
    fps: int = FPS

    def __post_init__(self):
        if self.pipe_gap + 2 * self.pipe_margin >= self.screen_height:
            raise ValueError(
                f"pipe gap ({self.pipe_gap}) plus margins ({self.pipe_margin} each) "
                f"must fit inside screen height {self.screen_height}"
            )
        if self.gravity <= 0:
            raise ValueError(f"gravity must be positive, got {self.gravity}")
        if self.lift >= 0:
            raise ValueError(f"lift must be negative (upwards), got {self.lift}")
        if self.pipe_speed <= 0:
            raise ValueError(f"pipe_speed must be positive, got {self.pipe_speed}")
        if self.spawn_interval <= 0:
            raise ValueError(f"spawn_interval must be positive, got {self.spawn_interval}")

    @property
    def plane_x(self) -> float:
        return self.screen_width / 3

    @property
    def spawn_y(self) -> float:
        return self.screen_height / 2
