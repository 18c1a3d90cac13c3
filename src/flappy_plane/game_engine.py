"""
game_engine.py: The game orchestrator. Owns the plane, the pipes, the score and the
RUNNING/TERMINAL state, and advances them one tick at a time.
"""

import logging
import random
from typing import List, Optional

import pygame

from .data_models import GameConfig, GameState
from .physics_core import Plane, Pipe
from . import renderer

logger = logging.getLogger(__name__)


class Game:
    """
    One game session.

    Driven from outside: call `tick()` once per frame and `activate()` for every
    user activation. Nothing here sleeps, schedules or reads input on its own.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

        self.plane: Plane = Plane.from_config(self.config)
        self.pipes: List[Pipe] = []
        self.score = 0
        self.frame_count = 0
        self.state = GameState.RUNNING

    @property
    def game_over(self) -> bool:
        return self.state is GameState.TERMINAL

    def reset(self):
        """Starts a fresh session: new plane, no pipes, zeroed counters."""
        self.plane = Plane.from_config(self.config)
        self.pipes = []
        self.score = 0
        self.frame_count = 0
        self.state = GameState.RUNNING
        logger.info("Game reset")

    def activate(self):
        """A single user activation: flap while running, reset after game over."""
        if self.game_over:
            self.reset()
        else:
            self.plane.apply_impulse()

    def spawn_pipe(self):
        pipe = Pipe.spawn(self.config, self.rng)
        self.pipes.append(pipe)
        logger.debug("Spawned pipe at frame %d, gap %.1f-%.1f",
                     self.frame_count, pipe.top, pipe.bottom)

    def _end(self):
        if not self.game_over:
            self.state = GameState.TERMINAL
            logger.info("Game over: score %d after %d frames", self.score, self.frame_count)

    def update(self):
        """Advances the simulation by one tick. No-op once the game is over."""
        if self.game_over:
            return

        self.plane.integrate()

        self.frame_count += 1
        if self.frame_count % self.config.spawn_interval == 0:
            self.spawn_pipe()

        # Every pipe is processed even after a collision latches game over.
        for pipe in list(self.pipes):
            pipe.advance(self.config.pipe_speed)

            if pipe.collides_with(self.plane):
                self._end()

            if pipe.is_passed_by(self.plane) and not pipe.scored:
                self.score += 1
                pipe.scored = True

            if pipe.is_offscreen():
                self.pipes.remove(pipe)
                logger.debug("Removed offscreen pipe at frame %d", self.frame_count)

        if self.plane.y < 0 or self.plane.y > self.config.screen_height:
            self._end()

    def render(self, surface: pygame.Surface):
        """Read-only draw pass over the current state."""
        renderer.draw_scene(surface, self)

    def tick(self, surface: Optional[pygame.Surface] = None):
        """One frame: update, then render when a surface is given."""
        self.update()
        if surface is not None:
            self.render(surface)
