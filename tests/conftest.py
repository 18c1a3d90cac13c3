"""
conftest.py
-----------
Shared pytest configuration and fixtures.

pygame runs headless through SDL's dummy drivers, so the tests need no display.
"""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from flappy_plane import Game, GameConfig


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def game(config):
    """A game with a seeded RNG so pipe gaps are reproducible."""
    return Game(config, rng=random.Random(1234))


@pytest.fixture
def surface(config):
    return pygame.Surface((config.screen_width, config.screen_height), 0, 32)


@pytest.fixture
def pinned(game):
    """The same game with the plane held in place (integrate is a no-op)."""
    game.plane.integrate = lambda: None
    return game
