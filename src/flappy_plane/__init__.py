"""
Flappy Plane: a side-scrolling arcade game built on pygame.
"""

from .data_models import GameConfig, GameState
from .physics_core import Plane, Pipe
from .game_engine import Game

__all__ = ["GameConfig", "GameState", "Plane", "Pipe", "Game"]
