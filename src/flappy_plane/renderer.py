"""
renderer.py: pygame draw pass for the scene and the HUD.

Everything here only reads game state.
"""

import pygame

from .constants import (
    SKY_COLOR, PIPE_COLOR, FUSELAGE_COLOR, WING_COLOR, COCKPIT_COLOR,
    TEXT_COLOR, GAME_OVER_COLOR, OVERLAY_COLOR
)
from .physics_core import Plane, Pipe


def clear(surface: pygame.Surface):
    surface.fill(SKY_COLOR)


def draw_pipe(surface: pygame.Surface, pipe: Pipe, screen_height: int):
    """Draws the upper and lower halves around the gap."""
    pygame.draw.rect(surface, PIPE_COLOR, (pipe.x, 0, pipe.width, pipe.top))
    pygame.draw.rect(surface, PIPE_COLOR,
                     (pipe.x, pipe.bottom, pipe.width, screen_height - pipe.bottom))


def draw_plane(surface: pygame.Surface, plane: Plane):
    x, y = plane.x, plane.y

    # Fuselage
    pygame.draw.polygon(surface, FUSELAGE_COLOR,
                        [(x - 20, y), (x + 20, y), (x + 15, y + 5), (x - 15, y + 5)])
    # Main wing
    pygame.draw.polygon(surface, WING_COLOR,
                        [(x - 15, y), (x + 5, y), (x, y - 15), (x - 20, y - 10)])
    # Tail
    pygame.draw.polygon(surface, WING_COLOR,
                        [(x - 15, y), (x - 20, y - 8), (x - 15, y - 8)])
    # Cockpit
    pygame.draw.circle(surface, COCKPIT_COLOR, (x + 5, y - 2), 3)


def draw_scene(surface: pygame.Surface, game):
    """Clears the surface, then draws pipes in order and the plane on top."""
    clear(surface)
    for pipe in game.pipes:
        draw_pipe(surface, pipe, game.config.screen_height)
    draw_plane(surface, game.plane)


def draw_hud(surface: pygame.Surface, score: int, game_over: bool):
    """Score at the top, plus a game over overlay when the session has ended."""
    width, height = surface.get_size()
    large_font = pygame.font.Font(None, 40)
    font = pygame.font.Font(None, 24)

    score_text = large_font.render(f"Score: {score}", True, TEXT_COLOR)
    surface.blit(score_text, (width // 2 - score_text.get_width() // 2, 20))

    if not game_over:
        return

    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill(OVERLAY_COLOR)
    surface.blit(overlay, (0, 0))

    title = large_font.render("Game Over", True, GAME_OVER_COLOR)
    surface.blit(title, (width // 2 - title.get_width() // 2, height // 2 - 40))
    hint = font.render("Click, tap or press SPACE to restart", True, TEXT_COLOR)
    surface.blit(hint, (width // 2 - hint.get_width() // 2, height // 2 + 10))
