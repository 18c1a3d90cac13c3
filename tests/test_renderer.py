"""Tests for the draw pass."""
import pygame
import pytest

from flappy_plane import Pipe
from flappy_plane import renderer
from flappy_plane.constants import PIPE_COLOR, SKY_COLOR, FUSELAGE_COLOR


@pytest.fixture
def draw_calls(monkeypatch):
    """Records pygame.draw calls made by the renderer, in order."""
    calls = []

    def recorder(name):
        def record(surface, color, *args, **kwargs):
            calls.append((name, tuple(color), args))
        return record

    for name in ("rect", "polygon", "circle"):
        monkeypatch.setattr(renderer.pygame.draw, name, recorder(name))
    return calls


def test_scene_draws_pipes_in_order_then_plane(game, surface, draw_calls):
    game.pipes.extend([Pipe(x=200, top=100), Pipe(x=300, top=250)])

    game.render(surface)

    kinds = [name for name, _, _ in draw_calls]
    assert kinds == ["rect", "rect", "rect", "rect",
                     "polygon", "polygon", "polygon", "circle"]
    # First pipe's rects come before the second pipe's
    assert draw_calls[0][2][0][0] == 200
    assert draw_calls[2][2][0][0] == 300


def test_pipe_rects_surround_the_gap(surface, draw_calls):
    pipe = Pipe(x=120, top=100, width=50, gap=150)
    renderer.draw_pipe(surface, pipe, 600)

    (_, color_top, (top_rect,)), (_, color_bottom, (bottom_rect,)) = draw_calls
    assert color_top == color_bottom == PIPE_COLOR
    assert top_rect == (120, 0, 50, 100)
    assert bottom_rect == (120, 250, 50, 350)


def test_render_clears_previous_frame(game, surface):
    surface.fill((255, 0, 255))
    game.render(surface)
    assert surface.get_at((5, 5))[:3] == SKY_COLOR


def test_render_paints_pipes_and_plane(game, surface):
    game.pipes.append(Pipe(x=300, top=200, width=50, gap=150))
    game.render(surface)

    assert surface.get_at((310, 100))[:3] == PIPE_COLOR
    assert surface.get_at((310, 500))[:3] == PIPE_COLOR
    assert surface.get_at((310, 275))[:3] == SKY_COLOR
    # Inside the fuselage, below the anchor line
    plane = game.plane
    assert surface.get_at((int(plane.x) + 10, int(plane.y) + 2))[:3] == FUSELAGE_COLOR


def test_render_does_not_mutate_state(game, surface):
    game.pipes.append(Pipe(x=300, top=200))
    before = (game.plane.y, game.plane.velocity, [p.x for p in game.pipes], game.score)
    game.render(surface)
    game.render(surface)
    assert (game.plane.y, game.plane.velocity, [p.x for p in game.pipes], game.score) == before


def test_tick_with_surface_updates_then_renders(game, surface):
    surface.fill((255, 0, 255))
    game.tick(surface)
    assert game.frame_count == 1
    assert surface.get_at((5, 5))[:3] == SKY_COLOR


@pytest.fixture
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


def test_hud_draws_score(surface, fonts):
    surface.fill(SKY_COLOR)
    renderer.draw_hud(surface, 3, game_over=False)
    width = surface.get_width()
    strip = [surface.get_at((x, y))[:3] for x in range(width) for y in range(20, 45)]
    assert any(color != SKY_COLOR for color in strip)
    # Center of the screen is left alone while running
    assert surface.get_at((width // 2, 400))[:3] == SKY_COLOR


def test_hud_game_over_dims_the_screen(surface, fonts):
    surface.fill(SKY_COLOR)
    renderer.draw_hud(surface, 0, game_over=True)
    assert surface.get_at((5, surface.get_height() - 5))[:3] != SKY_COLOR
