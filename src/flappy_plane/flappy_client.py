#!/usr/bin/env python3
"""
flappy_client.py

pygame window, input handling and the frame loop around a Game.
"""

import logging
import os
from typing import Optional

import pygame

from .constants import WINDOW_TITLE
from .data_models import GameConfig
from .game_engine import Game
from . import renderer

logger = logging.getLogger(__name__)


def activation_from_event(event: pygame.event.Event) -> bool:
    """
    True if the event is one logical "activate".

    A tap produces both FINGERDOWN and a synthesized MOUSEBUTTONDOWN; only the
    finger event counts so that one tap is one activation.
    """
    if event.type == pygame.FINGERDOWN:
        return True
    if event.type == pygame.MOUSEBUTTONDOWN:
        return not getattr(event, "touch", False)
    if event.type == pygame.KEYDOWN:
        return event.key == pygame.K_SPACE
    return False


def is_quit_event(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, game: Optional[Game] = None):
        pygame.init()
        self.config = config or GameConfig()
        self.screen = pygame.display.set_mode(
            (self.config.screen_width, self.config.screen_height))
        pygame.display.set_caption(WINDOW_TITLE)

        self.game = game or Game(self.config)
        self.clock = pygame.time.Clock()

    def handle_events(self) -> bool:
        """Drains the event queue. Returns False when the window should close."""
        running = True
        for event in pygame.event.get():
            if is_quit_event(event):
                running = False
            elif activation_from_event(event):
                self.game.activate()
        return running

    def run(self, max_frames: Optional[int] = None):
        """The main loop: one game tick per rendered frame."""
        logger.info("Starting %s at %d FPS", WINDOW_TITLE, self.config.fps)
        frames = 0
        try:
            running = True
            while running:
                running = self.handle_events()

                self.game.tick(self.screen)
                renderer.draw_hud(self.screen, self.game.score, self.game.game_over)
                pygame.display.flip()

                self.clock.tick(self.config.fps)
                frames += 1
                if max_frames is not None and frames >= max_frames:
                    running = False
        finally:
            pygame.quit()
        logger.info("Closed after %d frames", frames)


def main():
    logging.basicConfig(
        level=os.environ.get("FLAPPY_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    FlappyClient().run()


if __name__ == "__main__":
    main()
