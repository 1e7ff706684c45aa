from __future__ import annotations

import logging
import random

import pygame

from . import config
from .config import GameConfig
from .render import draw_frame
from .snake import Heading
from .state import Command, GameState

logger = logging.getLogger(__name__)

KEY_MAP = {
    pygame.K_UP: Heading.UP,
    pygame.K_DOWN: Heading.DOWN,
    pygame.K_LEFT: Heading.LEFT,
    pygame.K_RIGHT: Heading.RIGHT,
    pygame.K_RETURN: Command.RESTART,
    pygame.K_SPACE: Command.RESTART,
    pygame.K_ESCAPE: Command.QUIT,
}


def event_for_key(key: int):
    return KEY_MAP.get(key)


def run(cfg: GameConfig, rng: random.Random | None = None) -> None:
    pygame.init()
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption(config.TITLE)
    clock = pygame.time.Clock()

    game = GameState(cfg.width, cfg.height, rng)
    logger.info("starting %dx%d game at %d ticks/s", cfg.width, cfg.height, cfg.tick_rate)

    running = True
    lag = 0.0
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                action = event_for_key(event.key)
                if action is None:
                    logger.debug("invalid key press: %s", pygame.key.name(event.key))
                elif not game.handle_input(action):
                    running = False

        # Fixed timestep: rendering runs at FPS_LIMIT, the simulation at tick_rate.
        lag += clock.get_time() / 1000.0
        while running and lag >= cfg.tick_interval:
            game.tick()
            lag -= cfg.tick_interval

        draw_frame(screen, game.snapshot(), cfg)
        pygame.display.flip()
        clock.tick(config.FPS_LIMIT)

    pygame.quit()
    print("Game Over! Score:", game.score)
