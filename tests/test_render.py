import pygame
import pytest

from snaky import config
from snaky.config import GameConfig
from snaky.game import event_for_key
from snaky.grid import GridPosition
from snaky.render import draw_frame
from snaky.snake import Heading
from snaky.state import Command, Snapshot


@pytest.fixture
def cfg():
    return GameConfig(width=5, height=5, cell_size=20, tick_rate=10)


def color_at(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_draws_cells_while_playing(cfg):
    surface = pygame.Surface(cfg.window_size)
    snap = Snapshot(
        head=GridPosition(2, 2),
        body=(GridPosition(3, 2),),
        apple=GridPosition(0, 0),
        over=False,
        score=1,
    )
    draw_frame(surface, snap, cfg)
    assert color_at(surface, 10, 10) == config.APPLE_COLOR
    assert color_at(surface, 50, 50) == config.HEAD_COLOR
    assert color_at(surface, 70, 50) == config.BODY_COLOR
    assert color_at(surface, 90, 90) == config.BACKGROUND


def test_game_over_hides_board(cfg):
    surface = pygame.Surface((400, 400))
    snap = Snapshot(
        head=GridPosition(0, 0),
        body=(),
        apple=GridPosition(19, 19),
        over=True,
        score=3,
    )
    draw_frame(surface, snap, cfg)
    assert color_at(surface, 5, 5) == config.BACKGROUND
    assert color_at(surface, 395, 395) == config.BACKGROUND
    text_pixels = [
        (x, y) for x in range(0, 400, 2) for y in range(150, 250, 2) if color_at(surface, x, y) != config.BACKGROUND
    ]
    assert text_pixels


def test_key_mapping():
    assert event_for_key(pygame.K_UP) is Heading.UP
    assert event_for_key(pygame.K_LEFT) is Heading.LEFT
    assert event_for_key(pygame.K_RETURN) is Command.RESTART
    assert event_for_key(pygame.K_SPACE) is Command.RESTART
    assert event_for_key(pygame.K_ESCAPE) is Command.QUIT
    assert event_for_key(pygame.K_a) is None
