from __future__ import annotations

import pygame

from . import config
from .config import GameConfig
from .state import Snapshot

_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    if size not in _fonts:
        pygame.font.init()
        _fonts[size] = pygame.font.Font(None, size)
    return _fonts[size]


def _cell_rect(x: int, y: int, cell: int) -> pygame.Rect:
    return pygame.Rect(x * cell, y * cell, cell, cell)


def draw_board(surface: pygame.Surface, snapshot: Snapshot, cell: int) -> None:
    for x, y in snapshot.body:
        pygame.draw.rect(surface, config.BODY_COLOR, _cell_rect(x, y, cell))

    hx, hy = snapshot.head
    pygame.draw.rect(surface, config.HEAD_COLOR, _cell_rect(hx, hy, cell))

    ax, ay = snapshot.apple
    pygame.draw.rect(surface, config.APPLE_COLOR, _cell_rect(ax, ay, cell))


def draw_game_over(surface: pygame.Surface, snapshot: Snapshot) -> None:
    lines = [
        ("GAME OVER", 40),
        (f"Score: {snapshot.score}", 32),
        ("Press space to restart.", 32),
        ("Press escape to quit.", 32),
    ]
    rendered = [_font(size).render(text, True, config.TEXT_COLOR) for text, size in lines]

    total_h = sum(img.get_height() for img in rendered)
    w, h = surface.get_size()
    y = (h - total_h) // 2
    for img in rendered:
        surface.blit(img, ((w - img.get_width()) // 2, y))
        y += img.get_height()


def draw_frame(surface: pygame.Surface, snapshot: Snapshot, cfg: GameConfig) -> None:
    surface.fill(config.BACKGROUND)
    if snapshot.over:
        draw_game_over(surface, snapshot)
    else:
        draw_board(surface, snapshot, cfg.cell_size)
