from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigError

TITLE = "Snaky"

GRID_WIDTH = 40
GRID_HEIGHT = 40
CELL_SIZE = 20
TICK_RATE = 10  # simulation ticks per second
FPS_LIMIT = 60  # rendered frames per second

# eukalyptus palette, lightest to darkest
PALETTE = [
    (155, 167, 166),
    (129, 140, 135),
    (118, 143, 133),
    (50, 60, 56),
    (27, 29, 27),
]
RED = (255, 0, 0)

BACKGROUND = PALETTE[4]
BODY_COLOR = PALETTE[0]
HEAD_COLOR = PALETTE[1]
TEXT_COLOR = PALETTE[0]
APPLE_COLOR = RED


@dataclass(frozen=True)
class GameConfig:
    """Grid and timing parameters, fixed for the lifetime of a game."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    cell_size: int = CELL_SIZE
    tick_rate: int = TICK_RATE

    def __post_init__(self) -> None:
        check_grid(self.width, self.height)
        if self.cell_size <= 0:
            raise ConfigError(f"cell size must be positive, got {self.cell_size}")
        if self.tick_rate <= 0:
            raise ConfigError(f"tick rate must be positive, got {self.tick_rate}")

    @property
    def window_size(self) -> tuple[int, int]:
        return (self.width * self.cell_size, self.height * self.cell_size)

    @property
    def tick_interval(self) -> float:
        return 1.0 / self.tick_rate


def check_grid(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ConfigError(f"grid must be at least 1x1, got {width}x{height}")
    if width * height < 2:
        raise ConfigError("grid needs at least two cells to hold a snake and an apple")
