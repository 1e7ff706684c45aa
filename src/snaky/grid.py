from __future__ import annotations

import random
from collections import namedtuple

GridPosition = namedtuple("GridPosition", ["x", "y"])
# x: column in [0, width)
# y: row in [0, height), growing downwards


def wrap(value: int, bound: int) -> int:
    """True modulo: the result lies in [0, bound) even for negative values."""
    return value % bound


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


def step(pos: GridPosition, delta: tuple[int, int], width: int, height: int) -> GridPosition:
    x, y = add_vectors(pos, delta)
    return GridPosition(wrap(x, width), wrap(y, height))


def random_position(width: int, height: int, rng: random.Random) -> GridPosition:
    return GridPosition(rng.randrange(width), rng.randrange(height))


def random_position_except(
    width: int, height: int, forbidden: GridPosition, rng: random.Random
) -> GridPosition:
    pos = random_position(width, height, rng)
    while pos == forbidden:
        pos = random_position(width, height, rng)
    return pos
