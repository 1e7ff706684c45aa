from __future__ import annotations

import random

from .grid import GridPosition, random_position_except


class Apple:
    def __init__(self, position: GridPosition):
        self.position = GridPosition(*position)

    @classmethod
    def spawn(cls, width: int, height: int, forbidden: GridPosition, rng: random.Random) -> Apple:
        return cls(random_position_except(width, height, forbidden, rng))

    def reposition(self, width: int, height: int, forbidden: GridPosition, rng: random.Random) -> None:
        self.position = random_position_except(width, height, forbidden, rng)

    def __repr__(self):
        return f"Apple({self.position.x}, {self.position.y})"
