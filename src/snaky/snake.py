from __future__ import annotations

import enum
from collections import deque
from typing import TYPE_CHECKING, Iterable

from .grid import GridPosition, add_vectors, step

if TYPE_CHECKING:
    from .apple import Apple


class Heading(enum.Enum):
    """Movement direction; the value is the (dx, dy) of one step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


def is_opposite(a: Heading, b: Heading) -> bool:
    return add_vectors(a.value, b.value) == (0, 0)


class Snake:
    """A head plus a head-to-tail chain of body segments.

    `advance` moves the head one cell and drags the chain behind it. The
    cell that falls off the end of the chain is remembered so that `grow`
    can hand it back; with an empty body that cell is the old head. When
    that cell is the one the head just stepped into, the extra segment is
    held back and the next `advance` keeps its tail instead.
    """

    def __init__(
        self,
        head: GridPosition,
        heading: Heading = Heading.LEFT,
        body: Iterable[GridPosition] = (),
    ):
        self.heading = heading
        self.head = GridPosition(*head)
        self.body: deque[GridPosition] = deque(GridPosition(*p) for p in body)
        # heading of the last step taken; reversals are judged against it
        self._moved = heading
        self._vacated: GridPosition | None = None
        self._pending = 0

    def set_heading(self, requested: Heading) -> None:
        if is_opposite(self._moved, requested):
            return
        self.heading = requested

    def advance(self, width: int, height: int) -> None:
        prev_head = self.head
        self.head = step(prev_head, self.heading.value, width, height)
        self._moved = self.heading
        self.body.appendleft(prev_head)
        if self._pending:
            self._pending -= 1
            self._vacated = None
        else:
            self._vacated = self.body.pop()

    def grow(self) -> None:
        if self._vacated is None or self._vacated == self.head:
            self._pending += 1
        else:
            self.body.append(self._vacated)
        self._vacated = None

    def is_colliding_with_self(self) -> bool:
        return self.head in self.body

    def can_eat(self, apple: Apple) -> bool:
        return self.head == apple.position

    @property
    def length(self) -> int:
        """Cells the snake covers once any held-back growth has landed."""
        return 1 + len(self.body) + self._pending

    def __len__(self) -> int:
        return 1 + len(self.body)

    def __repr__(self):
        return f"Snake(head={tuple(self.head)}, heading={self.heading.name}, body={len(self.body)})"
