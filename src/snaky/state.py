from __future__ import annotations

import enum
import logging
import random
from collections import namedtuple

from .apple import Apple
from .config import check_grid
from .grid import random_position, random_position_except
from .snake import Heading, Snake

logger = logging.getLogger(__name__)

Snapshot = namedtuple("Snapshot", ["head", "body", "apple", "over", "score"])
# head: GridPosition
# body: tuple[GridPosition, ...], head-to-tail
# apple: GridPosition
# over: bool
# score: int, apples eaten so far (body length once growth has landed)


class Phase(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Command(enum.Enum):
    RESTART = "restart"
    QUIT = "quit"


class GameState:
    """One game of snake on a wrapping grid.

    The scheduler calls `tick` at a fixed rate and forwards input through
    `handle_input` between ticks; the renderer reads `snapshot`. All
    randomness comes from `rng`, so a seeded source replays a game exactly.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: random.Random | None = None,
        snake: Snake | None = None,
        apple: Apple | None = None,
    ):
        check_grid(width, height)
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.phase = Phase.PLAYING
        if snake is None and apple is None:
            snake, apple = self._fresh_pieces()
        elif snake is None:
            snake = Snake(random_position_except(width, height, apple.position, self.rng))
        elif apple is None:
            apple = Apple.spawn(width, height, snake.head, self.rng)
        self.snake, self.apple = snake, apple

    @property
    def over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def score(self) -> int:
        return self.snake.length - 1

    def _fresh_pieces(self) -> tuple[Snake, Apple]:
        head = random_position(self.width, self.height, self.rng)
        apple = Apple.spawn(self.width, self.height, head, self.rng)
        return Snake(head), apple

    def tick(self) -> None:
        if self.over:
            return

        self.snake.advance(self.width, self.height)
        if self.snake.is_colliding_with_self():
            self.phase = Phase.GAME_OVER
            logger.info("game over, final length %d", len(self.snake))
            return

        if self.snake.can_eat(self.apple):
            self.snake.grow()
            self.apple.reposition(self.width, self.height, self.snake.head, self.rng)
            logger.debug("apple eaten, length %d, next apple at %s", self.snake.length, tuple(self.apple.position))

    update = tick

    def restart(self) -> None:
        self.snake, self.apple = self._fresh_pieces()
        self.phase = Phase.PLAYING
        logger.info("restarted at %s", tuple(self.snake.head))

    def handle_input(self, event) -> bool:
        """Apply one input event. Returns False once the game should quit."""
        if isinstance(event, Heading):
            if not self.over:
                self.snake.set_heading(event)
        elif event is Command.RESTART:
            if self.over:
                self.restart()
        elif event is Command.QUIT:
            if self.over:
                logger.info("quit requested")
                return False
        else:
            logger.debug("ignoring input %r", event)
        return True

    def snapshot(self) -> Snapshot:
        return Snapshot(
            head=self.snake.head,
            body=tuple(self.snake.body),
            apple=self.apple.position,
            over=self.over,
            score=self.score,
        )

    def __repr__(self):
        return f"<GameState {self.width}x{self.height} {self.phase.value} snake={self.snake!r} apple={self.apple!r}>"
