import random

from snaky.apple import Apple
from snaky.grid import GridPosition


def test_spawn_avoids_forbidden_cell():
    rng = random.Random(99)
    for _ in range(10_000):
        apple = Apple.spawn(2, 1, GridPosition(1, 0), rng)
        assert apple.position == GridPosition(0, 0)


def test_reposition_moves_away_from_forbidden(scripted):
    apple = Apple(GridPosition(0, 2))
    apple.reposition(5, 5, GridPosition(0, 2), scripted([0, 2, 3, 4]))
    assert apple.position == GridPosition(3, 4)


def test_position_is_normalised_to_grid_position():
    apple = Apple((3, 1))
    assert isinstance(apple.position, GridPosition)
    assert apple.position.x == 3 and apple.position.y == 1
