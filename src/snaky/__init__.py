from .apple import Apple
from .config import GameConfig
from .errors import ConfigError
from .grid import GridPosition, wrap
from .snake import Heading, Snake, is_opposite
from .state import Command, GameState, Phase, Snapshot

__all__ = [
    "Apple",
    "Command",
    "ConfigError",
    "GameConfig",
    "GameState",
    "GridPosition",
    "Heading",
    "Phase",
    "Snake",
    "Snapshot",
    "is_opposite",
    "wrap",
]
