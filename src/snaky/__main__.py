from __future__ import annotations

import argparse
import logging
import random

from . import config
from .config import GameConfig
from .errors import ConfigError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="snaky", description="Snake on a wrapping grid.")
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT, help="Grid height in cells.")
    parser.add_argument("--cell-size", type=int, default=config.CELL_SIZE, help="Cell edge in pixels.")
    parser.add_argument("--tick-rate", type=int, default=config.TICK_RATE, help="Snake moves per second.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for apple and spawn placement.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = GameConfig(
            width=args.width,
            height=args.height,
            cell_size=args.cell_size,
            tick_rate=args.tick_rate,
        )
    except ConfigError as e:
        parser.error(str(e))

    if args.seed is not None:
        logging.getLogger(__name__).info("seed %d", args.seed)

    # Imported late so --help and argument errors never open a window.
    from .game import run

    run(cfg, random.Random(args.seed))


if __name__ == "__main__":
    main()
