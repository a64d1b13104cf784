"""
cli.py: Command line entry point.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from .constants import CELL_SIZE, FPS, WINDOW_TITLE
from .editions import EDITIONS, LATEST, get_edition
from .errors import FlappyDragonError, UnknownEditionError
from .game_state import State

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy-dragon", description="Flap a dragon through the walls.")
    parser.add_argument("--edition", default=LATEST.name,
                        help=f"1-5 or one of: {', '.join(EDITIONS)} (default: {LATEST.name})")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame-rate cap.")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="Pixels per console cell.")
    parser.add_argument("--sprite-sheet", help="PNG strip of dragon_1..dragon_4 and wall tiles.")
    parser.add_argument("--seed", type=int, help="Seed for obstacle placement.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        edition = get_edition(args.edition)
    except UnknownEditionError as e:
        logger.error("%s", e)
        return 2

    # pygame is only needed once a window is opened
    from .terminal import Terminal, main_loop

    try:
        terminal = Terminal(title=f"{WINDOW_TITLE} ({edition.name})", cell_size=args.cell_size,
                            fps=args.fps, sprite_sheet_path=args.sprite_sheet)
    except FlappyDragonError as e:
        logger.error("%s", e)
        return 1

    state = State(edition, rng=random.Random(args.seed))
    main_loop(terminal, state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
