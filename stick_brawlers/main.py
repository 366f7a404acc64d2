#!/usr/bin/env python3
"""
STICK BRAWLERS - Side-view Stick Figure Fighting
================================================
Entry point for the game.

Run: python -m stick_brawlers
"""

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from stick_brawlers import __version__
from stick_brawlers.config import GAME_TITLE, MATCH_DURATION

logger = logging.getLogger(__name__)

CONTROLS = """\
Controls:
  Left / Right - Move
  Up           - Jump
  Space        - Attack
  Enter        - Start / play again
  Escape       - Quit
"""


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, open the window and play until quit"""
    parser = argparse.ArgumentParser(
        prog="stick-brawlers",
        description=f"{GAME_TITLE} - player vs CPU, {MATCH_DURATION} second match",
        epilog=CONTROLS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the CPU opponent")
    parser.add_argument("--debug", action="store_true", help="Log hits and state changes")

    args = parser.parse_args(argv)
    _setup_logging(args.debug)

    print(f"\n{'='*60}")
    print(f"  {GAME_TITLE}")
    print(f"{'='*60}\n")
    print(CONTROLS)

    from stick_brawlers.core.game import Game

    try:
        game = Game(seed=args.seed)
        game.run()
    except KeyboardInterrupt:
        print("\nGame stopped by user.")
    except pygame.error:
        logger.exception("pygame could not start (no display?)")
        return 1
    except Exception:
        logger.exception("Unexpected error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
