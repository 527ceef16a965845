# apps/cli/play.py
"""
CLI entry point for playing Mastermind in the terminal.

This script:
  1) Configures logging (stderr; --verbose for candidate-set tracing).
  2) Seeds the process RNG used for secret codes (--seed for reproducibility).
  3) Runs the H / C / B / Q main menu until the player quits. The computer
     always plays the first candidate still consistent with the scores.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from mastermind.game import Console, main_menu


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, configure logging and run the menu loop.
    """
    ap = argparse.ArgumentParser(description="mastermind — play against the computer")
    ap.add_argument("--seed", type=int, help="RNG seed for secret codes")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="log candidate-set sizes to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    return main_menu(Console(), rng)


if __name__ == "__main__":
    sys.exit(main())
