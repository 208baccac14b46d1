#!/usr/bin/env python3
"""
Solve noughts and crosses by enumerating every game.

Usage:
    python solve.py                          # Solve from the empty board
    python solve.py --progress               # Progress bar over opening moves
    python solve.py --position "XO./.X./..."  # Solve from a given position
"""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from noughts import InvalidBoardError, parse_board, timed_solve, format_report


def build_parser():
    p = argparse.ArgumentParser(description="Solve noughts and crosses by exhaustive search.")
    p.add_argument("--position", type=str, default=None,
                   help="Starting position, 9 cells of X/O/. read row by row ('|' and '/' ignored)")
    p.add_argument("--progress", action="store_true", help="Show a progress bar over the opening moves")
    p.add_argument("-v", "--verbose", action="store_true", help="Log per-move tallies")
    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    board = None
    if args.position is not None:
        try:
            board = parse_board(args.position)
        except InvalidBoardError as e:
            parser.error(f"bad position {args.position!r}: {e}")

    result, elapsed_us = timed_solve(board, progress=args.progress)
    print(format_report(result, elapsed_us))
    return 0


if __name__ == "__main__":
    sys.exit(main())
