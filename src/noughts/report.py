"""Timing and text output around the solver."""

import logging
import time
from typing import List, Optional, Tuple

from .solver import SearchResult, solve, verdict

logger = logging.getLogger(__name__)


def timed_solve(
    board: Optional[List[int]] = None,
    progress: bool = False,
) -> Tuple[SearchResult, int]:
    """
    Run the solver and measure it.

    Returns:
        (result, elapsed) with elapsed in whole microseconds
    """
    t0 = time.perf_counter()
    result = solve(board, progress=progress)
    elapsed_us = int((time.perf_counter() - t0) * 1_000_000)
    logger.info("Solved in %.3fs", elapsed_us / 1e6)
    return result, elapsed_us


def format_report(result: SearchResult, elapsed_us: int) -> str:
    """Two-line summary of a solve."""
    return (
        f"Analysed {result.games} games in {elapsed_us} microseconds\n"
        f"Noughts and crosses is a {verdict(result.outcome)} with perfect play"
    )
