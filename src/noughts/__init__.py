"""
Noughts and crosses solver - enumerate every game and find the result under perfect play.

The full game tree is walked from the empty board (255168 complete games),
and the outcome is backed up by minimax.
"""

from .game import (
    EMPTY,
    X,
    O,
    WIN_LINES,
    IllegalMoveError,
    InvalidBoardError,
    new_board,
    opponent,
    completed_lines,
    is_line_complete,
    is_full,
    legal_moves,
    place,
    side_to_move,
    check_board,
    parse_board,
    format_board,
)
from .solver import DRAW, SearchResult, search, solve, verdict
from .report import timed_solve, format_report

__version__ = "0.1.0"
__all__ = [
    "EMPTY",
    "X",
    "O",
    "DRAW",
    "WIN_LINES",
    "IllegalMoveError",
    "InvalidBoardError",
    "new_board",
    "opponent",
    "completed_lines",
    "is_line_complete",
    "is_full",
    "legal_moves",
    "place",
    "side_to_move",
    "check_board",
    "parse_board",
    "format_board",
    "SearchResult",
    "search",
    "solve",
    "verdict",
    "timed_solve",
    "format_report",
]
