"""
Exhaustive minimax solver for noughts and crosses.

Every legal play sequence is enumerated to the end; no pruning and no
caching. Terminal leaves are tallied by result, and each node's outcome is
backed up by minimax so the root outcome is the result under perfect play.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from tqdm.auto import tqdm

from .game import (
    O,
    SYMBOLS,
    X,
    InvalidBoardError,
    check_board,
    format_board,
    is_full,
    is_line_complete,
    legal_moves,
    new_board,
    opponent,
    place,
    side_to_move,
)

logger = logging.getLogger(__name__)

DRAW = 0

VERDICTS = {
    DRAW: "draw",
    X: "win for X",
    O: "win for O",
}


@dataclass
class SearchResult:
    """
    Outcome of a searched position plus tallies of the terminal leaves below it.

    outcome is the winner under perfect play: +1 (X), -1 (O) or 0 (draw).
    """
    outcome: int = DRAW
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    @property
    def games(self) -> int:
        """Number of terminal leaves visited."""
        return self.x_wins + self.o_wins + self.draws

    @classmethod
    def terminal(cls, outcome: int) -> "SearchResult":
        """A single terminal leaf."""
        if outcome == X:
            return cls(outcome, x_wins=1)
        if outcome == O:
            return cls(outcome, o_wins=1)
        return cls(DRAW, draws=1)


def terminal_result(board: List[int], player: int) -> Optional[SearchResult]:
    """
    Classify board if it is terminal, otherwise return None.

    player is the side to move, so only its opponent can have just won.
    """
    last = opponent(player)
    if is_line_complete(board, last):
        return SearchResult.terminal(last)
    if is_full(board):
        return SearchResult.terminal(DRAW)
    return None


def combine(children: Iterable[SearchResult], player: int) -> SearchResult:
    """
    Merge child results for a node where player is to move.

    Tallies are summed; the outcome is the child outcome best for player.
    """
    best = None
    x_wins = o_wins = draws = 0
    for child in children:
        x_wins += child.x_wins
        o_wins += child.o_wins
        draws += child.draws
        if best is None or child.outcome * player > best * player:
            best = child.outcome
    if best is None:
        raise ValueError("cannot combine an empty set of results")
    return SearchResult(best, x_wins, o_wins, draws)


def search(board: List[int], player: int) -> SearchResult:
    """
    Enumerate every game continuing from board with player to move.

    Args:
        board: Current board state
        player: Side to move (+1 or -1)

    Returns:
        SearchResult with the minimax outcome and leaf tallies
    """
    result = terminal_result(board, player)
    if result is not None:
        return result

    return combine(
        (search(place(board, action, player), -player) for action in legal_moves(board)),
        player,
    )


def solve(
    board: Optional[List[int]] = None,
    player: Optional[int] = None,
    progress: bool = False,
) -> SearchResult:
    """
    Solve a position, the empty board with X to move by default.

    Args:
        board: Starting position; validated with check_board
        player: Side to move; must agree with the mark counts when given
        progress: Show a progress bar over the opening moves

    Returns:
        SearchResult for the starting position
    """
    if board is None:
        board = new_board()
    else:
        check_board(board)
    mover = side_to_move(board)
    if player is None:
        player = mover
    elif player != mover:
        raise InvalidBoardError(f"player {player!r} cannot move, it is {SYMBOLS[mover]}'s turn")

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Solving with %s to move:\n%s", SYMBOLS[player], format_board(board))

    result = terminal_result(board, player)
    if result is not None:
        return result

    moves = legal_moves(board)
    if progress:
        moves = tqdm(moves, desc="Opening moves", unit="move", leave=False)

    children = []
    for action in moves:
        child = search(place(board, action, player), -player)
        logger.debug(
            "%s at %d: %d games (X %d, O %d, draw %d), %s",
            SYMBOLS[player], action, child.games,
            child.x_wins, child.o_wins, child.draws, verdict(child.outcome),
        )
        children.append(child)

    return combine(children, player)


def verdict(outcome: int) -> str:
    """Describe an outcome, e.g. "draw" or "win for X"."""
    return VERDICTS[outcome]
