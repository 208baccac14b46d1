"""
Noughts and crosses board model.

Board representation: list[int] of length 9, row-major
  - 0: empty
  - +1: X
  - -1: O

Player: +1 (X) or -1 (O). X always moves first.
"""

from typing import List, Tuple

EMPTY = 0
X = +1
O = -1

# Winning lines (rows, columns, diagonals)
WIN_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
]

SYMBOLS = {EMPTY: ' ', X: 'X', O: 'O'}


class IllegalMoveError(ValueError):
    """A mark was placed off the board, on an occupied cell or after the game was won."""


class InvalidBoardError(ValueError):
    """A board that cannot arise from alternating play starting with X."""


def new_board() -> List[int]:
    """Return an empty board."""
    return [EMPTY] * 9


def opponent(player: int) -> int:
    return -player


def completed_lines(board: List[int], player: int) -> List[Tuple[int, int, int]]:
    """Return the winning lines fully occupied by player."""
    return [line for line in WIN_LINES if all(board[i] == player for i in line)]


def is_line_complete(board: List[int], player: int) -> bool:
    """Check whether player holds any three-in-a-row."""
    for a, b, c in WIN_LINES:
        if board[a] == player and board[b] == player and board[c] == player:
            return True
    return False


def is_full(board: List[int]) -> bool:
    return EMPTY not in board


def legal_moves(board: List[int]) -> List[int]:
    """Return list of legal move indices (empty squares)."""
    return [i for i, v in enumerate(board) if v == EMPTY]


def place(board: List[int], index: int, player: int) -> List[int]:
    """
    Place player's mark and return the new board.

    Raises:
        IllegalMoveError: index is off the board, the cell is taken or the
            game is already won
    """
    if not 0 <= index < 9:
        raise IllegalMoveError(f"cell {index} is off the board")
    if board[index] != EMPTY:
        raise IllegalMoveError(f"cell {index} is already taken by {SYMBOLS[board[index]]}")
    for winner in (X, O):
        if is_line_complete(board, winner):
            raise IllegalMoveError(f"no move is allowed after {SYMBOLS[winner]} has won")
    new_board = board[:]
    new_board[index] = player
    return new_board


def side_to_move(board: List[int]) -> int:
    """Infer side to move from board state (X plays first)."""
    x_cnt = sum(1 for v in board if v == X)
    o_cnt = sum(1 for v in board if v == O)
    return X if x_cnt == o_cnt else O


def check_board(board: List[int]) -> None:
    """
    Check that board could have been reached by alternating play from empty.

    Raises:
        InvalidBoardError: describing the first rule the board breaks
    """
    if len(board) != 9:
        raise InvalidBoardError(f"board has {len(board)} cells, expected 9")
    for i, v in enumerate(board):
        if v not in SYMBOLS:
            raise InvalidBoardError(f"cell {i} holds {v!r}")

    x_cnt = sum(1 for v in board if v == X)
    o_cnt = sum(1 for v in board if v == O)
    if o_cnt > x_cnt:
        raise InvalidBoardError("O has had too many turns")
    if x_cnt > o_cnt + 1:
        raise InvalidBoardError("X has had too many turns")

    # Only the player who moved last can hold a line; anything else means a
    # move was played after the game was over.
    mover = side_to_move(board)
    if is_line_complete(board, mover):
        raise InvalidBoardError(
            f"{SYMBOLS[opponent(mover)]} had a turn after {SYMBOLS[mover]} won"
        )


def parse_board(text: str) -> List[int]:
    """
    Parse a board from text such as "XO./.X./..O".

    Cells are read row-major: X and O are marks, '.', '-', '_' and space are
    empty. '|', '/' and newlines are ignored.
    """
    board = []
    for ch in text:
        if ch in "|/\n\r":
            continue
        if ch in "xX":
            board.append(X)
        elif ch in "oO":
            board.append(O)
        elif ch in ".-_ ":
            board.append(EMPTY)
        else:
            raise InvalidBoardError(f"unexpected character {ch!r}")
    check_board(board)
    return board


def format_board(board: List[int]) -> str:
    """Render board as a 3x3 text grid."""
    rows = []
    for i in range(3):
        rows.append("|".join(SYMBOLS[board[i * 3 + j]] for j in range(3)))
    return "\n-+-+-\n".join(rows)
