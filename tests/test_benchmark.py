"""Timing of the solver on the full tree and on a mid-game position."""

import time

from noughts.game import O, X, new_board, place
from noughts.solver import solve


def _best_of(fn, repeat):
    times = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        times.append(time.perf_counter() - t0)
    return min(times)


def test_solve_benchmark():
    # X centre, O corner: 7 cells left
    board = place(place(new_board(), 4, X), 0, O)
    expected = solve(board)

    mid_time = _best_of(lambda: solve(board), repeat=5)
    t0 = time.perf_counter()
    full = solve()
    full_time = time.perf_counter() - t0

    assert solve(board) == expected
    assert full.games == 255168
    print("solve benchmark:")
    print(f"  mid-game ({expected.games} games): {mid_time*1000:.1f}ms")
    print(f"  empty board ({full.games} games): {full_time*1000:.1f}ms")
    print(f"  games/s: {full.games / full_time:,.0f}")
