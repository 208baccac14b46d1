import logging
import re

import pytest

import solve as solve_script
from noughts.game import EMPTY, O, X
from noughts.report import format_report, timed_solve
from noughts.solver import DRAW, SearchResult

THREE_LEFT = [X, X, O, O, O, X, EMPTY, EMPTY, EMPTY]


def test_format_report():
    text = format_report(SearchResult(DRAW, draws=5), 12)
    assert text == (
        "Analysed 5 games in 12 microseconds\n"
        "Noughts and crosses is a draw with perfect play"
    )


@pytest.mark.parametrize("outcome,wording", [(X, "win for X"), (O, "win for O")])
def test_format_report_names_the_winner(outcome, wording):
    text = format_report(SearchResult(outcome, x_wins=1, o_wins=1), 0)
    assert text.splitlines()[1] == f"Noughts and crosses is a {wording} with perfect play"


def test_timed_solve():
    result, elapsed_us = timed_solve(THREE_LEFT)
    assert result.games == 6
    assert isinstance(elapsed_us, int)
    assert elapsed_us >= 0


def test_main_without_arguments(capsys):
    assert solve_script.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"Analysed 255168 games in \d+ microseconds", lines[0])
    assert lines[1] == "Noughts and crosses is a draw with perfect play"


def test_main_with_position(capsys):
    assert solve_script.main(["--position", "XXO/OOX/..."]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert re.fullmatch(r"Analysed 6 games in \d+ microseconds", lines[0])
    assert lines[1] == "Noughts and crosses is a draw with perfect play"


def test_main_with_winning_position(capsys):
    solve_script.main(["--position", "XXO/.O./..X"])
    out = capsys.readouterr().out
    assert "is a win for O with perfect play" in out


def test_main_rejects_bad_position(capsys):
    with pytest.raises(SystemExit) as exc:
        solve_script.main(["--position", "XX./.../..."])
    assert exc.value.code == 2
    assert "bad position" in capsys.readouterr().err


def test_timed_solve_logs_duration(caplog):
    with caplog.at_level(logging.INFO, logger="noughts.report"):
        timed_solve(THREE_LEFT)
    assert re.search(r"Solved in \d+\.\d{3}s", caplog.text)
