import io

import pytest

from antfarm.anthill import ParseError
from antfarm.cli import main, solve
from antfarm.search import NoPathError

CHAIN = [
    "3",
    "##start",
    "start 0 0",
    "mid 1 0",
    "##end",
    "end 2 0",
    "start-mid",
    "mid-end",
]

DIRECT = [
    "2",
    "##start",
    "a 0 0",
    "b 5 5",
    "##end",
    "z 1 1",
    "a-z",
    "a-b",
]

UNREACHABLE = [
    "2",
    "##start",
    "a 0 0",
    "b 5 5",
    "##end",
    "z 1 1",
    "a-b",
]


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main()
    return code, capsys.readouterr().out


def test_solve_direct_path_on_one_line():
    assert solve(DIRECT) == "L1-z L2-z\n"


def test_solve_chain_ends_with_last_ant_arriving():
    output = solve(CHAIN)
    lines = output.splitlines()
    assert lines[-1] == "L3-end"
    assert len(lines) == 4


def test_solve_invalid_raises_parse_error():
    with pytest.raises(ParseError):
        solve(["0", "##start", "a 0 0", "##end", "b 1 1", "a-b"])


def test_solve_unreachable_end_raises():
    with pytest.raises(NoPathError):
        solve(UNREACHABLE)


def test_main_echoes_description_then_moves(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "\n".join(CHAIN) + "\n")
    echo = "".join(f"{line}\n" for line in CHAIN) + "\n"
    assert code == 0
    assert out == echo + solve(CHAIN)


def test_main_stops_reading_at_blank_line(monkeypatch, capsys):
    text = "\n".join(CHAIN) + "\n\nignored 9 9\n"
    _, out = _run(monkeypatch, capsys, text)
    assert "ignored" not in out
    assert out.endswith(solve(CHAIN))


def test_main_reports_error(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "\n".join(UNREACHABLE) + "\n")
    assert code == 0
    assert out.endswith("\nERROR\n")
    assert out.startswith(UNREACHABLE[0] + "\n")


def test_main_empty_input_is_error(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "")
    assert code == 0
    assert out == "\nERROR\n"