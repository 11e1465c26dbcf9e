"""Command that reads an ant farm on standard input and prints the moves."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from antfarm.anthill import parse, read_lines
from antfarm.ants import split_ants
from antfarm.moves import format_moves, record_moves
from antfarm.search import NoPathError, find_paths


def solve(lines: Iterable[str]) -> str:
    """The moves text for a farm description.

    Raises ParseError for an invalid description and NoPathError when the
    end room cannot be reached.
    """
    anthill = parse(lines)
    paths = find_paths(anthill)
    assignment = split_ants([path.length for path in paths], anthill.ants)
    turns = record_moves(anthill, paths, assignment)
    return format_moves(turns, direct=paths[0].length == 2)


def main(argv: Sequence[str] | None = None) -> int:
    """Echo the description, a blank line, then the moves or ``ERROR``."""
    lines = read_lines(sys.stdin)
    sys.stdout.write("".join(f"{line}\n" for line in lines) + "\n")
    try:
        output = solve(lines)
    except (ValueError, NoPathError):
        output = "ERROR\n"
    sys.stdout.write(output)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())