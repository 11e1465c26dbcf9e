"""Turning the chosen paths and ant assignment into turn-by-turn moves."""

from __future__ import annotations

from typing import Sequence

from antfarm.anthill import Anthill
from antfarm.pathlist import Path


def step_text(ant: int, room_name: str) -> str:
    """The move of one ant into one room, as ``L<ant>-<room>``."""
    return f"L{ant}-{room_name}"


def record_moves(
    anthill: Anthill,
    paths: Sequence[Path],
    assignment: Sequence[Sequence[int]],
) -> list[str]:
    """The moves of every turn, one string per turn.

    ``assignment`` holds, for each path, the ants that walk it in departure
    order.  The n-th ant on a path leaves on turn n and enters one room per
    turn after the start room.  The list stops at the first turn in which
    no ant moves.
    """
    longest = max(
        (len(ants) + path.length for path, ants in zip(paths, assignment)),
        default=-1,
    )
    turns: list[list[str]] = [[] for _ in range(longest + 1)]
    for path, ants in zip(paths, assignment):
        rooms = path.nodes[1:]
        for departure, ant in enumerate(ants):
            for offset, room in enumerate(rooms):
                turns[departure + offset].append(
                    step_text(ant, anthill.rooms[room])
                )
    lines = []
    for steps in turns:
        if not steps:
            break
        lines.append(" ".join(steps))
    return lines


def format_moves(turns: Sequence[str], direct: bool) -> str:
    """The text printed for the moves.

    One line per turn, or all turns on one line when the start room leads
    straight to the end room.
    """
    if not turns:
        return ""
    if direct:
        return " ".join(turns) + "\n"
    return "".join(f"{turn}\n" for turn in turns)