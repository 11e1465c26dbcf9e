"""Reading and validating an ant farm description.

The description lists the number of ants, the rooms (``name x y``) and the
tunnels between them (``name1-name2``).  ``##start`` and ``##end`` mark the
entrance and the exit; other lines beginning with ``#`` are comments.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, TextIO

_LEADING_DIGITS = re.compile(r"[0-9]+")
_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when an ant farm description is invalid."""


@dataclass
class Anthill:
    """A parsed ant farm.

    Room 0 is the start room and room ``room_count - 1`` the end room.
    ``graph`` is a square adjacency matrix holding 1 for every tunnel.
    """

    ants: int
    rooms: list[str]
    room_count: int
    link_count: int
    graph: list[list[int]] = field(repr=False)

    def start(self) -> int:
        """Index of the start room."""
        return 0

    def end(self) -> int:
        """Index of the end room."""
        return self.room_count - 1

    def neighbours(self, room: int) -> list[int]:
        """Rooms joined to ``room`` by a tunnel, in index order."""
        row = self.graph[room]
        return [other for other in range(self.room_count) if row[other]]


@dataclass
class _Survey:
    """What a first pass over the description has found."""

    start: int = 0
    end: int = 0
    ants: int = 0
    links: int = 0
    rooms: int = 0
    first_room: int = 0
    first_link: int = 0


def read_lines(stream: TextIO) -> list[str]:
    """Read description lines until an empty line or a line starting with 'L'."""
    lines = []
    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line or line.startswith("L"):
            break
        lines.append(line)
    return lines


def check_room(line: str) -> bool:
    """Check the coordinates that follow the room name on a room line."""
    if " " not in line or "#" in line:
        return True
    text = line[line.index(" ") + 1:]
    pos = 0
    while pos < len(text):
        code = ord(text[pos])
        if 32 <= code <= 47 or 64 <= code <= 127:
            pos += 1
        if pos >= len(text) or text[pos] not in _DIGITS:
            return False
        pos += 1
    return True


def _command_target(lines: list[str], index: int) -> int:
    """Line that a ``##start`` or ``##end`` command at ``index`` refers to, or 0."""
    if index + 1 >= len(lines):
        return 0
    while (
        index < len(lines)
        and lines[index].startswith("#")
        and " " not in lines[index]
    ):
        index += 1
    if index >= len(lines):
        return 0
    line = lines[index]
    if " " not in line and "-" in line and "#" not in line:
        return 0
    return index


def _survey_line(lines: list[str], index: int, survey: _Survey) -> bool:
    """Record what line ``index`` holds; False ends the survey."""
    line = lines[index]
    if line.startswith("##"):
        if line == "##start":
            survey.start = _command_target(lines, index)
        elif line == "##end":
            survey.end = _command_target(lines, index)
    elif line.startswith("#") or line.startswith("L"):
        pass
    elif line[0] in _DIGITS and " " not in line and "-" not in line:
        survey.ants = int(_LEADING_DIGITS.match(line).group())
    elif " " not in line and "-" in line:
        if survey.first_link == 0:
            survey.first_link = index
        survey.links += 1
    elif " " in line and "-" not in line:
        if survey.first_room == 0:
            survey.first_room = index
        survey.rooms += 1
        if not check_room(line):
            return False
    else:
        return False
    return True


def _room_name(line: str) -> str:
    if " " not in line:
        raise ParseError(f"expected a room, got {line!r}")
    return line[: line.index(" ")]


def _room_index(rooms: list[str], name: str) -> int:
    try:
        return rooms.index(name)
    except ValueError:
        raise ParseError(f"unknown room {name!r}") from None


def _collect_rooms(lines: list[str], survey: _Survey) -> list[str]:
    rooms = [_room_name(lines[survey.start])]
    for index in range(survey.first_room, survey.first_link):
        line = lines[index]
        if line.startswith("#") or index in (survey.start, survey.end):
            continue
        rooms.append(_room_name(line))
    rooms.append(_room_name(lines[survey.end]))
    return rooms


def _build_graph(
    lines: list[str], first_link: int, rooms: list[str], size: int
) -> list[list[int]]:
    graph = [[0] * size for _ in range(size)]
    for line in lines[first_link:]:
        if line.startswith("#"):
            continue
        left, dash, right = line.partition("-")
        if not dash:
            raise ParseError(f"expected a tunnel, got {line!r}")
        first = _room_index(rooms, left)
        second = _room_index(rooms, right)
        graph[first][second] = 1
        graph[second][first] = 1
    return graph


def parse(lines: Iterable[str]) -> Anthill:
    """Build an :class:`Anthill` from description lines, or raise ParseError."""
    lines = [line for line in lines if line]
    survey = _Survey()
    for index in range(len(lines)):
        if not _survey_line(lines, index, survey):
            break

    if survey.start == survey.end:
        raise ParseError("start and end rooms are missing or the same")
    if survey.rooms < 2:
        raise ParseError("at least two rooms are needed")
    if survey.links < 1:
        raise ParseError("at least one tunnel is needed")
    if survey.ants <= 0:
        raise ParseError("the number of ants must be positive")
    if survey.start == 0 or survey.end == 0:
        raise ParseError("start or end room is missing")

    rooms = _collect_rooms(lines, survey)
    size = max(survey.rooms, len(rooms)) + 1
    graph = _build_graph(lines, survey.first_link, rooms, size)
    return Anthill(
        ants=survey.ants,
        rooms=rooms,
        room_count=survey.rooms,
        link_count=survey.links,
        graph=graph,
    )