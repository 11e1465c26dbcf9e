"""Breadth-first search for disjoint paths from the start room to the end room.

The search works on a copy of the farm's adjacency matrix and uses its
diagonal as room state: 0 for a free room, 1 for a room already claimed by a
path, -1 for a dead end that can never lie on a useful path.
"""

from __future__ import annotations

from typing import Iterable, MutableSequence

from antfarm.anthill import Anthill
from antfarm.pathlist import Path, sort_paths

_FREE = 0
_CLAIMED = 1
_DEAD = -1


class NoPathError(Exception):
    """Raised when no path joins the start room to the end room."""


def compare_children(first: Path, second: Path) -> bool:
    """Whether two unfinished paths are out of order by their child counts."""
    if not first.ended and not second.ended:
        return first.children > second.children
    return False


def all_ended(paths: Iterable[Path]) -> bool:
    """Whether the search may stop.

    True when every path has reached the end room, or as soon as one finished
    path joins the start and end rooms directly.
    """
    ended = True
    for path in paths:
        if not path.ended:
            ended = False
        elif path.length == 2:
            return True
    return ended


def _conflicts(path: Path, finished: Path, end: int) -> bool:
    if path is finished or finished.length > path.length:
        return False
    return any(
        room != 0 and room != end and finished.visits(room)
        for room in path.nodes
    )


def delete_used_paths(
    paths: MutableSequence[Path], finished: Path, end: int
) -> None:
    """Drop, in place, every path at least as long as ``finished`` that shares
    an inner room with it."""
    paths[:] = [path for path in paths if not _conflicts(path, finished, end)]


def select_paths(paths: Iterable[Path]) -> list[Path]:
    """Copies of the finished paths, shortest first, in a stable order."""
    kept = [path.finish() for path in paths if path.ended]
    return sorted(kept, key=lambda path: path.length)


class Explorer:
    """Grows paths from the start room one room per step."""

    def __init__(self, anthill: Anthill) -> None:
        self.anthill = anthill
        self.size = anthill.room_count
        self.end = anthill.end()
        self.graph = [list(row) for row in anthill.graph]

    def _living_children(self, room: int) -> int:
        row = self.graph[room]
        return sum(
            1
            for other in range(self.size)
            if row[other] and self.graph[other][other] != _DEAD
        )

    def map_dead_nodes(self) -> None:
        """Mark as dead every inner room with fewer than two living neighbours."""
        changed = True
        while changed:
            changed = False
            for room in range(1, self.size - 1):
                if self.graph[room][room] == _DEAD:
                    continue
                if self._living_children(room) < 2:
                    self.graph[room][room] = _DEAD
                    changed = True

    def count_new_children(self, path: Path) -> bool:
        """Count the free neighbours of the path's current room.

        The count is stored in ``path.children``; the result tells whether
        there is at least one.
        """
        row = self.graph[path.current]
        path.children = sum(
            1
            for room in range(self.size)
            if row[room] and self.graph[room][room] == _FREE
        )
        return path.children > 0

    def expand(self, path: Path) -> list[Path]:
        """The paths that grow out of ``path`` in one step.

        A finished path is carried over as a copy.  Every other path branches
        into each free neighbour, claiming it, except the end room, which is
        never claimed and marks the branch as finished.
        """
        if path.ended:
            return [path.finish()]
        children = []
        for room in range(self.size):
            if self.graph[path.current][room] and self.graph[room][room] == _FREE:
                child = path.branch(room)
                if room == self.end:
                    child.ended = True
                else:
                    self.graph[room][room] = _CLAIMED
                children.append(child)
        return children

    def step(self, paths: Iterable[Path]) -> list[Path]:
        """Advance every living path by one room.

        Raises NoPathError when no path can go on.
        """
        survivors = [
            path for path in paths
            if path.ended or self.count_new_children(path)
        ]
        if not survivors:
            raise NoPathError("no path reaches the end room")
        sort_paths(survivors, compare_children)
        grown = [child for path in survivors for child in self.expand(path)]
        position = 0
        while position < len(grown):
            path = grown[position]
            if path.ended:
                delete_used_paths(grown, path, self.end)
                position = grown.index(path)
            position += 1
        return grown

    def explore(self) -> list[Path]:
        """Run the search until it may stop and return the paths it holds."""
        paths: list[Path] = []
        while True:
            if not paths:
                start = self.anthill.start()
                paths = [Path.start(start)]
                self.graph[start][start] = _CLAIMED
            else:
                paths = self.step(paths)
                if all_ended(paths):
                    return paths


def find_paths(anthill: Anthill) -> list[Path]:
    """The paths the ants will use, shortest first.

    Raises NoPathError when the end room cannot be reached.
    """
    explorer = Explorer(anthill)
    explorer.map_dead_nodes()
    selected = select_paths(explorer.explore())
    if not selected:
        raise NoPathError("no path reaches the end room")
    return selected