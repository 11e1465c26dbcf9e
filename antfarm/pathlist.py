"""Paths through the ant farm and the helpers that build and order them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, MutableSequence

_RULE = "----------"


@dataclass(eq=False)
class Path:
    """A walk through the farm, as the list of room indices it visits.

    ``current`` is the room the walk was last extended to, or -1 once the
    path has been copied for keeping.  ``children`` is the number of
    unvisited neighbours found for ``current``; ``ended`` is set when the
    walk has reached the end room.  Paths compare by identity.
    """

    nodes: list[int] = field(default_factory=list)
    current: int = 0
    children: int = 0
    ended: bool = False

    @classmethod
    def start(cls, room: int) -> Path:
        """A path holding the single room ``room``."""
        return cls(nodes=[room], current=room)

    @property
    def length(self) -> int:
        """Number of rooms on the path."""
        return len(self.nodes)

    def branch(self, room: int) -> Path:
        """A copy of this path extended to ``room``."""
        return Path(nodes=[*self.nodes, room], current=room, ended=self.ended)

    def finish(self) -> Path:
        """A copy of this path with no current room, kept as it is."""
        return Path(nodes=list(self.nodes), current=-1, ended=self.ended)

    def visits(self, room: int) -> bool:
        """Whether ``room`` lies on this path."""
        return room in self.nodes

    def _node_line(self) -> str:
        if not self.nodes:
            return ""
        return "->".join(str(room) for room in self.nodes) + "\n"

    def describe(self) -> str:
        """A multi-line summary of the path for debugging."""
        return (
            f"{_RULE}\n"
            f"ENDED = {int(self.ended)}\n"
            f"CURR = {self.current}\n"
            f"NCHILDS = {self.children}\n"
            f"LENGTH = {self.length}\n"
            f"{self._node_line()}"
            f"{_RULE}\n"
        )


def describe_paths(paths: Iterable[Path]) -> str:
    """Summaries of every path, numbered, between a header and a footer."""
    parts = ["-------------PATHLIST------------\n"]
    for number, path in enumerate(paths):
        parts.append(f"Path {number} :\n")
        parts.append(path.describe())
    parts.append("-------------END PATHlIST-----------\n")
    return "".join(parts)


def sort_paths(
    paths: MutableSequence[Path], compare: Callable[[Path, Path], bool]
) -> None:
    """Order ``paths`` in place by swapping neighbours that ``compare`` flags.

    After every swap the scan starts again from the second position, so the
    first pair is only examined on the first pass.
    """
    position = 0
    while position < len(paths) - 1:
        if compare(paths[position], paths[position + 1]):
            paths[position], paths[position + 1] = (
                paths[position + 1],
                paths[position],
            )
            position = 0
        position += 1