# antfarm

`antfarm` reads the description of an anthill and prints how the ants walk
from the start room to the end room, turn by turn. The description gives a
number of ants, a set of rooms, the tunnels between them, and which rooms are
the start and the end. The ants use several paths at once, and these paths
share no rooms.

## Installing

```
pip install .
```

## Running

The map is read from standard input:

```
antfarm < map.txt
```

A map looks like this:

```
3
##start
start 0 0
a 1 0
b 1 1
##end
end 2 0
start-a
start-b
a-end
b-end
```

- A line that starts with a digit and holds no space or dash gives the number
  of ants.
- A room is `name x y`. A `##start` or `##end` line marks the next room line.
- A tunnel is `name-name`.
- Other lines beginning with `#` are comments. Reading stops at the first
  empty line or at the first line starting with `L`.

The command first echoes the lines of the map it has read. It then prints a
blank line and one line per turn. Each move is written `L<ant>-<room>`:

```
L1-a L2-b
L1-end L3-a L2-end
L3-end
```

When the start room is joined directly to the end room, all the moves are
printed on a single line.

If the map is invalid or the end room cannot be reached, the command prints
`ERROR` after the echoed map.

## Using it from Python

```python
from antfarm.cli import solve

with open("map.txt") as f:
    print(solve(f.read().splitlines()), end="")
```

`solve` returns the moves text. It raises `antfarm.anthill.ParseError` when
the map is invalid, and `antfarm.search.NoPathError` when the end room cannot
be reached.

Each step is also available on its own:

- `antfarm.anthill.parse` builds an `Anthill`.
- `antfarm.search.find_paths` chooses the paths, shortest first.
- `antfarm.ants.split_ants` shares the ants among the paths.
- `antfarm.moves.record_moves` and `antfarm.moves.format_moves` produce the
  turns.

`antfarm.pathlist.describe_paths` gives a readable summary of a list of
paths, for debugging.

## Running the tests

```
pip install .[test]
pytest
```