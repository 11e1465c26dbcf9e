"""Move a colony of ants through an anthill from start room to end room, turn by turn."""

__version__ = "1.0.0"