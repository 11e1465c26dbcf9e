"""Sharing the ants out between paths of different lengths."""

from __future__ import annotations

from typing import Sequence


def path_quotas(lengths: Sequence[int], nbants: int) -> list[int]:
    """How many ants each path takes.

    ``lengths`` are the path lengths, shortest first.  A path starts taking
    ants only once the turn count reaches how much longer it is than the
    first path; each turn every open path takes one ant, in order.
    """
    lengths = list(lengths)
    if nbants < 0:
        raise ValueError("the number of ants cannot be negative")
    if not lengths:
        if nbants:
            raise ValueError("there is no path for the ants")
        return []
    delays = [length - lengths[0] for length in lengths]
    quotas = [0] * len(lengths)
    remaining = nbants
    turn = 0
    while remaining:
        for index, delay in enumerate(delays):
            if remaining and delay <= turn:
                quotas[index] += 1
                remaining -= 1
        turn += 1
    return quotas


def split_ants(lengths: Sequence[int], nbants: int) -> list[list[int]]:
    """The ant numbers, from 1, that walk each path, in departure order.

    Ants are dealt to the paths in turn until each path has its quota.
    """
    quotas = path_quotas(lengths, nbants)
    assignment: list[list[int]] = [[] for _ in quotas]
    ant = 1
    while ant <= nbants:
        for quota, ants in zip(quotas, assignment):
            if ant <= nbants and len(ants) < quota:
                ants.append(ant)
                ant += 1
    return assignment