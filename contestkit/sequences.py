"""Sequence problems: knapsack, greedy matching and runs of repeated characters."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby

from .numbers import NoSolutionError


def knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Return the best total value of ``(weight, value)`` items fitting ``capacity``.

    Raises :class:`NoSolutionError` when no selection, not even the empty one, fits.
    """
    best: dict[int, int] = {0: 0}
    for weight, value in items:
        for total, worth in list(best.items()):
            reached = total + weight
            gained = worth + value
            if best.get(reached, gained - 1) < gained:
                best[reached] = gained
    fitting = [worth for total, worth in best.items() if total <= capacity]
    if not fitting:
        raise NoSolutionError(f"nothing fits into capacity {capacity}")
    return max(fitting)


def match_apartments(
    applicants: Iterable[int], apartments: Iterable[int], tolerance: int
) -> int:
    """Return how many applicants get an apartment within ``tolerance`` of their wish."""
    wishes = sorted(applicants)
    sizes = sorted(apartments)
    matched = 0
    while wishes and sizes:
        if wishes[-1] > sizes[-1] + tolerance:
            wishes.pop()
        elif wishes[-1] < sizes[-1] - tolerance:
            sizes.pop()
        else:
            matched += 1
            wishes.pop()
            sizes.pop()
    return matched


def longest_repetition(text: str) -> int:
    """Return the length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(text)), default=0)