"""Binary-search driven answers over monotone predicates and prefix data."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Iterable
from itertools import accumulate

from .numbers import NoSolutionError

_LOG_LIMIT = 10**10
_SQRT_LIMIT = 10**9


def shortest_longest_log(lengths: Iterable[int], cuts: int) -> int:
    """Return the smallest integer length bound reachable with at most ``cuts`` cuts.

    A log longer than the bound ``b`` is charged ``length // b`` cuts.
    """
    logs = list(lengths)

    def fits(limit: int) -> bool:
        needed = 0
        for length in logs:
            if length > limit:
                needed += length // limit
                if needed > cuts:
                    return False
        return True

    return 1 + bisect_left(range(1, _LOG_LIMIT + 1), True, key=fits)


def min_splitters(pipes: int, max_outputs: int) -> int:
    """Return the fewest splitters (outputs 2..max_outputs) giving ``pipes`` flows.

    Raises :class:`NoSolutionError` when even all splitters are not enough.
    """
    if pipes == 1:
        return 0
    k = max_outputs

    def enough(used: int) -> bool:
        total = k * (k + 1) // 2 - (k - used) * (k - used + 1) // 2
        if used:
            total -= used - 1
        return total >= pipes

    used = bisect_left(range(k + 1), True, key=enough)
    if used > k:
        raise NoSolutionError(f"{pipes} pipes cannot be built from splitters up to {k}")
    return used


def is_perfect_square(n: int) -> bool:
    """Tell whether ``n`` is the square of an integer no larger than 10**9."""
    if n < 0:
        return False
    root = math.isqrt(n)
    return root <= _SQRT_LIMIT and root * root == n


def staircase_heights(steps: Iterable[int], legs: Iterable[int]) -> list[int]:
    """For each leg length, return the height climbed before a too-tall step."""
    heights = list(steps)
    tallest = list(accumulate(heights, max))
    climbed = list(accumulate(heights))
    answers = []
    for leg in legs:
        reachable = bisect_right(tallest, leg)
        answers.append(climbed[reachable - 1] if reachable else 0)
    return answers


def worm_piles(pile_sizes: Iterable[int], labels: Iterable[int]) -> list[int]:
    """Return, for each worm label, the 1-based pile it belongs to."""
    bounds = list(accumulate(pile_sizes))
    return [bisect_left(bounds, label) + 1 for label in labels]