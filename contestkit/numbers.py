"""Number-theoretic helpers: common steps, primality, factorisation, permutations."""

from __future__ import annotations

import math
from collections.abc import Iterable


class NoSolutionError(ValueError):
    """Raised when a problem instance admits no valid answer."""


def max_skip_step(start: int, cities: Iterable[int]) -> int:
    """Return the largest step that reaches every city from ``start``.

    Moving in steps of the returned size in either direction from ``start``
    visits every given coordinate.
    """
    positions = list(cities)
    if not positions:
        raise ValueError("at least one city is required")
    return math.gcd(*(city - start for city in positions))


def is_prime(n: int) -> bool:
    """Tell whether ``n`` (a positive integer) is prime, by trial division."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    if n == 1:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def prime_exponents(n: int) -> dict[int, int]:
    """Return the prime factorisation of ``n`` as ``{prime: exponent}``.

    Primes appear in increasing order; ``1`` factorises to an empty dict.
    """
    if n < 1:
        raise ValueError("n must be a positive integer")
    exponents: dict[int, int] = {}
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            n //= divisor
            exponents[divisor] = exponents.get(divisor, 0) + 1
        divisor += 1
    if n != 1:
        exponents[n] = exponents.get(n, 0) + 1
    return exponents


def is_psycho(n: int) -> bool:
    """Tell whether ``n`` has more even than odd prime exponents."""
    parities = [exponent % 2 for exponent in prime_exponents(n).values()]
    odd = sum(parities)
    even = len(parities) - odd
    return even > odd


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of ``1..n`` with no adjacent values differing by one.

    Raises :class:`NoSolutionError` when no such permutation exists.
    """
    if n == 1:
        return [1]
    if n < 4:
        raise NoSolutionError(f"no beautiful permutation of length {n}")
    result = [0] * n
    even_slots = len(range(0, n, 2))
    if n % 2:
        result[0::2] = range(n, n - even_slots, -1)
        result[1::2] = range(n - even_slots, 0, -1)
    else:
        half = n // 2
        result[0::2] = range(half, 0, -1)
        result[1::2] = range(n, half, -1)
    return result