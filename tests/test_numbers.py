import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from contestkit.numbers import (
    NoSolutionError,
    beautiful_permutation,
    is_prime,
    is_psycho,
    max_skip_step,
    prime_exponents,
)

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]


@given(st.integers(-10**6, 10**6), st.lists(st.integers(-10**6, 10**6), min_size=1, max_size=20))
def test_skip_step_divides_every_distance(start, cities):
    step = max_skip_step(start, cities)
    assert step >= 0
    if step:
        assert all((city - start) % step == 0 for city in cities)
    else:
        assert all(city == start for city in cities)


@given(
    st.integers(-1000, 1000),
    st.lists(st.integers(-1000, 1000), min_size=1, max_size=10),
    st.integers(1, 50),
)
def test_skip_step_scales_linearly(start, cities, factor):
    base = max_skip_step(start, cities)
    scaled = max_skip_step(start * factor, [c * factor for c in cities])
    assert scaled == base * factor


@given(st.integers(-10**6, 10**6), st.integers(-10**6, 10**6))
def test_skip_step_single_city_is_distance(start, city):
    assert max_skip_step(start, [city]) == abs(city - start)


def test_skip_step_requires_cities():
    with pytest.raises(ValueError):
        max_skip_step(3, [])


def test_one_is_not_prime():
    assert is_prime(1) is False


@pytest.mark.parametrize("n", [0, -7])
def test_is_prime_rejects_non_positive(n):
    with pytest.raises(ValueError):
        is_prime(n)


@given(st.integers(2, 3000), st.integers(2, 3000))
def test_products_are_not_prime(a, b):
    assert is_prime(a * b) is False


@given(st.integers(2, 10**6))
def test_is_prime_agrees_with_factorisation(n):
    assert is_prime(n) == (prime_exponents(n) == {n: 1})


@given(st.integers(1, 10**7))
def test_factorisation_reconstructs_number(n):
    exponents = prime_exponents(n)
    assert math.prod(p**e for p, e in exponents.items()) == n
    assert list(exponents) == sorted(exponents)
    assert all(is_prime(p) for p in exponents)
    assert all(e >= 1 for e in exponents.values())


def test_factorisation_of_one_is_empty():
    assert prime_exponents(1) == {}


def test_factorisation_rejects_zero():
    with pytest.raises(ValueError):
        prime_exponents(0)


def test_one_is_ordinary():
    assert is_psycho(1) is False


@given(st.sampled_from(SMALL_PRIMES))
def test_prime_ordinary_square_psycho(p):
    assert is_psycho(p) is False
    assert is_psycho(p * p) is True


@given(st.lists(st.sampled_from(SMALL_PRIMES), min_size=1, max_size=4, unique=True))
def test_product_of_distinct_primes_is_ordinary(primes):
    assert is_psycho(math.prod(primes)) is False


def test_permutation_of_one():
    assert beautiful_permutation(1) == [1]


@pytest.mark.parametrize("n", [2, 3])
def test_permutation_impossible_for_small_n(n):
    with pytest.raises(NoSolutionError):
        beautiful_permutation(n)


def test_no_solution_error_is_value_error():
    with pytest.raises(ValueError):
        beautiful_permutation(2)


def test_permutation_of_four():
    assert beautiful_permutation(4) == [2, 4, 1, 3]


@given(st.integers(4, 300))
def test_permutation_is_beautiful(n):
    perm = beautiful_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(perm, perm[1:]))