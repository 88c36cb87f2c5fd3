# contestkit

Well-known competitive-programming problems, solved as plain Python
functions. Use them as reference answers, to check your own solutions, or
to experiment with the algorithms behind them.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

- `contestkit.numbers` covers number theory:
  - `is_prime(n)` tests primality by trial division.
  - `prime_exponents(n)` returns `{prime: exponent}` in increasing prime order.
  - `is_psycho(n)` is true when `n` has more even than odd prime exponents.
  - `max_skip_step(start, cities)` gives the largest step that reaches every
    city from `start`.
  - `beautiful_permutation(n)` returns a permutation of `1..n` in which no two
    neighbours differ by one.
  - `NoSolutionError`, a `ValueError` subclass, is raised by the functions in
    every module when an instance has no answer. For example,
    `beautiful_permutation(2)` raises it.
- `contestkit.searching` holds answers found by binary search over a monotone
  condition or prefix data:
  - `shortest_longest_log(lengths, cuts)`
  - `min_splitters(pipes, max_outputs)`, which raises `NoSolutionError` when
    even all splitters are not enough
  - `is_perfect_square(n)`, which only counts squares of integers up to 10**9
  - `staircase_heights(steps, legs)`
  - `worm_piles(pile_sizes, labels)`
- `contestkit.graphs` works on graphs and grids. Vertices are numbered from 1.
  - `count_good_observatories(heights, roads)`
  - `coach_teams(n, pairs)` splits students into teams of three, or raises
    `NoSolutionError`.
  - `fill_maze(grid, k)` walls off `k` cells with `X` and keeps the remaining
    empty cells connected.
  - `rumor_cost(costs, pairs)`
  - `xor_tree_operations(edges, initial, goal)` returns the nodes to pick, in
    breadth-first order from node 1.
- `contestkit.sequences` works on sequences:
  - `knapsack(items, capacity)` takes `(weight, value)` pairs.
  - `match_apartments(applicants, apartments, tolerance)`
  - `longest_repetition(text)`

Functions raise `ValueError` for malformed input. This covers edges that name
a vertex outside the graph, a maze with no empty cell, and a negative number.

## Library use

```python
from contestkit.graphs import count_good_observatories
from contestkit.numbers import is_prime, is_psycho
from contestkit.searching import is_perfect_square, staircase_heights, worm_piles
from contestkit.sequences import longest_repetition

is_prime(7)                                          # True
is_psycho(4)                                         # True  (2**2)
is_perfect_square(16)                                # True
longest_repetition("ATTCGGGA")                       # 3
staircase_heights([1, 2, 1, 5], [1, 2, 4, 9, 10])    # [1, 4, 4, 9, 9]
worm_piles([2, 7, 3, 4, 9], [1, 25, 11])             # [1, 5, 3]

# Observatories are numbered from 1. Roads join pairs of them.
count_good_observatories([1, 2, 3, 4], [(1, 3), (2, 3), (2, 4)])  # 2
```

## Command line

Installing the package also installs a `contestkit` command. It reads a
problem instance, as whitespace-separated integers, from a file named on the
command line or from standard input, and prints the answer to standard
output.

```
contestkit --help
contestkit scuza [input]
contestkit coach [input]
contestkit psycho [input]
```

- `scuza`: a number of test cases follows. Each case gives the number of steps
  and the number of legs, then the step heights, then the leg lengths. The
  command prints one line per case, with each height reached followed by a
  space.
- `coach`: the number of students and the number of pairs, then the pairs.
  The command prints one team per line, or `-1` when no split exists.
- `psycho`: a count, then that many numbers. The command prints
  `Psycho Number` or `Ordinary Number` for each one.

For example, `echo "1 4 5 1 2 1 5 1 2 4 9 10" | contestkit scuza` prints
`1 4 4 9 9 `.

If the input is malformed or cannot be read, the command writes a message
beginning with `contestkit:` to standard error and exits with status 1.

## Limitations

The command covers only the three problems above. All the other problems are
available only as library functions, and the command has no subcommand for
them.