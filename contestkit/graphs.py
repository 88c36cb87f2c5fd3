"""Graph traversals: observatories, team splitting, mazes, rumours and xor trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

from .numbers import NoSolutionError

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build a 0-based adjacency list from 1-based undirected edges."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) refers to a vertex outside 1..{n}")
        adjacency[a - 1].append(b - 1)
        adjacency[b - 1].append(a - 1)
    return adjacency


def _bfs(start: int, adjacency: Sequence[Sequence[int]], seen: list[bool]) -> Iterator[int]:
    """Yield vertices reachable from ``start`` in breadth-first order, marking them seen."""
    seen[start] = True
    queue = deque([start])
    while queue:
        node = queue.popleft()
        yield node
        for neighbour in adjacency[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                queue.append(neighbour)


def count_good_observatories(heights: Iterable[int], roads: Iterable[tuple[int, int]]) -> int:
    """Count observatories strictly higher than every neighbour along the roads.

    Roads use 1-based indices; an observatory with no roads counts as good.
    """
    elevation = list(heights)
    n = len(elevation)
    degree = [0] * n
    higher = [0] * n
    for a, b in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road ({a}, {b}) refers to an observatory outside 1..{n}")
        a -= 1
        b -= 1
        degree[a] += 1
        degree[b] += 1
        if elevation[a] > elevation[b]:
            higher[a] += 1
        elif elevation[a] < elevation[b]:
            higher[b] += 1
    return sum(d == h for d, h in zip(degree, higher))


def coach_teams(n: int, pairs: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Split students ``1..n`` into teams of three keeping every pair together.

    Raises :class:`NoSolutionError` when no such split exists.
    """
    adjacency = _adjacency(n, pairs)
    seen = [False] * n
    teams: list[list[int]] = []
    partial: list[list[int]] = []
    singles: list[int] = []
    for node in range(n):
        if seen[node]:
            continue
        if not adjacency[node]:
            singles.append(node + 1)
            continue
        component = [vertex + 1 for vertex in _bfs(node, adjacency, seen)]
        if len(component) > 3:
            raise NoSolutionError(f"{len(component)} students are bound to one team")
        if len(component) == 3:
            teams.append(component)
        else:
            partial.append(component)

    while partial and singles:
        group = partial[-1]
        if len(group) == 2:
            group.append(singles.pop())
        elif len(singles) >= 2:
            group.append(singles.pop())
            group.append(singles.pop())
        else:
            break
        teams.append(partial.pop())

    remaining = iter(reversed(singles))
    teams.extend(list(chunk) for chunk in zip(remaining, remaining, remaining))

    if len(teams) != n // 3:
        raise NoSolutionError("students cannot be split into teams of three")
    return teams


def fill_maze(grid: Iterable[str], k: int) -> list[str]:
    """Wall off ``k`` empty cells (marked ``X``) keeping the rest connected.

    Cells are taken from the far end of a breadth-first walk from the first
    empty cell in row-major order.
    """
    cells = [list(row) for row in grid]
    if k < 0:
        raise ValueError("k must not be negative")
    start = next(
        ((r, c) for r, row in enumerate(cells) for c, ch in enumerate(row) if ch == "."),
        None,
    )
    if start is None:
        raise ValueError("maze has no empty cell")

    seen = {start}
    queue = deque([start])
    order: list[tuple[int, int]] = []
    while queue:
        r, c = queue.popleft()
        order.append((r, c))
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < len(cells)
                and 0 <= nc < len(cells[nr])
                and cells[nr][nc] == "."
                and (nr, nc) not in seen
            ):
                seen.add((nr, nc))
                queue.append((nr, nc))

    if k > len(order):
        raise ValueError(f"cannot wall off {k} cells out of {len(order)}")
    for r, c in order[len(order) - k:]:
        cells[r][c] = "X"
    return ["".join(row) for row in cells]


def rumor_cost(costs: Iterable[int], pairs: Iterable[tuple[int, int]]) -> int:
    """Return the cheapest total bribe to spread a rumour through every friend group."""
    prices = list(costs)
    adjacency = _adjacency(len(prices), pairs)
    seen = [False] * len(prices)
    total = 0
    for node in range(len(prices)):
        if not seen[node]:
            total += min(prices[v] for v in _bfs(node, adjacency, seen))
    return total


def xor_tree_operations(
    edges: Iterable[tuple[int, int]],
    initial: Iterable[int],
    goal: Iterable[int],
) -> list[int]:
    """Return the nodes to pick, in breadth-first order, to turn ``initial`` into ``goal``.

    Picking a node flips it, its grandchildren, and so on down the tree rooted at 1.
    """
    start = list(initial)
    target = list(goal)
    n = len(start)
    if len(target) != n:
        raise ValueError("initial and goal must have the same length")
    if n == 0:
        return []
    adjacency = _adjacency(n, edges)
    seen = [False] * n
    seen[0] = True
    # Each entry: node, flips on its own depth parity, flips on the other parity.
    queue = deque([(0, 0, 0)])
    picked: list[int] = []
    while queue:
        node, same, other = queue.popleft()
        if (start[node] != target[node]) != (same % 2 == 1):
            picked.append(node + 1)
            same += 1
        for child in adjacency[node]:
            if not seen[child]:
                seen[child] = True
                queue.append((child, other, same))
    return picked