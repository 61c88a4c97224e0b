"""Graph drills: traversals, cycle detection, topological order, islands and grid paths."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterator, Sequence

Adjacency = Sequence[Sequence[int]]

_ISLAND_STEPS = (
    (1, 0), (-1, 0), (0, 1), (0, -1),
    (-1, -1), (1, 1), (1, -1), (-1, 1),
)
_GRID_STEPS = ((-1, 0), (0, -1), (0, 1), (1, 0))


def has_directed_cycle(adjacency: Adjacency) -> bool:
    """Return True if the directed graph given as adjacency lists has a cycle."""
    new, active, done = 0, 1, 2
    state = [new] * len(adjacency)
    for root in range(len(adjacency)):
        if state[root] != new:
            continue
        state[root] = active
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if state[nxt] == active:
                    return True
                if state[nxt] == new:
                    state[nxt] = active
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                state[node] = done
                stack.pop()
    return False


def has_undirected_cycle(adjacency: Adjacency) -> bool:
    """Return True if the undirected graph given as adjacency lists has a cycle.

    A self-loop counts as a cycle; a repeated edge back to the parent does not.
    """
    visited = [False] * len(adjacency)
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, int, Iterator[int]]] = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, node, iter(adjacency[nxt])))
                    break
                if nxt != parent:
                    return True
            else:
                stack.pop()
    return False


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Return the number of islands of '1' cells, joined in all eight directions."""
    land = {
        (i, j)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == "1"
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            i, j = stack.pop()
            for di, dj in _ISLAND_STEPS:
                cell = (i + di, j + dj)
                if cell in land:
                    land.remove(cell)
                    stack.append(cell)
    return islands


def minimum_cost_path(grid: Sequence[Sequence[int]]) -> int:
    """Return the least total cost from the top-left to the bottom-right cell.

    Moves go up, down, left or right; the cost of a path is the sum of the
    cells it visits, both ends included.
    """
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise ValueError("grid must be square and not empty")
    best = {(0, 0): grid[0][0]}
    heap = [(grid[0][0], 0, 0)]
    while heap:
        cost, i, j = heapq.heappop(heap)
        if cost > best[(i, j)]:
            continue
        if (i, j) == (n - 1, n - 1):
            return cost
        for di, dj in _GRID_STEPS:
            x, y = i + di, j + dj
            if 0 <= x < n and 0 <= y < n:
                candidate = cost + grid[x][y]
                if candidate < best.get((x, y), candidate + 1):
                    best[(x, y)] = candidate
                    heapq.heappush(heap, (candidate, x, y))
    return best[(n - 1, n - 1)]


def min_swaps(values: Sequence[int]) -> int:
    """Return the fewest swaps that sort the values."""
    order = sorted(range(len(values)), key=lambda i: (values[i], i))
    seen = [False] * len(values)
    swaps = 0
    for start in range(len(values)):
        length = 0
        position = start
        while not seen[position]:
            seen[position] = True
            position = order[position]
            length += 1
        if length > 1:
            swaps += length - 1
    return swaps


def bfs(adjacency: Adjacency) -> list[int]:
    """Return the breadth-first order of the vertices reachable from vertex 0."""
    visited = [False] * len(adjacency)
    queue = deque([0] if adjacency else [])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node)
        queue.extend(nxt for nxt in adjacency[node] if not visited[nxt])
    return order


def dfs(adjacency: Adjacency) -> list[int]:
    """Return the depth-first order of the vertices reachable from vertex 0."""
    visited = [False] * len(adjacency)
    stack = [0] if adjacency else []
    order: list[int] = []
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node)
        stack.extend(nxt for nxt in reversed(adjacency[node]) if not visited[nxt])
    return order


def topo_sort(adjacency: Adjacency) -> list[int]:
    """Return a topological order of a directed graph.

    Vertices on or behind a cycle never reach in-degree zero and are left out.
    """
    indegree = [0] * len(adjacency)
    for neighbours in adjacency:
        for nxt in neighbours:
            indegree[nxt] += 1
    queue = deque(v for v, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adjacency[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return order


def is_topological_order(adjacency: Adjacency, order: Sequence[int]) -> bool:
    """Return True if ``order`` lists every vertex once and no edge points backwards."""
    if sorted(order) != list(range(len(adjacency))):
        return False
    position = {vertex: index for index, vertex in enumerate(order)}
    return all(
        position[u] <= position[v]
        for u, neighbours in enumerate(adjacency)
        for v in neighbours
    )