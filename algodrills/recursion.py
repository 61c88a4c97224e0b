"""Recursive drills: flood fill, Josephus, grid paths and the special keyboard."""

from __future__ import annotations

from collections.abc import Sequence
from math import comb


def flood_fill(grid: Sequence[Sequence[int]], x: int, y: int, colour: int) -> list[list[int]]:
    """Return a copy of the grid with the 4-connected region around (x, y) recoloured."""
    result = [list(row) for row in grid]
    if not (0 <= x < len(result) and 0 <= y < len(result[x])):
        raise IndexError("start cell is outside the grid")
    original = result[x][y]
    if original == colour:
        return result
    stack = [(x, y)]
    while stack:
        i, j = stack.pop()
        if 0 <= i < len(result) and 0 <= j < len(result[i]) and result[i][j] == original:
            result[i][j] = colour
            stack.extend(((i + 1, j), (i, j + 1), (i - 1, j), (i, j - 1)))
    return result


def josephus(n: int, k: int) -> int:
    """Return the 1-based position of the survivor when every k-th person is removed."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if k < 1:
        raise ValueError("k must be at least 1")
    survivor = 0
    for size in range(2, n + 1):
        survivor = (survivor + k) % size
    return survivor + 1


def number_of_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an m x n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be at least 1")
    return comb(m + n - 2, m - 1)


def optimal_keys(presses: int) -> int:
    """Return the most 'A's a keyboard with A, Ctrl-A, Ctrl-C and Ctrl-V can print."""
    if presses < 0:
        raise ValueError("presses must not be negative")
    best = list(range(min(presses, 5) + 1))
    for j in range(6, presses + 1):
        best.append(
            max([best[j - 1] + 1] + [(j - i - 1) * best[i] for i in range(1, j - 2)])
        )
    return best[presses]