"""Counting drills on integer arrays: pairs, triangles, triplets and inversions."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable


def closest_to_zero(values: Iterable[int]) -> int:
    """Return the sum of two elements that lies closest to zero."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("values must not be empty")
    i, j = 0, len(ordered) - 1
    best = ordered[i] + ordered[j]
    while i < j:
        current = ordered[i] + ordered[j]
        if current == 0:
            return 0
        if abs(current) < abs(best):
            best = current
        if current > 0:
            j -= 1
        else:
            i += 1
    return best


def count_triangles(values: Iterable[int]) -> int:
    """Return how many triples of sides can form a triangle."""
    ordered = sorted(values)
    count = 0
    for c in range(len(ordered) - 1, 1, -1):
        a, b = 0, c - 1
        while a < b:
            if ordered[a] + ordered[b] > ordered[c]:
                count += b - a
                b -= 1
            else:
                a += 1
    return count


def count_triplets(values: Iterable[int]) -> int:
    """Return how many triples have one element equal to the sum of the other two."""
    ordered = sorted(values)
    count = 0
    for i in range(len(ordered) - 1, -1, -1):
        j, k = 0, i - 1
        while k > j:
            pair = ordered[j] + ordered[k]
            if ordered[i] == pair:
                count += 1
                j += 1
                k -= 1
            elif ordered[i] > pair:
                j += 1
            else:
                k -= 1
    return count


def count_inversions(values: Iterable[int]) -> int:
    """Return the number of pairs i < j with values[i] > values[j]."""
    items = list(values)
    ordered = sorted(items)
    size = len(items)
    tree = [0] * (size + 1)

    def query(pos: int) -> int:
        total = 0
        while pos > 0:
            total += tree[pos]
            pos -= pos & -pos
        return total

    def update(pos: int) -> None:
        while pos <= size:
            tree[pos] += 1
            pos += pos & -pos

    inversions = 0
    for value in reversed(items):
        rank = bisect_left(ordered, value) + 1
        inversions += query(rank - 1)
        update(rank)
    return inversions


def count_power_pairs(xs: Iterable[int], ys: Iterable[int]) -> int:
    """Return how many pairs (x, y) of non-negative integers satisfy x**y > y**x."""
    y_sorted = sorted(ys)
    n = len(y_sorted)
    counts = Counter(y_sorted)
    zero, one, two, three, four = (counts[v] for v in range(5))
    total = 0
    for x in xs:
        if x == 0:
            continue
        if x == 1:
            total += zero
        elif x == 2:
            total += n - bisect_right(y_sorted, 2)
            total -= three + four
            total += one + zero
        else:
            total += n - bisect_right(y_sorted, x)
            total += one + zero
            if x == 3:
                total += two
    return total