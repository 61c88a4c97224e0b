"""Greedy drills: activities, meetings, toys, products, candy and ball paths."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def _paired(starts: Sequence[int], ends: Sequence[int]) -> list[tuple[int, int]]:
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    return list(zip(starts, ends))


def activity_selection(starts: Sequence[int], ends: Sequence[int]) -> int:
    """Return the most activities one person can do; an activity may start when the last ends."""
    jobs = sorted(_paired(starts, ends), key=lambda job: job[1])
    if not jobs:
        return 0
    count = 1
    last = jobs[0][1]
    for start, end in jobs[1:]:
        if start >= last:
            count += 1
            last = end
    return count


def max_balls(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the most balls collected walking two sorted roads, switching at equal values."""
    n, m = len(a), len(b)
    i = j = 0
    sum_a = sum_b = total = 0
    while i < n and j < m:
        if a[i] == b[j]:
            while i + 1 < n and a[i] == a[i + 1]:
                sum_a += a[i]
                i += 1
            while j + 1 < m and b[j] == b[j + 1]:
                sum_b += b[j]
                j += 1
            total += max(sum_a, sum_b) + a[i]
            sum_a = sum_b = 0
            i += 1
            j += 1
        elif a[i] > b[j]:
            sum_b += b[j]
            j += 1
        else:
            sum_a += a[i]
            i += 1
    sum_a += sum(a[i:])
    sum_b += sum(b[j:])
    return total + max(sum_a, sum_b)


def toy_count(prices: Iterable[int], budget: int) -> int:
    """Return how many toys can be bought within the budget, cheapest first."""
    count = 0
    for spent in accumulate(sorted(prices)):
        if spent > budget:
            break
        count += 1
    return count


def min_product_sum(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the smallest sum of pairwise products over all pairings of a and b."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    return sum(x * y for x, y in zip(sorted(a), sorted(b, reverse=True)))


def max_meetings(starts: Sequence[int], ends: Sequence[int]) -> list[int]:
    """Return the 1-based meetings held in one room, in order of their end times.

    A meeting is held only if it starts strictly after the previous one ended,
    the room being free from time 0.
    """
    meetings = sorted(
        (end, index, start)
        for index, (start, end) in enumerate(_paired(starts, ends), start=1)
    )
    held: list[int] = []
    last = 0
    for end, index, start in meetings:
        if start > last:
            held.append(index)
            last = end
    return held


def candy_store(prices: Iterable[int], k: int) -> tuple[int, int]:
    """Return the least and most money needed to get every candy.

    Each candy bought gives up to ``k`` others free.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    ordered = sorted(prices)
    n = len(ordered)
    bought = -(-n // (k + 1))
    return sum(ordered[:bought]), sum(ordered[n - bought:])