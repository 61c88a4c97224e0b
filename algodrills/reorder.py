"""Array reordering drills: zig-zag, alternating extremes, group reversal and merges."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def zig_zag(values: Iterable[int]) -> list[int]:
    """Return the values rearranged so that a < b > c < d > e ... holds pairwise."""
    result = list(values)
    for i in range(len(result) - 1):
        if i % 2 == 0:
            if not result[i] < result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
        elif not result[i] > result[i + 1]:
            result[i], result[i + 1] = result[i + 1], result[i]
    return result


def rearrange_max_min(values: Sequence[int]) -> list[int]:
    """Alternate the last and first remaining elements of a sorted sequence.

    The result starts with the largest value, then the smallest, then the
    second largest, and so on.
    """
    result: list[int] = []
    low, high = 0, len(values) - 1
    take_high = True
    while len(result) < len(values):
        if take_high:
            result.append(values[high])
            high -= 1
        else:
            result.append(values[low])
            low += 1
        take_high = not take_high
    return result


def reverse_in_groups(values: Sequence[int], k: int) -> list[int]:
    """Reverse every consecutive group of ``k`` elements; the last group may be shorter."""
    if k <= 0:
        raise ValueError("group size must be positive")
    result: list[int] = []
    for start in range(0, len(values), k):
        result.extend(reversed(values[start:start + k]))
    return result


def alternate_max_min(values: Iterable[int]) -> list[int]:
    """Sort the values and emit them as max, min, second max, second min, ..."""
    ordered = sorted(values)
    n = len(ordered)
    result: list[int] = []
    for i in range(n // 2):
        result.append(ordered[n - i - 1])
        result.append(ordered[i])
    if n % 2:
        result.append(ordered[n // 2])
    return result


def sort012(values: Sequence[int]) -> list[int]:
    """Sort a sequence made of 0s, 1s and 2s by counting them.

    Positions past the counted 0s, 1s and 2s keep their original values.
    """
    counts = Counter(values)
    filled = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]
    return filled + list(values[len(filled):])


def merge_without_extra_space(
    first: Sequence[int], second: Sequence[int]
) -> tuple[list[int], list[int]]:
    """Merge two sorted sequences so the smallest values land in the first.

    Returns both parts sorted, with the same lengths as the inputs.
    """
    a, b = list(first), list(second)
    n, m = len(a), len(b)
    moved = 0
    i = j = 0
    steps = n
    while steps > 0 and i < n and j < m:
        steps -= 1
        if a[i] < b[j]:
            i += 1
        else:
            moved += 1
            j += 1
    for offset in range(moved):
        b[offset], a[n - offset - 1] = a[n - offset - 1], b[offset]
    a.sort()
    b.sort()
    return a, b


def merge_by_swapping(
    first: Sequence[int], second: Sequence[int]
) -> tuple[list[int], list[int]]:
    """Merge two sorted sequences by swapping the tail of the first with the head of the second."""
    a, b = list(first), list(second)
    x, y = len(a) - 1, 0
    while x >= 0 and y < len(b) and a[x] > b[y]:
        a[x], b[y] = b[y], a[x]
        x -= 1
        y += 1
    a.sort()
    b.sort()
    return a, b


def leaders(values: Sequence[int]) -> list[int]:
    """Return the elements greater than or equal to every element to their right, in order."""
    found: list[int] = []
    best: int | None = None
    for value in reversed(values):
        if best is None or best <= value:
            best = value
            found.append(value)
    found.reverse()
    return found


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the k-th smallest value, counting from 1."""
    ordered = sorted(values)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}")
    return ordered[k - 1]