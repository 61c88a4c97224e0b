"""Hashing drills: pairing, intersections, windows, quadruples and frequency orders."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def can_pair(values: Sequence[int], k: int) -> bool:
    """Return True if the values split into pairs whose sums are all divisible by ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    if len(values) % 2:
        return False
    remainders = Counter(value % k for value in values)
    for remainder, count in remainders.items():
        if remainder == 0:
            if count % 2:
                return False
        elif count != remainders.get(k - remainder, 0):
            return False
    return True


def common_elements(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the values common to both inputs, with multiplicity, in sorted order."""
    shared = Counter(first) & Counter(second)
    return sorted(shared.elements())


def count_distinct(values: Sequence[int], k: int) -> list[int]:
    """Return the number of distinct values in every window of ``k`` consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}")
    window = Counter(values[:k])
    counts = [len(window)]
    for outgoing, incoming in zip(values, values[k:]):
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        window[incoming] += 1
        counts.append(len(window))
    return counts


def four_sum(values: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruple of values summing to ``target``.

    Quadruples come in lexicographic order.
    """
    ordered = sorted(values)
    n = len(ordered)
    found: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            base = ordered[i] + ordered[j]
            left, right = j + 1, n - 1
            while left < right:
                total = base + ordered[left] + ordered[right]
                if total == target:
                    found.append([ordered[i], ordered[j], ordered[left], ordered[right]])
                    left += 1
                    right -= 1
                    while left < right and ordered[left] == ordered[left - 1]:
                        left += 1
                    while left < right and ordered[right] == ordered[right + 1]:
                        right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return found


def max_zero_sum_length(values: Iterable[int]) -> int:
    """Return the length of the longest contiguous run that sums to zero."""
    first_seen: dict[int, int] = {}
    total = best = 0
    for index, value in enumerate(values):
        total += value
        if total == 0:
            best = index + 1
        elif total in first_seen:
            best = max(best, index - first_seen[total])
        else:
            first_seen[total] = index
    return best


def longest_consecutive(values: Iterable[int]) -> int:
    """Return the size of the largest set of consecutive integers among the values."""
    present = set(values)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        best = max(best, length)
    return best


def sort_by_other(values: Iterable[int], order: Iterable[int]) -> list[int]:
    """Order the values as they appear in ``order``; the rest follow in sorted order."""
    counts = Counter(values)
    result: list[int] = []
    for key in order:
        result.extend([key] * counts.pop(key, 0))
    for key in sorted(counts):
        result.extend([key] * counts[key])
    return result


def sort_by_frequency(values: Iterable[int]) -> list[int]:
    """Sort by decreasing frequency, breaking ties by increasing value."""
    items = list(values)
    counts = Counter(items)
    return sorted(items, key=lambda value: (-counts[value], value))


def find_swap_values(a: Iterable[int], b: Iterable[int]) -> bool:
    """Return True if swapping one value of ``a`` with one of ``b`` equalises their sums."""
    first, second = list(a), list(b)
    difference = sum(first) - sum(second)
    if difference % 2:
        return False
    half = difference // 2
    available = set(second)
    return any(value - half in available for value in first)