"""Single-pass array scans: equilibrium points, trades, windows, water and platforms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def find_element(values: Sequence[int]) -> int | None:
    """Return the first inner element not smaller than anything before it
    and not greater than anything after it, or None if there is none."""
    n = len(values)
    if n < 3:
        return None
    suffix_min = list(accumulate(reversed(values), min))[::-1]
    running_max = values[0]
    for i in range(1, n - 1):
        value = values[i]
        if value >= running_max and value <= suffix_min[i + 1]:
            return value
        running_max = max(running_max, value)
    return None


def equilibrium_point(values: Sequence[int]) -> int | None:
    """Return the 1-based position where the sums on both sides are equal.

    A single element is its own equilibrium; two elements never have one.
    The first position is never considered.
    """
    n = len(values)
    if n == 1:
        return 1
    if n == 2:
        return None
    prefix = list(accumulate(values))
    total = prefix[-1] if prefix else 0
    for i in range(1, n):
        if prefix[i - 1] == total - prefix[i]:
            return i + 1
    return None


def positive_equilibrium_point(values: Sequence[int]) -> int | None:
    """Return the 1-based inner position whose left and right sums are equal and positive."""
    n = len(values)
    if n == 1:
        return 1
    prefix = list(accumulate(values))
    for i in range(1, n - 1):
        before = prefix[i - 1]
        after = prefix[-1] - prefix[i]
        if before == after and after > 0:
            return i + 1
    return None


def last_index_of_one(bits: str) -> int | None:
    """Return the index of the last '1' in the string, or None."""
    index = bits.rfind("1")
    return None if index < 0 else index


def stock_buy_sell(prices: Sequence[int]) -> list[tuple[int, int]]:
    """Return (buy day, sell day) pairs covering every rising run of prices."""
    trades: list[tuple[int, int]] = []
    n = len(prices)
    i = 0
    while i < n - 1:
        if prices[i + 1] > prices[i]:
            buy = i
            while i < n - 1 and prices[i + 1] >= prices[i]:
                i += 1
            trades.append((buy, i))
        i += 1
    return trades


def subarray_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return 1-based (start, end) of the first window of non-negative values summing to target."""
    left = 0
    current = 0
    for right, value in enumerate(values):
        current += value
        while current > target and left <= right:
            current -= values[left]
            left += 1
        if current == target:
            return left + 1, right + 1
    return None


def trapping_water(heights: Sequence[int]) -> int:
    """Return the units of rain water trapped between the bars."""
    if len(heights) < 3:
        return 0
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if left_max < heights[left]:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if right_max < heights[right]:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run, never less than zero."""
    best = current = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def distribute_chocolates(packets: Iterable[int], students: int) -> int:
    """Return the smallest spread between the largest and smallest packet handed out."""
    ordered = sorted(packets)
    if not 1 <= students <= len(ordered):
        raise ValueError(f"students must be between 1 and {len(ordered)}")
    return min(
        ordered[i + students - 1] - ordered[i]
        for i in range(len(ordered) - students + 1)
    )


def find_platform(arrivals: Iterable[int], departures: Iterable[int]) -> int:
    """Return the number of platforms needed so that no train waits."""
    arr = sorted(arrivals)
    dep = sorted(departures)
    if len(arr) != len(dep):
        raise ValueError("arrivals and departures must have the same length")
    n = len(arr)
    if n == 0:
        return 0
    i, j = 1, 0
    occupied = best = 1
    while i < n and j < n:
        if arr[i] > dep[j]:
            occupied -= 1
            j += 1
        else:
            occupied += 1
            i += 1
            best = max(best, occupied)
    return best