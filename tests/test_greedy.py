from itertools import permutations

import pytest

from algodrills.greedy import (
    activity_selection,
    candy_store,
    max_balls,
    max_meetings,
    min_product_sum,
    toy_count,
)


def test_activity_selection_disjoint_all_taken():
    assert activity_selection([1, 3, 5, 7], [2, 4, 6, 8]) == 4


def test_activity_selection_touching_intervals_chain():
    starts = [2, 1, 3]
    ends = [3, 2, 4]
    assert activity_selection(starts, ends) == len(starts)


def test_activity_selection_identical_overlapping():
    assert activity_selection([1, 1, 1], [5, 5, 5]) == 1


def test_activity_selection_empty():
    assert activity_selection([], []) == 0


def test_activity_selection_mismatched_lengths():
    with pytest.raises(ValueError):
        activity_selection([1, 2], [3])


def test_max_balls_example():
    assert max_balls([1, 4, 5, 6, 8], [2, 3, 4, 6, 9]) == 29


def test_max_balls_is_symmetric():
    a = [1, 2, 2, 5, 7, 9]
    b = [2, 3, 5, 5, 6, 10]
    assert max_balls(a, b) == max_balls(b, a)


def test_max_balls_without_crossings_takes_better_road():
    a = [1, 3, 5]
    b = [2, 4, 6, 8]
    assert max_balls(a, b) == max(sum(a), sum(b))
    assert max_balls(a, []) == sum(a)


def test_max_balls_same_road():
    road = [1, 1, 2, 3, 3]
    assert max_balls(road, road) == sum(road)


def test_toy_count_budget_limits():
    prices = [1, 12, 5, 111, 200, 1000, 10]
    assert toy_count(prices, sum(prices)) == len(prices)
    assert toy_count(prices, min(prices) - 1) == 0
    count = toy_count(prices, 50)
    cheapest = sorted(prices)
    assert sum(cheapest[:count]) <= 50 < sum(cheapest[:count + 1])


def test_min_product_sum_example():
    assert min_product_sum([3, 1, 1], [6, 5, 4]) == 23


def test_min_product_sum_is_minimum_over_pairings():
    a = [4, -2, 7, 1]
    b = [3, 0, -5, 2]
    best = min_product_sum(a, b)
    assert all(best <= sum(x * y for x, y in zip(a, p)) for p in permutations(b))


def test_min_product_sum_mismatched_lengths():
    with pytest.raises(ValueError):
        min_product_sum([1, 2], [1])


def test_max_meetings_example():
    assert max_meetings([1, 3, 0, 5, 8, 5], [2, 4, 6, 7, 9, 9]) == [1, 2, 4, 5]


def test_max_meetings_never_overlap():
    starts = [1, 2, 4, 6, 3, 9]
    ends = [3, 5, 7, 8, 4, 10]
    held = max_meetings(starts, ends)
    assert held
    for earlier, later in zip(held, held[1:]):
        assert starts[later - 1] > ends[earlier - 1]


def test_max_meetings_start_at_zero_is_skipped():
    assert max_meetings([0], [1]) == []


def test_candy_store_no_offer_pays_everything():
    prices = [3, 2, 1, 4]
    assert candy_store(prices, 0) == (sum(prices), sum(prices))


def test_candy_store_generous_offer_buys_one():
    prices = [3, 2, 1, 4]
    assert candy_store(prices, len(prices) - 1) == (min(prices), max(prices))


def test_candy_store_bounds():
    prices = [8, 1, 6, 3, 9, 2, 7]
    low, high = candy_store(prices, 2)
    assert min(prices) <= low <= high <= sum(prices)


def test_candy_store_rejects_negative_offer():
    with pytest.raises(ValueError):
        candy_store([1, 2], -1)