import pytest

from algodrills.graph import (
    bfs,
    count_islands,
    dfs,
    has_directed_cycle,
    has_undirected_cycle,
    is_topological_order,
    min_swaps,
    minimum_cost_path,
    topo_sort,
)


def _undirected(n, edges):
    adjacency = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def test_directed_cycle_found():
    assert has_directed_cycle([[1], [2], [0]])


def test_directed_acyclic_graph():
    assert not has_directed_cycle([[1, 2], [3], [3], []])


def test_directed_self_loop():
    assert has_directed_cycle([[], [1]])


def test_directed_both_ways_edge_is_cycle():
    assert has_directed_cycle([[1], [0]])


def test_directed_empty_graph():
    assert not has_directed_cycle([])


def test_undirected_triangle():
    assert has_undirected_cycle(_undirected(3, [(0, 1), (1, 2), (2, 0)]))


def test_undirected_tree():
    assert not has_undirected_cycle(_undirected(5, [(0, 1), (0, 2), (2, 3), (2, 4)]))


def test_undirected_self_loop():
    assert has_undirected_cycle([[0]])


def test_undirected_cycle_in_second_component():
    adjacency = _undirected(6, [(0, 1), (2, 3), (3, 4), (4, 5), (5, 2)])
    assert has_undirected_cycle(adjacency)


def test_islands_diagonal_cells_join():
    assert count_islands(["10", "01"]) == count_islands(["1"])


def test_islands_separated_cells():
    single = count_islands(["1"])
    assert count_islands(["101"]) == 2 * single


def test_islands_no_land():
    assert count_islands(["000", "000"]) == count_islands([])


def test_islands_invariant_under_transpose():
    grid = ["11000", "00001", "10100", "00011"]
    transposed = ["".join(col) for col in zip(*grid)]
    assert count_islands(transposed) == count_islands(grid)


def test_islands_input_untouched():
    grid = [["1", "1"], ["0", "1"]]
    count_islands(grid)
    assert grid == [["1", "1"], ["0", "1"]]


def test_minimum_cost_path_example():
    grid = [[9, 4, 9, 9], [6, 7, 6, 4], [8, 3, 3, 7], [7, 4, 9, 10]]
    assert minimum_cost_path(grid) == 43


def test_minimum_cost_path_single_cell():
    assert minimum_cost_path([[7]]) == 7


def test_minimum_cost_path_bounded_by_monotone_path():
    grid = [[1, 3, 1], [1, 5, 1], [4, 2, 1]]
    top_then_right = sum(grid[0]) + grid[1][2] + grid[2][2]
    cost = minimum_cost_path(grid)
    assert grid[0][0] + grid[2][2] <= cost <= top_then_right


def test_minimum_cost_path_rejects_non_square():
    with pytest.raises(ValueError):
        minimum_cost_path([[1, 2, 3], [4, 5, 6]])


def test_min_swaps_examples():
    assert min_swaps([2, 8, 5, 4]) == 1
    assert min_swaps([10, 19, 6, 3, 5]) == 2


def test_min_swaps_sorted_needs_none():
    assert min_swaps([1, 2, 3, 4]) == min_swaps([])


def test_min_swaps_invariant_under_monotone_map():
    values = [4, 1, 7, 3, 9, 2]
    assert min_swaps([2 * v + 1 for v in values]) == min_swaps(values)


def test_bfs_star_graph():
    adjacency = [[3, 1, 2], [], [], []]
    assert bfs(adjacency) == [0] + adjacency[0]


def test_bfs_only_reachable_vertices():
    adjacency = [[1], [2], [], [0]]
    result = bfs(adjacency)
    assert sorted(result) == [0, 1, 2]
    assert result[0] == 0


def test_traversals_of_empty_graph():
    assert bfs([]) == dfs([])
    assert bfs([]) == []


def test_dfs_chain():
    adjacency = _undirected(4, [(0, 1), (1, 2), (2, 3)])
    assert dfs(adjacency) == list(range(4))


def test_dfs_explores_first_subtree_first():
    adjacency = _undirected(5, [(0, 1), (0, 2), (0, 3), (2, 4)])
    result = dfs(adjacency)
    assert sorted(result) == list(range(5))
    assert result.index(4) == result.index(2) + 1
    assert result.index(1) < result.index(2) < result.index(3)


def test_topo_sort_is_valid_order():
    adjacency = [[], [], [3], [1], [0, 1], [0, 2]]
    order = topo_sort(adjacency)
    assert is_topological_order(adjacency, order)


def test_topo_sort_cycle_leaves_vertices_out():
    adjacency = [[1], [2], [1], []]
    order = topo_sort(adjacency)
    assert len(order) < len(adjacency)
    assert not is_topological_order(adjacency, order)


def test_reversed_order_is_rejected():
    adjacency = [[1], [2], []]
    order = topo_sort(adjacency)
    assert is_topological_order(adjacency, order)
    assert not is_topological_order(adjacency, order[::-1])


def test_order_with_duplicates_is_rejected():
    assert not is_topological_order([[], [], []], [0, 0, 1])