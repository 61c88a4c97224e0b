# algodrills

A collection of classic algorithm exercises written as small, plain Python
functions. Each function takes ordinary Python values (lists, strings,
nested lists) and returns a result. No function changes its inputs: those
that rearrange or fill in data, such as `flood_fill` or `solve_sudoku`,
return a new list.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it covers |
| --- | --- |
| `algodrills.reorder` | `zig_zag`, `rearrange_max_min`, `reverse_in_groups`, `alternate_max_min`, `sort012`, `merge_without_extra_space`, `merge_by_swapping`, `leaders`, `kth_smallest` |
| `algodrills.scan` | `find_element`, `equilibrium_point`, `positive_equilibrium_point`, `last_index_of_one`, `stock_buy_sell`, `subarray_sum`, `trapping_water`, `max_subarray_sum`, `distribute_chocolates`, `find_platform` |
| `algodrills.counting` | `closest_to_zero`, `count_triangles`, `count_triplets`, `count_inversions`, `count_power_pairs` |
| `algodrills.backtracking` | `n_queen`, `find_paths` (rat in a maze), `solve_sudoku` |
| `algodrills.recursion` | `flood_fill`, `josephus`, `number_of_paths`, `optimal_keys` |
| `algodrills.greedy` | `activity_selection`, `max_balls`, `toy_count`, `min_product_sum`, `max_meetings`, `candy_store` |
| `algodrills.graph` | `bfs`, `dfs`, `has_directed_cycle`, `has_undirected_cycle`, `topo_sort`, `is_topological_order`, `count_islands`, `minimum_cost_path`, `min_swaps` |
| `algodrills.hashing` | `can_pair`, `common_elements`, `count_distinct`, `four_sum`, `max_zero_sum_length`, `longest_consecutive`, `sort_by_other`, `sort_by_frequency`, `find_swap_values` |
| `algodrills.strings` | `is_anagram`, `min_insertions`, `atoi`, `strstr`, `longest_common_prefix`, `longest_common_prefix_or_marker`, `longest_distinct_substring`, `permutations`, `remove_duplicates`, `reverse_words`, `roman_to_decimal`, `is_rotated` |

## Conventions

- Graphs are adjacency lists: a list whose `i`-th entry lists the
  neighbours of vertex `i`. Grids are lists of rows.
- Where nothing is found, functions return `None`. This applies, for
  example, to `equilibrium_point`, `find_element`, `subarray_sum`,
  `last_index_of_one`, `strstr` and an unsolvable `solve_sudoku`.
- Invalid arguments raise `ValueError`, such as an out-of-range `k`
  for `kth_smallest`, a non-digit in `atoi`, or an unknown digit in
  `roman_to_decimal`. `flood_fill` raises `IndexError` for a start cell
  outside the grid.
- `permutations` is a generator yielding distinct permutations in
  lexicographic order.

## Examples

```python
from algodrills.scan import trapping_water, max_subarray_sum
from algodrills.graph import bfs, topo_sort
from algodrills.backtracking import n_queen
from algodrills.strings import roman_to_decimal, permutations

trapping_water([3, 0, 0, 2, 0, 4])     # 10
max_subarray_sum([1, 2, 3, -2, 5])     # 9

adjacency = [[1, 2, 3], [], [4], [], []]
bfs(adjacency)                          # [0, 1, 2, 3, 4]
topo_sort([[1], [2], []])               # [0, 1, 2]

n_queen(4)                              # [[2, 4, 1, 3], [3, 1, 4, 2]]

roman_to_decimal("XIV")                 # 14
list(permutations("ABC"))               # ['ABC', 'ACB', 'BAC', 'BCA', 'CAB', 'CBA']
```

## What it does not do

This is a library only. It has no command-line program and does not read
batches of test cases from standard input or print answers; call the
functions from your own code.