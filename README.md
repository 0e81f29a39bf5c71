# algosolve

Well-known algorithm routines written as plain Python functions. Each
function takes ordinary Python values such as lists, strings and integers
and returns its answer. Nothing prints output, and there is no global state.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test tools as well and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algosolve.grids`: `trap_rain_water_2d`, `largest_island`, `count_servers`,
  `min_cost_path`, `highest_peak`, `grid_game`
- `algosolve.bits`: `single_number`, `xor_all_pairings`, `minimize_xor`,
  `add_digits`, `missing_number`, `count_operations`,
  `does_valid_array_exist`, `single_non_duplicate`, `find_duplicate`
- `algosolve.arrays`: `two_sum`, `last_stone_weight`,
  `remove_covered_intervals`, `minimum_deviation`, `majority_element`,
  `is_sorted_and_rotated`, `ways_to_split_array`, `summary_ranges`,
  `prefix_common_array`, `move_zeroes`, `remove_duplicates`,
  `reverse_string`, `combination_sum`, `trap_rain_water`
- `algosolve.strings`: `word_subsets`, `can_construct_palindromes`,
  `string_matching`, `max_split_score`, `compare_version`, `title_to_number`,
  `min_operations`, `are_almost_equal`, `count_palindromic_subsequences`,
  `can_be_valid`, `prefix_count`, `shift_letters`, `vowel_strings`,
  `is_prefix_and_suffix`, `count_prefix_suffix_pairs`, `minimum_length`,
  `is_subsequence`, `remove_k_digits`, `backspace_compare`
- `algosolve.linked`: `ListNode`, `build_list`, `list_values`, `sort_list`,
  `swap_pairs`
- `algosolve.trees`: `TreeNode`, `build_tree`, `max_depth`,
  `width_of_binary_tree`
- `algosolve.graphs`: `GraphNode`, `build_graph`, `clone_graph`,
  `shortest_path_length`

## Examples

```python
from algosolve.arrays import summary_ranges, trap_rain_water
from algosolve.strings import compare_version, title_to_number
from algosolve.linked import build_list, list_values, sort_list
from algosolve.trees import build_tree, max_depth

summary_ranges([0, 1, 2, 4, 5, 7])        # ['0->2', '4->5', '7']
trap_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
compare_version("1.01", "1.001")          # 0
title_to_number("ZY")                     # 701

list_values(sort_list(build_list([4, 2, 1, 3])))  # [1, 2, 3, 4]
max_depth(build_tree([3, 9, 20, None, None, 15, 7]))  # 3
```

## Notes on behaviour

- `move_zeroes`, `remove_duplicates` and `reverse_string` change their
  argument in place. `remove_duplicates` also returns the number of distinct
  values it wrote to the front of the list.
- `two_sum` returns the last matching index pair `[i, j]` with `i < j`, or
  an empty list if no pair matches.
- `min_cost_path` and `shortest_path_length` return `-1` when no answer
  exists.
- Functions that need a non-empty input raise `ValueError` when given an
  empty one. This applies to the grid functions, `minimum_deviation`,
  `majority_element`, `max_split_score` and `does_valid_array_exist`.
  `ValueError` is also raised for mismatched lengths in `are_almost_equal`
  and `can_be_valid`, for a non-positive value in `combination_sum`, and for
  a character outside `A`–`Z` in `title_to_number`.
- `build_tree` reads level-order values with `None` for a missing child. It
  raises `ValueError` if the values give children to a node that does not
  exist.
- `build_graph` numbers its nodes from 1: `adjacency[i]` lists the
  neighbours of node `i + 1`. It returns node 1, or `None` for an empty
  list. `clone_graph` identifies nodes by their value.
- `sort_list` and `swap_pairs` relink the nodes they are given and return
  the new head.

## What it does not do

This is a library only. It has no command-line program and does not read
or write files.