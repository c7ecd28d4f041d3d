# algokit

A small library of well-known algorithms and data structures, written as
plain Python functions and classes with no dependencies beyond the
standard library. It needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.linked_list` | `ListNode`, `build_list`, `list_values`, `add_two_numbers`, `merge_two_lists`, `reverse_list`, `remove_nth_from_end`, `reorder_list`, `merge_k_lists` |
| `algokit.tree` | `TreeNode`, `build_tree`, `tree_values`, `kth_smallest`, `is_valid_bst`, `max_depth`, `invert_tree`, `diameter`, `is_balanced`, `is_subtree`, `is_same_tree` |
| `algokit.structures` | `LRUCache`, `MinStack`, `QueueStack`, `Trie`, `Twitter` |
| `algokit.backtracking` | `combination_sum`, `subsets`, `subsets_with_dup`, `permutations`, `palindrome_partitions`, `letter_combinations`, `solve_n_queens` |
| `algokit.strings` | `longest_palindromic_subsequence`, `longest_palindromic_substring`, `min_insert_delete`, `shortest_supersequence_length`, `longest_repeating_subsequence`, `shortest_common_supersequence`, `min_insertions_palindrome`, `is_subsequence`, `count_matching_subsequences`, `min_window`, `is_valid_brackets`, `group_anagrams`, `min_partitions` |
| `algokit.arrays` | `furthest_building`, `find_duplicate`, `max_card_score`, `daily_temperatures`, `least_interval`, `min_moves_to_equal`, `maximum_units`, `two_sum_sorted`, `insert_interval`, `wiggle_max_length`, `max_cake_area`, `car_fleet`, `min_eating_speed` |
| `algokit.dp` | `fib`, `max_subarray`, `can_jump`, `min_jumps`, `can_reach_zero`, `matrix_chain_cost`, `length_of_lis` |
| `algokit.bits` | `single_number`, `count_bits`, `reverse_bits`, `digit_square_sum`, `is_happy` |
| `algokit.grids` | `oranges_rotting`, `walls_and_gates`, `set_zeroes`, `find_rotation`, `rotate`, `search_matrix` |
| `algokit.graph` | `can_finish`, `course_order`, `CycleError` |

## Examples

```python
from algokit.linked_list import build_list, list_values, reverse_list
from algokit.tree import build_tree, max_depth
from algokit.structures import LRUCache, MinStack
from algokit.strings import min_window
from algokit.dp import length_of_lis
from algokit.graph import course_order

list_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
max_depth(build_tree([3, 9, 20, None, None, 15, 7]))  # 3

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)        # 1
cache.put(3, 3)     # evicts key 2
cache.get(2)        # -1

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()     # 1

min_window("ADOBECODEBANC", "ABC")   # "BANC"
length_of_lis([10, 9, 2, 5, 3, 7, 101, 18])  # 4
course_order(2, [(1, 0)])   # [0, 1]
```

## Notes on behaviour

- Linked lists and trees are built with `build_list` and `build_tree`
  (level order, `None` for a missing child) and read back with
  `list_values` and `tree_values`.
- Some functions change their input in place: `reverse_list`,
  `reorder_list`, `merge_two_lists`, `remove_nth_from_end`,
  `invert_tree`, `rotate`, `set_zeroes` and `walls_and_gates`.
  `oranges_rotting` works on a copy.
- `LRUCache.get` returns `-1` for a missing key. `MinStack` and
  `QueueStack` raise `IndexError` when read while empty.
- `Twitter.get_news_feed` returns at most ten tweet ids, newest first,
  from the user and everyone the user follows.
- Invalid input raises `ValueError`, for example a position past the end
  in `remove_nth_from_end`, `k` out of range in `kth_smallest`, an
  unreachable end in `min_jumps`, or no matching pair in
  `two_sum_sorted`. `course_order` raises `CycleError` (a `ValueError`)
  when the prerequisites form a cycle; `can_finish` returns `False`
  instead.
- `walls_and_gates` uses `grids.EMPTY_ROOM` (2**31 - 1), `grids.WALL`
  (-1) and `grids.GATE` (0) as cell markers.

## What it does not do

algokit is a library only: it has no command-line tool, stores nothing
on disk and does not read or write files.