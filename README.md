# algokit

A collection of well-known algorithms and small data structures written in plain Python. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `algokit.arrays` covers integer-array problems. These are `two_sum`, `max_profit`, `three_sum_closest`, `find_kth_positive`, `rotate`, `search_rotated`, `search_range`, `find_median_sorted_arrays`, `first_missing_positive`, `trap`, `jump`, `max_sub_array`, `can_jump`, `plus_one`, `next_greater_element`, `next_greater_elements` and `largest_rectangle_area`.
- `algokit.sliding_window` covers sliding-window and prefix-sum counting. These are `subarrays_with_k_distinct`, `longest_ones`, `count_at_most_odd`, `number_of_nice_subarrays`, `number_of_substrings`, `max_score`, `length_of_longest_substring`, `character_replacement`, `min_window`, `num_subarrays_with_sum` and `subarray_sum`.
- `algokit.text` covers string problems. These are `remove_outer_parentheses`, `longest_common_prefix`, `is_valid_parentheses`, `is_isomorphic`, `is_anagram`, `find_words_containing`, `is_valid_word`, `reverse_string`, `possible_string_count`, `remove_k_digits`, `group_anagrams`, `longest_palindrome` and `my_atoi`. `my_atoi` clamps its result to the 32-bit signed range.
- `algokit.integers` covers number puzzles. These are `check_powers_of_three`, `digit_square_sum`, `is_happy`, `is_power_of_two`, `add_digits`, `is_ugly`, `difference_of_sums`, `is_power_of_three`, `is_power_of_four`, `reverse_integer` and `is_palindrome_number`. `reverse_integer` returns 0 when the reversed value leaves the 32-bit signed range.
- `algokit.backtracking` covers search problems. These are `solve_sudoku`, `permute`, `solve_n_queens`, `subsets` and `subsets_with_dup`. `solve_sudoku` fills a 9×9 board of `"1"`..`"9"` and `"."` in place and returns whether it found a solution.
- `algokit.linked_list` provides the node types `ListNode`, `RandomNode` and `MultilevelNode`. It also has two helpers, `build_list` and `list_values`. Its operations are:
  - `has_cycle`, `detect_cycle` and `middle_node`
  - `remove_nth_from_end`, `add_two_numbers` and `reverse_list`
  - `merge_two_lists`, `swap_pairs` and `reverse_k_group`
  - `copy_random_list` and `flatten`

  Most of these operations relink the nodes they are given rather than copying them. The exceptions are `add_two_numbers` and `copy_random_list`, which build new nodes.
- `algokit.trees` provides `TreeNode` and four traversals: `level_order`, `preorder`, `inorder` and `postorder`.
- `algokit.structures` provides four classes:
  - `LRUCache`, with `get` and `put`. `get` returns -1 for a missing key.
  - `MinStack`, with `push`, `pop`, `top` and `get_min`.
  - `MyQueue`, a queue built from two stacks, with `push`, `pop`, `peek` and `empty`.
  - `StockSpanner`, with `next`.

Some functions modify their argument in place and return `None`: `rotate`, `reverse_string` and `solve_sudoku` (which returns a bool). Invalid arguments raise `ValueError`. Examples are a non-positive cache capacity, `k < 1` in `reverse_k_group`, or an empty input to `max_sub_array`. Reading from an empty `MinStack` or `MyQueue` raises `IndexError`.

## Examples

```python
from algokit.arrays import two_sum, trap
from algokit.linked_list import build_list, list_values, reverse_list
from algokit.structures import LRUCache

two_sum([2, 7, 11, 15], 9)                       # (0, 1)
two_sum([1, 2], 10)                              # None
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])       # 6
list_values(reverse_list(build_list([1, 2, 3]))) # [3, 2, 1]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)   # 1
cache.put(3, 3)
cache.get(2)   # -1, evicted
```

## What it does not do

algokit is a library only. It has no command-line tool, and it does not read or write files.

## Running the tests

```
pip install ".[test]"
pytest
```