# algokit

A small library of well-known algorithm solutions, grouped by topic. It has
no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

For development and tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.searching`: binary-search problems: `days_needed`,
  `ship_within_days`, `min_days`, `find_min`, `find_peak_element`,
  `find_kth_positive`, `search_rotated`, `search_rotated_with_duplicates`,
  `search_range`, `search_insert`, `count_partitions`, `split_array`,
  `single_non_duplicate` and `smallest_good_base`.
- `algokit.arithmetic`: number problems: `pascals_triangle`, `count_orders`,
  `is_strictly_palindromic`, `add_digits`, `is_power_of_four`, `power`,
  `reverse_integer`, `climb_stairs` and `is_palindrome_number`.
- `algokit.strings`: text problems: `remove_outer_parentheses`,
  `longest_common_prefix`, `letter_combinations`, `largest_odd_number`,
  `count_vowels`, `is_anagram`, `is_circular_sentence`, `min_length`,
  `min_changes`, `score_of_string`, `compressed_string`,
  `count_k_constraint_substrings`, `convert_date_to_binary`, `kth_character`,
  `first_uniq_char`, `length_of_last_word`, `add_binary`, `rotate_string`,
  `is_valid_parentheses` and `check_valid_string`.
- `algokit.arrays`: list problems: `array_rank_transform`, `max_product`,
  `final_prices`, `count_students`, `find_the_winner`, `min_pair_sum`,
  `product_except_self`, `get_final_state`, `find_content_children`,
  `next_greater_element` and `sum_subseq_widths`.
- `algokit.structures`: small containers: `CustomStack`, `MinStack`,
  `SubrectangleQueries`, `QueueStack`, `StackQueue`, and `ListNode` with
  `delete_node`.

A few points of behaviour worth knowing:

- `search_range` returns a tuple `(first, last)`, or `(-1, -1)` when the
  target is absent.
- `next_greater_element` maps values with no larger successor to `-1`, and
  values that do not occur in the second list to `0`.
- `count_orders` and `sum_subseq_widths` return their results modulo
  1,000,000,007.
- `reverse_integer` returns `0` when the result leaves the signed 32-bit range.
- `CustomStack.pop` and `QueueStack.top` return `-1` when empty; `MinStack`,
  `QueueStack.pop` and `StackQueue` raise `IndexError` instead.
- `delete_node` raises `ValueError` for the last node of a list; iterating a
  `ListNode` yields the values from that node to the end.

## Examples

```python
from algokit.searching import ship_within_days, search_range
from algokit.strings import letter_combinations, add_binary
from algokit.structures import MinStack

ship_within_days([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 5)   # 15
search_range([5, 7, 7, 8, 8, 10], 8)                   # (3, 4)
letter_combinations("23")   # ['ad', 'ae', 'af', 'bd', ...]
add_binary("11", "1")       # '100'

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
stack.get_min()             # -3
stack.pop()
stack.top()                 # 0
stack.get_min()             # -2
```

## What it does not do

The package is a library only: it has no command-line tool, and it reads
no input files. Call its functions from your own code.