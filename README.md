# dynprog

Classic dynamic programming problems solved in plain Python, using only the
standard library. Every problem is a function that takes ordinary Python
values (lists, strings, integers) and returns its answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from dynprog.knapsack import knapsack, coin_change
from dynprog.strings import min_distance

knapsack([1, 2, 4, 5], [5, 4, 8, 6], 5)   # 13
coin_change([1, 2, 5], 11)                 # 3
min_distance("horse", "ros")               # 3
```

## Modules

### `dynprog.knapsack`

- `knapsack(weights, values, max_weight)`: best total value of items fitting
  in `max_weight`, each item taken at most once.
- `coin_change(coins, amount)`: fewest coins summing to `amount`, or `-1`.
- `coin_change_ways(amount, coins)`: number of coin combinations summing to
  `amount`.
- `cut_rod(prices, length)`: rod-cutting value, `prices[i]` being the price of
  a piece of length `i + 1`.

Empty item lists and negative targets raise `ValueError`.

### `dynprog.subsets`

- `subset_sum_to_k(arr, k)`, `can_partition(nums)`,
  `min_subset_sum_difference(arr)`: reachability of subset sums.
- `count_partitions(arr, difference)`, `count_subsets_with_sum_mod(nums, target)`,
  `find_ways(arr, k)`: counts modulo `MOD` (1 000 000 007).
- `perfect_sum(arr, total)`, `count_subsequences_with_sum(nums, target)`:
  exact counts of subsets with a given sum.
- `find_target_sum_ways(nums, target)`: counts sign assignments reaching
  `target`; a step needing a sum outside `0..target` raises `IndexError`.
- `subsequences(nums)`, `subsequences_with_sum(nums, target)`: enumerate
  subsequences as lists.

Arrays must be non-empty and hold non-negative integers.

### `dynprog.stocks`

- `max_profit_unlimited(prices)` and `max_profit_unlimited_memo(prices)`
- `max_profit_two_transactions(prices)`
- `max_profit_k_transactions(k, prices)` and
  `max_profit_k_transactions_memo(k, prices)`
- `max_profit_with_cooldown(prices)` and `max_profit_with_cooldown_memo(prices)`
- `max_profit_with_fee(prices, fee)`

The `_memo` variants compute the same results top-down.

### `dynprog.sequences`

- `fib(n)`: the n-th Fibonacci number; values below 1 are returned unchanged.
- `rob(nums)`, `rob_circular(nums)`, `rob_tree(root)`: house robber on a row,
  a circle and a tree of `TreeNode(val, left, right)`.
- `frog_jump(heights)`, `frog_jump_k(heights, k)`: least energy to reach the
  last stone.
- `can_jump(nums)`, `min_jumps(nums)`: jump game; `min_jumps` returns
  `UNREACHABLE` (10**9) or more when the end cannot be reached.
- `length_of_lis(nums)`: longest strictly increasing subsequence length.

### `dynprog.strings`

- `num_decodings(s)`: ways to decode a digit string with 1..26 as letters.
- `min_distance(word1, word2)`: edit distance.
- `min_insert_delete(s1, s2)`: edits using inserts and deletes only.
- `is_interleave(s1, s2, s3)` and `is_interleave_recursive(s1, s2, s3)`.
- `longest_common_subsequence(text1, text2)`.
- `longest_ideal_string(s, k)`: ideal-subsequence table value; the table is
  filled from the second character onwards.
- `word_break(s, word_dict)` and `word_break_tabulated(s, word_dict)`.

### `dynprog.palindromes`

- `longest_palindrome_subseq(s)`
- `longest_palindrome(s)` (leftmost on ties) and
  `longest_palindrome_tabulated(s)` (rightmost on ties)
- `min_insertions(s)` and `min_insertions_tabulated(s)`
- `count_substrings(s)`: number of palindromic substrings; strings shorter
  than two give 1.

### `dynprog.grids`

- `cherry_pickup(grid)`, `count_squares(matrix)`, `unique_paths(m, n)`,
  `maximal_square(matrix)` (a matrix of `"0"`/`"1"` strings),
  `max_points(points)`, `min_falling_path_sum(matrix)`,
  `minimum_total(triangle)`, `minimum_total_bottom_up(triangle)`,
  `min_path_sum(grid)`, `ninja_training(points)`.

### `dynprog.scheduling`

- `job_scheduling(start_time, end_time, profit)`: best profit of
  non-overlapping jobs; a job may start when another ends.
- `mincost_tickets(days, costs)`: cheapest cover of sorted travel days with
  1-, 7- and 30-day passes.

### `dynprog.graphs`

- `find_the_city(n, edges, distance_threshold)`: the city reaching the fewest
  others within the threshold, ties going to the greatest city number. Edges
  are `(from, to, weight)` triples.

## What it does not do

This is a library only: it has no command-line program, reads no input files
and keeps no state between calls.