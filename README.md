# solvekit

Solutions to classic algorithmic problems, written as plain Python functions,
together with a small command-line runner for judge-style problems that read
their input as whitespace-separated integers.

Only the standard library is used. Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `solvekit.union_find` | `UnionFind(n)`: disjoint sets over `0 .. n-1` with path compression and union by rank (`find`, `unite`, `len()`) |
| `solvekit.graphs` | `min_cost_connect_points`, `find_height`, `find_min_height_trees`, `find_min_height_trees_brute` |
| `solvekit.arrays` | `largest_sum_after_k_negations`, `single_number`, `single_number_bitwise`, `lucky_numbers`, `final_prices`, `max_product`, `maximum_gap`, `maximum_gap_sorted`, `decrypt`, `get_maximum_xor`, `pick_gifts`, `minimum_right_shifts`, `results_array` |
| `solvekit.strings` | `longest_common_subsequence`, `longest_common_subsequence_alt`, `is_palindrome`, `roman_to_int`, `minimum_deletions`, `remove_occurrences`, `min_swaps`, `min_swaps_greedy`, `generate_parenthesis`, `length_of_longest_substring`, `longest_palindrome`, `convert` |
| `solvekit.hash_map` | `DirectAddressMap(max_key=1_000_000)`: integer map over keys `0 .. max_key` (`put`, `get`, `remove`); absent keys read as `-1`, keys out of range raise `KeyError` |
| `solvekit.linked_list` | `ListNode`, `from_values`, `to_values`, `merge_two_lists` |
| `solvekit.sequences` | `max_removal`, `reverse_string`, `total_hamming_distance`, `max_distance`, `pivot_index`, `remove_duplicates`, `peak_index_in_mountain_array`, `length_of_lis`, `length_of_lis_quadratic`, `min_cost_climbing_stairs`, `min_cost_climbing_stairs_rolling`, `min_path_sum`, `min_end`, `divide` |
| `solvekit.contest` | `aznet`, `min_spanning_weight`, `min_road` |
| `solvekit.search` | `makesquare`, `count_arrangement`, `count_arrangement_backtrack`, `min_stickers`, `min_stickers_memo`, `can_partition_k_subsets` |
| `solvekit.judge` | `ballgmvn`, `lcs2x`, `solve`, `main` |

Invalid input, such as an empty list where a value is needed, raises
`ValueError` (or `ZeroDivisionError` from `divide` with a zero divisor).

## Library use

```python
from solvekit.union_find import UnionFind
from solvekit.graphs import min_cost_connect_points
from solvekit.strings import longest_common_subsequence, roman_to_int
from solvekit.linked_list import from_values, merge_two_lists, to_values

uf = UnionFind(4)
uf.unite(0, 1)          # True: two sets were joined
uf.unite(1, 0)          # False: already in the same set
uf.find(0) == uf.find(1)

min_cost_connect_points([[0, 0], [2, 2], [3, 10], [5, 2], [7, 0]])   # 20
longest_common_subsequence("abcde", "ace")                           # 3
roman_to_int("MCMXCIV")                                              # 1994

merged = merge_two_lists(from_values([1, 2, 4]), from_values([1, 3, 4]))
to_values(merged)                                                    # [1, 1, 2, 3, 4, 4]
```

Several problems come with two solutions side by side, for example
`length_of_lis` and `length_of_lis_quadratic`, or `min_stickers` and
`min_stickers_memo`, which give the same answers by different methods.

## Command line

```
solvekit PROBLEM [INPUT]
```

`PROBLEM` is one of `aznet`, `ballgmvn`, `lcs2x`, `minroad` or `qbmst`.
The input is read from the file `INPUT`, or from standard input when it is
left out, and the answer is printed one line per result. On unreadable or
malformed input a message goes to standard error and the exit status is 1.

```
solvekit lcs2x < input.txt
solvekit qbmst input.txt
```

Input is read as whitespace-separated integers, so line breaks do not matter:

| Problem | Input | Output |
| --- | --- | --- |
| `aznet` | test count; per test `n m`, `n-1` prices for company A, `n-1` for company B, then `m` edges `u v kind` | indices of the chosen edges |
| `ballgmvn` | `n`, then `n` points of team A and `n` of team B as `x y` | three collinear point numbers, or `-1` |
| `lcs2x` | test count; per test `m n`, `m` values of `a`, `n` values of `b` | length of the subsequence |
| `minroad` | `n a b`, then `n` trees `position kind` | shortest stretch, or `-1` |
| `qbmst` | `n m`, then `m` edges `u v w` | weight of the minimum spanning forest |

The same work is available from Python through `solvekit.judge.solve`, which
takes the problem name and the full input text and returns the output text.