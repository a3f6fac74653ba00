# contestkit

Compact solutions to well-known competitive-programming problems, written as
plain Python functions. Each function takes ordinary Python values (strings,
lists of integers) and returns its answer, so the solutions are easy to reuse,
test and combine. There are no third-party dependencies.

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

- `contestkit.strings`: sliding-window searches (`longest_unique_substring`,
  `longest_repeating_replacement`, `minimum_window_substring`,
  `contains_permutation`), a run-length check (`can_type_with_double_keys`)
  and counting tasks (`typing_cost`, `count_erase_results`, `doctor_count`,
  `max_ones_rectangle`, `min_deletions_expensive`, `is_reverse_better`).
- `contestkit.numtheory`: `gcd`, `distinct_prime_factors` and gcd-based
  problems (`max_shifted_gcd`, `can_split_gcd_min`, `palindrome_modulus`,
  `has_min_gcd_pair`).
- `contestkit.search`: binary searches on the answer (`aquarium_height`,
  `cardboard_width`, `olympiad_bench_length`) and `bound_positions`, which
  returns the sorted values together with the upper and lower bound index of
  a target.
- `contestkit.arrays`: greedy, prefix-sum and sorting problems on integer
  lists, among them `max_profit`, `is_palindrome`,
  `longest_non_decreasing_segment`, `counting_orders` (modulo 10^9 + 7),
  `collecting_game`, `max_truck_difference`, `count_valid_starts` and
  `can_build_by_subsequence_sums`.

Invalid input, such as an empty list where a value is required, raises
`ValueError`.

## Examples

```python
from contestkit.numtheory import distinct_prime_factors, gcd
from contestkit.strings import longest_unique_substring, minimum_window_substring

gcd(12, 18)                                       # 6
distinct_prime_factors(60)                        # [2, 3, 5]
longest_unique_substring("abcabcbb")              # 3
minimum_window_substring("ADOBECODEBANC", "ABC")  # "BANC"
```

```python
from contestkit.arrays import is_palindrome, max_profit
from contestkit.search import bound_positions

is_palindrome([1, 2, 1])          # True
max_profit([7, 1, 5, 3, 6, 4])    # 5
bound_positions([5, 1, 3, 3, 7], 3)  # ([1, 3, 3, 5, 7], 3, 1)
```

## Command line

Installing the package provides a `contestkit` command. It reads
whitespace-separated input from standard input and prints one answer per line.
The subcommand chooses the problem:

| Subcommand        | Input                                              | Output per case                         |
|-------------------|----------------------------------------------------|-----------------------------------------|
| `double`          | `t`, then `t` integers                             | twice the integer                       |
| `typing-cost`     | `t`, then per case `n` and a binary string of length `n` | `typing_cost` of the string       |
| `shifted-gcd`     | `t`, then per case `n` and `n` integers            | `max_shifted_gcd` of the values         |
| `collecting-game` | `t`, then per case `n` (at least 1) and `n` integers | `collecting_game` answers, space-separated |
| `bounds`          | `n` and a target, then `n` integers                | three lines: sorted values, upper bound index, lower bound index |

For example:

```
$ printf '5 3\n5 1 3 3 7\n' | contestkit bounds
1 3 3 5 7
3
1
```

Malformed input (a missing token, a non-integer, a string of the wrong length)
is reported on standard error as `contestkit: error: ...` with exit status 1.
List all subcommands with:

```
contestkit --help
```

## Limits

Only the five subcommands above are available from the command line; every
other solution is reached by importing its function from Python.