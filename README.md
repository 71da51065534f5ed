# seqalgos

A small collection of classic algorithms over integer sequences and strings,
grouped by technique. It has no dependencies outside the standard library.

| Module | Functions |
| --- | --- |
| `seqalgos.two_pointers` | `max_area`, `three_sum_closest`, `trap` |
| `seqalgos.greedy` | `jump`, `can_jump`, `max_profit`, `h_index` |
| `seqalgos.substrings` | `length_of_longest_substring`, `find_anagrams`, `min_window`, `is_vowel`, `max_vowels` |
| `seqalgos.windows` | `max_sliding_window`, `longest_subarray`, `maximum_unique_subarray`, `max_score`, `min_consecutive_sum`, `constrained_subset_sum` |

Every function takes plain Python sequences or strings and returns plain
values: an `int`, a `bool`, a `str` or a `list` of `int`.

## Installation

```
pip install .
```

## Usage

```python
from seqalgos.two_pointers import max_area, three_sum_closest, trap
from seqalgos.greedy import jump, can_jump, max_profit, h_index
from seqalgos.substrings import length_of_longest_substring, find_anagrams, min_window
from seqalgos.windows import max_sliding_window, max_score, constrained_subset_sum

max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])               # 49
three_sum_closest([-1, 2, 1, -4], 1)                # 2
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])          # 6
jump([2, 3, 1, 1, 4])                               # 2
can_jump([3, 2, 1, 0, 4])                           # False
max_profit([7, 1, 5, 3, 6, 4])                      # 7
h_index([3, 0, 6, 1, 5])                            # 3
length_of_longest_substring("pwwkew")               # 3
find_anagrams("cbaebabacd", "abc")                  # [0, 6]
min_window("ADOBECODEBANC", "ABC")                  # "BANC"
max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3)   # [3, 3, 5, 5, 6, 7]
max_score([1, 2, 3, 4, 5, 6, 1], 3)                 # 12
constrained_subset_sum([10, -2, -10, -5, 20], 2)    # 23
```

`min_window` returns an empty string when no window of `s` holds every
character of `t`; ties go to the leftmost window.

## Errors

Inputs for which no meaningful answer exists raise `ValueError`:

- `max_area` with fewer than two heights, `three_sum_closest` with fewer than
  three numbers;
- `jump` and `can_jump` with an empty list;
- `find_anagrams` with an empty pattern;
- `max_sliding_window` and `constrained_subset_sum` with a window or distance
  below 1, and `constrained_subset_sum` with an empty list;
- `longest_subarray` with an empty list or a negative limit;
- `min_consecutive_sum` and `max_score` with a count below zero or above the
  length of the sequence.

## Command line

Installing the package provides a `seqalgos` command that runs the
algorithms on built-in sample inputs and prints the results. With no
argument it runs every sample and prints one `name: result` line each:

```
seqalgos
```

Give a name to run a single sample and print only its result:

```
seqalgos trap
seqalgos find-anagrams
```

The names are `max-area`, `max-profit`, `max-score`, `constrained-subset-sum`,
`longest-subarray`, `max-vowels`, `three-sum-closest`,
`maximum-unique-subarray`, `max-sliding-window`, `h-index`,
`length-of-longest-substring`, `trap`, `find-anagrams`, `jump`, `can-jump`
and `min-window`. Booleans print as `true`/`false` and lists as `[a,b,c]`.
The command does not read input of its own; call the functions from Python
to run them on other data.

## Running the tests

```
pip install ".[test]"
pytest
```