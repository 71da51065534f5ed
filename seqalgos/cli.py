"""Command line entry point that runs the built-in example of each algorithm."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Any

from seqalgos.greedy import can_jump, h_index, jump, max_profit
from seqalgos.substrings import (
    find_anagrams,
    length_of_longest_substring,
    max_vowels,
    min_window,
)
from seqalgos.two_pointers import max_area, three_sum_closest, trap
from seqalgos.windows import (
    constrained_subset_sum,
    longest_subarray,
    max_score,
    max_sliding_window,
    maximum_unique_subarray,
)

_EXAMPLES: dict[str, tuple[Callable[..., Any], tuple[Any, ...]]] = {
    "max-area": (max_area, ([1, 8, 6, 2, 5, 4, 8, 3, 7],)),
    "max-profit": (max_profit, ([7, 1, 5, 3, 6, 4],)),
    "max-score": (max_score, ([1, 2, 3, 4, 5, 6, 1], 3)),
    "constrained-subset-sum": (constrained_subset_sum, ([10, -2, -10, -5, 20], 2)),
    "longest-subarray": (longest_subarray, ([4, 2, 2, 2, 4, 4, 2, 2], 0)),
    "max-vowels": (max_vowels, ("beautiful", 4)),
    "three-sum-closest": (three_sum_closest, ([-1, 2, 1, -4], 1)),
    "maximum-unique-subarray": (maximum_unique_subarray, ([4, 2, 4, 5, 6],)),
    "max-sliding-window": (max_sliding_window, ([1, 3, -1, -3, 5, 3, 6, 7], 3)),
    "h-index": (h_index, ([3, 0, 6, 1, 5],)),
    "length-of-longest-substring": (length_of_longest_substring, ("pwwkew",)),
    "trap": (trap, ([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1],)),
    "find-anagrams": (find_anagrams, ("cbaebabacd", "abc")),
    "jump": (jump, ([2, 3, 1, 1, 4],)),
    "can-jump": (can_jump, ([3, 2, 1, 0, 4],)),
    "min-window": (min_window, ("a", "aa")),
}


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "[" + ",".join(str(item) for item in value) + "]"
    return str(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one named example, or every example when no name is given."""
    parser = argparse.ArgumentParser(
        prog="seqalgos",
        description="Print the result of an algorithm on its built-in example.",
    )
    parser.add_argument(
        "example",
        nargs="?",
        choices=list(_EXAMPLES),
        help="example to run; all of them when omitted",
    )
    args = parser.parse_args(argv)
    names = [args.example] if args.example else list(_EXAMPLES)
    for name in names:
        func, arguments = _EXAMPLES[name]
        text = _format(func(*arguments))
        print(text if args.example else f"{name}: {text}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())