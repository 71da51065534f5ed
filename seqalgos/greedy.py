"""Greedy algorithms over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps needed to reach the last index."""
    if not nums:
        raise ValueError("at least one position is required")
    goal = len(nums) - 1
    steps = 0
    reach_now = 0
    reach_next = -1
    for index, length in enumerate(nums[:-1]):
        reach = index + length
        if index > reach_now:
            steps += 1
            reach_now, reach_next = reach_next, reach
        reach_next = max(reach_next, reach)
        if reach >= goal:
            return steps + 1
    return steps


def can_jump(nums: Sequence[int]) -> bool:
    """Return whether the last index can be reached from the first."""
    if not nums:
        raise ValueError("at least one position is required")
    goal = len(nums) - 1
    for index in range(len(nums) - 2, -1, -1):
        if index + nums[index] >= goal:
            goal = index
    return goal == 0


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from any number of buy-and-sell trades."""
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))


def h_index(citations: Sequence[int]) -> int:
    """Return the h-index of a researcher with the given citation counts."""
    h = 0
    for count in sorted(citations, reverse=True):
        if count < h + 1:
            break
        h += 1
    return h