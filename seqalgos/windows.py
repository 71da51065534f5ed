"""Sliding-window algorithms over integer sequences."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import islice


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive elements."""
    if k < 1:
        raise ValueError("window size must be positive")
    window: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(nums):
        if window and window[0] <= index - k:
            window.popleft()
        while window and value >= nums[window[-1]]:
            window.pop()
        window.append(index)
        if index >= k - 1:
            result.append(nums[window[0]])
    return result


def longest_subarray(nums: Sequence[int], limit: int) -> int:
    """Return the length of the longest subarray whose spread is at most ``limit``."""
    if not nums:
        raise ValueError("at least one number is required")
    if limit < 0:
        raise ValueError("limit must not be negative")
    highs: deque[int] = deque([0])
    lows: deque[int] = deque([0])
    start = 0
    best = 1
    for index, value in enumerate(islice(nums, 1, None), start=1):
        while highs and (value < nums[highs[0]] - limit or value > nums[lows[0]] + limit):
            start += 1
            if highs[0] < start:
                highs.popleft()
            if lows[0] < start:
                lows.popleft()
        while highs and value >= nums[highs[-1]]:
            highs.pop()
        while lows and value <= nums[lows[-1]]:
            lows.pop()
        highs.append(index)
        lows.append(index)
        best = max(best, index + 1 - start)
    return best


def maximum_unique_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a subarray whose elements are all distinct."""
    seen: set[int] = set()
    total = 0
    best = 0
    right = 0
    size = len(nums)
    for value in nums:
        while right < size and nums[right] not in seen:
            seen.add(nums[right])
            total += nums[right]
            right += 1
        best = max(best, total)
        if right == size:
            break
        total -= value
        seen.discard(value)
    return best


def min_consecutive_sum(card_points: Sequence[int], k: int) -> int:
    """Return the smallest sum of ``k`` consecutive elements."""
    if k < 0 or k > len(card_points):
        raise ValueError("window size must lie between zero and the sequence length")
    if k == 0:
        return 0
    total = sum(islice(card_points, k))
    best = total
    for gone, added in zip(card_points, islice(card_points, k, None)):
        total += added - gone
        best = min(best, total)
    return best


def max_score(card_points: Sequence[int], k: int) -> int:
    """Return the best total of ``k`` cards taken from either end of the row."""
    if k < 0 or k > len(card_points):
        raise ValueError("number of cards must lie between zero and the row length")
    return sum(card_points) - min_consecutive_sum(card_points, len(card_points) - k)


def constrained_subset_sum(nums: Sequence[int], k: int) -> int:
    """Return the largest sum of a non-empty subsequence whose chosen
    neighbours lie at most ``k`` positions apart."""
    if k < 1:
        raise ValueError("distance must be positive")
    if not nums:
        raise ValueError("at least one number is required")
    best_ending: list[int] = []
    window: deque[int] = deque()
    answer: int | None = None
    for index, value in enumerate(nums):
        if window and window[0] < index - k:
            window.popleft()
        current = value + max(0, best_ending[window[0]]) if window else value
        best_ending.append(current)
        while window and current >= best_ending[window[-1]]:
            window.pop()
        if not window:
            answer = current if answer is None else max(answer, current)
        window.append(index)
    assert answer is not None
    return answer