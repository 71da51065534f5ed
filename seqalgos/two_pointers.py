"""Two-pointer algorithms over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the largest area of water held between two of the given lines."""
    if len(height) < 2:
        raise ValueError("at least two heights are required")
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[right] < height[left]:
            right -= 1
        elif height[left] < height[right]:
            left += 1
        else:
            left += 1
            right -= 1
    return best


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three elements that lies closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    values = sorted(nums)
    closest = sum(values[:3])
    last = len(values) - 1
    for smallest, base in enumerate(values[:-2]):
        left, right = smallest + 1, last
        while left < right:
            total = base + values[left] + values[right]
            if abs(total - target) < abs(closest - target):
                closest = total
            if closest == target:
                return target
            if total < target:
                left += 1
            else:
                right -= 1
    return closest


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map can hold."""
    left, right = 0, len(height) - 1
    level = 0
    filled = 0
    while left <= right:
        low = min(height[left], height[right])
        if low > level:
            filled += (low - level) * (right - left + 1)
            level = low
        if height[left] < height[right]:
            left += 1
        elif height[right] < height[left]:
            right -= 1
        else:
            left += 1
            right -= 1
    return filled - sum(height)