from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from seqalgos.two_pointers import max_area, three_sum_closest, trap

heights = st.lists(st.integers(min_value=0, max_value=30), min_size=2, max_size=12)


def test_max_area_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


@pytest.mark.parametrize("height", [[], [5]])
def test_max_area_needs_two_heights(height):
    with pytest.raises(ValueError):
        max_area(height)


@given(heights)
def test_max_area_is_attained_and_maximal(height):
    result = max_area(height)
    areas = [(j - i) * min(height[i], height[j]) for i, j in combinations(range(len(height)), 2)]
    assert all(area <= result for area in areas)
    assert result in areas


def test_three_sum_closest_example():
    nums = [-1, 2, 1, -4]
    assert three_sum_closest(nums, 1) == 2
    assert nums == [-1, 2, 1, -4]


def test_three_sum_closest_exact_hit_returns_target():
    nums = [4, 9, 1, 7]
    assert three_sum_closest(nums, 4 + 9 + 7) == 4 + 9 + 7


@pytest.mark.parametrize("nums", [[], [1], [1, 2]])
def test_three_sum_closest_needs_three_numbers(nums):
    with pytest.raises(ValueError):
        three_sum_closest(nums, 0)


@given(
    st.lists(st.integers(min_value=-50, max_value=50), min_size=3, max_size=9),
    st.integers(min_value=-200, max_value=200),
)
def test_three_sum_closest_is_a_closest_triple(nums, target):
    result = three_sum_closest(nums, target)
    sums = [a + b + c for a, b, c in combinations(nums, 3)]
    assert result in sums
    assert all(abs(result - target) <= abs(s - target) for s in sums)


def test_trap_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trap_empty_holds_nothing():
    assert not trap([])


@given(st.lists(st.integers(min_value=0, max_value=30), max_size=15))
def test_trap_monotone_holds_nothing(height):
    assert not trap(sorted(height))
    assert not trap(sorted(height, reverse=True))


@given(st.lists(st.integers(min_value=0, max_value=30), max_size=15))
def test_trap_is_symmetric_and_bounded(height):
    result = trap(height)
    assert result == trap(height[::-1])
    assert 0 <= result <= len(height) * max(height, default=0)