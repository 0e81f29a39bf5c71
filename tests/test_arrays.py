from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.arrays import (
    combination_sum,
    is_sorted_and_rotated,
    last_stone_weight,
    majority_element,
    minimum_deviation,
    move_zeroes,
    prefix_common_array,
    remove_covered_intervals,
    remove_duplicates,
    reverse_string,
    summary_ranges,
    trap_rain_water,
    two_sum,
    ways_to_split_array,
)


@given(st.lists(st.integers(-50, 50), min_size=2, max_size=12), st.integers(-100, 100))
def test_two_sum_result_adds_up(nums, target):
    result = two_sum(nums, target)
    if result:
        i, j = result
        assert i < j
        assert nums[i] + nums[j] == target
    else:
        assert all(nums[i] + nums[j] != target for i in range(len(nums)) for j in range(i + 1, len(nums)))


def test_two_sum_no_pair_is_empty():
    assert two_sum([1, 2, 3], 100) == []


def test_two_sum_prefers_last_pair():
    assert two_sum([1, 2, 3, 4], 5) == [1, 2]


def test_last_stone_weight_example():
    assert last_stone_weight([2, 7, 4, 1, 8, 1]) == 1


def test_last_stone_weight_edges():
    assert last_stone_weight([]) == 0
    assert last_stone_weight([5]) == 5
    assert last_stone_weight([3, 3]) == 0


@given(st.lists(st.integers(1, 100), min_size=1, max_size=20))
def test_last_stone_weight_parity_and_bound(stones):
    result = last_stone_weight(stones)
    assert 0 <= result <= max(stones)
    assert result % 2 == sum(stones) % 2


def test_remove_covered_intervals_disjoint_and_nested():
    assert remove_covered_intervals([[1, 2], [3, 4], [5, 6]]) == 3
    assert remove_covered_intervals([[1, 10], [2, 3], [4, 9], [1, 5]]) == 1
    assert remove_covered_intervals([[2, 4], [2, 6]]) == 1


@given(st.lists(st.tuples(st.integers(0, 20), st.integers(1, 10)), min_size=1, max_size=15))
def test_remove_covered_intervals_bounds(pairs):
    intervals = [[a, a + w] for a, w in pairs]
    result = remove_covered_intervals(intervals)
    assert 1 <= result <= len({tuple(iv) for iv in intervals})


def test_minimum_deviation_equal_values():
    assert minimum_deviation([4, 4, 4]) == 0


def test_minimum_deviation_empty_raises():
    with pytest.raises(ValueError):
        minimum_deviation([])


@given(st.lists(st.integers(1, 200), min_size=1, max_size=10))
def test_minimum_deviation_no_worse_than_start(nums):
    result = minimum_deviation(nums)
    assert 0 <= result <= max(nums) - min(nums)


@given(st.integers(-20, 20), st.lists(st.integers(-20, 20), max_size=10))
def test_majority_element_found(majority, others):
    nums = [majority] * (len(others) + 1) + others
    assert majority_element(nums) == majority


def test_majority_element_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])


@given(st.lists(st.integers(-10, 10), min_size=1, max_size=10), st.integers(0, 20))
def test_rotated_sorted_is_accepted(values, shift):
    ordered = sorted(values)
    k = shift % len(ordered)
    assert is_sorted_and_rotated(ordered[k:] + ordered[:k])


def test_unsorted_is_rejected():
    assert not is_sorted_and_rotated([2, 1, 3, 4])
    assert is_sorted_and_rotated([])


def test_ways_to_split_array_zeros():
    assert ways_to_split_array([0] * 6) == 5
    assert ways_to_split_array([7]) == 0


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=15))
def test_ways_to_split_array_bound(nums):
    assert 0 <= ways_to_split_array(nums) <= len(nums) - 1


def test_summary_ranges():
    assert summary_ranges([0, 1, 2, 4, 5, 7]) == ["0->2", "4->5", "7"]
    assert summary_ranges([]) == []
    assert summary_ranges([-3]) == ["-3"]


@given(st.permutations(list(range(1, 9))), st.permutations(list(range(1, 9))))
def test_prefix_common_array_invariants(a, b):
    result = prefix_common_array(a, b)
    assert len(result) == len(a)
    assert result[-1] == len(a)
    assert all(x <= y for x, y in zip(result, result[1:]))
    assert all(c <= i + 1 for i, c in enumerate(result))


@given(st.lists(st.integers(-5, 5), max_size=20))
def test_move_zeroes(nums):
    data = list(nums)
    assert move_zeroes(data) is None
    non_zero = [n for n in nums if n != 0]
    assert data == non_zero + [0] * (len(nums) - len(non_zero))


@given(st.lists(st.integers(-10, 10), max_size=20))
def test_remove_duplicates(nums):
    data = sorted(nums)
    original = list(data)
    k = remove_duplicates(data)
    assert k == len(set(nums))
    assert data[:k] == sorted(set(nums))
    assert data[k:] == original[k:]


def test_reverse_string_in_place():
    chars = list("hello")
    reverse_string(chars)
    assert chars == list("olleh")


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_duplicates_ignored():
    assert combination_sum([3, 2, 2, 3], 6) == combination_sum([2, 3], 6)


def test_combination_sum_non_positive_raises():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


@given(st.lists(st.integers(1, 10), min_size=1, max_size=5), st.integers(1, 20))
def test_combination_sum_invariants(candidates, target):
    result = combination_sum(candidates, target)
    allowed = set(candidates)
    for combo in result:
        assert sum(combo) == target
        assert combo == sorted(combo)
        assert set(combo) <= allowed
    assert len({tuple(c) for c in result}) == len(result)
    if target in allowed:
        assert [target] in result


def test_trap_rain_water_example():
    assert trap_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trap_rain_water_simple():
    assert trap_rain_water([]) == 0
    assert trap_rain_water([3, 0, 3]) == 3
    assert trap_rain_water([1, 2, 3, 4]) == 0


@given(st.lists(st.integers(0, 10), max_size=20))
def test_trap_rain_water_symmetric(heights):
    assert trap_rain_water(heights) == trap_rain_water(heights[::-1])
    assert trap_rain_water(heights) >= 0
    assert Counter(heights) == Counter(list(heights))