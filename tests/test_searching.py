from itertools import groupby

import pytest
from hypothesis import given, strategies as st

from algokit.searching import (
    count_partitions,
    days_needed,
    find_kth_positive,
    find_min,
    find_peak_element,
    min_days,
    search_insert,
    search_range,
    search_rotated,
    search_rotated_with_duplicates,
    ship_within_days,
    single_non_duplicate,
    smallest_good_base,
    split_array,
)


def _rotate(values, shift):
    if not values:
        return values
    shift %= len(values)
    return values[shift:] + values[:shift]


def _digits(n, base):
    out = []
    while n:
        n, rem = divmod(n, base)
        out.append(rem)
    return out


def _bouquet_count(bloom, day, k):
    return sum(
        len(list(group)) // k
        for bloomed, group in groupby(bloom, key=lambda b: b <= day)
        if bloomed
    )


def test_days_needed_whole_load_fits_in_one_day():
    assert days_needed([3, 4, 5], 12) == 1


def test_days_needed_one_item_per_day_at_max_capacity():
    assert days_needed([5, 5, 5], 5) == 3


@given(st.lists(st.integers(1, 50), min_size=1, max_size=15), st.data())
def test_ship_within_days_is_minimal(weights, data):
    days = data.draw(st.integers(1, len(weights)))
    capacity = ship_within_days(weights, days)
    assert capacity >= max(weights)
    assert days_needed(weights, capacity) <= days
    if capacity > max(weights):
        assert days_needed(weights, capacity - 1) > days


def test_ship_within_days_empty_is_zero():
    assert ship_within_days([], 3) == 0


def test_ship_within_days_zero_days_falls_back_to_total():
    assert ship_within_days([1, 2, 3], 0) == 6


def test_min_days_example():
    assert min_days([1, 10, 3, 10, 2], 3, 1) == 3


def test_min_days_impossible():
    assert min_days([1, 10, 3, 10, 2], 3, 2) == -1


@given(
    st.lists(st.integers(1, 20), min_size=1, max_size=12),
    st.integers(1, 5),
    st.integers(1, 4),
)
def test_min_days_is_earliest_day(bloom, m, k):
    result = min_days(bloom, m, k)
    if len(bloom) // k < m:
        assert result == -1
    else:
        assert _bouquet_count(bloom, result, k) >= m
        assert _bouquet_count(bloom, result - 1, k) < m


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=20), st.integers(0, 30))
def test_find_min_of_rotated(values, shift):
    nums = _rotate(sorted(values), shift)
    assert find_min(nums) == min(values)


def test_find_peak_single_element():
    assert find_peak_element([7]) == 0


@given(st.lists(st.integers(-1000, 1000), min_size=2, max_size=30, unique=True))
def test_find_peak_element_is_peak(nums):
    i = find_peak_element(nums)
    assert 0 <= i < len(nums)
    if i > 0:
        assert nums[i] > nums[i - 1]
    if i < len(nums) - 1:
        assert nums[i] > nums[i + 1]


@given(st.lists(st.integers(1, 100), max_size=30, unique=True), st.integers(1, 50))
def test_find_kth_positive(values, k):
    arr = sorted(values)
    result = find_kth_positive(arr, k)
    assert result not in set(arr)
    assert result - sum(1 for a in arr if a <= result) == k


@given(
    st.lists(st.integers(-200, 200), min_size=1, max_size=25, unique=True),
    st.integers(0, 30),
    st.integers(-210, 210),
)
def test_search_rotated(values, shift, target):
    nums = _rotate(sorted(values), shift)
    index = search_rotated(nums, target)
    if target in nums:
        assert nums[index] == target
    else:
        assert index == -1


@given(st.lists(st.integers(-10, 10), max_size=25), st.integers(-12, 12))
def test_search_range(values, target):
    nums = sorted(values)
    first, last = search_range(nums, target)
    if target in nums:
        assert first == nums.index(target)
        assert last == len(nums) - 1 - nums[::-1].index(target)
    else:
        assert (first, last) == (-1, -1)


@given(st.lists(st.integers(-50, 50), max_size=25, unique=True), st.integers(-60, 60))
def test_search_insert(values, target):
    nums = sorted(values)
    i = search_insert(nums, target)
    assert 0 <= i <= len(nums)
    assert all(v < target for v in nums[:i])
    assert all(v >= target for v in nums[i:])


def test_count_partitions_example():
    assert count_partitions([7, 2, 5, 10, 8], 18) == 2


@given(st.lists(st.integers(1, 50), min_size=1, max_size=15))
def test_count_partitions_whole_sum_is_one_piece(nums):
    assert count_partitions(nums, sum(nums)) == 1


def test_split_array_example():
    assert split_array([7, 2, 5, 10, 8], 2) == 18


@given(st.lists(st.integers(1, 50), min_size=1, max_size=15), st.data())
def test_split_array_is_minimal(nums, data):
    k = data.draw(st.integers(1, len(nums)))
    limit = split_array(nums, k)
    assert max(nums) <= limit <= sum(nums)
    assert count_partitions(nums, limit) <= k
    if limit > max(nums):
        assert count_partitions(nums, limit - 1) > k


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=15, unique=True), st.data())
def test_single_non_duplicate(values, data):
    values = sorted(values)
    single = data.draw(st.sampled_from(values))
    nums = sorted(v for v in values for _ in range(1 if v == single else 2))
    assert single_non_duplicate(nums) == single


@given(
    st.lists(st.integers(0, 8), min_size=1, max_size=25),
    st.integers(0, 30),
    st.integers(-2, 10),
)
def test_search_rotated_with_duplicates(values, shift, target):
    nums = _rotate(sorted(values), shift)
    assert search_rotated_with_duplicates(nums, target) == (target in nums)


@pytest.mark.parametrize("bits", range(2, 63))
def test_smallest_good_base_of_all_ones_binary(bits):
    assert smallest_good_base(str(2**bits - 1)) == "2"


@pytest.mark.parametrize("n", range(3, 300))
def test_smallest_good_base_writes_all_ones(n):
    base = int(smallest_good_base(str(n)))
    assert 2 <= base <= n - 1
    assert set(_digits(n, base)) == {1}


def test_smallest_good_base_examples():
    assert smallest_good_base("13") == "3"
    assert smallest_good_base("4681") == "8"