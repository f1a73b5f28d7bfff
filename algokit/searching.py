"""Binary-search based routines over sorted, rotated and partitioned sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence

_MAX_BLOOM_DAY = 10**9


def _lowest_passing(low: int, high: int, passes: Callable[[int], bool]) -> int:
    """Return the smallest value in [low, high] that passes, or high + 1 if none does."""
    while low <= high:
        mid = (low + high) // 2
        if passes(mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def days_needed(weights: Sequence[int], capacity: int) -> int:
    """Number of days needed to ship ``weights`` in order with a daily ``capacity``."""
    days, load = 1, 0
    for weight in weights:
        if load + weight <= capacity:
            load += weight
        else:
            days += 1
            load = weight
    return days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that delivers every package within ``days`` days."""
    if not weights:
        return 0
    low, high = max(weights), sum(weights)
    best = _lowest_passing(low, high, lambda cap: days_needed(weights, cap) <= days)
    return min(best, high)


def _bouquets(bloom_day: Sequence[int], day: int, k: int) -> int:
    count = run = 0
    for bloom in bloom_day:
        run = run + 1 if bloom <= day else 0
        if run == k:
            run = 0
            count += 1
    return count


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Earliest day on which ``m`` bouquets of ``k`` adjacent flowers can be made, or -1."""
    best = _lowest_passing(
        0, _MAX_BLOOM_DAY, lambda day: _bouquets(bloom_day, day, k) >= m
    )
    return -1 if best > _MAX_BLOOM_DAY else best


def find_min(nums: Sequence[int]) -> int:
    """Smallest element of a rotated sorted sequence."""
    return min(nums)


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an element strictly greater than its neighbours, or -1."""
    n = len(nums)
    if n == 1:
        return 0
    if nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] > nums[mid + 1]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """The ``k``-th positive integer missing from the ascending ``arr``."""
    for value in arr:
        if value > k:
            break
        k += 1
    return k


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in a sorted sequence, or (-1, -1)."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return (-1, -1)
    return (first, bisect_right(nums, target) - 1)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index at which ``target`` sits, or would be inserted, in a sorted sequence."""
    return bisect_left(nums, target)


def count_partitions(nums: Sequence[int], max_sum: int) -> int:
    """Number of consecutive pieces needed so that no piece sums above ``max_sum``."""
    pieces, running = 1, 0
    for value in nums:
        if running + value <= max_sum:
            running += value
        else:
            pieces += 1
            running = value
    return pieces


def split_array(nums: Sequence[int], k: int) -> int:
    """Smallest possible largest sum when ``nums`` is split into ``k`` consecutive parts."""
    return _lowest_passing(
        max(nums), sum(nums), lambda limit: count_partitions(nums, limit) <= k
    )


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value in a sorted sequence that is not paired, or -1."""
    n = len(nums)
    if n == 1:
        return nums[0]
    if nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] != nums[mid - 1] and nums[mid] != nums[mid + 1]:
            return nums[mid]
        pair_starts_here = mid % 2 == 0 and nums[mid] == nums[mid + 1]
        pair_ends_here = mid % 2 == 1 and nums[mid] == nums[mid - 1]
        if pair_starts_here or pair_ends_here:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a rotated sorted sequence that may hold duplicates."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
            continue
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def _repunit_value(base: int, terms: int, limit: int) -> int:
    """Sum of the first ``terms`` powers of ``base``, cut short once it reaches ``limit``."""
    total, power = 0, 1
    for term in range(1, terms + 1):
        total += power
        if total >= limit:
            return total
        if term < terms:
            if (limit - total) // power < base:
                return limit + 1
            power *= base
    return total


def smallest_good_base(n: str) -> str:
    """Smallest base in which the decimal number ``n`` is written with ones only."""
    num = int(n)
    for terms in range(63, 0, -1):
        low, high = 2, num - 1
        while low <= high:
            mid = (low + high) // 2
            value = _repunit_value(mid, terms, num)
            if value > num:
                high = mid - 1
            elif value < num:
                low = mid + 1
            else:
                return str(mid)
    return ""