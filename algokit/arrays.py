"""Array routines: ranking, products, greedy pairing and monotonic stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

MOD = 1_000_000_007


def array_rank_transform(arr: Sequence[int]) -> list[int]:
    """Replace each element by its dense rank, starting at 1 for the smallest."""
    ranks = {value: rank for rank, value in enumerate(sorted(set(arr)), start=1)}
    return [ranks[value] for value in arr]


def max_product(nums: Sequence[int]) -> int:
    """Largest product of any non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best: int | None = None
    prefix = suffix = 1
    for front, back in zip(nums, reversed(nums)):
        prefix = (prefix or 1) * front
        suffix = (suffix or 1) * back
        candidate = max(prefix, suffix)
        best = candidate if best is None else max(best, candidate)
    assert best is not None
    return best


def final_prices(prices: Sequence[int]) -> list[int]:
    """Each price less the first later price that does not exceed it."""
    result = list(prices)
    waiting: list[int] = []
    for j, price in enumerate(prices):
        while waiting and prices[waiting[-1]] >= price:
            i = waiting.pop()
            result[i] = prices[i] - price
        waiting.append(j)
    return result


def count_students(students: Sequence[int], sandwiches: Sequence[int]) -> int:
    """Number of students left in the queue once nobody wants the top sandwich."""
    if len(students) != len(sandwiches):
        raise ValueError("students and sandwiches must have the same length")
    queue = deque(students)
    pile = deque(sandwiches)
    skipped = 0
    while skipped < len(queue):
        if queue[0] == pile[0]:
            queue.popleft()
            pile.popleft()
            skipped = 0
        else:
            queue.rotate(-1)
            skipped += 1
    return len(queue)


def find_the_winner(n: int, k: int) -> int:
    """Survivor of a circle of ``n`` friends where every ``k``-th one leaves."""
    if n < 1 or k < 1:
        raise ValueError("n and k must be positive")
    circle = list(range(1, n + 1))
    current = 0
    while len(circle) > 1:
        current = (current + k - 1) % len(circle)
        del circle[current]
    return circle[0]


def min_pair_sum(nums: Sequence[int]) -> int:
    """Smallest possible maximum pair sum when ``nums`` is split into pairs."""
    ordered = sorted(nums)
    half = len(ordered) // 2
    sums = (a + b for a, b in zip(ordered[:half], reversed(ordered[len(ordered) - half:])))
    return max(0, *sums)


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    result: list[int] = []
    running = 1
    for value in nums:
        result.append(running)
        running *= value
    running = 1
    for i in range(len(nums) - 1, -1, -1):
        result[i] *= running
        running *= nums[i]
    return result


def get_final_state(nums: Sequence[int], k: int, multiplier: int) -> list[int]:
    """Multiply the first smallest element by ``multiplier``, ``k`` times over."""
    state = list(nums)
    if k > 0 and not state:
        raise ValueError("nums must not be empty")
    for _ in range(k):
        smallest = min(range(len(state)), key=state.__getitem__)
        state[smallest] *= multiplier
    return state


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Largest number of children whose greed can be met by one cookie each."""
    children = sorted(greed)
    content = 0
    for size in sorted(sizes):
        if content == len(children):
            break
        if children[content] <= size:
            content += 1
    return content


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the next larger value after it in ``nums2``.

    Values with no larger successor map to -1; values absent from ``nums2`` map to 0.
    """
    following: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        following[value] = stack[-1] if stack else -1
        stack.append(value)
    return [following.get(value, 0) for value in nums1]


def sum_subseq_widths(nums: Sequence[int]) -> int:
    """Sum of (max - min) over every non-empty subsequence, modulo 1e9+7."""
    ordered = sorted(nums)
    n = len(ordered)
    powers = [pow(2, i, MOD) for i in range(n)]
    total = sum(
        value * (powers[i] - powers[n - 1 - i]) for i, value in enumerate(ordered)
    )
    return total % MOD