"""Array techniques: majority vote, monotonic queues and stacks, prefix sums, sliding windows."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Any


def majority_element(nums: Iterable[Any]) -> Any:
    """Boyer-Moore vote: the majority element, if the input has one."""
    counter = 0
    candidate: Any = None
    seen = False
    for num in nums:
        seen = True
        if counter == 0:
            candidate = num
        counter += 1 if num == candidate else -1
    if not seen:
        raise ValueError("majority of an empty sequence")
    return candidate


def longest_subarray_within_limit(nums: Iterable[int], limit: int) -> int:
    """Longest contiguous run whose max minus min is at most ``limit``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    values = list(nums)
    q_min: deque[int] = deque()
    q_max: deque[int] = deque()
    best = 0
    left = 0
    for right, num in enumerate(values):
        while q_min and q_min[-1] > num:
            q_min.pop()
        q_min.append(num)
        while q_max and q_max[-1] < num:
            q_max.pop()
        q_max.append(num)
        while q_max[0] - q_min[0] > limit:
            if values[left] == q_min[0]:
                q_min.popleft()
            if values[left] == q_max[0]:
                q_max.popleft()
            left += 1
        best = max(best, right - left + 1)
    return best


def monotonic_stack(values: Iterable[Any], decreasing: bool = False) -> list[Any]:
    """The stack left after pushing every value while keeping it monotonic.

    An increasing stack pops every top greater than the new value; a
    decreasing one pops every top smaller than it.
    """
    stack: list[Any] = []
    for value in values:
        while stack and (stack[-1] < value if decreasing else stack[-1] > value):
            stack.pop()
        stack.append(value)
    return stack


def count_subarrays_with_sum(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays summing to exactly ``k``."""
    counts: Counter[int] = Counter({0: 1})
    total = 0
    running = 0
    for num in nums:
        running += num
        total += counts[running - k]
        counts[running] += 1
    return total


def is_array_special(
    nums: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[bool]:
    """For each ``(left, right)`` query, whether neighbours alternate in parity."""
    prefix = [0]
    for prev, cur in zip(nums, nums[1:]):
        prefix.append(prefix[-1] + ((prev & 1) == (cur & 1)))
    result = []
    for left, right in queries:
        if not 0 <= left <= right < len(nums):
            raise IndexError(f"query [{left}, {right}] out of range")
        result.append(prefix[right] == prefix[left])
    return result


def maximum_beauty(nums: Iterable[int], k: int) -> int:
    """Most equal values reachable when each value may move by at most ``k``."""
    values = list(nums)
    if k < 0:
        raise ValueError("k must not be negative")
    if any(v < 0 for v in values):
        raise ValueError("values must not be negative")
    if not values:
        return 0
    if len(values) == 1:
        return 1
    max_value = max(values)
    changes = [0] * (max_value + 1)
    for num in values:
        changes[max(num - k, 0)] += 1
        if num + k + 1 <= max_value:
            changes[num + k + 1] -= 1
    return max(accumulate(changes))


def longest_equal_subarray(nums: Iterable[Any], k: int) -> int:
    """Longest run of equal values after deleting at most ``k`` elements."""
    values = list(nums)
    counts: Counter[Any] = Counter()
    best = 0
    left = 0
    for right, num in enumerate(values):
        counts[num] += 1
        best = max(best, counts[num])
        if right - left + 1 - best > k:
            counts[values[left]] -= 1
            left += 1
    return best