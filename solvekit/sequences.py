"""Sequence problems: sweeps, prefix sums, binary search and simple DP."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections.abc import MutableSequence, Sequence

I32_MIN = -(1 << 31)
I32_MAX = (1 << 31) - 1


def _require_items(values: Sequence[object], name: str) -> None:
    if not values:
        raise ValueError(f"{name} must not be empty")


def max_removal(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> int:
    """Most range-decrement queries that can be dropped while still zeroing ``nums``.

    Returns -1 when even all queries together cannot bring ``nums`` to zero.
    """
    n = len(nums)
    ordered = sorted((start, end) for start, end in queries)
    expiring = [0] * (n + 1)
    open_ends: list[int] = []
    removable = len(ordered)
    applied = 0
    next_query = 0
    for i, required in enumerate(nums):
        applied -= expiring[i]
        need = required - applied
        while next_query < len(ordered) and ordered[next_query][0] == i:
            heapq.heappush(open_ends, -ordered[next_query][1])
            next_query += 1
        while need > 0:
            if not open_ends:
                return -1
            end = -heapq.heappop(open_ends)
            if end < i:
                continue
            expiring[end + 1] += 1
            applied += 1
            need -= 1
            removable -= 1
    return removable


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse ``chars`` in place."""
    chars.reverse()


def total_hamming_distance(nums: Sequence[int]) -> int:
    """Sum of Hamming distances between all pairs of 32-bit integers."""
    n = len(nums)
    total = 0
    for bit in range(32):
        ones = sum((num >> bit) & 1 for num in nums)
        total += ones * (n - ones)
    return total


def max_distance(arrays: Sequence[Sequence[int]]) -> int:
    """Largest distance between values taken from two different sorted arrays."""
    _require_items(arrays, "arrays")
    low, high = arrays[0][0], arrays[0][-1]
    best = 0
    for array in arrays[1:]:
        first, last = array[0], array[-1]
        best = max(best, abs(first - high), abs(low - last))
        low = min(low, first)
        high = max(high, last)
    return best


def pivot_index(nums: Sequence[int]) -> int:
    """Leftmost index whose left and right sums are equal, or -1."""
    _require_items(nums, "nums")
    total = sum(nums)
    left = 0
    for i, num in enumerate(nums):
        if left == total - left - num:
            return i
        left += num
    return -1


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Keep at most two of each run in sorted ``nums``, in place; return the new length."""
    kept: list[int] = []
    for value in nums:
        if len(kept) < 2 or not value == kept[-1] == kept[-2]:
            kept.append(value)
    nums[:] = kept
    return len(kept)


def peak_index_in_mountain_array(arr: Sequence[int]) -> int:
    """Index of the peak of a mountain array, by binary search."""
    _require_items(arr, "arr")
    left, right = 0, len(arr) - 1
    while left < right:
        mid = (left + right) // 2
        if arr[mid] < arr[mid + 1]:
            left = mid + 1
        else:
            right = mid
    return left


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence (patience sorting)."""
    tails: list[int] = []
    for num in nums:
        pos = bisect_left(tails, num)
        if pos == len(tails):
            tails.append(num)
        else:
            tails[pos] = num
    return len(tails)


def length_of_lis_quadratic(nums: Sequence[int]) -> int:
    """Same as :func:`length_of_lis`, by the quadratic dynamic programme."""
    _require_items(nums, "nums")
    best_at: list[int] = []
    for i, num in enumerate(nums):
        best_at.append(
            1 + max((best_at[j] for j in range(i) if nums[j] < num), default=0)
        )
    return max(best_at)


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, climbing one or two steps at a time."""
    dp = [0] * (len(cost) + 1)
    for i in range(2, len(cost) + 1):
        dp[i] = min(dp[i - 1] + cost[i - 1], dp[i - 2] + cost[i - 2])
    return dp[-1]


def min_cost_climbing_stairs_rolling(cost: Sequence[int]) -> int:
    """Same as :func:`min_cost_climbing_stairs`, keeping only two running values."""
    if len(cost) < 2:
        raise ValueError("cost must hold at least two steps")
    before, last = cost[0], cost[1]
    for value in [*cost[2:], 0]:
        before, last = last, min(before, last) + value
    return last


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a right/down path from the top-left to the bottom-right."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    previous: list[int] | None = None
    for row in grid:
        current: list[int] = []
        for j, value in enumerate(row):
            options = []
            if previous is not None:
                options.append(previous[j])
            if j > 0:
                options.append(current[j - 1])
            current.append(value + min(options, default=0))
        previous = current
    return previous[-1]


def min_end(n: int, x: int) -> int:
    """Smallest last element of ``n`` increasing numbers whose AND is ``x``."""
    result = x
    remaining = n - 1
    bit = 1
    while remaining:
        if not x & bit:
            if remaining & 1:
                result |= bit
            remaining >>= 1
        bit <<= 1
    return result


def divide(dividend: int, divisor: int) -> int:
    """Truncated 32-bit division by shifting and subtracting, clamped to i32."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    negative = (dividend < 0) != (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0
    while remaining >= step:
        shift = 0
        while step << (shift + 1) <= remaining:
            shift += 1
        quotient += 1 << shift
        remaining -= step << shift
    if negative:
        quotient = -quotient
    return max(I32_MIN, min(I32_MAX, quotient))