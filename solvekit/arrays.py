"""Array problems: sums, bit tricks, stacks, buckets and heaps."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def _require_items(values: Sequence[int], name: str) -> None:
    if not values:
        raise ValueError(f"{name} must not be empty")


def largest_sum_after_k_negations(nums: Sequence[int], k: int) -> int:
    """Largest sum after negating elements exactly ``k`` times."""
    values = sorted(nums)
    for i, value in enumerate(values):
        if k <= 0 or value >= 0:
            break
        values[i] = -value
        k -= 1
    if k % 2 == 1:
        _require_items(values, "nums")
        values.sort()
        values[0] = -values[0]
    return sum(values)


def single_number(nums: Sequence[int]) -> int:
    """The element seen once when every other is seen three times."""
    ones = twos = 0
    for num in nums:
        twos |= ones & num
        ones ^= num
        common = ones & twos
        twos &= ~common
        ones &= ~common
    return ones


def single_number_bitwise(nums: Sequence[int]) -> int:
    """Same as :func:`single_number`, counting each of 32 bits modulo three."""
    result = 0
    for bit in range(32):
        bit_sum = sum((num >> bit) & 1 for num in nums)
        if bit_sum % 3:
            if bit == 31:
                result -= 1 << 31
            else:
                result |= 1 << bit
    return result


def lucky_numbers(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values that are the minimum of their row and maximum of their column."""
    row_min = [min(row) for row in matrix]
    col_max = [max(col) for col in zip(*matrix)]
    return [
        value
        for row, low in zip(matrix, row_min)
        for value, high in zip(row, col_max)
        if value == low == high
    ]


def final_prices(prices: Sequence[int]) -> list[int]:
    """Prices after the discount of the next price not above each one."""
    result = list(prices)
    stack: list[int] = []
    for i in reversed(range(len(prices))):
        price = prices[i]
        while stack and stack[-1] > price:
            stack.pop()
        if stack:
            result[i] -= stack[-1]
        stack.append(price)
    return result


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous subarray."""
    _require_items(nums, "nums")
    best = low = high = nums[0]
    for num in nums[1:]:
        candidates = (num, low * num, high * num)
        low, high = min(candidates), max(candidates)
        best = max(best, high)
    return best


def maximum_gap(nums: Sequence[int]) -> int:
    """Largest difference between neighbours in sorted order (buckets)."""
    if len(nums) < 2:
        return 0
    low, high = min(nums), max(nums)
    if low == high:
        return 0
    bucket_size = -(-(high - low) // (len(nums) - 1))
    bucket_count = (high - low) // bucket_size + 1
    bucket_min: list[int | None] = [None] * bucket_count
    bucket_max: list[int | None] = [None] * bucket_count
    for num in nums:
        index = (num - low) // bucket_size
        current_min, current_max = bucket_min[index], bucket_max[index]
        bucket_min[index] = num if current_min is None else min(current_min, num)
        bucket_max[index] = num if current_max is None else max(current_max, num)
    answer = 0
    prev_max = low
    for first, last in zip(bucket_min, bucket_max):
        if first is None or last is None:
            continue
        answer = max(answer, first - prev_max)
        prev_max = last
    return answer


def maximum_gap_sorted(nums: Sequence[int]) -> int:
    """Largest difference between neighbours in sorted order (by sorting)."""
    if len(nums) < 2:
        return 0
    ordered = sorted(nums)
    return max(b - a for a, b in zip(ordered, ordered[1:]))


def decrypt(code: Sequence[int], k: int) -> list[int]:
    """Replace each element by the sum of the next ``k`` (or previous ``-k``)."""
    n = len(code)
    if k == 0:
        return [0] * n
    if k > 0:
        offsets = range(1, k + 1)
    else:
        offsets = range(k, 0)
    return [sum(code[(i + d) % n] for d in offsets) for i in range(n)]


def get_maximum_xor(nums: Sequence[int], maximum_bit: int) -> list[int]:
    """Best XOR partner for each prefix, from the longest prefix down."""
    mask = (1 << maximum_bit) - 1
    result: list[int] = []
    current = 0
    for num in nums:
        current ^= num
        result.append(current ^ mask)
    result.reverse()
    return result


def pick_gifts(gifts: Sequence[int], k: int) -> int:
    """Gifts left after ``k`` times replacing the largest pile by its square root."""
    heap = [-gift for gift in gifts]
    heapq.heapify(heap)
    if heap:
        for _ in range(k):
            largest = -heap[0]
            heapq.heapreplace(heap, -math.isqrt(largest))
    return -sum(heap)


def minimum_right_shifts(nums: Sequence[int]) -> int:
    """Right shifts needed to sort distinct ``nums``, or -1 if impossible."""
    _require_items(nums, "nums")
    n = len(nums)
    pivot = 0
    while pivot < n - 1 and nums[pivot] < nums[pivot + 1]:
        pivot += 1
    if pivot == n - 1:
        return 0
    pivot += 1
    tail = nums[pivot:]
    if any(a > b for a, b in zip(tail, tail[1:])):
        return -1
    if nums[-1] > nums[0]:
        return -1
    return n - pivot


def results_array(nums: Sequence[int], k: int) -> list[int]:
    """Power of each window of size ``k``: its last value if consecutive, else -1."""
    if k < 1 or k > len(nums):
        raise ValueError("k must be between 1 and len(nums)")
    result = [-1] * (len(nums) - k + 1)
    run = 0
    prev: int | None = None
    for i, num in enumerate(nums):
        run = run + 1 if prev is not None and num == prev + 1 else 1
        if i >= k - 1 and run >= k:
            result[i - k + 1] = num
        prev = num
    return result