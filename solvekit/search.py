"""Exhaustive search problems: partitions, arrangements and sticker covers."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from functools import cache

_ALPHABET = 26


def _letter_index(c: str) -> int:
    if not ("a" <= c <= "z"):
        raise ValueError(f"expected a lowercase ASCII letter, got {c!r}")
    return ord(c) - ord("a")


def _letter_counts(word: str) -> list[int]:
    counts = [0] * _ALPHABET
    for c in word:
        counts[_letter_index(c)] += 1
    return counts


def makesquare(matchsticks: Sequence[int]) -> bool:
    """Whether all matchsticks together form the four equal sides of a square."""
    total = sum(matchsticks)
    if total % 4:
        return False
    target = total // 4
    if any(stick > target for stick in matchsticks):
        return False
    sticks = sorted(matchsticks, reverse=True)
    sides = [0] * 4

    def place(pos: int) -> bool:
        if pos == len(sticks):
            return sides[0] == sides[1] == sides[2] == sides[3]
        stick = sticks[pos]
        for i in range(4):
            if sides[i] + stick > target:
                continue
            # Sides of equal length are interchangeable; try only the first.
            if sides[i] in sides[:i]:
                continue
            sides[i] += stick
            if place(pos + 1):
                return True
            sides[i] -= stick
        return False

    return place(0)


def count_arrangement(n: int) -> int:
    """Number of permutations of ``1..n`` where each value and its position divide."""
    if n < 0:
        raise ValueError("n must not be negative")
    full = (1 << n) - 1

    @cache
    def count(mask: int, pos: int) -> int:
        if mask == full:
            return 1
        return sum(
            count(mask | (1 << (value - 1)), pos - 1)
            for value in range(n, 0, -1)
            if not mask & (1 << (value - 1))
            and (value % pos == 0 or pos % value == 0)
        )

    return count(0, n)


def count_arrangement_backtrack(n: int) -> int:
    """Same as :func:`count_arrangement`, by plain backtracking."""
    if n < 0:
        raise ValueError("n must not be negative")
    used = [False] * (n + 1)

    def fill(position: int) -> int:
        if position > n:
            return 1
        total = 0
        for value in range(1, n + 1):
            if not used[value] and (value % position == 0 or position % value == 0):
                used[value] = True
                total += fill(position + 1)
                used[value] = False
        return total

    return fill(1)


def min_stickers_memo(stickers: Sequence[str], target: str) -> int:
    """Fewest stickers whose letters spell ``target``, or -1 (memoised recursion)."""
    sticker_counts = [_letter_counts(sticker) for sticker in stickers]
    memo: dict[str, float] = {"": 0}

    def solve(remaining: str) -> float:
        if remaining in memo:
            return memo[remaining]
        need = _letter_counts(remaining)
        first = _letter_index(remaining[0])
        best = math.inf
        for counts in sticker_counts:
            if counts[first] == 0:
                continue
            rest = "".join(
                chr(ord("a") + letter) * (wanted - have)
                for letter, (wanted, have) in enumerate(zip(need, counts))
                if wanted > 0 and wanted - have > 0
            )
            best = min(best, 1 + solve(rest))
        memo[remaining] = best
        return best

    result = solve(target)
    return -1 if result == math.inf else int(result)


def _undominated(profiles: list[tuple[int, ...]]) -> list[tuple[int, ...]]:
    distinct = list(dict.fromkeys(profiles))
    return [
        profile
        for profile in distinct
        if not any(
            other != profile and all(p <= o for p, o in zip(profile, other))
            for other in distinct
        )
    ]


def min_stickers(stickers: Sequence[str], target: str) -> int:
    """Fewest stickers whose letters spell ``target``, or -1 (breadth-first search)."""
    slot: dict[str, int] = {}
    for c in target:
        _letter_index(c)
        slot.setdefault(c, len(slot))

    need = [0] * len(slot)
    for c in target:
        need[slot[c]] += 1

    profiles = []
    for sticker in stickers:
        counts = [0] * len(slot)
        for c in sticker:
            _letter_index(c)
            if c in slot:
                counts[slot[c]] += 1
        profiles.append(tuple(counts))
    # A sticker whose letters another sticker also offers is never needed.
    useful = _undominated(profiles)

    queue: deque[tuple[int, ...]] = deque([tuple(need)])
    visited: set[tuple[int, ...]] = set()
    steps = 0
    while queue:
        steps += 1
        for _ in range(len(queue)):
            state = queue.popleft()
            if state in visited:
                continue
            visited.add(state)
            first = next((i for i, f in enumerate(state) if f > 0), None)
            if first is None:
                return steps - 1
            for profile in useful:
                if profile[first] == 0:
                    continue
                after = tuple(max(0, f - p) for f, p in zip(state, profile))
                if not any(after):
                    return steps
                queue.append(after)
    return -1


def can_partition_k_subsets(nums: Sequence[int], k: int) -> bool:
    """Whether ``nums`` splits into ``k`` subsets of equal sum."""
    if k < 1:
        raise ValueError("k must be at least 1")
    total = sum(nums)
    if total % k:
        return False
    target = total // k
    if any(num > target for num in nums):
        return False
    values = sorted(nums, reverse=True)
    memo: dict[int, bool] = {}

    def fill(groups: int, current: int, mask: int) -> bool:
        if groups == 1:
            memo[mask] = True
            return True
        if mask in memo:
            return memo[mask]
        if current == target:
            result = fill(groups - 1, 0, mask)
            memo[mask] = result
            return result
        for i, value in enumerate(values):
            bit = 1 << i
            if not mask & bit and current + value <= target:
                if fill(groups, current + value, mask | bit):
                    memo[mask] = True
                    return True
        memo[mask] = False
        return False

    return fill(k, 0, 0)