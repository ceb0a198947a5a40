"""String problems: subsequences, palindromes, brackets and layouts."""

from __future__ import annotations

from itertools import cycle

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    dp = [0] * (len(text2) + 1)
    for ca in text1:
        diagonal = 0
        for j, cb in enumerate(text2):
            above = dp[j + 1]
            dp[j + 1] = diagonal + 1 if ca == cb else max(dp[j], above)
            diagonal = above
    return dp[-1]


def longest_common_subsequence_alt(text1: str, text2: str) -> int:
    """Same as :func:`longest_common_subsequence`, in the form used for LCIS.

    ``dp[j]`` is the longest common subsequence ending at ``text2[j]``.
    """
    dp = [0] * len(text2)
    for ca in text1:
        best = 0
        for j, cb in enumerate(text2):
            before = best
            best = max(best, dp[j])
            if ca == cb:
                dp[j] = max(dp[j], before + 1)
    return max(dp, default=0)


def is_palindrome(s: str) -> bool:
    """Whether the ASCII letters and digits of ``s`` read the same both ways."""
    cleaned = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return cleaned == cleaned[::-1]


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral."""
    total = 0
    prev = 0
    for c in reversed(s):
        try:
            value = _ROMAN_VALUES[c]
        except KeyError:
            raise ValueError(f"not a Roman numeral digit: {c!r}") from None
        total += -value if value < prev else value
        prev = value
    return total


def minimum_deletions(s: str) -> int:
    """Fewest deletions making a string of 'a' and 'b' have no 'b' before an 'a'."""
    count_b = 0
    result = 0
    for c in s:
        if c == "b":
            count_b += 1
        else:
            result = min(result + 1, count_b)
    return result


def remove_occurrences(s: str, part: str) -> str:
    """Repeatedly remove the leftmost occurrence of ``part`` from ``s``."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def min_swaps(s: str) -> int:
    """Fewest swaps that balance a bracket string of equal '[' and ']' counts."""
    balance = 0
    deepest = 0
    for c in s:
        balance += 1 if c == "[" else -1
        deepest = max(deepest, -balance)
    return (deepest + 1) >> 1


def min_swaps_greedy(s: str) -> int:
    """Same as :func:`min_swaps`, by swapping unmatched ']' with the last ']'s."""
    chars = list(s)
    n = len(chars)
    open_count = 0
    swaps = 0
    for i in range(n):
        if chars[i] == "[":
            open_count += 1
        elif open_count == 0:
            last = n - swaps - 1
            chars[i], chars[last] = chars[last], chars[i]
            swaps += 1
            open_count += 1
        else:
            open_count -= 1
    return swaps


def generate_parenthesis(n: int) -> list[str]:
    """All balanced strings of ``n`` bracket pairs, in depth-first stack order."""
    result: list[str] = []
    stack = [("", 0, 0)]
    while stack:
        prefix, opened, closed = stack.pop()
        if len(prefix) == 2 * n:
            result.append(prefix)
            continue
        if opened < n:
            stack.append((prefix + "(", opened + 1, closed))
        if closed < opened:
            stack.append((prefix + ")", opened, closed + 1))
    return result


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    best = 0
    window = ""
    for c in s:
        if c in window:
            window = window[window.index(c) + 1 :] + c
        else:
            window += c
            best = max(best, len(window))
    return best


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the earliest one wins ties."""
    if not s:
        raise ValueError("s must not be empty")
    n = len(s)
    best = s[0]
    for i in range(n):
        for lo, hi in ((i, i), (i, i + 1)):
            while lo >= 0 and hi < n and s[lo] == s[hi]:
                if hi - lo + 1 > len(best):
                    best = s[lo : hi + 1]
                lo -= 1
                hi += 1
    return best


def convert(s: str, num_rows: int) -> str:
    """Read ``s`` written in a zigzag over ``num_rows`` rows, row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    order = [*range(num_rows), *range(num_rows - 2, 0, -1)]
    for c, row in zip(s, cycle(order)):
        rows[row].append(c)
    return "".join("".join(row) for row in rows)