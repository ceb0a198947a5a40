import pytest

from solvekit.strings import (
    convert,
    generate_parenthesis,
    is_palindrome,
    length_of_longest_substring,
    longest_common_subsequence,
    longest_common_subsequence_alt,
    longest_palindrome,
    min_swaps,
    min_swaps_greedy,
    minimum_deletions,
    remove_occurrences,
    roman_to_int,
)

LCS_CASES = [
    ("abcde", "ace", 3),
    ("abc", "abc", 3),
    ("abc", "def", 0),
    ("abcba", "abcbcba", 5),
    ("bsbininm", "jmjkbkjkv", 1),
]


@pytest.mark.parametrize("a, b, expected", LCS_CASES)
def test_longest_common_subsequence(a, b, expected):
    assert longest_common_subsequence(a, b) == expected


@pytest.mark.parametrize("a, b, expected", LCS_CASES)
def test_longest_common_subsequence_alt(a, b, expected):
    assert longest_common_subsequence_alt(a, b) == expected


def test_lcs_with_empty_text():
    assert longest_common_subsequence("", "abc") == 0
    assert longest_common_subsequence_alt("abc", "") == 0


@pytest.mark.parametrize(
    "s, expected",
    [
        ("A man, a plan, a canal: Panama", True),
        ("", True),
        ("race a car", False),
        ("0P", False),
    ],
)
def test_is_palindrome(s, expected):
    assert is_palindrome(s) is expected


@pytest.mark.parametrize(
    "s, expected", [("MCMXCIV", 1994), ("III", 3), ("LVIII", 58), ("IV", 4)]
)
def test_roman_to_int(s, expected):
    assert roman_to_int(s) == expected


def test_roman_to_int_rejects_unknown_digit():
    with pytest.raises(ValueError):
        roman_to_int("XQ")


@pytest.mark.parametrize(
    "s, expected", [("aababbab", 2), ("bbaaaaabb", 2), ("bb", 0), ("aa", 0)]
)
def test_minimum_deletions(s, expected):
    assert minimum_deletions(s) == expected


@pytest.mark.parametrize(
    "s, part, expected",
    [
        ("daabcbaabcbc", "abc", "dab"),
        ("axxxxyyyyb", "xy", "ab"),
        ("aaa", "a", ""),
    ],
)
def test_remove_occurrences(s, part, expected):
    assert remove_occurrences(s, part) == expected


def test_remove_occurrences_rejects_empty_part():
    with pytest.raises(ValueError):
        remove_occurrences("abc", "")


SWAP_CASES = [("][][", 1), ("]]][[[", 2), ("[[[]]]][][]][[]]][[[", 2), ("[]", 0)]


@pytest.mark.parametrize("s, expected", SWAP_CASES)
def test_min_swaps(s, expected):
    assert min_swaps(s) == expected


@pytest.mark.parametrize("s, expected", SWAP_CASES)
def test_min_swaps_greedy(s, expected):
    assert min_swaps_greedy(s) == expected


def test_generate_parenthesis():
    assert generate_parenthesis(3) == ["()()()", "()(())", "(())()", "(()())", "((()))"]
    assert generate_parenthesis(1) == ["()"]


def test_generate_parenthesis_counts_catalan():
    assert len(generate_parenthesis(4)) == 14
    assert len(set(generate_parenthesis(4))) == 14


@pytest.mark.parametrize(
    "s, expected",
    [
        ("abcabcbb", 3),
        ("bbbbb", 1),
        ("pwwkew", 3),
        ("aab", 2),
        ("dvdf", 3),
        ("tmmzuxt", 5),
        ("", 0),
    ],
)
def test_length_of_longest_substring(s, expected):
    assert length_of_longest_substring(s) == expected


@pytest.mark.parametrize(
    "s, expected",
    [
        ("babad", "bab"),
        ("cbbd", "bb"),
        ("a", "a"),
        ("aa", "aa"),
        ("aab", "aa"),
        ("aba", "aba"),
    ],
)
def test_longest_palindrome(s, expected):
    assert longest_palindrome(s) == expected


def test_longest_palindrome_rejects_empty():
    with pytest.raises(ValueError):
        longest_palindrome("")


@pytest.mark.parametrize(
    "s, rows, expected",
    [
        ("PAYPALISHIRING", 3, "PAHNAPLSIIGYIR"),
        ("PAYPALISHIRING", 4, "PINALSIGYAHRPI"),
        ("AB", 1, "AB"),
    ],
)
def test_convert(s, rows, expected):
    assert convert(s, rows) == expected


def test_convert_rejects_zero_rows():
    with pytest.raises(ValueError):
        convert("abc", 0)