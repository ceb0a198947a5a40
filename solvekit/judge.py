"""Judge-style problems and a command that solves them from judge input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from fractions import Fraction

from solvekit.contest import aznet, min_road, min_spanning_weight

Point = tuple[int, int]


def _slope_key(origin: Point, point: Point) -> tuple[int, Fraction]:
    """Sort key for the slope from ``origin`` to ``point``; vertical sorts last."""
    dx = point[0] - origin[0]
    dy = point[1] - origin[1]
    if dx == 0:
        return (1, Fraction(0))
    return (0, Fraction(dy, dx))


def _first_shared_slope(origin: Point, points: Sequence[Point]) -> tuple[int, int] | None:
    ordered = sorted(range(len(points)), key=lambda j: _slope_key(origin, points[j]))
    for j, k in zip(ordered, ordered[1:]):
        if _slope_key(origin, points[j]) == _slope_key(origin, points[k]):
            return j, k
    return None


def ballgmvn(
    a_points: Sequence[Point], b_points: Sequence[Point]
) -> tuple[int, int, int] | None:
    """Find three collinear points taking from both teams.

    Points of ``a_points`` are numbered ``1 .. n`` and those of ``b_points``
    ``n+1 .. 2n``. Returns the three numbers, or None if no such triple exists.
    One point of A with two of B is looked for first, then two of A with one of B.
    """
    n = len(a_points)
    if len(b_points) != n:
        raise ValueError("both teams must have the same number of points")
    for i, origin in enumerate(a_points):
        pair = _first_shared_slope(origin, b_points)
        if pair is not None:
            j, k = pair
            return i + 1, j + n + 1, k + n + 1
    for j, origin in enumerate(b_points):
        pair = _first_shared_slope(origin, a_points)
        if pair is not None:
            i, k = pair
            return i + 1, k + 1, j + n + 1
    return None


def lcs2x(a: Sequence[int], b: Sequence[int]) -> int:
    """Longest common subsequence where each element is at least twice the previous.

    ``dp[j]`` is the length of the best such subsequence ending at ``b[j]``.
    """
    if not b:
        raise ValueError("b must not be empty")
    dp = [0] * len(b)
    for value in a:
        best = 0
        for j, other in enumerate(b):
            before = best
            if 2 * other <= value:
                best = max(best, dp[j])
            if value == other:
                dp[j] = max(dp[j], before + 1)
    return max(dp)


class _Tokens:
    """Whitespace-separated integers of judge input, read in order."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def int(self) -> int:
        try:
            token = next(self._items)
        except StopIteration:
            raise ValueError("input ended too early") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.int(), self.int()) for _ in range(count)]

    def triples(self, count: int) -> list[tuple[int, int, int]]:
        return [(self.int(), self.int(), self.int()) for _ in range(count)]


def _solve_ballgmvn(tokens: _Tokens) -> list[str]:
    n = tokens.int()
    a_points = tokens.pairs(n)
    b_points = tokens.pairs(n)
    found = ballgmvn(a_points, b_points)
    return ["-1" if found is None else " ".join(map(str, found))]


def _solve_lcs2x(tokens: _Tokens) -> list[str]:
    lines = []
    for _ in range(tokens.int()):
        m, n = tokens.int(), tokens.int()
        a = tokens.ints(m)
        b = tokens.ints(n)
        lines.append(str(lcs2x(a, b)))
    return lines


def _solve_aznet(tokens: _Tokens) -> list[str]:
    lines = []
    for _ in range(tokens.int()):
        n, m = tokens.int(), tokens.int()
        a_costs = tokens.ints(n - 1)
        b_costs = tokens.ints(n - 1)
        edges = tokens.triples(m)
        lines.append(" ".join(map(str, aznet(n, a_costs, b_costs, edges))))
    return lines


def _solve_minroad(tokens: _Tokens) -> list[str]:
    n, a, b = tokens.int(), tokens.int(), tokens.int()
    trees = tokens.pairs(n)
    return [str(min_road(a, b, trees))]


def _solve_qbmst(tokens: _Tokens) -> list[str]:
    n, m = tokens.int(), tokens.int()
    edges = tokens.triples(m)
    return [str(min_spanning_weight(n, edges))]


_PROBLEMS: dict[str, Callable[[_Tokens], list[str]]] = {
    "aznet": _solve_aznet,
    "ballgmvn": _solve_ballgmvn,
    "lcs2x": _solve_lcs2x,
    "minroad": _solve_minroad,
    "qbmst": _solve_qbmst,
}


def solve(problem: str, text: str) -> str:
    """Answer judge input ``text`` for ``problem``; one output line per answer."""
    try:
        handler = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    return "\n".join(handler(_Tokens(text)))


def main(argv: Sequence[str] | None = None) -> int:
    """Read judge input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="solvekit", description="Solve a judge problem from its input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    parser.add_argument(
        "input", nargs="?", help="file holding the input (default: standard input)"
    )
    args = parser.parse_args(argv)
    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = solve(args.problem, text)
    except (OSError, ValueError) as exc:
        print(f"solvekit: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0