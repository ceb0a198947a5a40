"""Contest problems on spanning forests and sliding windows."""

from __future__ import annotations

from collections.abc import Sequence

from solvekit.union_find import UnionFind


def aznet(
    n: int,
    a_costs: Sequence[int],
    b_costs: Sequence[int],
    edges: Sequence[Sequence[int]],
) -> list[int]:
    """Choose a spanning set of edges mixing two companies at the lowest cost.

    ``a_costs[i - 1]`` and ``b_costs[i - 1]`` are the prices of building ``i``
    links with company A (kind 1) or B (kind 2). ``edges`` holds ``(u, v, kind)``
    over vertices ``1 .. n``. Returns the 1-based indices of the chosen edges,
    in ascending order.
    """
    if len(a_costs) != n - 1 or len(b_costs) != n - 1:
        raise ValueError("a_costs and b_costs must each hold n - 1 prices")
    a = [0, *a_costs]
    b = [0, *b_costs]

    forest_a = UnionFind(n + 1)
    count_a = sum(
        1 for u, v, kind in edges if kind == 1 and forest_a.unite(u, v)
    )
    forest_b = UnionFind(n + 1)
    count_b = sum(
        1 for u, v, kind in edges if kind == 2 and forest_b.unite(u, v)
    )

    target = 0
    best: int | None = None
    for i in range(max(0, n - 1 - count_b), min(n - 1, count_a) + 1):
        price = a[i] + b[n - 1 - i]
        if best is None or price < best:
            best = price
            target = i

    chosen = [
        kind == 1 and forest_b.unite(u, v) for u, v, kind in edges
    ]

    forest = UnionFind(n + 1)
    count = 0
    for (u, v, _kind), picked in zip(edges[:-1], chosen):
        if picked and forest.unite(u, v):
            count += 1
    for index, (u, v, kind) in enumerate(edges):
        if count >= target:
            break
        if kind == 1 and not chosen[index] and forest.unite(u, v):
            chosen[index] = True
            count += 1
    for index, (u, v, kind) in enumerate(edges):
        if kind == 2 and forest.unite(u, v):
            chosen[index] = True

    return [index for index, picked in enumerate(chosen, start=1) if picked]


def min_spanning_weight(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Weight of a minimum spanning forest; ``edges`` holds 1-based ``(u, v, w)``."""
    ordered = sorted((w, u - 1, v - 1) for u, v, w in edges)
    forest = UnionFind(n)
    return sum(w for w, u, v in ordered if forest.unite(u, v))


def min_road(a: int, b: int, trees: Sequence[Sequence[int]]) -> int:
    """Shortest stretch of road holding ``a`` trees of kind 1 and ``b`` of kind 2.

    ``trees`` holds ``(position, kind)`` pairs. Returns -1 if no stretch does.
    """
    ordered = sorted(trees, key=lambda tree: tree[0])
    count_a = count_b = 0
    best: int | None = None
    left = 0
    for right, (position, kind) in enumerate(ordered):
        if kind == 1:
            count_a += 1
        else:
            count_b += 1
        while count_a >= a and count_b >= b and left < right:
            span = position - ordered[left][0]
            best = span if best is None else min(best, span)
            if ordered[left][1] == 1:
                count_a -= 1
            else:
                count_b -= 1
            left += 1
    return -1 if best is None else best