"""Graph problems: minimum spanning cost and minimum-height tree roots."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import combinations

from solvekit.union_find import UnionFind


def min_cost_connect_points(points: Sequence[Sequence[int]]) -> int:
    """Cost of connecting all points under Manhattan distance (Kruskal)."""
    edges = sorted(
        (abs(p[0] - q[0]) + abs(p[1] - q[1]), i, j)
        for (i, p), (j, q) in combinations(enumerate(points), 2)
    )
    uf = UnionFind(len(points))
    return sum(dist for dist, i, j in edges if uf.unite(i, j))


def _adjacency(n: int, edges: Sequence[Sequence[int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def find_height(n: int, root: int, edges: Sequence[Sequence[int]]) -> int:
    """Height of the tree on ``n`` nodes when rooted at ``root``."""
    adj = _adjacency(n, edges)
    depth = [0] * n
    depth[root] = 1
    queue = deque([root])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if depth[v] == 0:
                depth[v] = depth[u] + 1
                queue.append(v)
    return max(depth) - 1


def find_min_height_trees_brute(n: int, edges: Sequence[Sequence[int]]) -> list[int]:
    """Roots of minimum-height trees, found by measuring every root."""
    heights = [find_height(n, root, edges) for root in range(n)]
    lowest = min(heights)
    return [root for root, h in enumerate(heights) if h == lowest]


def find_min_height_trees(n: int, edges: Sequence[Sequence[int]]) -> list[int]:
    """Roots of minimum-height trees, found by trimming leaves."""
    if n == 1:
        return [0]
    adj = _adjacency(n, edges)
    degree = [len(neighbours) for neighbours in adj]
    queue = deque(node for node in range(n) if degree[node] == 1)
    remaining = n
    while remaining > 2:
        leaves = len(queue)
        remaining -= leaves
        for _ in range(leaves):
            leaf = queue.popleft()
            for nei in adj[leaf]:
                degree[nei] -= 1
                if degree[nei] == 1:
                    queue.append(nei)
    return list(queue)