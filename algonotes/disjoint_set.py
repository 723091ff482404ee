"""Disjoint-set forests with path compression, united by rank or by size."""

from __future__ import annotations


def _new_parents(n: int) -> list[int]:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return list(range(n + 1))


def _find(parent: list[int], node: int) -> int:
    if not 0 <= node < len(parent):
        raise IndexError(f"node {node} is outside 0..{len(parent) - 1}")
    root = node
    while parent[root] != root:
        root = parent[root]
    while parent[node] != root:
        parent[node], node = root, parent[node]
    return root


class DisjointSetByRank:
    """Disjoint sets over nodes 0..n, joined by union by rank."""

    def __init__(self, n: int) -> None:
        self._parent = _new_parents(n)
        self._rank = [0] * (n + 1)

    def find(self, node: int) -> int:
        """Return the representative of ``node``'s set, compressing the path."""
        return _find(self._parent, node)

    def union(self, u: int, v: int) -> None:
        """Join the sets holding ``u`` and ``v``."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_u] > self._rank[root_v]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_u] = root_v
            self._rank[root_v] += 1

    def connected(self, u: int, v: int) -> bool:
        """Return True if ``u`` and ``v`` belong to the same set."""
        return self.find(u) == self.find(v)


class DisjointSetBySize:
    """Disjoint sets over nodes 0..n, joined by union by size."""

    def __init__(self, n: int) -> None:
        self._parent = _new_parents(n)
        self._size = [1] * (n + 1)

    def find(self, node: int) -> int:
        """Return the representative of ``node``'s set, compressing the path."""
        return _find(self._parent, node)

    def union(self, u: int, v: int) -> None:
        """Join the sets holding ``u`` and ``v``; the smaller set joins the larger."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return
        if self._size[root_u] < self._size[root_v]:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]
        else:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]

    def connected(self, u: int, v: int) -> bool:
        """Return True if ``u`` and ``v`` belong to the same set."""
        return self.find(u) == self.find(v)