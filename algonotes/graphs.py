"""Adjacency-list graphs, breadth- and depth-first traversal, adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Graph:
    """An unweighted graph stored as adjacency lists, in edge insertion order."""

    def __init__(self, directed: bool = False) -> None:
        self.directed = directed
        self._adj: dict[int, list[int]] = {}

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge from ``u`` to ``v``, and back again if undirected."""
        self._adj.setdefault(u, []).append(v)
        if not self.directed:
            self._adj.setdefault(v, []).append(u)

    def neighbors(self, node: int) -> list[int]:
        """Return the nodes adjacent to ``node``, in the order they were added."""
        return list(self._adj.get(node, ()))

    def format_adjacency(self) -> str:
        """Render the adjacency lists, one ``node->n1  n2  `` line per node."""
        return "\n".join(
            f"{node}->" + "".join(f"{other}  " for other in others)
            for node, others in self._adj.items()
        )


class WeightedGraph:
    """A weighted graph whose adjacency lists hold ``(node, weight)`` pairs."""

    def __init__(self, directed: bool = False) -> None:
        self.directed = directed
        self._adj: dict[int, list[tuple[int, int]]] = {}

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an edge of the given weight from ``u`` to ``v``, and back if undirected."""
        self._adj.setdefault(u, []).append((v, weight))
        if not self.directed:
            self._adj.setdefault(v, []).append((u, weight))

    def neighbors(self, node: int) -> list[tuple[int, int]]:
        """Return the ``(node, weight)`` pairs adjacent to ``node``."""
        return list(self._adj.get(node, ()))

    def format_adjacency(self) -> str:
        """Render the adjacency lists, one ``node ---> (n w) `` line per node."""
        return "\n".join(
            f"{node} ---> " + "".join(f"({other} {weight}) " for other, weight in pairs)
            for node, pairs in self._adj.items()
        )


def bfs(graph: Graph, node_count: int) -> list[int]:
    """Breadth-first order of every component, starting from nodes 1..node_count."""
    visited: set[int] = set()
    order: list[int] = []
    for start in range(1, node_count + 1):
        if start in visited:
            continue
        visited.add(start)
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for other in graph.neighbors(node):
                if other not in visited:
                    visited.add(other)
                    queue.append(other)
    return order


def dfs(graph: Graph, node_count: int) -> list[int]:
    """Depth-first (pre-order) order of every component, from nodes 1..node_count."""
    visited: set[int] = set()
    order: list[int] = []
    for start in range(1, node_count + 1):
        if start in visited:
            continue
        visited.add(start)
        order.append(start)
        stack = [iter(graph.neighbors(start))]
        while stack:
            for other in stack[-1]:
                if other not in visited:
                    visited.add(other)
                    order.append(other)
                    stack.append(iter(graph.neighbors(other)))
                    break
            else:
                stack.pop()
    return order


def _check_node(node: int, node_count: int) -> None:
    if not 1 <= node <= node_count:
        raise ValueError(f"node {node} is outside 1..{node_count}")


def adjacency_matrix(
    node_count: int, edges: Iterable[tuple[int, int]], directed: bool = False
) -> list[list[int]]:
    """Return a 0/1 matrix for nodes 1..node_count; row ``u - 1`` is node ``u``."""
    matrix = [[0] * node_count for _ in range(node_count)]
    for u, v in edges:
        _check_node(u, node_count)
        _check_node(v, node_count)
        matrix[u - 1][v - 1] = 1
        if not directed:
            matrix[v - 1][u - 1] = 1
    return matrix


def weighted_adjacency_matrix(
    node_count: int, edges: Iterable[tuple[int, int, int]]
) -> list[list[int]]:
    """Return a symmetric weight matrix for an undirected graph on nodes 1..node_count."""
    matrix = [[0] * node_count for _ in range(node_count)]
    for u, v, weight in edges:
        _check_node(u, node_count)
        _check_node(v, node_count)
        matrix[u - 1][v - 1] = weight
        matrix[v - 1][u - 1] = weight
    return matrix