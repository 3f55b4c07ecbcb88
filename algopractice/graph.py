"""Adjacency-list graphs with breadth-first and depth-first traversal."""

from __future__ import annotations


def _check_count(vertices: int) -> None:
    if vertices < 0:
        raise ValueError("number of vertices must not be negative")


class Graph:
    """An unweighted graph over vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        _check_count(vertices)
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"vertex {node} is out of range")

    def add_edge(self, u: int, v: int, undirected: bool = True) -> None:
        """Add an edge from ``u`` to ``v``, and back unless ``undirected`` is false."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        if undirected:
            self._adjacency[v].append(u)

    def neighbours(self, node: int) -> list[int]:
        """Return the neighbours of ``node`` in the order their edges were added."""
        self._check(node)
        return list(self._adjacency[node])

    def bfs(self, source: int) -> list[int]:
        """Return the vertices reachable from ``source`` in breadth-first order."""
        self._check(source)
        visited = {source}
        order = [source]
        for node in order:
            for nbr in self._adjacency[node]:
                if nbr not in visited:
                    visited.add(nbr)
                    order.append(nbr)
        return order

    def dfs(self, source: int) -> list[int]:
        """Return the vertices reachable from ``source`` in depth-first order."""
        self._check(source)
        visited = {source}
        order = [source]
        stack = [iter(self._adjacency[source])]
        while stack:
            for nbr in stack[-1]:
                if nbr not in visited:
                    visited.add(nbr)
                    order.append(nbr)
                    stack.append(iter(self._adjacency[nbr]))
                    break
            else:
                stack.pop()
        return order

    def adjacency_lines(self) -> list[str]:
        """Return one line per vertex, such as ``0-->1,4,``."""
        return [
            f"{node}-->" + "".join(f"{nbr}," for nbr in nbrs)
            for node, nbrs in enumerate(self._adjacency)
        ]


class WeightedGraph:
    """A weighted graph over vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        _check_count(vertices)
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"vertex {node} is out of range")

    def add_edge(self, u: int, v: int, weight: int, undirected: bool = True) -> None:
        """Add an edge of ``weight`` from ``u`` to ``v``, and back unless directed."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, weight))
        if undirected:
            self._adjacency[v].append((u, weight))

    def edges(self, node: int) -> list[tuple[int, int]]:
        """Return ``(neighbour, weight)`` pairs leaving ``node``, in insertion order."""
        self._check(node)
        return list(self._adjacency[node])