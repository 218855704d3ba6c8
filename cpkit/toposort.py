"""Topological ordering of a directed graph."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence


class CyclicGraphError(ValueError):
    """Raised when a graph with a cycle is asked for a topological order."""

    def __init__(self, order: list[int]) -> None:
        super().__init__("Graph is cyclic")
        self.order = order


def topological_sort(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return vertices in reverse DFS finishing order.

    For an acyclic graph every edge points forward in the result. Cycles
    are not detected; use :func:`kahn_sort` for that.
    """
    n = len(adj)
    visited = [False] * n
    finished: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adj[root]))]
        while stack:
            v, neighbours = stack[-1]
            for u in neighbours:
                if not visited[u]:
                    visited[u] = True
                    stack.append((u, iter(adj[u])))
                    break
            else:
                stack.pop()
                finished.append(v)
    finished.reverse()
    return finished


def kahn_sort(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return a topological order by repeatedly removing in-degree-zero vertices.

    Ready vertices are taken first-in first-out, starting from the lowest
    index. Raises CyclicGraphError, carrying the partial order, if some
    vertices could never be removed.
    """
    n = len(adj)
    indegree = [0] * n
    for targets in adj:
        for u in targets:
            indegree[u] += 1
    queue = deque(v for v in range(n) if indegree[v] == 0)
    order: list[int] = []
    while queue:
        x = queue.popleft()
        order.append(x)
        for u in adj[x]:
            indegree[u] -= 1
            if indegree[u] == 0:
                queue.append(u)
    if len(order) < n:
        raise CyclicGraphError(order)
    return order