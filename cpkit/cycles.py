"""Finding a cycle in a directed or an undirected graph."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from cpkit.dfs import Color


def _assemble(start: int, end: int, parent: list[Optional[int]]) -> list[int]:
    cycle = [start]
    v = end
    while v != start:
        cycle.append(v)
        v = parent[v]
    cycle.append(start)
    return cycle


def find_directed_cycle(adj: Sequence[Sequence[int]]) -> Optional[list[int]]:
    """Return a directed cycle as ``[s, ..., s]`` in edge order, or ``None``.

    Consecutive vertices of the result are joined by edges of ``adj``.
    """
    n = len(adj)
    color = [Color.WHITE] * n
    parent: list[Optional[int]] = [None] * n
    for root in range(n):
        if color[root] is not Color.WHITE:
            continue
        color[root] = Color.GRAY
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adj[root]))]
        while stack:
            v, neighbours = stack[-1]
            for u in neighbours:
                if color[u] is Color.WHITE:
                    parent[u] = v
                    color[u] = Color.GRAY
                    stack.append((u, iter(adj[u])))
                    break
                if color[u] is Color.GRAY:
                    cycle = _assemble(u, v, parent)
                    cycle.reverse()
                    return cycle
            else:
                stack.pop()
                color[v] = Color.BLACK
    return None


def find_undirected_cycle(adj: Sequence[Sequence[int]]) -> Optional[list[int]]:
    """Return a cycle of an undirected graph as ``[s, ..., s]``, or ``None``.

    The edge back to a vertex's DFS parent is not counted, so a single
    pair of parallel edges does not make a cycle.
    """
    n = len(adj)
    visited = [False] * n
    parent: list[Optional[int]] = [None] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, Optional[int], Iterator[int]]] = [
            (root, None, iter(adj[root]))
        ]
        while stack:
            v, par, neighbours = stack[-1]
            for u in neighbours:
                if u == par:
                    continue
                if visited[u]:
                    return _assemble(u, v, parent)
                visited[u] = True
                parent[u] = v
                stack.append((u, v, iter(adj[u])))
                break
            else:
                stack.pop()
    return None


def describe_cycle(cycle: Optional[Sequence[int]]) -> str:
    """Render a cycle the way it is reported: ``Acyclic`` or ``Cycle found: ...``."""
    if not cycle:
        return "Acyclic"
    return "Cycle found: " + "".join(f"{v} " for v in cycle)