"""Depth-first search: reachability and entry/exit timestamps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Sequence


class Color(IntEnum):
    """Visiting state of a vertex during a depth-first search."""

    WHITE = 0  # not visited yet
    GRAY = 1  # on the current branch, children still being explored
    BLACK = 2  # finished, every reachable child explored


@dataclass
class DfsTimes:
    """Entry and exit times of a full depth-first traversal."""

    time_in: list[int]
    time_out: list[int]
    color: list[Color]

    def is_ancestor(self, u: int, v: int) -> bool:
        """Tell whether ``u`` is an ancestor of ``v`` (or ``v`` itself) in the DFS forest."""
        return self.time_in[u] <= self.time_in[v] and self.time_out[v] <= self.time_out[u]

    def descendants(self, v: int) -> int:
        """Return the number of proper descendants of ``v`` in the DFS forest."""
        return (self.time_out[v] - self.time_in[v] - 1) // 2


def _check_vertex(adj: Sequence[Sequence[int]], v: int) -> None:
    if not 0 <= v < len(adj):
        raise IndexError(f"vertex {v} out of range for {len(adj)} vertices")


def reachable(adj: Sequence[Sequence[int]], start: int) -> set[int]:
    """Return every vertex reachable from ``start``, ``start`` included."""
    _check_vertex(adj, start)
    visited = {start}
    stack = [start]
    while stack:
        v = stack.pop()
        for u in adj[v]:
            if u not in visited:
                visited.add(u)
                stack.append(u)
    return visited


def timestamps(adj: Sequence[Sequence[int]]) -> DfsTimes:
    """Run DFS from every unvisited vertex in index order and record times.

    A single counter ticks on each entry and each exit, so the times of all
    vertices together are exactly ``0 .. 2n - 1``.
    """
    n = len(adj)
    color = [Color.WHITE] * n
    time_in = [0] * n
    time_out = [0] * n
    timer = 0

    for root in range(n):
        if color[root] is not Color.WHITE:
            continue
        time_in[root] = timer
        timer += 1
        color[root] = Color.GRAY
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adj[root]))]
        while stack:
            v, neighbours = stack[-1]
            for u in neighbours:
                if color[u] is Color.WHITE:
                    time_in[u] = timer
                    timer += 1
                    color[u] = Color.GRAY
                    stack.append((u, iter(adj[u])))
                    break
            else:
                stack.pop()
                color[v] = Color.BLACK
                time_out[v] = timer
                timer += 1

    return DfsTimes(time_in, time_out, color)