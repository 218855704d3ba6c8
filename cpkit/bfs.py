"""Breadth-first search over an adjacency list."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass
class BfsResult:
    """Distances, parents and visiting order from one BFS run.

    Unreached vertices have ``None`` as distance and parent; the source's
    parent is ``None`` as well.
    """

    source: int
    distance: List[Optional[int]]
    parent: List[Optional[int]]
    order: List[int]

    def reached(self, v: int) -> bool:
        """Tell whether ``v`` is reachable from the source."""
        return self.distance[v] is not None

    def path_to(self, target: int) -> List[int]:
        """Return a shortest path from the source to ``target``.

        Raises ValueError if ``target`` cannot be reached.
        """
        if not self.reached(target):
            raise ValueError(f"vertex {target} is not reachable from {self.source}")
        path = []
        v: Optional[int] = target
        while v is not None:
            path.append(v)
            v = self.parent[v]
        path.reverse()
        return path


def bfs(adj: Sequence[Sequence[int]], source: int) -> BfsResult:
    """Run BFS from ``source`` over vertices ``0 .. len(adj) - 1``."""
    n = len(adj)
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range for {n} vertices")
    distance: List[Optional[int]] = [None] * n
    parent: List[Optional[int]] = [None] * n
    order: List[int] = []
    distance[source] = 0
    queue = deque([source])
    while queue:
        v = queue.popleft()
        order.append(v)
        for u in adj[v]:
            if distance[u] is None:
                distance[u] = distance[v] + 1
                parent[u] = v
                queue.append(u)
    return BfsResult(source, distance, parent, order)