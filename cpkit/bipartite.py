"""Bipartiteness check by breadth-first two-colouring."""

from __future__ import annotations

from collections import deque
from typing import Optional, Sequence


def two_coloring(adj: Sequence[Sequence[int]]) -> Optional[list[int]]:
    """Return a side (0 or 1) for every vertex, or ``None`` if none exists.

    Each component is coloured by BFS from its lowest-numbered vertex,
    which is put on side 0.
    """
    n = len(adj)
    side = [-1] * n
    bipartite = True
    for start in range(n):
        if side[start] != -1:
            continue
        side[start] = 0
        queue = deque([start])
        while queue:
            v = queue.popleft()
            for u in adj[v]:
                if side[u] == -1:
                    side[u] = side[v] ^ 1
                    queue.append(u)
                elif side[u] == side[v]:
                    bipartite = False
    return side if bipartite else None


def is_bipartite(adj: Sequence[Sequence[int]]) -> bool:
    """Tell whether the undirected graph ``adj`` is bipartite."""
    return two_coloring(adj) is not None