"""Disjoint-set union with path compression and union by size or rank."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Hashable


class UnionStrategy(Enum):
    """How the root of a merged set is chosen."""

    SIZE = "size"
    RANK = "rank"


class DisjointSet:
    """A union-find structure over arbitrary hashable elements."""

    def __init__(self, strategy: UnionStrategy = UnionStrategy.SIZE) -> None:
        self.strategy = strategy
        self._parent: Dict[Hashable, Hashable] = {}
        self._size: Dict[Hashable, int] = {}
        self._rank: Dict[Hashable, int] = {}

    def __contains__(self, v: Hashable) -> bool:
        return v in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def make_set(self, v: Hashable) -> None:
        """Make ``v`` the sole member of a new set."""
        self._parent[v] = v
        self._size[v] = 1
        self._rank[v] = 0

    def find(self, v: Hashable) -> Hashable:
        """Return the representative of ``v``'s set, compressing the path.

        Raises KeyError if ``v`` was never added.
        """
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while v != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, a: Hashable, b: Hashable) -> Hashable:
        """Merge the sets holding ``a`` and ``b`` and return the new root."""
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return a
        if self.strategy is UnionStrategy.SIZE:
            if self._size[a] < self._size[b]:
                a, b = b, a
        else:
            if self._rank[a] < self._rank[b]:
                a, b = b, a
            if self._rank[a] == self._rank[b]:
                self._rank[a] += 1
        self._parent[b] = a
        self._size[a] += self._size[b]
        return a

    def size(self, v: Hashable) -> int:
        """Return the number of elements in ``v``'s set."""
        return self._size[self.find(v)]

    def rank(self, v: Hashable) -> int:
        """Return the rank of ``v``'s root under the rank strategy."""
        if self.strategy is not UnionStrategy.RANK:
            raise ValueError("rank is only maintained with UnionStrategy.RANK")
        return self._rank[self.find(v)]