"""Algorithms for competitive programming: number theory, string hashing, union-find, BFS, DFS, bipartiteness, cycle finding and topological sorting."""

__version__ = "0.1.0"
__all__ = [
    "numbertheory",
    "hashing",
    "dsu",
    "bfs",
    "dfs",
    "bipartite",
    "cycles",
    "toposort",
]