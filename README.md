# cpkit

A small pure-Python toolbox of classic algorithms for competitive
programming. It needs nothing outside the standard library.

## Installation

```
pip install cpkit
```

## Modules

Graphs are adjacency lists: `adj[v]` holds the neighbours of vertex `v`.
Vertices are numbered `0 .. len(adj) - 1`. For undirected graphs, list each
edge in both directions.

### `cpkit.numbertheory`

- `factorial(n, mod=10**17)`: `n!` reduced modulo `mod`. For `n < 2` the
  result is `1 % mod`.
- `binpow(a, b, m)`: `a ** b % m` by repeated squaring. A non-positive
  exponent gives `1`.
- `lcm(a, b)`: `a * b // gcd(a, b)`. Raises `ZeroDivisionError` when both
  arguments are zero.
- `binomial(n, k)`: C(n, k) computed in floating point in O(k) steps; exact
  only while the value fits a double.

### `cpkit.hashing`

- `compute_hash(s, base=31, modulus=10**9 + 9)`: polynomial hash where the
  character at position `i` contributes `(ord(c) - ord('a') + 1) * base**i`,
  all modulo `modulus`.

### `cpkit.dsu`

- `UnionStrategy.SIZE` / `UnionStrategy.RANK`: how the surviving root is
  chosen on a merge.
- `DisjointSet(strategy=UnionStrategy.SIZE)`: union-find over any hashable
  elements, with path compression.
  - `make_set(v)` adds (or resets) `v` as a singleton set.
  - `find(v)` returns the representative; raises `KeyError` for an element
    never added.
  - `union(a, b)` merges the two sets and returns the new root.
  - `size(v)` is the number of elements in `v`'s set.
  - `rank(v)` is the rank of `v`'s root; raises `ValueError` unless the
    strategy is `RANK`.
  - `v in dsu` and `len(dsu)` tell membership and the number of elements.

### `cpkit.bfs`

- `bfs(adj, source)` returns a `BfsResult` with `source`, `distance`,
  `parent` and `order` (the visiting order). Unreached vertices, and the
  source's parent, are `None`. Raises `IndexError` for a source out of range.
- `BfsResult.reached(v)` tells whether `v` was reached.
- `BfsResult.path_to(target)` returns a shortest path from the source;
  raises `ValueError` if `target` is unreachable.

### `cpkit.dfs`

- `reachable(adj, start)` returns the set of vertices reachable from
  `start`, `start` included.
- `timestamps(adj)` runs depth-first search from every unvisited vertex in
  index order and returns `DfsTimes` with `time_in`, `time_out` and `color`.
  One counter ticks on every entry and exit, so all times together are
  `0 .. 2n - 1`.
- `DfsTimes.is_ancestor(u, v)` tells whether `u` is an ancestor of `v`, or
  `v` itself, in the DFS forest; `DfsTimes.descendants(v)` counts the proper
  descendants of `v`.
- `Color` is the visiting state: `WHITE`, `GRAY`, `BLACK`.

### `cpkit.bipartite`

- `two_coloring(adj)` returns a side, 0 or 1, for every vertex, or `None` if
  the graph is not bipartite. Each component starts from its lowest-numbered
  vertex on side 0.
- `is_bipartite(adj)` returns a boolean.

### `cpkit.cycles`

- `find_directed_cycle(adj)` returns a cycle `[s, ..., s]` whose consecutive
  vertices are joined by edges, or `None`.
- `find_undirected_cycle(adj)` does the same for an undirected graph; the
  edge back to a vertex's DFS parent is skipped.
- `describe_cycle(cycle)` gives `"Acyclic"` for `None` or an empty cycle,
  otherwise `"Cycle found: "` followed by each vertex and a space.

### `cpkit.toposort`

- `topological_sort(adj)` returns vertices in reverse DFS finishing order.
  It does not detect cycles.
- `kahn_sort(adj)` removes in-degree-zero vertices first-in first-out,
  starting from the lowest index. On a cyclic graph it raises
  `CyclicGraphError` (a `ValueError` with the message `"Graph is cyclic"`),
  whose `order` attribute holds the partial order.

## Example

```python
from cpkit.numbertheory import binpow, binomial, lcm
from cpkit.hashing import compute_hash
from cpkit.dsu import DisjointSet, UnionStrategy
from cpkit.bfs import bfs
from cpkit.cycles import describe_cycle, find_directed_cycle
from cpkit.toposort import kahn_sort, CyclicGraphError

binpow(2, 10, 1_000_000_007)   # 1024
binomial(5, 2)                 # 10
lcm(4, 6)                      # 12
compute_hash("abc")

dsu = DisjointSet(UnionStrategy.SIZE)
for v in range(4):
    dsu.make_set(v)
dsu.union(0, 1)
dsu.find(1) == dsu.find(0)     # True
dsu.size(0)                    # 2

adj = [[1, 2], [3], [3], []]
bfs(adj, 0).path_to(3)         # [0, 1, 3]

print(describe_cycle(find_directed_cycle(adj)))   # Acyclic

try:
    kahn_sort([[1], [0]])
except CyclicGraphError as err:
    print(err)                 # Graph is cyclic
```

## What it does not do

cpkit is a library only. It has no command-line program and does not read
problem input or write answers; you call its functions from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```