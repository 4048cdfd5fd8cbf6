# algobook

A compact library of classic algorithms and data structures: union-find,
Fenwick and segment trees, shortest paths, spanning trees, flows and
matchings, number theory, linear algebra, geometry, string matching,
searching and sorting. Pure Python with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algobook.structures` | `DisjointUnion`, `Fenwick`, `IntervalTree`, `KDTree`, `SegmentTree`, `SparseTable`, `Trie` |
| `algobook.numbertheory` | `gcd`, `extended_gcd`, `crt`, `mod_eq`, `mod_mul`, `mod_pow`, `mod_solve`, `mod_inverse`, `is_prime`, `phi`, `factorize`, `prime_sieve` |
| `algobook.combinatorics` | `all_combinations`, `binom`, `binom_float`, `kth_combination`, `gray`, `gray_inverse` |
| `algobook.connectivity` | `is_bipartite`, `has_directed_cycle`, `has_undirected_cycle`, `strongly_connected_components`, `has_directed_euler_cycle`, `has_undirected_euler_cycle`, `euler_cycle`, `toposort`, `greedy_coloring`, `max_independent_set` |
| `algobook.shortest` | `dijkstra`, `reachable`, `floyd_warshall`, `k_shortest`, `ida_star` |
| `algobook.spanning` | `kruskal`, `prim` |
| `algobook.flow` | `max_flow` |
| `algobook.matching` | `hungarian`, `stable_matching` |
| `algobook.linalg` | `gauss`, `determinant`, `determinant_exact`, `solve_linear`, `inverse`, `matmul` |
| `algobook.geometry` | `squared_distance`, `orientation`, `convex_hull`, `triangle_weights` |
| `algobook.numeric` | `fft`, `multiply_polynomials`, `newton` |
| `algobook.strings` | `AhoCorasick`, `edit_distance`, `kmp_table`, `kmp`, `shortest_prefix`, `longest_common_subsequence` |
| `algobook.sequences` | `interval_cover`, `knapsack`, `longest_increasing`, `subset_sum` |
| `algobook.expression` | `Node`, `Parser` |
| `algobook.search` | `binary_search`, `interpolation_search`, `ternary_search` |
| `algobook.sorting` | `count_sort`, `inversions`, `quick_sort`, `random_sort` |

## Conventions

- Graphs are adjacency lists indexed by vertex. Weighted graphs hold
  `(neighbour, weight)` pairs; the functions in `algobook.connectivity`
  accept either plain vertex indices or such pairs and ignore the weights.
- In `algobook.shortest`, unreachable vertices and missing edges are
  `math.inf` (also available as `algobook.shortest.INF`).
- Matrices are lists of rows. The functions in `algobook.linalg` work on a
  copy and leave their input unchanged.
- Functions that sort or reduce return new lists; only `random_sort`
  shuffles its argument in place.

## Examples

Union-find with set sizes and set sums:

```python
from algobook.structures import DisjointUnion

dsu = DisjointUnion(5)
dsu.combine(0, 1)
dsu.update(1, 10)
dsu.size(0)   # 2
dsu.sum(0)    # 10
```

Shortest paths on a weighted graph:

```python
from algobook.shortest import dijkstra

graph = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []]
dist, prev = dijkstra(graph, 0)
# dist == [0, 3, 1, 4], prev == [None, 2, 0, 1]
```

Number theory:

```python
from algobook.numbertheory import is_prime, prime_sieve, mod_inverse

is_prime(97)          # True
prime_sieve(20)       # [2, 3, 5, 7, 11, 13, 17, 19]
mod_inverse(3, 7)     # 5
```

Multi-pattern string search:

```python
from algobook.strings import AhoCorasick

automaton = AhoCorasick(["he", "she", "hers"], "a", "z")
automaton.find("ushers")   # start positions, one list per pattern
```

Evaluating simple arithmetic expressions (division truncates toward zero):

```python
from algobook.expression import Parser

parser = Parser("2 * (3 + 4)")
parser.read()
parser.evaluate()   # 14
```

## Errors

Failures are reported with exceptions rather than status codes. For example,
`mod_solve` raises `ValueError` when no solution exists, `solve_linear`
raises `ValueError` when a system has no unique solution, and `inverse`
raises `ValueError` for a singular matrix.