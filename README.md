# contestlib

Plain-Python algorithms and data structures of the kind used in programming
contests. The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

**Strings**
- `contestlib.strings`: `kmp_failure`, `kmp_search`, `manacher`, `z_function`, `duval` (Lyndon factorization)
- `contestlib.trie.Trie` and `contestlib.aho_corasick.AhoCorasick` over a contiguous alphabet (default `a`–`z`)
- `contestlib.palindrome_tree.PalindromeTree`, whose `palindromes()` maps each distinct palindrome to its occurrence count
- `contestlib.suffix_array.SuffixArray` (`match_range`, `lcp_array`)
- `contestlib.suffix_automaton.SuffixAutomaton` (`extend`, `endpos_sizes`)
- `contestlib.suffix_tree.SuffixTree` (text terminated by `$`; `leaf_suffixes`)

**Data structures**
- `contestlib.fenwick.FenwickTree` (one-based positions), `contestlib.union_find.UnionFind`
- `contestlib.leftist_heap.LeftistHeap`: mergeable min-heap
- `contestlib.treap.Treap`: multiset with `kth` and `rank`
- `contestlib.link_cut_tree.LinkCutTree`: `link`, `cut`, `connected`, `find_root`
- `contestlib.segment_tree_2d.SegmentTree2D`: point add, rectangle sum
- `contestlib.chmin_segment_tree.ChminSegmentTree`: range chmin, range max, range sum

**Graphs**
- `contestlib.blossom.max_matching`: maximum matching in a general graph
- `contestlib.bipartite_matching.max_bipartite_matching`: Hopcroft–Karp
- `contestlib.centroid.CentroidTree` and `NearestMarked` (distance to the nearest marked vertex)
- `contestlib.dominator.dominator_tree`: immediate dominators (Lengauer–Tarjan)
- `contestlib.euler_path.euler_path`: Euler trail of an undirected multigraph
- `contestlib.hld.HeavyLight`: heavy-light decomposition into chains
- `contestlib.tarjan_lca.offline_lca`: offline lowest common ancestors
- `contestlib.two_sat.TwoSat`: `add_clause(x, i, y, j)` requires `x == i or y == j`; `solve()` returns an assignment or `None`

**Flows, assignment and linear programming**
- `contestlib.dinic.Dinic` and `FlowEdge`; `contestlib.relabel_to_front.RelabelToFront` (with `flows()`)
- `contestlib.min_cost_flow.MinCostFlow`: `min_cost_flow(s, t)` returns `(flow, cost)`; `decompose()` splits the flow into paths
- `contestlib.hungarian.Hungarian`: maximum-weight assignment
- `contestlib.simplex.LPSolver`: maximise `c·x` with `A x <= b, x >= 0`; `solve()` returns `(value, x)`, `(-inf, None)` if infeasible, `(inf, None)` if unbounded
- `contestlib.lexicographic_simplex.TableauSimplex`: minimise `c·x` with the same constraints; `(inf, None)` if infeasible, `(-inf, None)` if unbounded

**Transforms and algebra**
- `contestlib.fft`: `fft`, `multiply` (floating-point polynomial product)
- `contestlib.ntt.ntt`: number-theoretic transform modulo 998244353
- `contestlib.walsh`: `xor_transform`, `inverse_xor_transform`, `subset_sums`, `subset_convolution`
- `contestlib.poly`: `poly_mul`, `poly_inv`, `poly_derivative`, `poly_integral`, `poly_ln`, `poly_exp`, `poly_sqrt`, `poly_pow`, `poly_cos`, `poly_sin`, `poly_arcsin`, `poly_arctan` modulo 998244353
- `contestlib.number_theory`: `ModInt`, `sieve`, `extended_gcd`, `mod_inverse`, `inverse_table`, `euler_phi`, `phi_table`, `is_prime`, `pollard_rho`, `factorize`, `adaptive_simpson`, `crt`, `discrete_log`, `josephus`
- `contestlib.lagrange`: `lagrange_interpolate`, `count_representations` (ways to make `k` from coin values)

**Geometry**
- `contestlib.geometry`: `Vector`, `Line`, `Circle`, `Triangle` and functions for dot and cross products, rotation, projections, distances, segment and line intersection, circle intersections and tangents, polygon cutting, convex hull, half-plane intersection, polygon area, diameter and closest pair. Comparisons use an epsilon of `1e-10` (`dcmp`).

## Examples

```python
from contestlib.strings import kmp_search, z_function
from contestlib.union_find import UnionFind
from contestlib.dinic import Dinic
from contestlib.fft import multiply

print(kmp_search("abababa", "aba"))          # [0, 2, 4]
print(z_function("aaab"))                    # [0, 2, 1, 0]

uf = UnionFind(4)
uf.union(0, 1)
print(uf.same(0, 1), uf.same(1, 2))          # True False

flow = Dinic(4)
flow.add_edge(0, 1, 3)
flow.add_edge(1, 3, 2)
flow.add_edge(0, 2, 2)
flow.add_edge(2, 3, 3)
print(flow.max_flow(0, 3))                   # 4

print([round(x) for x in multiply([1, 1], [1, 1])])  # [1, 2, 1]
```

Indices are zero-based throughout unless a class says otherwise
(`FenwickTree` follows the one-based convention of binary indexed trees).
Invalid indices and inputs raise `IndexError` or `ValueError`.

## What it does not do

This is a library only. It installs no commands and reads no input: there
are no programs that parse problem input from standard input or print
answers. Call the functions and classes from your own code.