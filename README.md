# contestalgo

A collection of classic contest algorithms as plain Python functions and
classes. It has no runtime dependencies.

Vertices, positions and ranks are numbered from zero, and ranges include
both ends.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install ".[test]"
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestalgo.traversal` | `connected_components`, `topological_sort` (raises `CycleError` on a directed cycle), `strongly_connected_components` (a component label per vertex) |
| `contestalgo.articulation` | `articulation_points` of an undirected graph, `critical_pillows` (three-corner "pillows" whose removal disconnects the graph) |
| `contestalgo.aho_corasick` | `AhoCorasick` (`add`, `build`, `matches`), `split_into_prefixes`, `prefix_owned_counts` |
| `contestalgo.range_queries` | `PrefixSums` (`sum`), `GcdSparseTable` (`query`) |
| `contestalgo.fenwick` | `Fenwick3D` (`add`, `prefix_sum`, `range_sum`) |
| `contestalgo.segment_trees` | `MaxCountTree` (maximum and its count), `MinTree2D` (rectangle minimum), `BracketTree` (longest correct bracket subsequence) |
| `contestalgo.treaps` | `OrderedSet` (`insert`, `delete`, `next`, `prev`, `kth`), `ImplicitTreap` (`insert`, `reverse`, `min`) |

Invalid vertices or ranges raise `ValueError` or `IndexError`.

## Examples

```python
from contestalgo.traversal import topological_sort, strongly_connected_components, CycleError
from contestalgo.articulation import articulation_points
from contestalgo.aho_corasick import AhoCorasick, split_into_prefixes
from contestalgo.range_queries import GcdSparseTable, PrefixSums
from contestalgo.segment_trees import MaxCountTree, BracketTree
from contestalgo.treaps import OrderedSet, ImplicitTreap

topological_sort(3, [(0, 1), (1, 2)])                       # [0, 1, 2]
try:
    topological_sort(2, [(0, 1), (1, 0)])
except CycleError:
    pass
strongly_connected_components(3, [(0, 1), (1, 0), (1, 2)])   # [0, 0, 1]
articulation_points(3, [(0, 1), (1, 2)])                     # [1]

list(AhoCorasick(["he", "she"]).matches("ushe"))             # [(1, 'she'), (2, 'he')]
split_into_prefixes("abc", "abab")                           # ['ab', 'ab']

GcdSparseTable([12, 18, 24]).query(0, 2)                     # 6
PrefixSums([1, 2, 3]).sum(1, 2)                              # 5
MaxCountTree([3, 1, 3]).query(0, 2)                          # (3, 2)
BracketTree("())(").query(0, 3)                              # 2

s = OrderedSet([5, 1, 3])
s.kth(1), s.next(3), s.prev(1)                               # (3, 5, None)

seq = ImplicitTreap([5, 2, 8, 1])
seq.reverse(0, 2)
list(seq), seq.min(0, 1)                                     # ([8, 2, 5, 1], 2)
```

## What it does not do

The package is a library only: it has no command-line program and reads no
problem input from standard input. Shortest-path searches, cycle finding
beyond the check in `topological_sort`, bridge finding, the Z-function and
suffix structures are not included.

## Running the tests

```
pytest
```