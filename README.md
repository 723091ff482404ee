# algonotes

A small collection of classic algorithms and data structures, written as
plain Python with no third-party dependencies. Functions take ordinary
Python values and return new lists rather than changing their input, except
where noted (`heapify`, `to_min_heap`).

## What is inside

| Module                   | Contents |
|--------------------------|----------|
| `algonotes.arrays`       | `divisors(num)`, `find_union(first, second)` |
| `algonotes.sorting`      | `bubble_sort`, `bubble_sort_recursive`, `merge_sort` |
| `algonotes.recursion`    | `count_down`, `repeat`, `factorial`, `sum_to_n`, `fibonacci`, `reverse`, `is_palindrome`, `subsequences`, `subsequences_with_sum`, `count_subsequences_with_sum` |
| `algonotes.patterns`     | `pyramid`, `inverted_pyramid`, `hollow_pyramid`, `hollow_inverted_pyramid`, `hollow_diamond`, `star_frame`, `hollow_triangle`, and the `main` command |
| `algonotes.graphs`       | `Graph`, `WeightedGraph`, `bfs`, `dfs`, `adjacency_matrix`, `weighted_adjacency_matrix` |
| `algonotes.disjoint_set` | `DisjointSetByRank`, `DisjointSetBySize` |
| `algonotes.heap`         | `MaxHeap`, `heapify`, `build_max_heap`, `heap_sort` |
| `algonotes.bst`          | `BSTNode`, `insert`, `build_bst`, `inorder`, `to_min_heap` |
| `algonotes.trie`         | `Trie` for words of the capital letters A-Z |

## Examples

```python
from algonotes.arrays import divisors, find_union
from algonotes.recursion import factorial, is_palindrome, subsequences_with_sum
from algonotes.trie import Trie
from algonotes.disjoint_set import DisjointSetByRank

divisors(36)           # [1, 2, 3, 4, 6, 9, 12, 18, 36]
find_union([3, 4, 6, 7, 9, 9], [1, 5, 7, 8, 8])
# [1, 3, 4, 5, 6, 7, 8, 9]

factorial(5)           # 120
is_palindrome("abba")  # True
is_palindrome("abca")  # False
subsequences_with_sum([1, 2, 1], 2)   # [[1, 1], [2]]

trie = Trie()
trie.insert("ARM")
trie.insert("TIME")
"ARM" in trie          # True
"TIM" in trie          # False
trie.remove("ARM")
trie.search("ARM")     # False

sets = DisjointSetByRank(7)
sets.union(1, 2)
sets.union(2, 3)
sets.connected(1, 3)   # True
sets.connected(1, 7)   # False
```

Graphs are built edge by edge; `bfs` and `dfs` visit every component,
starting from nodes 1 to `node_count` in turn:

```python
from algonotes.graphs import Graph, bfs, dfs, adjacency_matrix

graph = Graph(directed=False)
graph.add_edge(1, 2)
graph.add_edge(1, 3)
graph.add_edge(2, 4)

bfs(graph, 4)          # [1, 2, 3, 4]
dfs(graph, 4)          # [1, 2, 4, 3]
print(graph.format_adjacency())

adjacency_matrix(3, [(1, 2), (2, 3)], directed=True)
# [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
```

A `MaxHeap` keeps its largest value at the root:

```python
from algonotes.heap import MaxHeap, heap_sort

heap = MaxHeap()
for value in (50, 60, 55, 20, 30, 40, 70):
    heap.insert(value)
heap.delete_root()     # 70
heap_sort([54, 53, 55, 52, 50])   # [50, 52, 53, 54, 55]
```

## Errors

- `divisors`, `factorial`, `sum_to_n` and `fibonacci` raise `ValueError` for
  negative input.
- `Trie` methods raise `ValueError` for words holding anything other than
  the letters A-Z.
- `adjacency_matrix` and `weighted_adjacency_matrix` raise `ValueError` for
  a node outside `1..node_count`.
- The disjoint sets raise `IndexError` for a node outside `0..n`.
- `MaxHeap.delete_root` returns `None` on an empty heap.

## Command line

The star patterns can be printed from the shell:

```
algonotes-patterns pyramid 3
algonotes-patterns --help
```

The first argument is one of `hollow-diamond`, `hollow-inverted-pyramid`,
`hollow-pyramid`, `hollow-triangle`, `inverted-pyramid`, `pyramid` or
`star-frame`; the second is the size. `python -m algonotes.patterns` does
the same.

## What it does not do

The star patterns are the only command. Graphs, sorting, heaps, trees and
tries are library functions and classes only: there is no command that
reads a graph or a list of numbers from standard input.

## Running the tests

With the `test` extra installed:

```
pytest
```