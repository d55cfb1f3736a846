# structbench

Classic integer data structures, plus a command runner that drives them
from a text file and records how long each command took.

## Structures

| Module | Class | What it is |
| --- | --- | --- |
| `structbench.min_heap` | `MinHeap` | binary min-heap |
| `structbench.max_heap` | `MaxHeap` | binary max-heap |
| `structbench.hashtable` | `HashTable` | integer set, `key % capacity` hashing, linear probing, capacity starts at 4 and doubles once the load factor passes 0.75 |
| `structbench.avl_tree` | `AVLTree` | self-balancing search tree of distinct keys |
| `structbench.graph` | `Graph` | undirected weighted multigraph over vertices `0 .. n-1` |

## Installation

```
pip install .
```

## Library use

```python
from structbench.min_heap import MinHeap
from structbench.max_heap import MaxHeap
from structbench.hashtable import HashTable
from structbench.avl_tree import AVLTree
from structbench.graph import Graph

heap = MinHeap()
heap.build([5, 3, 8, 1])
heap.find_min()      # 1
heap.delete_min()    # 1
len(heap)            # 3

top = MaxHeap()
top.build([5, 3, 8, 1])
top.delete_max()     # 8

table = HashTable()
table.insert(42)
table.insert(42)     # duplicates are ignored
42 in table          # True
len(table)           # 1

tree = AVLTree()
tree.build([10, 20, 30])
20 in tree           # True
list(tree)           # [10, 20, 30]  (ascending order)
tree.height()        # 2
tree.delete(20)

g = Graph()
g.build(3)
g.insert_edge(0, 1, 4)
g.insert_edge(1, 2, 1)
g.shortest_path(0, 2)        # 5
g.spanning_tree_weight()     # 5
g.connected_components()     # 1
g.size()                     # (3, 2)
```

Errors are raised rather than signalled with special values:

- `MinHeap.find_min`/`delete_min` and `MaxHeap.find_max`/`delete_max`
  raise `IndexError` on an empty heap.
- `AVLTree.find_min` raises `ValueError` on an empty tree;
  `AVLTree.delete` raises `KeyError` for a missing key
  (`insert` of an existing key does nothing).
- `Graph` methods raise `IndexError` for a vertex out of range, and
  `Graph.build` raises `ValueError` for a negative vertex count.
- `Graph.shortest_path` returns `None` when the destination is unreachable.
- `Graph.delete_edge` removes the most recently added edge between the two
  vertices and returns whether one was removed.
- `Graph.spanning_tree_weight` spans only the component that contains
  vertex 0; an empty graph gives 0.

`HashTable.build_from_file(path)` inserts the whitespace-separated integers
of a file, stopping at the first token that is not an integer.

## Command files

```
structbench [COMMANDS] [OUTPUT]
```

reads commands from `COMMANDS` (default `commands.txt`) and writes one line
per command to `OUTPUT` (default `output.txt`). It exits with status 1 if
either file cannot be opened. File names given to `BUILD` are taken
relative to the current directory.

Each command is a verb, a structure name (`MINHEAP`, `MAXHEAP`, `AVLTREE`,
`GRAPH`, `HASHTABLE`) and its arguments:

```
BUILD MINHEAP numbers.txt
INSERT MINHEAP 7
FINDMIN MINHEAP
DELETEMIN MINHEAP
GETSIZE MINHEAP
BUILD GRAPH edges.txt
INSERT GRAPH 0 3 2
COMPUTESHORTESTPATH GRAPH 0 4
COMPUTESPANNINGTREE GRAPH
FINDCONNECTEDCOMPONENTS GRAPH
DELETE GRAPH 0 3
SEARCH HASHTABLE 42
DELETE AVLTREE 13
FINDMAX MAXHEAP
DELETEMAX MAXHEAP
```

Number files hold whitespace-separated integers; graph files hold
`u v weight` triples, and the graph is sized to the largest vertex seen.

Each output line is the result followed by the elapsed time in
microseconds, for example `SUCCESS 12us`. The result is a number,
`SUCCESS`, or `FAILURE` for an unknown verb or structure, a failed search
or delete, or a shortest path that is unreachable or of length 0. Asking an
empty heap or tree for its minimum or maximum gives `-1`. `GETSIZE GRAPH`
gives the vertex and edge counts separated by a space. Processing stops
when fewer than two tokens remain or an argument is not an integer.

From Python, `structbench.commands.run_file(commands_path, output_path)`
does the same for any pair of paths, and
`CommandRunner(base_dir).run(tokens)` yields a `CommandResult` (`text`,
`microseconds`) for each command in a token sequence, resolving `BUILD`
file names against `base_dir`. `read_ints(path)` and `read_edges(path)`
are the file readers it uses.