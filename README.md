# graphalgos

Graph algorithms on two graph representations, an adjacency matrix
(`MatrixGraph`) and adjacency lists (`ListGraph`). Each run is timed:

- minimum spanning tree: Prim and Kruskal
- shortest path: Dijkstra and Bellman-Ford

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
graphalgos [CONFIG]
```

The command reads `CONFIG`. If you give no file, it reads `config.txt` from
the current directory. If the file cannot be opened, the command reports this
on standard error and uses the default values. Each line has the form
`Key: value`. Blank lines, lines that start with `#` and lines without a
colon are ignored.

| Key                   | Meaning                                           | Default |
|-----------------------|---------------------------------------------------|---------|
| `Problem`             | `MST` or `SP`                                     | `MST`   |
| `LoadFromFile`        | graph file to read (surrounding quotes optional)  | none    |
| `Vertices`            | vertex count for a random graph                   | `10`    |
| `Density`             | edge density of a random graph, at most 1         | `0.5`   |
| `RunPrim`             | `true` / `false`                                  | `true`  |
| `RunKruskal`          | `true` / `false`                                  | `true`  |
| `RunDijkstra`         | `true` / `false`                                  | `false` |
| `RunBellmanFord`      | `true` / `false`                                  | `false` |
| `UseMatrix`           | use the adjacency matrix representation           | `true`  |
| `UseList`             | use the adjacency list representation             | `true`  |
| `DisplayGraph`        | print each graph before running the algorithms    | `true`  |
| `RunPerformanceTests` | print the `=== Performance Tests ===` header      | `false` |
| `Source`              | source vertex for shortest path                   | `0`     |
| `Destination`         | destination vertex for shortest path              | `5`     |

Flags count as set only when their value is exactly `true`.

A graph file starts with the edge count and the vertex count. Each edge
follows as `source destination weight`:

```
3 4
0 1 5
1 2 3
2 3 7
```

A graph loaded from a file is always undirected. Edges with an endpoint
outside the graph are skipped. The command exits with status 1 if the file
cannot be read or is malformed.

Without `LoadFromFile`, the command generates a random connected graph with
weights from 1 to 100. The graph is directed for `SP` and undirected for
`MST`.

For each selected algorithm and representation, the command prints the
result and then `Execution Time: <ms> ms`. The result reports are in Polish:
spanning tree edges appear as `u - v (waga: w)`, and Kruskal adds
`Suma wag MST: <total>`. Shortest paths appear as
`<algorithm>: s -> d, dystans: <d>` followed by `Ścieżka: ...`. An unreachable
destination gives `Brak ścieżki z s do d`. A negative cycle found by
Bellman-Ford gives `Wykryto cykl o ujemnej wadze.`

## Library use

```python
from graphalgos.graph import ListGraph, MatrixGraph
from graphalgos.mst import prim_mst, kruskal_mst
from graphalgos.shortest_path import dijkstra, bellman_ford

g = MatrixGraph(4, directed=False)
g.add_edge(0, 1, 5)
g.add_edge(1, 2, 3)
g.add_edge(2, 3, 7)

tree = kruskal_mst(g)
print(tree.total_weight())   # 15
print(tree.format())

d = ListGraph(3, directed=True)
d.add_edge(0, 1, 4)
d.add_edge(1, 2, 1)
result = dijkstra(d, 0, 2)
print(result.distance, result.path)   # 4... path [0, 1, 2]
print(result.format("Dijkstra"))
```

Modules:

- `graphalgos.graph`: `Graph` (abstract), `MatrixGraph`, `ListGraph`. Each
  has `add_edge`, `remove_edge`, `has_edge`, `edge_weight`, `clear` and
  `display`. `add_edge` and `remove_edge` raise `IndexError` for vertices out
  of range. In a matrix graph, a weight of 0 means no edge.
- `graphalgos.mst`: `prim_mst` and `kruskal_mst` return an `MSTResult` of
  `MSTEdge`s. `prim_mst` ignores edges of non-positive weight. There is also
  `DisjointSet`, a union-find structure.
- `graphalgos.shortest_path`: `dijkstra` and `bellman_ford` return a
  `PathResult`, whose `distance` is `None` when the destination is
  unreachable. `bellman_ford` raises `NegativeCycleError` when a
  negative-weight cycle is reachable from the source. Both raise `IndexError`
  for vertices out of range.
- `graphalgos.min_heap`: `MinHeap`, a min-heap of `VertexDistance` entries
  with `insert`, `extract_min` and `decrease_key`.
- `graphalgos.generator`: `generate_connected_graph(graph, vertices, density,
  rng=None)` builds a random connected graph.
- `graphalgos.runner`: `run_prim_mst`, `run_kruskal_mst`, `run_dijkstra_sp`
  and `run_bellman_ford_sp` print a report and return the time in
  milliseconds.
- `graphalgos.timer`: `Timer`, a stopwatch that also works as a context
  manager.
- `graphalgos.config`: `Config` and `ProblemType`. Use `load_file` to read a
  configuration file, or `apply_lines` to apply lines directly.
- `graphalgos.app`: `Application`, `load_graph_file` and `main`.

## Limitations

`RunPerformanceTests` only prints its header. The package does not run any
benchmark series over different vertex counts or densities. Reports go to
standard output and are not saved to a file.