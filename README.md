# graphalgo

Algorithms on weighted directed graphs held as square adjacency matrices:

- shortest path between two vertices (Dijkstra)
- shortest paths between all pairs of vertices (Floyd–Warshall)
- minimum spanning tree (Prim)
- the traveling salesman problem, searched by ant colony optimization
- export to Graphviz DOT

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Graph files

A graph file starts with the number of vertices. The rows of the adjacency
matrix follow, with the values separated by whitespace. A value of `0` means
there is no edge.

```
4
0 1 0 7
1 0 2 0
0 2 0 3
7 0 3 0
```

`Graph.load(path)` reads such a file. It raises `GraphError` (a subclass of
`ValueError`) when the file cannot be opened, the size is missing or not
positive, or the matrix has too few values or a non-integer value.

## Usage

Vertices are numbered from 0.

```python
from graphalgo.graph import Graph
from graphalgo.shortest_paths import shortest_path, all_pairs_shortest_paths
from graphalgo.spanning_tree import minimum_spanning_tree
from graphalgo.tsp import AcoParams, solve_traveling_salesman_problem

graph = Graph.load("graph.txt")
print(graph.order)                       # number of vertices

print(shortest_path(graph, 0, 3))        # None when vertex 3 cannot be reached
print(all_pairs_shortest_paths(graph))   # math.inf for unreachable pairs

print(minimum_spanning_tree(graph))      # adjacency matrix of the tree

result = solve_traveling_salesman_problem(graph, AcoParams(max_iterations=200))
print(result.vertices, result.distance)

graph.export_to_dot("graph.dot")
```

### Building graphs

- `Graph(size)` makes a graph of `size` vertices with no edges.
- `Graph.from_matrix(rows)` takes a square matrix of integers; a row of the
  wrong length raises `GraphError`.
- `graph[i, j]` reads and `graph[i, j] = weight` sets the weight of the edge
  from `i` to `j`; indices outside the graph raise `IndexError`.
- `graph.rows()` returns a copy of the matrix.
- `graph.to_dot()` returns the DOT text that `export_to_dot` writes.

### Shortest paths

`shortest_path(graph, vertex1, vertex2)` follows only positive weights. It
returns `0` when both vertices are the same, `None` when there is no path, and
raises `IndexError` for a vertex outside the graph.

`all_pairs_shortest_paths(graph)` treats every non-zero weight as an edge,
negative ones included, and puts `0` on the diagonal.

### Minimum spanning tree

`minimum_spanning_tree(graph)` grows the tree from vertex 0, counting any
non-zero weight as an edge, and writes each chosen edge in both directions. It
raises `GraphError` for an empty graph or one where some vertex cannot be
reached.

### Traveling salesman

`solve_traveling_salesman_problem(graph, params=None, rng=None)` returns a
`TsmResult` with the closed tour in `vertices` (the first vertex repeated at
the end) and its length in `distance`. Only positive weights count as edges.
When no tour through every vertex is found, `vertices` is empty and `distance`
is infinite. A one-vertex graph gives `[0, 0]` with distance `0`.

`AcoParams` holds the colony settings, with these defaults:

| field               | default |
|---------------------|---------|
| `alpha`             | 1.0     |
| `beta`              | 2.0     |
| `initial_pheromone` | 1.0     |
| `q`                 | 100.0   |
| `evaporation`       | 0.5     |
| `min_pheromone`     | 0.01    |
| `max_iterations`    | 1000    |

The search is randomised; pass a seeded `random.Random` as `rng` for
repeatable results.

## Limitations

- There is no breadth-first or depth-first traversal.
- There is no command-line program or interactive menu; the package is used
  as a library only.
- Pictures are not drawn; Graphviz can turn an exported DOT file into one:

  ```
  dot -Tpng graph.dot -o graph.png
  ```