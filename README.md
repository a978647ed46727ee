# grafkit

grafkit reads an undirected multigraph from a plain-text adjacency list and
reports its basic properties: vertex and edge sets, adjacency and incidence
matrices, order and size, vertex degrees, whether the graph is simple or
complete, the edges of its complement, and each vertex's neighbours.

## Input format

One line per vertex: the vertex name, a colon, then a comma-separated list of
its neighbours. Whitespace before a neighbour's name is ignored.

```
A: B, C
B: A, C
C: A, B, C
```

- Every edge has to be listed from both of its ends; an edge listed from one
  side only raises `GraphFormatError`.
- Listing the same neighbour several times (from both ends) gives parallel
  edges.
- A vertex listing itself adds a loop.
- An edge to a name that never starts a line of its own is logged as a
  warning and dropped.
- Reading stops at the first line of 100 characters or more.

## Command line

```
grafkit TASK FILE
```

`TASK` is a number from 1 to 5:

1. vertex count, vertex set, edge count, edge set, adjacency and incidence matrices
2. order, size and the degree of every vertex
3. whether the graph is simple or general
4. whether the graph is complete, and if not, the edges of its complement
5. the neighbours of every vertex

Example:

```
grafkit 2 graph.txt
```

The command first prints the task number it read. The report texts are in
Polish. A wrong number of arguments or an unknown task prints a usage message;
an unreadable file or an edge declared from one end only prints an error to
standard error and exits with status 1.

## Library use

```python
from grafkit.graph import Graph

g = Graph.from_file("graph.txt")
print(g.rank(), g.size())
print(g.degree("A"))
print(g.is_simple(), g.is_full())
for edge in g.edges():
    print(edge)
print(g.incidence_matrix())
print(g.neighbors("A"))
```

- `Graph.from_lines` builds a graph from an iterable of lines instead of a file.
- `Graph.degree` counts loops twice and raises `KeyError` for an unknown vertex.
- `Graph.is_full` requires every cell of the adjacency matrix to be set,
  including the diagonal, so a complete graph here has a loop at every vertex;
  `Graph.complement_edges` likewise lists missing loops.
- `Edge` holds two end points in name order and a `count` of parallel edges;
  `Matrix` is a dense integer grid indexed as `matrix[row, col]`.

The report texts printed by the command are also available as functions in
`grafkit.cli`: `describe`, `degrees_report`, `simplicity_report`,
`completeness_report` and `neighbors_report`; `run_task(task, path)` returns
the report for a task number.

## What it does not do

Graphs are undirected only. There is no way to edit a graph or write one back
to a file, and no drawing of graphs.

## Tests

```
pip install -e .[test]
pytest
```