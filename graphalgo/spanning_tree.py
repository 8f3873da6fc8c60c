"""Minimum spanning tree by Prim's algorithm."""

from __future__ import annotations

from .graph import Graph, GraphError


def minimum_spanning_tree(graph: Graph) -> list[list[int]]:
    """Adjacency matrix of a minimum spanning tree grown from vertex 0.

    Any non-zero weight counts as an edge, negative ones included. Each chosen
    edge is written in both directions. Raises ``GraphError`` for an empty
    graph or when some vertex cannot be reached.
    """
    size = graph.order
    if size <= 0:
        raise GraphError("cannot build a spanning tree of an empty graph")

    rows = graph.rows()
    tree = [[0] * size for _ in range(size)]
    visited = [False] * size
    visited[0] = True

    for _ in range(size - 1):
        edge = min(
            (
                (weight, src, dest)
                for src, row in enumerate(rows)
                if visited[src]
                for dest, weight in enumerate(row)
                if not visited[dest] and weight != 0
            ),
            default=None,
        )
        if edge is None:
            raise GraphError("graph is not connected; no spanning tree exists")
        weight, src, dest = edge
        tree[src][dest] = weight
        tree[dest][src] = weight
        visited[dest] = True
    return tree