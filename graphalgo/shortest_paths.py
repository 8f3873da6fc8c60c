"""Shortest paths: Dijkstra between two vertices, Floyd-Warshall between all pairs."""

from __future__ import annotations

import math

from .graph import Graph


def _check_vertex(graph: Graph, vertex: int) -> None:
    if not 0 <= vertex < graph.order:
        raise IndexError(
            f"vertex {vertex} is out of range for a graph of {graph.order} vertices"
        )


def shortest_path(graph: Graph, vertex1: int, vertex2: int) -> int | None:
    """Length of the shortest path from ``vertex1`` to ``vertex2`` (0-based).

    Only positive edge weights are followed. Returns ``None`` when ``vertex2``
    cannot be reached; raises ``IndexError`` for a vertex outside the graph.
    """
    _check_vertex(graph, vertex1)
    _check_vertex(graph, vertex2)
    if vertex1 == vertex2:
        return 0

    rows = graph.rows()
    size = graph.order
    dist: list[float] = [math.inf] * size
    dist[vertex1] = 0
    visited = [False] * size

    for _ in range(size - 1):
        closest = min(
            (
                (distance, vertex)
                for vertex, distance in enumerate(dist)
                if not visited[vertex] and distance < math.inf
            ),
            default=None,
        )
        if closest is None:
            break
        distance, current = closest
        if current == vertex2:
            break
        visited[current] = True
        for neighbour, weight in enumerate(rows[current]):
            if not visited[neighbour] and weight > 0:
                candidate = distance + weight
                if candidate < dist[neighbour]:
                    dist[neighbour] = candidate

    result = dist[vertex2]
    return None if result == math.inf else int(result)


def all_pairs_shortest_paths(graph: Graph) -> list[list[float]]:
    """Matrix of shortest path lengths between every pair of vertices.

    A zero weight means "no edge"; unreachable pairs hold ``math.inf``.
    Negative weights are allowed.
    """
    dist: list[list[float]] = [
        [0 if i == j else (weight if weight != 0 else math.inf)
         for j, weight in enumerate(row)]
        for i, row in enumerate(graph.rows())
    ]
    for via_row in [None] * 0 or range(len(dist)):
        through = dist[via_row]
        for row in dist:
            to_via = row[via_row]
            if to_via == math.inf:
                continue
            for j, onward in enumerate(through):
                if onward == math.inf:
                    continue
                candidate = to_via + onward
                if row[j] > candidate:
                    row[j] = candidate
    return dist