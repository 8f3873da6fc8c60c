"""Weighted directed graph stored as an adjacency matrix."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

_DOT_HEADER = (
    "digraph {",
    '    bgcolor="lightgray";',
    "    rankdir=LR;",
    '    size="8,5";',
    "    node [shape=circle];",
    "    overlap=false;",
    "    splines=true;",
    "    nodesep=4.0;",
    "    ranksep=3.0;",
    '    edge [fontsize=24, fontname="Arial"];',
    '    node [fontsize=24, fontname="Arial"];',
)


class GraphError(ValueError):
    """Raised when a graph cannot be built, loaded or written."""


class Graph:
    """A graph of ``size`` vertices; a zero weight means "no edge"."""

    __slots__ = ("_data",)

    def __init__(self, size: int = 0) -> None:
        size = operator.index(size)
        if size < 0:
            raise GraphError(f"graph size must not be negative, got {size}")
        self._data: list[list[int]] = [[0] * size for _ in range(size)]

    @classmethod
    def from_matrix(cls, rows: Iterable[Iterable[int]]) -> Graph:
        """Build a graph from a square matrix of integer weights."""
        data = [[operator.index(value) for value in row] for row in rows]
        size = len(data)
        for number, row in enumerate(data, start=1):
            if len(row) != size:
                raise GraphError(
                    f"row {number} has {len(row)} values, expected {size}"
                )
        graph = cls(0)
        graph._data = data
        return graph

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Graph:
        """Read a graph: the vertex count, then the matrix, whitespace separated."""
        try:
            text = Path(path).read_text()
        except OSError as exc:
            raise GraphError(f"failed to open file: {path}") from exc

        tokens = iter(text.split())
        try:
            size = int(next(tokens))
        except (StopIteration, ValueError) as exc:
            raise GraphError("invalid graph size in file") from exc
        if size <= 0:
            raise GraphError("invalid graph size in file")

        try:
            rows = [[int(next(tokens)) for _ in range(size)] for _ in range(size)]
        except (StopIteration, ValueError) as exc:
            raise GraphError("error reading matrix data from file") from exc
        return cls.from_matrix(rows)

    @property
    def order(self) -> int:
        """Number of vertices."""
        return len(self._data)

    def rows(self) -> list[list[int]]:
        """A copy of the adjacency matrix."""
        return [list(row) for row in self._data]

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        i, j = key
        size = len(self._data)
        if not (0 <= i < size and 0 <= j < size):
            raise IndexError(f"invalid matrix indices ({i}, {j})")
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = self._check(key)
        return self._data[i][j]

    def __setitem__(self, key: tuple[int, int], weight: int) -> None:
        i, j = self._check(key)
        self._data[i][j] = operator.index(weight)

    def __repr__(self) -> str:
        return f"Graph.from_matrix({self._data!r})"

    def to_dot(self) -> str:
        """Render the graph in Graphviz DOT format."""
        lines = list(_DOT_HEADER)
        data = self._data
        size = len(data)
        for i in range(size):
            for j in range(i + 1, size):
                forward, backward = data[i][j], data[j][i]
                if forward:
                    lines.append(f'    {i} -> {j} [label="{forward}"];')
                if backward:
                    lines.append(f'    {j} -> {i} [label="{backward}"];')
        lines.append("}")
        return "\n".join(lines) + "\n"

    def export_to_dot(self, path: str | PathLike[str]) -> None:
        """Write the DOT rendering of the graph to ``path``."""
        try:
            Path(path).write_text(self.to_dot())
        except OSError as exc:
            raise GraphError(f"failed to write file: {path}") from exc