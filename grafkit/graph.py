"""Undirected multigraphs read from adjacency-list text, with matrix views."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import total_ordering
from itertools import count as _counter
from os import PathLike
from typing import Iterable, Iterator, Sequence

_log = logging.getLogger(__name__)

# Lines of this many characters or more end the input.
MAX_LINE_LENGTH = 100

_NAME_PADDING = " \n\t"


class GraphFormatError(ValueError):
    """Raised when a source file describes an edge from one side only."""


@total_ordering
@dataclass(unsafe_hash=True)
class Edge:
    """An undirected edge between two named vertices, stored in name order.

    ``count`` is the number of parallel edges.  ``direction`` records how
    lopsided the declarations were: negative when only the lower-named end
    listed the other, positive for the opposite, zero when balanced.
    Equality and hashing look at the end points only.
    """

    first: str
    second: str
    count: int = field(default=1, compare=False)
    direction: int = field(default=0, compare=False)

    @classmethod
    def between(cls, first, second, count=1, auto_direction=True, direction=0):
        """Build an edge declared from ``first`` towards ``second``."""
        if first < second:
            return cls(first, second, count, -1 if auto_direction else direction)
        if first == second:
            return cls(second, first, count, 0)
        return cls(second, first, count, 1 if auto_direction else direction)

    @property
    def key(self) -> tuple[str, str]:
        return (self.first, self.second)

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.second, self.first) < (other.second, other.first)

    def __str__(self):
        if self.count <= 0:
            return ""
        return ", ".join([f"{self.first}-{self.second}"] * self.count)


class Matrix:
    """A dense two-dimensional grid of integers, zero-initialised."""

    def __init__(self, rows, cols):
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._data = [0] * (rows * cols)

    def _offset(self, key) -> int:
        row, col = key
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} matrix")
        return row * self.cols + col

    def __getitem__(self, key):
        return self._data[self._offset(key)]

    def __setitem__(self, key, value):
        self._data[self._offset(key)] = value

    def cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(row, col, value)`` for every cell in row-major order."""
        for index, value in enumerate(self._data):
            row, col = divmod(index, self.cols)
            yield row, col, value

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols, self._data) == (other.rows, other.cols, other._data)

    def __repr__(self):
        return f"Matrix(rows={self.rows}, cols={self.cols})"

    def __str__(self):
        lines = []
        for row in range(self.rows):
            values = self._data[row * self.cols:(row + 1) * self.cols]
            lines.append("|\t" + "\t".join(map(str, values)) + "\t|\n")
        return "".join(lines)


def _split_line(line: str) -> tuple[str, list[str]] | None:
    """Split ``name: n1, n2`` into the vertex name and its neighbour names."""
    text = line.lstrip(":")
    if not text:
        return None
    vertex, separator, rest = text.partition(":")
    neighbours = [token.lstrip(_NAME_PADDING) for token in rest.split(",") if token] if separator else []
    return vertex, neighbours


def _merge(existing: Edge, new: Edge) -> None:
    """Fold a repeated declaration of the same edge into ``existing``."""
    full_edges = existing.count - abs(existing.direction)
    new_full_edges = 0
    if (existing.direction < 0) != (new.direction < 0):
        new_full_edges = min(abs(existing.direction), abs(new.direction))
    elif existing.direction == 0 and new.direction == 0:
        new_full_edges = 1
    existing.direction += new.direction
    existing.count = full_edges + new_full_edges + abs(existing.direction)


class Graph:
    """An undirected multigraph over sorted vertex names with an adjacency matrix."""

    def __init__(self, vertices=(), matrix=None):
        names = tuple(vertices)
        if list(names) != sorted(set(names)):
            raise ValueError("vertices must be unique and in sorted order")
        size = len(names)
        if matrix is None:
            matrix = Matrix(size, size)
        elif (matrix.rows, matrix.cols) != (size, size):
            raise ValueError(f"adjacency matrix must be {size}x{size}")
        self.vertices: tuple[str, ...] = names
        self.matrix: Matrix = matrix
        self._index = {name: position for position, name in enumerate(names)}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Graph":
        """Parse ``vertex: neighbour, neighbour`` lines.

        Every edge must be declared from both ends; an edge left open raises
        :class:`GraphFormatError`.  Edges to unknown vertices are logged and
        dropped.
        """
        vertices: set[str] = set()
        declared: dict[tuple[str, str], Edge] = {}

        for raw in lines:
            line = raw.removesuffix("\n")
            if len(line) >= MAX_LINE_LENGTH:
                break
            parsed = _split_line(line)
            if parsed is None:
                continue
            vertex, neighbours = parsed
            vertices.add(vertex)
            for neighbour in neighbours:
                new_edge = Edge.between(vertex, neighbour)
                existing = declared.get(new_edge.key)
                if existing is None:
                    declared[new_edge.key] = new_edge
                else:
                    _merge(existing, new_edge)

        names = sorted(vertices)
        index = {name: position for position, name in enumerate(names)}
        resolved: list[tuple[int, int, int]] = []
        for edge in sorted(declared.values()):
            first = index.get(edge.first)
            if first is None:
                _log.warning("X-X ta krawedz nie istnieje")
                continue
            second = index.get(edge.second)
            if second is None:
                _log.warning("%d-X ta krawedz nie istnieje", first)
                continue
            if edge.direction != 0:
                raise GraphFormatError(
                    f"Krawedz {first}-{second} jest niedomknieta w pliku zrodlowym."
                )
            resolved.append((first, second, edge.count))

        matrix = Matrix(len(names), len(names))
        for first, second, multiplicity in resolved:
            matrix[first, second] += multiplicity
            if first != second:
                matrix[second, first] += multiplicity
        return cls(names, matrix)

    @classmethod
    def from_file(cls, path: str | PathLike) -> "Graph":
        """Read a graph from an adjacency-list text file."""
        with open(path, encoding="utf-8", newline="\n") as source:
            return cls.from_lines(source)

    def _position(self, vertex: str) -> int:
        try:
            return self._index[vertex]
        except KeyError:
            raise KeyError(vertex) from None

    def edges(self) -> list[Edge]:
        """Distinct edges with their multiplicities, in edge order."""
        found: dict[tuple[str, str], Edge] = {}
        for row, col, value in self.matrix.cells():
            if value > 0:
                edge = Edge.between(self.vertices[row], self.vertices[col], value)
                found.setdefault(edge.key, edge)
        return sorted(found.values())

    def incidence_matrix(self) -> Matrix:
        """Vertex-by-edge matrix with one column per parallel edge."""
        edges = self.edges()
        result = Matrix(self.rank(), sum(edge.count for edge in edges))
        columns = _counter()
        for edge in edges:
            first = self._position(edge.first)
            second = self._position(edge.second)
            for _ in range(edge.count):
                column = next(columns)
                result[first, column] = 1
                result[second, column] = 1
        return result

    def rank(self) -> int:
        """Number of vertices."""
        return len(self.vertices)

    def size(self) -> int:
        """Number of edges, counting parallel edges separately."""
        return sum(edge.count for edge in self.edges())

    def degree(self, vertex: str) -> int:
        """Degree of ``vertex``; loops count twice.  Unknown names raise KeyError."""
        position = self._position(vertex)
        return sum(
            self.matrix[position, other] * (2 if other == position else 1)
            for other in range(self.rank())
        )

    def is_simple(self) -> bool:
        """True when no pair of vertices is joined more than once."""
        return all(value <= 1 for _, _, value in self.matrix.cells())

    def is_full(self) -> bool:
        """True when every cell of the adjacency matrix, diagonal included, is set."""
        return all(value >= 1 for _, _, value in self.matrix.cells())

    def complement_edges(self) -> list[Edge]:
        """Edges missing from the graph, loops included, in edge order."""
        found: dict[tuple[str, str], Edge] = {}
        for row, col, value in self.matrix.cells():
            if value < 1:
                edge = Edge.between(self.vertices[row], self.vertices[col], 1, False, 0)
                found.setdefault(edge.key, edge)
        return sorted(found.values())

    def neighbors(self, vertex: str) -> list[str]:
        """Sorted names of the vertices joined to ``vertex``."""
        result: set[str] = set()
        for edge in self.edges():
            if edge.first == vertex:
                result.add(edge.second)
            elif edge.second == vertex:
                result.add(edge.first)
        return sorted(result)