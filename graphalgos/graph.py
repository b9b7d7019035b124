"""Weighted graphs stored as an adjacency matrix or as adjacency lists."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator


class Graph(ABC):
    """A weighted graph over the vertices ``0 .. vertices - 1``.

    Weights are integers; an edge of weight 0 in a matrix graph is
    indistinguishable from a missing edge.
    """

    def __init__(self, vertices: int, directed: bool = False) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self.vertex_count = vertices
        self.edge_count = 0
        self.directed = directed

    def _in_range(self, source: int, destination: int) -> bool:
        return 0 <= source < self.vertex_count and 0 <= destination < self.vertex_count

    def _require_in_range(self, source: int, destination: int) -> None:
        if not self._in_range(source, destination):
            raise IndexError(
                f"edge ({source}, {destination}) lies outside a graph "
                f"of {self.vertex_count} vertices"
            )

    @abstractmethod
    def add_edge(self, source: int, destination: int, weight: int) -> None:
        """Add an edge; raise IndexError if an endpoint is out of range."""

    @abstractmethod
    def remove_edge(self, source: int, destination: int) -> None:
        """Remove an edge; raise IndexError if an endpoint is out of range."""

    @abstractmethod
    def has_edge(self, source: int, destination: int) -> bool:
        """Whether the edge exists; False for out-of-range endpoints."""

    @abstractmethod
    def edge_weight(self, source: int, destination: int) -> int:
        """The edge's weight, or 0 if there is none."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every edge."""

    @abstractmethod
    def _rows(self) -> Iterator[str]:
        """Lines of the printed representation."""

    def display(self) -> None:
        """Print the graph to standard output."""
        for row in self._rows():
            print(row)


class MatrixGraph(Graph):
    """Graph backed by a ``vertices x vertices`` weight matrix."""

    def __init__(self, vertices: int, directed: bool = False) -> None:
        super().__init__(vertices, directed)
        self._matrix = [[0] * vertices for _ in range(vertices)]

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        self._require_in_range(source, destination)
        self._matrix[source][destination] = weight
        if not self.directed:
            self._matrix[destination][source] = weight
        self.edge_count += 1

    def remove_edge(self, source: int, destination: int) -> None:
        self._require_in_range(source, destination)
        self._matrix[source][destination] = 0
        if not self.directed:
            self._matrix[destination][source] = 0
        self.edge_count -= 1

    def has_edge(self, source: int, destination: int) -> bool:
        return self._in_range(source, destination) and self._matrix[source][destination] != 0

    def edge_weight(self, source: int, destination: int) -> int:
        if not self._in_range(source, destination):
            return 0
        return self._matrix[source][destination]

    def clear(self) -> None:
        for row in self._matrix:
            row[:] = [0] * self.vertex_count
        self.edge_count = 0

    def _rows(self) -> Iterator[str]:
        for row in self._matrix:
            yield "".join(f"{weight} " for weight in row)


class ListGraph(Graph):
    """Graph backed by per-vertex neighbour lists, newest edge first."""

    def __init__(self, vertices: int, directed: bool = False) -> None:
        super().__init__(vertices, directed)
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        self._require_in_range(source, destination)
        self._adjacency[source].insert(0, (destination, weight))
        if not self.directed:
            self._adjacency[destination].insert(0, (source, weight))
        self.edge_count += 1

    def _unlink(self, source: int, destination: int) -> None:
        neighbours = self._adjacency[source]
        index = next(
            (i for i, (vertex, _) in enumerate(neighbours) if vertex == destination), None
        )
        if index is not None:
            del neighbours[index]

    def remove_edge(self, source: int, destination: int) -> None:
        self._require_in_range(source, destination)
        self._unlink(source, destination)
        if not self.directed:
            self._unlink(destination, source)
        self.edge_count -= 1

    def _find(self, source: int, destination: int) -> tuple[int, int] | None:
        if not self._in_range(source, destination):
            return None
        return next(
            (entry for entry in self._adjacency[source] if entry[0] == destination), None
        )

    def has_edge(self, source: int, destination: int) -> bool:
        return self._find(source, destination) is not None

    def edge_weight(self, source: int, destination: int) -> int:
        entry = self._find(source, destination)
        return 0 if entry is None else entry[1]

    def clear(self) -> None:
        for neighbours in self._adjacency:
            neighbours.clear()
        self.edge_count = 0

    def _rows(self) -> Iterator[str]:
        for vertex, neighbours in enumerate(self._adjacency):
            yield f"{vertex}: " + "".join(f"({v}, {w}) " for v, w in neighbours)