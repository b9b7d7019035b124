"""Single-pair shortest paths: Dijkstra and Bellman-Ford."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .graph import Graph
from .min_heap import MinHeap


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


@dataclass
class PathResult:
    """Distance and route from source to destination; distance is None if unreachable."""

    source: int
    destination: int
    distance: int | None
    path: list[int] = field(default_factory=list)

    def format(self, algorithm: str) -> str:
        """The printed report, headed by the algorithm's name."""
        if self.distance is None:
            return f"Brak ścieżki z {self.source} do {self.destination}"
        route = " -> ".join(map(str, self.path))
        return (
            f"{algorithm}: {self.source} -> {self.destination}, "
            f"dystans: {self.distance}\nŚcieżka: {route}"
        )


def _check_vertices(graph: Graph, source: int, destination: int) -> None:
    for vertex in (source, destination):
        if not 0 <= vertex < graph.vertex_count:
            raise IndexError(
                f"vertex {vertex} outside a graph of {graph.vertex_count} vertices"
            )


def _result(
    source: int,
    destination: int,
    dist: list[float],
    parent: list[int | None],
) -> PathResult:
    if dist[destination] == math.inf:
        return PathResult(source, destination, None, [])
    path: list[int] = []
    current: int | None = destination
    while current is not None:
        path.append(current)
        current = parent[current]
    path.reverse()
    return PathResult(source, destination, int(dist[destination]), path)


def dijkstra(graph: Graph, source: int, destination: int) -> PathResult:
    """Shortest path by Dijkstra's algorithm; stops once the destination is settled."""
    _check_vertices(graph, source, destination)
    n = graph.vertex_count
    dist: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    visited = [False] * n
    dist[source] = 0

    heap = MinHeap(n)
    heap.insert(source, 0)
    while len(heap):
        u = heap.extract_min().vertex
        if u == destination:
            break
        visited[u] = True
        for v in range(n):
            if not graph.has_edge(u, v) or visited[v]:
                continue
            candidate = dist[u] + graph.edge_weight(u, v)
            if candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u
                if v in heap:
                    heap.decrease_key(v, int(candidate))
                else:
                    heap.insert(v, int(candidate))

    return _result(source, destination, dist, parent)


def bellman_ford(graph: Graph, source: int, destination: int) -> PathResult:
    """Shortest path by Bellman-Ford; raises NegativeCycleError on a reachable negative cycle."""
    _check_vertices(graph, source, destination)
    n = graph.vertex_count
    edges = [
        (u, v, graph.edge_weight(u, v))
        for u in range(n)
        for v in range(n)
        if graph.has_edge(u, v)
    ]
    dist: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    dist[source] = 0

    for _ in range(n - 1):
        for u, v, weight in edges:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u

    for u, v, weight in edges:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError("negative-weight cycle reachable from the source")

    return _result(source, destination, dist, parent)