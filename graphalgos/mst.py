"""Minimum spanning trees: Prim's and Kruskal's algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .graph import Graph


@dataclass(frozen=True)
class MSTEdge:
    """An edge chosen for the spanning tree."""

    source: int
    destination: int
    weight: int


@dataclass
class MSTResult:
    """Edges of a spanning tree (or forest), in the order they were chosen."""

    edges: list[MSTEdge] = field(default_factory=list)
    report_total: bool = False

    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)

    def format(self) -> str:
        """The printed report: one line per edge, then the total if requested."""
        lines = [
            f"{edge.source} - {edge.destination} (waga: {edge.weight})"
            for edge in self.edges
        ]
        if self.report_total:
            lines.append(f"Suma wag MST: {self.total_weight()}")
        return "\n".join(lines)


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; False if they were already one set."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self._rank[rx] < self._rank[ry]:
            self._parent[rx] = ry
        elif self._rank[rx] > self._rank[ry]:
            self._parent[ry] = rx
        else:
            self._parent[ry] = rx
            self._rank[rx] += 1
        return True


def prim_mst(graph: Graph) -> MSTResult:
    """Grow a tree from vertex 0, ignoring edges of non-positive weight."""
    n = graph.vertex_count
    if n == 0:
        return MSTResult()
    key: list[float] = [math.inf] * n
    key[0] = 0
    parent: list[int | None] = [None] * n
    in_tree = [False] * n

    for _ in range(n - 1):
        candidates = [v for v in range(n) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            break
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v in range(n):
            weight = graph.edge_weight(u, v)
            if weight > 0 and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    edges = [
        MSTEdge(p, v, graph.edge_weight(p, v))
        for v, p in enumerate(parent)
        if p is not None
    ]
    return MSTResult(edges)


def _quicksort_by_weight(edges: list[MSTEdge]) -> None:
    """Sort in place with a Lomuto-partition quicksort (not stable)."""
    pending = [(0, len(edges) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = edges[high].weight
        boundary = low - 1
        for j in range(low, high):
            if edges[j].weight <= pivot:
                boundary += 1
                edges[boundary], edges[j] = edges[j], edges[boundary]
        edges[boundary + 1], edges[high] = edges[high], edges[boundary + 1]
        pending.append((low, boundary))
        pending.append((boundary + 2, high))


def kruskal_mst(graph: Graph) -> MSTResult:
    """Pick the lightest edges (i < j) that join separate components."""
    n = graph.vertex_count
    edges = [
        MSTEdge(i, j, graph.edge_weight(i, j))
        for i in range(n)
        for j in range(i + 1, n)
        if graph.has_edge(i, j)
    ]
    _quicksort_by_weight(edges)

    sets = DisjointSet(n)
    chosen: list[MSTEdge] = []
    for edge in edges:
        if len(chosen) >= n - 1:
            break
        if sets.union(edge.source, edge.destination):
            chosen.append(edge)
    return MSTResult(chosen, report_total=True)