"""Random connected graph generation."""

from __future__ import annotations

import random

from .graph import Graph

_MIN_WEIGHT = 1
_MAX_WEIGHT = 100


def generate_connected_graph(
    graph: Graph,
    vertices: int,
    density: float,
    rng: random.Random | None = None,
) -> None:
    """Fill ``graph`` with a random spanning tree, then random edges up to ``density``.

    Edge weights are drawn uniformly from 1 to 100.  ``density`` is the share of
    the possible edges (directed or undirected, as the graph is) that the graph
    ends up with.
    """
    if vertices < 1:
        raise ValueError(f"need at least one vertex, got {vertices}")
    if vertices > graph.vertex_count:
        raise ValueError(
            f"cannot place {vertices} vertices in a graph of {graph.vertex_count}"
        )
    if density > 1:
        raise ValueError(f"density must not exceed 1, got {density}")
    if rng is None:
        rng = random.Random()

    def weight() -> int:
        return rng.randint(_MIN_WEIGHT, _MAX_WEIGHT)

    # Grow a spanning tree from vertex 0 so the graph is connected.
    visited = {0}
    while len(visited) < vertices:
        u = rng.randrange(vertices)
        v = rng.randrange(vertices)
        if u in visited and v not in visited:
            graph.add_edge(u, v, weight())
            visited.add(v)
        elif v in visited and u not in visited:
            graph.add_edge(v, u, weight())
            visited.add(u)

    max_edges = vertices * (vertices - 1)
    if not graph.directed:
        max_edges //= 2
    target = int(max_edges * density)

    while graph.edge_count < target:
        u = rng.randrange(vertices)
        v = rng.randrange(vertices)
        if u != v and not graph.has_edge(u, v):
            graph.add_edge(u, v, weight())