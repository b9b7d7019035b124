import random
from collections import deque

import pytest

from graphalgos.generator import generate_connected_graph
from graphalgos.graph import ListGraph, MatrixGraph
from graphalgos.mst import DisjointSet, MSTEdge, MSTResult, kruskal_mst, prim_mst


def _generated(cls, vertices, density, seed):
    graph = cls(vertices)
    generate_connected_graph(graph, vertices, density, random.Random(seed))
    return graph


def _spans(vertices, edges):
    tree = MatrixGraph(vertices)
    for edge in edges:
        tree.add_edge(edge.source, edge.destination, edge.weight)
    seen = {0}
    queue = deque([0])
    while queue:
        u = queue.popleft()
        for v in range(vertices):
            if v not in seen and tree.has_edge(u, v):
                seen.add(v)
                queue.append(v)
    return seen == set(range(vertices))


def _path_graph():
    graph = MatrixGraph(3)
    graph.add_edge(0, 1, 1)
    graph.add_edge(1, 2, 2)
    graph.add_edge(0, 2, 5)
    return graph


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
@pytest.mark.parametrize("cls", [MatrixGraph, ListGraph])
def test_prim_and_kruskal_agree_on_total(cls, seed):
    graph = _generated(cls, 12, 0.4, seed)
    prim = prim_mst(graph)
    kruskal = kruskal_mst(graph)
    assert prim.total_weight() == kruskal.total_weight()
    assert len(prim.edges) == len(kruskal.edges) == graph.vertex_count - 1


@pytest.mark.parametrize("algorithm", [prim_mst, kruskal_mst])
def test_tree_edges_belong_to_graph_and_span_it(algorithm):
    graph = _generated(MatrixGraph, 10, 0.5, 17)
    result = algorithm(graph)
    assert all(
        graph.has_edge(e.source, e.destination)
        and graph.edge_weight(e.source, e.destination) == e.weight
        for e in result.edges
    )
    assert _spans(10, result.edges)


@pytest.mark.parametrize("algorithm", [prim_mst, kruskal_mst])
def test_matrix_and_list_give_same_tree(algorithm):
    matrix = _generated(MatrixGraph, 9, 0.6, 21)
    adjacency = _generated(ListGraph, 9, 0.6, 21)
    assert algorithm(matrix).edges == algorithm(adjacency).edges


def test_small_example_total():
    assert kruskal_mst(_path_graph()).total_weight() == 3


def test_prim_format():
    assert prim_mst(_path_graph()).format() == "0 - 1 (waga: 1)\n1 - 2 (waga: 2)"


def test_kruskal_format_reports_total():
    assert (
        kruskal_mst(_path_graph()).format()
        == "0 - 1 (waga: 1)\n1 - 2 (waga: 2)\nSuma wag MST: 3"
    )


def test_kruskal_edges_sorted_by_weight():
    result = kruskal_mst(_generated(ListGraph, 14, 0.5, 33))
    weights = [e.weight for e in result.edges]
    assert weights == sorted(weights)


def test_kruskal_on_forest_keeps_every_edge():
    graph = ListGraph(4)
    graph.add_edge(0, 1, 7)
    graph.add_edge(2, 3, 9)
    result = kruskal_mst(graph)
    assert set(result.edges) == {MSTEdge(0, 1, 7), MSTEdge(2, 3, 9)}


def test_prim_on_disconnected_graph_covers_component_of_zero():
    graph = MatrixGraph(4)
    graph.add_edge(0, 1, 7)
    graph.add_edge(2, 3, 9)
    assert prim_mst(graph).edges == [MSTEdge(0, 1, 7)]


@pytest.mark.parametrize("algorithm", [prim_mst, kruskal_mst])
def test_empty_graph_has_no_edges(algorithm):
    assert algorithm(MatrixGraph(0)).edges == []


def test_empty_result_format_without_total():
    assert MSTResult().format() == ""


def test_disjoint_set_union_and_find():
    sets = DisjointSet(5)
    assert sets.find(3) == 3
    assert sets.union(0, 1) is True
    assert sets.union(1, 2) is True
    assert sets.union(0, 2) is False
    assert sets.find(0) == sets.find(2)
    assert sets.find(3) != sets.find(0)