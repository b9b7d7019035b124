import random

import pytest

from graphalgos.generator import generate_connected_graph
from graphalgos.graph import ListGraph, MatrixGraph
from graphalgos.mst import kruskal_mst, prim_mst
from graphalgos.runner import (
    run_bellman_ford_sp,
    run_dijkstra_sp,
    run_kruskal_mst,
    run_prim_mst,
)
from graphalgos.shortest_path import bellman_ford, dijkstra


def _graph(directed, seed=10):
    graph = MatrixGraph(8, directed)
    generate_connected_graph(graph, 8, 0.4, random.Random(seed))
    return graph


def test_run_prim_prints_report(capsys):
    graph = _graph(False)
    elapsed = run_prim_mst(graph)
    assert elapsed >= 0.0
    assert capsys.readouterr().out == prim_mst(graph).format() + "\n"


def test_run_kruskal_prints_report(capsys):
    graph = _graph(False)
    elapsed = run_kruskal_mst(graph)
    assert elapsed >= 0.0
    assert capsys.readouterr().out == kruskal_mst(graph).format() + "\n"


def test_run_dijkstra_prints_report(capsys):
    graph = _graph(True)
    elapsed = run_dijkstra_sp(graph, 0, 5)
    assert elapsed >= 0.0
    assert capsys.readouterr().out == dijkstra(graph, 0, 5).format("Dijkstra") + "\n"


def test_run_bellman_ford_prints_report(capsys):
    graph = _graph(True)
    elapsed = run_bellman_ford_sp(graph, 0, 5)
    assert elapsed >= 0.0
    assert (
        capsys.readouterr().out
        == bellman_ford(graph, 0, 5).format("Bellman-Ford") + "\n"
    )


def test_run_bellman_ford_reports_negative_cycle(capsys):
    graph = ListGraph(3, directed=True)
    graph.add_edge(0, 1, 2)
    graph.add_edge(1, 0, -5)
    elapsed = run_bellman_ford_sp(graph, 0, 2)
    assert elapsed >= 0.0
    assert capsys.readouterr().out == "Wykryto cykl o ujemnej wadze.\n"


def test_run_prim_on_single_vertex_prints_nothing(capsys):
    elapsed = run_prim_mst(MatrixGraph(1))
    assert elapsed >= 0.0
    assert capsys.readouterr().out == ""


def test_run_dijkstra_rejects_bad_vertex():
    with pytest.raises(IndexError):
        run_dijkstra_sp(_graph(True), 0, 99)