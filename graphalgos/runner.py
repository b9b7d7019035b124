"""Run an algorithm, print its report and return its running time in milliseconds."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .graph import Graph
from .mst import kruskal_mst, prim_mst
from .shortest_path import NegativeCycleError, bellman_ford, dijkstra
from .timer import Timer

_T = TypeVar("_T")


def _timed(algorithm: Callable[..., _T], *args: object) -> tuple[_T, float]:
    with Timer() as timer:
        result = algorithm(*args)
    return result, timer.elapsed_ms()


def _emit(text: str) -> None:
    if text:
        print(text)


def run_prim_mst(graph: Graph) -> float:
    result, elapsed = _timed(prim_mst, graph)
    _emit(result.format())
    return elapsed


def run_kruskal_mst(graph: Graph) -> float:
    result, elapsed = _timed(kruskal_mst, graph)
    _emit(result.format())
    return elapsed


def run_dijkstra_sp(graph: Graph, source: int, destination: int) -> float:
    result, elapsed = _timed(dijkstra, graph, source, destination)
    _emit(result.format("Dijkstra"))
    return elapsed


def run_bellman_ford_sp(graph: Graph, source: int, destination: int) -> float:
    timer = Timer()
    try:
        with timer:
            result = bellman_ford(graph, source, destination)
    except NegativeCycleError:
        print("Wykryto cykl o ujemnej wadze.")
        return timer.elapsed_ms()
    _emit(result.format("Bellman-Ford"))
    return timer.elapsed_ms()