"""Command-line application: build graphs, run the configured algorithms, report times."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence

from .config import Config, ProblemType
from .generator import generate_connected_graph
from .graph import Graph, ListGraph, MatrixGraph
from .runner import (
    run_bellman_ford_sp,
    run_dijkstra_sp,
    run_kruskal_mst,
    run_prim_mst,
)

DEFAULT_CONFIG_FILE = "config.txt"


def load_graph_file(
    filename: str, use_matrix: bool, use_list: bool
) -> tuple[MatrixGraph | None, ListGraph | None]:
    """Read an undirected graph file into the requested representations.

    The file starts with the edge count and the vertex count, followed by one
    ``source destination weight`` triple per edge.  Edges whose endpoints lie
    outside the graph are skipped.  Raises OSError if the file cannot be read
    and ValueError if its contents are malformed.
    """
    with open(filename, encoding="utf-8") as handle:
        tokens = handle.read().split()

    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"{filename}: expected whole numbers only") from exc
    if len(numbers) < 2:
        raise ValueError(f"{filename}: missing edge and vertex counts")

    edge_total, vertex_total = numbers[0], numbers[1]
    if edge_total < 0:
        raise ValueError(f"{filename}: negative edge count {edge_total}")
    triples = numbers[2:]
    if len(triples) < 3 * edge_total:
        raise ValueError(
            f"{filename}: expected {edge_total} edges, found {len(triples) // 3}"
        )

    matrix = MatrixGraph(vertex_total, directed=False) if use_matrix else None
    adjacency = ListGraph(vertex_total, directed=False) if use_list else None
    graphs = [graph for graph in (matrix, adjacency) if graph is not None]

    edges = zip(*[iter(triples[: 3 * edge_total])] * 3)
    for source, destination, weight in edges:
        for graph in graphs:
            try:
                graph.add_edge(source, destination, weight)
            except IndexError:
                continue
    return matrix, adjacency


class Application:
    """One run of the program, driven by a Config."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.rng = random.Random()
        self.matrix_graph: MatrixGraph | None = None
        self.list_graph: ListGraph | None = None

    def _graphs(self) -> list[tuple[str, Graph]]:
        named: list[tuple[str, Graph | None]] = [
            ("Matrix Representation:", self.matrix_graph),
            ("List Representation:", self.list_graph),
        ]
        return [(label, graph) for label, graph in named if graph is not None]

    def _build_graphs(self) -> bool:
        config = self.config
        if config.input_file:
            try:
                self.matrix_graph, self.list_graph = load_graph_file(
                    config.input_file, config.use_matrix, config.use_list
                )
            except OSError:
                print(f"Error opening file: {config.input_file}", file=sys.stderr)
                print("Failed to load graph from file. Exiting.", file=sys.stderr)
                return False
            except ValueError as exc:
                print(exc, file=sys.stderr)
                print("Failed to load graph from file. Exiting.", file=sys.stderr)
                return False
            return True

        directed = config.problem_type is ProblemType.SP
        vertices = config.vertex_count
        try:
            if config.use_matrix:
                self.matrix_graph = MatrixGraph(vertices, directed)
            if config.use_list:
                self.list_graph = ListGraph(vertices, directed)
            for _, graph in self._graphs():
                generate_connected_graph(graph, vertices, config.density, self.rng)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            print("Failed to generate random graph. Exiting.", file=sys.stderr)
            return False
        return True

    def _run_each(self, title: str, algorithm: Callable[[Graph], float]) -> None:
        print(f"\n=== {title} ===")
        for label, graph in self._graphs():
            print(label)
            elapsed = algorithm(graph)
            print(f"Execution Time: {elapsed:g} ms")

    def run(self) -> int:
        """Build the graphs and run the configured algorithms; return an exit status."""
        config = self.config
        if not self._build_graphs():
            return 1

        if config.show_graph:
            for label, graph in self._graphs():
                print(label)
                graph.display()

        if config.problem_type is ProblemType.MST:
            if config.run_prim:
                self._run_each("Prim's Algorithm", run_prim_mst)
            if config.run_kruskal:
                self._run_each("Kruskal's Algorithm", run_kruskal_mst)
        else:
            source, destination = config.source_vertex, config.destination_vertex
            if config.run_dijkstra:
                self._run_each(
                    "Dijkstra's Algorithm",
                    lambda graph: run_dijkstra_sp(graph, source, destination),
                )
            if config.run_bellman_ford:
                self._run_each(
                    "Bellman-Ford Algorithm",
                    lambda graph: run_bellman_ford_sp(graph, source, destination),
                )

        if config.run_performance_tests:
            print("\n=== Performance Tests ===")
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: read the configuration file and run the application."""
    parser = argparse.ArgumentParser(
        description="Run MST and shortest-path algorithms on weighted graphs."
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_FILE,
        help=f"configuration file (default: {DEFAULT_CONFIG_FILE})",
    )
    args = parser.parse_args(argv)

    config = Config()
    try:
        config.load_file(args.config)
    except OSError:
        print(f"Error opening config file: {args.config}", file=sys.stderr)
        print("Error loading configuration file. Using default values.", file=sys.stderr)

    return Application(config).run()


if __name__ == "__main__":
    sys.exit(main())