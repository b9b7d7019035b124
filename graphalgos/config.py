"""Run configuration read from ``Key: value`` lines."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class ProblemType(enum.Enum):
    MST = "MST"
    SP = "SP"


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group())


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


def _unquote(value: str) -> str:
    if len(value) > 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


_FLAGS = {
    "RunPrim": "run_prim",
    "RunKruskal": "run_kruskal",
    "RunDijkstra": "run_dijkstra",
    "RunBellmanFord": "run_bellman_ford",
    "UseMatrix": "use_matrix",
    "UseList": "use_list",
    "DisplayGraph": "show_graph",
    "RunPerformanceTests": "run_performance_tests",
}

_INTEGERS = {
    "Vertices": "vertex_count",
    "Source": "source_vertex",
    "Destination": "destination_vertex",
}


@dataclass
class Config:
    """Settings for a run; unspecified keys keep their defaults."""

    problem_type: ProblemType = ProblemType.MST
    run_prim: bool = True
    run_kruskal: bool = True
    run_dijkstra: bool = False
    run_bellman_ford: bool = False
    use_matrix: bool = True
    use_list: bool = True
    input_file: str = ""
    vertex_count: int = 10
    density: float = 0.5
    show_graph: bool = True
    run_performance_tests: bool = False
    source_vertex: int = 0
    destination_vertex: int = 5

    def apply_lines(self, lines: Iterable[str]) -> None:
        """Update settings from ``Key: value`` lines; '#' starts a comment line."""
        for raw in lines:
            line = raw.rstrip("\r\n")
            if not line or line.startswith("#"):
                continue
            key, colon, value = line.partition(":")
            if not colon:
                continue
            key = key.strip(" \t")
            value = value.strip(" \t")

            if key == "Problem":
                if value in ("MST", "SP"):
                    self.problem_type = ProblemType(value)
            elif key == "LoadFromFile":
                self.input_file = _unquote(value)
            elif key == "Density":
                self.density = _parse_float(value)
            elif key in _INTEGERS:
                setattr(self, _INTEGERS[key], _parse_int(value))
            elif key in _FLAGS:
                setattr(self, _FLAGS[key], value == "true")

    def load_file(self, filename: str) -> None:
        """Read settings from a file; raises OSError if it cannot be opened."""
        with open(filename, encoding="utf-8") as handle:
            self.apply_lines(handle)