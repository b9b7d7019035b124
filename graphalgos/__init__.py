"""MST and shortest path algorithms on matrix and list graphs, with timing and a command-line runner."""

__version__ = "0.1.0"
__all__ = ["__version__"]