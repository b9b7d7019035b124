"""High-resolution stopwatch."""

from __future__ import annotations

import time


class Timer:
    """Measures the time between start() and stop(); usable as a context manager."""

    def __init__(self) -> None:
        self._start: float | None = None
        self._end: float | None = None

    def start(self) -> None:
        self._start = time.perf_counter()
        self._end = None

    def stop(self) -> None:
        if self._start is None:
            raise RuntimeError("timer stopped before it was started")
        self._end = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds between the last start() and stop()."""
        if self._start is None or self._end is None:
            raise RuntimeError("timer has not been started and stopped")
        return self._end - self._start

    def elapsed_ms(self) -> float:
        """Milliseconds between the last start() and stop()."""
        return self.elapsed() * 1000.0

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()