"""Binary min-heap of vertices keyed by distance, with decrease-key."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class VertexDistance:
    """A vertex together with its current tentative distance."""

    vertex: int
    distance: int


class MinHeap:
    """Min-heap over vertices ``0 .. capacity - 1`` that tracks each vertex's slot."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._heap: list[VertexDistance] = []
        self._position = [-1] * capacity

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, vertex: object) -> bool:
        return (
            isinstance(vertex, int)
            and 0 <= vertex < self.capacity
            and self._position[vertex] != -1
        )

    def _swap(self, a: int, b: int) -> None:
        heap = self._heap
        heap[a], heap[b] = heap[b], heap[a]
        self._position[heap[a].vertex] = a
        self._position[heap[b].vertex] = b

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._heap[index].distance >= self._heap[parent].distance:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._heap[child].distance < self._heap[smallest].distance:
                    smallest = child
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def insert(self, vertex: int, distance: int) -> None:
        """Add a vertex with the given distance."""
        if not 0 <= vertex < self.capacity:
            raise IndexError(f"vertex {vertex} outside heap capacity {self.capacity}")
        if vertex in self:
            raise ValueError(f"vertex {vertex} is already in the heap")
        self._heap.append(VertexDistance(vertex, distance))
        index = len(self._heap) - 1
        self._position[vertex] = index
        self._sift_up(index)

    def extract_min(self) -> VertexDistance:
        """Remove and return the entry with the smallest distance."""
        if not self._heap:
            raise IndexError("extract_min from an empty heap")
        root = self._heap[0]
        last = self._heap.pop()
        self._position[root.vertex] = -1
        if self._heap:
            self._heap[0] = last
            self._position[last.vertex] = 0
            self._sift_down(0)
        return root

    def decrease_key(self, vertex: int, new_distance: int) -> None:
        """Set a queued vertex's distance to a smaller value."""
        if vertex not in self:
            raise KeyError(vertex)
        index = self._position[vertex]
        self._heap[index].distance = new_distance
        self._sift_up(index)