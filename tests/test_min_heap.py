import random

import pytest

from graphalgos.min_heap import MinHeap, VertexDistance


def drain(heap):
    out = []
    while len(heap):
        out.append(heap.extract_min())
    return out


def test_extracts_in_distance_order():
    rng = random.Random(1234)
    distances = [rng.randint(0, 1000) for _ in range(50)]
    heap = MinHeap(50)
    for vertex, distance in enumerate(distances):
        heap.insert(vertex, distance)
    result = drain(heap)
    assert [entry.distance for entry in result] == sorted(distances)
    assert sorted(entry.vertex for entry in result) == list(range(50))
    assert all(distances[e.vertex] == e.distance for e in result)


def test_len_and_membership():
    heap = MinHeap(4)
    heap.insert(2, 10)
    heap.insert(0, 5)
    assert len(heap) == 2
    assert 2 in heap and 0 in heap
    assert 1 not in heap
    assert 9 not in heap
    first = heap.extract_min()
    assert first == VertexDistance(0, 5)
    assert 0 not in heap
    assert len(heap) == 1


def test_last_extracted_vertex_leaves_heap():
    heap = MinHeap(2)
    heap.insert(1, 3)
    assert heap.extract_min() == VertexDistance(1, 3)
    assert 1 not in heap
    assert len(heap) == 0


def test_decrease_key_moves_entry_to_front():
    heap = MinHeap(5)
    for vertex, distance in [(0, 10), (1, 20), (2, 30), (3, 40)]:
        heap.insert(vertex, distance)
    heap.decrease_key(3, 1)
    assert heap.extract_min() == VertexDistance(3, 1)
    assert [e.vertex for e in drain(heap)] == [0, 1, 2]


def test_extract_from_empty_raises():
    with pytest.raises(IndexError):
        MinHeap(3).extract_min()


def test_insert_past_capacity_raises():
    heap = MinHeap(1)
    heap.insert(0, 1)
    with pytest.raises(IndexError):
        heap.insert(1, 2)


def test_duplicate_insert_raises():
    heap = MinHeap(3)
    heap.insert(1, 1)
    with pytest.raises(ValueError):
        heap.insert(1, 0)


def test_decrease_key_of_missing_vertex_raises():
    heap = MinHeap(3)
    heap.insert(0, 4)
    with pytest.raises(KeyError):
        heap.decrease_key(2, 1)