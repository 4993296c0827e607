import pytest

from weightgraph import DisjointSet, IndexedPriorityQueue, InvariantViolation, PriorityQueue
from weightgraph.verify import check_disjoint_set, check_heap


def test_check_disjoint_set_accepts_valid_state():
    ds = DisjointSet(6)
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(1, 3)

    check_disjoint_set(ds)


def test_check_disjoint_set_detects_bad_size():
    ds = DisjointSet(4)
    ds.union(0, 1)
    ds._size[ds.find(0)] = 5

    with pytest.raises(InvariantViolation, match="has 2 members but size 5"):
        check_disjoint_set(ds)


def test_check_disjoint_set_detects_bad_count():
    ds = DisjointSet(3)
    ds.union(0, 1)
    ds._count = 3

    with pytest.raises(InvariantViolation, match="2 roots but count"):
        check_disjoint_set(ds)


def test_check_heap_detects_disorder():
    queue = PriorityQueue.from_iterable([5, 3, 9, 1])
    check_heap(queue)
    queue._heap[1], queue._heap[-1] = queue._heap[-1], queue._heap[1]

    with pytest.raises(InvariantViolation, match="heap order"):
        check_heap(queue)


def test_check_heap_detects_inverse_mismatch():
    queue = IndexedPriorityQueue(4)
    for index, key in enumerate([0.4, 0.1, 0.3, 0.2]):
        queue.insert(index, key)
    check_heap(queue)
    queue._qp[queue.min_index()] = 3

    with pytest.raises(InvariantViolation):
        check_heap(queue)
