"""Binary min-heaps over 1-based positions.

Both queues take an optional ``key`` callable in the style of ``sorted``;
items (or keys, for the indexed queue) are compared through it. The key must
induce a total preorder that stays fixed while an item is queued.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

import numpy as np

from weightgraph.errors import (
    IllegalStateError,
    InvalidArgumentError,
    UnderflowError,
    check_index,
)

T = TypeVar("T")
K = TypeVar("K")


def _identity(item: Any) -> Any:
    return item


class PriorityQueue(Generic[T]):
    """Unindexed min-priority queue with lazy deletion left to the caller."""

    def __init__(self, key: Optional[Callable[[T], Any]] = None):
        self._key = key
        self._sort_key = key if key is not None else _identity
        # slot 0 is unused so that children of k sit at 2k and 2k+1
        self._heap: List[Optional[T]] = [None]

    @classmethod
    def from_iterable(
        cls, items: Iterable[T], key: Optional[Callable[[T], Any]] = None
    ) -> "PriorityQueue[T]":
        """Build a queue from ``items`` with a bottom-up heapify."""

        queue = cls(key=key)
        for item in items:
            if item is None:
                raise InvalidArgumentError("Cannot queue None")
            queue._heap.append(item)
        for k in range(len(queue) // 2, 0, -1):
            queue._sink(k)
        return queue

    @property
    def key(self) -> Optional[Callable[[T], Any]]:
        return self._key

    def __len__(self) -> int:
        return len(self._heap) - 1

    def is_empty(self) -> bool:
        return len(self._heap) == 1

    def peek_min(self) -> T:
        if self.is_empty():
            raise UnderflowError("Priority queue underflow")
        return self._heap[1]

    def insert(self, item: T) -> None:
        if item is None:
            raise InvalidArgumentError("Cannot queue None")
        self._heap.append(item)
        self._swim(len(self))

    def delete_min(self) -> T:
        if self.is_empty():
            raise UnderflowError("Priority queue underflow")
        last = len(self)
        self._swap(1, last)
        smallest = self._heap.pop()
        self._sink(1)
        return smallest

    def __iter__(self) -> Iterator[T]:
        copy: PriorityQueue[T] = PriorityQueue(key=self._key)
        copy._heap = list(self._heap)
        while not copy.is_empty():
            yield copy.delete_min()

    def is_min_heap(self) -> bool:
        n = len(self)
        for k in range(1, n // 2 + 1):
            left, right = 2 * k, 2 * k + 1
            if self._greater(k, left):
                return False
            if right <= n and self._greater(k, right):
                return False
        return True

    def _greater(self, i: int, j: int) -> bool:
        return self._sort_key(self._heap[i]) > self._sort_key(self._heap[j])

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]

    def _swim(self, k: int) -> None:
        while k > 1 and self._greater(k // 2, k):
            self._swap(k, k // 2)
            k //= 2

    def _sink(self, k: int) -> None:
        n = len(self)
        while 2 * k <= n:
            j = 2 * k
            if j < n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._swap(k, j)
            k = j

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self)})"


class IndexedPriorityQueue(Generic[K]):
    """Min-priority queue keyed by external integer indices ``0 .. capacity-1``.

    ``_pq[slot]`` holds the index stored at a heap slot and ``_qp[index]`` the
    slot of an index, or -1 when the index is not queued.
    """

    def __init__(self, capacity: int, key: Optional[Callable[[K], Any]] = None):
        if capacity < 0:
            raise IllegalStateError(f"Capacity must be non-negative, got {capacity}")
        self._capacity = int(capacity)
        self._sort_key = key if key is not None else _identity
        self._key = key
        self._n = 0
        self._pq = np.zeros(capacity + 1, dtype=np.int64)
        self._qp = np.full(capacity, -1, dtype=np.int64)
        self._keys: List[Optional[K]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._n

    def is_empty(self) -> bool:
        return self._n == 0

    def contains(self, index: int) -> bool:
        check_index(index, self._capacity, label="index")
        return bool(self._qp[index] != -1)

    def __contains__(self, index: int) -> bool:
        return self.contains(index)

    def insert(self, index: int, key: K) -> None:
        if key is None:
            raise InvalidArgumentError("Cannot queue a None key")
        if self.contains(index):
            raise InvalidArgumentError(f"index {index} is already in the priority queue")
        self._n += 1
        self._qp[index] = self._n
        self._pq[self._n] = index
        self._keys[index] = key
        self._swim(self._n)

    def key_of(self, index: int) -> K:
        if not self.contains(index):
            raise InvalidArgumentError(f"index {index} is not in the priority queue")
        return self._keys[index]

    def min_index(self) -> int:
        if self._n == 0:
            raise UnderflowError("Priority queue underflow")
        return int(self._pq[1])

    def min_key(self) -> K:
        return self._keys[self.min_index()]

    def decrease_key(self, index: int, key: K) -> None:
        if key is None:
            raise InvalidArgumentError("Cannot queue a None key")
        current = self.key_of(index)
        if not self._sort_key(key) < self._sort_key(current):
            raise InvalidArgumentError(
                f"Calling decrease_key() with key {key!r} not strictly less than {current!r}"
            )
        self._keys[index] = key
        self._swim(int(self._qp[index]))

    def delete_min(self) -> int:
        smallest = self.min_index()
        self._swap(1, self._n)
        self._n -= 1
        self._sink(1)
        self._qp[smallest] = -1
        self._keys[smallest] = None
        self._pq[self._n + 1] = -1
        return smallest

    def __iter__(self) -> Iterator[int]:
        copy: IndexedPriorityQueue[K] = IndexedPriorityQueue(self._capacity, key=self._key)
        for slot in range(1, self._n + 1):
            index = int(self._pq[slot])
            copy.insert(index, self._keys[index])
        while not copy.is_empty():
            yield copy.delete_min()

    def is_min_heap(self) -> bool:
        n = self._n
        for k in range(1, n // 2 + 1):
            left, right = 2 * k, 2 * k + 1
            if self._greater(k, left):
                return False
            if right <= n and self._greater(k, right):
                return False
        for slot in range(1, n + 1):
            if self._qp[self._pq[slot]] != slot:
                return False
        return True

    def _greater(self, i: int, j: int) -> bool:
        key_i = self._keys[self._pq[i]]
        key_j = self._keys[self._pq[j]]
        return self._sort_key(key_i) > self._sort_key(key_j)

    def _swap(self, i: int, j: int) -> None:
        pq, qp = self._pq, self._qp
        pq[i], pq[j] = pq[j], pq[i]
        qp[pq[i]] = i
        qp[pq[j]] = j

    def _swim(self, k: int) -> None:
        while k > 1 and self._greater(k // 2, k):
            self._swap(k, k // 2)
            k //= 2

    def _sink(self, k: int) -> None:
        n = self._n
        while 2 * k <= n:
            j = 2 * k
            if j < n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._swap(k, j)
            k = j

    def __repr__(self) -> str:
        return f"IndexedPriorityQueue(size={self._n}, capacity={self._capacity})"


__all__ = ["PriorityQueue", "IndexedPriorityQueue"]
