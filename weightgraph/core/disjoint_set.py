from __future__ import annotations

import numpy as np

from weightgraph.errors import IllegalStateError, check_index


class DisjointSet:
    """Weighted quick-union over the elements ``0 .. n-1``.

    ``find`` walks parent links to the root without path compression, so the
    forest shape depends only on the sequence of unions.
    """

    def __init__(self, n: int):
        if n < 0:
            raise IllegalStateError(f"Number of elements must be non-negative, got {n}")
        self._parent = np.arange(n, dtype=np.int64)
        self._size = np.ones(n, dtype=np.int64)
        self._count = int(n)

    @property
    def num_elements(self) -> int:
        return int(self._parent.shape[0])

    def count(self) -> int:
        """Number of disjoint components."""

        return self._count

    def find(self, p: int) -> int:
        check_index(p, self.num_elements, label="element")
        parent = self._parent
        while p != parent[p]:
            p = int(parent[p])
        return int(p)

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def component_size(self, p: int) -> int:
        return int(self._size[self.find(p)])

    def union(self, p: int, q: int) -> bool:
        """Merge the components of ``p`` and ``q``; return False if already joined."""

        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False

        if self._size[root_p] < self._size[root_q]:
            self._parent[root_p] = root_q
            self._size[root_q] += self._size[root_p]
        else:
            self._parent[root_q] = root_p
            self._size[root_p] += self._size[root_q]
        self._count -= 1
        return True

    def parents(self) -> np.ndarray:
        """Read-only view of the parent links."""

        view = self._parent.view()
        view.setflags(write=False)
        return view

    def sizes(self) -> np.ndarray:
        view = self._size.view()
        view.setflags(write=False)
        return view

    def __repr__(self) -> str:
        return f"DisjointSet(n={self.num_elements}, components={self._count})"


__all__ = ["DisjointSet"]
