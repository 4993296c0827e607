"""Weighted adjacency-list graphs with integer vertices ``0 .. V-1``."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple, Union

import numpy as np

from weightgraph.core.edge import DirectedEdge, Edge
from weightgraph.errors import IllegalStateError, InvalidArgumentError, check_index

EdgeSpec = Union[Edge, Sequence[float]]
DirectedEdgeSpec = Union[DirectedEdge, Sequence[float]]


def _unpack_spec(spec: Sequence[float]) -> Tuple[int, int, float]:
    if spec is None:
        raise InvalidArgumentError("Edge must not be None")
    if len(spec) == 2:
        v1, v2 = spec
        weight = 0.0
    elif len(spec) == 3:
        v1, v2, weight = spec
    else:
        raise InvalidArgumentError(f"Expected (v1, v2[, weight]), got {spec!r}")
    return int(v1), int(v2), float(weight)


class Graph:
    """Undirected weighted graph.

    Each edge is kept once per endpoint: the record stored at ``v`` always has
    ``v`` as its first vertex, so ``sum(degree(v)) == 2 * num_edges``.
    """

    def __init__(self, num_vertices: int):
        if num_vertices < 0:
            raise IllegalStateError(
                f"Number of vertices must be non-negative, got {num_vertices}"
            )
        self._v = int(num_vertices)
        self._e = 0
        self._adj: List[List[Edge]] = [[] for _ in range(self._v)]

    @classmethod
    def from_edges(cls, num_vertices: int, edges: Iterable[EdgeSpec]) -> "Graph":
        graph = cls(num_vertices)
        for spec in edges:
            graph.add_edge(spec if isinstance(spec, Edge) else Edge(*_unpack_spec(spec)))
        return graph

    @property
    def num_vertices(self) -> int:
        return self._v

    @property
    def num_edges(self) -> int:
        return self._e

    def _validate(self, v: int) -> int:
        return check_index(v, self._v)

    def add_edge(self, edge: Edge) -> None:
        if edge is None:
            raise InvalidArgumentError("Edge must not be None")
        self._validate(edge.v1)
        self._validate(edge.v2)
        self._adj[edge.v1].append(edge)
        self._adj[edge.v2].append(edge.reversed())
        self._e += 1

    def adjacent(self, v: int) -> Tuple[Edge, ...]:
        self._validate(v)
        return tuple(self._adj[v])

    def adjacent_vertices(self, v: int) -> Iterator[int]:
        self._validate(v)
        for edge in self._adj[v]:
            yield edge.v2

    def degree(self, v: int) -> int:
        self._validate(v)
        return len(self._adj[v])

    def edges(self) -> List[Edge]:
        """Every edge once; of the two records of a self-loop only one is kept."""

        result: List[Edge] = []
        for v in range(self._v):
            self_loops = 0
            for edge in self._adj[v]:
                w = edge.v2
                if w > v:
                    result.append(edge)
                elif w == v:
                    if self_loops % 2 == 0:
                        result.append(edge)
                    self_loops += 1
        return result

    def __repr__(self) -> str:
        return f"Graph(v={self._v}, e={self._e})"

    def __str__(self) -> str:
        lines = [f"{self._v} {self._e}"]
        for v in range(self._v):
            lines.append(f"{v}: " + "  ".join(str(edge) for edge in self._adj[v]))
        return "\n".join(lines)


class Digraph:
    """Directed weighted graph storing outgoing edges per vertex."""

    def __init__(self, num_vertices: int):
        if num_vertices < 0:
            raise IllegalStateError(
                f"Number of vertices must be non-negative, got {num_vertices}"
            )
        self._v = int(num_vertices)
        self._e = 0
        self._adj: List[List[DirectedEdge]] = [[] for _ in range(self._v)]
        self._in_degree = np.zeros(self._v, dtype=np.int64)

    @classmethod
    def from_edges(
        cls, num_vertices: int, edges: Iterable[DirectedEdgeSpec]
    ) -> "Digraph":
        digraph = cls(num_vertices)
        for spec in edges:
            if isinstance(spec, DirectedEdge):
                digraph.add_edge(spec)
            else:
                digraph.add_edge(DirectedEdge(*_unpack_spec(spec)))
        return digraph

    @property
    def num_vertices(self) -> int:
        return self._v

    @property
    def num_edges(self) -> int:
        return self._e

    def _validate(self, v: int) -> int:
        return check_index(v, self._v)

    def add_edge(self, edge: DirectedEdge) -> None:
        if edge is None:
            raise InvalidArgumentError("Edge must not be None")
        self._validate(edge.from_vertex)
        self._validate(edge.to_vertex)
        self._adj[edge.from_vertex].append(edge)
        self._in_degree[edge.to_vertex] += 1
        self._e += 1

    def adjacent(self, v: int) -> Tuple[DirectedEdge, ...]:
        self._validate(v)
        return tuple(self._adj[v])

    def adjacent_vertices(self, v: int) -> Iterator[int]:
        self._validate(v)
        for edge in self._adj[v]:
            yield edge.to_vertex

    def out_degree(self, v: int) -> int:
        self._validate(v)
        return len(self._adj[v])

    def in_degree(self, v: int) -> int:
        self._validate(v)
        return int(self._in_degree[v])

    degree = out_degree

    def edges(self) -> List[DirectedEdge]:
        result: List[DirectedEdge] = []
        for adjacency in self._adj:
            result.extend(adjacency)
        return result

    def edge_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return aligned ``(tails, heads, weights)`` arrays in ``edges()`` order."""

        edges = self.edges()
        tails = np.fromiter((e.from_vertex for e in edges), dtype=np.int64, count=len(edges))
        heads = np.fromiter((e.to_vertex for e in edges), dtype=np.int64, count=len(edges))
        weights = np.fromiter((e.weight for e in edges), dtype=np.float64, count=len(edges))
        return tails, heads, weights

    def reverse(self) -> "Digraph":
        reversed_graph = Digraph(self._v)
        for edge in self.edges():
            reversed_graph.add_edge(edge.reversed())
        return reversed_graph

    def __repr__(self) -> str:
        return f"Digraph(v={self._v}, e={self._e})"

    def __str__(self) -> str:
        lines = [f"{self._v} {self._e}"]
        for v in range(self._v):
            lines.append(f"{v}: " + "  ".join(str(edge) for edge in self._adj[v]))
        return "\n".join(lines)


__all__ = ["Graph", "Digraph", "EdgeSpec", "DirectedEdgeSpec"]
