from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

from weightgraph.core.graph import Digraph, Graph
from weightgraph.errors import UnsupportedOperationError, check_index
from weightgraph.logging import get_logger

LOGGER = get_logger("algo.traversal")

AnyGraph = Union[Graph, Digraph]


@dataclass(frozen=True)
class PathsResult:
    """Reachability and a path tree rooted at ``source``.

    ``edge_to[v]`` is the vertex preceding ``v`` on its tree path (-1 for the
    source and unreachable vertices). ``distances`` holds hop counts for
    breadth-first search and is ``None`` for depth-first search.
    """

    source: int
    marked: np.ndarray
    edge_to: np.ndarray
    distances: Optional[np.ndarray]
    algorithm: str

    @property
    def num_vertices(self) -> int:
        return int(self.marked.shape[0])

    def has_path_to(self, v: int) -> bool:
        check_index(v, self.num_vertices)
        return bool(self.marked[v])

    def distance_to(self, v: int) -> float:
        """Hop count from the source, ``inf`` when ``v`` is unreachable."""

        check_index(v, self.num_vertices)
        if self.distances is None:
            raise UnsupportedOperationError(f"{self.algorithm} does not record hop counts")
        if not self.marked[v]:
            return math.inf
        return float(self.distances[v])

    def path_to(self, v: int) -> Tuple[int, ...]:
        if not self.has_path_to(v):
            return ()
        path: List[int] = []
        x = v
        while x != self.source:
            path.append(x)
            x = int(self.edge_to[x])
        path.append(self.source)
        path.reverse()
        return tuple(path)

    def reachable(self) -> Tuple[int, ...]:
        return tuple(int(v) for v in np.flatnonzero(self.marked))


def _readonly(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


def breadth_first_paths(graph: AnyGraph, source: int) -> PathsResult:
    """Shortest hop-count paths from ``source`` in a graph or digraph."""

    num_vertices = graph.num_vertices
    check_index(source, num_vertices)
    marked = np.zeros(num_vertices, dtype=bool)
    edge_to = np.full(num_vertices, -1, dtype=np.int64)
    distances = np.full(num_vertices, -1, dtype=np.int64)

    frontier = deque([source])
    marked[source] = True
    distances[source] = 0
    while frontier:
        v = frontier.popleft()
        for w in graph.adjacent_vertices(v):
            if not marked[w]:
                edge_to[w] = v
                distances[w] = distances[v] + 1
                marked[w] = True
                frontier.append(w)

    LOGGER.debug("BFS from %d reached %d vertices", source, int(marked.sum()))
    return PathsResult(
        source=source,
        marked=_readonly(marked),
        edge_to=_readonly(edge_to),
        distances=_readonly(distances),
        algorithm="bfs",
    )


def depth_first_paths(graph: AnyGraph, source: int) -> PathsResult:
    """Depth-first path tree from ``source``, using an explicit stack."""

    num_vertices = graph.num_vertices
    check_index(source, num_vertices)
    marked = np.zeros(num_vertices, dtype=bool)
    edge_to = np.full(num_vertices, -1, dtype=np.int64)

    marked[source] = True
    stack: List[Tuple[int, Iterator[int]]] = [(source, graph.adjacent_vertices(source))]
    while stack:
        v, neighbours = stack[-1]
        w = next(neighbours, None)
        if w is None:
            stack.pop()
        elif not marked[w]:
            edge_to[w] = v
            marked[w] = True
            stack.append((w, graph.adjacent_vertices(w)))

    LOGGER.debug("DFS from %d reached %d vertices", source, int(marked.sum()))
    return PathsResult(
        source=source,
        marked=_readonly(marked),
        edge_to=_readonly(edge_to),
        distances=None,
        algorithm="dfs",
    )


__all__ = ["PathsResult", "breadth_first_paths", "depth_first_paths"]
