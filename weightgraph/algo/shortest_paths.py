from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from weightgraph import config as wg_config
from weightgraph.algo.cycle import find_directed_cycle
from weightgraph.core.edge import DirectedEdge
from weightgraph.core.graph import Digraph
from weightgraph.errors import (
    InvalidArgumentError,
    InvariantViolation,
    UnsupportedOperationError,
    check_index,
)
from weightgraph.logging import get_logger
from weightgraph.verify import check_shortest_paths

LOGGER = get_logger("algo.shortest_paths")


@dataclass(frozen=True)
class ShortestPathResult:
    """Single-source shortest paths, or the negative cycle that prevents them.

    When ``negative_cycle`` is non-empty the distances are meaningless and
    ``distance_to``, ``has_path_to`` and ``path_to`` raise
    `UnsupportedOperationError`.
    """

    source: int
    distances: np.ndarray
    edge_to: Tuple[Optional[DirectedEdge], ...]
    negative_cycle: Tuple[DirectedEdge, ...]
    algorithm: str
    relaxations: int

    @property
    def num_vertices(self) -> int:
        return int(self.distances.shape[0])

    @property
    def has_negative_cycle(self) -> bool:
        return bool(self.negative_cycle)

    def _require_no_negative_cycle(self) -> None:
        if self.negative_cycle:
            raise UnsupportedOperationError("Negative cost cycle exists")

    def distance_to(self, v: int) -> float:
        check_index(v, self.num_vertices)
        self._require_no_negative_cycle()
        return float(self.distances[v])

    def has_path_to(self, v: int) -> bool:
        check_index(v, self.num_vertices)
        self._require_no_negative_cycle()
        return bool(self.distances[v] < math.inf)

    def path_to(self, v: int) -> Tuple[DirectedEdge, ...]:
        check_index(v, self.num_vertices)
        self._require_no_negative_cycle()
        if not self.has_path_to(v):
            return ()
        path: List[DirectedEdge] = []
        edge = self.edge_to[v]
        while edge is not None:
            path.append(edge)
            edge = self.edge_to[edge.from_vertex]
        path.reverse()
        return tuple(path)


def _predecessor_cycle(
    num_vertices: int, edge_to: Sequence[Optional[DirectedEdge]]
) -> Tuple[DirectedEdge, ...]:
    """Search the subgraph formed by the current predecessor edges for a cycle."""

    spt = Digraph(num_vertices)
    for edge in edge_to:
        if edge is not None:
            spt.add_edge(edge)
    return find_directed_cycle(spt).cycle


def _finish(
    digraph: Digraph,
    source: int,
    distances: Sequence[float],
    edge_to: Sequence[Optional[DirectedEdge]],
    cycle: Tuple[DirectedEdge, ...],
    algorithm: str,
    relaxations: int,
) -> ShortestPathResult:
    distances_arr = np.asarray(distances, dtype=np.float64)
    distances_arr.setflags(write=False)
    result = ShortestPathResult(
        source=source,
        distances=distances_arr,
        edge_to=tuple(edge_to),
        negative_cycle=cycle,
        algorithm=algorithm,
        relaxations=relaxations,
    )
    if cycle:
        LOGGER.info(
            "%s found a negative cycle of %d edges reachable from %d",
            algorithm,
            len(cycle),
            source,
        )
    else:
        LOGGER.debug(
            "%s from %d finished after %d relaxations", algorithm, source, relaxations
        )
    if wg_config.runtime_config().verify:
        check_shortest_paths(digraph, source, result)
    return result


def _relax_passes_python(
    edges: Sequence[DirectedEdge],
    distances: List[float],
    edge_to: List[int],
    passes: int,
) -> int:
    relaxations = 0
    for _ in range(passes):
        for index, edge in enumerate(edges):
            candidate = distances[edge.from_vertex] + edge.weight
            if distances[edge.to_vertex] > candidate:
                distances[edge.to_vertex] = candidate
                edge_to[edge.to_vertex] = index
            relaxations += 1
    return relaxations


def _first_violation_python(edges: Sequence[DirectedEdge], distances: List[float]) -> int:
    for index, edge in enumerate(edges):
        if distances[edge.to_vertex] > distances[edge.from_vertex] + edge.weight:
            return index
    return -1


def bellman_ford(digraph: Digraph, source: int) -> ShortestPathResult:
    """Bellman-Ford with ``V`` full passes over every edge and a final scan.

    An edge that still admits a relaxation after the passes proves a negative
    cycle reachable from ``source``. That edge is relaxed once more, which
    closes the cycle in the predecessor subgraph where it is then read off.
    """

    num_vertices = digraph.num_vertices
    check_index(source, num_vertices)
    edges = digraph.edges()
    runtime = wg_config.runtime_config()

    if runtime.enable_numba:
        from weightgraph.algo._bellman_ford_numba import first_violation, relax_passes

        tails, heads, weights = digraph.edge_arrays()
        dist_arr = np.full(num_vertices, np.inf, dtype=np.float64)
        dist_arr[source] = 0.0
        edge_to_arr = np.full(num_vertices, -1, dtype=np.int64)
        relaxations = relax_passes(tails, heads, weights, dist_arr, edge_to_arr, num_vertices)
        violation = first_violation(tails, heads, weights, dist_arr)
        distances = dist_arr.tolist()
        edge_to_index = edge_to_arr.tolist()
    else:
        distances = [math.inf] * num_vertices
        distances[source] = 0.0
        edge_to_index = [-1] * num_vertices
        relaxations = _relax_passes_python(edges, distances, edge_to_index, num_vertices)
        violation = _first_violation_python(edges, distances)

    cycle: Tuple[DirectedEdge, ...] = ()
    if violation >= 0:
        edge = edges[violation]
        distances[edge.to_vertex] = distances[edge.from_vertex] + edge.weight
        edge_to_index[edge.to_vertex] = violation
        relaxations += 1
        edge_to = [edges[i] if i >= 0 else None for i in edge_to_index]
        cycle = _predecessor_cycle(num_vertices, edge_to)
        if not cycle:
            raise InvariantViolation(
                f"Edge {edge} admits relaxation after {num_vertices} passes "
                "but the predecessor subgraph is acyclic"
            )
    else:
        edge_to = [edges[i] if i >= 0 else None for i in edge_to_index]

    return _finish(digraph, source, distances, edge_to, cycle, "bellman_ford", relaxations)


def bellman_ford_queue(
    digraph: Digraph, source: int, *, check_interval: Optional[int] = None
) -> ShortestPathResult:
    """Queue-based Bellman-Ford.

    Only vertices whose distance changed are revisited. Every
    ``check_interval`` relaxation attempts (default: the number of vertices,
    or ``WEIGHTGRAPH_CYCLE_CHECK_INTERVAL``) the predecessor subgraph is
    searched for a cycle; any cycle found there has negative weight and halts
    the search.
    """

    num_vertices = digraph.num_vertices
    check_index(source, num_vertices)
    if check_interval is None:
        check_interval = wg_config.runtime_config().check_interval_for(num_vertices)
    if check_interval < 1:
        raise InvalidArgumentError(f"check_interval must be positive, got {check_interval}")

    distances = [math.inf] * num_vertices
    distances[source] = 0.0
    edge_to: List[Optional[DirectedEdge]] = [None] * num_vertices
    on_queue = np.zeros(num_vertices, dtype=bool)
    queue = deque([source])
    on_queue[source] = True
    relaxations = 0
    cycle: Tuple[DirectedEdge, ...] = ()

    while queue and not cycle:
        v = queue.popleft()
        on_queue[v] = False
        for edge in digraph.adjacent(v):
            w = edge.to_vertex
            candidate = distances[v] + edge.weight
            if distances[w] > candidate:
                distances[w] = candidate
                edge_to[w] = edge
                if not on_queue[w]:
                    queue.append(w)
                    on_queue[w] = True
            relaxations += 1
            if relaxations % check_interval == 0:
                cycle = _predecessor_cycle(num_vertices, edge_to)
                if cycle:
                    break

    return _finish(
        digraph, source, distances, edge_to, cycle, "bellman_ford_queue", relaxations
    )


SHORTEST_PATH_ALGORITHMS: Dict[str, Callable[[Digraph, int], ShortestPathResult]] = {
    "plain": bellman_ford,
    "queue": bellman_ford_queue,
}


def shortest_paths(
    digraph: Digraph, source: int, *, algorithm: str = "queue"
) -> ShortestPathResult:
    try:
        run = SHORTEST_PATH_ALGORITHMS[algorithm]
    except KeyError as exc:
        raise InvalidArgumentError(
            f"Unknown shortest-path algorithm '{algorithm}'. "
            f"Expected one of {sorted(SHORTEST_PATH_ALGORITHMS)}."
        ) from exc
    return run(digraph, source)


__all__ = [
    "ShortestPathResult",
    "SHORTEST_PATH_ALGORITHMS",
    "bellman_ford",
    "bellman_ford_queue",
    "shortest_paths",
]
