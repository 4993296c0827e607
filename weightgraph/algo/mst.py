from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from weightgraph import config as wg_config
from weightgraph.core.disjoint_set import DisjointSet
from weightgraph.core.edge import Edge, edge_weight
from weightgraph.core.graph import Graph
from weightgraph.core.priority_queue import IndexedPriorityQueue, PriorityQueue
from weightgraph.errors import InvalidArgumentError
from weightgraph.logging import get_logger
from weightgraph.verify import check_mst

LOGGER = get_logger("algo.mst")


@dataclass(frozen=True)
class MSTResult:
    """Edges of a minimum spanning forest and their total weight."""

    edges: Tuple[Edge, ...]
    weight: float
    algorithm: str

    @property
    def num_edges(self) -> int:
        return len(self.edges)


def _finish(graph: Graph, edges: List[Edge], algorithm: str) -> MSTResult:
    weight = 0.0
    for edge in edges:
        weight += edge.weight
    result = MSTResult(edges=tuple(edges), weight=weight, algorithm=algorithm)
    LOGGER.debug(
        "%s selected %d of %d edges over %d vertices (weight %.5f)",
        algorithm,
        len(edges),
        graph.num_edges,
        graph.num_vertices,
        weight,
    )
    if wg_config.runtime_config().verify:
        check_mst(graph, result)
    return result


def kruskal_mst(graph: Graph) -> MSTResult:
    """Kruskal's algorithm: scan edges by weight, keep those joining two trees."""

    queue = PriorityQueue.from_iterable(graph.edges(), key=edge_weight)
    components = DisjointSet(graph.num_vertices)
    target = graph.num_vertices - 1
    mst: List[Edge] = []

    while not queue.is_empty() and len(mst) < target:
        edge = queue.delete_min()
        v1 = edge.either()
        v2 = edge.other(v1)
        if components.union(v1, v2):
            mst.append(edge)

    return _finish(graph, mst, "kruskal")


def lazy_prim_mst(graph: Graph) -> MSTResult:
    """Lazy Prim: crossing edges stay queued until popped, stale ones are skipped.

    Restarting from every unvisited vertex yields a spanning forest on
    disconnected input.
    """

    marked = np.zeros(graph.num_vertices, dtype=bool)
    queue: PriorityQueue[Edge] = PriorityQueue(key=edge_weight)
    mst: List[Edge] = []

    def visit(v: int) -> None:
        marked[v] = True
        for edge in graph.adjacent(v):
            if not marked[edge.other(v)]:
                queue.insert(edge)

    for root in range(graph.num_vertices):
        if marked[root]:
            continue
        visit(root)
        while not queue.is_empty():
            edge = queue.delete_min()
            v1 = edge.either()
            v2 = edge.other(v1)
            if marked[v1] and marked[v2]:
                continue
            mst.append(edge)
            if not marked[v1]:
                visit(v1)
            if not marked[v2]:
                visit(v2)

    return _finish(graph, mst, "lazy_prim")


def eager_prim_mst(graph: Graph) -> MSTResult:
    """Eager Prim: one indexed-queue entry per non-tree vertex, keyed by its
    lightest known connection to the tree."""

    num_vertices = graph.num_vertices
    edge_to: List[Optional[Edge]] = [None] * num_vertices
    distance_to = np.full(num_vertices, np.inf, dtype=np.float64)
    marked = np.zeros(num_vertices, dtype=bool)
    queue: IndexedPriorityQueue[float] = IndexedPriorityQueue(num_vertices)

    for root in range(num_vertices):
        if marked[root]:
            continue
        distance_to[root] = 0.0
        queue.insert(root, 0.0)
        while not queue.is_empty():
            v = queue.delete_min()
            marked[v] = True
            for edge in graph.adjacent(v):
                w = edge.other(v)
                if marked[w]:
                    continue
                if edge.weight < distance_to[w]:
                    distance_to[w] = edge.weight
                    edge_to[w] = edge
                    if queue.contains(w):
                        queue.decrease_key(w, edge.weight)
                    else:
                        queue.insert(w, edge.weight)

    mst = [edge for edge in edge_to if edge is not None]
    return _finish(graph, mst, "eager_prim")


MST_ALGORITHMS: Dict[str, Callable[[Graph], MSTResult]] = {
    "kruskal": kruskal_mst,
    "lazy_prim": lazy_prim_mst,
    "eager_prim": eager_prim_mst,
}


def minimum_spanning_tree(graph: Graph, *, algorithm: str = "kruskal") -> MSTResult:
    try:
        run = MST_ALGORITHMS[algorithm]
    except KeyError as exc:
        raise InvalidArgumentError(
            f"Unknown MST algorithm '{algorithm}'. Expected one of {sorted(MST_ALGORITHMS)}."
        ) from exc
    return run(graph)


__all__ = [
    "MSTResult",
    "MST_ALGORITHMS",
    "kruskal_mst",
    "lazy_prim_mst",
    "eager_prim_mst",
    "minimum_spanning_tree",
]
