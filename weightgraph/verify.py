"""Invariant checks for algorithm results.

These re-derive optimality conditions from scratch and are meant for tests
and debug runs (``WEIGHTGRAPH_VERIFY=1``). Each check raises
`InvariantViolation` naming the broken condition and returns ``None`` when
everything holds.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Sequence

from weightgraph.core.disjoint_set import DisjointSet
from weightgraph.core.edge import DirectedEdge, Edge
from weightgraph.core.graph import Digraph, Graph
from weightgraph.errors import InvariantViolation

if TYPE_CHECKING:  # pragma: no cover
    from weightgraph.algo.mst import MSTResult
    from weightgraph.algo.shortest_paths import ShortestPathResult
    from weightgraph.core.priority_queue import IndexedPriorityQueue, PriorityQueue

FLOATING_POINT_EPSILON = 1e-12


def check_mst(graph: Graph, result: "MSTResult") -> None:
    """Check that ``result`` is a minimum spanning forest of ``graph``."""

    edges: Sequence[Edge] = result.edges
    total = sum(edge.weight for edge in edges)
    if abs(total - result.weight) > FLOATING_POINT_EPSILON:
        raise InvariantViolation(
            f"Weight of edges does not equal weight(): {total:f} vs. {result.weight:f}"
        )

    forest = DisjointSet(graph.num_vertices)
    for edge in edges:
        v1, v2 = edge.either(), edge.other(edge.either())
        if not forest.union(v1, v2):
            raise InvariantViolation(f"Not a forest: {edge} closes a cycle")

    for edge in graph.edges():
        if not forest.connected(edge.v1, edge.v2):
            raise InvariantViolation(f"Not a spanning forest: {edge} joins two trees")

    # cut optimality: dropping a tree edge must not expose a lighter crossing edge
    for removed in edges:
        cut = DisjointSet(graph.num_vertices)
        for edge in edges:
            if edge is not removed:
                cut.union(edge.v1, edge.v2)
        for edge in graph.edges():
            if not cut.connected(edge.v1, edge.v2) and edge.weight < removed.weight:
                raise InvariantViolation(
                    f"Edge {edge} violates cut optimality conditions against {removed}"
                )


def check_cycle(cycle: Sequence[DirectedEdge]) -> None:
    """Check that consecutive edges are incident and the cycle is closed."""

    if not cycle:
        return
    previous: Optional[DirectedEdge] = None
    for edge in cycle:
        if previous is not None and previous.to_vertex != edge.from_vertex:
            raise InvariantViolation(f"Cycle edges {previous} and {edge} are not incident")
        previous = edge
    first, last = cycle[0], cycle[-1]
    if last.to_vertex != first.from_vertex:
        raise InvariantViolation(f"Cycle edges {last} and {first} are not incident")


def check_shortest_paths(digraph: Digraph, source: int, result: "ShortestPathResult") -> None:
    """Check the Bellman-Ford optimality conditions for ``result``."""

    if result.has_negative_cycle:
        check_cycle(result.negative_cycle)
        weight = math.fsum(edge.weight for edge in result.negative_cycle)
        if weight >= 0.0:
            raise InvariantViolation(f"Weight of negative cycle = {weight}")
        return

    distances = result.distances
    edge_to = result.edge_to
    if distances[source] != 0.0 or edge_to[source] is not None:
        raise InvariantViolation("distance_to[source] and edge_to[source] inconsistent")

    for v in range(digraph.num_vertices):
        if v == source:
            continue
        if edge_to[v] is None and distances[v] != math.inf:
            raise InvariantViolation(f"distance_to[{v}] and edge_to[{v}] inconsistent")

    for edge in digraph.edges():
        if distances[edge.from_vertex] + edge.weight < distances[edge.to_vertex]:
            raise InvariantViolation(f"Edge {edge} not relaxed")

    for w in range(digraph.num_vertices):
        edge = edge_to[w]
        if edge is None:
            continue
        if edge.to_vertex != w:
            raise InvariantViolation(f"edge_to[{w}] = {edge} does not point at {w}")
        if distances[edge.from_vertex] + edge.weight != distances[w]:
            raise InvariantViolation(f"Edge {edge} on shortest path not tight")


def check_disjoint_set(ds: DisjointSet) -> None:
    """Check that sizes add up and the component count matches the roots."""

    parents = ds.parents()
    sizes = ds.sizes()
    n = ds.num_elements
    roots = [i for i in range(n) if parents[i] == i]
    if len(roots) != ds.count():
        raise InvariantViolation(f"{len(roots)} roots but count() is {ds.count()}")
    members = {root: 0 for root in roots}
    for i in range(n):
        members[ds.find(i)] += 1
    for root, total in members.items():
        if total != sizes[root]:
            raise InvariantViolation(
                f"Component of root {root} has {total} members but size {sizes[root]}"
            )


def check_heap(queue: "PriorityQueue | IndexedPriorityQueue") -> None:
    if not queue.is_min_heap():
        raise InvariantViolation(f"{queue!r} violates heap order")


__all__ = [
    "FLOATING_POINT_EPSILON",
    "check_mst",
    "check_cycle",
    "check_shortest_paths",
    "check_disjoint_set",
    "check_heap",
]
