from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from weightgraph import config as wg_config
from weightgraph.core.edge import DirectedEdge
from weightgraph.core.graph import Digraph
from weightgraph.logging import get_logger
from weightgraph.verify import check_cycle

LOGGER = get_logger("algo.cycle")


@dataclass(frozen=True)
class CycleResult:
    """A directed cycle as consecutive edges, or an empty tuple when acyclic."""

    cycle: Tuple[DirectedEdge, ...]

    @property
    def has_cycle(self) -> bool:
        return bool(self.cycle)

    @property
    def weight(self) -> float:
        return float(sum(edge.weight for edge in self.cycle))

    def vertices(self) -> Tuple[int, ...]:
        """Vertices along the cycle, starting and ending at the same vertex."""

        if not self.cycle:
            return ()
        return (self.cycle[0].from_vertex,) + tuple(edge.to_vertex for edge in self.cycle)


def _unwind(
    closing: DirectedEdge, edge_to: List[Optional[DirectedEdge]]
) -> Tuple[DirectedEdge, ...]:
    target = closing.to_vertex
    reversed_cycle = [closing]
    edge = closing
    while edge.from_vertex != target:
        edge = edge_to[edge.from_vertex]
        reversed_cycle.append(edge)
    reversed_cycle.reverse()
    return tuple(reversed_cycle)


def find_directed_cycle(digraph: Digraph) -> CycleResult:
    """Depth-first search for a directed cycle; stops at the first one found.

    The search keeps an explicit stack of adjacency iterators so its depth is
    bounded by memory rather than by the interpreter's recursion limit.
    """

    num_vertices = digraph.num_vertices
    marked = np.zeros(num_vertices, dtype=bool)
    on_stack = np.zeros(num_vertices, dtype=bool)
    edge_to: List[Optional[DirectedEdge]] = [None] * num_vertices

    for root in range(num_vertices):
        if marked[root]:
            continue
        marked[root] = True
        on_stack[root] = True
        stack: List[Tuple[int, Iterator[DirectedEdge]]] = [
            (root, iter(digraph.adjacent(root)))
        ]
        while stack:
            v, edges = stack[-1]
            edge = next(edges, None)
            if edge is None:
                on_stack[v] = False
                stack.pop()
                continue
            w = edge.to_vertex
            if not marked[w]:
                edge_to[w] = edge
                marked[w] = True
                on_stack[w] = True
                stack.append((w, iter(digraph.adjacent(w))))
            elif on_stack[w]:
                result = CycleResult(cycle=_unwind(edge, edge_to))
                LOGGER.debug("Directed cycle found through %d edges", len(result.cycle))
                _maybe_verify(result)
                return result

    return CycleResult(cycle=())


def _maybe_verify(result: CycleResult) -> None:
    if wg_config.runtime_config().verify:
        check_cycle(result.cycle)


__all__ = ["CycleResult", "find_directed_cycle"]
