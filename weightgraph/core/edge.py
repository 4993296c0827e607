from __future__ import annotations

from dataclasses import dataclass

from weightgraph.errors import InvalidArgumentError


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge with a designated first vertex ``v1``."""

    v1: int
    v2: int
    weight: float = 0.0

    def either(self) -> int:
        return self.v1

    def other(self, vertex: int) -> int:
        if vertex == self.v1:
            return self.v2
        if vertex == self.v2:
            return self.v1
        raise InvalidArgumentError(f"vertex {vertex} is not an endpoint of {self}")

    def reversed(self) -> "Edge":
        return Edge(self.v2, self.v1, self.weight)

    def __str__(self) -> str:
        return f"{self.v1}-{self.v2} {self.weight:.5f}"


@dataclass(frozen=True)
class DirectedEdge:
    """Weighted edge ``from_vertex -> to_vertex``."""

    from_vertex: int
    to_vertex: int
    weight: float = 0.0

    def reversed(self) -> "DirectedEdge":
        return DirectedEdge(self.to_vertex, self.from_vertex, self.weight)

    def __str__(self) -> str:
        return f"{self.from_vertex}->{self.to_vertex} {self.weight:5.2f}"


def edge_weight(edge: Edge | DirectedEdge) -> float:
    """Sort key ordering edges by weight."""

    return edge.weight


__all__ = ["Edge", "DirectedEdge", "edge_weight"]
