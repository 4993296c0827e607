"""Edge-list parsing: ``V E`` followed by ``E`` records ``v1 v2 [weight]``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from weightgraph.core.edge import DirectedEdge, Edge
from weightgraph.core.graph import Digraph, Graph
from weightgraph.errors import GraphFormatError

EdgeListSource = Union[str, Iterable[str]]


@dataclass(frozen=True)
class EdgeList:
    num_vertices: int
    records: Tuple[Tuple[int, int, float], ...]

    @property
    def num_edges(self) -> int:
        return len(self.records)


def _tokens(source: EdgeListSource) -> List[str]:
    if isinstance(source, str):
        return source.split()
    tokens: List[str] = []
    for line in source:
        tokens.extend(line.split())
    return tokens


def _read_int(tokens: List[str], pos: int, what: str) -> int:
    if pos >= len(tokens):
        raise GraphFormatError(f"Unexpected end of input while reading {what}")
    try:
        return int(tokens[pos])
    except ValueError as exc:
        raise GraphFormatError(f"Expected integer {what}, got '{tokens[pos]}'") from exc


def _read_float(tokens: List[str], pos: int, what: str) -> float:
    if pos >= len(tokens):
        raise GraphFormatError(f"Unexpected end of input while reading {what}")
    try:
        return float(tokens[pos])
    except ValueError as exc:
        raise GraphFormatError(f"Expected number {what}, got '{tokens[pos]}'") from exc


def parse_edge_list(source: EdgeListSource, *, weighted: bool = True) -> EdgeList:
    """Parse whitespace-separated edge-list tokens.

    Parameters
    ----------
    source:
        Either the whole text or an iterable of lines (an open file works).
    weighted:
        Whether each record carries a third weight token. Unweighted records
        get weight ``0.0``.
    """

    tokens = _tokens(source)
    num_vertices = _read_int(tokens, 0, "vertex count")
    num_edges = _read_int(tokens, 1, "edge count")
    if num_vertices < 0:
        raise GraphFormatError(f"Number of vertices must be non-negative, got {num_vertices}")
    if num_edges < 0:
        raise GraphFormatError(f"Number of edges must be non-negative, got {num_edges}")

    width = 3 if weighted else 2
    records: List[Tuple[int, int, float]] = []
    pos = 2
    for i in range(num_edges):
        v1 = _read_int(tokens, pos, f"endpoint of edge {i}")
        v2 = _read_int(tokens, pos + 1, f"endpoint of edge {i}")
        weight = _read_float(tokens, pos + 2, f"weight of edge {i}") if weighted else 0.0
        for v in (v1, v2):
            if not 0 <= v < num_vertices:
                raise GraphFormatError(
                    f"Edge {i} endpoint {v} is not between 0 and {num_vertices - 1}"
                )
        records.append((v1, v2, weight))
        pos += width

    if pos != len(tokens):
        raise GraphFormatError(
            f"Found {len(tokens) - pos} trailing tokens after {num_edges} edges"
        )
    return EdgeList(num_vertices=num_vertices, records=tuple(records))


def read_graph(source: EdgeListSource, *, weighted: bool = True) -> Graph:
    edge_list = parse_edge_list(source, weighted=weighted)
    return Graph.from_edges(
        edge_list.num_vertices, (Edge(*record) for record in edge_list.records)
    )


def read_digraph(source: EdgeListSource, *, weighted: bool = True) -> Digraph:
    edge_list = parse_edge_list(source, weighted=weighted)
    return Digraph.from_edges(
        edge_list.num_vertices, (DirectedEdge(*record) for record in edge_list.records)
    )


__all__ = ["EdgeList", "EdgeListSource", "parse_edge_list", "read_graph", "read_digraph"]
