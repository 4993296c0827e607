"""Core data structures: edges, graphs, union-find and priority queues."""

from .disjoint_set import DisjointSet
from .edge import DirectedEdge, Edge, edge_weight
from .graph import Digraph, Graph
from .io import EdgeList, parse_edge_list, read_digraph, read_graph
from .priority_queue import IndexedPriorityQueue, PriorityQueue

__all__ = [
    "Edge",
    "DirectedEdge",
    "edge_weight",
    "Graph",
    "Digraph",
    "DisjointSet",
    "PriorityQueue",
    "IndexedPriorityQueue",
    "EdgeList",
    "parse_edge_list",
    "read_graph",
    "read_digraph",
]
