"""weightgraph: weighted-graph primitives and the classic algorithms on them.

Quick Start
-----------
>>> from weightgraph import Graph, Digraph, kruskal_mst, bellman_ford_queue
>>>
>>> graph = Graph.from_edges(4, [(0, 1, 0.5), (1, 2, 0.25), (0, 2, 1.0), (2, 3, 0.1)])
>>> mst = kruskal_mst(graph)
>>> round(mst.weight, 2)
0.85
>>>
>>> digraph = Digraph.from_edges(3, [(0, 1, 2.0), (1, 2, -1.0), (0, 2, 4.0)])
>>> paths = bellman_ford_queue(digraph, 0)
>>> paths.distance_to(2)
1.0

Modules
-------
core : edges, graphs, union-find, priority queues and edge-list parsing.
algo : MST (Kruskal, lazy/eager Prim), Bellman-Ford, cycle detection, BFS/DFS.
verify : invariant checks used by the tests and by ``WEIGHTGRAPH_VERIFY=1``.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("weightgraph")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.0.1"

from .algo import (
    CycleResult,
    MSTResult,
    PathsResult,
    ShortestPathResult,
    bellman_ford,
    bellman_ford_queue,
    breadth_first_paths,
    depth_first_paths,
    eager_prim_mst,
    find_directed_cycle,
    kruskal_mst,
    lazy_prim_mst,
    minimum_spanning_tree,
    shortest_paths,
)
from .core import (
    DirectedEdge,
    Digraph,
    DisjointSet,
    Edge,
    Graph,
    IndexedPriorityQueue,
    PriorityQueue,
    parse_edge_list,
    read_digraph,
    read_graph,
)
from .errors import (
    GraphFormatError,
    IllegalStateError,
    InvalidArgumentError,
    InvariantViolation,
    OutOfRangeError,
    UnderflowError,
    UnsupportedOperationError,
    WeightGraphError,
)

__all__ = [
    "__version__",
    # Primitives
    "Edge",
    "DirectedEdge",
    "Graph",
    "Digraph",
    "DisjointSet",
    "PriorityQueue",
    "IndexedPriorityQueue",
    "parse_edge_list",
    "read_graph",
    "read_digraph",
    # Algorithms
    "MSTResult",
    "kruskal_mst",
    "lazy_prim_mst",
    "eager_prim_mst",
    "minimum_spanning_tree",
    "ShortestPathResult",
    "bellman_ford",
    "bellman_ford_queue",
    "shortest_paths",
    "CycleResult",
    "find_directed_cycle",
    "PathsResult",
    "breadth_first_paths",
    "depth_first_paths",
    # Errors
    "WeightGraphError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "UnderflowError",
    "UnsupportedOperationError",
    "IllegalStateError",
    "GraphFormatError",
    "InvariantViolation",
]
