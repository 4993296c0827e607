"""Graph algorithms: spanning forests, shortest paths, cycles and traversal."""

from .cycle import CycleResult, find_directed_cycle
from .mst import (
    MST_ALGORITHMS,
    MSTResult,
    eager_prim_mst,
    kruskal_mst,
    lazy_prim_mst,
    minimum_spanning_tree,
)
from .shortest_paths import (
    SHORTEST_PATH_ALGORITHMS,
    ShortestPathResult,
    bellman_ford,
    bellman_ford_queue,
    shortest_paths,
)
from .traversal import PathsResult, breadth_first_paths, depth_first_paths

__all__ = [
    "CycleResult",
    "find_directed_cycle",
    "MSTResult",
    "MST_ALGORITHMS",
    "kruskal_mst",
    "lazy_prim_mst",
    "eager_prim_mst",
    "minimum_spanning_tree",
    "ShortestPathResult",
    "SHORTEST_PATH_ALGORITHMS",
    "bellman_ford",
    "bellman_ford_queue",
    "shortest_paths",
    "PathsResult",
    "breadth_first_paths",
    "depth_first_paths",
]
