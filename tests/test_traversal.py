import math

import numpy as np
import pytest

from weightgraph import (
    Digraph,
    Graph,
    OutOfRangeError,
    UnsupportedOperationError,
    breadth_first_paths,
    depth_first_paths,
)
from tests.utils import tiny_ewd, tiny_ewg


def _example_graph() -> Graph:
    return Graph.from_edges(7, [(0, 1), (0, 2), (2, 3), (2, 4), (0, 5)])


def test_bfs_hop_counts_and_paths():
    result = breadth_first_paths(_example_graph(), 0)

    assert result.distance_to(3) == 2
    assert result.path_to(3) == (0, 2, 3)
    assert result.distance_to(5) == 1
    assert isinstance(result.distance_to(3), float)
    assert result.distances.dtype == np.int64 and not result.distances.flags.writeable
    assert result.path_to(0) == (0,)
    assert result.reachable() == (0, 1, 2, 3, 4, 5)


def test_bfs_unreachable_vertex():
    result = breadth_first_paths(_example_graph(), 0)

    assert not result.has_path_to(6)
    assert result.distance_to(6) == math.inf
    assert result.path_to(6) == ()


def test_bfs_follows_direction():
    digraph = Digraph.from_edges(3, [(0, 1, 1.0), (2, 1, 1.0)])

    assert breadth_first_paths(digraph, 0).reachable() == (0, 1)
    assert breadth_first_paths(digraph, 1).reachable() == (1,)


def test_bfs_shortest_hops_on_tiny_ewd():
    result = breadth_first_paths(tiny_ewd(), 0)

    assert result.distance_to(6) == 4
    assert len(result.path_to(6)) == 5


def test_dfs_paths_are_valid_walks():
    graph = tiny_ewg()
    result = depth_first_paths(graph, 0)

    assert result.reachable() == tuple(range(8))
    for v in range(8):
        path = result.path_to(v)
        assert path[0] == 0 and path[-1] == v
        for a, b in zip(path, path[1:]):
            assert b in set(graph.adjacent_vertices(a))


def test_dfs_on_digraph():
    digraph = Digraph.from_edges(4, [(0, 1, 1.0), (1, 2, 1.0), (3, 0, 1.0)])
    result = depth_first_paths(digraph, 0)

    assert result.path_to(2) == (0, 1, 2)
    assert result.path_to(3) == ()
    with pytest.raises(UnsupportedOperationError):
        result.distance_to(2)


def test_dfs_long_chain():
    n = 5000
    graph = Graph.from_edges(n, [(i, i + 1) for i in range(n - 1)])
    result = depth_first_paths(graph, 0)

    assert len(result.path_to(n - 1)) == n


@pytest.mark.parametrize("search", [breadth_first_paths, depth_first_paths])
def test_source_validation(search):
    with pytest.raises(OutOfRangeError):
        search(Graph(3), 3)
    result = search(Graph(3), 1)
    assert result.reachable() == (1,)
    with pytest.raises(OutOfRangeError):
        result.has_path_to(5)
