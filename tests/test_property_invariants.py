from __future__ import annotations

from typing import List, Tuple

import pytest
from hypothesis import given, settings, strategies as st

from weightgraph import (
    DisjointSet,
    Digraph,
    Graph,
    IndexedPriorityQueue,
    PriorityQueue,
    bellman_ford,
    bellman_ford_queue,
    breadth_first_paths,
    eager_prim_mst,
    find_directed_cycle,
    kruskal_mst,
    lazy_prim_mst,
)
from weightgraph.verify import (
    FLOATING_POINT_EPSILON,
    check_cycle,
    check_disjoint_set,
    check_heap,
    check_mst,
    check_shortest_paths,
)
from tests.utils import dags, digraphs, weighted_graphs

_unions = st.integers(min_value=1, max_value=20).flatmap(
    lambda n: st.tuples(
        st.just(n),
        st.lists(
            st.tuples(
                st.integers(min_value=0, max_value=n - 1),
                st.integers(min_value=0, max_value=n - 1),
            ),
            max_size=40,
        ),
    )
)


@settings(max_examples=50)
@given(case=_unions)
def test_disjoint_set_matches_reachability(case: Tuple[int, List[Tuple[int, int]]]) -> None:
    n, pairs = case
    ds = DisjointSet(n)
    accepted = sum(1 for p, q in pairs if ds.union(p, q))

    assert ds.count() == n - accepted
    check_disjoint_set(ds)
    graph = Graph.from_edges(n, pairs)
    for p in range(n):
        reachable = set(breadth_first_paths(graph, p).reachable())
        for q in range(n):
            assert ds.connected(p, q) == (q in reachable)


@settings(max_examples=50)
@given(values=st.lists(st.integers(min_value=-100, max_value=100), max_size=60))
def test_priority_queue_drains_sorted(values: List[int]) -> None:
    queue: PriorityQueue[int] = PriorityQueue()
    for value in values:
        queue.insert(value)
        check_heap(queue)

    assert list(queue) == sorted(values)
    assert len(queue) == len(values)
    drained = [queue.delete_min() for _ in range(len(values))]
    assert drained == sorted(values)
    assert queue.is_empty()


@settings(max_examples=50)
@given(
    keys=st.lists(st.integers(min_value=0, max_value=50), min_size=1, max_size=30),
    data=st.data(),
)
def test_indexed_queue_orders_by_current_key(keys: List[int], data: st.DataObject) -> None:
    queue: IndexedPriorityQueue[int] = IndexedPriorityQueue(len(keys))
    current = {}
    for index, key in enumerate(keys):
        queue.insert(index, key)
        current[index] = key
    for index in data.draw(st.lists(st.sampled_from(range(len(keys))), max_size=10)):
        if current[index] > 0:
            current[index] -= 1
            queue.decrease_key(index, current[index])
            check_heap(queue)

    popped = [queue.delete_min() for _ in range(len(keys))]
    assert sorted(popped) == list(range(len(keys)))
    assert [current[i] for i in popped] == sorted(current.values())


@settings(max_examples=50, deadline=None)
@given(graph=weighted_graphs())
def test_mst_algorithms_agree(graph: Graph) -> None:
    results = [kruskal_mst(graph), lazy_prim_mst(graph), eager_prim_mst(graph)]
    for result in results:
        check_mst(graph, result)
        assert result.num_edges == results[0].num_edges
        assert abs(result.weight - results[0].weight) <= FLOATING_POINT_EPSILON


@settings(max_examples=50, deadline=None)
@given(digraph=dags())
def test_bellman_ford_on_dags(digraph: Digraph) -> None:
    for algorithm in (bellman_ford, bellman_ford_queue):
        result = algorithm(digraph, 0)
        assert not result.has_negative_cycle
        check_shortest_paths(digraph, 0, result)


@settings(max_examples=50, deadline=None)
@given(digraph=digraphs(), source=st.integers(min_value=0, max_value=7))
def test_plain_and_queue_bellman_ford_agree(digraph: Digraph, source: int) -> None:
    source = source % digraph.num_vertices
    plain = bellman_ford(digraph, source)
    queue = bellman_ford_queue(digraph, source)

    assert plain.has_negative_cycle == queue.has_negative_cycle
    check_shortest_paths(digraph, source, plain)
    check_shortest_paths(digraph, source, queue)
    if not plain.has_negative_cycle:
        assert plain.distances.tolist() == queue.distances.tolist()


@settings(max_examples=50, deadline=None)
@given(digraph=digraphs(signed=False))
def test_found_cycles_are_closed(digraph: Digraph) -> None:
    result = find_directed_cycle(digraph)
    check_cycle(result.cycle)
    if result.has_cycle:
        assert result.vertices()[0] == result.vertices()[-1]


@settings(max_examples=50, deadline=None)
@given(digraph=dags())
def test_dags_have_no_cycle(digraph: Digraph) -> None:
    assert not find_directed_cycle(digraph).has_cycle


@pytest.mark.parametrize("interval", [1, 5])
@settings(max_examples=25, deadline=None)
@given(digraph=digraphs())
def test_check_interval_does_not_change_outcome(interval: int, digraph: Digraph) -> None:
    baseline = bellman_ford(digraph, 0)
    result = bellman_ford_queue(digraph, 0, check_interval=interval)

    assert result.has_negative_cycle == baseline.has_negative_cycle
