import pytest

from weightgraph import DirectedEdge, Digraph, InvariantViolation, find_directed_cycle
from weightgraph.verify import check_cycle
from tests.utils import tiny_ewd, tiny_ewdnc


def test_dag_has_no_cycle():
    digraph = Digraph.from_edges(4, [(0, 1, 1.0), (1, 2, 1.0), (0, 2, 1.0), (2, 3, 1.0)])
    result = find_directed_cycle(digraph)

    assert not result.has_cycle
    assert result.cycle == ()
    assert result.vertices() == ()
    assert result.weight == 0.0


def test_back_edge_closes_cycle():
    digraph = Digraph.from_edges(4, [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 3.0), (3, 1, -4.0)])
    result = find_directed_cycle(digraph)

    assert result.has_cycle
    assert result.vertices() == (1, 2, 3, 1)
    assert result.weight == pytest.approx(1.0)
    check_cycle(result.cycle)


def test_self_loop_is_a_cycle():
    digraph = Digraph.from_edges(2, [(0, 1, 1.0), (1, 1, 0.5)])
    result = find_directed_cycle(digraph)

    assert result.cycle == (DirectedEdge(1, 1, 0.5),)
    assert result.vertices() == (1, 1)


def test_tiny_digraphs_contain_cycles():
    for digraph in (tiny_ewd(), tiny_ewdnc()):
        result = find_directed_cycle(digraph)
        assert result.has_cycle
        vertices = result.vertices()
        assert vertices[0] == vertices[-1]
        check_cycle(result.cycle)


def test_cycle_found_from_later_root():
    digraph = Digraph.from_edges(5, [(0, 1, 1.0), (3, 4, 1.0), (4, 3, 1.0)])
    result = find_directed_cycle(digraph)

    assert set(result.vertices()) == {3, 4}


def test_deep_chain_does_not_recurse():
    n = 5000
    records = [(i, i + 1, 1.0) for i in range(n - 1)] + [(n - 1, 0, 1.0)]
    result = find_directed_cycle(Digraph.from_edges(n, records))

    assert len(result.cycle) == n


def test_runs_under_verification(verify_runtime):
    assert verify_runtime.verify
    assert find_directed_cycle(tiny_ewdnc()).has_cycle


def test_check_cycle_rejects_broken_cycles():
    with pytest.raises(InvariantViolation, match="not incident"):
        check_cycle((DirectedEdge(0, 1, 1.0), DirectedEdge(2, 0, 1.0)))
    with pytest.raises(InvariantViolation, match="not incident"):
        check_cycle((DirectedEdge(0, 1, 1.0), DirectedEdge(1, 2, 1.0)))
    check_cycle(())
