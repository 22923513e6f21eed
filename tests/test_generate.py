"""Tests for ledgerstats.generate."""
import io
import random

import pytest

from ledgerstats.generate.bipartite import BLUE, RED, generate_bipartite_dag
from ledgerstats.graph.store import ROOT
from ledgerstats.graph.validate import is_bipartite, is_connected_acyclic
from ledgerstats.io.triples import parse_triples, write_graph
from ledgerstats.stats.degree import in_degrees
from ledgerstats.stats.depth import vertex_depths


SIZES = [1, 2, 3, 10, 200]


def test_rejects_non_positive():
    with pytest.raises(ValueError):
        generate_bipartite_dag(0)
    with pytest.raises(ValueError):
        generate_bipartite_dag(-3)


def test_rejects_bad_strategy():
    with pytest.raises(ValueError):
        generate_bipartite_dag(3, timestamps="poisson")


def test_single_vertex_references_root():
    dag = generate_bipartite_dag(1, seed=0)
    assert len(dag.triples) == 1
    left, right, ts = dag.triples[0]
    assert (left, right) == (ROOT, ROOT)
    assert 0 <= ts <= 99
    assert dag.classes == {ROOT: RED, 2: BLUE}


def test_seed_is_deterministic():
    a = generate_bipartite_dag(50, seed=123)
    b = generate_bipartite_dag(50, seed=123)
    assert a == b


def test_rng_argument():
    a = generate_bipartite_dag(20, rng=random.Random(9))
    b = generate_bipartite_dag(20, rng=random.Random(9))
    assert a.triples == b.triples


@pytest.mark.parametrize("n", SIZES)
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_output_loads_without_error(n, seed):
    dag = generate_bipartite_dag(n, seed=seed)
    g = parse_triples(dag.lines())
    assert g.n_transactions == n
    assert is_connected_acyclic(g) is True


@pytest.mark.parametrize("n", SIZES)
def test_no_same_class_edge(n):
    dag = generate_bipartite_dag(n, seed=n)
    for vid, (left, right, _ts) in enumerate(dag.triples, start=2):
        assert dag.classes[left] != dag.classes[vid]
        assert dag.classes[right] != dag.classes[vid]
    assert is_bipartite(dag.graph())


@pytest.mark.parametrize("n", SIZES)
def test_references_point_backwards(n):
    dag = generate_bipartite_dag(n, seed=7)
    for vid, (left, right, _ts) in enumerate(dag.triples, start=2):
        assert 1 <= left < vid
        assert 1 <= right < vid


def test_causal_timestamps_follow_neighbours():
    dag = generate_bipartite_dag(300, seed=5)
    ts = {ROOT: 0}
    for vid, (left, right, t) in enumerate(dag.triples, start=2):
        if vid > 2:
            assert t > max(ts[left], ts[right])
        ts[vid] = t


def test_uniform_timestamps_in_range():
    dag = generate_bipartite_dag(300, seed=5, timestamps="uniform", time_range=(10, 20))
    assert all(10 <= t <= 20 for _l, _r, t in dag.triples)


def test_round_trip_is_byte_identical():
    dag = generate_bipartite_dag(100, seed=11)
    text = "\n".join(dag.lines()) + "\n"
    g = parse_triples(text.splitlines())
    assert g.triples() == list(dag.triples)
    buf = io.StringIO()
    write_graph(g, buf)
    assert buf.getvalue() == text


@pytest.mark.parametrize("n", SIZES)
def test_generated_graph_properties(n):
    g = generate_bipartite_dag(n, seed=3).graph()
    depths = vertex_depths(g)
    assert depths[ROOT] == 0
    assert all(1 <= depths[v] <= g.vertex_count for v in g.ids() if v != ROOT)
    assert sum(in_degrees(g).values()) == 2 * n
