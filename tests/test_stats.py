"""Tests for ledgerstats.stats."""
import pytest

from ledgerstats.errors import MalformedInput
from ledgerstats.graph.store import Graph, Vertex, build_graph
from ledgerstats.stats.degree import degree_stats, in_degrees
from ledgerstats.stats.depth import depth_counts, depth_stats, vertex_depths
from ledgerstats.stats.report import compute_report
from ledgerstats.stats.temporal import temporal_stats, timestamps


# --- depth ---

def test_depths_small(small_graph):
    assert vertex_depths(small_graph) == {1: 0, 2: 1, 3: 1, 4: 2}


def test_depth_is_shortest_distance(triangle_graph):
    # 6 references 3 (depth 1) and 5 (depth 2), so it sits at depth 2
    d = vertex_depths(triangle_graph)
    assert d == {1: 0, 2: 1, 3: 1, 4: 2, 5: 2, 6: 2}
    assert depth_counts(d) == {0: 1, 1: 2, 2: 3}


def test_depth_stats_small(small_graph):
    s = depth_stats(small_graph)
    assert s.average_depth == pytest.approx(1.0)
    assert s.average_txs_per_depth == pytest.approx(4 / 3)


def test_depth_stats_triangle(triangle_graph):
    s = depth_stats(triangle_graph)
    assert s.average_depth == pytest.approx(8 / 6)
    assert s.average_txs_per_depth == pytest.approx(2.0)


def test_depth_stats_root_only(root_only):
    s = depth_stats(root_only)
    assert s.average_depth == 0.0
    assert s.average_txs_per_depth == 1.0


def test_unreached_vertex_is_an_error():
    # 2 and 3 only reference each other, so neither hangs off the root
    g = Graph([
        Vertex(1, None, None, None),
        Vertex(2, 3, 3, 120),
        Vertex(3, 2, 2, 130),
    ])
    with pytest.raises(MalformedInput, match="unreachable"):
        vertex_depths(g)


# --- degree ---

def test_in_degrees_small(small_graph):
    assert in_degrees(small_graph) == {1: 3, 2: 2, 3: 1, 4: 0}


def test_degree_stats(small_graph, triangle_graph):
    s = degree_stats(small_graph)
    assert s.total_references == 6
    assert s.average_in_degree == pytest.approx(1.5)

    t = degree_stats(triangle_graph)
    assert t.total_references == 2 * triangle_graph.n_transactions
    assert t.average_in_degree == pytest.approx(10 / 6)


def test_degree_stats_root_only(root_only):
    s = degree_stats(root_only)
    assert s.total_references == 0
    assert s.average_in_degree == 0.0


# --- temporal ---

def test_timestamps_exclude_root_by_default(small_graph):
    assert timestamps(small_graph) == [10, 10, 20]
    assert timestamps(small_graph, include_root=True) == [0, 10, 10, 20]


def test_temporal_small(small_graph):
    s = temporal_stats(small_graph)
    assert s.average_txs_per_timestamp == pytest.approx(1.5)
    assert s.average_txs_per_time_unit == pytest.approx(3 / 11)


def test_temporal_with_root(small_graph):
    s = temporal_stats(small_graph, include_root=True)
    assert s.average_txs_per_timestamp == pytest.approx(4 / 3)
    assert s.average_txs_per_time_unit == pytest.approx(4 / 21)


def test_temporal_triangle(triangle_graph):
    s = temporal_stats(triangle_graph)
    assert s.average_txs_per_timestamp == pytest.approx(1.25)
    assert s.average_txs_per_time_unit == pytest.approx(1.25)


def test_temporal_single_timestamp():
    g = build_graph(3, [(1, 1, 7), (2, 2, 7), (3, 3, 7)])
    s = temporal_stats(g)
    assert s.average_txs_per_timestamp == 3.0
    assert s.average_txs_per_time_unit == 3.0


def test_temporal_root_only(root_only):
    s = temporal_stats(root_only)
    assert s.average_txs_per_time_unit == 1.0
    assert s.average_txs_per_timestamp == 1.0


# --- report ---

def test_report_lines(small_graph):
    r = compute_report(small_graph)
    assert str(r) == (
        "> AVG DAG DEPTH: 1.00\n"
        "> AVG TXS PER DEPTH: 1.33\n"
        "> AVG REF: 1.50\n"
        "> AVG TXS PER TIME UNIT: 0.27\n"
        "> AVG TXS PER TIMESTAMP: 1.50"
    )


def test_report_root_only(root_only):
    r = compute_report(root_only)
    assert r.lines() == [
        "> AVG DAG DEPTH: 0.00",
        "> AVG TXS PER DEPTH: 1.00",
        "> AVG REF: 0.00",
        "> AVG TXS PER TIME UNIT: 1.00",
        "> AVG TXS PER TIMESTAMP: 1.00",
    ]


def test_report_parallel_matches_sequential(triangle_graph):
    seq = compute_report(triangle_graph)
    par = compute_report(triangle_graph, processes=2)
    assert par == seq


def test_report_propagates_analyzer_errors():
    g = Graph([
        Vertex(1, None, None, None),
        Vertex(2, 3, 3, 120),
        Vertex(3, 2, 2, 130),
    ])
    with pytest.raises(MalformedInput):
        compute_report(g)
