"""
ledgerstats: depth, reference and timestamp statistics for two-parent ledger
DAGs, plus a random bipartite DAG generator.
"""

from .errors import LedgerStatsError, MalformedInput, CyclicGraph, UnconnectedGraph, IoFailure
from .graph.store import ROOT, Vertex, Graph, build_graph
from .graph.validate import to_networkx, is_connected_acyclic, is_bipartite, check_graph
from .io.triples import parse_triples, read_graph, format_triples, write_graph
from .stats.depth import DepthStats, vertex_depths, depth_stats
from .stats.degree import DegreeStats, in_degrees, degree_stats
from .stats.temporal import TemporalStats, temporal_stats
from .stats.report import Report, compute_report
from .generate.bipartite import GeneratedDag, generate_bipartite_dag
from .viz.draw import depth_layout, draw_dag

__all__ = [
    # Errors
    "LedgerStatsError",
    "MalformedInput",
    "CyclicGraph",
    "UnconnectedGraph",
    "IoFailure",
    # Graph
    "ROOT",
    "Vertex",
    "Graph",
    "build_graph",
    "to_networkx",
    "is_connected_acyclic",
    "is_bipartite",
    "check_graph",
    # IO
    "parse_triples",
    "read_graph",
    "format_triples",
    "write_graph",
    # Stats
    "DepthStats",
    "vertex_depths",
    "depth_stats",
    "DegreeStats",
    "in_degrees",
    "degree_stats",
    "TemporalStats",
    "temporal_stats",
    "Report",
    "compute_report",
    # Generator
    "GeneratedDag",
    "generate_bipartite_dag",
    # Viz
    "depth_layout",
    "draw_dag",
]
