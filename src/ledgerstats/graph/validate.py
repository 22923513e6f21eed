"""Structural checks on a Graph via NetworkX.

These are whole-graph checks the statistics tool runs before analysing an
input (they can be skipped for large inputs): every vertex reaches the
root, no cycles, and whether the reference graph is two-colourable.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

import networkx as nx

from ledgerstats.errors import CyclicGraph, UnconnectedGraph
from .store import ROOT, Graph

logger = logging.getLogger(__name__)


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """
    Convert to a MultiDiGraph with edges v -> left(v) and v -> right(v).

    A vertex referencing the same neighbour twice gets two parallel edges.
    Node attribute "timestamp" carries the vertex timestamp (None for root).
    """
    G = nx.MultiDiGraph()
    for v in graph.vertices():
        G.add_node(v.id, timestamp=v.timestamp)
    for v in graph.transactions():
        G.add_edge(v.id, v.left, slot="left")
        G.add_edge(v.id, v.right, slot="right")
    return G


def is_connected_acyclic(graph: Graph) -> Optional[bool]:
    """
    None if some vertex cannot reach the root by following its references,
    otherwise True iff the graph has no directed cycle.
    """
    G = to_networkx(graph)
    reaching = nx.ancestors(G, ROOT)
    reaching.add(ROOT)
    if len(reaching) != G.number_of_nodes():
        return None
    return nx.is_directed_acyclic_graph(G)


def two_colouring(graph: Graph) -> Optional[Dict[int, int]]:
    """
    Return vertex -> 0/1 with the root coloured 0, or None if the reference
    graph is not bipartite.
    """
    U = nx.Graph(to_networkx(graph).to_undirected())
    if nx.number_of_selfloops(U) > 0:
        return None
    try:
        colours = nx.bipartite.color(U)
    except nx.NetworkXError:
        return None
    if colours.get(ROOT, 0) == 1:
        colours = {v: 1 - c for v, c in colours.items()}
    return colours


def is_bipartite(graph: Graph) -> bool:
    """True iff no reference joins two vertices of the same colour class."""
    return two_colouring(graph) is not None


def check_graph(graph: Graph) -> None:
    """Raise UnconnectedGraph or CyclicGraph unless the graph is connected and acyclic."""
    res = is_connected_acyclic(graph)
    if res is None:
        raise UnconnectedGraph("graph is unconnected: some vertex cannot reach the root")
    if not res:
        raise CyclicGraph("graph is connected but cyclic")
    logger.info("graph is connected and acyclic")
