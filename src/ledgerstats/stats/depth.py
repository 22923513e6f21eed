"""Depth of every vertex: breadth-first distance from the root over references."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from ledgerstats.errors import MalformedInput
from ledgerstats.graph.store import ROOT, Graph


@dataclass(frozen=True)
class DepthStats:
    """
    average_depth:         mean depth over all vertices, root included
    average_txs_per_depth: vertex count / number of distinct depths
    """

    average_depth: float
    average_txs_per_depth: float


def vertex_depths(graph: Graph) -> Dict[int, int]:
    """
    Level-order traversal of the reverse adjacency starting at the root.

    Each level is exhausted before the next is started, so the first level
    at which a vertex is seen is its shortest distance. Raises MalformedInput
    if any vertex is never reached.
    """
    depth: Dict[int, int] = {ROOT: 0}
    frontier: List[int] = [ROOT]
    level = 0
    while frontier:
        level += 1
        nxt: List[int] = []
        for u in frontier:
            for w in graph.references(u):
                if w not in depth:
                    depth[w] = level
                    nxt.append(w)
        frontier = nxt

    if len(depth) != graph.vertex_count:
        missing = [v for v in graph.ids() if v not in depth]
        raise MalformedInput(
            f"{len(missing)} vertices unreachable from the root (first: {missing[0]})"
        )
    return depth


def depth_counts(depths: Dict[int, int]) -> Dict[int, int]:
    """depth -> number of vertices at that depth."""
    counts: Dict[int, int] = {}
    for d in depths.values():
        counts[d] = counts.get(d, 0) + 1
    return dict(sorted(counts.items()))


def depth_stats(graph: Graph) -> DepthStats:
    depths = vertex_depths(graph)
    n = graph.vertex_count
    # iterate in construction order so the float sum is reproducible
    total = sum(depths[v] for v in graph.ids())
    distinct = len(depth_counts(depths))
    return DepthStats(
        average_depth=total / n,
        average_txs_per_depth=n / distinct,
    )
