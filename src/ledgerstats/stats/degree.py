from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ledgerstats.graph.store import Graph


@dataclass(frozen=True)
class DegreeStats:
    average_in_degree: float
    total_references: int


def in_degrees(graph: Graph) -> Dict[int, int]:
    """Number of references into each vertex (0 for a tip)."""
    return {v: len(graph.references(v)) for v in graph.ids()}


def degree_stats(graph: Graph) -> DegreeStats:
    """Mean in-degree over all vertices including the root."""
    degs = in_degrees(graph)
    total = sum(degs.values())
    return DegreeStats(average_in_degree=total / graph.vertex_count, total_references=total)
