"""Timestamp aggregates.

The root carries no timestamp in the text grammar, so it is left out of
both averages unless include_root is set, in which case it takes
root_timestamp (0 by default, the value the generator assumes for it).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ledgerstats.graph.store import Graph


@dataclass(frozen=True)
class TemporalStats:
    """
    average_txs_per_time_unit: population / (max - min + 1)
    average_txs_per_timestamp: population / number of distinct timestamps
    """

    average_txs_per_time_unit: float
    average_txs_per_timestamp: float


def timestamps(graph: Graph, *, include_root: bool = False, root_timestamp: int = 0) -> List[int]:
    """Timestamps in construction order."""
    out: List[int] = [root_timestamp] if include_root else []
    out.extend(v.timestamp for v in graph.transactions())
    return out


def temporal_stats(
    graph: Graph,
    *,
    include_root: bool = False,
    root_timestamp: int = 0,
) -> TemporalStats:
    ts = timestamps(graph, include_root=include_root, root_timestamp=root_timestamp)
    if not ts:
        # root-only graph: a single vertex in a single bucket
        n = float(graph.vertex_count)
        return TemporalStats(average_txs_per_time_unit=n, average_txs_per_timestamp=n)

    span = max(ts) - min(ts) + 1
    return TemporalStats(
        average_txs_per_time_unit=len(ts) / span,
        average_txs_per_timestamp=len(ts) / len(set(ts)),
    )
