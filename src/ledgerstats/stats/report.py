from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from multiprocessing import Pool
from typing import Callable, List

from ledgerstats.graph.store import Graph
from .degree import DegreeStats, degree_stats
from .depth import DepthStats, depth_stats
from .temporal import TemporalStats, temporal_stats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Report:
    depth: DepthStats
    degree: DegreeStats
    temporal: TemporalStats

    def lines(self) -> List[str]:
        return [
            f"> AVG DAG DEPTH: {self.depth.average_depth:.2f}",
            f"> AVG TXS PER DEPTH: {self.depth.average_txs_per_depth:.2f}",
            f"> AVG REF: {self.degree.average_in_degree:.2f}",
            f"> AVG TXS PER TIME UNIT: {self.temporal.average_txs_per_time_unit:.2f}",
            f"> AVG TXS PER TIMESTAMP: {self.temporal.average_txs_per_timestamp:.2f}",
        ]

    def __str__(self) -> str:
        return "\n".join(self.lines())


def _analyzers(include_root_timestamp: bool) -> List[Callable[[Graph], object]]:
    return [
        depth_stats,
        degree_stats,
        partial(temporal_stats, include_root=include_root_timestamp),
    ]


def compute_report(
    graph: Graph,
    *,
    processes: int = 1,
    include_root_timestamp: bool = False,
) -> Report:
    """
    Run the depth, degree and temporal analyzers over one graph.

    The analyzers are independent pure functions of the graph, so with
    processes > 1 they run in a worker pool; the result is the same.
    Any analyzer error propagates and no report is produced.
    """
    fns = _analyzers(include_root_timestamp)
    if processes <= 1:
        results = [fn(graph) for fn in fns]
    else:
        logger.info("running %d analyzers on %d processes", len(fns), processes)
        with Pool(processes=min(processes, len(fns))) as pool:
            pending = [pool.apply_async(fn, (graph,)) for fn in fns]
            results = [p.get() for p in pending]

    depth, degree, temporal = results
    logger.info(
        "depth=%s degree=%s temporal=%s", depth, degree, temporal
    )
    return Report(depth=depth, degree=degree, temporal=temporal)
