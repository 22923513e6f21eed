"""Random bipartite two-parent DAGs.

Vertices are coloured RED or BLUE as they are created. The root is RED and
vertex 2 is BLUE, referencing the root twice, so both classes are non-empty
from then on. Every later vertex picks a colour at random and draws both
references uniformly (with replacement) from the vertices already created
in the opposite class. References therefore always point to earlier
vertices and never join two vertices of the same colour.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from ledgerstats.graph.store import ROOT, Graph, Triple, build_graph
from ledgerstats.io.triples import format_triples

logger = logging.getLogger(__name__)

RED = 0
BLUE = 1

TIMESTAMP_STRATEGIES = ("causal", "uniform")

ROOT_TIMESTAMP = 0


@dataclass(frozen=True)
class GeneratedDag:
    """
    n:       number of non-root vertices
    triples: (left, right, timestamp) for vertices 2..n+1
    classes: vertex id -> RED/BLUE, root included
    """

    n: int
    triples: Tuple[Triple, ...]
    classes: Dict[int, int]

    def lines(self) -> Iterator[str]:
        return format_triples(self.n, self.triples)

    def graph(self) -> Graph:
        return build_graph(self.n, list(self.triples))


def _causal_timestamp(rng: random.Random, after: int) -> int:
    lo = after + rng.randint(1, 99)
    hi = lo + rng.randint(1, 99)
    return rng.randint(lo, hi)


def generate_bipartite_dag(
    n: int,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    timestamps: str = "causal",
    time_range: Tuple[int, int] = (0, 100),
) -> GeneratedDag:
    """
    Generate n non-root vertices.

    Parameters
    ----------
    n : int
        Number of non-root vertices, at least 1.
    seed : int, optional
        Seed for a private random.Random (ignored when rng is given).
    rng : random.Random, optional
        Source of randomness.
    timestamps : str
        "causal": each timestamp lands 1..198 units after the later of the
        two referenced vertices (the root counts as ROOT_TIMESTAMP).
        "uniform": independent draws from time_range (inclusive).
    time_range : (int, int)
        Bounds for the "uniform" strategy.
    """
    if n < 1:
        raise ValueError(f"n must be a positive integer, got {n}")
    if timestamps not in TIMESTAMP_STRATEGIES:
        raise ValueError(f"unknown timestamp strategy {timestamps!r}")
    lo_t, hi_t = time_range
    if lo_t > hi_t:
        raise ValueError(f"empty time range {time_range}")
    if rng is None:
        rng = random.Random(seed)

    ts_of: List[int] = [ROOT_TIMESTAMP]  # ts_of[v - 1]
    members: Dict[int, List[int]] = {RED: [ROOT], BLUE: []}
    classes: Dict[int, int] = {ROOT: RED}
    triples: List[Triple] = []

    def draw_ts(left: int, right: int) -> int:
        if timestamps == "uniform":
            return rng.randint(lo_t, hi_t)
        return _causal_timestamp(rng, max(ts_of[left - 1], ts_of[right - 1]))

    # vertex 2 is BLUE so that both classes have a member
    if timestamps == "uniform":
        ts2 = rng.randint(lo_t, hi_t)
    else:
        ts2 = rng.randint(ROOT_TIMESTAMP, ROOT_TIMESTAMP + 99)
    triples.append((ROOT, ROOT, ts2))
    ts_of.append(ts2)
    members[BLUE].append(2)
    classes[2] = BLUE

    for vid in range(3, n + 2):
        colour = RED if rng.random() < 0.5 else BLUE
        pool = members[1 - colour]
        left = pool[rng.randrange(len(pool))]
        right = pool[rng.randrange(len(pool))]
        ts = draw_ts(left, right)
        logger.info(
            "%s vertex %d: left=%d right=%d ts=%d",
            "RED" if colour == RED else "BLUE", vid, left, right, ts,
        )
        triples.append((left, right, ts))
        ts_of.append(ts)
        members[colour].append(vid)
        classes[vid] = colour

    return GeneratedDag(n=n, triples=tuple(triples), classes=classes)
