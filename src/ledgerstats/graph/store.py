"""Immutable store for two-parent ledger DAGs.

Vertex 1 is the implicit root. Non-root vertices are numbered 2..N+1 in
declaration order, and each references two earlier vertices (``left`` and
``right``). The reverse adjacency (who references whom) is derived once,
after all vertices are in place.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ledgerstats.errors import MalformedInput

logger = logging.getLogger(__name__)

ROOT = 1

Triple = Tuple[int, int, int]


@dataclass(frozen=True)
class Vertex:
    """
    One vertex of the ledger.

    id:        identifier, ROOT for the synthesized root
    left:      first referenced vertex (None for the root)
    right:     second referenced vertex (None for the root)
    timestamp: opaque ordered integer (None for the root)
    """

    id: int
    left: Optional[int]
    right: Optional[int]
    timestamp: Optional[int]

    @property
    def is_root(self) -> bool:
        return self.id == ROOT

    def triple(self) -> Triple:
        if self.is_root:
            raise ValueError("the root vertex has no triple")
        return (self.left, self.right, self.timestamp)

    def __str__(self) -> str:
        if self.is_root:
            return "Root"
        return f"Tx<{self.id}, {self.left}, {self.right}, {self.timestamp}>"


def _check_reference(ref: object, vid: int, slot: str) -> int:
    if not isinstance(ref, int) or isinstance(ref, bool):
        raise MalformedInput(f"vertex {vid}: {slot} reference {ref!r} is not an integer")
    if ref < 1:
        raise MalformedInput(f"vertex {vid}: {slot} reference {ref} is below 1")
    if ref >= vid:
        raise MalformedInput(
            f"vertex {vid}: {slot} reference {ref} is not an earlier vertex (max={vid - 1})"
        )
    return ref


class Graph:
    """
    Read-only ledger graph.

    Build with build_graph(); the constructor expects an already-validated
    list of vertices starting with the root.
    """

    __slots__ = ("_vertices", "_reverse")

    def __init__(self, vertices: Sequence[Vertex]):
        self._vertices: Tuple[Vertex, ...] = tuple(vertices)
        if not self._vertices or not self._vertices[0].is_root:
            raise MalformedInput("graph must start with the root vertex")

        for expected, v in enumerate(self._vertices, start=1):
            if v.id != expected:
                raise MalformedInput(f"vertex {v.id} out of order (expected {expected})")

        reverse: Dict[int, List[int]] = {v.id: [] for v in self._vertices}
        for v in self._vertices[1:]:
            if v.left not in reverse or v.right not in reverse:
                raise MalformedInput(f"vertex {v.id} references an unknown vertex")
            # two entries when left == right: each slot is a separate reference
            reverse[v.left].append(v.id)
            reverse[v.right].append(v.id)
        self._reverse: Dict[int, Tuple[int, ...]] = {k: tuple(refs) for k, refs in reverse.items()}

    def __len__(self) -> int:
        return len(self._vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._vertices == other._vertices

    def __hash__(self) -> int:
        return hash(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(n_transactions={self.n_transactions})"

    def __getstate__(self):
        return self._vertices

    def __setstate__(self, state) -> None:
        self.__init__(state)

    @property
    def vertex_count(self) -> int:
        """Number of vertices including the root (N+1)."""
        return len(self._vertices)

    @property
    def n_transactions(self) -> int:
        """Number of non-root vertices (N)."""
        return len(self._vertices) - 1

    def _vertex(self, vid: int) -> Vertex:
        if not 1 <= vid <= len(self._vertices):
            raise KeyError(vid)
        return self._vertices[vid - 1]

    def __contains__(self, vid: object) -> bool:
        return isinstance(vid, int) and 1 <= vid <= len(self._vertices)

    def vertex(self, vid: int) -> Vertex:
        return self._vertex(vid)

    def timestamp(self, vid: int) -> Optional[int]:
        """Timestamp of a vertex; None for the root."""
        return self._vertex(vid).timestamp

    def neighbours(self, vid: int) -> Tuple[int, int]:
        """Outgoing (left, right) pair of a non-root vertex."""
        v = self._vertex(vid)
        if v.is_root:
            raise ValueError("the root vertex has no outgoing edges")
        return (v.left, v.right)

    def references(self, vid: int) -> Tuple[int, ...]:
        """Vertices referencing vid, one entry per reference (may be empty)."""
        if vid not in self._reverse:
            raise KeyError(vid)
        return self._reverse[vid]

    def ids(self) -> range:
        """All identifiers in construction order, root first."""
        return range(1, len(self._vertices) + 1)

    def vertices(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def transactions(self) -> Iterator[Vertex]:
        """Non-root vertices in declaration order."""
        return iter(self._vertices[1:])

    def triples(self) -> List[Triple]:
        """The (left, right, timestamp) records this graph was built from."""
        return [v.triple() for v in self._vertices[1:]]


def build_graph(n: int, triples: Sequence[Triple]) -> Graph:
    """
    Build a Graph from the declared count n and n triples.

    The i-th triple (0-based) describes vertex i+2. Raises MalformedInput on
    a count mismatch, a reference outside [1, id), or a non-integer field.
    """
    if not isinstance(n, int) or n < 0:
        raise MalformedInput(f"invalid number of transactions: {n!r}")
    if len(triples) != n:
        kind = "too many" if len(triples) > n else "too few"
        raise MalformedInput(f"{kind} transactions: declared {n}, got {len(triples)}")

    vertices: List[Vertex] = [Vertex(ROOT, None, None, None)]
    for vid, triple in enumerate(triples, start=2):
        if len(triple) != 3:
            raise MalformedInput(f"vertex {vid}: expected (left, right, timestamp), got {triple!r}")
        left, right, ts = triple
        left = _check_reference(left, vid, "left")
        right = _check_reference(right, vid, "right")
        if not isinstance(ts, int) or isinstance(ts, bool):
            raise MalformedInput(f"vertex {vid}: timestamp {ts!r} is not an integer")
        vertices.append(Vertex(vid, left, right, ts))

    graph = Graph(vertices)
    logger.debug("built graph with %d transactions", graph.n_transactions)
    return graph
