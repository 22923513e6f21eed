"""Error kinds raised while loading and analysing ledger graphs."""
from __future__ import annotations


class LedgerStatsError(Exception):
    """Base exception for ledgerstats."""


class MalformedInput(LedgerStatsError, ValueError):
    """Input violates the triple grammar or the graph invariants.

    Also raised by the analyzers when a structural problem slips past
    construction (e.g. a vertex unreachable from the root).
    """

    def __init__(self, message: str, *, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class CyclicGraph(MalformedInput):
    """Every vertex reaches the root but some references form a cycle."""


class UnconnectedGraph(MalformedInput):
    """Some vertex cannot reach the root by following its references."""


class IoFailure(LedgerStatsError, OSError):
    """The input file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path!r}: {reason}")
