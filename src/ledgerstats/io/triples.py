from __future__ import annotations

import logging
from typing import IO, Iterable, Iterator, List, Sequence, Tuple

from ledgerstats.errors import IoFailure, MalformedInput
from ledgerstats.graph.store import Graph, Triple, build_graph

logger = logging.getLogger(__name__)

_FIELDS = ("left", "right", "timestamp")


def _parse_int(token: str, what: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise MalformedInput(f"invalid {what}: {token!r}", line=lineno) from None


def parse_triple(line: str, lineno: int = 0) -> Triple:
    """
    Parse one 'LEFT RIGHT TIMESTAMP' record.

    Fields are whitespace-separated; anything after the third field is an error.
    """
    tokens = line.split()
    values: List[int] = []
    for i, what in enumerate(_FIELDS):
        if i >= len(tokens):
            raise MalformedInput(f"missing {what}", line=lineno)
        values.append(_parse_int(tokens[i], what, lineno))
    if len(tokens) > 3:
        raise MalformedInput(f"unexpected trailing data: {' '.join(tokens[3:])!r}", line=lineno)
    left, right, ts = values
    return (left, right, ts)


def parse_records(lines: Iterable[str]) -> Tuple[int, List[Triple]]:
    """
    Split the text grammar into (N, triples) without building the graph.

      N
      LEFT RIGHT TIMESTAMP   (N times)

    Blank lines are skipped. Raises MalformedInput on a missing/invalid count
    or more/fewer records than declared.
    """
    n: int | None = None
    triples: List[Triple] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if n is None:
            n = _parse_int(line, "number of transactions", lineno)
            if n < 0:
                raise MalformedInput(f"invalid number of transactions: {n}", line=lineno)
            continue
        if len(triples) >= n:
            raise MalformedInput(f"too many transactions (declared {n})", line=lineno)
        triples.append(parse_triple(line, lineno))

    if n is None:
        raise MalformedInput("missing number of transactions")
    if len(triples) < n:
        raise MalformedInput(f"too few transactions: declared {n}, got {len(triples)}")
    return n, triples


def parse_triples(lines: Iterable[str]) -> Graph:
    """Parse the text grammar into a Graph."""
    n, triples = parse_records(lines)
    return build_graph(n, triples)


def read_graph(path: str) -> Graph:
    """
    Load a Graph from a file.

    IoFailure if the file cannot be opened or read; MalformedInput for a
    line that is not ASCII text.
    """
    try:
        with open(path, "rb") as fh:
            raw = fh.read()
    except OSError as e:
        raise IoFailure(str(path), str(e)) from e

    lines: List[str] = []
    for lineno, chunk in enumerate(raw.splitlines(), start=1):
        try:
            lines.append(chunk.decode("ascii"))
        except UnicodeDecodeError as e:
            raise MalformedInput(f"non-ASCII byte at column {e.start + 1}", line=lineno) from None
    logger.info("read %d lines from %s", len(lines), path)
    return parse_triples(lines)


def format_triples(n: int, triples: Sequence[Triple]) -> Iterator[str]:
    """Yield the text grammar lines (without newlines)."""
    yield str(n)
    for left, right, ts in triples:
        yield f"{left} {right} {ts}"


def write_graph(graph: Graph, fh: IO[str]) -> None:
    """Write a Graph back in the same grammar it was read from."""
    for line in format_triples(graph.n_transactions, graph.triples()):
        fh.write(line + "\n")
