from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import default_processes, setup_logging
from .errors import CyclicGraph, IoFailure, MalformedInput, UnconnectedGraph
from .generate.bipartite import TIMESTAMP_STRATEGIES, generate_bipartite_dag
from .graph.validate import check_graph, is_bipartite
from .io.triples import read_graph
from .stats.report import compute_report

logger = logging.getLogger("ledgerstats")

EXIT_OK = 0
EXIT_IO = 1
EXIT_MALFORMED = 2
EXIT_CYCLIC = 3
EXIT_UNCONNECTED = 4


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return value


def stats_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledgerstats",
        description="Depth, reference and timestamp statistics for a ledger DAG file",
    )
    parser.add_argument("input", help="Input file (N, then N lines of 'LEFT RIGHT TIMESTAMP')")
    parser.add_argument(
        "-d", "--no-validation", action="store_true",
        help="Skip the (slow) connectivity/acyclicity/bipartite checks",
    )
    parser.add_argument(
        "-j", "--jobs", type=_positive_int, default=None,
        help="Run the analyzers on this many processes (default: $LEDGERSTATS_PROCESSES or 1)",
    )
    parser.add_argument(
        "--include-root-timestamp", action="store_true",
        help="Count the root (timestamp 0) in the timestamp statistics",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More log output (repeatable)")
    return parser


def stats_main(argv: Optional[List[str]] = None) -> int:
    args = stats_parser().parse_args(argv)
    setup_logging(args.verbose)
    logger.info("input file = %s", args.input)

    try:
        graph = read_graph(args.input)
        logger.info("loaded %d transactions", graph.n_transactions)
        for tx in graph.transactions():
            logger.debug("  %s", tx)

        if not args.no_validation:
            check_graph(graph)
            if is_bipartite(graph):
                logger.info("graph is bipartite")
            else:
                logger.warning("graph is not bipartite, this should not be a problem")

        processes = args.jobs if args.jobs is not None else default_processes()
        report = compute_report(
            graph,
            processes=processes,
            include_root_timestamp=args.include_root_timestamp,
        )
    except IoFailure as e:
        logger.error("%s", e)
        return EXIT_IO
    except CyclicGraph as e:
        logger.error("%s: %s, this is not supported", args.input, e)
        return EXIT_CYCLIC
    except UnconnectedGraph as e:
        logger.error("%s: %s, this is not supported", args.input, e)
        return EXIT_UNCONNECTED
    except MalformedInput as e:
        logger.error("error reading graph from %r: %s", args.input, e)
        return EXIT_MALFORMED

    print(report)
    return EXIT_OK


def generate_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bpdaggen", description="Generate random bipartite DAGs")
    parser.add_argument("n_vertices", type=_positive_int, help="Number of (non-root) vertices")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--timestamps", choices=TIMESTAMP_STRATEGIES, default="causal",
        help="Timestamp strategy (default: causal)",
    )
    parser.add_argument("--time-min", type=int, default=0, help="Lower bound for --timestamps uniform")
    parser.add_argument("--time-max", type=int, default=100, help="Upper bound for --timestamps uniform")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More log output (repeatable)")
    return parser


def generate_main(argv: Optional[List[str]] = None) -> int:
    parser = generate_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.time_min > args.time_max:
        parser.error("--time-min must not exceed --time-max")

    dag = generate_bipartite_dag(
        args.n_vertices,
        seed=args.seed,
        timestamps=args.timestamps,
        time_range=(args.time_min, args.time_max),
    )
    out = sys.stdout
    for line in dag.lines():
        out.write(line + "\n")
    return EXIT_OK


def main() -> None:
    sys.exit(stats_main())


def main_generate() -> None:
    sys.exit(generate_main())


if __name__ == "__main__":
    main()
