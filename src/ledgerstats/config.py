from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


LEDGERSTATS_LOG = os.environ.get("LEDGERSTATS_LOG", "WARNING")
LEDGERSTATS_PROCESSES = os.environ.get("LEDGERSTATS_PROCESSES", "1")

LOG_FORMAT = "[%(levelname)s %(name)s] %(message)s"


def log_level(verbose: int = 0) -> int:
    """Resolve the logging level from LEDGERSTATS_LOG and -v flags.

    Each -v lowers the threshold one step below the environment level
    (WARNING -> INFO -> DEBUG). Unknown level names fall back to WARNING.
    """
    base = logging.getLevelName(LEDGERSTATS_LOG.strip().upper())
    if not isinstance(base, int):
        base = logging.WARNING
    return max(logging.DEBUG, base - 10 * verbose)


def default_processes() -> int:
    """Worker count for the statistics report (at least 1)."""
    try:
        n = int(LEDGERSTATS_PROCESSES)
    except ValueError:
        logger.warning("ignoring LEDGERSTATS_PROCESSES=%r: not an integer", LEDGERSTATS_PROCESSES)
        return 1
    if n < 1:
        logger.warning("ignoring LEDGERSTATS_PROCESSES=%r: must be at least 1", LEDGERSTATS_PROCESSES)
        return 1
    return n


def setup_logging(verbose: int = 0) -> None:
    """Configure root logging to stderr for the command-line tools."""
    logging.basicConfig(level=log_level(verbose), format=LOG_FORMAT)
