from .bipartite import (
    RED,
    BLUE,
    TIMESTAMP_STRATEGIES,
    GeneratedDag,
    generate_bipartite_dag,
)

__all__ = [
    "RED",
    "BLUE",
    "TIMESTAMP_STRATEGIES",
    "GeneratedDag",
    "generate_bipartite_dag",
]
