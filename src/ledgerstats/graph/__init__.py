from .store import ROOT, Triple, Vertex, Graph, build_graph
from .validate import (
    to_networkx,
    is_connected_acyclic,
    is_bipartite,
    two_colouring,
    check_graph,
)

__all__ = [
    "ROOT",
    "Triple",
    "Vertex",
    "Graph",
    "build_graph",
    "to_networkx",
    "is_connected_acyclic",
    "is_bipartite",
    "two_colouring",
    "check_graph",
]
