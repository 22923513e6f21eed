from __future__ import annotations

from typing import Dict, Optional

import matplotlib.pyplot as plt
import networkx as nx

from ledgerstats.graph.validate import to_networkx
from ledgerstats.graph.store import Graph
from ledgerstats.stats.depth import vertex_depths

_CLASS_COLOURS = ("tab:red", "tab:blue")


def depth_layout(graph: Graph) -> Dict[int, tuple]:
    """
    Place vertices in horizontal bands by depth, root on top.
    """
    depths = vertex_depths(graph)
    H = nx.Graph()
    for v in graph.ids():
        H.add_node(v, layer=depths[v])
    pos = nx.multipartite_layout(H, subset_key="layer", align="horizontal")
    # multipartite_layout puts layer 0 at the bottom
    return {v: (x, -y) for v, (x, y) in pos.items()}


def draw_dag(
    graph: Graph,
    *,
    classes: Optional[Dict[int, int]] = None,
    ax=None,
    node_size: int = 140,
    edge_width: float = 1.0,
    max_nodes_to_draw: int = 600,
    save_path: str | None = None,
):
    """
    Draw the ledger DAG layered by depth.

    If classes is given (vertex -> 0/1, e.g. GeneratedDag.classes), vertices
    are coloured by bipartite class. If save_path is set the figure is saved
    as PNG and closed; otherwise it is returned open.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure

    ax.set_title(f"|V|={graph.vertex_count}  |E|={2 * graph.n_transactions}")
    ax.set_axis_off()

    if graph.vertex_count <= max_nodes_to_draw:
        G = nx.DiGraph(to_networkx(graph))
        pos = depth_layout(graph)
        if classes is not None:
            node_color = [_CLASS_COLOURS[classes.get(v, 0)] for v in G.nodes()]
        else:
            node_color = "tab:gray"
        nx.draw_networkx(
            G,
            pos=pos,
            ax=ax,
            with_labels=graph.vertex_count <= 60,
            node_size=node_size,
            node_color=node_color,
            width=edge_width,
            arrows=True,
        )
    else:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={graph.vertex_count})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )

    if save_path:
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    return fig
