from __future__ import annotations

import math
from typing import Sequence

import matplotlib.pyplot as plt
import networkx as nx

from cyclespace.graph.model import Graph
from cyclespace.io.nxgraph import graph_to_nx
from cyclespace.utils.naming import describe_element


def coordinate_layout(graph: Graph) -> dict:
    """Vertex coordinates used directly as drawing positions."""
    return {v.coord: (float(v.x), float(v.y)) for v in graph.vertices}


def draw_cycle_space(
    graph: Graph,
    cycles: Sequence[Graph],
    *,
    columns: int = 4,
    node_size: int = 60,
    edge_width: float = 1.0,
    highlight_width: float = 3.0,
    highlight_color: str = "tab:red",
    max_panels: int = 64,
    save_path: str | None = None,
) -> int:
    """
    Draw one panel per cycle-space element, each over the full graph.

    The base graph is drawn in light grey and the element's edges on top.
    Only the first *max_panels* elements are drawn. If save_path is set the
    figure is written there, otherwise it is shown.

    Returns the number of panels drawn.
    """
    shown = list(cycles[:max_panels])
    if not shown:
        return 0

    G = graph_to_nx(graph)
    pos = coordinate_layout(graph)

    ncols = max(1, min(columns, len(shown)))
    nrows = math.ceil(len(shown) / ncols)
    fig, axes = plt.subplots(nrows, ncols, figsize=(3 * ncols, 3 * nrows), squeeze=False)

    for ax in axes.flat:
        ax.set_axis_off()

    for i, element in enumerate(shown):
        ax = axes.flat[i]
        H = graph_to_nx(element)
        ax.set_title(f"#{i + 1} {describe_element(element)}", fontsize=9)
        nx.draw_networkx(
            G,
            pos=pos,
            ax=ax,
            with_labels=False,
            node_size=node_size,
            node_color="lightgrey",
            edge_color="lightgrey",
            width=edge_width,
        )
        nx.draw_networkx_edges(
            H,
            pos=pos,
            ax=ax,
            edge_color=highlight_color,
            width=highlight_width,
        )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()

    return len(shown)
