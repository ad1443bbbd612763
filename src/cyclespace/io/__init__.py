from .nxgraph import graph_to_nx, graph_from_nx

__all__ = [
    "graph_to_nx",
    "graph_from_nx",
]
