from .model import Coord, Vertex, Edge, Graph
from .index import IndexEdge, IndexedGraph, adjacency_from_edges

__all__ = [
    "Coord",
    "Vertex",
    "Edge",
    "Graph",
    "IndexEdge",
    "IndexedGraph",
    "adjacency_from_edges",
]
