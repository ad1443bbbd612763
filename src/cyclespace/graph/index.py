"""Dense integer view of a Graph.

Vertices are numbered 0..n-1 in vertex-list order and every directed edge
becomes an index pair, keeping canonical edge order. Traversals run on
these index arrays instead of scanning Vertex/Edge lists.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from cyclespace.exceptions import InvalidStateError
from cyclespace.graph.model import Edge, Graph, Vertex

IndexEdge = Tuple[int, int]


def adjacency_from_edges(n: int, edges: Sequence[IndexEdge]) -> List[List[int]]:
    """Out-neighbors per vertex, first-seen order, duplicates dropped.

    Self-loops are left out: they never take part in a tree or a cycle.
    """
    adj: List[List[int]] = [[] for _ in range(n)]
    seen: List[set] = [set() for _ in range(n)]
    for u, v in edges:
        if u == v or v in seen[u]:
            continue
        seen[u].add(v)
        adj[u].append(v)
    return adj


@dataclass(frozen=True)
class IndexedGraph:
    """Immutable snapshot of a Graph over dense vertex indices."""

    vertices: Tuple[Vertex, ...]
    edges: Tuple[IndexEdge, ...]
    index: Dict[Vertex, int]

    @classmethod
    def from_graph(cls, graph: Graph) -> "IndexedGraph":
        index: Dict[Vertex, int] = {}
        verts: List[Vertex] = []
        for v in graph.vertices:
            if v not in index:
                index[v] = len(verts)
                verts.append(v)

        edges: List[IndexEdge] = []
        for e in graph.edges:
            try:
                edges.append((index[e.source], index[e.destination]))
            except KeyError:
                raise InvalidStateError(
                    f"Edge {e} references a vertex missing from the graph's vertex list"
                ) from None
        return cls(vertices=tuple(verts), edges=tuple(edges), index=index)

    @property
    def n(self) -> int:
        return len(self.vertices)

    def adjacency(self, edges: Optional[Sequence[IndexEdge]] = None) -> List[List[int]]:
        """Adjacency lists for *edges* (default: all canonical edges)."""
        return adjacency_from_edges(self.n, self.edges if edges is None else edges)

    def vertex_path(self, path: Sequence[int]) -> List[Vertex]:
        return [self.vertices[i] for i in path]

    def to_edge(self, pair: IndexEdge) -> Edge:
        u, v = pair
        return Edge(self.vertices[u], self.vertices[v])
