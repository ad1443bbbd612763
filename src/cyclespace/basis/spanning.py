"""Depth-first spanning tree and back-edge classification.

The traversal runs from a single root and only reaches that root's
connected component. Passing the same ``visited`` set to successive calls
walks the remaining components one root at a time.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

from cyclespace.graph.index import IndexEdge, IndexedGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpanningTree:
    """
    Result of one depth-first traversal.

    vertices:   vertex indices of the component, in discovery order
    tree_edges: the component's canonical edges minus back edges and loops
    back_edges: directed back edges, in canonical order (both directions
                of every back-edge pair appear, parallel copies included)
    """

    root: int
    vertices: Tuple[int, ...]
    tree_edges: Tuple[IndexEdge, ...]
    back_edges: Tuple[IndexEdge, ...]

    def undirected_back_edges(self) -> List[IndexEdge]:
        """One entry per back-edge pair; the direction listed first wins."""
        seen: Set[IndexEdge] = set()
        out: List[IndexEdge] = []
        for u, v in self.back_edges:
            key = (u, v) if u <= v else (v, u)
            if key in seen:
                continue
            seen.add(key)
            out.append((u, v))
        return out


def spanning_tree(
    indexed: IndexedGraph,
    root: int,
    *,
    visited: Optional[Set[int]] = None,
    adjacency: Optional[Sequence[Sequence[int]]] = None,
) -> SpanningTree:
    """Split the root's component into tree edges and back edges.

    A neighbor that is unvisited becomes a tree child. A neighbor that is
    visited and is not the current vertex's parent closes a cycle, and both
    directions between the two vertices are classified as back edges.
    The root is its own parent marker.
    """
    if not 0 <= root < indexed.n:
        raise IndexError(f"root {root} out of range for {indexed.n} vertices")

    adj = indexed.adjacency() if adjacency is None else adjacency
    if visited is None:
        visited = set()

    visited.add(root)
    order: List[int] = [root]
    back: Set[IndexEdge] = set()

    # Frame: (vertex, parent, iterator over the vertex's neighbors)
    stack = [(root, root, iter(adj[root]))]
    while stack:
        current, parent, neighbors = stack[-1]
        for nbr in neighbors:
            if nbr not in visited:
                visited.add(nbr)
                order.append(nbr)
                stack.append((nbr, current, iter(adj[nbr])))
                break
            if nbr != parent:
                back.add((current, nbr))
                back.add((nbr, current))
        else:
            stack.pop()

    component = set(order)
    tree_edges: List[IndexEdge] = []
    back_edges: List[IndexEdge] = []
    for e in indexed.edges:
        u, v = e
        if u not in component or u == v:
            continue
        if e in back:
            back_edges.append(e)
        else:
            tree_edges.append(e)

    logger.debug(
        "spanning tree from %s: %d vertices, %d tree edges, %d back edges",
        indexed.vertices[root],
        len(order),
        len(tree_edges),
        len(back_edges),
    )
    return SpanningTree(
        root=root,
        vertices=tuple(order),
        tree_edges=tuple(tree_edges),
        back_edges=tuple(back_edges),
    )
