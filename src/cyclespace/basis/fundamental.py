"""Fundamental cycles: one per back edge of a spanning tree."""
from __future__ import annotations

import logging
from itertools import chain
from typing import Iterator, List, Sequence

from cyclespace.basis.spanning import SpanningTree
from cyclespace.exceptions import InvalidStateError
from cyclespace.graph.index import IndexEdge, IndexedGraph

logger = logging.getLogger(__name__)


def fundamental_cycle(
    tree_adjacency: Sequence[Sequence[int]],
    back_edge: IndexEdge,
) -> List[int]:
    """Return the cycle that *back_edge* closes in the tree.

    The back edge is laid over the tree adjacency instead of being inserted
    into it, so the snapshot can be shared between calls. Search starts at
    the back edge's source; the path stack at the first closing neighbor
    (on the path, not the immediate parent) is the cycle.
    """
    u, v = back_edge

    def neighbors(x: int) -> Iterator[int]:
        extra = []
        if x == u:
            extra.append(v)
        if x == v:
            extra.append(u)
        return chain(tree_adjacency[x], extra)

    visited = {u}
    path = [u]
    on_path = {u}
    stack = [(u, u, neighbors(u))]
    while stack:
        current, parent, it = stack[-1]
        for nbr in it:
            if nbr not in visited:
                visited.add(nbr)
                path.append(nbr)
                on_path.add(nbr)
                stack.append((nbr, current, neighbors(nbr)))
                break
            if nbr != parent and nbr in on_path:
                return path[path.index(nbr):]
        else:
            stack.pop()
            on_path.discard(path.pop())

    raise InvalidStateError(f"Back edge {back_edge} does not close a cycle in the spanning tree")


def fundamental_cycles(indexed: IndexedGraph, tree: SpanningTree) -> List[List[int]]:
    """Fundamental cycles of *tree*, in back-edge processing order.

    Each undirected back edge is processed once, from the direction that
    appears first in canonical edge order.
    """
    tree_adj = indexed.adjacency(tree.tree_edges)
    cycles = [fundamental_cycle(tree_adj, be) for be in tree.undirected_back_edges()]
    logger.debug("%d fundamental cycles in component of %s", len(cycles), indexed.vertices[tree.root])
    return cycles
