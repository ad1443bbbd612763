"""Cycle basis of a whole graph, component by component."""
from __future__ import annotations

import logging
from typing import List, Set

from cyclespace.basis.fundamental import fundamental_cycles
from cyclespace.basis.spanning import SpanningTree, spanning_tree
from cyclespace.exceptions import InvalidArgumentError
from cyclespace.graph.index import IndexedGraph
from cyclespace.graph.model import Graph, Vertex

logger = logging.getLogger(__name__)


def component_trees(indexed: IndexedGraph, *, all_components: bool = True) -> List[SpanningTree]:
    """Spanning trees rooted at the first unvisited vertex of each component.

    With ``all_components=False`` only the component of the first vertex is
    walked; every other vertex and edge is left out of the result.
    """
    if indexed.n == 0:
        return []

    adj = indexed.adjacency()
    visited: Set[int] = set()
    trees = [spanning_tree(indexed, 0, visited=visited, adjacency=adj)]
    if all_components:
        for root in range(1, indexed.n):
            if root not in visited:
                trees.append(spanning_tree(indexed, root, visited=visited, adjacency=adj))

    logger.debug("%d component(s) walked out of %d vertices", len(trees), indexed.n)
    return trees


def cycle_basis_indexed(indexed: IndexedGraph, *, all_components: bool = True) -> List[List[int]]:
    """Union of per-component fundamental cycles, as vertex-index paths."""
    basis: List[List[int]] = []
    for tree in component_trees(indexed, all_components=all_components):
        basis.extend(fundamental_cycles(indexed, tree))
    return basis


def compute_cycle_basis(graph: Graph, *, all_components: bool = True) -> List[List[Vertex]]:
    """
    Compute a cycle basis of *graph*.

    Each basis cycle is a vertex sequence; the closing edge from the last
    vertex back to the first is implicit. For a connected graph the basis
    has |E| - |V| + 1 cycles, counting each undirected edge once.
    """
    if graph is None:
        raise InvalidArgumentError("Graph cannot be None")
    indexed = IndexedGraph.from_graph(graph)
    return [indexed.vertex_path(c) for c in cycle_basis_indexed(indexed, all_components=all_components)]
