from __future__ import annotations

from collections import defaultdict
from typing import Hashable, Iterable, List, Set, Tuple, TypeVar

from cyclespace.graph.model import Edge, Vertex

N = TypeVar("N", bound=Hashable)


def connected_components_pairs(
    pairs: Iterable[Tuple[N, N]],
    vertices: Iterable[N] | None = None,
) -> List[Set[N]]:
    """Connected components of an undirected pair list.

    Direction is ignored. Components are listed in order of their first
    vertex, taken from *vertices* when given (isolated vertices then form
    singleton components), otherwise from the pairs.
    """
    adj: dict = defaultdict(set)
    order: List[N] = []
    seen: Set[N] = set()

    def note(x: N) -> None:
        if x not in seen:
            seen.add(x)
            order.append(x)

    if vertices is not None:
        for x in vertices:
            note(x)
    for u, v in pairs:
        adj[u].add(v)
        adj[v].add(u)
        note(u)
        note(v)

    assigned: Set[N] = set()
    components: List[Set[N]] = []
    for start in order:
        if start in assigned:
            continue
        comp: Set[N] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node in comp:
                continue
            comp.add(node)
            for nbr in adj[node]:
                if nbr not in comp:
                    stack.append(nbr)
        components.append(comp)
        assigned |= comp

    return components


def connected_components_edges(
    edges: Iterable[Edge],
    vertices: Iterable[Vertex] | None = None,
) -> List[Set[Vertex]]:
    """Connected components of a directed-edge list, as vertex sets."""
    return connected_components_pairs(((e.source, e.destination) for e in edges), vertices)


def is_connected_edges(
    edges: Iterable[Edge],
    vertices: Iterable[Vertex] | None = None,
) -> bool:
    """Check whether an edge list forms a connected graph.

    Semantics for degenerate cases:
      - No edges, no vertices -> True  (vacuously connected)
      - No edges, one vertex  -> True
      - No edges, two or more vertices -> False
    """
    return len(connected_components_edges(edges, vertices)) <= 1
