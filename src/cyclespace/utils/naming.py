from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Set

from cyclespace.graph.model import Graph, Vertex
from cyclespace.utils.connectivity import connected_components_pairs


def _undirected_degrees(graph: Graph) -> Dict[Vertex, int]:
    adj: Dict[Vertex, Set[Vertex]] = defaultdict(set)
    for u, v in graph.undirected_edges():
        adj[u].add(v)
        adj[v].add(u)
    return {v: len(adj[v]) for v in graph.vertices}


def format_edges(graph: Graph) -> str:
    """Edges as ``[src-dest, ...]``, one cycle-space element per line."""
    return "[" + ", ".join(str(e) for e in graph.edges) + "]"


def is_simple_cycle(graph: Graph) -> bool:
    """True iff *graph* is one connected cycle: every vertex has degree 2.

    Degree counts distinct undirected neighbors, so the two directions of
    an edge count once.
    """
    if not graph.vertices:
        return False
    degs = _undirected_degrees(graph)
    if any(d != 2 for d in degs.values()):
        return False
    return len(connected_components_pairs(graph.undirected_edges(), graph.vertices)) == 1


def describe_element(graph: Graph) -> str:
    """Human-readable description of a cycle-space element.

    Returns "C{n}" for a simple cycle, "C{a}+C{b}+..." for a union of
    vertex-disjoint simple cycles (largest first), and
    "Eulerian({n}v,{m}e)" for anything else (cycles sharing a vertex).
    """
    if not graph.edges:
        return "empty"

    pairs = graph.undirected_edges()
    degs = _undirected_degrees(graph)
    n = len(graph.vertices)
    m = len(pairs)

    if all(d == 2 for d in degs.values()):
        comps = connected_components_pairs(pairs, graph.vertices)
        sizes: List[int] = sorted((len(c) for c in comps), reverse=True)
        return "+".join(f"C{s}" for s in sizes)

    return f"Eulerian({n}v,{m}e)"
