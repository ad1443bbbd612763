from __future__ import annotations

import networkx as nx

from cyclespace.exceptions import InvalidArgumentError
from cyclespace.graph.model import Graph


def graph_to_nx(graph: Graph) -> nx.Graph:
    """
    Convert a Graph into a simple undirected NetworkX Graph.

    Nodes are coordinate tuples carrying a ``label`` attribute; the two
    directions of an edge collapse into one NetworkX edge.
    """
    G = nx.Graph()
    for v in graph.vertices:
        G.add_node(v.coord, label=v.label)
    for e in graph.edges:
        G.add_edge(e.source.coord, e.destination.coord)
    return G


def graph_from_nx(G: nx.Graph) -> Graph:
    """
    Build a Graph from a NetworkX graph whose nodes are (x, y) int pairs.

    Nodes are added in NetworkX node order (so isolated nodes survive), then
    every edge becomes a bidirectional edge in NetworkX edge order.
    """
    if G.is_directed():
        raise InvalidArgumentError("graph_from_nx expects an undirected NetworkX graph")
    graph = Graph()
    for node in G.nodes():
        graph.add_vertex(node)
    for u, v in G.edges():
        graph.add_bidirectional_edge(u, v)
    return graph
