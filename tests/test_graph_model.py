"""Tests for cyclespace.graph module."""
import pytest

from cyclespace.exceptions import InvalidArgumentError, InvalidStateError
from cyclespace.graph.index import IndexedGraph, adjacency_from_edges
from cyclespace.graph.model import Edge, Graph, Vertex


# --- vertex / edge identity ---

def test_vertex_label_and_str():
    v = Vertex.at((2, 5))
    assert v.label == "Vertex (2,5)"
    assert str(v) == "(2,5)"
    assert (v.x, v.y) == (2, 5)


def test_vertex_identity_ignores_label():
    a = Vertex.at((1, 2))
    b = Vertex((1, 2), "something else")
    assert a == b
    assert hash(a) == hash(b)
    assert Vertex.at((2, 1)) != a


def test_vertex_rejects_non_integer_coords():
    with pytest.raises(InvalidArgumentError):
        Vertex.at((1.5, 2))
    with pytest.raises(ValueError):
        Vertex.at((1, 2, 3))


def test_edge_identity_is_directed():
    a, b = Vertex.at((0, 0)), Vertex.at((0, 1))
    assert Edge(a, b) == Edge(Vertex.at((0, 0)), Vertex.at((0, 1)))
    assert Edge(a, b) != Edge(b, a)
    assert Edge(a, b).reversed() == Edge(b, a)
    assert str(Edge(a, b)) == "(0,0)-(0,1)"


# --- graph construction ---

def test_add_bidirectional_edge_order():
    g = Graph()
    fwd, bwd = g.add_bidirectional_edge((0, 0), (0, 1))
    assert g.edges == [fwd, bwd]
    assert str(fwd) == "(0,0)-(0,1)"
    assert str(bwd) == "(0,1)-(0,0)"
    assert [str(v) for v in g.vertices] == ["(0,0)", "(0,1)"]


def test_vertices_reused_by_coordinate(square):
    assert square.number_of_vertices() == 4
    assert square.number_of_edges() == 8


def test_self_loop_appends_two_edges():
    g = Graph()
    g.add_bidirectional_edge((0, 0), (0, 0))
    assert g.number_of_vertices() == 1
    assert g.number_of_edges() == 2
    assert all(e.is_loop() for e in g.edges)
    assert g.undirected_edges() == []


def test_neighbors(square):
    names = {str(v) for v in square.neighbors(Vertex.at((0, 0)))}
    assert names == {"(0,1)", "(3,0)"}


def test_remove_edge_removes_one_instance():
    g = Graph()
    g.add_bidirectional_edge((0, 0), (0, 1))
    g.add_bidirectional_edge((0, 0), (0, 1))
    e = Edge(Vertex.at((0, 0)), Vertex.at((0, 1)))
    g.remove_edge(e)
    assert g.edges.count(e) == 1
    g.remove_edge(e)
    g.remove_edge(e)
    assert not g.has_edge(e)


def test_copy_is_independent(square):
    c = square.copy()
    c.remove_edge(c.edges[0])
    c.add_vertex((9, 9))
    assert square.number_of_edges() == 8
    assert square.number_of_vertices() == 4
    assert c != square


def test_undirected_edges_dedup(square):
    pairs = square.undirected_edges()
    assert len(pairs) == 4


# --- dense index ---

def test_indexed_graph(square):
    ig = IndexedGraph.from_graph(square)
    assert ig.n == 4
    assert ig.edges[:2] == ((0, 1), (1, 0))
    assert ig.adjacency() == [[1, 3], [0, 2], [1, 3], [2, 0]]
    assert ig.vertex_path([0, 1]) == square.vertices[:2]
    assert ig.to_edge((0, 1)) == square.edges[0]


def test_indexed_graph_dangling_edge():
    a, b = Vertex.at((0, 0)), Vertex.at((1, 0))
    g = Graph(vertices=[a], edges=[Edge(a, b)])
    with pytest.raises(InvalidStateError):
        IndexedGraph.from_graph(g)


def test_adjacency_skips_loops_and_duplicates():
    adj = adjacency_from_edges(2, [(0, 0), (0, 1), (0, 1), (1, 0)])
    assert adj == [[1], [0]]
