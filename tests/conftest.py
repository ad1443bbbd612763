"""Shared sample graphs."""
import pytest

from cyclespace.graph.model import Graph


def square_graph() -> Graph:
    g = Graph()
    g.add_bidirectional_edge((0, 0), (0, 1))
    g.add_bidirectional_edge((0, 1), (3, 1))
    g.add_bidirectional_edge((3, 1), (3, 0))
    g.add_bidirectional_edge((3, 0), (0, 0))
    return g


def two_squares_graph() -> Graph:
    g = square_graph()
    g.add_bidirectional_edge((3, 1), (6, 1))
    g.add_bidirectional_edge((6, 1), (6, 0))
    g.add_bidirectional_edge((6, 0), (3, 0))
    return g


def grid_graph() -> Graph:
    """3x3 lattice: 9 vertices, 12 undirected edges, 4 unit squares."""
    g = Graph()
    g.add_bidirectional_edge((0, 0), (0, 1))
    g.add_bidirectional_edge((0, 1), (0, 2))
    g.add_bidirectional_edge((0, 1), (1, 1))
    g.add_bidirectional_edge((0, 2), (1, 2))
    g.add_bidirectional_edge((1, 2), (1, 1))
    g.add_bidirectional_edge((1, 1), (1, 0))
    g.add_bidirectional_edge((1, 0), (0, 0))
    g.add_bidirectional_edge((1, 2), (2, 2))
    g.add_bidirectional_edge((2, 2), (2, 1))
    g.add_bidirectional_edge((2, 1), (1, 1))
    g.add_bidirectional_edge((2, 1), (2, 0))
    g.add_bidirectional_edge((2, 0), (1, 0))
    return g


def triangle(g: Graph, a, b, c) -> Graph:
    g.add_bidirectional_edge(a, b)
    g.add_bidirectional_edge(b, c)
    g.add_bidirectional_edge(c, a)
    return g


@pytest.fixture
def square() -> Graph:
    return square_graph()


@pytest.fixture
def two_squares() -> Graph:
    return two_squares_graph()


@pytest.fixture
def grid() -> Graph:
    return grid_graph()


@pytest.fixture
def k4() -> Graph:
    g = Graph()
    pts = [(0, 0), (1, 0), (1, 1), (0, 1)]
    for i in range(4):
        for j in range(i + 1, 4):
            g.add_bidirectional_edge(pts[i], pts[j])
    return g


@pytest.fixture
def bowtie() -> Graph:
    """Two triangles sharing the vertex (0,0)."""
    g = triangle(Graph(), (0, 0), (1, 1), (1, -1))
    return triangle(g, (0, 0), (-1, 1), (-1, -1))


@pytest.fixture
def disjoint_triangles() -> Graph:
    g = triangle(Graph(), (0, 0), (1, 0), (0, 1))
    return triangle(g, (10, 10), (11, 10), (10, 11))
