"""Tests for spanning trees, back edges and fundamental cycles."""
import networkx as nx
import pytest

from cyclespace.basis.build import component_trees, compute_cycle_basis
from cyclespace.basis.fundamental import fundamental_cycle, fundamental_cycles
from cyclespace.basis.spanning import spanning_tree
from cyclespace.exceptions import InvalidArgumentError, InvalidStateError
from cyclespace.graph.index import IndexedGraph
from cyclespace.graph.model import Graph
from cyclespace.io.nxgraph import graph_from_nx, graph_to_nx


# --- spanning tree ---

def test_spanning_tree_square(square):
    ig = IndexedGraph.from_graph(square)
    tree = spanning_tree(ig, 0)
    assert tree.vertices == (0, 1, 2, 3)
    assert tree.back_edges == ((3, 0), (0, 3))
    assert len(tree.tree_edges) == 6
    assert tree.undirected_back_edges() == [(3, 0)]


def test_spanning_tree_does_not_touch_input(square):
    before = list(square.edges)
    spanning_tree(IndexedGraph.from_graph(square), 0)
    compute_cycle_basis(square)
    assert square.edges == before


def test_spanning_tree_two_squares(two_squares):
    tree = spanning_tree(IndexedGraph.from_graph(two_squares), 0)
    assert len(tree.back_edges) == 4
    assert len(tree.undirected_back_edges()) == 2
    # 7 undirected edges - 2 back edges = 5 tree edges = n - 1
    assert len(tree.tree_edges) == 2 * 5


def test_spanning_tree_self_loop():
    g = Graph()
    g.add_bidirectional_edge((0, 0), (0, 0))
    tree = spanning_tree(IndexedGraph.from_graph(g), 0)
    assert tree.vertices == (0,)
    assert tree.tree_edges == ()
    assert tree.back_edges == ()


def test_spanning_tree_only_reaches_root_component(disjoint_triangles):
    ig = IndexedGraph.from_graph(disjoint_triangles)
    visited = set()
    first = spanning_tree(ig, 0, visited=visited)
    assert set(first.vertices) == {0, 1, 2}
    assert visited == {0, 1, 2}
    second = spanning_tree(ig, 3, visited=visited)
    assert set(second.vertices) == {3, 4, 5}
    assert len(first.undirected_back_edges()) == 1
    assert len(second.undirected_back_edges()) == 1


def test_spanning_tree_bad_root(square):
    with pytest.raises(IndexError):
        spanning_tree(IndexedGraph.from_graph(square), 4)


def test_component_trees(disjoint_triangles):
    ig = IndexedGraph.from_graph(disjoint_triangles)
    assert len(component_trees(ig)) == 2
    assert len(component_trees(ig, all_components=False)) == 1
    assert component_trees(IndexedGraph.from_graph(Graph())) == []


# --- fundamental cycles ---

def test_fundamental_cycle_path_plus_back_edge():
    tree_adj = [[1], [0, 2], [1]]
    assert fundamental_cycle(tree_adj, (2, 0)) == [2, 1, 0]


def test_fundamental_cycle_without_cycle():
    with pytest.raises(InvalidStateError):
        fundamental_cycle([[], [], []], (0, 1))


def test_fundamental_cycles_square(square):
    ig = IndexedGraph.from_graph(square)
    cycles = fundamental_cycles(ig, spanning_tree(ig, 0))
    assert cycles == [[3, 2, 1, 0]]


def test_fundamental_cycle_ignores_pendant_branches(square):
    square.add_bidirectional_edge((0, 1), (-5, 1))
    square.add_bidirectional_edge((-5, 1), (-5, 7))
    basis = compute_cycle_basis(square)
    assert len(basis) == 1
    assert len(basis[0]) == 4


# --- whole-graph basis ---

def test_basis_size_grid(grid):
    assert len(compute_cycle_basis(grid)) == 4


def test_basis_cycles_are_closed_walks(grid):
    pairs = {frozenset((e.source, e.destination)) for e in grid.edges}
    for cycle in compute_cycle_basis(grid):
        assert len(set(cycle)) == len(cycle) >= 3
        closed = cycle + cycle[:1]
        for a, b in zip(closed, closed[1:]):
            assert frozenset((a, b)) in pairs


def test_basis_all_components(disjoint_triangles):
    assert len(compute_cycle_basis(disjoint_triangles)) == 2
    assert len(compute_cycle_basis(disjoint_triangles, all_components=False)) == 1


def test_basis_isolated_first_vertex(square):
    g = Graph()
    g.add_vertex((50, 50))
    for e in square.edges[::2]:
        g.add_bidirectional_edge(e.source, e.destination)
    assert len(compute_cycle_basis(g, all_components=False)) == 0
    assert len(compute_cycle_basis(g)) == 1


def test_basis_none():
    with pytest.raises(InvalidArgumentError):
        compute_cycle_basis(None)


@pytest.mark.parametrize(
    "G",
    [
        nx.grid_2d_graph(3, 4),
        nx.relabel_nodes(nx.circular_ladder_graph(4), lambda i: (i, 0)),
        nx.relabel_nodes(nx.complete_graph(5), lambda i: (i, i)),
        nx.relabel_nodes(nx.balanced_tree(2, 3), lambda i: (0, i)),
    ],
)
def test_basis_size_matches_networkx(G):
    g = graph_from_nx(G)
    assert len(compute_cycle_basis(g)) == len(nx.cycle_basis(graph_to_nx(g)))
