"""
cyclespace: cycle bases and full cycle-space enumeration for undirected
graphs, with incidence-vector encoding over a canonical edge order.
"""

from .exceptions import (
    CycleSpaceError,
    InvalidArgumentError,
    InvalidStateError,
    BasisTooLargeError,
)
from .graph.model import Vertex, Edge, Graph
from .graph.index import IndexedGraph

# Pipeline
from .basis.spanning import SpanningTree, spanning_tree
from .basis.fundamental import fundamental_cycle, fundamental_cycles
from .basis.build import compute_cycle_basis
from .codec.incidence import IncidenceVector, cycle_edges, encode_cycle, decode_vector
from .space.enumerate import xor_combinations, iter_cycle_space, enumerate_cycle_space
from .space.cycles import cycle_basis_vectors, list_all_cycles

# Shared utilities
from .utils.connectivity import connected_components_edges, is_connected_edges
from .utils.naming import format_edges, is_simple_cycle, describe_element
from .utils.linalg import gf2_rank, is_independent

# NetworkX interop
from .io.nxgraph import graph_to_nx, graph_from_nx
from .viz.draw import draw_cycle_space

__all__ = [
    # Errors
    "CycleSpaceError",
    "InvalidArgumentError",
    "InvalidStateError",
    "BasisTooLargeError",
    # Model
    "Vertex",
    "Edge",
    "Graph",
    "IndexedGraph",
    # Pipeline
    "SpanningTree",
    "spanning_tree",
    "fundamental_cycle",
    "fundamental_cycles",
    "compute_cycle_basis",
    "IncidenceVector",
    "cycle_edges",
    "encode_cycle",
    "decode_vector",
    "xor_combinations",
    "iter_cycle_space",
    "enumerate_cycle_space",
    "cycle_basis_vectors",
    "list_all_cycles",
    # Utils
    "connected_components_edges",
    "is_connected_edges",
    "format_edges",
    "is_simple_cycle",
    "describe_element",
    "gf2_rank",
    "is_independent",
    # IO
    "graph_to_nx",
    "graph_from_nx",
    # Viz
    "draw_cycle_space",
]
