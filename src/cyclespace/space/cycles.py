"""Public entry points: cycle basis vectors and the full cycle space."""
from __future__ import annotations

import logging
from typing import List, Optional

from cyclespace.basis.build import cycle_basis_indexed
from cyclespace.codec.incidence import IncidenceVector, encode_cycle
from cyclespace.exceptions import InvalidArgumentError
from cyclespace.graph.index import IndexedGraph
from cyclespace.graph.model import Graph
from cyclespace.space.enumerate import check_basis_size, enumerate_cycle_space
from cyclespace.utils.naming import is_simple_cycle

logger = logging.getLogger(__name__)


def cycle_basis_vectors(graph: Graph, *, all_components: bool = True) -> List[IncidenceVector]:
    """Incidence vectors of a cycle basis over ``graph.edges``."""
    if graph is None:
        raise InvalidArgumentError("Graph cannot be None")
    indexed = IndexedGraph.from_graph(graph)
    basis = cycle_basis_indexed(indexed, all_components=all_components)
    edges = list(graph.edges)
    return [encode_cycle(indexed.vertex_path(c), edges) for c in basis]


def list_all_cycles(
    graph: Graph,
    *,
    all_components: bool = True,
    max_basis: Optional[int] = None,
    processes: int = 1,
    simple_only: bool = False,
) -> List[Graph]:
    """
    Every element of the cycle space of *graph*, as subgraphs.

    Parameters
    ----------
    graph : Graph
        Input graph; never modified.
    all_components : bool
        Build the basis over every connected component. If False, only the
        component containing the first vertex contributes, and cycles in
        other components are silently missing.
    max_basis : int, optional
        Refuse (BasisTooLargeError) when the basis has more cycles than
        this. Defaults to CYCLESPACE_MAX_BASIS.
    processes : int
        Worker processes used to decode combinations.
    simple_only : bool
        Keep only elements that are a single simple cycle, dropping unions
        of disjoint cycles and cycles glued at a vertex.

    Returns
    -------
    list[Graph]
        2^k - 1 subgraphs in subset-enumeration order (fewer with
        simple_only), where k is the cycle basis size.
    """
    if graph is None:
        raise InvalidArgumentError("Graph cannot be None")

    vectors = cycle_basis_vectors(graph, all_components=all_components)
    logger.debug(
        "cycle basis of %d cycles over %d vertices / %d directed edges",
        len(vectors),
        graph.number_of_vertices(),
        graph.number_of_edges(),
    )
    check_basis_size(len(vectors), max_basis)

    elements = enumerate_cycle_space(
        vectors,
        list(graph.edges),
        max_basis=max_basis,
        processes=processes,
    )
    if simple_only:
        elements = [g for g in elements if is_simple_cycle(g)]
    return elements
