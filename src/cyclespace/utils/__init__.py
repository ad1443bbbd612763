from .connectivity import connected_components_pairs, connected_components_edges, is_connected_edges
from .naming import format_edges, is_simple_cycle, describe_element
from .linalg import row_reduce_gf2, gf2_rank, is_independent

__all__ = [
    "connected_components_pairs",
    "connected_components_edges",
    "is_connected_edges",
    "format_edges",
    "is_simple_cycle",
    "describe_element",
    "row_reduce_gf2",
    "gf2_rank",
    "is_independent",
]
