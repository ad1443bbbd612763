from .spanning import SpanningTree, spanning_tree
from .fundamental import fundamental_cycle, fundamental_cycles
from .build import component_trees, cycle_basis_indexed, compute_cycle_basis

__all__ = [
    "SpanningTree",
    "spanning_tree",
    "fundamental_cycle",
    "fundamental_cycles",
    "component_trees",
    "cycle_basis_indexed",
    "compute_cycle_basis",
]
