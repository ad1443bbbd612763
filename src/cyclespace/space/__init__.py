from .enumerate import (
    CYCLESPACE_MAX_BASIS,
    check_basis_size,
    subset_of_mask,
    xor_combinations,
    iter_cycle_space,
    enumerate_cycle_space,
)
from .cycles import cycle_basis_vectors, list_all_cycles

__all__ = [
    "CYCLESPACE_MAX_BASIS",
    "check_basis_size",
    "subset_of_mask",
    "xor_combinations",
    "iter_cycle_space",
    "enumerate_cycle_space",
    "cycle_basis_vectors",
    "list_all_cycles",
]
