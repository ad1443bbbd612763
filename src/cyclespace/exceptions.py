"""cyclespace custom exceptions."""

from __future__ import annotations


class CycleSpaceError(Exception):
    """Base exception for cyclespace errors."""


class InvalidArgumentError(CycleSpaceError, ValueError):
    """An argument passed to a public operation is absent or malformed."""


class InvalidStateError(CycleSpaceError, RuntimeError):
    """An internal invariant does not hold (e.g. an edge with a dangling endpoint)."""


class BasisTooLargeError(CycleSpaceError):
    """The cycle basis is too large to enumerate its 2^k - 1 combinations."""

    def __init__(self, basis_size: int, limit: int) -> None:
        self.basis_size = basis_size
        self.limit = limit
        super().__init__(
            f"Cycle basis has k={basis_size} cycles; enumerating 2^{basis_size} - 1 "
            f"combinations exceeds the limit k <= {limit}. "
            "Raise max_basis (or CYCLESPACE_MAX_BASIS) to proceed."
        )
