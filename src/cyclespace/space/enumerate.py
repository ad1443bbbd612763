"""Enumerate the cycle space spanned by a basis of incidence vectors.

Every non-empty subset of the k basis vectors is XOR-combined and decoded,
giving 2^k - 1 elements. Distinct subsets of an independent basis give
distinct vectors, so nothing is deduplicated.

CYCLESPACE_MAX_BASIS bounds k (default 20, about a million elements);
larger bases raise BasisTooLargeError instead of exhausting memory.
"""
from __future__ import annotations

import logging
import os
from functools import partial
from multiprocessing import Pool
from typing import Iterator, List, Optional, Sequence, Tuple

from cyclespace.codec.incidence import IncidenceVector, decode_vector
from cyclespace.exceptions import BasisTooLargeError, InvalidArgumentError
from cyclespace.graph.model import Edge, Graph

logger = logging.getLogger(__name__)

CYCLESPACE_MAX_BASIS = int(os.environ.get("CYCLESPACE_MAX_BASIS", "20"))


def resolve_max_basis(max_basis: Optional[int]) -> int:
    """Explicit limit, or the module default when *max_basis* is None."""
    limit = CYCLESPACE_MAX_BASIS if max_basis is None else max_basis
    if limit < 0:
        raise InvalidArgumentError(f"max_basis must be >= 0, got {limit}")
    return limit


def check_basis_size(k: int, max_basis: Optional[int] = None) -> None:
    limit = resolve_max_basis(max_basis)
    if k > limit:
        raise BasisTooLargeError(k, limit)


def subset_of_mask(mask: int, k: int) -> Tuple[int, ...]:
    """Basis positions in the subset for *mask*.

    Position j is included iff bit k-1-j of mask is set, which lists subsets
    in the order produced by doubling the power set one element at a time:
    for [a, b] that is [], [b], [a], [a, b].
    """
    return tuple(j for j in range(k) if (mask >> (k - 1 - j)) & 1)


def xor_combinations(
    vectors: Sequence[IncidenceVector],
) -> Iterator[Tuple[Tuple[int, ...], IncidenceVector]]:
    """Yield (subset, combined vector) for every non-empty subset, in order."""
    k = len(vectors)
    for mask in range(1, 1 << k):
        subset = subset_of_mask(mask, k)
        combined = vectors[subset[0]]
        for j in subset[1:]:
            combined = combined ^ vectors[j]
        yield subset, combined


def iter_cycle_space(
    vectors: Sequence[IncidenceVector],
    edges: Sequence[Edge],
) -> Iterator[Graph]:
    """Lazily decode each XOR-combination; stop consuming to cancel."""
    for _subset, combined in xor_combinations(vectors):
        yield decode_vector(combined, edges)


def enumerate_cycle_space(
    vectors: Sequence[IncidenceVector],
    edges: Sequence[Edge],
    *,
    max_basis: Optional[int] = None,
    processes: int = 1,
    chunksize: int = 256,
) -> List[Graph]:
    """
    All 2^k - 1 cycle-space elements, in subset-enumeration order.

    processes: decode in a multiprocessing pool when > 1; output order is
               the same as the serial path.
    """
    k = len(vectors)
    check_basis_size(k, max_basis)
    if processes < 1:
        raise InvalidArgumentError(f"processes must be >= 1, got {processes}")

    logger.debug("enumerating %d combinations of %d basis vectors", (1 << k) - 1, k)

    if processes == 1 or k == 0:
        return list(iter_cycle_space(vectors, edges))

    combined = [vec for _subset, vec in xor_combinations(vectors)]
    worker = partial(decode_vector, edges=list(edges))
    with Pool(processes=processes) as pool:
        return list(pool.imap(worker, combined, chunksize=chunksize))
