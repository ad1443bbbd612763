from __future__ import annotations

from typing import Iterable, List, Tuple

from cyclespace.codec.incidence import IncidenceVector


def row_reduce_gf2(rows: Iterable[int]) -> Tuple[List[int], List[int]]:
    """Row echelon form over GF(2) for rows given as int bitsets.

    Returns (reduced_rows, pivot_bits); each kept row has a distinct
    leading bit, listed in pivot_bits.
    """
    pivots: dict[int, int] = {}
    for row in rows:
        r = row
        while r:
            top = r.bit_length() - 1
            if top not in pivots:
                pivots[top] = r
                break
            r ^= pivots[top]
    order = sorted(pivots, reverse=True)
    return [pivots[b] for b in order], order


def gf2_rank(vectors: Iterable[IncidenceVector | int]) -> int:
    """Rank over GF(2) of a collection of incidence vectors (or raw ints)."""
    rows = [v.bits if isinstance(v, IncidenceVector) else v for v in vectors]
    reduced, _ = row_reduce_gf2(rows)
    return len(reduced)


def is_independent(vectors: Iterable[IncidenceVector]) -> bool:
    vs = list(vectors)
    return gf2_rank(vs) == len(vs)
