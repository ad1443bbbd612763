"""Incidence vectors: cycles as bit strings over the canonical edge list.

Canonical edge index i lives at bit position ``length - 1 - i`` of the
underlying int, so the binary string of the vector reads left to right in
edge order. With edges

    (1,2) (2,3) (2,6) (3,4) (3,6) (4,5) (4,6) (5,6)

the cycle 2-3-4-5-6 has the vector 01110101 and 3-4-5-6 has 00011101
(one direction per edge shown).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Set

from cyclespace.exceptions import InvalidArgumentError, InvalidStateError
from cyclespace.graph.model import Edge, Graph, Vertex


@dataclass(frozen=True)
class IncidenceVector:
    """Fixed-length bit vector; ``bits`` is an arbitrary precision int."""

    bits: int
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise InvalidArgumentError(f"length must be >= 0, got {self.length}")
        if self.bits < 0 or self.bits.bit_length() > self.length:
            raise InvalidArgumentError(
                f"bits 0b{self.bits:b} do not fit in a vector of length {self.length}"
            )

    @classmethod
    def zeros(cls, length: int) -> "IncidenceVector":
        return cls(0, length)

    @classmethod
    def from_bitstring(cls, s: str) -> "IncidenceVector":
        """Parse a '0'/'1' string whose first character is edge index 0."""
        if s and set(s) - {"0", "1"}:
            raise InvalidArgumentError(f"not a bit string: {s!r}")
        return cls(int(s, 2) if s else 0, len(s))

    def _pos(self, index: int) -> int:
        if not 0 <= index < self.length:
            raise IndexError(f"edge index {index} out of range for length {self.length}")
        return self.length - 1 - index

    def test(self, index: int) -> bool:
        return (self.bits >> self._pos(index)) & 1 == 1

    def with_bit(self, index: int) -> "IncidenceVector":
        return IncidenceVector(self.bits | (1 << self._pos(index)), self.length)

    def indices(self) -> List[int]:
        """Set edge indices in ascending (canonical) order."""
        out: List[int] = []
        tmp = self.bits
        while tmp:
            lsb = tmp & -tmp
            out.append(self.length - lsb.bit_length())
            tmp ^= lsb
        out.reverse()
        return out

    def popcount(self) -> int:
        return bin(self.bits).count("1")

    def to_bitstring(self) -> str:
        return format(self.bits, f"0{self.length}b") if self.length else ""

    def __xor__(self, other: "IncidenceVector") -> "IncidenceVector":
        if not isinstance(other, IncidenceVector):
            return NotImplemented
        if other.length != self.length:
            raise InvalidStateError(
                f"cannot XOR incidence vectors of lengths {self.length} and {other.length}"
            )
        return IncidenceVector(self.bits ^ other.bits, self.length)

    def __bool__(self) -> bool:
        return self.bits != 0

    def __str__(self) -> str:
        return self.to_bitstring()


def cycle_edges(cycle: Sequence[Vertex]) -> Set[Edge]:
    """Both directions between consecutive vertices, closing last -> first."""
    if not cycle:
        return set()
    out: Set[Edge] = set()
    for a, b in zip(cycle, list(cycle[1:]) + [cycle[0]]):
        out.add(Edge(a, b))
        out.add(Edge(b, a))
    return out


def encode_cycle(cycle: Sequence[Vertex], edges: Sequence[Edge]) -> IncidenceVector:
    """Incidence vector of *cycle* over the canonical edge list *edges*."""
    members = cycle_edges(cycle)
    m = len(edges)
    bits = 0
    for i, e in enumerate(edges):
        if e in members:
            bits |= 1 << (m - 1 - i)
    return IncidenceVector(bits, m)


def decode_vector(vector: IncidenceVector, edges: Sequence[Edge]) -> Graph:
    """Subgraph made of the canonical edges whose bit is set, in edge order."""
    if vector.length != len(edges):
        raise InvalidStateError(
            f"incidence vector of length {vector.length} does not match {len(edges)} canonical edges"
        )
    out = Graph()
    for i in vector.indices():
        e = edges[i]
        out.add_vertex(e.source)
        out.add_vertex(e.destination)
        out.edges.append(e)
    return out
