"""Vertex, edge and graph value types.

Undirected connections are stored as two directed edges, one per direction.
The order of ``Graph.edges`` is the canonical edge ordering: incidence
vectors address edges by their position in that list, so it must not be
reordered once cycles have been computed against it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from cyclespace.exceptions import InvalidArgumentError

Coord = Tuple[int, int]


def _as_coord(point: Sequence[int]) -> Coord:
    try:
        x, y = point
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Expected an (x, y) coordinate pair, got {point!r}") from None
    if not isinstance(x, int) or not isinstance(y, int) or isinstance(x, bool) or isinstance(y, bool):
        raise InvalidArgumentError(f"Coordinates must be integers, got {point!r}")
    return (x, y)


@dataclass(frozen=True)
class Vertex:
    """A vertex identified by its coordinate pair.

    ``label`` is for display only and takes no part in equality or hashing.
    """

    coord: Coord
    label: str = field(default="", compare=False)

    @classmethod
    def at(cls, point: Sequence[int]) -> "Vertex":
        x, y = _as_coord(point)
        return cls((x, y), f"Vertex ({x},{y})")

    @property
    def x(self) -> int:
        return self.coord[0]

    @property
    def y(self) -> int:
        return self.coord[1]

    def __str__(self) -> str:
        return f"({self.coord[0]},{self.coord[1]})"


@dataclass(frozen=True)
class Edge:
    """A directed edge; identity is the (source, destination) pair."""

    source: Vertex
    destination: Vertex

    def reversed(self) -> "Edge":
        return Edge(self.destination, self.source)

    def is_loop(self) -> bool:
        return self.source == self.destination

    def __str__(self) -> str:
        return f"{self.source}-{self.destination}"


class Graph:
    """Ordered vertex list plus ordered list of directed edges.

    Both lists are owned by the instance; ``copy()`` returns a graph whose
    lists can be changed without touching this one.
    """

    def __init__(
        self,
        vertices: Optional[Iterable[Vertex]] = None,
        edges: Optional[Iterable[Edge]] = None,
    ) -> None:
        self.vertices: List[Vertex] = list(vertices) if vertices is not None else []
        self.edges: List[Edge] = list(edges) if edges is not None else []
        self._known: Dict[Vertex, Vertex] = {v: v for v in self.vertices}

    # --- construction ---

    def add_vertex(self, point: Sequence[int] | Vertex) -> Vertex:
        """Return the vertex at *point*, adding it first if it is new."""
        v = point if isinstance(point, Vertex) else Vertex.at(point)
        stored = self._known.get(v)
        if stored is not None:
            return stored
        self._known[v] = v
        self.vertices.append(v)
        return v

    def add_bidirectional_edge(
        self,
        src: Sequence[int] | Vertex,
        dest: Sequence[int] | Vertex,
    ) -> Tuple[Edge, Edge]:
        """Append ``src -> dest`` and ``dest -> src``, in that order.

        Vertices are created or reused by coordinate. ``src == dest`` still
        appends two (self-referential) edges.
        """
        s = self.add_vertex(src)
        d = self.add_vertex(dest)
        forward = Edge(s, d)
        backward = Edge(d, s)
        self.edges.append(forward)
        self.edges.append(backward)
        return forward, backward

    def remove_edge(self, edge: Edge) -> None:
        """Remove the first directed edge equal to *edge*; no-op if absent."""
        try:
            self.edges.remove(edge)
        except ValueError:
            pass

    def copy(self) -> "Graph":
        return Graph(self.vertices, self.edges)

    # --- queries ---

    def neighbors(self, vertex: Vertex) -> Set[Vertex]:
        """Vertices reachable from *vertex* over exactly one outgoing edge."""
        return {e.destination for e in self.edges if e.source == vertex}

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._known

    def has_edge(self, edge: Edge) -> bool:
        return edge in self.edges

    def number_of_vertices(self) -> int:
        return len(self.vertices)

    def number_of_edges(self) -> int:
        return len(self.edges)

    def undirected_edges(self) -> List[Tuple[Vertex, Vertex]]:
        """Each unordered vertex pair once, in canonical order; loops skipped."""
        seen: Set[frozenset] = set()
        out: List[Tuple[Vertex, Vertex]] = []
        for e in self.edges:
            if e.is_loop():
                continue
            key = frozenset((e.source, e.destination))
            if key not in seen:
                seen.add(key)
                out.append((e.source, e.destination))
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.vertices == other.vertices and self.edges == other.edges

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        verts = ", ".join(str(v) for v in self.vertices)
        edges = ", ".join(str(e) for e in self.edges)
        return f"Graph(vertices=[{verts}], edges=[{edges}])"
