"""Vertex and edge types shared by the graph container and the codec."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Tuple, Union


class Vertex:
    """Graph vertex keyed by an integer id.

    ``value`` is a free payload; it never takes part in equality or hashing,
    so two vertices with the same id are interchangeable as far as a graph
    is concerned.
    """

    __slots__ = ("_id", "value")

    def __init__(self, id: int, value: int = 0) -> None:
        self._id = id
        self.value = value

    @property
    def id(self) -> int:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return str(self._id)

    def __repr__(self) -> str:
        return f"Vertex(id={self._id}, value={self.value})"


@dataclass(frozen=True, eq=False)
class DirectedEdge:
    origin: Vertex
    destination: Vertex

    directed: ClassVar[bool] = True

    @property
    def vertices(self) -> Tuple[Vertex, Vertex]:
        return (self.origin, self.destination)

    def contains(self, vertex: Vertex) -> bool:
        return vertex == self.origin or vertex == self.destination

    def rebind(self, first: Vertex, second: Vertex) -> "DirectedEdge":
        """Return a copy of the edge over ``first``/``second`` in endpoint order."""
        return replace(self, origin=first, destination=second)

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, Vertex) and self.contains(vertex)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DirectedEdge):
            return self.origin == other.origin and self.destination == other.destination
        if isinstance(other, UndirectedEdge):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((True, self.origin.id, self.destination.id))

    def __str__(self) -> str:
        return f"({self.origin}, {self.destination})"


@dataclass(frozen=True, eq=False)
class UndirectedEdge:
    vertex_a: Vertex
    vertex_b: Vertex

    directed: ClassVar[bool] = False

    @property
    def vertices(self) -> Tuple[Vertex, Vertex]:
        return (self.vertex_a, self.vertex_b)

    def contains(self, vertex: Vertex) -> bool:
        return vertex == self.vertex_a or vertex == self.vertex_b

    def rebind(self, first: Vertex, second: Vertex) -> "UndirectedEdge":
        return replace(self, vertex_a=first, vertex_b=second)

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, Vertex) and self.contains(vertex)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UndirectedEdge):
            return (self.vertex_a == other.vertex_a and self.vertex_b == other.vertex_b) or (
                self.vertex_a == other.vertex_b and self.vertex_b == other.vertex_a
            )
        if isinstance(other, DirectedEdge):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        # Order-free so that [a, b] and [b, a] land in the same bucket.
        return hash((False, frozenset((self.vertex_a.id, self.vertex_b.id))))

    def __str__(self) -> str:
        return f"[{self.vertex_a}, {self.vertex_b}]"


Edge = Union[DirectedEdge, UndirectedEdge]
EDGE_TYPES = (DirectedEdge, UndirectedEdge)


class GraphType(str, Enum):
    """Classification of a graph by the kinds of edges it holds."""

    UNKNOWN = "unknown"
    UNDIRECTED = "undirected"
    DIRECTED = "directed"
    MIXED = "mixed"


__all__ = [
    "DirectedEdge",
    "EDGE_TYPES",
    "Edge",
    "GraphType",
    "UndirectedEdge",
    "Vertex",
]
