"""In-memory graph container."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

from .codec import GraphFileError, GraphFormat, format_sets, parse_pairs, parse_sets
from .schemas import EDGE_TYPES, Edge, GraphType, Vertex
from .utils import logger

Item = Union[Vertex, Edge]


class Graph:
    """Ordered, deduplicated collection of vertices and edges.

    Vertices are unique by id and edges by their kind-specific equality.
    Adding an edge also adds its endpoints; removing a vertex removes every
    edge touching it. Stored edges always point at the graph's own vertex
    objects, so a vertex's ``value`` lives in exactly one place.
    """

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._vertices: List[Vertex] = []
        self._edges: List[Edge] = []
        self.add(items)

    @classmethod
    def from_file(cls, path: str, fmt: GraphFormat = GraphFormat.SETS) -> "Graph":
        graph = cls()
        graph.read_from_file(path, fmt)
        return graph

    # -----------------
    # QUERIES
    # -----------------

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def count_vertices(self) -> int:
        return len(self._vertices)

    def count_edges(self) -> int:
        return len(self._edges)

    def get_vertex(self, index: int) -> Vertex:
        self._check_index(index, self._vertices, "vertex")
        return self._vertices[index]

    def get_edge(self, index: int) -> Edge:
        self._check_index(index, self._edges, "edge")
        return self._edges[index]

    def get_vertex_with_id(self, vertex_id: int) -> Optional[Vertex]:
        for vertex in self._vertices:
            if vertex.id == vertex_id:
                return vertex
        return None

    def get_type(self) -> GraphType:
        """Classify the graph by the kinds of edges it holds."""
        graph_type = GraphType.UNKNOWN
        for edge in self._edges:
            kind = GraphType.DIRECTED if edge.directed else GraphType.UNDIRECTED
            if graph_type is GraphType.UNKNOWN:
                graph_type = kind
            elif graph_type is not kind:
                return GraphType.MIXED
        return graph_type

    # -----------------
    # MUTATION
    # -----------------

    def add(self, item: Union[Item, Iterable[Item]]) -> None:
        """Add a vertex, an edge, or every item of an iterable, skipping duplicates."""
        if isinstance(item, Vertex):
            self._add_vertex(item)
        elif isinstance(item, EDGE_TYPES):
            self._add_edge(item)
        elif isinstance(item, (str, bytes)):
            raise TypeError(f"Cannot add {type(item).__name__} to a graph")
        else:
            try:
                items = list(item)
            except TypeError:
                raise TypeError(f"Cannot add {type(item).__name__} to a graph") from None
            # Reject the whole batch before storing any of it.
            for element in items:
                if not isinstance(element, (Vertex,) + EDGE_TYPES):
                    raise TypeError(f"Cannot add {type(element).__name__} to a graph")
            for element in items:
                self.add(element)

    def _add_vertex(self, vertex: Vertex) -> Vertex:
        """Store ``vertex`` unless its id is taken; return the stored vertex."""
        for stored in self._vertices:
            if stored == vertex:
                if stored is not vertex and stored.value != vertex.value:
                    logger.debug("Vertex %s already stored, keeping value %s", stored, stored.value)
                return stored
        self._vertices.append(vertex)
        return vertex

    def _add_edge(self, edge: Edge) -> None:
        if edge in self._edges:
            logger.debug("Edge %s already stored", edge)
            return
        first, second = (self._add_vertex(vertex) for vertex in edge.vertices)
        self._edges.append(edge.rebind(first, second))

    def remove_edge(self, index: int) -> None:
        self._check_index(index, self._edges, "edge")
        del self._edges[index]

    def remove_vertex(self, index: int) -> None:
        """Remove a vertex along with every edge incident to it."""
        self._check_index(index, self._vertices, "vertex")
        vertex = self._vertices[index]
        kept = [edge for edge in self._edges if not edge.contains(vertex)]
        removed = len(self._edges) - len(kept)
        if removed:
            logger.debug("Removing vertex %s drops %d incident edge(s)", vertex, removed)
        self._edges = kept
        del self._vertices[index]

    def clear(self) -> None:
        self._vertices = []
        self._edges = []

    # -----------------
    # FILE I/O
    # -----------------

    def read_from_file(self, path: str, fmt: GraphFormat = GraphFormat.SETS) -> None:
        """Replace the graph's content with the graph stored at ``path``.

        Set notation problems raise :class:`GraphFileError`; the pair stream
        lets its ``ValueError`` through untouched. A missing file raises
        ``FileNotFoundError`` in both cases. The current content survives a
        failed read.
        """
        fmt = GraphFormat(fmt)
        with open(path, "rb") as fh:
            raw = fh.read()

        items: List[Item] = []
        if fmt is GraphFormat.SETS:
            try:
                vertices, edges = parse_sets(raw.decode("utf-8"))
            except ValueError as exc:
                raise GraphFileError(path) from exc
            items.extend(vertices)
            items.extend(edges)
        else:
            items.extend(parse_pairs(raw.decode("utf-8")))

        self.clear()
        self.add(items)
        logger.debug("Read %d vertices and %d edges from %s", len(self._vertices), len(self._edges), path)

    def write_to_file(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(str(self))
        logger.debug("Wrote %d vertices and %d edges to %s", len(self._vertices), len(self._edges), path)

    @staticmethod
    def _check_index(index: int, sequence: List, kind: str) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"{kind} index must be an int, got {type(index).__name__}")
        if not 0 <= index < len(sequence):
            raise IndexError(f"{kind} index {index} out of range for {len(sequence)} {kind}(s)")

    def __str__(self) -> str:
        return format_sets(self._vertices, self._edges)

    def __repr__(self) -> str:
        return (
            f"<Graph vertices={len(self._vertices)} edges={len(self._edges)} "
            f"type={self.get_type().value}>"
        )


__all__ = ["Graph"]
