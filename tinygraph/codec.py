"""Text encodings for graphs.

Two read paths exist and they are not interchangeable:

* ``GraphFormat.SETS`` is the canonical two-line set notation::

      V = {1, 2, 3}
      E = {[1, 2], (2, 3)}

  where ``[a, b]`` is an undirected edge and ``(a, b)`` a directed one. This
  is also the only shape that is ever written.

* ``GraphFormat.PAIRS`` is a bare stream of whitespace-separated integer
  pairs, each pair an undirected edge. Vertices are implied by the edges.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, List, Tuple

from .schemas import DirectedEdge, Edge, UndirectedEdge, Vertex

VERTEX_PREFIX = "V = {"
EDGE_PREFIX = "E = {"
SET_SUFFIX = "}"
SEPARATOR = ", "
ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class GraphFormat(str, Enum):
    SETS = "sets"
    PAIRS = "pairs"


class GraphFileError(ValueError):
    """Raised when a file does not hold a graph in set notation."""

    def __init__(self, path: str) -> None:
        super().__init__(f'"{path}" is not a graph file.')
        self.path = path


def substrings_between(source: str, lower: str, upper: str) -> List[str]:
    """Return every substring enclosed by ``lower`` and ``upper``.

    Pairs are matched left to right without overlapping, e.g.
    ``substrings_between("<a> and <b>", "<", ">") == ["a", "b"]``.
    """
    if not lower or not upper:
        raise ValueError("boundaries must be non-empty")
    substrings: List[str] = []
    start = source.find(lower)
    while start != -1:
        content_start = start + len(lower)
        end = source.find(upper, content_start)
        if end == -1:
            raise ValueError(f"unterminated {lower!r} at offset {start}")
        substrings.append(source[content_start:end])
        start = source.find(lower, end + len(upper))
    return substrings


def _set_body(line: str, prefix: str) -> str:
    if not line.startswith(prefix) or not line.endswith(SET_SUFFIX) or len(line) < len(prefix) + len(SET_SUFFIX):
        raise ValueError(f"expected {prefix!r}...{SET_SUFFIX!r}, got {line!r}")
    return line[len(prefix) : len(line) - len(SET_SUFFIX)]


def _parse_id(token: str) -> int:
    if not ID_PATTERN.fullmatch(token):
        raise ValueError(f"invalid vertex id {token!r}")
    return int(token)


def _parse_pair(pair: str) -> Tuple[Vertex, Vertex]:
    ids = pair.split(SEPARATOR)
    if len(ids) != 2:
        raise ValueError(f"expected two vertex ids, got {pair!r}")
    return Vertex(_parse_id(ids[0])), Vertex(_parse_id(ids[1]))


def parse_sets(text: str) -> Tuple[List[Vertex], List[Edge]]:
    """Parse set notation into vertices and edges.

    Undirected edges come first, then directed ones, each group in the order
    it appears. Any structural problem raises ``ValueError``; callers that
    read from a file wrap it into :class:`GraphFileError`.
    """
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected a vertex line and an edge line")
    vertex_body = _set_body(lines[0], VERTEX_PREFIX)
    edge_body = _set_body(lines[1], EDGE_PREFIX)

    vertices = [Vertex(_parse_id(element)) for element in vertex_body.split(SEPARATOR)] if vertex_body else []

    edges: List[Edge] = []
    for pair in substrings_between(edge_body, "[", "]"):
        edges.append(UndirectedEdge(*_parse_pair(pair)))
    for pair in substrings_between(edge_body, "(", ")"):
        edges.append(DirectedEdge(*_parse_pair(pair)))
    return vertices, edges


def parse_pairs(text: str) -> List[UndirectedEdge]:
    """Parse a whitespace-separated stream of ``origin destination`` pairs."""
    tokens = text.split()
    if not tokens:
        raise ValueError("expected at least one vertex pair")
    if len(tokens) % 2:
        raise ValueError(f"dangling vertex id {tokens[-1]!r} without a partner")
    ids = [_parse_id(token) for token in tokens]
    return [UndirectedEdge(Vertex(ids[i]), Vertex(ids[i + 1])) for i in range(0, len(ids), 2)]


def format_sets(vertices: Iterable[Vertex], edges: Iterable[Edge]) -> str:
    """Render vertices and edges in set notation, ``\\n`` between the lines."""
    vertex_line = VERTEX_PREFIX + SEPARATOR.join(str(vertex) for vertex in vertices) + SET_SUFFIX
    edge_line = EDGE_PREFIX + SEPARATOR.join(str(edge) for edge in edges) + SET_SUFFIX
    return f"{vertex_line}\n{edge_line}"


__all__ = [
    "GraphFileError",
    "GraphFormat",
    "format_sets",
    "parse_pairs",
    "parse_sets",
    "substrings_between",
]
