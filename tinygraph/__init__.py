"""tinygraph package initialization."""

from importlib.metadata import version, PackageNotFoundError

from .codec import GraphFileError, GraphFormat, substrings_between
from .graph import Graph
from .schemas import DirectedEdge, Edge, GraphType, UndirectedEdge, Vertex

__all__ = [
    "__version__",
    "DirectedEdge",
    "Edge",
    "Graph",
    "GraphFileError",
    "GraphFormat",
    "GraphType",
    "UndirectedEdge",
    "Vertex",
    "substrings_between",
]

try:
    __version__ = version("tinygraph")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0"
