"""Conversion between :class:`~tinygraph.graph.Graph` and networkx graphs.

networkx has no mixed graph type, so every tinygraph edge becomes a single
entry in a ``MultiDiGraph`` and carries its kind in a ``directed`` attribute.
"""

from __future__ import annotations

import networkx as nx

from .graph import Graph
from .schemas import DirectedEdge, UndirectedEdge, Vertex


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    result = nx.MultiDiGraph()
    for vertex in graph.vertices:
        result.add_node(vertex.id, value=vertex.value)
    for edge in graph.edges:
        first, second = edge.vertices
        result.add_edge(first.id, second.id, directed=edge.directed)
    return result


def from_networkx(nx_graph: nx.Graph) -> Graph:
    """Build a graph from any networkx graph with integer nodes.

    Edges flagged ``directed=False`` become undirected edges. Edges without
    the flag follow the networkx graph's own directedness. Parallel edges
    collapse through the usual deduplication.
    """
    graph = Graph()
    for node, data in nx_graph.nodes(data=True):
        if isinstance(node, bool) or not isinstance(node, int):
            raise TypeError(f"Vertex ids must be integers, got {node!r}")
        graph.add(Vertex(node, data.get("value", 0)))
    for u, v, data in nx_graph.edges(data=True):
        directed = data.get("directed", nx_graph.is_directed())
        vertices = (graph.get_vertex_with_id(u), graph.get_vertex_with_id(v))
        graph.add(DirectedEdge(*vertices) if directed else UndirectedEdge(*vertices))
    return graph


__all__ = ["from_networkx", "to_networkx"]
