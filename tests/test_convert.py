import networkx as nx
import pytest

from tinygraph.convert import from_networkx, to_networkx
from tinygraph.graph import Graph
from tinygraph.schemas import DirectedEdge, GraphType, UndirectedEdge, Vertex


def test_to_networkx_keeps_values_and_edge_kinds():
    a, b, c = Vertex(1, 10), Vertex(2, 20), Vertex(3)
    graph = Graph([a, b, c, UndirectedEdge(a, b), DirectedEdge(b, c)])
    result = to_networkx(graph)
    assert result.number_of_nodes() == 3
    assert result.number_of_edges() == 2
    assert result.nodes[1]["value"] == 10
    assert result.get_edge_data(1, 2, 0)["directed"] is False
    assert result.get_edge_data(2, 3, 0)["directed"] is True


def test_networkx_round_trip():
    graph = Graph([Vertex(1, 4), UndirectedEdge(Vertex(1), Vertex(2)), DirectedEdge(Vertex(2), Vertex(3))])
    restored = from_networkx(to_networkx(graph))
    assert str(restored) == str(graph)
    assert restored.get_vertex_with_id(1).value == 4
    assert restored.get_type() is GraphType.MIXED


def test_from_plain_undirected_networkx_graph():
    nx_graph = nx.Graph()
    nx_graph.add_edge(1, 2)
    nx_graph.add_edge(2, 3)
    graph = from_networkx(nx_graph)
    assert graph.get_type() is GraphType.UNDIRECTED
    assert graph.count_edges() == 2


def test_from_directed_networkx_graph_collapses_parallel_edges():
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_edge(1, 2)
    nx_graph.add_edge(1, 2)
    graph = from_networkx(nx_graph)
    assert graph.get_type() is GraphType.DIRECTED
    assert graph.count_edges() == 1


def test_from_networkx_rejects_non_integer_nodes():
    nx_graph = nx.Graph()
    nx_graph.add_node("Q1")
    with pytest.raises(TypeError):
        from_networkx(nx_graph)
