import networkx as nx
import pytest

from adtgraph import DiGraph, GraphConfig
from adtgraph.graph.convert import from_networkx, to_networkx


def test_to_networkx_basic(deli):
    nxg = to_networkx(deli)

    assert isinstance(nxg, nx.DiGraph)
    assert list(nxg.nodes) == ["foo", "bar", "baloney", "ham"]
    assert list(nxg.edges) == list(deli.edges())
    assert nxg.has_edge("foo", "foo")
    assert not nxg.has_edge("ham", "baloney")


def test_to_networkx_isolated_vertex():
    g = DiGraph()
    g.add_vertex("lonely")
    nxg = to_networkx(g)
    assert list(nxg.nodes) == ["lonely"]
    assert nxg.number_of_edges() == 0


def test_roundtrip(deli):
    roundtrip = from_networkx(to_networkx(deli))
    assert roundtrip == deli
    assert str(roundtrip) == str(deli)


def test_from_networkx_multidigraph_collapses_parallel_edges():
    nxg = nx.MultiDiGraph()
    nxg.add_edge("A", "B", key=0)
    nxg.add_edge("A", "B", key=1)
    nxg.add_edge("B", "A")

    g = from_networkx(nxg)
    assert g.num_vertices() == 2
    assert g.num_edges() == 2
    assert g.has_edge("A", "B")
    assert g.has_edge("B", "A")


def test_from_networkx_keeps_isolated_nodes():
    nxg = nx.DiGraph()
    nxg.add_node("X")
    nxg.add_edge("A", "B")
    g = from_networkx(nxg)
    assert list(g.get_vertices()) == ["X", "A", "B"]


def test_from_networkx_config_passed_through():
    cfg = GraphConfig(check_invariants=True)
    g = from_networkx(nx.DiGraph([("A", "B")]), config=cfg)
    assert g.config is cfg


def test_from_networkx_rejects_undirected():
    with pytest.raises(TypeError, match="Undirected"):
        from_networkx(nx.Graph([("A", "B")]))


def test_from_networkx_rejects_non_graph():
    with pytest.raises(TypeError, match="Expected a NetworkX graph"):
        from_networkx({"A": ["B"]})
