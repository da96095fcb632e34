"""Graph conversion utilities between DiGraph and NetworkX graphs.

Only directed NetworkX graphs are accepted. Parallel edges in a
``MultiDiGraph`` collapse into the single edge a `DiGraph` can hold, and edge
or node attributes are dropped.
"""

from __future__ import annotations

from typing import Optional, Union

import networkx as nx

from adtgraph.config import GraphConfig
from adtgraph.graph.digraph import DiGraph
from adtgraph.logging import get_logger

logger = get_logger(__name__)


def to_networkx(graph: DiGraph) -> nx.DiGraph:
    """Convert a DiGraph to a NetworkX DiGraph.

    Node and edge insertion order are preserved.

    Args:
        graph: The DiGraph to convert.

    Returns:
        A NetworkX DiGraph with the same vertices and edges.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.get_vertices())
    nx_graph.add_edges_from(graph.edges())
    return nx_graph


def from_networkx(
    nx_graph: Union[nx.DiGraph, nx.MultiDiGraph],
    config: Optional[GraphConfig] = None,
) -> DiGraph:
    """Convert a directed NetworkX graph to a DiGraph.

    Args:
        nx_graph: A NetworkX DiGraph or MultiDiGraph.
        config: Optional configuration for the new graph.

    Returns:
        A DiGraph with the same nodes and one edge per connected node pair.

    Raises:
        TypeError: If `nx_graph` is not a NetworkX graph or is undirected.
    """
    if not isinstance(nx_graph, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(nx_graph).__name__}.")
    if not nx_graph.is_directed():
        raise TypeError(
            "Undirected graphs are not supported; add both directed edges explicitly."
        )

    graph = DiGraph.from_edges(
        nx_graph.edges(), vertices=nx_graph.nodes(), config=config
    )
    collapsed = nx_graph.number_of_edges() - graph.num_edges()
    if collapsed:
        logger.debug("Collapsed %d parallel edges during conversion", collapsed)
    return graph
