"""adtgraph: generic directed graph abstract data type.

adtgraph provides an in-memory directed graph over arbitrary hashable
vertices, with breadth-first shortest-path queries.

Primary API:
    create_graph() - Create an empty graph
    DiGraph - Vertex/edge store with path queries
    bfs, get_path, path_length, has_path - Path functions
    UNREACHABLE - Path length reported when no path exists
    from_networkx() - Convert a directed NetworkX graph
    to_networkx() - Convert back to NetworkX

Example:
    from adtgraph import create_graph

    g = create_graph()
    g.add_edge("foo", "bar")
    g.add_edge("bar", "baloney")
    g.get_path("foo", "baloney")  # ['foo', 'bar', 'baloney']
"""

from __future__ import annotations

from typing import Optional

from adtgraph import logging
from adtgraph._version import __version__
from adtgraph.algorithms.bfs import bfs, get_path, has_path, path_length
from adtgraph.config import GRAPH_CONFIG, GraphConfig
from adtgraph.exceptions import GraphError, GraphInvariantError, VertexNotFoundError
from adtgraph.graph.convert import from_networkx, to_networkx
from adtgraph.graph.digraph import DiGraph
from adtgraph.types.base import UNREACHABLE


def create_graph(config: Optional[GraphConfig] = None) -> DiGraph:
    """Return a new, empty DiGraph."""
    return DiGraph(config=config)


__all__ = [
    # Version
    "__version__",
    # Graph
    "DiGraph",
    "create_graph",
    # Path queries
    "bfs",
    "get_path",
    "has_path",
    "path_length",
    "UNREACHABLE",
    # Configuration
    "GraphConfig",
    "GRAPH_CONFIG",
    # Errors
    "GraphError",
    "GraphInvariantError",
    "VertexNotFoundError",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
