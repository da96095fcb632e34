"""Exception hierarchy for adtgraph."""

from typing import Hashable


class GraphError(Exception):
    """Base exception for adtgraph errors."""

    pass


class VertexNotFoundError(GraphError, KeyError):
    """Raised when an operation requires a vertex that is not in the graph.

    Subclasses KeyError so callers treating the graph as a mapping can catch
    the usual lookup error.
    """

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the args
        return f"Vertex '{self.vertex}' does not exist."


class GraphInvariantError(GraphError, RuntimeError):
    """Raised when the internal store is found in an inconsistent state."""

    pass
