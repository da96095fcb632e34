"""Generic directed graph with ordered adjacency sets.

`DiGraph` keeps one mapping from each vertex to the ordered set of its
successors. Both levels are plain dicts, so vertex and edge insertion order
are preserved and every membership test is a hash lookup. Vertices are keyed
by value rather than by position, so removing a vertex never shifts any other
vertex's identity.

Example:
    >>> g = DiGraph()
    >>> g.add_edge("A", "B")
    >>> g.add_edge("B", "C")
    >>> g.get_path("A", "C")
    ['A', 'B', 'C']
    >>> print(g)
    A: B
    B: C
    C:
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    Iterator,
    KeysView,
    List,
    Optional,
    Tuple,
)

from adtgraph.algorithms import bfs as _bfs
from adtgraph.config import GRAPH_CONFIG, GraphConfig
from adtgraph.exceptions import GraphInvariantError, VertexNotFoundError
from adtgraph.logging import get_logger
from adtgraph.types.base import V

logger = get_logger(__name__)


class SuccessorView(Generic[V]):
    """Live, restartable view over the successors of one vertex.

    Each iteration reads the graph's current state; a vertex that is absent
    at iteration time yields nothing.
    """

    __slots__ = ("_adj", "_vertex")

    def __init__(self, adj: Dict[V, Dict[V, None]], vertex: V) -> None:
        self._adj = adj
        self._vertex = vertex

    def __iter__(self) -> Iterator[V]:
        return iter(self._adj.get(self._vertex, {}))

    def __len__(self) -> int:
        return len(self._adj.get(self._vertex, {}))

    def __contains__(self, item: object) -> bool:
        return item in self._adj.get(self._vertex, {})

    def __repr__(self) -> str:
        return f"SuccessorView({self._vertex!r}: {list(self)!r})"


class DiGraph(Generic[V]):
    """A directed graph over hashable vertices.

    This class enforces:
      - No duplicate vertices; adding an existing vertex is a no-op.
      - No duplicate edges; adding an existing edge is a no-op.
      - No dangling edges; `add_edge` creates missing endpoints and
        `remove_vertex` drops every edge touching the removed vertex.
      - Removing a missing vertex or edge is a no-op.
      - `degree()` is the only query that raises for a missing vertex.

    Equality is structural: same vertex set and the same successor set for
    every vertex, ignoring insertion order.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        """Initialize an empty graph.

        Args:
            config: Runtime switches. Defaults to the global `GRAPH_CONFIG`.

        Attributes:
            _adj: Map each vertex to an insertion-ordered set of successors
                (a dict with None values).
            _num_edges: Running edge count, cross-checked by `check_invariants`.
        """
        self.config = config if config is not None else GRAPH_CONFIG
        self._adj: Dict[V, Dict[V, None]] = {}
        self._num_edges = 0

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[V, V]],
        vertices: Iterable[V] = (),
        config: Optional[GraphConfig] = None,
    ) -> DiGraph[V]:
        """Build a graph by adding `vertices` first, then `edges`.

        Replaying ``g.get_vertices()`` and ``g.edges()`` of an existing graph
        reproduces it exactly, insertion order included.
        """
        graph: DiGraph[V] = cls(config=config)
        graph.add_vertices_from(vertices)
        graph.add_edges_from(edges)
        return graph

    def copy(self) -> DiGraph[V]:
        """Return an independent deep copy via pickle round-trip."""
        return loads(dumps(self))

    #
    # Counts
    #
    def num_vertices(self) -> int:
        """Return the number of distinct vertices."""
        if self.config.check_invariants:
            self.check_invariants()
        return len(self._adj)

    def num_edges(self) -> int:
        """Return the total number of directed edges."""
        return self._num_edges

    def degree(self, vertex: V) -> int:
        """Return the out-degree of `vertex`.

        Raises:
            VertexNotFoundError: If `vertex` is not in the graph.
        """
        try:
            return len(self._adj[vertex])
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def is_empty(self) -> bool:
        """Return True iff the graph has no vertices (and hence no edges)."""
        return not self._adj

    #
    # Vertex management
    #
    def add_vertex(self, vertex: V) -> None:
        """Add `vertex` with no edges. Does nothing if it already exists."""
        if vertex in self._adj:
            return
        self._adj[vertex] = {}
        self._after_mutation("add_vertex", vertex)

    def add_vertices_from(self, vertices: Iterable[V]) -> None:
        """Add each vertex in order, skipping ones already present."""
        for vertex in vertices:
            self.add_vertex(vertex)

    def remove_vertex(self, vertex: V) -> None:
        """Remove `vertex` and every edge into or out of it.

        Does nothing if `vertex` is not in the graph.
        """
        if vertex not in self._adj:
            return
        self._num_edges -= len(self._adj.pop(vertex))

        # Find sources first, then edit; never mutate a set being iterated.
        sources = [src for src, succ in self._adj.items() if vertex in succ]
        for src in sources:
            del self._adj[src][vertex]
        self._num_edges -= len(sources)
        self._after_mutation("remove_vertex", vertex)

    def contains(self, vertex: V) -> bool:
        """Return True iff `vertex` is in the graph."""
        return vertex in self._adj

    def get_vertices(self) -> KeysView[V]:
        """Return a live view of all vertices in insertion order."""
        return self._adj.keys()

    #
    # Edge management
    #
    def add_edge(self, src: V, dst: V) -> None:
        """Add a directed edge from `src` to `dst`.

        Missing endpoints are added first (`src` before `dst`). Adding an
        edge that already exists does nothing.
        """
        self.add_vertex(src)
        self.add_vertex(dst)
        successors = self._adj[src]
        if dst in successors:
            return
        successors[dst] = None
        self._num_edges += 1
        self._after_mutation("add_edge", src, dst)

    def add_edges_from(self, edges: Iterable[Tuple[V, V]]) -> None:
        """Add each ``(src, dst)`` pair in order."""
        for src, dst in edges:
            self.add_edge(src, dst)

    def remove_edge(self, src: V, dst: V) -> None:
        """Remove the edge from `src` to `dst` if it exists."""
        successors = self._adj.get(src)
        if successors is None or dst not in successors:
            return
        del successors[dst]
        self._num_edges -= 1
        self._after_mutation("remove_edge", src, dst)

    def has_edge(self, src: V, dst: V) -> bool:
        """Return True iff there is an edge from `src` to `dst`."""
        return dst in self._adj.get(src, {})

    def adjacent_to(self, src: V) -> SuccessorView[V]:
        """Return the successors of `src` in edge insertion order.

        A vertex y is adjacent to x if the edge (x, y) exists; the reverse
        edge is not implied. The view is empty when `src` is not in the graph.
        """
        return SuccessorView(self._adj, src)

    def edges(self) -> Iterator[Tuple[V, V]]:
        """Yield every ``(src, dst)`` edge, grouped by source in vertex order."""
        for src, successors in self._adj.items():
            for dst in successors:
                yield src, dst

    #
    # Path queries
    #
    def has_path(self, src: V, dst: V) -> bool:
        """Return True iff `dst` is reachable from `src`.

        Every existing vertex reaches itself, with or without a self-loop.
        """
        return _bfs.has_path(self, src, dst)

    def path_length(self, src: V, dst: V) -> int:
        """Return the shortest hop count, or `UNREACHABLE` if there is none."""
        return _bfs.path_length(self, src, dst)

    def get_path(self, src: V, dst: V) -> List[V]:
        """Return a shortest ``[src, ..., dst]`` path, or an empty list."""
        return _bfs.get_path(self, src, dst)

    #
    # Invariants
    #
    def check_invariants(self) -> None:
        """Verify the store's structural invariants.

        Raises:
            GraphInvariantError: If an edge points to a missing vertex or the
                running edge count disagrees with the adjacency sets.
        """
        counted = 0
        for src, successors in self._adj.items():
            for dst in successors:
                if dst not in self._adj:
                    raise GraphInvariantError(
                        f"Edge '{src}' -> '{dst}' points to a missing vertex."
                    )
            counted += len(successors)
        if counted != self._num_edges:
            raise GraphInvariantError(
                f"Edge counter is {self._num_edges} but adjacency holds {counted} edges."
            )

    def _after_mutation(self, action: str, *args: Any) -> None:
        if self.config.log_mutations:
            logger.debug("%s%r", action, args)
        if self.config.check_invariants:
            self.check_invariants()

    #
    # Comparison and representation
    #
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiGraph):
            return NotImplemented
        if self._adj.keys() != other._adj.keys():
            return False
        return all(
            successors.keys() == other._adj[vertex].keys()
            for vertex, successors in self._adj.items()
        )

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    def is_consistent_with(self, other: DiGraph[Any]) -> bool:
        """Loose comparison: shared vertex set and known edge targets.

        True iff every vertex of each graph is in the other, and every
        successor of a vertex in either graph is a vertex of the other. Unlike
        ``==``, the successor sets themselves may differ.
        """
        for first, second in ((self, other), (other, self)):
            for vertex in first.get_vertices():
                if not second.contains(vertex):
                    return False
                for successor in first.adjacent_to(vertex):
                    if not second.contains(successor):
                        return False
        return True

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __iter__(self) -> Iterator[V]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __str__(self) -> str:
        """Render one ``"<vertex>: <succ1>, <succ2>"`` line per vertex.

        A vertex without successors renders as ``"<vertex>:"``. Lines are
        joined by newlines with no trailing newline.
        """
        lines = []
        for vertex, successors in self._adj.items():
            line = f"{vertex}:"
            if successors:
                line += " " + ", ".join(str(dst) for dst in successors)
            lines.append(line)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DiGraph(vertices={len(self._adj)}, edges={self._num_edges})"
