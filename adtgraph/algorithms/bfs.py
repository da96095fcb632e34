"""Breadth-first shortest-path queries over an unweighted directed graph.

Every edge has unit cost, so the first time BFS discovers a vertex it has
found a shortest route to it. The functions here are stateless: each call
allocates its own frontier, cost map and predecessor map and drops them on
return.

Missing vertices never raise. They degrade to "no path": an empty list,
False, or `UNREACHABLE`.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional, Protocol, Tuple

from adtgraph.logging import get_logger
from adtgraph.types.base import UNREACHABLE, CostMap, PathList, PredMap, VertexID

logger = get_logger(__name__)


class AdjacencyView(Protocol):
    """Read-only graph surface the path functions need."""

    def contains(self, vertex: VertexID) -> bool: ...

    def adjacent_to(self, vertex: VertexID) -> Iterable[VertexID]: ...


def bfs(
    graph: AdjacencyView,
    src_node: VertexID,
    dst_node: Optional[VertexID] = None,
) -> Tuple[CostMap, PredMap]:
    """Breadth-first search from `src_node`.

    Successors are enqueued in adjacency order and the first discovery of a
    vertex wins, so ties between equally short routes resolve to the route
    through the earliest-inserted edges.

    Args:
        graph: Graph to search.
        src_node: Source vertex.
        dst_node: Optional target. When given, the search stops as soon as
            the target is dequeued.

    Returns:
        Tuple of (costs, pred). ``costs`` maps each discovered vertex to its
        hop count from the source. ``pred`` maps each discovered vertex to its
        discovering predecessor; the source maps to None. Both are empty when
        `src_node` is not in the graph.
    """
    if not graph.contains(src_node):
        return {}, {}

    costs: CostMap = {src_node: 0}
    pred: PredMap = {src_node: None}
    queue = deque([src_node])
    while queue:
        node = queue.popleft()
        if dst_node is not None and node == dst_node:
            break
        for neighbor in graph.adjacent_to(node):
            if neighbor not in costs:
                costs[neighbor] = costs[node] + 1
                pred[neighbor] = node
                queue.append(neighbor)

    logger.debug(
        "BFS from %r (target %r) discovered %d vertices", src_node, dst_node, len(costs)
    )
    return costs, pred


def get_path(graph: AdjacencyView, src_node: VertexID, dst_node: VertexID) -> PathList:
    """Return a shortest path from `src_node` to `dst_node` as a vertex list.

    When both endpoints are the same existing vertex the result is the
    two-element list ``[src_node, dst_node]``, regardless of self-loops.

    Args:
        graph: Graph to search.
        src_node: Source vertex.
        dst_node: Destination vertex.

    Returns:
        ``[src_node, ..., dst_node]``, or an empty list when either endpoint
        is missing or `dst_node` is unreachable.
    """
    if not (graph.contains(src_node) and graph.contains(dst_node)):
        return []
    if src_node == dst_node:
        return [src_node, dst_node]

    _, pred = bfs(graph, src_node, dst_node)
    if dst_node not in pred:
        return []

    # Walk predecessor links back to the source.
    path = [dst_node]
    node = dst_node
    while node != src_node:
        node = pred[node]
        path.append(node)
    path.reverse()
    return path


def path_length(graph: AdjacencyView, src_node: VertexID, dst_node: VertexID) -> int:
    """Return the number of edges on a shortest path.

    A vertex is zero hops from itself. Missing endpoints and unreachable
    targets give `UNREACHABLE`.
    """
    if not graph.contains(dst_node):
        return UNREACHABLE
    costs, _ = bfs(graph, src_node, dst_node)
    return costs.get(dst_node, UNREACHABLE)


def has_path(graph: AdjacencyView, src_node: VertexID, dst_node: VertexID) -> bool:
    """Return True iff `get_path` would return a non-empty path."""
    return path_length(graph, src_node, dst_node) != UNREACHABLE
