"""Shared typing constructs for adtgraph.

Type aliases and constants used by the graph store and the path algorithms.
Contains no runtime logic.
"""

from adtgraph.types.base import UNREACHABLE, CostMap, PathList, PredMap, V, VertexID

__all__ = [
    "V",
    "VertexID",
    "PathList",
    "CostMap",
    "PredMap",
    "UNREACHABLE",
]
