"""Base type aliases and constants shared across adtgraph."""

from __future__ import annotations

import sys
from typing import Dict, Hashable, List, Optional, TypeVar

#: Vertex type variable. Vertices only need equality and hashing.
V = TypeVar("V", bound=Hashable)

#: Identifier of any vertex, used where the generic parameter is not needed.
VertexID = Hashable

#: Ordered sequence of vertices from source to destination.
PathList = List[VertexID]

#: Hop count from the BFS source to each discovered vertex.
CostMap = Dict[VertexID, int]

#: Discovering predecessor of each discovered vertex; the source maps to None.
PredMap = Dict[VertexID, Optional[VertexID]]

#: Path length reported when no path exists.
UNREACHABLE: int = sys.maxsize
