"""Graph primitives and helpers.

This package provides the directed graph type `DiGraph` and the `convert`
module for NetworkX interop.
"""

from adtgraph.graph.digraph import DiGraph, SuccessorView

__all__ = ["DiGraph", "SuccessorView"]
