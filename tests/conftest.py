"""Shared graph fixtures.

Diagrams use arrows for directed edges; ``↺`` marks a self-loop.
"""

from __future__ import annotations

import pytest

from adtgraph import DiGraph


@pytest.fixture
def empty_graph():
    return DiGraph()


@pytest.fixture
def deli():
    #      ↺
    #     foo ───► bar ◄───► baloney ───► ham
    #
    g = DiGraph()
    for vertex in ("foo", "bar", "baloney", "ham"):
        g.add_vertex(vertex)
    g.add_edge("foo", "bar")
    g.add_edge("bar", "baloney")
    g.add_edge("baloney", "bar")
    g.add_edge("foo", "foo")
    g.add_edge("baloney", "ham")
    return g


@pytest.fixture
def diamond():
    #   ┌──► B ──┐
    #   │        ▼
    #   A        D ───► E
    #   │        ▲
    #   └──► C ──┘
    #
    g = DiGraph()
    g.add_edge("A", "B")
    g.add_edge("A", "C")
    g.add_edge("B", "D")
    g.add_edge("C", "D")
    g.add_edge("D", "E")
    return g


@pytest.fixture
def two_islands():
    # A ───► B      C ───► D
    g = DiGraph()
    g.add_edge("A", "B")
    g.add_edge("C", "D")
    return g
