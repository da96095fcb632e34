"""Path algorithms over `adtgraph` graphs.

`adtgraph.algorithms.bfs` holds the breadth-first shortest-path queries.
"""
