"""
pathsearch: graph and terrain route finding.

FirstPath, Dijkstra and A* searches over labeled-point graphs and over
blocked/open terrain grids, sharing one node-state model and a
binary-heap priority queue.
"""

__version__ = "0.1.0"
