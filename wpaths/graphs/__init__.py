"""
Graph algorithms package for wpaths.

This package provides shortest-path algorithms on integer-weighted graphs:
- Graph data structure (Graph, Edge)
- Binary min-heap with lazy deletion (DistanceHeap)
- Single-source shortest paths (Dijkstra, SPFA, Bellman-Ford)
- All-pairs shortest paths (Johnson's reweighting)
- Algorithm selection by edge-weight sign (find_shortest_path)

All algorithms are deterministic: adjacency lists keep insertion order and
heap ties are broken by vertex id.
"""

from .allpairs import johnson
from .core import Edge, Graph
from .dispatch import find_shortest_path
from .heap import DistanceHeap
from .shortest import bellman_ford, dijkstra, spfa
from .types import Algorithm, AllPairsResult, PathResult, PathStatus
from .utils import format_result, reconstruct_path

__all__ = [
    "Graph",
    "Edge",
    "DistanceHeap",
    "Algorithm",
    "PathStatus",
    "PathResult",
    "AllPairsResult",
    "dijkstra",
    "spfa",
    "bellman_ford",
    "johnson",
    "find_shortest_path",
    "reconstruct_path",
    "format_result",
]

# Example usage:
# from wpaths.graphs import Graph, find_shortest_path
#
# G = Graph(3, directed=True)
# G.add_edge(1, 2, 4)
# G.add_edge(2, 3, -2)
# result = find_shortest_path(G, 1, 3)  # SPFA, path [1, 2, 3], distance 2
