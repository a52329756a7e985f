"""
Core graph data structure.

Provides a fixed-size, integer-weighted Graph with an adjacency-list
representation over vertices ``1..n``. Edges keep their insertion order and
parallel edges are stored independently, so every algorithm visits them in
a deterministic order.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from ..config import INT64_MAX, INT64_MIN


def _is_integer(x) -> bool:
    return not isinstance(x, bool) and isinstance(x, (int, np.integer))


@dataclass(frozen=True)
class Edge:
    """
    One directed arc in an adjacency list.

    Attributes:
        to: Head vertex id in ``[1, n]``.
        weight: Signed 64-bit integer weight; may be negative.
    """

    to: int
    weight: int


class Graph:
    """
    Weighted graph on vertices ``1..n`` with adjacency-list representation.

    Supports directed and undirected graphs. An undirected edge is stored as
    two directed arcs appended by the same ``add_edge`` call. The vertex set
    is fixed at construction and edges can only be appended.

    Attributes:
        n: Number of vertices.
        directed: If True, graph is directed; otherwise undirected.
        adj: Adjacency list indexed by vertex id (index 0 is unused).

    Complexity:
        - add_edge: O(1) amortized
        - neighbors: O(1)
        - has_negative_edge: O(E)
        - edges: O(V + E)
    """

    def __init__(self, n: int, directed: bool = True):
        """
        Initialize a graph with ``n`` isolated vertices.

        Args:
            n: Number of vertices; must be a positive integer.
            directed: If True, graph is directed; otherwise undirected.

        Raises:
            ValueError: If n is not a positive integer.
        """
        if not _is_integer(n) or n < 1:
            raise ValueError(f"Vertex count must be a positive integer, got {n!r}")

        self.n = int(n)
        self.directed = directed
        self.adj: List[List[Edge]] = [[] for _ in range(self.n + 1)]
        self.num_edges = 0
        self.max_abs_weight = 0

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph(n={self.n}, {kind}, arcs={self.num_edges})"

    def has_vertex(self, v: int) -> bool:
        return _is_integer(v) and 1 <= v <= self.n

    def _check_vertex(self, v: int) -> int:
        if not self.has_vertex(v):
            raise ValueError(f"Vertex {v!r} not in graph (expected 1..{self.n})")
        return int(v)

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """
        Append an edge from u to v.

        For undirected graphs, also appends the arc from v to u with the same
        weight. Parallel edges and self loops are kept as given.

        Args:
            u: Tail vertex.
            v: Head vertex.
            weight: Integer weight in the signed 64-bit range.

        Raises:
            ValueError: If u or v is outside ``[1, n]`` or the weight does
                not fit in 64 bits.
            TypeError: If weight is not an integer.
        """
        u = self._check_vertex(u)
        v = self._check_vertex(v)
        if not _is_integer(weight):
            raise TypeError(f"Edge weight must be an int, got {type(weight).__name__}")
        weight = int(weight)
        if not INT64_MIN <= weight <= INT64_MAX:
            raise ValueError(f"Edge weight {weight} does not fit in a signed 64-bit integer")

        self.adj[u].append(Edge(v, weight))
        self.num_edges += 1
        if not self.directed:
            self.adj[v].append(Edge(u, weight))
            self.num_edges += 1

        self.max_abs_weight = max(self.max_abs_weight, abs(weight))

    def has_negative_edge(self) -> bool:
        """
        Return True if any stored arc has a strictly negative weight.
        """
        for u in self.vertices():
            for edge in self.adj[u]:
                if edge.weight < 0:
                    return True
        return False

    def vertices(self) -> range:
        return range(1, self.n + 1)

    def neighbors(self, u: int) -> List[Edge]:
        """
        Return the outgoing arcs of u in insertion order.

        Raises:
            ValueError: If u is not in graph.
        """
        self._check_vertex(u)
        return self.adj[u]

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        """
        Yield every stored arc as ``(u, v, weight)``.

        Arcs come out by tail vertex, then insertion order. Undirected edges
        therefore appear once per direction.
        """
        for u in self.vertices():
            for edge in self.adj[u]:
                yield u, edge.to, edge.weight
