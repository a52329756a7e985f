"""
All-pairs shortest path algorithms: Johnson's reweighting.

Johnson's algorithm handles negative edge weights by computing one
potential per vertex with Bellman-Ford from a virtual source, reweighting
every edge to be non-negative, and then running Dijkstra from every vertex.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.3 (Johnson's algorithm).
"""

from typing import Optional

import numpy as np

from ..config import PathConfig, resolve_config
from ..logging import get_logger
from .core import Graph
from .shortest import _bellman_ford_rounds, _dijkstra_search
from .types import AllPairsResult, PathStatus

logger = get_logger(__name__)


def johnson(graph: Graph, *, config: Optional[PathConfig] = None) -> AllPairsResult:
    """
    Johnson's algorithm for all-pairs shortest paths.

    Steps:
        1. Add a virtual vertex ``n + 1`` with a zero-weight arc to every
           vertex.
        2. Run Bellman-Ford from it to get potentials ``h``; abort if any
           negative cycle exists anywhere in the graph.
        3. Reweight ``w'(u, v) = w(u, v) + h(u) - h(v)``, which is
           non-negative for every arc.
        4. Run Dijkstra to completion from every vertex on the reweighted
           graph.
        5. Undo the reweighting: ``d(u, v) = d'(u, v) - h(u) + h(v)``.

    Args:
        graph: Graph (may have negative weights).
        config: Numeric configuration; defaults to ``default_config()``.

    Returns:
        AllPairsResult with an ``(n, n)`` ``int64`` distance matrix, or status
        ``NEGATIVE_CYCLE`` and no matrix.

    Raises:
        ValueError: If the configured infinity is unsafe for graph.

    Complexity: O(VE) for the potentials plus O(V (V + E) log E) for the
    Dijkstra runs.

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(1, 2, 4)
        >>> G.add_edge(2, 3, -2)
        >>> johnson(G).distance(1, 3)
        2
    """
    config = resolve_config(config)
    config.check_graph(graph)
    n = graph.n

    augmented = Graph(n + 1, directed=True)
    for u, v, weight in graph.edges():
        augmented.add_edge(u, v, weight)
    virtual = n + 1
    for v in graph.vertices():
        augmented.add_edge(virtual, v, 0)

    h, _, has_negative_cycle = _bellman_ford_rounds(augmented, virtual, config.infinity)
    if has_negative_cycle:
        logger.info("Negative cycle detected while computing potentials")
        return AllPairsResult(
            status=PathStatus.NEGATIVE_CYCLE,
            distances=None,
            potentials=None,
            infinity=config.infinity,
            message="Graph contains a negative weight cycle",
        )

    reweighted = Graph(n, directed=True)
    for u, v, weight in graph.edges():
        reweighted.add_edge(u, v, weight + h[u] - h[v])

    if reweighted.has_negative_edge():
        raise RuntimeError("Reweighting produced a negative edge; potentials are inconsistent")

    logger.debug("Potentials for %d vertices: %s", n, h[1 : n + 1])

    # Reweighted distances can exceed config.infinity, so the inner searches
    # use their own sentinel above any simple path in the reweighted graph
    inner_infinity = n * reweighted.max_abs_weight + 1

    distances = np.full((n, n), config.infinity, dtype=np.int64)
    for u in graph.vertices():
        reweighted_dist, _ = _dijkstra_search(reweighted, u, None, inner_infinity)
        for v in graph.vertices():
            if reweighted_dist[v] != inner_infinity:
                distances[u - 1, v - 1] = reweighted_dist[v] - h[u] + h[v]

    return AllPairsResult(
        status=PathStatus.OK,
        distances=distances,
        potentials=np.array(h[1 : n + 1], dtype=np.int64),
        infinity=config.infinity,
        message="All-pairs shortest paths computed",
    )
