"""
Single-source shortest path algorithms: Dijkstra, SPFA and Bellman-Ford.

Dijkstra's algorithm (label-setting) for graphs without negative edges.
SPFA, the FIFO-queue variant of Bellman-Ford (label-correcting), for graphs
that may contain negative edges; it detects negative cycles reachable from
the source. Round-based Bellman-Ford is kept for potential computation and
for cross-checking.

All distances are Python integers. Unreached vertices hold the configured
infinity sentinel (see :class:`wpaths.config.PathConfig`).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
    - Duan Fanding. "A faster algorithm for shortest-path (SPFA)", 1994.
"""

from collections import deque
from typing import List, Optional, Tuple

from ..config import PathConfig, resolve_config
from ..logging import get_logger
from .core import Graph
from .heap import DistanceHeap
from .types import Algorithm, PathResult, PathStatus
from .utils import reconstruct_path

logger = get_logger(__name__)


def _dijkstra_search(
    graph: Graph, source: int, target: Optional[int], infinity: int
) -> Tuple[List[int], List[Optional[int]]]:
    """
    Label-setting search from source.

    Stops as soon as ``target`` is popped with its final distance; runs to
    completion when ``target`` is None. The caller guarantees that no arc is
    negative.
    """
    dist = [infinity] * (graph.n + 1)
    parent: List[Optional[int]] = [None] * (graph.n + 1)
    dist[source] = 0

    heap = DistanceHeap()
    heap.push(source, 0)

    while True:
        entry = heap.pop_current(dist)
        if entry is None:
            break
        u, d = entry

        if u == target:
            break

        for edge in graph.adj[u]:
            new_dist = d + edge.weight
            if new_dist < dist[edge.to]:
                dist[edge.to] = new_dist
                parent[edge.to] = u
                heap.push(edge.to, new_dist)

    return dist, parent


def _finish(
    algorithm: Algorithm,
    source: int,
    target: int,
    dist: List[int],
    parent: List[Optional[int]],
    infinity: int,
) -> PathResult:
    if dist[target] == infinity:
        logger.info("No path exists from %d to %d", source, target)
        return PathResult(
            status=PathStatus.UNREACHABLE,
            source=source,
            target=target,
            algorithm=algorithm,
            message=f"Vertex {target} is not reachable from {source}",
        )

    path = reconstruct_path(parent, source, target)
    return PathResult(
        status=PathStatus.OK,
        source=source,
        target=target,
        path=path,
        distance=dist[target],
        algorithm=algorithm,
        message="Shortest path found",
    )


def dijkstra(
    graph: Graph,
    source: int,
    target: int,
    *,
    config: Optional[PathConfig] = None,
) -> PathResult:
    """
    Dijkstra's algorithm for a point-to-point shortest path.

    Args:
        graph: Graph without negative edge weights.
        source: Source vertex.
        target: Target vertex. The search stops once its distance is final.
        config: Numeric configuration; defaults to ``default_config()``.

    Returns:
        PathResult with status ``OK`` or ``UNREACHABLE``.

    Raises:
        ValueError: If source or target is not in graph.
        ValueError: If graph contains negative edge weights.
        ValueError: If the configured infinity is unsafe for graph.

    Complexity: O((V + E) log E) using a binary heap with lazy deletion.

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(1, 2, 1)
        >>> G.add_edge(2, 3, 2)
        >>> dijkstra(G, 1, 3).path
        [1, 2, 3]
    """
    source = graph._check_vertex(source)
    target = graph._check_vertex(target)

    # Early exit on the target is only correct without negative arcs
    if graph.has_negative_edge():
        u, v, weight = next(arc for arc in graph.edges() if arc[2] < 0)
        raise ValueError(
            f"Dijkstra requires non-negative weights. "
            f"Found negative weight {weight} on edge ({u}, {v})"
        )

    return _dijkstra_query(graph, source, target, config)


def _dijkstra_query(
    graph: Graph, source: int, target: int, config: Optional[PathConfig]
) -> PathResult:
    """Dijkstra query for callers that already ruled out negative arcs."""
    config = resolve_config(config)
    config.check_graph(graph)

    dist, parent = _dijkstra_search(graph, source, target, config.infinity)
    return _finish(Algorithm.DIJKSTRA, source, target, dist, parent, config.infinity)


def spfa(
    graph: Graph,
    source: int,
    target: int,
    *,
    config: Optional[PathConfig] = None,
) -> PathResult:
    """
    Shortest Path Faster Algorithm for graphs that may have negative weights.

    Vertices whose distance improved wait in a FIFO queue; a vertex is never
    queued twice at once. Every enqueue follows a genuine improvement, so a
    vertex enqueued more than ``n`` times lies on or behind an improving
    cycle, which must be a negative cycle reachable from source.

    Args:
        graph: Graph (may have negative weights).
        source: Source vertex.
        target: Target vertex.
        config: Numeric configuration; defaults to ``default_config()``.

    Returns:
        PathResult with status ``OK``, ``UNREACHABLE`` or
        ``NEGATIVE_CYCLE``. A negative cycle is reported even when the target
        is not on it, because no distance computed so far can be trusted.

    Raises:
        ValueError: If source or target is not in graph.
        ValueError: If the configured infinity is unsafe for graph.

    Complexity: O(VE) worst case.

    Example:
        >>> G = Graph(4)
        >>> G.add_edge(1, 2, 3)
        >>> G.add_edge(2, 3, -8)
        >>> G.add_edge(1, 3, 5)
        >>> G.add_edge(3, 4, 2)
        >>> spfa(G, 1, 4).distance
        -3
    """
    source = graph._check_vertex(source)
    target = graph._check_vertex(target)

    config = resolve_config(config)
    config.check_graph(graph)
    infinity = config.infinity
    n = graph.n

    dist = [infinity] * (n + 1)
    parent: List[Optional[int]] = [None] * (n + 1)
    in_queue = [False] * (n + 1)
    push_count = [0] * (n + 1)

    dist[source] = 0
    queue = deque([source])
    in_queue[source] = True
    push_count[source] = 1

    while queue:
        u = queue.popleft()
        in_queue[u] = False

        for edge in graph.adj[u]:
            v = edge.to
            new_dist = dist[u] + edge.weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u

                if not in_queue[v]:
                    queue.append(v)
                    in_queue[v] = True
                    push_count[v] += 1

                    if push_count[v] > n:
                        logger.info(
                            "Negative cycle detected: vertex %d enqueued %d times",
                            v,
                            push_count[v],
                        )
                        return PathResult(
                            status=PathStatus.NEGATIVE_CYCLE,
                            source=source,
                            target=target,
                            algorithm=Algorithm.SPFA,
                            message=f"Negative cycle reachable from {source}",
                        )

    return _finish(Algorithm.SPFA, source, target, dist, parent, infinity)


def _bellman_ford_rounds(
    graph: Graph, source: int, infinity: int
) -> Tuple[List[int], List[Optional[int]], bool]:
    dist = [infinity] * (graph.n + 1)
    parent: List[Optional[int]] = [None] * (graph.n + 1)
    dist[source] = 0

    edges = list(graph.edges())

    # Relax edges n-1 times, stopping early once a round changes nothing
    for _ in range(graph.n - 1):
        changed = False
        for u, v, weight in edges:
            if dist[u] != infinity and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u
                changed = True
        if not changed:
            break

    # One more round: any further improvement means a negative cycle
    has_negative_cycle = False
    for u, v, weight in edges:
        if dist[u] != infinity and dist[u] + weight < dist[v]:
            has_negative_cycle = True
            break

    return dist, parent, has_negative_cycle


def bellman_ford(
    graph: Graph,
    source: int,
    *,
    config: Optional[PathConfig] = None,
) -> Tuple[List[int], List[Optional[int]], bool]:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Computes shortest distances from source to every vertex, allowing
    negative edge weights. Detects negative cycles reachable from source.

    Args:
        graph: Graph (may have negative weights).
        source: Source vertex.
        config: Numeric configuration; defaults to ``default_config()``.

    Returns:
        Tuple of:
        - dist: List indexed by vertex id (index 0 unused); unreached
          vertices hold ``config.infinity``
        - parent: List indexed by vertex id; None for source and unreached
        - has_negative_cycle: True if a negative cycle reachable from source
          is detected, in which case dist is not meaningful

    Raises:
        ValueError: If source is not in graph.
        ValueError: If the configured infinity is unsafe for graph.

    Complexity: O(VE).
    """
    source = graph._check_vertex(source)

    config = resolve_config(config)
    config.check_graph(graph)

    return _bellman_ford_rounds(graph, source, config.infinity)
