"""
Point-to-point shortest path with automatic algorithm selection.

Graphs without negative edges go to Dijkstra; anything else goes to SPFA,
which also detects negative cycles reachable from the source.
"""

from typing import Optional

from ..config import PathConfig
from ..diagnostics import assert_valid_path, is_debug_enabled
from ..logging import get_logger
from .core import Graph
from .shortest import _dijkstra_query, spfa
from .types import PathResult, PathStatus

logger = get_logger(__name__)


def find_shortest_path(
    graph: Graph,
    source: int,
    target: int,
    *,
    config: Optional[PathConfig] = None,
) -> PathResult:
    """
    Shortest path from source to target using the fastest correct algorithm.

    Out-of-range vertices are reported as ``INVALID_VERTEX`` without running
    anything. Otherwise the result of the chosen algorithm is returned as is.

    Args:
        graph: Graph to query; it must not be modified during the call.
        source: Source vertex.
        target: Target vertex.
        config: Numeric configuration; defaults to ``default_config()``.

    Returns:
        PathResult from Dijkstra or SPFA, or an ``INVALID_VERTEX`` result.

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(1, 2, 2)
        >>> G.add_edge(2, 3, 3)
        >>> find_shortest_path(G, 1, 3).distance
        5
        >>> find_shortest_path(G, 0, 3).status
        <PathStatus.INVALID_VERTEX: 'invalid_vertex'>
    """
    if not (graph.has_vertex(source) and graph.has_vertex(target)):
        logger.info("Invalid vertices: source=%r target=%r (n=%d)", source, target, graph.n)
        return PathResult(
            status=PathStatus.INVALID_VERTEX,
            source=source,
            target=target,
            message=f"Vertices must be in 1..{graph.n}",
        )

    source, target = int(source), int(target)

    if graph.has_negative_edge():
        if graph.directed:
            logger.debug("Graph has negative edges. Using SPFA algorithm")
        else:
            # Each undirected negative edge is a negative 2-cycle
            logger.debug("Using SPFA to find shortest path or detect negative cycles")
        result = spfa(graph, source, target, config=config)
    else:
        logger.debug("Graph has only non-negative edges. Using Dijkstra's algorithm")
        result = _dijkstra_query(graph, source, target, config)

    if is_debug_enabled():
        assert_valid_path(graph, result)

    return result

