"""
Utility functions for graph algorithms.

Provides helpers for path reconstruction and for rendering query results.
"""

from typing import List, Optional, Sequence

from .types import PathResult, PathStatus


def reconstruct_path(
    parent: Sequence[Optional[int]], source: int, target: int
) -> Optional[List[int]]:
    """
    Reconstruct path from source to target using parent pointers.

    ``parent[v]`` is the previous vertex on the best known path to ``v``, or
    None for the source and for unreached vertices.

    Args:
        parent: Parent pointers indexed by vertex id.
        source: Source vertex of the search.
        target: Target vertex to reconstruct path to.

    Returns:
        List of vertices from source to target (inclusive), or None if the
        pointers do not lead back to source.

    Example:
        >>> reconstruct_path([None, None, 1, 2], 1, 3)
        [1, 2, 3]
    """
    path = [target]
    current = target
    # A valid parent chain visits each vertex at most once
    for _ in range(len(parent)):
        if current == source:
            path.reverse()
            return path
        previous = parent[current]
        if previous is None:
            return None
        path.append(previous)
        current = previous
    return None


def format_result(result: PathResult) -> List[str]:
    """
    Render a point-to-point result as human-readable lines.

    Example:
        >>> from wpaths.graphs.types import PathResult, PathStatus
        >>> format_result(PathResult(PathStatus.OK, 1, 3, [1, 2, 3], 4))
        ['Shortest path from 1 to 3: [1, 2, 3]', 'Total distance: 4']
    """
    if result.status is PathStatus.OK:
        return [
            f"Shortest path from {result.source} to {result.target}: {result.path}",
            f"Total distance: {result.distance}",
        ]
    if result.status is PathStatus.NEGATIVE_CYCLE:
        return ["Negative cycle detected"]
    if result.status is PathStatus.UNREACHABLE:
        return [f"No path exists from {result.source} to {result.target}"]
    return [f"Invalid vertices: {result.source}, {result.target}"]
