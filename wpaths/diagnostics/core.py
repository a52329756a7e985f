"""Core diagnostic functions for shortest-path results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    from ..graphs.core import Graph
    from ..graphs.types import PathResult


def path_weight(graph: Graph, path: Sequence[int]) -> int:
    """
    Compute the weight of a vertex sequence in a graph.

    Consecutive vertices may be joined by parallel arcs; the lightest one is
    used, since that is the arc any shortest path would take.

    Parameters
    ----------
    graph:
        Graph the path was computed on.
    path:
        Non-empty sequence of vertex ids.

    Returns
    -------
    int
        Sum of the arc weights along the path (0 for a single vertex).

    Raises
    ------
    ValueError
        If the path is empty or two consecutive vertices are not joined by
        an arc.
    """
    if not path:
        raise ValueError("path_weight expects a non-empty path.")

    total = 0
    for u, v in zip(path, path[1:]):
        weights = [edge.weight for edge in graph.neighbors(u) if edge.to == v]
        if not weights:
            raise ValueError(f"No edge ({u}, {v}) in graph.")
        total += min(weights)
    return total


def is_valid_path(graph: Graph, result: PathResult) -> bool:
    """
    Check that a successful result's path matches its distance.

    The path must start at the source, end at the target, follow existing
    arcs, and its weight must equal the reported distance. Results that are
    not ``OK`` are valid only if they carry no path and no distance.
    """
    if not result.ok:
        return result.path is None and result.distance is None

    path = result.path
    if not path or path[0] != result.source or path[-1] != result.target:
        return False
    try:
        return path_weight(graph, path) == result.distance
    except ValueError:
        return False


def assert_valid_path(graph: Graph, result: PathResult) -> None:
    """
    Assert that a result satisfies :func:`is_valid_path`.

    Raises
    ------
    ValueError
        If the path does not match the graph or the reported distance.
    """
    if not is_valid_path(graph, result):
        raise ValueError(
            f"Inconsistent {result.status.value} result from {result.source} to "
            f"{result.target}: path={result.path}, distance={result.distance}"
        )
