"""wpaths - shortest paths on integer-weighted graphs with negative-cycle detection."""

__version__ = "0.1.0"

# Configuration
from .config import DEFAULT_INFINITY, PathConfig, default_config

# Diagnostics
from .diagnostics import (
    assert_valid_path,
    debug_context,
    is_debug_enabled,
    is_valid_path,
    path_weight,
    set_debug_enabled,
)

# Graph algorithms
from .graphs import (
    Algorithm,
    AllPairsResult,
    DistanceHeap,
    Edge,
    Graph,
    PathResult,
    PathStatus,
    bellman_ford,
    dijkstra,
    find_shortest_path,
    format_result,
    johnson,
    reconstruct_path,
    spfa,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Configuration
    "DEFAULT_INFINITY",
    "PathConfig",
    "default_config",
    # Diagnostics
    "path_weight",
    "is_valid_path",
    "assert_valid_path",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Graph algorithms
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
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
