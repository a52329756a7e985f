"""
Status enumerations and result containers shared by the path algorithms.

Queries never abort on an expected outcome. Each algorithm returns a result
whose ``status`` tells the caller whether the distance and path (or the
distance matrix) are usable:

* ``OK``: a shortest distance was found.
* ``INVALID_VERTEX``: source or target outside ``[1, n]``; nothing was run.
* ``UNREACHABLE``: the target cannot be reached from the source.
* ``NEGATIVE_CYCLE``: a negative-weight cycle makes the distance unbounded.
  It takes priority over ``UNREACHABLE``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import numpy as np


class Algorithm(Enum):
    """Algorithm that produced a result."""

    DIJKSTRA = "dijkstra"
    SPFA = "spfa"
    JOHNSON = "johnson"


class PathStatus(Enum):
    """Outcome of a shortest-path query."""

    OK = "ok"
    INVALID_VERTEX = "invalid_vertex"
    UNREACHABLE = "unreachable"
    NEGATIVE_CYCLE = "negative_cycle"


@dataclass(frozen=True)
class PathResult:
    """
    Point-to-point query outcome.

    Attributes:
        status: Outcome of the query.
        source: Source vertex as requested.
        target: Target vertex as requested.
        path: Vertices from source to target inclusive, or ``None`` unless
            the status is ``OK``.
        distance: Total weight of ``path``, or ``None`` unless the status is
            ``OK``.
        algorithm: Algorithm that ran, or ``None`` if none did.
        message: Human-readable explanation of the status.
    """

    status: PathStatus
    source: int
    target: int
    path: Optional[List[int]] = None
    distance: Optional[int] = None
    algorithm: Optional[Algorithm] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is PathStatus.OK


@dataclass(frozen=True)
class AllPairsResult:
    """
    All-pairs query outcome.

    ``distances`` is 0-indexed: the distance from vertex ``u`` to vertex ``v``
    lives at ``distances[u - 1, v - 1]``. Unreachable pairs hold ``infinity``.
    Prefer :meth:`distance` which takes vertex ids directly.

    Attributes:
        status: ``OK`` or ``NEGATIVE_CYCLE``.
        distances: ``int64`` matrix of shape ``(n, n)``, or ``None`` when a
            negative cycle was found.
        potentials: ``int64`` vector ``h(1..n)`` used for reweighting, or
            ``None`` when a negative cycle was found.
        infinity: Sentinel stored for unreachable pairs.
        algorithm: Always ``Algorithm.JOHNSON``.
        message: Human-readable explanation of the status.
    """

    status: PathStatus
    distances: Optional[np.ndarray]
    potentials: Optional[np.ndarray]
    infinity: int
    algorithm: Algorithm = Algorithm.JOHNSON
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is PathStatus.OK

    def _require_matrix(self) -> np.ndarray:
        if self.distances is None:
            raise ValueError(f"No distance matrix available: {self.message or self.status.value}")
        return self.distances

    def distance(self, u: int, v: int) -> int:
        """Return the shortest distance from u to v, or ``infinity``."""
        matrix = self._require_matrix()
        n = matrix.shape[0]
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"Vertex pair ({u}, {v}) not in graph (expected 1..{n})")
        return int(matrix[u - 1, v - 1])

    def is_reachable(self, u: int, v: int) -> bool:
        return self.distance(u, v) != self.infinity
