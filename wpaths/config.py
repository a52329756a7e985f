"""
Numeric configuration for the shortest-path engine.

Distances are Python integers while a query runs, but the all-pairs matrix is
stored as ``int64`` and every algorithm marks unreached vertices with a finite
"infinity" sentinel. ``PathConfig`` owns that sentinel and checks it against a
graph before a query: no simple path may reach it, and adding any edge weight
to it must stay inside the signed 64-bit range.

The default sentinel is ``10**18`` and can be overridden process-wide with the
``WPATHS_INFINITY`` environment variable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    from .graphs.core import Graph

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

DEFAULT_INFINITY = 10**18

_INFINITY_ENV_VAR = "WPATHS_INFINITY"


@dataclass(frozen=True)
class PathConfig:
    """
    Configuration shared by all shortest-path algorithms.

    Attributes:
        infinity: Sentinel distance for unreached vertices.
    """

    infinity: int = DEFAULT_INFINITY

    def __post_init__(self) -> None:
        """Validate PathConfig invariants."""
        if isinstance(self.infinity, bool) or not isinstance(self.infinity, (int, np.integer)):
            raise TypeError(f"infinity must be an int, got {type(self.infinity).__name__}.")
        object.__setattr__(self, "infinity", int(self.infinity))

        if self.infinity <= 0:
            raise ValueError(f"infinity must be positive, got {self.infinity}.")

        if self.infinity > INT64_MAX:
            raise ValueError(
                f"infinity must fit in a signed 64-bit integer, got {self.infinity}."
            )

    @classmethod
    def for_weights(cls, n: int, max_abs_weight: int) -> "PathConfig":
        """
        Build the smallest safe configuration for ``n`` vertices whose edge
        weights never exceed ``max_abs_weight`` in magnitude.

        Example:
            >>> PathConfig.for_weights(5, 10).infinity
            51
        """
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}.")
        if max_abs_weight < 0:
            raise ValueError(f"max_abs_weight must be >= 0, got {max_abs_weight}.")
        return cls(infinity=n * max_abs_weight + 1)

    def check_graph(self, graph: "Graph") -> None:
        """
        Raise ``ValueError`` if the sentinel is unsafe for ``graph``.

        A simple path has at most ``n - 1`` edges, so every real distance is
        bounded by ``(n - 1) * max_abs_weight`` in magnitude.
        """
        bound = (graph.n - 1) * graph.max_abs_weight
        if bound >= self.infinity:
            raise ValueError(
                f"infinity={self.infinity} is too small for a graph with "
                f"{graph.n} vertices and max |weight| {graph.max_abs_weight}; "
                f"use at least {bound + 1}."
            )
        if self.infinity + graph.max_abs_weight > INT64_MAX:
            raise ValueError(
                f"infinity={self.infinity} plus max |weight| "
                f"{graph.max_abs_weight} overflows int64."
            )


def default_config() -> PathConfig:
    """Return the process default, honoring ``WPATHS_INFINITY`` when set."""
    raw = os.getenv(_INFINITY_ENV_VAR)
    if raw is None or not raw.strip():
        return PathConfig()
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(
            f"{_INFINITY_ENV_VAR} must be an integer, got {raw!r}."
        ) from exc
    return PathConfig(infinity=value)


def resolve_config(config: Optional[PathConfig]) -> PathConfig:
    return config if config is not None else default_config()


__all__ = [
    "DEFAULT_INFINITY",
    "INT64_MAX",
    "INT64_MIN",
    "PathConfig",
    "default_config",
    "resolve_config",
]
