"""
Switch for self-checking shortest-path results.

When enabled, ``find_shortest_path`` walks every returned path and confirms
that each hop is an edge of the graph and that the hop weights add up to the
reported distance. The initial value comes from ``WPATHS_DEBUG``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "WPATHS_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in ("1", "true", "yes", "on")


def is_debug_enabled() -> bool:
    """True when dispatched paths are verified before being returned."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn path verification on or off for the whole process.

    Overrides whatever ``WPATHS_DEBUG`` selected at import time.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Verify (or skip verifying) dispatched paths inside a ``with`` block.

    The previous setting is restored on exit, even if the block raises.

    Example
    -------
    >>> with debug_context(True):
    ...     find_shortest_path(G, 1, 5)  # doctest: +SKIP
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
