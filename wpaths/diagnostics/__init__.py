"""Diagnostics and debugging utilities for wpaths."""

from .core import (
    assert_valid_path,
    is_valid_path,
    path_weight,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "path_weight",
    "is_valid_path",
    "assert_valid_path",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
