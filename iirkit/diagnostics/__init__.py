"""Diagnostics and debugging utilities for iirkit."""

from .core import (
    assert_normalized_coefficients,
    assert_shape_preserved,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reload_debug_from_env,
    set_debug_enabled,
)

__all__ = [
    "assert_normalized_coefficients",
    "assert_shape_preserved",
    "is_debug_enabled",
    "set_debug_enabled",
    "reload_debug_from_env",
    "debug_context",
]
