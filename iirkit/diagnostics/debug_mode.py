"""Debug switch for the filter invariant checks.

With debug mode on, :class:`iirkit.dsp.iir.IirFilter` re-verifies its
coefficients after construction and after every ``change_coefficients``
call (both arrays finite and non-empty, ``a[0] == 1`` within
``NORMALIZATION_EPS``), and ``apply_to`` checks that the output keeps the
input's length and sampling rate. The checks cost an extra pass over the
coefficients per assignment and nothing per sample, so they are off by
default.

The initial state comes from the ``IIRKIT_DEBUG`` environment variable
(``1``, ``true``, ``yes`` or ``on``, case-insensitive). Run a test session
with all checks on::

    IIRKIT_DEBUG=1 pytest tests/
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "IIRKIT_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")


def _parse_debug_flag(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


_debug_enabled: bool = _parse_debug_flag(os.getenv(_DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """
    Return whether the filter invariant checks are currently enabled.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable the filter invariant checks.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def reload_debug_from_env() -> bool:
    """
    Re-read IIRKIT_DEBUG and apply it, overriding set_debug_enabled(...).

    Returns
    -------
    bool
        The new debug state.
    """
    set_debug_enabled(_parse_debug_flag(os.getenv(_DEBUG_ENV_VAR)))
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable the filter invariant checks.

    The previous state is restored on exit, also when the block raises.

    Example
    -------
    >>> from iirkit.dsp import DiscreteSignal, IirFilter
    >>> with debug_context(True):
    ...     lowpass = IirFilter(b=[0.2], a=[1.0, -0.8])   # coefficients checked here
    ...     lowpass.change_coefficients(a=[2.0, -1.6])    # and again here
    ...     y = lowpass.apply_to(DiscreteSignal(8000, [1.0, 0.0, 0.0]))
    >>> len(y)
    3
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
