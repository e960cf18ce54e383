"""Tests for debug mode functionality and invariant checks."""

import numpy as np
import pytest

from iirkit.diagnostics import (
    assert_normalized_coefficients,
    assert_shape_preserved,
    debug_context,
    is_debug_enabled,
    reload_debug_from_env,
    set_debug_enabled,
)


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        # Back to previous (False in this block)
        assert not is_debug_enabled()

        set_debug_enabled(True)
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        # Back to True
        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)

        with debug_context(True):
            assert is_debug_enabled()

            with debug_context(False):
                assert not is_debug_enabled()

            assert is_debug_enabled()

        assert not is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_restores_on_error() -> None:
    """Test that the previous state is restored when the block raises."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        with pytest.raises(RuntimeError):
            with debug_context(True):
                raise RuntimeError("boom")
        assert not is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_assert_normalized_coefficients() -> None:
    """Test the normalization invariant check."""
    assert_normalized_coefficients(np.array([0.5]), np.array([1.0, -0.2]))

    with pytest.raises(ValueError, match="not normalized"):
        assert_normalized_coefficients(np.array([0.5]), np.array([2.0, -0.2]))

    with pytest.raises(ValueError, match="must not be empty"):
        assert_normalized_coefficients(np.array([]), np.array([1.0]))

    with pytest.raises(ValueError, match="non-finite"):
        assert_normalized_coefficients(np.array([np.nan]), np.array([1.0]))


def test_assert_shape_preserved() -> None:
    """Test the output shape check."""
    assert_shape_preserved(10, 10, 8000, 8000)

    with pytest.raises(ValueError, match="length"):
        assert_shape_preserved(10, 9, 8000, 8000)

    with pytest.raises(ValueError, match="sampling rate"):
        assert_shape_preserved(10, 10, 8000, 16000)


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("TRUE", True), (" on ", True), ("yes", True), ("0", False), ("off", False), ("", False)],
)
def test_reload_debug_from_env(monkeypatch, value, expected) -> None:
    """Test that IIRKIT_DEBUG is parsed case-insensitively."""
    original = is_debug_enabled()

    try:
        monkeypatch.setenv("IIRKIT_DEBUG", value)
        assert reload_debug_from_env() is expected
        assert is_debug_enabled() is expected
    finally:
        set_debug_enabled(original)


def test_reload_debug_from_env_unset(monkeypatch) -> None:
    """Test that an unset IIRKIT_DEBUG turns the checks off."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(True)
        monkeypatch.delenv("IIRKIT_DEBUG", raising=False)
        assert reload_debug_from_env() is False
    finally:
        set_debug_enabled(original)
