"""Tests for dsp.signal module."""

import numpy as np
import pytest

from iirkit.dsp.signal import DiscreteSignal


def test_construction_copies_samples():
    """Test that the signal owns a copy of its samples."""
    data = np.array([1.0, 2.0, 3.0])
    sig = DiscreteSignal(8000, data)

    data[0] = 99.0
    np.testing.assert_array_equal(sig.samples, [1.0, 2.0, 3.0])
    assert sig.sampling_rate == 8000
    assert len(sig) == 3


def test_samples_read_only():
    """Test that samples cannot be written in place."""
    sig = DiscreteSignal(8000, [1.0, 2.0])
    with pytest.raises(ValueError):
        sig.samples[0] = 5.0


def test_copy():
    """Test that copy returns an equal but independent signal."""
    sig = DiscreteSignal(22050, [0.5, -0.5])
    dup = sig.copy()

    assert dup == sig
    assert dup is not sig
    assert dup.samples is not sig.samples


def test_equality():
    """Test value equality."""
    assert DiscreteSignal(100, [1.0]) == DiscreteSignal(100, [1.0])
    assert DiscreteSignal(100, [1.0]) != DiscreteSignal(200, [1.0])
    assert DiscreteSignal(100, [1.0]) != DiscreteSignal(100, [1.0, 0.0])


def test_duration():
    """Test duration in seconds."""
    assert DiscreteSignal(1000, np.zeros(250)).duration == pytest.approx(0.25)
    assert DiscreteSignal(1000, []).duration == 0.0


def test_empty_signal():
    """Test that an empty signal is valid."""
    sig = DiscreteSignal(44100, [])
    assert len(sig) == 0
    assert sig.samples.dtype == float


def test_invalid_sampling_rate():
    """Test sampling rate validation."""
    with pytest.raises(ValueError, match="must be positive"):
        DiscreteSignal(0, [1.0])
    with pytest.raises(ValueError, match="must be positive"):
        DiscreteSignal(-8000, [1.0])
    with pytest.raises(ValueError, match="must be an integer"):
        DiscreteSignal(8000.5, [1.0])


def test_invalid_samples():
    """Test sample validation."""
    with pytest.raises(ValueError, match="NaN"):
        DiscreteSignal(8000, [1.0, np.nan])
    with pytest.raises(ValueError, match="Expected 1D array"):
        DiscreteSignal(8000, np.zeros((2, 2)))


def test_frozen():
    """Test that attributes cannot be reassigned."""
    sig = DiscreteSignal(8000, [1.0])
    with pytest.raises(AttributeError):
        sig.sampling_rate = 16000
