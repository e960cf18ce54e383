"""Tests for dsp.utils module."""

import numpy as np
import pytest

from iirkit.dsp.utils import check_1d_array, freqz, next_pow2


def test_next_pow2():
    """Test next_pow2 function."""
    assert next_pow2(1) == 1
    assert next_pow2(2) == 2
    assert next_pow2(3) == 4
    assert next_pow2(4) == 4
    assert next_pow2(5) == 8
    assert next_pow2(15) == 16
    assert next_pow2(16) == 16
    assert next_pow2(17) == 32
    assert next_pow2(0) == 1
    assert next_pow2(-1) == 1


def test_check_1d_array():
    """Test check_1d_array validation."""
    # Valid 1D array
    x = np.array([1.0, 2.0, 3.0])
    result = check_1d_array(x)
    assert result.ndim == 1
    assert result.dtype == float
    np.testing.assert_array_equal(result, x)

    # Integer list is cast to float
    result = check_1d_array([1, 2, 3])
    assert result.dtype == float

    # Scalar
    result = check_1d_array(5.0)
    assert result.ndim == 1
    assert len(result) == 1

    # Empty input is allowed
    assert len(check_1d_array([])) == 0

    # 2D array should raise
    with pytest.raises(ValueError, match="Expected 1D array"):
        check_1d_array(np.array([[1.0, 2.0], [3.0, 4.0]]))

    # NaN should raise
    with pytest.raises(ValueError, match="NaN"):
        check_1d_array(np.array([1.0, np.nan, 3.0]))

    # Inf should raise
    with pytest.raises(ValueError, match="Inf"):
        check_1d_array(np.array([1.0, np.inf, 3.0]))


def test_freqz_fir():
    """Test freqz for FIR filter."""
    b = np.array([1.0, 0.5])

    w, h = freqz(b, worN=64, fs=1.0)

    assert len(w) == 64
    assert len(h) == 64
    assert np.allclose(w[0], 0.0)
    assert np.allclose(w[-1], 0.5)  # Nyquist

    # DC response is the sum of coefficients, Nyquist the alternating sum
    assert abs(h[0] - 1.5) < 1e-10
    assert abs(h[-1] - 0.5) < 1e-10


def test_freqz_iir():
    """Test freqz for IIR filter."""
    b = np.array([1.0])
    a = np.array([1.0, -0.5])

    w, h = freqz(b, a, worN=256, fs=2.0)

    assert w[-1] == pytest.approx(1.0)
    assert abs(h[0] - 2.0) < 1e-10
    assert abs(h[-1] - 2.0 / 3.0) < 1e-10
    # Lowpass magnitude decreases monotonically
    assert np.all(np.diff(np.abs(h)) <= 1e-12)


def test_freqz_invalid_arguments():
    """Test freqz argument validation."""
    with pytest.raises(ValueError, match="worN must be positive"):
        freqz([1.0], worN=0)
    with pytest.raises(ValueError, match="Sampling frequency must be positive"):
        freqz([1.0], fs=0.0)
