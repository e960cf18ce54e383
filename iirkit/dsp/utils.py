"""Utility functions for signal processing.

Provides helper routines for input validation, frequency analysis, and
numerical utilities.
"""

from typing import Tuple

import numpy as np


def check_1d_array(x) -> np.ndarray:
    """Validate and cast input to 1D float64 array.

    Empty input is accepted and returned as an empty array.

    Args:
        x: Input array-like object.

    Returns:
        1D float64 numpy array.

    Raises:
        ValueError: If input is not 1D, contains NaN, or contains Inf.
    """
    arr = np.asarray(x, dtype=float)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise ValueError(f"Expected 1D array, got {arr.ndim}D array")
    if np.any(np.isnan(arr)):
        raise ValueError("Input contains NaN values")
    if np.any(np.isinf(arr)):
        raise ValueError("Input contains Inf values")
    return arr


def next_pow2(n: int) -> int:
    """Return the next power-of-two >= n.

    Args:
        n: Positive integer.

    Returns:
        Smallest power-of-two >= n. Returns 1 if n <= 0.
    """
    if n <= 0:
        return 1
    if n & (n - 1) == 0:  # Already a power of 2
        return n
    return 1 << (n - 1).bit_length()


def freqz(
    b: np.ndarray, a: np.ndarray = np.array([1.0]), worN: int = 512, fs: float = 1.0
) -> Tuple[np.ndarray, np.ndarray]:
    """Compute frequency response of a digital filter.

    Evaluates H(e^jw) = B(e^jw) / A(e^jw) on `worN` equally spaced
    frequencies from 0 up to and including Nyquist.

    Args:
        b: Numerator coefficients.
        a: Denominator coefficients (default: [1.0] for FIR).
        worN: Number of frequency points (default: 512).
        fs: Sampling frequency in Hz (default: 1.0).

    Returns:
        Tuple (w, h) where:
        - w: Frequency array in Hz (0 to fs/2).
        - h: Complex frequency response H(e^(jw)).

    Raises:
        ValueError: If worN < 1 or fs <= 0.
    """
    if worN < 1:
        raise ValueError(f"worN must be positive, got {worN}")
    if fs <= 0:
        raise ValueError(f"Sampling frequency must be positive, got {fs}")

    b = check_1d_array(b)
    a = check_1d_array(a)

    omega = np.linspace(0.0, np.pi, worN)
    # z^-1 on the unit circle; coefficients are in ascending powers of z^-1
    z_inv = np.exp(-1j * omega)
    num = np.polyval(b[::-1], z_inv)
    den = np.polyval(a[::-1], z_inv)

    h = num / den
    w = omega * fs / (2.0 * np.pi)
    return w, h
