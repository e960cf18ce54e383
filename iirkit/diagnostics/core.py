"""Invariant checks for filter coefficients and filtered signals."""

from __future__ import annotations

import numpy as np


def assert_normalized_coefficients(
    b: np.ndarray,
    a: np.ndarray,
    atol: float = 1e-12,
) -> None:
    """
    Assert that a coefficient pair satisfies the normalization invariant.

    Parameters
    ----------
    b:
        Numerator coefficients.
    a:
        Denominator coefficients.
    atol:
        Absolute tolerance for |a[0] - 1|.

    Raises
    ------
    ValueError
        If either array is empty or non-finite, or a[0] is not 1 within
        the tolerance.
    """
    if len(b) == 0 or len(a) == 0:
        raise ValueError("Coefficient arrays must not be empty.")

    if not (np.all(np.isfinite(b)) and np.all(np.isfinite(a))):
        raise ValueError("Coefficients contain non-finite values.")

    if abs(a[0] - 1.0) >= atol:
        raise ValueError(
            f"Leading denominator coefficient is not normalized within "
            f"tolerance {atol}: a[0] = {a[0]!r}"
        )


def assert_shape_preserved(
    n_in: int,
    n_out: int,
    rate_in: int,
    rate_out: int,
) -> None:
    """
    Assert that filtering kept the sample count and sampling rate.

    Raises
    ------
    ValueError
        If the lengths or sampling rates differ.
    """
    if n_in != n_out:
        raise ValueError(f"Output length {n_out} differs from input length {n_in}.")
    if rate_in != rate_out:
        raise ValueError(
            f"Output sampling rate {rate_out} differs from input sampling rate {rate_in}."
        )
