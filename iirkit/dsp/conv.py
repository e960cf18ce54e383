"""FFT-based convolution and block filtering.

Provides the frequency-domain building blocks used to apply a truncated
impulse response: one-shot FFT convolution plus overlap-add and
overlap-save block processing. Block filters are causal and return exactly
as many samples as they were given, i.e. the first ``len(x)`` samples of
the linear convolution ``x * h``.
"""

from typing import Optional

import numpy as np

from ..config import DEFAULT_BLOCK_LENGTH
from .utils import check_1d_array, next_pow2


def fft_convolve(x: np.ndarray, h: np.ndarray, n_fft: Optional[int] = None) -> np.ndarray:
    """Full linear convolution computed via zero-padded FFTs.

    Args:
        x: First input signal (1D array).
        h: Second input signal (impulse response, 1D array).
        n_fft: FFT size (default: next power-of-two >= len(x) + len(h) - 1).

    Returns:
        Convolved signal of length len(x) + len(h) - 1 (empty if either input
        is empty).

    Raises:
        ValueError: If n_fft is too small for a linear convolution.
    """
    x = check_1d_array(x)
    h = check_1d_array(h)

    if len(x) == 0 or len(h) == 0:
        return np.zeros(0, dtype=float)

    out_len = len(x) + len(h) - 1

    if n_fft is None:
        n_fft = next_pow2(out_len)
    elif n_fft < out_len:
        raise ValueError(f"n_fft ({n_fft}) must be >= len(x) + len(h) - 1 ({out_len})")

    X = np.fft.rfft(x, n=n_fft)
    H = np.fft.rfft(h, n=n_fft)
    y = np.fft.irfft(X * H, n=n_fft)

    return y[:out_len]


def _check_block_args(x, h, block_len: Optional[int]):
    x = check_1d_array(x)
    h = check_1d_array(h)

    if len(h) == 0:
        raise ValueError("Impulse response must not be empty")
    if block_len is not None and block_len < 1:
        raise ValueError(f"Block length must be positive, got {block_len}")
    return x, h


def _default_block_len(len_h: int) -> int:
    return max(DEFAULT_BLOCK_LENGTH, next_pow2(len_h))


def overlap_add_filter(
    x: np.ndarray, h: np.ndarray, block_len: Optional[int] = None
) -> np.ndarray:
    """Overlap-add method for block-based filtering.

    Splits the input into non-overlapping blocks, convolves each with `h`
    and adds the overlapping tails into the output.

    Args:
        x: Input signal (1D array).
        h: Filter impulse response (1D array, non-empty).
        block_len: Block length (default: max(DEFAULT_BLOCK_LENGTH, next_pow2(len(h)))).

    Returns:
        Filtered signal (same length as input).
    """
    x, h = _check_block_args(x, h, block_len)
    return _overlap_add(x, h, block_len)


def _overlap_add(x: np.ndarray, h: np.ndarray, block_len: Optional[int]) -> np.ndarray:
    # No finiteness check: an unstable filter's impulse response may hold Inf
    if len(x) == 0:
        return np.zeros(0, dtype=float)

    len_h = len(h)
    if block_len is None:
        block_len = _default_block_len(len_h)

    n_fft = next_pow2(block_len + len_h - 1)
    H = np.fft.rfft(h, n=n_fft)

    output = np.zeros(len(x) + len_h - 1, dtype=float)

    for start in range(0, len(x), block_len):
        block = x[start : start + block_len]
        filtered = np.fft.irfft(np.fft.rfft(block, n=n_fft) * H, n=n_fft)
        seg_len = len(block) + len_h - 1
        output[start : start + seg_len] += filtered[:seg_len]

    return output[: len(x)]


def overlap_save_filter(
    x: np.ndarray, h: np.ndarray, block_len: Optional[int] = None
) -> np.ndarray:
    """Overlap-save method for block-based filtering.

    Slides an FFT frame over the input in steps of ``n_fft - len(h) + 1``
    samples; each frame's circular convolution is exact after its first
    ``len(h) - 1`` samples, which are discarded.

    Args:
        x: Input signal (1D array).
        h: Filter impulse response (1D array, non-empty).
        block_len: Minimum number of valid output samples per frame
            (default: max(DEFAULT_BLOCK_LENGTH, next_pow2(len(h)))).

    Returns:
        Filtered signal (same length as input).
    """
    x, h = _check_block_args(x, h, block_len)
    return _overlap_save(x, h, block_len)


def _overlap_save(x: np.ndarray, h: np.ndarray, block_len: Optional[int]) -> np.ndarray:
    if len(x) == 0:
        return np.zeros(0, dtype=float)

    len_h = len(h)
    if block_len is None:
        block_len = _default_block_len(len_h)

    overlap = len_h - 1
    n_fft = next_pow2(block_len + overlap)
    step = n_fft - overlap
    H = np.fft.rfft(h, n=n_fft)

    # Leading zeros stand in for the history before the first sample
    x_padded = np.zeros(overlap + len(x) + n_fft, dtype=float)
    x_padded[overlap : overlap + len(x)] = x

    output = np.zeros(len(x), dtype=float)

    for start in range(0, len(x), step):
        frame = x_padded[start : start + n_fft]
        filtered = np.fft.irfft(np.fft.rfft(frame) * H, n=n_fft)
        count = min(step, len(x) - start)
        output[start : start + count] = filtered[overlap : overlap + count]

    return output
