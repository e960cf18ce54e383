"""Recursive filtering suite.

This package provides:
- A discrete-time signal container
- IIR filtering through the difference equation (direct form, linear and
  circular delay lines) with automatic evaluator selection
- FFT-based convolution with overlap-add/overlap-save block processing
- A fixed-capacity ring buffer for delay lines
- Frequency response evaluation

All functions are deterministic and NumPy-first.
"""

from .conv import fft_convolve, overlap_add_filter, overlap_save_filter
from .iir import FilteringMode, IirFilter, normalize_coefficients
from .ring_buffer import RingBuffer
from .signal import DiscreteSignal
from .utils import check_1d_array, freqz, next_pow2

__all__ = [
    # Utils
    "check_1d_array",
    "next_pow2",
    "freqz",
    # Signal
    "DiscreteSignal",
    # Delay lines
    "RingBuffer",
    # Convolution
    "fft_convolve",
    "overlap_add_filter",
    "overlap_save_filter",
    # IIR
    "FilteringMode",
    "IirFilter",
    "normalize_coefficients",
]
