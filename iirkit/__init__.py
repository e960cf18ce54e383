"""iirkit - recursive digital filters evaluated in the time domain."""

__version__ = "0.1.0"

from .config import (
    DEFAULT_IMPULSE_RESPONSE_LENGTH,
    FILTER_SIZE_FOR_OPTIMIZED_PROCESSING,
    NORMALIZATION_EPS,
)

# Diagnostics
from .diagnostics import (
    assert_normalized_coefficients,
    assert_shape_preserved,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Signal processing
from .dsp import (
    DiscreteSignal,
    FilteringMode,
    IirFilter,
    RingBuffer,
    check_1d_array,
    fft_convolve,
    freqz,
    next_pow2,
    normalize_coefficients,
    overlap_add_filter,
    overlap_save_filter,
)
from .errors import InvalidCoefficientsError, IirkitError, UnsupportedModeError
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Config
    "DEFAULT_IMPULSE_RESPONSE_LENGTH",
    "FILTER_SIZE_FOR_OPTIMIZED_PROCESSING",
    "NORMALIZATION_EPS",
    # Errors
    "IirkitError",
    "InvalidCoefficientsError",
    "UnsupportedModeError",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Diagnostics
    "assert_normalized_coefficients",
    "assert_shape_preserved",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # DSP
    "DiscreteSignal",
    "FilteringMode",
    "IirFilter",
    "RingBuffer",
    "normalize_coefficients",
    "check_1d_array",
    "next_pow2",
    "freqz",
    "fft_convolve",
    "overlap_add_filter",
    "overlap_save_filter",
]
