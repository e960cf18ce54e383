"""Numeric constants shared by the filtering code."""

# If len(a) + len(b) exceeds this value, FilteringMode.AUTO switches from the
# direct form to the circular-buffer evaluator.
FILTER_SIZE_FOR_OPTIMIZED_PROCESSING = 64

# Number of taps of the truncated impulse response.
DEFAULT_IMPULSE_RESPONSE_LENGTH = 512

# |a[0]| below this is treated as zero; |a[0] - 1| below this as normalized.
NORMALIZATION_EPS = 1e-12

# Minimum block length for overlap-add / overlap-save filtering.
DEFAULT_BLOCK_LENGTH = 1024
