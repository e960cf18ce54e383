"""IIR filtering via the difference equation.

Implements :class:`IirFilter`, which applies a rational transfer function

    H(z) = (b[0] + b[1] z^-1 + ... ) / (a[0] + a[1] z^-1 + ... )

to a finite :class:`~iirkit.dsp.signal.DiscreteSignal` with the recurrence

    y[n] = sum_k b[k] x[n-k] - sum_{m>=1} a[m] y[n-m]

Three time-domain evaluators produce the same result up to floating-point
reordering:

- direct form: the recurrence over whole input/output arrays;
- linear buffer: shifting delay registers (reference baseline);
- circular buffer: wrap-around delay lines, O(1) buffer upkeep per sample.

``apply_to`` picks one according to a :class:`FilteringMode`. The
frequency-domain modes convolve with the truncated impulse response instead.
No delay-line state is kept between calls.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Tuple, Union

import numpy as np

from ..config import (
    DEFAULT_IMPULSE_RESPONSE_LENGTH,
    FILTER_SIZE_FOR_OPTIMIZED_PROCESSING,
    NORMALIZATION_EPS,
)
from ..diagnostics import (
    assert_normalized_coefficients,
    assert_shape_preserved,
    is_debug_enabled,
)
from ..errors import InvalidCoefficientsError, UnsupportedModeError
from ..logging import get_logger
from .conv import _overlap_add, _overlap_save
from .ring_buffer import RingBuffer
from .signal import DiscreteSignal
from .utils import check_1d_array, freqz

logger = get_logger(__name__)


class FilteringMode(Enum):
    """How :meth:`IirFilter.apply_to` evaluates the filter."""

    AUTO = "auto"
    DIFFERENCE_EQUATION = "difference_equation"
    OVERLAP_ADD = "overlap_add"
    OVERLAP_SAVE = "overlap_save"


ModeLike = Union[FilteringMode, str]


def _as_coefficients(values, name: str) -> np.ndarray:
    try:
        arr = check_1d_array(values)
    except ValueError as exc:
        raise InvalidCoefficientsError(f"Invalid {name} coefficients: {exc}") from exc
    if len(arr) == 0:
        raise InvalidCoefficientsError(f"{name} coefficients must not be empty")
    return arr.copy()


def normalize_coefficients(b, a) -> Tuple[np.ndarray, np.ndarray]:
    """Scale a coefficient pair so that ``a[0] == 1``.

    Both arrays are divided by the original ``a[0]``. If ``a[0]`` is already
    1 within NORMALIZATION_EPS the values are returned unchanged. The inputs
    are never modified; new arrays are always returned.

    Args:
        b: Numerator coefficients.
        a: Denominator coefficients.

    Returns:
        Tuple (b, a) of normalized float64 arrays.

    Raises:
        InvalidCoefficientsError: If either sequence is empty, not 1D or
            non-finite, if |a[0]| < NORMALIZATION_EPS, or if dividing by
            a[0] overflows.
    """
    b = _as_coefficients(b, "b")
    a = _as_coefficients(a, "a")

    first = a[0]

    if abs(first) < NORMALIZATION_EPS:
        raise InvalidCoefficientsError("The first a coefficient can not be zero")

    if abs(first - 1.0) < NORMALIZATION_EPS:
        return b, a

    logger.debug("Normalizing coefficients by a[0] = %r", first)
    with np.errstate(over="ignore"):
        b /= first
        a /= first

    if not (np.all(np.isfinite(b)) and np.all(np.isfinite(a))):
        raise InvalidCoefficientsError(
            f"Coefficients overflow when divided by a[0] = {first!r}"
        )
    return b, a


class IirFilter:
    """Infinite impulse response filter defined by its transfer function.

    The filter owns copies of its coefficients; ``b`` and ``a`` return
    fresh copies as well. Use :meth:`change_coefficients` to replace them.

    Args:
        b: Numerator coefficients (non-recursive part).
        a: Denominator coefficients (recursive part); a[0] must be non-zero.
        impulse_response_length: Number of taps of the truncated impulse
            response used by the frequency-domain modes.

    Raises:
        InvalidCoefficientsError: If the coefficients are invalid.
        ValueError: If impulse_response_length is not a positive integer.

    Example:
        >>> filt = IirFilter(b=[1.0], a=[1.0, -0.5])
        >>> filt.apply_to(DiscreteSignal(8000, [1.0, 0.0, 0.0])).samples
        array([1.  , 0.5 , 0.25])
    """

    def __init__(
        self,
        b,
        a,
        impulse_response_length: int = DEFAULT_IMPULSE_RESPONSE_LENGTH,
    ):
        if isinstance(impulse_response_length, bool) or not isinstance(
            impulse_response_length, (int, np.integer)
        ):
            raise ValueError(
                f"Impulse response length must be an integer, got {type(impulse_response_length)}"
            )
        if impulse_response_length <= 0:
            raise ValueError(
                f"Impulse response length must be positive, got {impulse_response_length}"
            )

        self._b, self._a = normalize_coefficients(b, a)
        self._impulse_response_length = int(impulse_response_length)
        self._check_coefficients()

    @property
    def b(self) -> np.ndarray:
        """Numerator coefficients (copy)."""
        return self._b.copy()

    @property
    def a(self) -> np.ndarray:
        """Denominator coefficients (copy), a[0] == 1."""
        return self._a.copy()

    @property
    def impulse_response_length(self) -> int:
        return self._impulse_response_length

    @property
    def order(self) -> int:
        """Filter order: the larger of len(b) - 1 and len(a) - 1."""
        return max(len(self._b), len(self._a)) - 1

    def change_coefficients(self, b=None, a=None) -> None:
        """Replace one or both coefficient sequences atomically.

        Omitted sequences keep their current values. The resulting pair is
        always re-normalized jointly, so replacing only ``a`` rescales the
        current ``b`` as well. On error nothing changes.

        Raises:
            InvalidCoefficientsError: If the new pair is invalid.
        """
        new_b = self._b if b is None else b
        new_a = self._a if a is None else a
        self._b, self._a = normalize_coefficients(new_b, new_a)
        self._check_coefficients()

    def _check_coefficients(self) -> None:
        if is_debug_enabled():
            assert_normalized_coefficients(self._b, self._a, atol=NORMALIZATION_EPS)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def apply_to(self, signal: DiscreteSignal, mode: ModeLike = FilteringMode.AUTO) -> DiscreteSignal:
        """Filter `signal` and return a new signal of the same length and rate.

        Args:
            signal: Input signal; never modified.
            mode: FilteringMode member or its string value.
                AUTO uses the direct form while len(a) + len(b) is at most
                FILTER_SIZE_FOR_OPTIMIZED_PROCESSING and the circular buffer
                beyond that. DIFFERENCE_EQUATION always uses the direct form.
                OVERLAP_ADD and OVERLAP_SAVE convolve with the truncated
                impulse response, which only approximates the recursion.

        Raises:
            UnsupportedModeError: If `mode` is not a known filtering mode.
        """
        mode = self._resolve_mode(mode)
        evaluator = self._select_evaluator(mode)
        output = evaluator(signal)

        if is_debug_enabled():
            assert_shape_preserved(
                len(signal), len(output), signal.sampling_rate, output.sampling_rate
            )
        return output

    @staticmethod
    def _resolve_mode(mode: ModeLike) -> FilteringMode:
        if isinstance(mode, FilteringMode):
            return mode
        if isinstance(mode, str):
            try:
                return FilteringMode(mode.lower())
            except ValueError:
                raise UnsupportedModeError(f"Unsupported filtering mode: {mode!r}") from None
        raise UnsupportedModeError(f"Unsupported filtering mode: {mode!r}")

    def _select_evaluator(self, mode: FilteringMode) -> Callable[[DiscreteSignal], DiscreteSignal]:
        if mode is FilteringMode.AUTO:
            size = len(self._a) + len(self._b)
            if size <= FILTER_SIZE_FOR_OPTIMIZED_PROCESSING:
                logger.debug("AUTO: %d coefficients, using direct form", size)
                return self.apply_direct
            logger.debug("AUTO: %d coefficients, using circular buffer", size)
            return self.apply_circular_buffer
        if mode is FilteringMode.DIFFERENCE_EQUATION:
            return self.apply_direct
        if mode is FilteringMode.OVERLAP_ADD:
            return self.apply_overlap_add
        return self.apply_overlap_save

    # ------------------------------------------------------------------
    # Time-domain evaluators
    # ------------------------------------------------------------------

    def apply_direct(self, signal: DiscreteSignal) -> DiscreteSignal:
        """Evaluate the difference equation as written.

        For every n, the feed-forward terms are accumulated in ascending k,
        then the feedback terms are subtracted in ascending m. That order is
        fixed, so repeated calls are bit-for-bit reproducible.
        """
        _check_signal(signal)
        return DiscreteSignal._from_filter_output(signal.sampling_rate, self._direct_form(signal.samples))

    def _direct_form(self, x: np.ndarray) -> np.ndarray:
        b = self._b.tolist()
        a = self._a.tolist()
        x = x.tolist()
        len_b = len(b)
        len_a = len(a)

        y = [0.0] * len(x)

        for n in range(len(x)):
            acc = 0.0
            for k in range(min(len_b, n + 1)):
                acc += b[k] * x[n - k]
            for m in range(1, min(len_a, n + 1)):
                acc -= a[m] * y[n - m]
            y[n] = acc

        return np.array(y, dtype=float)

    def apply_linear_buffer(self, signal: DiscreteSignal) -> DiscreteSignal:
        """Filter with shifting delay registers.

        Quite inefficient: both delay lines are shifted by one slot for
        every sample. Kept as a readable reference for the circular version.
        """
        _check_signal(signal)
        x = signal.samples
        b = self._b
        a_fb = self._a[1:]

        y = np.zeros(len(x), dtype=float)

        # delay lines, newest sample at index 0
        wb = np.zeros(len(self._b), dtype=float)
        wa = np.zeros(len(self._a), dtype=float)

        # an unstable filter overflows to Inf/NaN; those samples are returned as is
        with np.errstate(over="ignore", invalid="ignore"):
            for i in range(len(x)):
                wb[0] = x[i]

                y[i] = np.dot(b, wb) - np.dot(a_fb, wa[:-1])

                wb[1:] = wb[:-1]
                wa[1:] = wa[:-1]
                wa[0] = y[i]

        return DiscreteSignal._from_filter_output(signal.sampling_rate, y)

    def apply_circular_buffer(self, signal: DiscreteSignal) -> DiscreteSignal:
        """Filter with wrap-around delay lines.

        Same recurrence as :meth:`apply_linear_buffer`, but instead of
        shifting, each delay line moves its write cursor back one slot per
        sample. Results match the other evaluators within rounding.
        """
        _check_signal(signal)
        x = signal.samples
        b = self._b
        a = self._a

        y = np.zeros(len(x), dtype=float)

        wb = RingBuffer(len(b))
        wa = RingBuffer(len(a))

        with np.errstate(over="ignore", invalid="ignore"):
            for n in range(len(x)):
                wb.write(x[n])

                # a[0] pairs with the slot about to receive y[n]
                y[n] = wb.newest_first_dot(b) - wa.newest_first_dot(a, skip=1)

                wa.write(y[n])

                wb.advance()
                wa.advance()

        return DiscreteSignal._from_filter_output(signal.sampling_rate, y)

    # ------------------------------------------------------------------
    # Frequency-domain evaluators
    # ------------------------------------------------------------------

    def apply_overlap_add(self, signal: DiscreteSignal) -> DiscreteSignal:
        """Convolve with the truncated impulse response using overlap-add."""
        _check_signal(signal)
        if len(signal) == 0:
            return signal.copy()
        logger.debug(
            "Overlap-add with %d-tap truncated impulse response",
            self._impulse_response_length,
        )
        y = _overlap_add(signal.samples, self.impulse_response(), None)
        return DiscreteSignal._from_filter_output(signal.sampling_rate, y)

    def apply_overlap_save(self, signal: DiscreteSignal) -> DiscreteSignal:
        """Convolve with the truncated impulse response using overlap-save."""
        _check_signal(signal)
        if len(signal) == 0:
            return signal.copy()
        logger.debug(
            "Overlap-save with %d-tap truncated impulse response",
            self._impulse_response_length,
        )
        y = _overlap_save(signal.samples, self.impulse_response(), None)
        return DiscreteSignal._from_filter_output(signal.sampling_rate, y)

    # ------------------------------------------------------------------
    # Responses
    # ------------------------------------------------------------------

    def impulse_response(self, length: Optional[int] = None) -> np.ndarray:
        """Response to a unit impulse, truncated to `length` samples.

        Args:
            length: Number of samples (default: impulse_response_length).

        Returns:
            1D float64 array of the first `length` output samples.

        Raises:
            ValueError: If `length` is not a non-negative integer.
        """
        if length is None:
            length = self._impulse_response_length
        if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
            raise ValueError(f"Impulse response length must be an integer, got {type(length)}")
        if length < 0:
            raise ValueError(f"Impulse response length must be non-negative, got {length}")

        impulse = np.zeros(int(length), dtype=float)
        if length > 0:
            impulse[0] = 1.0
        return self._direct_form(impulse)

    def frequency_response(self, n_fft: int = 512, fs: float = 1.0) -> Tuple[np.ndarray, np.ndarray]:
        """Complex frequency response on `n_fft` points from 0 to fs/2.

        Returns:
            Tuple (frequencies in Hz, complex response).
        """
        return freqz(self._b, self._a, worN=n_fft, fs=fs)

    def __repr__(self) -> str:
        return (
            f"IirFilter(b={self._b.tolist()!r}, a={self._a.tolist()!r}, "
            f"impulse_response_length={self._impulse_response_length})"
        )


def _check_signal(signal) -> None:
    if not isinstance(signal, DiscreteSignal):
        raise TypeError(f"Expected DiscreteSignal, got {type(signal).__name__}")
