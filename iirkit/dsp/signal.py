"""Discrete-time signal container.

A :class:`DiscreteSignal` is an immutable pairing of a sampling rate with a
finite sequence of real samples. Filters consume one and return a new one;
neither side ever writes into the other's sample buffer.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .utils import check_1d_array


@dataclass(frozen=True, eq=False)
class DiscreteSignal:
    """
    Finite real-valued signal tagged with its sampling rate.

    The samples are copied on construction and stored as a read-only
    float64 array.

    Attributes:
        sampling_rate: Samples per second (positive integer).
        samples: 1D float64 array of samples (may be empty).
    """

    sampling_rate: int
    samples: np.ndarray

    def __post_init__(self) -> None:
        rate = self.sampling_rate
        if isinstance(rate, bool) or not isinstance(rate, (int, np.integer)):
            raise ValueError(f"Sampling rate must be an integer, got {type(rate)}")
        if rate <= 0:
            raise ValueError(f"Sampling rate must be positive, got {rate}")

        samples = np.array(check_1d_array(self.samples), dtype=float, copy=True)
        samples.flags.writeable = False

        # frozen dataclass: bypass __setattr__ for the normalized fields
        object.__setattr__(self, "sampling_rate", int(rate))
        object.__setattr__(self, "samples", samples)

    @classmethod
    def _from_filter_output(cls, sampling_rate: int, samples: np.ndarray) -> DiscreteSignal:
        """Wrap computed samples without the finiteness check.

        A valid but unstable filter may overflow to Inf/NaN; those samples
        are returned to the caller as computed. `samples` must be a freshly
        allocated 1D float array that nothing else references.
        """
        samples = np.asarray(samples, dtype=float)
        samples.flags.writeable = False

        signal = object.__new__(cls)
        object.__setattr__(signal, "sampling_rate", int(sampling_rate))
        object.__setattr__(signal, "samples", samples)
        return signal

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def duration(self) -> float:
        """Signal duration in seconds."""
        return len(self.samples) / self.sampling_rate

    def copy(self) -> DiscreteSignal:
        """Return a new signal with the same rate and a copy of the samples."""
        return DiscreteSignal._from_filter_output(self.sampling_rate, self.samples.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiscreteSignal):
            return NotImplemented
        return self.sampling_rate == other.sampling_rate and np.array_equal(
            self.samples, other.samples
        )

    __hash__ = None  # type: ignore[assignment]
