"""
Example: Recursive Filtering with iirkit

Builds a few IIR filters from transfer-function coefficients, applies them
to a test signal with each filtering mode, and shows how the evaluators
compare.
"""

import numpy as np

from iirkit import (
    DiscreteSignal,
    FilteringMode,
    IirFilter,
    InvalidCoefficientsError,
)


def example_one_pole():
    """Example: Impulse response of a one-pole lowpass."""
    print("=" * 60)
    print("Example 1: One-Pole Lowpass")
    print("=" * 60)

    # a[0] = 2 is normalized away on construction
    filt = IirFilter(b=[2.0], a=[2.0, -1.0])
    print(f"Normalized filter: {filt}")

    impulse = DiscreteSignal(8000, [1.0] + [0.0] * 7)
    y = filt.apply_to(impulse)
    print(f"Impulse response: {np.round(y.samples, 4)}")
    print()


def example_modes():
    """Example: Same filter, every filtering mode."""
    print("=" * 60)
    print("Example 2: Filtering Modes")
    print("=" * 60)

    fs = 8000
    t = np.arange(2000) / fs
    x = np.sin(2 * np.pi * 200 * t) + 0.5 * np.sin(2 * np.pi * 3000 * t)
    signal = DiscreteSignal(fs, x)

    filt = IirFilter(b=[0.2, 0.3], a=[1.0, -0.7, 0.1], impulse_response_length=256)
    reference = filt.apply_direct(signal).samples

    for mode in FilteringMode:
        y = filt.apply_to(signal, mode).samples
        print(f"{mode.value:<20} max |y - direct| = {np.max(np.abs(y - reference)):.2e}")

    w, h = filt.frequency_response(n_fft=5, fs=fs)
    for f, gain in zip(w, np.abs(h)):
        print(f"  |H({f:6.0f} Hz)| = {gain:.3f}")
    print()


def example_large_filter():
    """Example: AUTO switches to the circular buffer for long filters."""
    print("=" * 60)
    print("Example 3: Large Filter")
    print("=" * 60)

    rng = np.random.default_rng(1)
    b = rng.uniform(-1.0, 1.0, 48)
    a = np.concatenate(([1.0], rng.uniform(-0.02, 0.02, 32)))
    filt = IirFilter(b, a)
    signal = DiscreteSignal(8000, rng.standard_normal(1000))

    y_auto = filt.apply_to(signal).samples
    y_direct = filt.apply_direct(signal).samples
    y_linear = filt.apply_linear_buffer(signal).samples
    print(f"len(a) + len(b) = {len(a) + len(b)}")
    print(f"max |auto - direct| = {np.max(np.abs(y_auto - y_direct)):.2e}")
    print(f"max |auto - linear| = {np.max(np.abs(y_auto - y_linear)):.2e}")
    print()


def example_invalid_coefficients():
    """Example: A zero leading denominator coefficient is rejected."""
    print("=" * 60)
    print("Example 4: Invalid Coefficients")
    print("=" * 60)

    try:
        IirFilter(b=[1.0], a=[0.0, 1.0])
    except InvalidCoefficientsError as exc:
        print(f"Rejected: {exc}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("iirkit - Filtering Examples")
    print("=" * 60 + "\n")

    example_one_pole()
    example_modes()
    example_large_filter()
    example_invalid_coefficients()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
