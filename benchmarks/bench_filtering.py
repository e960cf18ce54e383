"""Benchmark the IIR evaluators across filter sizes."""

import time
from typing import Dict

import numpy as np

from iirkit import DiscreteSignal, FilteringMode, IirFilter


def benchmark_evaluators(
    n_coeffs: int,
    n_samples: int = 4000,
    repeats: int = 3,
) -> Dict[str, float]:
    """Time every evaluator on a random stable filter.

    Args:
        n_coeffs: Length of both b and a.
        n_samples: Signal length.
        repeats: Timed runs per evaluator.

    Returns:
        Dictionary mapping evaluator name to seconds per call.
    """
    rng = np.random.default_rng(0)
    b = rng.uniform(-1.0, 1.0, n_coeffs)
    a = np.concatenate(([1.0], rng.uniform(-1.0, 1.0, n_coeffs - 1) * 0.9 / max(n_coeffs - 1, 1)))
    filt = IirFilter(b, a)
    signal = DiscreteSignal(8000, rng.standard_normal(n_samples))

    evaluators = {
        "direct": filt.apply_direct,
        "linear_buffer": filt.apply_linear_buffer,
        "circular_buffer": filt.apply_circular_buffer,
        "auto": lambda s: filt.apply_to(s, FilteringMode.AUTO),
        "overlap_add": lambda s: filt.apply_to(s, FilteringMode.OVERLAP_ADD),
    }

    results = {}
    for name, apply in evaluators.items():
        # Warmup
        apply(signal)

        start = time.perf_counter()
        for _ in range(repeats):
            apply(signal)
        end = time.perf_counter()

        results[name] = (end - start) / repeats

    return results


if __name__ == "__main__":
    print("Benchmarking IIR evaluators...")

    for n_coeffs in (4, 32, 64, 128):
        results = benchmark_evaluators(n_coeffs)
        print(f"{n_coeffs} + {n_coeffs} coefficients, 4000 samples:")
        for name, seconds in results.items():
            print(f"  {name:<16} {seconds * 1e3:8.2f} ms")
