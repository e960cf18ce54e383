"""Pytest configuration and shared fixtures for iirkit tests.

This module provides:
- A deterministic NumPy RNG fixture
- Common signals and filters used across the DSP tests
"""

import os

import numpy as np
import pytest

from iirkit.dsp import DiscreteSignal


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the legacy global numpy RNG for every test."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture
def noise_signal(rng: np.random.Generator) -> DiscreteSignal:
    """Half a second of white noise at 8 kHz."""
    return DiscreteSignal(8000, rng.standard_normal(4000))


@pytest.fixture
def impulse() -> DiscreteSignal:
    return DiscreteSignal(16000, [1.0, 0.0, 0.0, 0.0])
