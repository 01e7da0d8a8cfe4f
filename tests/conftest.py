#!/usr/bin/env python3
"""
Pytest configuration and fixtures for stablenum tests.

This file contains shared test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
import numpy as np
import torch
from decimal import Decimal, localcontext
from fractions import Fraction
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


# Unit roundoff used by the Lambert W error bound
EPS = {
    np.float32: 2.0 ** -23,
    np.float64: 2.0 ** -52,
}


@pytest.fixture(scope="session")
def random_seed():
    """Set random seed for reproducible tests."""
    seed = 42
    np.random.seed(seed)
    torch.manual_seed(seed)
    return seed


@pytest.fixture
def simple_data():
    """Simple test data for basic functionality tests."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def alternating_large_small():
    """1e16 and 1.0 alternating, repeated 10^4 times."""
    return [1e16, 1.0] * 10000


@pytest.fixture
def absorbed_then_cancelled():
    """Small terms absorbed by a large one that cancels at the end."""
    return [1e16] + [1.0] * 10000 + [-1e16]


@pytest.fixture
def harmonic_float32():
    """Harmonic series terms in float32."""
    n = 100000
    return (1.0 / np.arange(1, n + 1)).astype(np.float32)


@pytest.fixture
def well_conditioned_data():
    """Positive values of similar magnitude (no cancellation)."""
    np.random.seed(42)
    return np.random.uniform(1.0, 2.0, 1000)


@pytest.fixture(params=[np.float32, np.float64], ids=["single", "double"])
def dtype(request):
    """Parameterized fixture for the two working precisions."""
    return request.param


@pytest.fixture(params=["cpu"] + (["cuda"] if torch.cuda.is_available() else []))
def device(request):
    """Parameterized fixture for different devices."""
    return torch.device(request.param)


class AccuracyChecker:
    """Utility class for checking numerical accuracy."""

    @staticmethod
    def exact_sum(values, init=0.0) -> Fraction:
        """Exact sum of the floating-point values."""
        total = Fraction(float(init))
        for v in values:
            total += Fraction(float(v))
        return total

    @staticmethod
    def sum_error(computed, values, init=0.0) -> float:
        """Absolute error of a computed sum against the exact sum."""
        return float(abs(Fraction(float(computed)) - AccuracyChecker.exact_sum(values, init)))

    @staticmethod
    def lambert_residual(w, x) -> float:
        """|w + ln(w) - x| evaluated with 60 significant digits."""
        with localcontext() as ctx:
            ctx.prec = 60
            dw = Decimal(float(w))
            return float(abs(dw + dw.ln() - Decimal(float(x))))

    @staticmethod
    def lambert_bound(x, dtype) -> float:
        """Error bound 4 * eps * max(1, |x|)."""
        return 4 * EPS[dtype] * max(1.0, abs(float(x)))


@pytest.fixture
def accuracy_checker():
    """Fixture providing accuracy checking utilities."""
    return AccuracyChecker()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark tests that sweep large grids as slow
        if "sweep" in item.name or "stress" in item.name:
            item.add_marker(pytest.mark.slow)
