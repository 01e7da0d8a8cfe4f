"""
Test suite for stablenum.

Test Structure:
- test_lambert.py: W_0(exp(x)) evaluator, iteration and seeding helpers
- test_core.py: Summation primitives and KahanAccumulator
- test_algorithms.py: Summation strategies
- test_config.py: Environment configuration
- conftest.py: Shared fixtures and configuration

Usage:
    # Run all tests
    pytest

    # Run tests with coverage
    pytest --cov=stablenum

    # Skip the grid sweeps
    pytest -m "not slow"
"""
