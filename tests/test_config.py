#!/usr/bin/env python3
"""
Unit tests for environment configuration.
"""

import dataclasses
import math

import numpy as np
import pytest

from stablenum.config import (
    CONFIG,
    FAST_MATH_ENV,
    SUMMATION_ENV,
    Config,
    load_config,
)
from stablenum.fastmath import BACKENDS, get_backend


class TestLoadConfig:
    """Test cases for load_config."""

    def test_defaults(self):
        config = load_config({})

        assert config == Config()
        assert config.fast_math is False
        assert config.backend == "std"
        assert config.summation == "kahan"

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", " Yes "])
    def test_fast_math_truthy(self, value):
        config = load_config({FAST_MATH_ENV: value})

        assert config.fast_math is True
        assert config.backend == "fast"

    @pytest.mark.parametrize("value", ["", "0", "false", "no", "fast"])
    def test_fast_math_falsy(self, value):
        assert load_config({FAST_MATH_ENV: value}).fast_math is False

    def test_summation(self):
        assert load_config({SUMMATION_ENV: "STD"}).summation == "std"
        assert load_config({SUMMATION_ENV: "  "}).summation == "kahan"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(FAST_MATH_ENV, "1")
        monkeypatch.setenv(SUMMATION_ENV, "plain")

        config = load_config()

        assert config.backend == "fast"
        assert config.summation == "plain"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CONFIG.fast_math = True


class TestBackends:
    """Test cases for the seeding backend registry."""

    def test_lookup(self):
        for name in ["std", "fast"]:
            assert get_backend(name).name == name
        assert set(BACKENDS) == {"std", "fast"}

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown backend: fmath"):
            get_backend("fmath")

    def test_std_double_log_is_single_precision(self):
        assert get_backend("std").log(10.0) == float(np.float32(math.log(np.float32(10.0))))

    def test_std_logf_is_libm_rounded(self):
        x = np.float32(7.0794578)
        assert get_backend("std").logf(x) == np.float32(math.log(x))

    def test_logs_agree(self):
        for name in ["std", "fast"]:
            backend = get_backend(name)
            assert abs(backend.log(1e10) - math.log(1e10)) < 1e-5
            y = backend.logf(np.float32(100.0))
            assert type(y) is np.float32
            assert abs(float(y) - math.log(100.0)) < 1e-6


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
