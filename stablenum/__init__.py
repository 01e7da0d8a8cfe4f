"""
stablenum

Small, correctness-critical numerical primitives:

- W_0(exp(x)), the Lambert W function of an exponential argument, to within
  a few ulps in single and double precision
- Plain and Kahan compensated summation behind one strategy interface
- A torch-backed compensated accumulator for streaming tensors

Configuration is read from the environment at import, see
``stablenum.config``.
"""

import logging

from .core import KahanAccumulator, kahan_add, plain_add, kahan_accumulate, plain_accumulate
from .algorithms import (
    Summation,
    PlainSummation,
    KahanSummation,
    get_summation,
    kahan_sum,
)
from .lambert import OMEGA, exp_approx, lambert_w_exp, lambert_w_iter_5, make_lambert_w_exp

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__author__ = "stablenum Contributors"

__all__ = [
    "KahanAccumulator",
    "kahan_add",
    "plain_add",
    "kahan_accumulate",
    "plain_accumulate",
    "Summation",
    "PlainSummation",
    "KahanSummation",
    "get_summation",
    "kahan_sum",
    "OMEGA",
    "exp_approx",
    "lambert_w_exp",
    "lambert_w_iter_5",
    "make_lambert_w_exp",
]
