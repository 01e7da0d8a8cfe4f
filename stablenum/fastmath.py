"""
Seeding transcendentals for the Lambert W evaluator.

The evaluator takes one logarithm while building its initial guess for large
arguments. That logarithm only has to be accurate to a few digits, since the
Householder step that follows converges with order five, so it can come from
a cheaper, less accurate routine than the one used in the final correction.

Two backends are available:

- ``std``: the platform libm through ``math.log``, rounded to single
  precision. The double precision seed takes the log of ``float32(x)``.
- ``fast``: numpy's float32 ``log`` ufunc. Its SIMD kernel is not correctly
  rounded, so seeds (and hence some results) may differ in the last bit.
  The double precision seed uses ``math.log`` of the double argument.

A backend is picked once when an evaluator is built, see
``stablenum.lambert.make_lambert_w_exp``.
"""

import math
from typing import Callable, NamedTuple

import numpy as np


class Backend(NamedTuple):
    """Seeding log routines for double and single precision."""

    name: str
    log: Callable[[float], float]
    logf: Callable[[np.float32], np.float32]


def _std_log(x: float) -> float:
    return float(np.float32(math.log(np.float32(x))))


def _std_logf(x: np.float32) -> np.float32:
    return np.float32(math.log(x))


def _fast_log(x: float) -> float:
    return math.log(x)


def _fast_logf(x: np.float32) -> np.float32:
    return np.log(x)


STD = Backend("std", _std_log, _std_logf)
FAST = Backend("fast", _fast_log, _fast_logf)

BACKENDS = {backend.name: backend for backend in (STD, FAST)}


def get_backend(name: str = "std") -> Backend:
    """
    Look up a seeding backend by name.

    Args:
        name: ``"std"`` or ``"fast"``

    Returns:
        The matching backend
    """
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown backend: {name}") from None
