"""
Lambert W function of an exponential argument.

This module evaluates w = W_0(exp(x)), the non-negative solution of

    w + ln(w) = x,

for every real x, in single or double precision. The argument range is split
into intervals; each interval gets its own initial guess (or a closed form),
which is then refined with a fifth order Householder iteration. A last
Householder step with the exact exponential brings the residual below
4 * eps * max(1, |x|).

References:
    A. Householder, The numerical treatment of a single nonlinear equation.
    McGraw-Hill, 1970.

    T. Fukushima, Precise and fast computation of Lambert W-functions without
    transcendental function evaluations. Journal of Computational and Applied
    Mathematics 244 (2013): 77-89.
"""

import logging
import math
from typing import Callable, Optional, Union

import numpy as np

from .config import CONFIG
from .fastmath import Backend, get_backend

logger = logging.getLogger(__name__)

Real = Union[float, np.floating]

# W_0(1), the solution of x * exp(x) = 1 (https://oeis.org/A030178).
OMEGA = 0.5671432904097838729999686622103555497538157871865125081351310792

_ONE_F = np.float32(1.0)
_ZERO_F = np.float32(0.0)


def lambert_w_iter_5(w, y):
    """
    Householder step of order 5 for w - z * exp(-w) = 0.

    Works for any float type; integer constants do not promote numpy
    float32 operands.

    Args:
        w: Current estimate w_n
        y: z * exp(-w_n)

    Returns:
        Next estimate w_{n+1}
    """
    f0 = w - y
    f1 = 1 + y
    f11 = f1 * f1
    f0y = f0 * y
    f00y = f0 * f0y
    return w - 4 * f0 * (6 * f1 * (f11 + f0y) + f00y) / (
        f11 * (24 * f11 + 36 * f0y) + f00y * (14 * y + f0 + 8))


def exp_approx(x):
    """
    Fast approximation of exp(x) as (1 + x/1024)^1024.

    Only good for seeding: inaccurate for x > 1, about 1e-3 on [-5, 1], and
    below 2^-52 relative to exp for x <= -36.
    """
    y = 1 + x / 1024
    for _ in range(10):
        y *= y
    return y


def make_lambert_w_exp(backend: Union[str, Backend] = "std") -> Callable[..., Real]:
    """
    Build a W_0(exp(x)) evaluator bound to a seeding backend.

    The backend only supplies the logarithm used for the initial guess of
    large arguments; the final correction always uses the exact exponential.

    Args:
        backend: Backend name (``"std"``, ``"fast"``) or a ``Backend``

    Returns:
        Function ``lambert_w_exp(x, dtype=None)``
    """
    if isinstance(backend, str):
        backend = get_backend(backend)
    log, logf = backend.log, backend.logf
    logger.debug("Building lambert_w_exp with %s backend", backend.name)

    def lambert_w_exp_double(x: float) -> float:
        # Intervals:
        # (-Inf, -746]                - exp(x) underflows, return 0
        # (-746, -36]                 - return exp(x)
        # (-36, -20]                  - w_0 = exp_approx(x), return w_1
        # (-20, 0]                    - w_0 = exp_approx(x), return w_2
        # (0, 4]                      - w_0 = x, return w_2
        # (4, 576460752303423488]     - w_0 = x - log(x), return w_2
        # (576460752303423488, +Inf)  - x + log(x) = x, return x
        if math.isnan(x):
            return x
        if x > 0.0:
            if x <= 4.0:
                w = lambert_w_iter_5(x, 1.0)
            elif x <= 576460752303423488.0:
                w = lambert_w_iter_5(x - log(x), x)
            else:
                return x
        elif x > -36.0:
            w = exp_approx(x)
            if x > -20.0:
                w = lambert_w_iter_5(w, exp_approx(x - w))
        else:
            return math.exp(x) if x > -746.0 else 0.0
        return lambert_w_iter_5(w, math.exp(x - w))

    def lambert_w_exp_single(x: np.float32) -> np.float32:
        # Intervals:
        # (-Inf, -104]        - exp(x) underflows, return 0
        # (-104, -18]         - return exp(x)
        # (-18, -1]           - w_0 = exp_approx(x), return w_1
        # (-1, 8]             - w_0 = x, return w_2
        # (8, 536870912]      - w_0 = x - log(x), return w_1
        # (536870912, +Inf)   - x + log(x) = x, return x
        if math.isnan(x):
            return x
        if x > -1.0:
            if x <= 8.0:
                w = lambert_w_iter_5(x, _ONE_F)
            elif x <= 536870912.0:
                return lambert_w_iter_5(x - logf(x), x)
            else:
                return x
        elif x > -18.0:
            w = exp_approx(x)
        else:
            return np.float32(math.exp(x)) if x > -104.0 else _ZERO_F
        # libm exp rounded to float32, not the numpy float32 ufunc
        return lambert_w_iter_5(w, np.float32(math.exp(x - w)))

    def lambert_w_exp(x: Real, dtype: Optional[type] = None) -> Real:
        """
        Lambert W function of exp(x), w = W_0(exp(x)).

        The result satisfies w + ln(w) = x with an error below
        4 * eps * max(1, |x|), eps = 2^-23 for float32 and 2^-52 for
        float64, wherever exp(x) is a normal number. NaN propagates,
        +inf maps to +inf and -inf to 0.

        Args:
            x: Argument; a ``numpy.float32`` selects single precision,
                anything else double precision
            dtype: Force ``numpy.float32`` or ``numpy.float64``

        Returns:
            ``numpy.float32`` in single precision, ``float`` in double
        """
        if dtype is None:
            if isinstance(x, np.float32):
                return lambert_w_exp_single(x)
            return lambert_w_exp_double(float(x))

        dtype = np.dtype(dtype)
        if dtype == np.float32:
            return lambert_w_exp_single(np.float32(x))
        if dtype == np.float64:
            return lambert_w_exp_double(float(x))
        raise ValueError(f"Unsupported dtype: {dtype}")

    lambert_w_exp.backend = backend.name
    return lambert_w_exp


lambert_w_exp = make_lambert_w_exp(CONFIG.backend)
