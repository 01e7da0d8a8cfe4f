#!/usr/bin/env python3
"""
Accuracy benchmarks for the W_0(exp(x)) evaluator.

Measures the residual |w + ln(w) - x| relative to the bound
4 * eps * max(1, |x|) on every interval of the piecewise evaluator, for both
precisions and both seeding backends.
"""

from decimal import Decimal, localcontext
from typing import Dict, List

import numpy as np
import pandas as pd
import sys
sys.path.append('..')

from stablenum import make_lambert_w_exp

EPS = {"single": 2.0 ** -23, "double": 2.0 ** -52}

INTERVALS = {
    "double": [(-708.0, -36.0), (-36.0, -20.0), (-20.0, 0.0), (0.0, 4.0),
               (4.0, 576460752303423488.0), (576460752303423488.0, 1e300)],
    "single": [(-87.0, -18.0), (-18.0, -1.0), (-1.0, 8.0),
               (8.0, 536870912.0), (536870912.0, 1e38)],
}


def residual(w: float, x: float) -> float:
    """|w + ln(w) - x| with 60 significant digits."""
    with localcontext() as ctx:
        ctx.prec = 60
        dw = Decimal(w)
        return float(abs(dw + dw.ln() - Decimal(x)))


def sample(lo: float, hi: float, n: int) -> np.ndarray:
    """Points inside (lo, hi]; log spaced when the interval is wide."""
    if lo > 0 and hi / lo > 1e3:
        return np.geomspace(lo, hi, n + 1)[1:]
    return np.linspace(lo, hi, n + 1)[1:]


def run(n: int = 2000) -> pd.DataFrame:
    rows: List[Dict] = []
    for backend in ["std", "fast"]:
        evaluate = make_lambert_w_exp(backend)
        for precision, intervals in INTERVALS.items():
            dtype = np.float32 if precision == "single" else np.float64
            for lo, hi in intervals:
                ratios = []
                for x in sample(lo, hi, n).astype(dtype):
                    arg = x if precision == "single" else float(x)
                    w = float(evaluate(arg))
                    bound = 4 * EPS[precision] * max(1.0, abs(float(x)))
                    ratios.append(residual(w, float(x)) / bound)
                rows.append({
                    "backend": backend,
                    "precision": precision,
                    "interval": f"({lo:.4g}, {hi:.4g}]",
                    "max_ratio": max(ratios),
                    "mean_ratio": float(np.mean(ratios)),
                })
    return pd.DataFrame(rows)


def main():
    results = run()
    print("Residual / bound (values below 1 satisfy the bound)")
    print(results.to_string(index=False))


if __name__ == "__main__":
    main()
