#!/usr/bin/env python3
"""
Performance comparison of seeding backends and summation strategies.
"""

import time
from typing import Callable, Dict, List

import numpy as np
import pandas as pd
import sys
sys.path.append('..')

from stablenum import get_summation, make_lambert_w_exp


def time_function(func: Callable, *args, num_runs: int = 5) -> float:
    """Best wall time of several runs, in milliseconds."""
    func(*args)
    times = []
    for _ in range(num_runs):
        start = time.perf_counter()
        func(*args)
        times.append(time.perf_counter() - start)
    return min(times) * 1000


def benchmark_lambert(n: int = 20000) -> List[Dict]:
    np.random.seed(42)
    xs = np.random.uniform(-40.0, 1e6, n)
    rows = []
    for backend in ["std", "fast"]:
        evaluate = make_lambert_w_exp(backend)
        for precision, points in [("double", [float(x) for x in xs]),
                                  ("single", list(xs.astype(np.float32)))]:
            ms = time_function(lambda: [evaluate(x) for x in points])
            rows.append({"benchmark": f"lambert_w_exp[{precision}]",
                         "variant": backend, "time_ms": ms,
                         "ns_per_call": ms * 1e6 / n})
    return rows


def benchmark_summation(n: int = 200000) -> List[Dict]:
    np.random.seed(42)
    values = np.random.normal(0, 1, n)
    rows = []
    for name in ["std", "kahan"]:
        summation = get_summation(name)
        ms = time_function(summation, values, 0.0)
        rows.append({"benchmark": "reduce", "variant": name, "time_ms": ms,
                     "ns_per_call": ms * 1e6 / n})
    return rows


def main():
    results = pd.DataFrame(benchmark_lambert() + benchmark_summation())
    print(results.to_string(index=False))


if __name__ == "__main__":
    main()
