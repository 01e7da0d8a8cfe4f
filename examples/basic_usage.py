#!/usr/bin/env python3
"""
Basic usage examples for stablenum.

This script demonstrates the W_0(exp(x)) evaluator and the interchangeable
summation strategies.
"""

import math

import numpy as np

# Import the library from the source tree
import sys
sys.path.append('..')

from stablenum import (
    OMEGA,
    KahanAccumulator,
    get_summation,
    lambert_w_exp,
    make_lambert_w_exp,
)


def demonstrate_lambert_w_exp():
    """Evaluate W_0(exp(x)) across its intervals in both precisions."""
    print("=" * 60)
    print("DEMONSTRATION: W_0(exp(x))")
    print("=" * 60)

    xs = [-800.0, -100.0, -30.0, -5.0, 0.0, 1.0, 3.0, 10.0, 1e6, 1e19]

    print(f"{'x':<12} {'w (double)':<24} {'w (single)':<16} {'w + ln(w) - x':<15}")
    print("-" * 70)

    for x in xs:
        w = lambert_w_exp(x)
        wf = lambert_w_exp(np.float32(x))
        residual = w + math.log(w) - x if w > 0 else float("nan")
        print(f"{x:<12.4g} {w!r:<24} {float(wf):<16.8g} {residual:<15.2e}")

    print()
    print(f"W_0(exp(0)) = {lambert_w_exp(0.0)!r}, Omega = {OMEGA!r}")
    print()


def demonstrate_backends():
    """Compare the seeding backends."""
    print("=" * 60)
    print("DEMONSTRATION: Seeding Backends")
    print("=" * 60)

    std = make_lambert_w_exp("std")
    fast = make_lambert_w_exp("fast")

    for x in [5.0, 50.0, 5e3, 5e8]:
        print(f"x = {x:<8.3g} std: {std(x)!r:<22} fast: {fast(x)!r}")
    print()


def demonstrate_precision_loss():
    """Show how plain summation drops small terms."""
    print("=" * 60)
    print("DEMONSTRATION: Plain vs Compensated Summation")
    print("=" * 60)

    data = [1e16] + [1.0] * 10000 + [-1e16]
    print("Test data: 1e16, then 10000 x 1.0, then -1e16")
    print("Expected result: 10000.0")
    print()

    for name in ["std", "kahan"]:
        summation = get_summation(name)
        result = summation(data, 0.0)
        print(f"{summation.name:<8} result: {result:<12} error: {abs(result - 10000.0):.2e}")
    print()


def demonstrate_incremental_summation():
    """Show incremental summation with the add step and KahanAccumulator."""
    print("=" * 60)
    print("DEMONSTRATION: Incremental Summation")
    print("=" * 60)

    summation = get_summation("kahan")
    values = [1e8, 1.0, 2.0, 3.0, -1e8, 4.0, 5.0]

    total, comp = 0.0, 0.0
    print(f"{'Value':<15} {'Running Sum':<15} {'Compensation':<15}")
    print("-" * 45)
    for value in values:
        total, comp = summation.add(value, total, comp)
        print(f"{value:<15.1f} {total:<15.6f} {comp:<15.2e}")
    print()

    acc = KahanAccumulator(shape=(3,))
    for _ in range(1000):
        acc.add([0.1, 0.01, 0.001])
    print(f"KahanAccumulator (float32, 1000 steps): {acc.get().tolist()}")
    print()


def main():
    """Run all demonstrations."""
    demonstrate_lambert_w_exp()
    demonstrate_backends()
    demonstrate_precision_loss()
    demonstrate_incremental_summation()


if __name__ == "__main__":
    main()
