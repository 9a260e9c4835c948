#!/usr/bin/env python3
"""Benchmark the baby-step giant-step engine across bit widths and worker counts.

Measures wall-clock time of BSGSEngine.solve for random scalars drawn
below each bound, and the cost of the two inner loops on their own.
"""

from __future__ import annotations

import time

import numpy as np

from babygiant.core.bsgs import BSGSEngine, build_baby_table, giant_step_scan
from babygiant.core.point_builder import PointBuilder
from babygiant.utils.types import SolverConfig


def benchmark_loops(m: int = 1 << 12) -> dict:
    """Time table construction and a full miss-scan for one chunk."""
    builder = PointBuilder()
    curve = builder.curve
    G = builder.generator()

    t0 = time.perf_counter()
    table = build_baby_table(curve, G, 0, m)
    t_baby = time.perf_counter() - t0

    target = curve.multiply(G, m * m)  # guaranteed miss
    t0 = time.perf_counter()
    giant_step_scan(curve, G, target, table, m)
    t_giant = time.perf_counter() - t0

    return {
        "m": m,
        "baby_us_per_step": 1e6 * t_baby / m,
        "giant_us_per_step": 1e6 * t_giant / m,
    }


def benchmark_solve(bit_width: int, workers: int, trials: int = 3) -> float:
    """Mean seconds per solve for random k < 2^bit_width."""
    builder = PointBuilder()
    curve = builder.curve
    G = builder.generator()
    engine = BSGSEngine(SolverConfig(bit_width=bit_width, workers=workers))
    rng = np.random.default_rng(42)

    times = []
    for k in rng.integers(0, 2**bit_width, size=trials):
        k = int(k)
        B = curve.multiply(G, k)
        t0 = time.perf_counter()
        found = engine.solve(bit_width, G, B)
        times.append(time.perf_counter() - t0)
        assert found == k
    return float(np.mean(times))


def main() -> None:
    loops = benchmark_loops()
    print(f"Inner loops (m={loops['m']}):")
    print(f"  baby step:  {loops['baby_us_per_step']:8.2f} us")
    print(f"  giant step: {loops['giant_us_per_step']:8.2f} us")
    print()

    print(f"{'bits':>6} {'workers':>8} {'seconds':>10}")
    print("-" * 26)
    for bit_width in (16, 20, 24):
        for workers in (1, 2, 4):
            elapsed = benchmark_solve(bit_width, workers)
            print(f"{bit_width:>6} {workers:>8} {elapsed:>10.3f}")


if __name__ == "__main__":
    main()
