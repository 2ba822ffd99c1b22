#!/usr/bin/env python3
"""Microbench cache_solve: fresh inversion vs cache hit.

Compares, per matrix size:
- np.linalg.inv on every call
- cache_solve on a holder whose inverse is already cached
"""

from __future__ import annotations

import os
import time

import numpy as np

from cachematrix import cache_solve, make_cache_matrix


def _time_us(fn, *, warmup: int = 3, iters: int = 50) -> float:
    for _ in range(warmup):
        fn()

    times = []
    for _ in range(iters):
        t0 = time.perf_counter_ns()
        fn()
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) / 1e3)

    times.sort()
    return times[len(times) // 2]


def _bench_case(n: int, rng: np.random.Generator) -> None:
    x = rng.standard_normal((n, n)) + n * np.eye(n)
    holder = make_cache_matrix(x)
    cache_solve(holder)

    t_inv = _time_us(lambda: np.linalg.inv(x))
    t_hit = _time_us(lambda: cache_solve(holder))
    speedup = t_inv / t_hit if t_hit else 0.0

    print(f"N={n:<5d} inv {t_inv:>10.1f}us  cached {t_hit:>6.2f}us ({speedup:>9.1f}x)")


def main() -> None:
    os.environ.setdefault("CACHEMATRIX_NOTICE", "0")
    rng = np.random.default_rng(0)
    print("cache_solve microbench")
    print("-" * 56)
    for n in (8, 64, 256, 1024):
        _bench_case(n, rng)


if __name__ == "__main__":
    main()
