#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Time the kernels against their NumPy counterparts.

    python -m physics.benchmark --sizes 32 128 --repeats 5 --csv bench.csv
"""

import argparse
import logging
import time

import numpy as np
import pandas as pd

from .elimination import determinant, inverse, solve
from .fft import RootCache, transform

logger = logging.getLogger(__name__)

REPEATS = 5  # best of 5 runs gives stable numbers
SIZES = (16, 64, 128)
COLUMNS = ["kernel", "size", "sec", "sec/NumPy", "error"]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def _best(repeats, f, *args, **kwargs):
    return min(wall(f, *args, **kwargs) for _ in range(repeats))


def _ratio(t, t_ref):
    return t / t_ref if t_ref > 0 else float("inf")


def run_benchmarks(sizes=SIZES, repeats=REPEATS, seed=0) -> pd.DataFrame:
    """
    Benchmark inverse, determinant, solve and the FFT for each size.

    Matrices are random normal plus n on the diagonal, so they are well
    conditioned. The FFT length is the next power of two >= size.
    ``error`` is the max absolute deviation from NumPy's answer.
    """
    rng = np.random.default_rng(seed)
    records = []
    for n in sizes:
        A = rng.standard_normal((n, n)) + n * np.eye(n)
        b = rng.standard_normal(n)
        label = f"{n}x{n}"
        logger.debug(f"benchmarking {label}")

        t_np = _best(repeats, np.linalg.inv, A)
        t = _best(repeats, inverse, A, dtype=np.float64)
        err = np.max(np.abs(inverse(A, dtype=np.float64).to_numpy() - np.linalg.inv(A)))
        records.append(("GJ-inverse", label, t, _ratio(t, t_np), float(err)))

        t_np = _best(repeats, np.linalg.det, A)
        t = _best(repeats, determinant, A, dtype=np.float64)
        d_ref = np.linalg.det(A)
        err = abs(float(determinant(A, dtype=np.float64)) - d_ref) / max(1.0, abs(d_ref))
        records.append(("det", label, t, _ratio(t, t_np), float(err)))

        t_np = _best(repeats, np.linalg.solve, A, b)
        t = _best(repeats, solve, A, b, dtype=np.float64)
        err = np.max(np.abs(solve(A, b, dtype=np.float64) - np.linalg.solve(A, b)))
        records.append(("GE-solve", label, t, _ratio(t, t_np), float(err)))

        m = 1 << max(n - 1, 0).bit_length()
        x = rng.standard_normal(m) + 1j * rng.standard_normal(m)
        cache = RootCache()
        t_np = _best(repeats, np.fft.ifft, x)
        t = _best(repeats, lambda: transform(x.copy(), 1, cache=cache))
        err = np.max(np.abs(transform(x.copy(), 1, cache=cache) - m * np.fft.ifft(x)))
        records.append(("FFT", str(m), t, _ratio(t, t_np), float(err)))

    return pd.DataFrame(records, columns=COLUMNS)


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--sizes", type=int, nargs="+", default=list(SIZES))
    parser.add_argument("--repeats", type=int, default=REPEATS)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--csv", help="also write the table to this path")
    args = parser.parse_args(argv)

    df = run_benchmarks(args.sizes, args.repeats, args.seed)
    print(df.to_markdown(index=False))
    if args.csv:
        df.to_csv(args.csv, index=False)
    return df


if __name__ == "__main__":
    main()
