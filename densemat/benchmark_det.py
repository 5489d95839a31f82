#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Time det() and inverse() against NumPy.

    python -m densemat.benchmark_det

Needs the `bench` extra (pandas, tabulate).
"""

import time

import numpy as np
import pandas as pd

from densemat.elimination import det
from densemat.matrix_functions import inverse
from densemat.utils import random_nonsingular

REPEATS = 5  # best of 5 runs leads to stable numbers
# the cofactor inverse does n^2 determinants, keep sizes small
sizes = [4, 8, 16, 32]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def run(sizes=sizes, repeats=REPEATS, seed=0) -> pd.DataFrame:
    records = []
    for n in sizes:
        A = random_nonsingular(n, seed=seed + n)

        # ---------- determinant ------------------------------------
        t_np = min(wall(np.linalg.det, A) for _ in range(repeats))
        t_ge = min(wall(det, A) for _ in range(repeats))
        d_ref = np.linalg.det(A)
        rel_err = abs(det(A) - d_ref) / max(abs(d_ref), 1.0)
        records.append(("det", f"{n}x{n}", t_ge, t_ge / t_np, rel_err))

        # ---------- adjugate inverse --------------------------------
        t_np = min(wall(np.linalg.inv, A) for _ in range(repeats))
        t_adj = min(wall(inverse, A) for _ in range(repeats))
        resid = np.linalg.norm(A @ inverse(A) - np.eye(n), np.inf)
        records.append(("inverse", f"{n}x{n}", t_adj, t_adj / t_np, resid))

    return pd.DataFrame(
        records,
        columns=["kernel", "size", "sec", "sec/NumPy", "error"],
    )


if __name__ == "__main__":
    df = run()
    print(df.to_markdown(index=False))
    df.to_csv("bench_results.csv", index=False)
