# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

EPS: float = 1e-12

# Elimination runs in this type unless the caller asks for another one.
DEFAULT_RESULT_DTYPE = np.longdouble


def scale_tol(A) -> float:
    """Return an absolute pivot tolerance scaled to the matrix magnitude."""
    A = np.asarray(A, dtype=float)
    if A.size == 0:
        return EPS
    return EPS * max(1.0, np.linalg.norm(A, ord=np.inf))


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def random_nonsingular_upper(n, low=-100, high=100, seed=None) -> np.ndarray:
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and only non-zero values on its diagonal

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    U = np.triu(rng.uniform(low, high, size=(n, n)))
    # keep the diagonal away from zero so the determinant never vanishes
    diag = rng.uniform(1.0, max(abs(low), abs(high), 2.0), size=n)
    diag *= rng.choice([-1.0, 1.0], size=n)
    U[np.diag_indices(n)] = diag
    return np.asarray(U)
