# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers
from typing import Optional

import numpy as np

from .exceptions import InvalidShapeError, NotSquareError

EPS: float = 1e-12
# Absolute per-element tolerance used by ``==`` / ``equals``
EQ_TOL: float = 1e-7
# A pivot with |p| <= PIVOT_TOL counts as zero. 0.0 means exact zero only.
PIVOT_TOL: float = 0.0


def scale_tol(A: np.ndarray) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    return EPS * max(1.0, np.linalg.norm(A, ord=np.inf))


def check_extent(value, name: str) -> int:
    """Validate a row / column count and return it as a plain int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidShapeError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidShapeError(f"{name} must be positive, got {value}")
    return int(value)


def as_float_matrix(A) -> np.ndarray:
    """
    Copy A into a fresh 2-D float64 array.

    Raises
    ------
    InvalidShapeError : if A is not 2-D, is empty, or is ragged.
    """
    try:
        M = np.array(A, dtype=float, copy=True)
    except ValueError as e:
        # ragged nested sequences
        raise InvalidShapeError(f"cannot build a matrix from input: {e}") from e
    if M.ndim != 2:
        raise InvalidShapeError(f"expected a 2-D input, got {M.ndim}-D")
    if M.shape[0] == 0 or M.shape[1] == 0:
        raise InvalidShapeError(f"matrix extents must be positive, got {M.shape}")
    return M


def require_square(A: np.ndarray, what: str) -> int:
    """Return n for an (n, n) array, else raise NotSquareError."""
    m, n = A.shape
    if m != n:
        raise NotSquareError(
            f"{what} is undefined for non-square matrices", shape=(m, n)
        )
    return n


def random_matrix(m, n, low=-10.0, high=10.0, seed=None) -> np.ndarray:
    """Dense (m, n) float64 matrix with uniform entries."""
    rng = np.random.default_rng(seed)
    return rng.uniform(low, high, size=(m, n))


def random_nonsingular(n, low=-10, high=10, seed: Optional[int] = None) -> np.ndarray:
    """
    Build an n-by-n matrix that is guaranteed nonsingular.

    A random upper-triangular factor with a non-zero diagonal is mixed
    with a random permutation and a unit lower-triangular factor, so the
    determinant is known to be ± prod(diag(U)) and never zero.

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    U = np.triu(rng.uniform(low, high, size=(n, n)))
    # keep the diagonal away from zero
    diag = rng.uniform(1.0, high if high > 1 else 2.0, size=n)
    U[np.diag_indices(n)] = diag * rng.choice([-1.0, 1.0], size=n)
    L = np.tril(rng.uniform(-1.0, 1.0, size=(n, n)), -1) + np.eye(n)
    P = np.eye(n)[rng.permutation(n)]
    return np.asarray(P @ L @ U)
