# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Elementwise operators

All functions take float64 ndarrays and return a new array; the
operands are never modified.
"""

import numpy as np

from .exceptions import ShapeMismatchError
from .utils import EQ_TOL


def _require_same_shape(A: np.ndarray, B: np.ndarray, op: str) -> None:
    if A.shape != B.shape:
        raise ShapeMismatchError(
            f"{op} requires equal shapes, got {A.shape} and {B.shape}",
            left_shape=A.shape,
            right_shape=B.shape,
        )


def add(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    _require_same_shape(A, B, "addition")
    return A + B


def subtract(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    _require_same_shape(A, B, "subtraction")
    return A - B


def scale_by(A: np.ndarray, k: float) -> np.ndarray:
    return A * float(k)


def multiply_matrices(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """
    Matrix product C = A B.

    Parameters
    ----------
    A : (m, n) ndarray
    B : (n, p) ndarray

    Returns
    -------
    C : (m, p) ndarray
        C[i, j] = sum_k A[i, k] * B[k, j]
    """
    m, n = A.shape
    n2, p = B.shape
    if n != n2:
        raise ShapeMismatchError(
            f"cannot multiply {m}x{n} by {n2}x{p}: "
            f"left columns ({n}) must equal right rows ({n2})",
            left_shape=A.shape,
            right_shape=B.shape,
        )
    return A @ B


def equals(A: np.ndarray, B: np.ndarray, tol: float = EQ_TOL) -> bool:
    """
    True when A and B have the same shape and every pair of entries
    differs by strictly less than `tol`. Never raises.
    """
    if A.shape != B.shape:
        return False
    return bool(np.all(np.abs(A - B) < tol))
