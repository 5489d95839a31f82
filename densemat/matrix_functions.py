# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .elementwise import scale_by
from .elimination import det
from .exceptions import SingularMatrixError
from .structural import minor, transpose
from .utils import PIVOT_TOL, require_square

logger = logging.getLogger(__name__)


def calc_complements(A: np.ndarray, pivot_tol: float = PIVOT_TOL) -> np.ndarray:
    """
    Cofactor matrix of a square matrix A.

    C[i, j] = (-1)^(i+j) * det(minor(A, i, j)), one determinant per cell,
    so the cost is n^2 eliminations of size n-1.

    A 1x1 matrix has no minors; its cofactor matrix is taken to be [[1]],
    which keeps adj([[x]]) / x == [[1/x]].

    `pivot_tol` is forwarded to every minor determinant.
    """
    n = require_square(A, "the cofactor matrix")
    if n == 1:
        return np.ones((1, 1))

    C = np.empty((n, n), dtype=float)
    for i in range(n):
        for j in range(n):
            minor_det = det(minor(A, i, j), pivot_tol=pivot_tol)
            C[i, j] = ((-1) ** (i + j)) * minor_det
    return C


def adj(A: np.ndarray, pivot_tol: float = PIVOT_TOL) -> np.ndarray:
    """
    Adjugate (classical adjoint) of a square matrix A: the transpose of
    its cofactor matrix.
    """
    return transpose(calc_complements(A, pivot_tol=pivot_tol))


def inverse(A: np.ndarray, pivot_tol: float = PIVOT_TOL) -> np.ndarray:
    """
    Inverse of a square matrix via the adjugate: A^{-1} = adj(A) / det(A).

    Parameters
    ----------
    A : (n, n) ndarray
    pivot_tol : float
        Forwarded to det() and to every cofactor determinant. A pivot
        with |p| <= pivot_tol counts as zero.

    Raises
    ------
    NotSquareError : if A is not square.
    SingularMatrixError : if det(A) is zero.
    """
    require_square(A, "the inverse")
    d = det(A, pivot_tol=pivot_tol)
    # det() returns exactly 0.0 when a pivot fails the tolerance test
    if d == 0.0:
        logger.debug(f"inverse(): determinant {d} is zero, refusing to invert")
        raise SingularMatrixError(
            "matrix is singular (determinant is zero)", determinant=d
        )
    return scale_by(adj(A, pivot_tol=pivot_tol), 1.0 / d)
