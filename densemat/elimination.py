# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Tuple

import numpy as np

from .utils import PIVOT_TOL, require_square

logger = logging.getLogger(__name__)


def rearrange_rows(W: np.ndarray, k: int) -> float:
    """
    Partial-pivoting step on the working array W, in place.

    Picks the row in k..n-1 with the largest |W[r, k]| and swaps it
    into row k.

    Returns
    -------
    sign : float
        -1.0 if a swap happened (one transposition), +1.0 otherwise.
    """
    # The computation we perform will be more stable if we
    # pick the largest possible number for the pivot.
    # argmax returns the first maximum, so ties keep the upper row.
    col_slice = np.abs(W[k:, k])
    pivot_row = k + int(col_slice.argmax())
    if pivot_row == k:
        return 1.0
    W[[k, pivot_row]] = W[[pivot_row, k]]
    return -1.0


def forward_eliminate(
    A: np.ndarray,
    pivot_tol: float = PIVOT_TOL,
) -> Tuple[np.ndarray, float, bool]:
    """
    Gaussian elimination with partial pivoting on a square matrix A.

    Parameters
    ----------
    A : np.ndarray               (n, n)
        Input matrix, left untouched; elimination runs on a copy.
    pivot_tol : float
        A pivot with |p| <= pivot_tol is treated as zero. The default
        (0.0) only flags exact zeros.

    Returns
    -------
    U        : np.ndarray        (n, n)
        Upper-triangular working copy. If `singular` is True the
        elimination stopped early and U is only partially reduced.
    sign     : float
        (-1) ** (number of row swaps).
    singular : bool
        True when a pivot column was (numerically) zero from the
        diagonal down.
    """
    U = A.astype(float, copy=True)
    n = U.shape[0]
    sign = 1.0

    for k in range(n):
        sign *= rearrange_rows(U, k)

        pivot = U[k, k]
        if abs(pivot) <= pivot_tol:
            # the entire column from row k down is zero
            return U, sign, True

        # Eliminate entries below the pivot
        factors = U[k + 1 :, k] / pivot
        U[k + 1 :, k:] -= factors[:, None] * U[k, k:]

    return U, sign, False


def det(A: np.ndarray, pivot_tol: float = PIVOT_TOL) -> float:
    """
    Calculate the determinant of n-by-n matrix A using elimination

    det(A) = sign * prod(diag(U)), where sign flips once per row swap.
    Non-finite entries propagate into the result unchecked.
    """
    n = require_square(A, "the determinant")
    # the closed forms skip the pivot test, so only use them for exact zeros
    if n == 1 and pivot_tol <= 0.0:
        return float(A[0, 0])
    if n == 2 and pivot_tol <= 0.0:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    U, sign, singular = forward_eliminate(A, pivot_tol=pivot_tol)
    if singular:
        logger.debug("det(): zero pivot, matrix is singular")
        return 0.0
    return sign * float(np.prod(np.diag(U)))
