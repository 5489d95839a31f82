# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .exceptions import IndexOutOfRangeError, InvalidShapeError


def transpose(A: np.ndarray) -> np.ndarray:
    """Return a new (n, m) array with T[j, i] = A[i, j]."""
    # .T is a view; copy so the result owns its memory
    return A.T.copy()


def minor(A: np.ndarray, row_i: int, col_j: int) -> np.ndarray:
    """
    Submatrix of A with row `row_i` and column `col_j` deleted.

    Parameters
    ----------
    A : (m, n) ndarray, m >= 2 and n >= 2
    row_i, col_j : int
        Zero-based, negative values are out of range.

    Returns
    -------
    M : (m-1, n-1) ndarray
        Remaining rows and columns in their original order.
    """
    m, n = A.shape
    if not (0 <= row_i < m and 0 <= col_j < n):
        raise IndexOutOfRangeError(
            f"minor index ({row_i}, {col_j}) outside a {m}x{n} matrix"
        )
    if m < 2 or n < 2:
        raise InvalidShapeError(f"a {m}x{n} matrix has no non-empty minor")
    return A[np.arange(m) != row_i][:, np.arange(n) != col_j]
