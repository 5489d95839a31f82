# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix value type

`Matrix` owns a single C-contiguous float64 ndarray of shape
(rows, cols) and never shares it with another instance. The numerical
work is done by the array-level functions in `elementwise`,
`structural`, `elimination` and `matrix_functions`; this class adds
shape bookkeeping, bounds checking and the operator protocol.
"""

import logging
import numbers
from typing import List, Tuple

import numpy as np

from . import elementwise, structural
from .elimination import det
from .exceptions import IndexOutOfRangeError
from .matrix_functions import calc_complements, inverse
from .utils import EQ_TOL, PIVOT_TOL, as_float_matrix, check_extent

logger = logging.getLogger(__name__)


def _is_scalar(x) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


class Matrix:
    """
    Dense real matrix.

    Parameters
    ----------
    rows, cols : int
        Positive extents; the matrix starts zero-filled. The default is
        a 1x1 zero matrix.

    Raises
    ------
    InvalidShapeError : if rows or cols is not a positive integer.

    Example
    -------
    >>> A = Matrix.from_rows([[1, 2], [3, 4]])
    >>> A.determinant()
    -2.0
    >>> A * A.inverse_matrix() == Matrix.identity(2)
    True
    """

    # make ndarray <op> Matrix defer to Matrix instead of broadcasting
    __array_ufunc__ = None
    # mutable and compared with a tolerance
    __hash__ = None

    def __init__(self, rows: int = 1, cols: int = 1):
        rows = check_extent(rows, "rows")
        cols = check_extent(cols, "cols")
        self._data = np.zeros((rows, cols), dtype=float)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def _adopt(cls, data: np.ndarray) -> "Matrix":
        """Wrap an array the caller guarantees nobody else holds."""
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def from_rows(cls, data) -> "Matrix":
        """Build a matrix from a nested sequence or 2-D array (copied)."""
        return cls._adopt(as_float_matrix(data))

    @classmethod
    def from_matrix(cls, other: "Matrix") -> "Matrix":
        """Deep copy of `other`."""
        return cls._adopt(other._data.copy())

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        n = check_extent(n, "n")
        return cls._adopt(np.eye(n))

    @classmethod
    def move_from(cls, other: "Matrix") -> "Matrix":
        """
        Take over `other`'s buffer without copying it.

        `other` is left as a default 1x1 zero matrix.
        """
        m = cls._adopt(other._data)
        other._data = np.zeros((1, 1), dtype=float)
        return m

    def copy(self) -> "Matrix":
        return Matrix.from_matrix(self)

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo) -> "Matrix":
        return self.copy()

    def assign(self, other: "Matrix") -> "Matrix":
        """Replace this matrix's shape and contents with a copy of `other`."""
        if other is not self:
            self._data = other._data.copy()
        return self

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @rows.setter
    def rows(self, value: int) -> None:
        self.resize(value, self.cols)

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @cols.setter
    def cols(self, value: int) -> None:
        self.resize(self.rows, value)

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    def resize(self, rows: int, cols: int) -> None:
        """
        Reshape in place. Entries inside the overlap of the old and new
        shapes keep their (i, j) position, new entries are zero. If
        validation fails the matrix is left untouched.
        """
        rows = check_extent(rows, "rows")
        cols = check_extent(cols, "cols")
        if (rows, cols) == self.shape:
            return
        logger.debug(f"resize(): {self.rows}x{self.cols} -> {rows}x{cols}")
        data = np.zeros((rows, cols), dtype=float)
        r = min(rows, self.rows)
        c = min(cols, self.cols)
        data[:r, :c] = self._data[:r, :c]
        self._data = data

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def _check_index(self, key) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("matrix indices must be a (row, col) pair")
        i, j = key
        for idx in (i, j):
            if isinstance(idx, bool) or not isinstance(idx, numbers.Integral):
                raise TypeError(f"matrix indices must be integers, got {idx!r}")
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexOutOfRangeError(
                f"index ({i}, {j}) outside a {self.rows}x{self.cols} matrix"
            )
        return int(i), int(j)

    def __getitem__(self, key) -> float:
        return float(self._data[self._check_index(key)])

    def __setitem__(self, key, value: float) -> None:
        self._data[self._check_index(key)] = value

    def to_list(self) -> List[List[float]]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        # always a copy: the buffer is never handed out
        if copy is False:
            raise ValueError("Matrix cannot be converted to an array without a copy")
        return np.array(self._data, dtype=dtype, copy=True)

    # ------------------------------------------------------------------
    # In-place arithmetic (validate first, then mutate)
    # ------------------------------------------------------------------
    def sum_matrix(self, other: "Matrix") -> None:
        self._data = elementwise.add(self._data, other._data)

    def sub_matrix(self, other: "Matrix") -> None:
        self._data = elementwise.subtract(self._data, other._data)

    def mul_matrix(self, other: "Matrix") -> None:
        """self = self * other; the receiver takes the product's shape."""
        self._data = elementwise.multiply_matrices(self._data, other._data)

    def mul_number(self, number: float) -> None:
        self._data = elementwise.scale_by(self._data, number)

    def eq_matrix(self, other: "Matrix", tol: float = EQ_TOL) -> bool:
        if not isinstance(other, Matrix):
            return False
        return elementwise.equals(self._data, other._data, tol=tol)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.eq_matrix(other)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._adopt(elementwise.add(self._data, other._data))

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._adopt(elementwise.subtract(self._data, other._data))

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return Matrix._adopt(
                elementwise.multiply_matrices(self._data, other._data)
            )
        if _is_scalar(other):
            return Matrix._adopt(elementwise.scale_by(self._data, other))
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return Matrix._adopt(elementwise.scale_by(self._data, other))
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._adopt(
            elementwise.multiply_matrices(self._data, other._data)
        )

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sum_matrix(other)
        return self

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sub_matrix(other)
        return self

    def __imul__(self, other):
        if isinstance(other, Matrix):
            self.mul_matrix(other)
            return self
        if _is_scalar(other):
            self.mul_number(other)
            return self
        return NotImplemented

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def transpose(self) -> "Matrix":
        return Matrix._adopt(structural.transpose(self._data))

    def minor(self, row_i: int, col_j: int) -> "Matrix":
        """Copy of this matrix with row `row_i` and column `col_j` removed."""
        return Matrix._adopt(structural.minor(self._data, row_i, col_j))

    def calc_complements(self, pivot_tol: float = PIVOT_TOL) -> "Matrix":
        return Matrix._adopt(calc_complements(self._data, pivot_tol=pivot_tol))

    def determinant(self, pivot_tol: float = PIVOT_TOL) -> float:
        return det(self._data, pivot_tol=pivot_tol)

    def inverse_matrix(self, pivot_tol: float = PIVOT_TOL) -> "Matrix":
        return Matrix._adopt(inverse(self._data, pivot_tol=pivot_tol))

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_list()!r})"

    def __str__(self) -> str:
        return str(self._data)
