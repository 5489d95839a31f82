# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for densemat.

Every error derives from `MatrixError`, so callers can catch the whole
family at once, or branch on the concrete kind. The kinds also derive
from the builtin a NumPy user would expect (`ValueError`, `IndexError`).
"""

from typing import Optional, Tuple


class MatrixError(Exception):
    """Base exception for all densemat errors."""


class InvalidShapeError(MatrixError, ValueError):
    """Row or column count is not a positive integer, or input is not 2-D."""


class ShapeMismatchError(MatrixError, ValueError):
    """
    Operand shapes are incompatible for a binary operation.

    Attributes:
        left_shape: shape of the left operand
        right_shape: shape of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: Optional[Tuple[int, int]] = None,
        right_shape: Optional[Tuple[int, int]] = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(MatrixError, ValueError):
    """
    Determinant, cofactors or inverse requested for a non-square matrix.

    Attributes:
        shape: the offending (rows, cols)
    """

    def __init__(self, message: str, shape: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.shape = shape


class SingularMatrixError(MatrixError, ValueError):
    """
    Inverse requested for a matrix whose determinant is zero.

    Attributes:
        determinant: the determinant that triggered the failure
    """

    def __init__(self, message: str, determinant: Optional[float] = None):
        super().__init__(message)
        self.determinant = determinant


class IndexOutOfRangeError(MatrixError, IndexError):
    """Element index outside [0, rows) x [0, cols)."""
