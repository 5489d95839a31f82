# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densemat
========

A small dense real-matrix value type with a determinant / cofactor /
inverse engine built on Gaussian elimination with partial pivoting.

Public API
~~~~~~~~~~
- Value type
    - `Matrix`
- Determinant engine
    - `det`, `forward_eliminate`, `rearrange_rows`
- Cofactors / inverse
    - `calc_complements`, `adj`, `inverse`
- Array-level operators
    - `add`, `subtract`, `scale_by`, `multiply_matrices`, `equals`,
      `transpose`, `minor`
- Errors
    - `MatrixError` and its subclasses

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import densemat as dm
>>> A = dm.Matrix.from_rows([[2, 5, 7], [6, 3, 4], [5, -2, -3]])
>>> round(A.determinant(), 12)
-1.0
>>> A * A.inverse_matrix() == dm.Matrix.identity(3)
True
"""

from importlib.metadata import version as _pkg_version

# ---------------------------------------------------------------------
# Re-export the high-level names users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .elementwise import (
    add,
    equals,
    multiply_matrices,
    scale_by,
    subtract,
)
from .elimination import (
    det,
    forward_eliminate,
    rearrange_rows,
)
from .exceptions import (
    IndexOutOfRangeError,
    InvalidShapeError,
    MatrixError,
    NotSquareError,
    ShapeMismatchError,
    SingularMatrixError,
)
from .matrix import Matrix
from .matrix_functions import (
    adj,
    calc_complements,
    inverse,
)
from .structural import minor, transpose
from .utils import EQ_TOL, PIVOT_TOL, scale_tol

__all__ = [
    "Matrix",
    "det",
    "forward_eliminate",
    "rearrange_rows",
    "calc_complements",
    "adj",
    "inverse",
    "add",
    "subtract",
    "scale_by",
    "multiply_matrices",
    "equals",
    "transpose",
    "minor",
    "scale_tol",
    "EQ_TOL",
    "PIVOT_TOL",
    "MatrixError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "NotSquareError",
    "SingularMatrixError",
    "IndexOutOfRangeError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densemat”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
