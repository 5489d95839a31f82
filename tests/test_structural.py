# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from densemat.elementwise import equals
from densemat.exceptions import IndexOutOfRangeError, InvalidShapeError
from densemat.structural import minor, transpose
from densemat.utils import random_matrix


def test_transpose_shape_and_values():
    A = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    T = transpose(A)
    assert T.shape == (3, 2)
    np.testing.assert_array_equal(T, [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]])


def test_transpose_owns_its_buffer():
    A = np.array([[1.0, 2.0], [3.0, 4.0]])
    T = transpose(A)
    T[0, 1] = 99.0
    assert A[1, 0] == 3.0
    assert T.flags["C_CONTIGUOUS"]


@pytest.mark.parametrize("n", [2, 3, 8])
def test_double_transpose_is_identity(n):
    A = random_matrix(n, n, seed=n)
    assert equals(A, transpose(transpose(A)))


def test_minor_removes_row_and_column():
    A = np.arange(1.0, 17.0).reshape(4, 4)
    M = minor(A, 1, 2)
    np.testing.assert_array_equal(
        M,
        [
            [1.0, 2.0, 4.0],
            [9.0, 10.0, 12.0],
            [13.0, 14.0, 16.0],
        ],
    )


def test_minor_of_rectangular():
    A = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    np.testing.assert_array_equal(minor(A, 0, 0), [[5.0, 6.0]])
    np.testing.assert_array_equal(minor(A, 1, 2), [[1.0, 2.0]])


def test_minor_is_a_copy():
    A = np.eye(3)
    M = minor(A, 0, 0)
    M[0, 0] = -1.0
    assert A[1, 1] == 1.0


@pytest.mark.parametrize("i,j", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_minor_index_out_of_range(i, j):
    with pytest.raises(IndexOutOfRangeError):
        minor(np.ones((3, 3)), i, j)


def test_minor_of_single_row_has_no_content():
    with pytest.raises(InvalidShapeError):
        minor(np.ones((1, 3)), 0, 1)
    with pytest.raises(InvalidShapeError):
        minor(np.ones((1, 1)), 0, 0)
