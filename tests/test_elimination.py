# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np
import pytest

from densemat.elimination import det, forward_eliminate, rearrange_rows
from densemat.exceptions import NotSquareError
from densemat.utils import random_nonsingular, scale_tol

TEST_ITERATIONS = 50
logger = logging.getLogger(__name__)


def test_rearrange_rows_swaps_largest_pivot_up():
    W = np.array([[1.0, 2.0, 3.0], [-9.0, 0.0, 1.0], [4.0, 5.0, 6.0]])
    sign = rearrange_rows(W, 0)
    assert sign == -1.0
    np.testing.assert_array_equal(W[0], [-9.0, 0.0, 1.0])
    np.testing.assert_array_equal(W[1], [1.0, 2.0, 3.0])


def test_rearrange_rows_keeps_row_when_already_largest():
    W = np.array([[5.0, 1.0], [-5.0, 2.0]])
    # tie on |pivot|: the current row stays
    assert rearrange_rows(W, 0) == 1.0
    np.testing.assert_array_equal(W, [[5.0, 1.0], [-5.0, 2.0]])


def test_rearrange_rows_only_looks_below_k():
    W = np.array([[100.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 3.0, 1.0]])
    assert rearrange_rows(W, 1) == -1.0
    np.testing.assert_array_equal(W[0], [100.0, 0.0, 0.0])
    np.testing.assert_array_equal(W[1], [0.0, 3.0, 1.0])


def test_forward_eliminate_upper_triangular():
    rng = np.random.default_rng(0)
    A = rng.normal(size=(8, 8))
    U, sign, singular = forward_eliminate(A)
    assert not singular
    assert sign in (1.0, -1.0)
    assert np.allclose(np.tril(U, -1), 0.0, atol=1e-12)
    # |U| keeps the determinant's magnitude
    assert math.isclose(
        abs(np.prod(np.diag(U))), abs(np.linalg.det(A)), rel_tol=1e-9
    )


def test_forward_eliminate_does_not_touch_input():
    A = np.array([[0.0, 2.0, 1.0], [3.0, 1.0, 4.0], [1.0, 5.0, 9.0]])
    before = A.copy()
    forward_eliminate(A)
    det(A)
    np.testing.assert_array_equal(A, before)


def test_forward_eliminate_flags_zero_column():
    A = np.array([[1.0, 0.0, 2.0], [3.0, 0.0, 4.0], [5.0, 0.0, 6.0]])
    _U, _sign, singular = forward_eliminate(A)
    assert singular


def test_det_base_cases():
    assert det(np.array([[-3.5]])) == -3.5
    assert det(np.array([[1.0, 2.0], [3.0, 4.0]])) == -2.0


def test_det_row_swap_flips_sign():
    assert det(np.array([[0.0, 1.0], [1.0, 0.0]])) == -1.0
    # same check through the elimination path
    P = np.eye(3)[[1, 0, 2]]
    assert det(P) == -1.0
    P = np.eye(4)[[1, 2, 3, 0]]  # a 4-cycle is odd
    assert det(P) == -1.0
    P = np.eye(4)[[1, 0, 3, 2]]
    assert det(P) == 1.0


def test_det_concrete_3x3():
    A = np.array([[2.0, 5.0, 7.0], [6.0, 3.0, 4.0], [5.0, -2.0, -3.0]])
    assert math.isclose(det(A), -1.0, abs_tol=1e-12)


@pytest.mark.parametrize("n", [1, 2, 3, 7, 20])
def test_det_identity_is_one(n):
    assert det(np.eye(n)) == 1.0


@pytest.mark.parametrize("n", [3, 5, 20])
def test_determinants_match_numpy(n):
    rng = np.random.default_rng(seed=n)
    for _ in range(TEST_ITERATIONS // 5):
        A = rng.normal(size=(n, n))
        our_det = det(A)
        numpy_det = np.linalg.det(A)
        logger.debug(f"\n==== Results ====\nOurs: {our_det}\nNumpy: {numpy_det}")
        assert math.isclose(our_det, numpy_det, rel_tol=1e-8, abs_tol=1e-12)


def test_det_random_nonsingular():
    for i in range(TEST_ITERATIONS):
        A = random_nonsingular(6, seed=i)
        d = det(A)
        assert d != 0.0
        assert math.isclose(d, np.linalg.det(A), rel_tol=1e-8)


@pytest.mark.parametrize(
    "A",
    [
        [[0.0, 0.0, 0.0], [1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
        [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [0.0, 0.0, 0.0]],
        [[1.0, 0.0, 3.0], [4.0, 0.0, 6.0], [7.0, 0.0, 9.0]],
        [
            [1.0, 2.0, 0.0, 4.0],
            [2.0, 1.0, 0.0, 3.0],
            [5.0, 5.0, 0.0, 1.0],
            [1.0, 1.0, 0.0, 1.0],
        ],
        [[0.0, 0.0], [3.0, 4.0]],
    ],
)
def test_det_zero_row_or_column_is_zero(A):
    assert det(np.array(A)) == 0.0


def test_det_pivot_tol_flags_numerically_singular():
    A = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
    assert abs(det(A)) < 1e-12
    assert det(A, pivot_tol=scale_tol(A)) == 0.0
    assert det(A, pivot_tol=1e-10) == 0.0


def test_det_propagates_non_finite():
    A = np.array([[1.0, 2.0, 3.0], [4.0, np.nan, 6.0], [7.0, 8.0, 10.0]])
    assert math.isnan(det(A))


def test_det_non_square_raises():
    with pytest.raises(NotSquareError) as info:
        det(np.ones((2, 3)))
    assert info.value.shape == (2, 3)
    # NumPy-style callers catch ValueError
    with pytest.raises(ValueError):
        det(np.ones((3, 1)))


def test_det_pivot_tol_applies_to_small_matrices():
    B = np.array([[1.0, 1.0], [1.0, 1.1]])
    embedded = np.eye(3)
    embedded[:2, :2] = B
    assert math.isclose(det(B), 0.1, rel_tol=1e-9)
    # the second pivot (0.1) fails the test whether or not B is embedded
    assert det(B, pivot_tol=0.5) == 0.0
    assert det(embedded, pivot_tol=0.5) == 0.0
    assert det(np.array([[0.25]]), pivot_tol=0.5) == 0.0
    assert det(np.array([[0.75]]), pivot_tol=0.5) == 0.75
    # swaps still count when the closed form is bypassed
    assert det(np.array([[0.0, 1.0], [1.0, 0.0]]), pivot_tol=1e-12) == -1.0
