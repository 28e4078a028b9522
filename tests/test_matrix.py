# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from physics.errors import IncompatibleShapeError, ShapeError
from physics.matrix import (
    Matrix,
    add,
    construct,
    equals,
    identity,
    multiply,
    negate,
    scale,
    sub,
)

TEST_ITERATIONS = 20
logger = logging.getLogger(__name__)


def random_int_matrix(rng, rows, cols):
    return Matrix(rng.integers(-50, 50, size=(rows, cols)))


def test_add_commutes():
    rng = np.random.default_rng(0)
    for _ in range(TEST_ITERATIONS):
        r, c = rng.integers(1, 8, size=2)
        A = random_int_matrix(rng, r, c)
        B = random_int_matrix(rng, r, c)
        assert add(A, B) == add(B, A)
        assert A + B == B + A


def test_sub_self_is_zero():
    rng = np.random.default_rng(1)
    A = random_int_matrix(rng, 4, 6)
    assert sub(A, A) == construct(4, 6)
    assert A - A == construct(4, 6, fill=0)


def test_identity_is_neutral():
    rng = np.random.default_rng(2)
    for n in range(1, 8):
        A = random_int_matrix(rng, n, n)
        I = identity(n, dtype=int)
        assert multiply(A, I) == A
        assert multiply(I, A) == A
        assert A @ I == A


def test_multiply_shape_and_values():
    rng = np.random.default_rng(3)
    A = random_int_matrix(rng, 2, 3)
    B = random_int_matrix(rng, 3, 4)
    C = multiply(A, B)
    assert C.shape == (2, 4)
    np.testing.assert_array_equal(C.to_numpy(), A.to_numpy() @ B.to_numpy())
    assert A * B == C


def test_shape_mismatch_raises():
    A = construct(2, 3, fill=1)
    B = construct(3, 2, fill=1)
    with pytest.raises(IncompatibleShapeError):
        add(A, B)
    with pytest.raises(IncompatibleShapeError):
        A - B
    with pytest.raises(IncompatibleShapeError):
        multiply(A, A)
    # every shape fault is a ShapeError (and therefore a ValueError)
    with pytest.raises(ShapeError):
        A + B
    with pytest.raises(ValueError):
        A @ A


def test_equals_never_raises_on_shape_mismatch():
    A = construct(2, 3)
    B = construct(3, 2)
    assert not equals(A, B)
    assert A != B
    assert not (A == B)
    assert A != "not a matrix"


def test_negate_and_scale():
    A = Matrix([[1, -2], [3, 0]])
    assert negate(A) == Matrix([[-1, 2], [-3, 0]])
    assert -A == negate(A)
    assert scale(A, 3) == Matrix([[3, -6], [9, 0]])
    assert 2 * A == A * 2 == A + A
    assert A * 0.5 == Matrix([[0.5, -1.0], [1.5, 0.0]])


def test_identity_rejects_non_square():
    with pytest.raises(ShapeError):
        Matrix.identity(2, cols=3)
    I = Matrix.identity(3, cols=3)
    np.testing.assert_array_equal(I.to_numpy(), np.eye(3))


def test_construct_fill_and_extents():
    m = construct(3, 2, fill=7)
    assert m.shape == (3, 2)
    assert m.rows == 3 and m.cols == 2
    assert np.all(m.to_numpy() == 7)
    assert construct(0, 0).shape == (0, 0)
    with pytest.raises(ShapeError):
        construct(-1, 2)


def test_ragged_or_flat_input_rejected():
    with pytest.raises(ShapeError):
        Matrix([[1, 2], [3]])
    with pytest.raises(ShapeError):
        Matrix([1, 2, 3])


def test_indexed_mutation():
    m = construct(2, 3)
    m[0, 1] = 5.0
    m[1][2] = -1.0
    assert m[0, 1] == 5.0
    assert m[1, 2] == -1.0
    assert m.tolist() == [[0.0, 5.0, 0.0], [0.0, 0.0, -1.0]]


def test_construction_copies_data():
    data = np.array([[1.0, 2.0], [3.0, 4.0]])
    m = Matrix(data)
    data[0, 0] = 100.0
    assert m[0, 0] == 1.0

    c = m.copy()
    c[1, 1] = 0.0
    assert m[1, 1] == 4.0

    out = m.to_numpy()
    out[0, 1] = 9.0
    assert m[0, 1] == 2.0


def test_swap_rows_and_transpose():
    m = Matrix([[1, 2], [3, 4], [5, 6]])
    m.swap_rows(0, 2)
    assert m == Matrix([[5, 6], [3, 4], [1, 2]])
    assert m.T == Matrix([[5, 3, 1], [6, 4, 2]])
    assert m.T.shape == (2, 3)


def test_rendering():
    m = Matrix([[1, 2], [3, 4]])
    assert str(m) == "1 2\n3 4"
    assert repr(m) == "Matrix([[1, 2], [3, 4]])"


def test_matrix_is_unhashable():
    with pytest.raises(TypeError):
        hash(Matrix([[1]]))


def test_is_square():
    assert Matrix([[1, 2], [3, 4]]).is_square
    assert not construct(2, 3).is_square
    assert construct(0, 0).is_square


def test_scale_rejects_non_scalar():
    A = Matrix([[1, 2], [3, 4]])
    with pytest.raises(TypeError):
        scale(A, np.array([1, 2]))
    with pytest.raises(TypeError):
        scale(A, A)
    assert scale(A, np.float64(2.0)) == Matrix([[2, 4], [6, 8]])
