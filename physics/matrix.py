# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense matrix container and arithmetic.

A ``Matrix`` owns a private 2-D ndarray. Its shape is fixed at
construction; elements may be mutated through indexing, which is how
callers build matrices incrementally:

>>> m = construct(2, 2)
>>> m[0, 0] = 1.0
>>> m[1][1] = 2.0
>>> print(m)
1.0 0.0
0.0 2.0
"""

import numbers
from typing import Tuple

import numpy as np

from .errors import IncompatibleShapeError, ShapeError


class Matrix:
    # numpy defers to our reflected operators instead of broadcasting
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, data, dtype=None):
        if isinstance(data, Matrix):
            data = data._data
        try:
            arr = np.array(data, dtype=dtype, copy=True)
        except ValueError as e:
            raise ShapeError(f"matrix rows must all have the same length: {e}") from e
        if arr.ndim != 2:
            raise ShapeError(f"a matrix needs 2-D data, got {arr.ndim}-D")
        self._data = arr

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Matrix":
        # caller hands over ownership of arr
        m = cls.__new__(cls)
        m._data = arr
        return m

    @classmethod
    def filled(cls, rows: int, cols: int, fill=0, dtype=float) -> "Matrix":
        """Return a rows x cols matrix with every element set to ``fill``."""
        for extent in (rows, cols):
            if not isinstance(extent, numbers.Integral) or extent < 0:
                raise ShapeError(f"matrix extents must be non-negative ints, got {extent!r}")
        return cls._wrap(np.full((rows, cols), fill, dtype=dtype))

    @classmethod
    def identity(cls, n: int, cols=None, dtype=float) -> "Matrix":
        """
        Square identity matrix of size n.

        Passing ``cols`` different from ``n`` is rejected up front, the
        identity only exists for square shapes.
        """
        if cols is not None and cols != n:
            raise ShapeError("The identity matrix is a square matrix.")
        if not isinstance(n, numbers.Integral) or n < 0:
            raise ShapeError(f"identity size must be a non-negative int, got {n!r}")
        return cls._wrap(np.eye(n, dtype=dtype))

    # ------------------------------------------------------------------
    # shape / storage
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def dtype(self):
        return self._data.dtype

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def copy(self) -> "Matrix":
        return Matrix._wrap(self._data.copy())

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the elements as an ndarray."""
        return self._data.copy()

    def tolist(self) -> list:
        return self._data.tolist()

    def __getitem__(self, key):
        # m[i] is a mutable row view, m[i, j] a single element
        return self._data[key]

    def __setitem__(self, key, value):
        self._data[key] = value

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return self.rows

    def swap_rows(self, i: int, j: int) -> None:
        """Exchange rows i and j in place."""
        if i != j:
            self._data[[i, j]] = self._data[[j, i]]

    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    # ------------------------------------------------------------------
    # operators
    # ------------------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return sub(self, other)

    def __neg__(self):
        return negate(self)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return multiply(self, other)
        if isinstance(other, numbers.Number):
            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return scale(self, other)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return multiply(self, other)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return equals(self, other)

    def __ne__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return not equals(self, other)

    # ------------------------------------------------------------------
    # elimination engine
    # ------------------------------------------------------------------
    def inverse(self, dtype=None, tol: float = 0.0) -> "Matrix":
        from .elimination import inverse

        return inverse(self, dtype=dtype, tol=tol)

    def determinant(self, dtype=None, tol: float = 0.0):
        from .elimination import determinant

        return determinant(self, dtype=dtype, tol=tol)

    # ------------------------------------------------------------------
    # rendering
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return "\n".join(" ".join(str(x) for x in row) for row in self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data.tolist()!r})"


def _as_matrix(A) -> Matrix:
    return A if isinstance(A, Matrix) else Matrix(A)


def construct(rows: int, cols: int, fill=0, dtype=float) -> Matrix:
    return Matrix.filled(rows, cols, fill=fill, dtype=dtype)


def identity(n: int, dtype=float) -> Matrix:
    return Matrix.identity(n, dtype=dtype)


def add(A, B) -> Matrix:
    A, B = _as_matrix(A), _as_matrix(B)
    if A.shape != B.shape:
        raise IncompatibleShapeError("add", A.shape, B.shape)
    return Matrix._wrap(A._data + B._data)


def sub(A, B) -> Matrix:
    A, B = _as_matrix(A), _as_matrix(B)
    if A.shape != B.shape:
        raise IncompatibleShapeError("sub", A.shape, B.shape)
    return Matrix._wrap(A._data - B._data)


def negate(A) -> Matrix:
    A = _as_matrix(A)
    return Matrix._wrap(-A._data)


def scale(A, t) -> Matrix:
    """Multiply every element by the scalar t."""
    if not isinstance(t, numbers.Number):
        raise TypeError(f"scale factor must be a scalar, got {type(t).__name__}")
    A = _as_matrix(A)
    return Matrix._wrap(A._data * t)


def multiply(A, B) -> Matrix:
    """
    Matrix product of an (r, c) and a (c, n) matrix.

    Each element is the plain sum of products; overflow and precision
    follow the element dtype.
    """
    A, B = _as_matrix(A), _as_matrix(B)
    if A.cols != B.rows:
        raise IncompatibleShapeError("multiply", A.shape, B.shape)
    return Matrix._wrap(A._data @ B._data)


def equals(A, B) -> bool:
    """Exact element-wise equality; differently shaped matrices are unequal."""
    A, B = _as_matrix(A), _as_matrix(B)
    if A.shape != B.shape:
        return False
    return bool(np.array_equal(A._data, B._data))
