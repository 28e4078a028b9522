# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Gauss-Jordan inversion, determinants and linear solves.

All three share one elimination skeleton over a working copy of the
operand, converted to a result dtype before any arithmetic happens.
Unless the caller names one, the operand dtype is promoted to at least
``numpy.longdouble`` (``clongdouble`` for complex input); ``object``
arrays stay ``object`` so ``Fraction`` elements remain exact.

The skeleton:

1. pivot search: the first row at or below the diagonal whose entry in
   the pivot column is nonzero,
2. row swap when that row is not the current one,
3. elimination of every entry below the pivot.

Pivot search uses an exact comparison against zero unless ``tol`` is
given. With floating point input a tiny nonzero pivot is therefore
accepted as-is; pass ``tol=scale_tol(A)`` to treat such pivots as
zero instead.
"""

import logging
from typing import Optional

import numpy as np

from .errors import DegenerateMatrixError, IncompatibleShapeError, ShapeError
from .matrix import Matrix
from .utils import DEFAULT_RESULT_DTYPE

logger = logging.getLogger(__name__)


def _to_array(A) -> np.ndarray:
    if isinstance(A, Matrix):
        return A.to_numpy()
    return np.asarray(A)


def _square_operand(A, op: str) -> np.ndarray:
    if isinstance(A, Matrix):
        square = A.is_square
        arr = A.to_numpy()
    else:
        arr = np.asarray(A)
        square = arr.ndim == 2 and arr.shape[0] == arr.shape[1]
    if not square:
        raise ShapeError(f"{op} is undefined for non-square matrices, got shape {arr.shape}")
    return arr


def _result_dtype(dtype, *arrays) -> np.dtype:
    """The caller's dtype, else the operand dtypes promoted to DEFAULT_RESULT_DTYPE."""
    if dtype is not None:
        return np.dtype(dtype)
    if any(a.dtype == object for a in arrays):
        return np.dtype(object)
    return np.result_type(DEFAULT_RESULT_DTYPE, *(a.dtype for a in arrays))


def _scalar(value, dtype):
    return np.array(value, dtype=dtype)[()]


def _is_zero(x, tol: float) -> bool:
    if tol == 0:
        return x == 0
    return abs(x) <= tol


def _find_pivot(W: np.ndarray, i: int, tol: float) -> Optional[int]:
    for j in range(i, W.shape[0]):
        if not _is_zero(W[j, i], tol):
            return j
    return None


def _swap_rows(M: np.ndarray, i: int, j: int) -> None:
    M[[i, j]] = M[[j, i]]


def _eliminate_below(W: np.ndarray, i: int, acc: Optional[np.ndarray] = None) -> None:
    """Zero column i under the pivot, applying the same row ops to acc."""
    pivot = W[i, i]
    # entries are captured before any row below the pivot changes
    entries = W[i + 1 :, i].copy()
    W[i + 1 :, i:] -= entries[:, None] * (W[i, i:] / pivot)
    if acc is not None:
        acc[i + 1 :] -= (entries / pivot)[:, None] * acc[i]


def _forward_eliminate(W: np.ndarray, acc: np.ndarray, tol: float, op: str) -> None:
    """
    Reduce W to upper-triangular form in place, carrying acc through the
    identical row swaps and updates.

    Raises
    ------
    DegenerateMatrixError : if a column has no usable pivot.
    """
    n = W.shape[0]
    for i in range(n):
        j = _find_pivot(W, i, tol)
        if j is None:
            logger.debug(f"{op}: no pivot in column {i}, matrix is degenerate")
            raise DegenerateMatrixError(i)
        if j != i:
            logger.debug(f"{op}: swapping rows {i} and {j}")
            _swap_rows(W, i, j)
            _swap_rows(acc, i, j)
        _eliminate_below(W, i, acc)


def _back_substitute(W: np.ndarray, acc: np.ndarray) -> None:
    """
    Finish Gauss-Jordan on an upper-triangular W: scale every pivot row
    to a unit diagonal and clear the entries above it, bottom row first.
    On return W is the identity and acc holds the solution.
    """
    n = W.shape[0]
    for i in reversed(range(n)):
        pivot = W[i, i]
        W[i, i:] /= pivot
        acc[i] /= pivot

        entries = W[:i, i].copy()
        W[:i, i:] -= entries[:, None] * W[i, i:]
        acc[:i] -= entries[:, None] * acc[i]


def inverse(A, dtype=None, tol: float = 0.0) -> Matrix:
    """
    Invert a square matrix by Gauss-Jordan elimination with partial pivoting.

    Parameters
    ----------
    A : Matrix | array_like      (n, n)
    dtype : numpy dtype | None
        Type the elimination is carried out in and the result is stored as.
        None promotes A's dtype to at least ``numpy.longdouble``. Use
        ``object`` with ``fractions.Fraction`` elements for exact results.
    tol : float
        Pivots with ``|p| <= tol`` count as zero. The default 0.0 only
        rejects exact zeros.

    Returns
    -------
    Matrix (n, n) with ``A @ result == I`` up to rounding.

    Raises
    ------
    ShapeError : A is not square.
    DegenerateMatrixError : A is singular.
    """
    arr = _square_operand(A, "inverse")
    dtype = _result_dtype(dtype, arr)
    W = arr.astype(dtype, copy=True)
    acc = np.eye(W.shape[0], dtype=dtype)

    _forward_eliminate(W, acc, tol, "inverse")
    _back_substitute(W, acc)
    return Matrix._wrap(acc)


def determinant(A, dtype=None, tol: float = 0.0):
    """
    Determinant of a square matrix via forward elimination.

    A singular matrix is not an error here: as soon as a column has no
    pivot the result is an exact zero of the result dtype. Every row
    swap flips the sign of the final diagonal product.
    """
    arr = _square_operand(A, "determinant")
    dtype = _result_dtype(dtype, arr)
    W = arr.astype(dtype, copy=True)
    n = W.shape[0]

    negate = False
    # the last diagonal entry needs no reduction
    for i in range(n - 1):
        j = _find_pivot(W, i, tol)
        if j is None:
            logger.debug(f"determinant: no pivot in column {i}, returning zero")
            return _scalar(0, dtype)
        if j != i:
            logger.debug(f"determinant: swapping rows {i} and {j}")
            _swap_rows(W, i, j)
            negate = not negate
        _eliminate_below(W, i)

    res = _scalar(1, dtype)
    for i in range(n):
        res = res * W[i, i]
    if res == 0:
        return _scalar(0, dtype)
    return -res if negate else res


def solve(A, b, dtype=None, tol: float = 0.0):
    """
    Solve A x = b by Gaussian elimination with partial pivoting.

    Parameters
    ----------
    A : Matrix | array_like      (n, n)
    b : Matrix | array_like      (n,) or (n, k)
    dtype : numpy dtype | None
        None promotes the dtypes of A and b together, to at least
        ``numpy.longdouble``.

    Returns
    -------
    x : same kind and shape as b (a Matrix when b is one, else an ndarray)

    Raises
    ------
    ShapeError : A is not square.
    IncompatibleShapeError : b does not have n rows.
    DegenerateMatrixError : A is singular.
    """
    arr = _square_operand(A, "solve")
    n = arr.shape[0]

    rhs = _to_array(b)
    if rhs.ndim not in (1, 2) or rhs.shape[0] != n:
        raise IncompatibleShapeError("solve", arr.shape, rhs.shape)

    dtype = _result_dtype(dtype, arr, rhs)
    W = arr.astype(dtype, copy=True)
    c = rhs.astype(dtype, copy=True)
    if c.ndim == 1:
        # (n,)  ->  (n,1)
        c = c[:, None]

    _forward_eliminate(W, c, tol, "solve")
    _back_substitute(W, c)

    if isinstance(b, Matrix):
        return Matrix._wrap(c)
    return c.ravel() if rhs.ndim == 1 else c
