# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by the numeric kernels.

All of them derive from ``ValueError`` so existing ``except ValueError``
handlers keep catching them.
"""


class ShapeError(ValueError):
    """Operand shape is not valid for the requested operation."""


class IncompatibleShapeError(ShapeError):
    """Two operands have shapes that cannot be combined."""

    def __init__(self, op: str, left: tuple, right: tuple):
        self.op = op
        self.left = tuple(left)
        self.right = tuple(right)
        super().__init__(f"{op}: incompatible shapes {self.left} and {self.right}")


class DegenerateMatrixError(ValueError):
    """No nonzero pivot exists in some column, so the matrix has no inverse."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"matrix is singular (no pivot in column {column})")


class InvalidLengthError(ValueError):
    """FFT input length is not a power of two."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"FFT length must be a power of two, got {length}")
