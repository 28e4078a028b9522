# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
physics
=======

Small dense numeric kernels: a matrix type with Gauss-Jordan inversion
and determinants, a 3-vector, and an in-place radix-2 FFT.

Public API
~~~~~~~~~~
- Matrices
    - `Matrix`, `construct`, `identity`
    - `add`, `sub`, `negate`, `scale`, `multiply`, `equals`
- Elimination
    - `inverse`, `determinant`, `solve`
- FFT
    - `transform`, `RootCache`
- Vectors
    - `Vector`, `dot_product`, `cross_product`, `length`, `normalize`
- Errors
    - `ShapeError`, `IncompatibleShapeError`, `DegenerateMatrixError`,
      `InvalidLengthError`

Example
-------
>>> import physics as ph
>>> A = ph.Matrix([[2.0, 0.0], [0.0, 2.0]])
>>> float(ph.determinant(A))
4.0
>>> ph.inverse(A).tolist() == [[0.5, 0.0], [0.0, 0.5]]
True
"""

from importlib.metadata import version as _pkg_version

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# ---------------------------------------------------------------------
from .elimination import determinant, inverse, solve
from .errors import (
    DegenerateMatrixError,
    IncompatibleShapeError,
    InvalidLengthError,
    ShapeError,
)
from .fft import RootCache, transform
from .matrix import (
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
from .utils import DEFAULT_RESULT_DTYPE, EPS, is_power_of_two, scale_tol
from .vector import Vector, cross_product, dot_product, length, normalize

__all__ = [
    "Matrix",
    "construct",
    "identity",
    "add",
    "sub",
    "negate",
    "scale",
    "multiply",
    "equals",
    "inverse",
    "determinant",
    "solve",
    "transform",
    "RootCache",
    "Vector",
    "dot_product",
    "cross_product",
    "length",
    "normalize",
    "ShapeError",
    "IncompatibleShapeError",
    "DegenerateMatrixError",
    "InvalidLengthError",
    "DEFAULT_RESULT_DTYPE",
    "EPS",
    "scale_tol",
    "is_power_of_two",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show physics-kernels”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version("physics-kernels")
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the host application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
