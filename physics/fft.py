# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Iterative radix-2 Cooley-Tukey FFT.

Sign convention: the forward transform (``direction=+1``) uses the
roots ``exp(+2*pi*i*k/n)`` and the inverse (``direction=-1``) uses the
conjugate roots followed by a division by n. Relative to NumPy this
means ``transform(x, 1) == n * np.fft.ifft(x)`` and
``transform(X, -1) == np.fft.fft(X) / n``.
"""

import logging
import threading
from typing import Optional

import numpy as np

from .errors import InvalidLengthError
from .utils import is_power_of_two

logger = logging.getLogger(__name__)


def _unit_roots(n: int, direction: int = 1) -> np.ndarray:
    """Return exp(i * direction * 2*pi * k / n) for k < n/2."""
    k = np.arange(n // 2)
    return np.exp(direction * 2j * np.pi * k / n)


class RootCache:
    """
    Roots of unity for one transform length at a time.

    Pass the same instance to repeated ``transform`` calls of equal
    length to skip recomputing the roots. A call with another length
    replaces the cached set. Only forward roots are stored; the inverse
    direction reads their conjugate.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._length = 0
        self._roots = np.empty(0, dtype=complex)

    @property
    def length(self) -> int:
        """Transform length the cached roots belong to (0 when empty)."""
        return self._length

    def roots(self, n: int, direction: int = 1) -> np.ndarray:
        with self._lock:
            if self._length != n:
                logger.debug(f"RootCache: recomputing roots for length {n} (had {self._length})")
                self._roots = _unit_roots(n)
                self._length = n
            roots = self._roots
        return roots if direction == 1 else roots.conj()

    def clear(self) -> None:
        with self._lock:
            self._roots = np.empty(0, dtype=complex)
            self._length = 0


def _bit_reversed_indices(n: int) -> np.ndarray:
    bits = n.bit_length() - 1
    idx = np.arange(n)
    rev = np.zeros(n, dtype=np.intp)
    for _ in range(bits):
        rev = (rev << 1) | (idx & 1)
        idx = idx >> 1
    return rev


def _butterflies(P: np.ndarray, roots: np.ndarray) -> None:
    """Combine bit-reversed P in place, one stage per power of two."""
    n = P.shape[0]
    size = 2
    while size <= n:
        half = size // 2
        # twiddles for this stage are every (n / size)-th cached root
        w = roots[:: n // size][:half]
        blocks = P.reshape(-1, size)
        u = blocks[:, :half].copy()
        v = blocks[:, half:] * w
        blocks[:, :half] = u + v
        blocks[:, half:] = u - v
        size *= 2


def transform(sequence, direction: int = 1, cache: Optional[RootCache] = None):
    """
    Discrete Fourier transform of ``sequence`` computed in place.

    Parameters
    ----------
    sequence : 1-D complex ndarray or list of complex
        Length must be a power of two. Lists are overwritten element
        by element, ndarrays are mutated directly.
    direction : int
        +1 for the forward transform, -1 for the normalised inverse.
    cache : RootCache | None
        Reuse roots across calls. Without one the roots are built per call.

    Returns
    -------
    The same ``sequence`` object, transformed.

    Raises
    ------
    ValueError : direction is not +1 or -1, or an ndarray is not 1-D.
    InvalidLengthError : length is not a power of two.
    TypeError : ndarray input with a non-complex dtype.
    """
    if direction not in (1, -1):
        raise ValueError(f"direction must be +1 or -1, got {direction!r}")

    if isinstance(sequence, np.ndarray):
        if sequence.ndim != 1:
            raise ValueError(f"expected a 1-D sequence, got {sequence.ndim}-D")
        if not np.iscomplexobj(sequence):
            raise TypeError("ndarray input needs a complex dtype to be transformed in place")

    n = len(sequence)
    if not is_power_of_two(n):
        raise InvalidLengthError(n)

    if isinstance(sequence, np.ndarray) and sequence.flags.c_contiguous:
        P = sequence
    else:
        P = np.array(sequence, dtype=complex)

    P[:] = P[_bit_reversed_indices(n)]

    if cache is not None:
        roots = cache.roots(n, direction)
    else:
        roots = _unit_roots(n, direction)
    _butterflies(P, roots)

    if direction == -1:
        P /= n

    if P is not sequence:
        if isinstance(sequence, np.ndarray):
            sequence[:] = P
        else:
            sequence[:] = P.tolist()
    return sequence
