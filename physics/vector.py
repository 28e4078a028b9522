# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Three component vectors
"""

import math
import numbers


class Vector:
    x: float
    y: float
    z: float

    def __init__(self, x, y, z=0):
        self.x = x
        self.y = y
        self.z = z

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x}, {self.y}, {self.z})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self):
        return Vector(-self.x, -self.y, -self.z)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other):
        # vector * vector is the dot product, vector * scalar scales
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, numbers.Number):
            return Vector(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return Vector(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __xor__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.cross(other)

    def dot(self, other: "Vector"):
        return dot_product(self, other)

    def cross(self, other: "Vector") -> "Vector":
        return cross_product(self, other)

    def magnitude(self):
        """Squared length, v . v (no square root taken)."""
        return self.dot(self)

    def length(self) -> float:
        return length(self)

    def normalized(self) -> "Vector":
        return normalize(self)


def dot_product(u: Vector, v: Vector):
    """
    Implements the scalar (dot) product between two vectors.
    """
    return (u.x * v.x) + (u.y * v.y) + (u.z * v.z)


def cross_product(u: Vector, v: Vector) -> Vector:
    """
    Implements classical cross product u x v in R^3
    Defines a vector orthogonal to u and v with magnitude
    equal to the parallelogram area.
    """
    return Vector(
        x=u.y * v.z - u.z * v.y, y=u.z * v.x - u.x * v.z, z=u.x * v.y - u.y * v.x
    )


def length(u: Vector) -> float:
    return math.sqrt(dot_product(u, u))


def normalize(u: Vector) -> Vector:
    u_len = length(u)
    if u_len == 0:
        raise ValueError("Normalization undefined for zero-length vector")
    return Vector(u.x / u_len, u.y / u_len, u.z / u_len)
