"""3-dimensional vector for positions and directions.

Coordinate convention: left-handed, y up, z forward.

Example:
    >>> from math3d import Vector3
    >>> Vector3.right.cross(Vector3.up)
    Vector3(x=0.0, y=0.0, z=1.0)
"""

from __future__ import annotations

from typing import ClassVar

from math3d.errors import InvalidArgumentError
from math3d.geometry.fixed_vector import FixedVector
from math3d.geometry.vector4 import Vector4


class Vector3(FixedVector):
    """Immutable 3-dimensional vector.

    :param x: X component (right)
    :param y: Y component (up)
    :param z: Z component (forward)
    """

    __slots__ = ()

    DIMENSION = 3
    AXES = ("x", "y", "z")

    zero: ClassVar[Vector3]
    one: ClassVar[Vector3]
    up: ClassVar[Vector3]
    down: ClassVar[Vector3]
    left: ClassVar[Vector3]
    right: ClassVar[Vector3]
    forward: ClassVar[Vector3]
    back: ClassVar[Vector3]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z)

    @classmethod
    def from_vector4(cls, vector4: Vector4) -> Vector3:
        """Drop the w component of a Vector4.

        :param vector4: Source vector
        :returns: Vector3 of (x, y, z)
        :raises InvalidArgumentError: If ``vector4`` is not a Vector4
        """
        if not isinstance(vector4, Vector4):
            raise InvalidArgumentError("The argument must be a Vector4.")
        return cls(vector4.x, vector4.y, vector4.z)

    @property
    def x(self) -> float:
        return float(self.values[0])

    @property
    def y(self) -> float:
        return float(self.values[1])

    @property
    def z(self) -> float:
        return float(self.values[2])

    @property
    def homogeneous(self) -> Vector4:
        """The point as a homogeneous Vector4 (w=1)."""
        return Vector4(self.x, self.y, self.z, 1.0)

    @property
    def vector4(self) -> Vector4:
        """The direction as a Vector4 (w=0)."""
        return Vector4(self.x, self.y, self.z, 0.0)

    def average(self, other: Vector3) -> Vector3:
        """Midpoint of the two points."""
        self._check_operand(other, "Average")
        return self.add(other).mul_scalar(0.5)

    def scale(self, other: Vector3) -> Vector3:
        """Component-wise product.

        Given v1 = (x1, y1, z1) and v2 = (x2, y2, z2),
        ``v1.scale(v2) = (x1 * x2, y1 * y2, z1 * z2)``.
        """
        self._check_operand(other, "Scaling")
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def cross(self, other: Vector3) -> Vector3:
        """Cross product (``self x other``)."""
        self._check_operand(other, "Cross product")
        ax, ay, az = self.to_tuple()
        bx, by, bz = other.to_tuple()
        return Vector3(
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        )


Vector3.back = Vector3(0, 0, -1)
Vector3.down = Vector3(0, -1, 0)
Vector3.forward = Vector3(0, 0, 1)
Vector3.left = Vector3(-1, 0, 0)
Vector3.one = Vector3(1, 1, 1)
Vector3.right = Vector3(1, 0, 0)
Vector3.up = Vector3(0, 1, 0)
Vector3.zero = Vector3(0, 0, 0)
