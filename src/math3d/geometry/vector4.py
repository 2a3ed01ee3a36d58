"""4-dimensional vector, used for homogeneous coordinates."""

from __future__ import annotations

from typing import ClassVar

from math3d.geometry.fixed_vector import FixedVector


class Vector4(FixedVector):
    """Immutable 4-dimensional vector.

    :param x: X component
    :param y: Y component
    :param z: Z component
    :param w: W component (1 for points, 0 for directions)
    """

    __slots__ = ()

    DIMENSION = 4
    AXES = ("x", "y", "z", "w")

    zero: ClassVar[Vector4]
    one: ClassVar[Vector4]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0):
        super().__init__(x, y, z, w)

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
    def w(self) -> float:
        return float(self.values[3])


Vector4.zero = Vector4(0, 0, 0, 0)
Vector4.one = Vector4(1, 1, 1, 1)
