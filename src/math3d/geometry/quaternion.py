"""Unit quaternion rotations.

A :class:`Quaternion` is stored normalized: the constructor divides
(x, y, z, w) by its magnitude. The zero quaternion is the one exception and
is kept as given.

Euler angles are in degrees and are applied in the order z, then x, then y
(left-handed, y-up, z-forward coordinate system).

Example:
    >>> from math3d import Quaternion, Vector3
    >>> q = Quaternion.euler(0, 0, 90)
    >>> q.mul_vector3(Vector3.right).equals(Vector3.up)
    True
    >>> round((q * q).euler_angles.z, 6)
    180.0
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import ClassVar, NamedTuple

import numpy as np

from math3d.errors import InvalidArgumentError
from math3d.geometry.vector3 import Vector3
from math3d.linalg import Vector
from math3d.shared.numeric import is_number
from math3d.shared.rotation import (
    axis_angle_to_quaternion,
    canonicalize_quaternion,
    euler_zxy_to_quaternion,
    quaternion_multiply,
    quaternion_rotate_vector,
    quaternion_to_axis_angle,
    quaternion_to_euler_zxy,
)

logger = logging.getLogger(__name__)


class AngleAxis(NamedTuple):
    """Rotation expressed as an angle (degrees) around an axis."""

    axis: Vector3
    angle: float


def _require_quaternion(value: object, operation: str) -> None:
    if not isinstance(value, Quaternion):
        raise InvalidArgumentError(f"{operation}: the argument must be a Quaternion.")


class Quaternion:
    """Immutable unit quaternion (x, y, z, w), with w = cos(angle / 2).

    :param x: X component
    :param y: Y component
    :param z: Z component
    :param w: W (scalar) component
    """

    __slots__ = ("_vector",)

    identity: ClassVar[Quaternion]
    zero: ClassVar[Quaternion]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0):
        for name, value in (("x", x), ("y", y), ("z", z), ("w", w)):
            if not is_number(value):
                raise InvalidArgumentError(
                    f"Quaternion.{name} must be a number, got {type(value).__name__}"
                )
        # normalize() leaves the zero quaternion as it is
        self._vector = Vector(4, (x, y, z, w)).normalize()

    @classmethod
    def _from_array(cls, q: np.ndarray) -> Quaternion:
        return cls(float(q[0]), float(q[1]), float(q[2]), float(q[3]))

    # Factories

    @classmethod
    def euler(cls, x: float, y: float, z: float) -> Quaternion:
        """Rotation from Euler angles in degrees.

        The rotation about z is applied first, then x, then y. Of the two
        quaternions describing the rotation, the one with ``w > 0`` is
        returned, so ``Quaternion.euler(*q.euler_angles)`` rebuilds ``q``
        for any such ``q`` away from the gimbal-lock poles.

        :param x: Angle around the x axis
        :param y: Angle around the y axis
        :param z: Angle around the z axis
        :returns: Unit quaternion
        :raises InvalidArgumentError: If an angle is not a number
        """
        if not (is_number(x) and is_number(y) and is_number(z)):
            raise InvalidArgumentError("Euler angles must be numbers.")
        return cls._from_array(canonicalize_quaternion(euler_zxy_to_quaternion((x, y, z))))

    @classmethod
    def from_angle_axis(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` degrees around ``axis``.

        :param axis: Rotation axis, normalized before use
        :param angle: Angle in degrees
        :returns: Unit quaternion
        :raises InvalidArgumentError: If axis is not a Vector3 or angle not a number
        """
        if not isinstance(axis, Vector3):
            raise InvalidArgumentError("axis must be a Vector3.")
        if not is_number(angle):
            raise InvalidArgumentError("angle must be a number.")
        return cls._from_array(axis_angle_to_quaternion(axis.normalize().values, angle))

    # Components

    @property
    def x(self) -> float:
        return float(self._vector.values[0])

    @property
    def y(self) -> float:
        return float(self._vector.values[1])

    @property
    def z(self) -> float:
        return float(self._vector.values[2])

    @property
    def w(self) -> float:
        return float(self._vector.values[3])

    @property
    def values(self) -> np.ndarray:
        """Read-only array (x, y, z, w)."""
        return self._vector.values

    @property
    def euler_angles(self) -> Vector3:
        """Euler angles in degrees, each in ``[0, 360)``.

        At the gimbal-lock poles the result is exactly (90, 0, 0) or
        (-90, 0, 0).
        """
        return Vector3(*quaternion_to_euler_zxy(self.values))

    @property
    def angle_axis(self) -> AngleAxis:
        """Angle (degrees) and unit axis of the rotation.

        A rotation by 0 (or 360) degrees has no axis; it is reported as the
        zero vector with an angle of 0.
        """
        axis, angle = quaternion_to_axis_angle(self.values)
        if not axis.any():
            logger.debug("[Quaternion] Rotation axis undefined for w=%r", self.w)
        return AngleAxis(Vector3(*axis), angle)

    # Operations

    def conjugate(self) -> Quaternion:
        """The conjugate (-x, -y, -z, w)."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quaternion:
        """Inverse rotation; equal to the conjugate for unit quaternions."""
        return self.conjugate()

    def equals(self, quaternion: Quaternion) -> bool:
        """Componentwise comparison within the equality tolerance.

        ``q`` and ``-q`` describe the same rotation but are not equal.
        """
        _require_quaternion(quaternion, "Equality")
        return self._vector.equals(quaternion._vector)

    def dot(self, quaternion: Quaternion) -> float:
        _require_quaternion(quaternion, "Dot product")
        return self._vector.dot(quaternion._vector)

    def distance_to(self, quaternion: Quaternion) -> float:
        """Similarity score ``1 - dot^2`` in [0, 1].

        0 for the same rotation (up to sign), 1 for rotations 180 degrees
        apart. Cheaper than :meth:`angle_to` but not a metric.
        """
        _require_quaternion(quaternion, "Distance")
        dot = self.dot(quaternion)
        return 1 - dot * dot

    def angle_to(self, quaternion: Quaternion) -> float:
        """Angle in degrees between the two rotations."""
        _require_quaternion(quaternion, "Angle")
        dot = self.dot(quaternion)
        cos_angle = max(-1.0, min(1.0, 2 * dot * dot - 1))
        return math.degrees(math.acos(cos_angle))

    def mul(self, quaternion: Quaternion) -> Quaternion:
        """Compose rotations: ``quaternion`` is applied first, then ``self``.

        ``a.mul(b).mul_vector3(v)`` equals ``a.mul_vector3(b.mul_vector3(v))``.
        """
        _require_quaternion(quaternion, "Multiplication")
        return Quaternion._from_array(quaternion_multiply(self.values, quaternion.values))

    def mul_vector3(self, vector3: Vector3) -> Vector3:
        """Rotate a vector."""
        if not isinstance(vector3, Vector3):
            raise InvalidArgumentError("mul_vector3 expects a Vector3 as argument.")
        return Vector3(*quaternion_rotate_vector(self.values, vector3.values))

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    # Operators

    def __mul__(self, other: Quaternion | Vector3) -> Quaternion | Vector3:
        if isinstance(other, Quaternion):
            return self.mul(other)
        if isinstance(other, Vector3):
            return self.mul_vector3(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __repr__(self) -> str:
        return f"Quaternion(x={self.x!r}, y={self.y!r}, z={self.z!r}, w={self.w!r})"

    def __str__(self) -> str:
        return str(self._vector)


Quaternion.identity = Quaternion(0, 0, 0, 1)
Quaternion.zero = Quaternion(0, 0, 0, 0)
