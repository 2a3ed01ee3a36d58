"""Common behaviour of the fixed-dimension vector types.

:class:`FixedVector` owns a generic :class:`~math3d.linalg.Vector` of a fixed
dimension and re-exposes its arithmetic so that every result has the
concrete subclass type. Operands must be of exactly the same concrete type.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import ClassVar, Self

import numpy as np

from math3d.errors import InvalidArgumentError
from math3d.linalg import Vector
from math3d.shared.numeric import is_number


class FixedVector:
    """Base for :class:`Vector3` and :class:`Vector4`."""

    __slots__ = ("_vector",)

    DIMENSION: ClassVar[int]
    AXES: ClassVar[tuple[str, ...]]

    def __init__(self, *components: float):
        for axis, value in zip(self.AXES, components, strict=True):
            if not is_number(value):
                raise InvalidArgumentError(
                    f"{type(self).__name__}.{axis} must be a number, got {type(value).__name__}"
                )
        self._vector = Vector(self.DIMENSION, components)

    @classmethod
    def _wrap(cls, vector: Vector) -> Self:
        obj = cls.__new__(cls)
        obj._vector = vector
        return obj

    def _check_operand(self, other: object, operation: str) -> None:
        if type(other) is not type(self):
            name = type(self).__name__
            raise InvalidArgumentError(f"{operation} is defined between two {name}.")

    @property
    def vector(self) -> Vector:
        """The generic container holding the components."""
        return self._vector

    @property
    def values(self) -> np.ndarray:
        return self._vector.values

    @property
    def magnitude(self) -> float:
        return self._vector.magnitude

    def normalize(self) -> Self:
        return self._wrap(self._vector.normalize())

    def negate(self) -> Self:
        return self._wrap(self._vector.negate())

    def add(self, other: Self) -> Self:
        self._check_operand(other, "Addition")
        return self._wrap(self._vector.add(other._vector))

    def sub(self, other: Self) -> Self:
        """Subtract ``other`` (``self - other``)."""
        self._check_operand(other, "Subtraction")
        return self._wrap(self._vector.sub(other._vector))

    def mul_scalar(self, scalar: float) -> Self:
        return self._wrap(self._vector.mul_scalar(scalar))

    def dot(self, other: Self) -> float:
        self._check_operand(other, "Dot product")
        return self._vector.dot(other._vector)

    def distance_to(self, other: Self) -> float:
        self._check_operand(other, "Distance")
        return self._vector.distance_to(other._vector)

    def equals(self, other: Self) -> bool:
        self._check_operand(other, "Equality")
        return self._vector.equals(other._vector)

    def to_tuple(self) -> tuple[float, ...]:
        return self._vector.to_tuple()

    # Operators

    def __add__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: float) -> Self:
        if not is_number(scalar):
            return NotImplemented
        return self.mul_scalar(scalar)

    def __rmul__(self, scalar: float) -> Self:
        return self.__mul__(scalar)

    def __neg__(self) -> Self:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return self.DIMENSION

    def __repr__(self) -> str:
        args = ", ".join(f"{axis}={value!r}" for axis, value in zip(self.AXES, self.to_tuple()))
        return f"{type(self).__name__}({args})"

    def __str__(self) -> str:
        return str(self._vector)
