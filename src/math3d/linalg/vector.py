"""Generic numeric vector of fixed dimension.

A :class:`Vector` is an immutable, NumPy-backed sequence of float64
components. Short input is zero-padded on the right and long input is
truncated, so ``len(vector.values) == vector.dimension`` always holds.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from math3d.config import TOLERANCE_CONFIG
from math3d.errors import DimensionMismatchError, InvalidArgumentError
from math3d.shared.numeric import is_integer, is_number, is_number_sequence


def _flat_values(values: Iterable[float] | np.ndarray | None, size: int, owner: str) -> np.ndarray:
    """Build a read-only float64 array of exactly ``size`` entries.

    :param values: Flat numeric sequence, NumPy array or None (all zeros)
    :param size: Required number of entries
    :param owner: Type name used in error messages
    :returns: Zero-padded or truncated read-only array
    :raises InvalidArgumentError: If any entry is not a number
    """
    out = np.zeros(size, dtype=np.float64)

    if values is not None:
        if isinstance(values, np.ndarray):
            seq = values.ravel()
        elif isinstance(values, str | bytes) or not isinstance(values, Iterable):
            raise InvalidArgumentError(f"Invalid values for {owner}: expected a numeric sequence")
        else:
            seq = list(values)

        if not is_number_sequence(seq):
            raise InvalidArgumentError(f"Invalid values for {owner}: every entry must be a number")

        n = min(size, len(seq))
        if n:
            out[:n] = np.asarray(seq[:n], dtype=np.float64)

    out.flags.writeable = False
    return out


class Vector:
    """A vector of arbitrary dimension.

    :param dimension: Number of components, a positive integer
    :param values: Component values; padded with zeros or truncated to ``dimension``

    Example:
        >>> Vector(3, [1, 2])
        Vector(3, [1.0, 2.0, 0.0])
    """

    __slots__ = ("_dimension", "_values")

    def __init__(self, dimension: int, values: Iterable[float] | np.ndarray | None = None):
        if not is_integer(dimension) or dimension <= 0:
            raise InvalidArgumentError(
                f"Vector dimension must be a positive integer, got {dimension!r}"
            )
        self._dimension = int(dimension)
        self._values = _flat_values(values, self._dimension, "Vector")

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def values(self) -> np.ndarray:
        """Read-only float64 array of the components."""
        return self._values

    @property
    def magnitude(self) -> float:
        return float(np.sqrt(np.dot(self._values, self._values)))

    def _check_operand(self, vector: Vector, operation: str) -> None:
        if not isinstance(vector, Vector):
            raise InvalidArgumentError(f"{operation} is defined between two Vectors.")
        if self._dimension != vector._dimension:
            raise DimensionMismatchError(
                f"{operation}: vectors should have the same dimension "
                f"({self._dimension} != {vector._dimension})"
            )

    def normalize(self) -> Vector:
        """Return the unit vector in the same direction.

        A zero vector has no direction and is returned unchanged.
        """
        magnitude = self.magnitude
        if magnitude == 0:
            return self
        return Vector(self._dimension, self._values / magnitude)

    def negate(self) -> Vector:
        return Vector(self._dimension, -self._values)

    def equals(self, vector: Vector) -> bool:
        """Componentwise comparison within the equality tolerance.

        :param vector: Vector to compare against
        :returns: False for differing dimensions, otherwise whether all
            components are within ``CONFIG.tolerance.equality``
        :raises InvalidArgumentError: If ``vector`` is not a Vector
        """
        if not isinstance(vector, Vector):
            raise InvalidArgumentError("Equality is defined between two Vectors.")
        if self._dimension != vector._dimension:
            return False
        return TOLERANCE_CONFIG.equality.all_close(self._values, vector._values)

    def add(self, vector: Vector) -> Vector:
        self._check_operand(vector, "Addition")
        return Vector(self._dimension, self._values + vector._values)

    def sub(self, vector: Vector) -> Vector:
        """Subtract ``vector`` (``self - vector``)."""
        self._check_operand(vector, "Subtraction")
        return Vector(self._dimension, self._values - vector._values)

    def mul_scalar(self, scalar: float) -> Vector:
        if not is_number(scalar):
            raise InvalidArgumentError(f"scalar must be a number, got {type(scalar).__name__}")
        return Vector(self._dimension, self._values * scalar)

    def dot(self, vector: Vector) -> float:
        self._check_operand(vector, "Dot product")
        return float(np.dot(self._values, vector._values))

    def distance_to(self, vector: Vector) -> float:
        """Euclidean distance between the two points."""
        self._check_operand(vector, "Distance")
        diff = self._values - vector._values
        return float(np.sqrt(np.dot(diff, diff)))

    def to_tuple(self) -> tuple[float, ...]:
        return tuple(float(v) for v in self._values)

    # Operators

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: float) -> Vector:
        if not is_number(scalar):
            return NotImplemented
        return self.mul_scalar(scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __neg__(self) -> Vector:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    # Equality is approximate; instances are unhashable
    __hash__ = None

    def __len__(self) -> int:
        return self._dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __repr__(self) -> str:
        return f"Vector({self._dimension}, {list(self.to_tuple())})"

    def __str__(self) -> str:
        return "(" + ",".join(str(v) for v in self.to_tuple()) + ")"
