"""Generic numeric matrix with an arbitrary number of rows and columns.

Values are stored row-major in a flat read-only float64 array, with the
same zero-pad / truncate rule as :class:`~math3d.linalg.Vector`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

from math3d.config import TOLERANCE_CONFIG
from math3d.errors import DimensionMismatchError, InvalidArgumentError
from math3d.linalg.vector import Vector, _flat_values
from math3d.shared.numeric import is_integer, is_number


class MatrixSize(NamedTuple):
    """Shape of a matrix."""

    rows: int
    columns: int


class Matrix:
    """A matrix with arbitrary number of rows and columns.

    :param rows: Number of rows
    :param columns: Number of columns
    :param values: Flat row-major values (a 2D NumPy array is flattened)

    Example:
        >>> m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        >>> m.rows
        ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))
    """

    __slots__ = ("_size", "_values")

    def __init__(
        self,
        rows: int,
        columns: int,
        values: Iterable[float] | np.ndarray | None = None,
    ):
        if not is_integer(rows) or rows <= 0:
            raise InvalidArgumentError(f"rows must be a positive integer, got {rows!r}")
        if not is_integer(columns) or columns <= 0:
            raise InvalidArgumentError(f"columns must be a positive integer, got {columns!r}")

        self._size = MatrixSize(int(rows), int(columns))
        self._values = _flat_values(values, self._size.rows * self._size.columns, "Matrix")

    @property
    def size(self) -> MatrixSize:
        return self._size

    @property
    def values(self) -> np.ndarray:
        """Read-only flat row-major float64 array."""
        return self._values

    def _grid(self) -> np.ndarray:
        return self._values.reshape(self._size)

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(tuple(float(v) for v in row) for row in self._grid())

    @property
    def columns(self) -> tuple[tuple[float, ...], ...]:
        return tuple(tuple(float(v) for v in col) for col in self._grid().T)

    def _check_same_size(self, matrix: Matrix, operation: str) -> None:
        if not isinstance(matrix, Matrix):
            raise InvalidArgumentError(f"{operation} is defined between two matrices.")
        if self._size != matrix._size:
            raise DimensionMismatchError(
                f"{operation}: matrices should have the same number of rows and columns "
                f"({self._size.rows}x{self._size.columns} != "
                f"{matrix._size.rows}x{matrix._size.columns})"
            )

    def negate(self) -> Matrix:
        return Matrix(*self._size, -self._values)

    def mul_scalar(self, scalar: float) -> Matrix:
        if not is_number(scalar):
            raise InvalidArgumentError(f"scalar must be a number, got {type(scalar).__name__}")
        return Matrix(*self._size, self._values * scalar)

    def equals(self, matrix: Matrix) -> bool:
        """Same shape and componentwise equal within the equality tolerance.

        :raises InvalidArgumentError: If ``matrix`` is not a Matrix
        """
        if not isinstance(matrix, Matrix):
            raise InvalidArgumentError("Equality is defined between two matrices.")
        return self._size == matrix._size and TOLERANCE_CONFIG.equality.all_close(
            self._values, matrix._values
        )

    def transpose(self) -> Matrix:
        return Matrix(self._size.columns, self._size.rows, self._grid().T)

    def add(self, matrix: Matrix) -> Matrix:
        self._check_same_size(matrix, "Addition")
        return Matrix(*self._size, self._values + matrix._values)

    def sub(self, matrix: Matrix) -> Matrix:
        """Subtract ``matrix`` (``self - matrix``)."""
        self._check_same_size(matrix, "Subtraction")
        return Matrix(*self._size, self._values - matrix._values)

    def mul(self, matrix: Matrix) -> Matrix:
        """Right multiply (``self @ matrix``).

        :raises DimensionMismatchError: If the column count of ``self`` differs
            from the row count of ``matrix``
        """
        if not isinstance(matrix, Matrix):
            raise InvalidArgumentError("Multiplication is defined between two matrices.")
        if self._size.columns != matrix._size.rows:
            raise DimensionMismatchError(
                "The number of columns in the left matrix should be equal to the number "
                f"of rows in the right matrix ({self._size.columns} != {matrix._size.rows})"
            )
        return Matrix(self._size.rows, matrix._size.columns, self._grid() @ matrix._grid())

    def mul_vector(self, vector: Vector) -> Vector:
        """Right multiply with a column vector (``self @ vector``).

        :returns: Vector with one component per row
        """
        if not isinstance(vector, Vector):
            raise InvalidArgumentError("mul_vector expects a Vector as argument.")
        if self._size.columns != vector.dimension:
            raise DimensionMismatchError(
                "The number of columns in the matrix should be equal to the dimension "
                f"of the vector ({self._size.columns} != {vector.dimension})"
            )
        return Vector(self._size.rows, self._grid() @ vector.values)

    def to_numpy(self) -> np.ndarray:
        """Writable 2D copy of the matrix."""
        return self._grid().copy()

    # Operators

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: float) -> Matrix:
        if not is_number(scalar):
            return NotImplemented
        return self.mul_scalar(scalar)

    def __rmul__(self, scalar: float) -> Matrix:
        return self.__mul__(scalar)

    def __matmul__(self, other: Matrix | Vector) -> Matrix | Vector:
        if isinstance(other, Vector):
            return self.mul_vector(other)
        if isinstance(other, Matrix):
            return self.mul(other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self._size.rows}, {self._size.columns}, {list(self._values.tolist())})"

    def __str__(self) -> str:
        return "\n".join("|" + ",".join(str(v) for v in row) + "|" for row in self.rows)
