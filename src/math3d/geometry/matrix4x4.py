"""4x4 matrices for affine 3D transforms.

:class:`Matrix4x4` wraps a generic 4x4 :class:`~math3d.linalg.Matrix` and adds
named element accessors, an analytic determinant and inverse, and the
scale / translation / rotation / TRS factories.

Matrices act on column vectors: ``M.mul_vector3(v)`` computes ``M @ (v, 1)``.
Element ``m_ij`` is row ``i``, column ``j`` (1-indexed).

Example:
    >>> from math3d import Matrix4x4, Quaternion, Vector3
    >>> M = Matrix4x4.trs(Vector3(1, 2, 3), Quaternion.identity, Vector3.one)
    >>> M.mul_vector3(Vector3.zero)
    Vector3(x=1.0, y=2.0, z=3.0)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import ClassVar

import numpy as np

from math3d.errors import InvalidArgumentError
from math3d.geometry.quaternion import Quaternion
from math3d.geometry.vector3 import Vector3
from math3d.geometry.vector4 import Vector4
from math3d.linalg import Matrix, MatrixSize
from math3d.shared.numeric import is_number
from math3d.shared.rotation import quaternion_to_rotation_matrix

logger = logging.getLogger(__name__)


def _element(row: int, column: int) -> property:
    index = 4 * (row - 1) + (column - 1)

    def getter(self: Matrix4x4) -> float:
        return float(self._matrix.values[index])

    getter.__doc__ = f"Element at row {row}, column {column}."
    return property(getter)


# ============================================================================
# 4x4 Homogeneous Transformation Matrix Building (NumPy)
# ============================================================================


def _build_translation_matrix_4x4(translation: np.ndarray) -> np.ndarray:
    """Build 4x4 translation matrix."""
    T = np.eye(4, dtype=np.float64)
    T[:3, 3] = translation
    return T


def _build_rotation_matrix_4x4(rotation_3x3: np.ndarray) -> np.ndarray:
    """Build 4x4 rotation matrix from 3x3 rotation matrix."""
    R = np.eye(4, dtype=np.float64)
    R[:3, :3] = rotation_3x3
    return R


def _build_scale_matrix_4x4(scale: np.ndarray) -> np.ndarray:
    """Build 4x4 scale matrix."""
    S = np.eye(4, dtype=np.float64)
    S[0, 0] = scale[0]
    S[1, 1] = scale[1]
    S[2, 2] = scale[2]
    return S


def _minors_2x2(a: list[float]) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """2x2 minors of the top two rows (``s``) and bottom two rows (``c``).

    :param a: 16 row-major values
    :returns: ``(s0..s5, c0..c5)``, each over the column pairs
        (0,1) (0,2) (0,3) (1,2) (1,3) (2,3)
    """
    (a00, a01, a02, a03,
     a10, a11, a12, a13,
     a20, a21, a22, a23,
     a30, a31, a32, a33) = a  # fmt: skip

    s = (
        a00 * a11 - a10 * a01,
        a00 * a12 - a10 * a02,
        a00 * a13 - a10 * a03,
        a01 * a12 - a11 * a02,
        a01 * a13 - a11 * a03,
        a02 * a13 - a12 * a03,
    )
    c = (
        a20 * a31 - a30 * a21,
        a20 * a32 - a30 * a22,
        a20 * a33 - a30 * a23,
        a21 * a32 - a31 * a22,
        a21 * a33 - a31 * a23,
        a22 * a33 - a32 * a23,
    )
    return s, c


def _determinant_from_minors(s: tuple[float, ...], c: tuple[float, ...]) -> float:
    return s[0] * c[5] - s[1] * c[4] + s[2] * c[3] + s[3] * c[2] - s[4] * c[1] + s[5] * c[0]


class Matrix4x4:
    """Immutable 4x4 matrix.

    :param values: 16 row-major values; padded with zeros or truncated
    """

    __slots__ = ("_matrix",)

    zero: ClassVar[Matrix4x4]
    identity: ClassVar[Matrix4x4]

    m11 = _element(1, 1)
    m12 = _element(1, 2)
    m13 = _element(1, 3)
    m14 = _element(1, 4)
    m21 = _element(2, 1)
    m22 = _element(2, 2)
    m23 = _element(2, 3)
    m24 = _element(2, 4)
    m31 = _element(3, 1)
    m32 = _element(3, 2)
    m33 = _element(3, 3)
    m34 = _element(3, 4)
    m41 = _element(4, 1)
    m42 = _element(4, 2)
    m43 = _element(4, 3)
    m44 = _element(4, 4)

    def __init__(self, values: Iterable[float] | np.ndarray | None = None):
        self._matrix = Matrix(4, 4, values)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Matrix4x4:
        """Wrap a generic 4x4 matrix.

        :raises InvalidArgumentError: If ``matrix`` is not a 4x4 Matrix
        """
        if not isinstance(matrix, Matrix) or matrix.size != (4, 4):
            raise InvalidArgumentError("Matrix4x4 can only be created from a 4x4 Matrix.")
        obj = cls.__new__(cls)
        obj._matrix = matrix
        return obj

    # Factories

    @classmethod
    def scale_matrix(cls, scale: float | Vector3) -> Matrix4x4:
        """Scale along each axis.

        :param scale: Uniform factor or per-axis Vector3
        :raises InvalidArgumentError: If ``scale`` is neither a number nor a Vector3
        """
        if is_number(scale):
            scale = Vector3(scale, scale, scale)
        elif not isinstance(scale, Vector3):
            raise InvalidArgumentError("scale must either be a number or a Vector3.")
        return cls(_build_scale_matrix_4x4(scale.values))

    @classmethod
    def flip_matrix(cls, flip_x: bool, flip_y: bool, flip_z: bool) -> Matrix4x4:
        """Scale matrix reversing the direction of the selected axes."""
        return cls.scale_matrix(
            Vector3(-1 if flip_x else 1, -1 if flip_y else 1, -1 if flip_z else 1)
        )

    @classmethod
    def translation_matrix(cls, translation: Vector3) -> Matrix4x4:
        if not isinstance(translation, Vector3):
            raise InvalidArgumentError("translation must be a Vector3.")
        return cls(_build_translation_matrix_4x4(translation.values))

    @classmethod
    def rotation_matrix(cls, rotation: Quaternion) -> Matrix4x4:
        if not isinstance(rotation, Quaternion):
            raise InvalidArgumentError("rotation must be a Quaternion.")
        return cls(_build_rotation_matrix_4x4(quaternion_to_rotation_matrix(rotation.values)))

    @classmethod
    def trs(
        cls, translation: Vector3, rotation: Quaternion, scale: float | Vector3
    ) -> Matrix4x4:
        """Translation-rotation-scale matrix ``T @ R @ S``.

        Applied to a vector, scale acts first, then rotation, then translation.
        """
        t = cls.translation_matrix(translation)
        r = cls.rotation_matrix(rotation)
        s = cls.scale_matrix(scale)
        return t.mul(r.mul(s))

    @classmethod
    def local_to_world_matrix(
        cls,
        position: Vector3,
        rotation: Quaternion | None = None,
        scale: float | Vector3 | None = None,
    ) -> Matrix4x4:
        """Conversion from a local space to world space.

        :param position: Origin of the local space in world space
        :param rotation: Rotation of the local space, identity if omitted
        :param scale: (local space scale) / (world space scale), one if omitted
        """
        if rotation is None:
            rotation = Quaternion.identity
        if scale is None:
            scale = Vector3.one
        return cls.trs(position, rotation, scale)

    @classmethod
    def world_to_local_matrix(
        cls,
        position: Vector3,
        rotation: Quaternion | None = None,
        scale: float | Vector3 | None = None,
    ) -> Matrix4x4 | None:
        """Inverse of :meth:`local_to_world_matrix`; None for a zero scale."""
        return cls.local_to_world_matrix(position, rotation, scale).inverse()

    # Views

    @property
    def matrix(self) -> Matrix:
        """The generic container holding the values."""
        return self._matrix

    @property
    def size(self) -> MatrixSize:
        return self._matrix.size

    @property
    def values(self) -> np.ndarray:
        return self._matrix.values

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return self._matrix.rows

    @property
    def columns(self) -> tuple[tuple[float, ...], ...]:
        return self._matrix.columns

    def to_numpy(self) -> np.ndarray:
        return self._matrix.to_numpy()

    # Algebra

    def determinant(self) -> float:
        """Determinant by cofactor expansion over 2x2 minors."""
        s, c = _minors_2x2(self._matrix.values.tolist())
        return _determinant_from_minors(s, c)

    def inverse(self) -> Matrix4x4 | None:
        """Adjugate divided by determinant.

        :returns: Inverse matrix, or None if the determinant is exactly 0
        """
        a = self._matrix.values.tolist()
        (a00, a01, a02, a03,
         a10, a11, a12, a13,
         a20, a21, a22, a23,
         a30, a31, a32, a33) = a  # fmt: skip
        s, c = _minors_2x2(a)
        s0, s1, s2, s3, s4, s5 = s
        c0, c1, c2, c3, c4, c5 = c

        det = _determinant_from_minors(s, c)
        if det == 0:
            logger.debug("[Matrix4x4] Singular matrix has no inverse")
            return None

        adjugate = [
            a11 * c5 - a12 * c4 + a13 * c3,
            -a01 * c5 + a02 * c4 - a03 * c3,
            a31 * s5 - a32 * s4 + a33 * s3,
            -a21 * s5 + a22 * s4 - a23 * s3,
            -a10 * c5 + a12 * c2 - a13 * c1,
            a00 * c5 - a02 * c2 + a03 * c1,
            -a30 * s5 + a32 * s2 - a33 * s1,
            a20 * s5 - a22 * s2 + a23 * s1,
            a10 * c4 - a11 * c2 + a13 * c0,
            -a00 * c4 + a01 * c2 - a03 * c0,
            a30 * s4 - a31 * s2 + a33 * s0,
            -a20 * s4 + a21 * s2 - a23 * s0,
            -a10 * c3 + a11 * c1 - a12 * c0,
            a00 * c3 - a01 * c1 + a02 * c0,
            -a30 * s3 + a31 * s1 - a32 * s0,
            a20 * s3 - a21 * s1 + a22 * s0,
        ]
        inv_det = 1.0 / det
        return Matrix4x4([v * inv_det for v in adjugate])

    def _require_matrix4x4(self, other: object, operation: str) -> None:
        if not isinstance(other, Matrix4x4):
            raise InvalidArgumentError(f"{operation} is defined between two Matrix4x4.")

    def negate(self) -> Matrix4x4:
        return Matrix4x4.from_matrix(self._matrix.negate())

    def transpose(self) -> Matrix4x4:
        return Matrix4x4.from_matrix(self._matrix.transpose())

    def add(self, other: Matrix4x4) -> Matrix4x4:
        self._require_matrix4x4(other, "Addition")
        return Matrix4x4.from_matrix(self._matrix.add(other._matrix))

    def sub(self, other: Matrix4x4) -> Matrix4x4:
        """Subtract ``other`` (``self - other``)."""
        self._require_matrix4x4(other, "Subtraction")
        return Matrix4x4.from_matrix(self._matrix.sub(other._matrix))

    def mul_scalar(self, scalar: float) -> Matrix4x4:
        return Matrix4x4.from_matrix(self._matrix.mul_scalar(scalar))

    def mul(self, other: Matrix4x4) -> Matrix4x4:
        """Right multiply (``self @ other``)."""
        self._require_matrix4x4(other, "Multiplication")
        return Matrix4x4.from_matrix(self._matrix.mul(other._matrix))

    def mul_vector(self, vector4: Vector4) -> Vector4:
        """Multiply a homogeneous column vector."""
        if not isinstance(vector4, Vector4):
            raise InvalidArgumentError("mul_vector expects a Vector4 as argument.")
        return Vector4(*self._matrix.mul_vector(vector4.vector).values)

    def mul_vector3(self, vector3: Vector3) -> Vector3:
        """Transform a point (w=1) and drop w; no perspective divide."""
        if not isinstance(vector3, Vector3):
            raise InvalidArgumentError("mul_vector3 expects a Vector3 as argument.")
        return Vector3.from_vector4(self.mul_vector(vector3.homogeneous))

    def equals(self, other: Matrix4x4) -> bool:
        self._require_matrix4x4(other, "Equality")
        return self._matrix.equals(other._matrix)

    # Operators

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: float) -> Matrix4x4:
        if not is_number(scalar):
            return NotImplemented
        return self.mul_scalar(scalar)

    def __rmul__(self, scalar: float) -> Matrix4x4:
        return self.__mul__(scalar)

    def __matmul__(self, other: Matrix4x4 | Vector4 | Vector3) -> Matrix4x4 | Vector4 | Vector3:
        if isinstance(other, Matrix4x4):
            return self.mul(other)
        if isinstance(other, Vector4):
            return self.mul_vector(other)
        if isinstance(other, Vector3):
            return self.mul_vector3(other)
        return NotImplemented

    def __neg__(self) -> Matrix4x4:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix4x4({self._matrix.values.tolist()})"

    def __str__(self) -> str:
        return str(self._matrix)


Matrix4x4.zero = Matrix4x4()
Matrix4x4.identity = Matrix4x4(np.eye(4))
