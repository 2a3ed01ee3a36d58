"""
math3d - 3D math foundation for graphics and games

Vectors, unit quaternions, 4x4 matrices and a scene-graph transform
hierarchy.

Conventions:
- Left-handed coordinate system, y up, z forward
- Euler angles in degrees, applied in the order z, then x, then y
- Quaternions stored as (x, y, z, w), always normalized
- Matrices act on column vectors; TRS = Translation @ Rotation @ Scale

Features:
- Immutable value types: Vector3, Vector4, Quaternion, Matrix4x4
- Euler / angle-axis conversions with gimbal-lock handling
- Analytic 4x4 determinant and inverse
- Transform hierarchy with local/world synchronization
- Generic Vector / Matrix scaffolding (NumPy-backed)

Example - Value types:
    >>> from math3d import Matrix4x4, Quaternion, Vector3
    >>>
    >>> q = Quaternion.euler(0, 90, 0)
    >>> q.mul_vector3(Vector3.forward).equals(Vector3.right)
    True
    >>> Matrix4x4.scale_matrix(Vector3(3, 4, 5)).mul_vector3(Vector3.up)
    Vector3(x=0.0, y=4.0, z=0.0)

Example - Transform hierarchy:
    >>> from math3d import Hierarchy, Space
    >>>
    >>> scene = Hierarchy()
    >>> parent = scene.create(Vector3(0, 0, 5), name="parent")
    >>> child = scene.create(Vector3(0, 0, 6), name="child")
    >>> parent.add_child(child)
    >>> _ = parent.translate(Vector3.up, Space.WORLD)
    >>> child.position
    Vector3(x=0.0, y=1.0, z=6.0)
"""

__version__ = "0.1.0"

from math3d.config import CONFIG, TOLERANCE_CONFIG, Math3DConfig, ToleranceConfig, ToleranceSpec
from math3d.errors import (
    DimensionMismatchError,
    HierarchyError,
    InvalidArgumentError,
    Math3DError,
)
from math3d.geometry import AngleAxis, Matrix4x4, Quaternion, Vector3, Vector4
from math3d.linalg import Matrix, MatrixSize, Vector
from math3d.transform import Hierarchy, Space, Transform

__all__ = [
    # Value types
    "Vector3",
    "Vector4",
    "Quaternion",
    "AngleAxis",
    "Matrix4x4",
    # Transform hierarchy
    "Hierarchy",
    "Transform",
    "Space",
    # Generic scaffolding
    "Vector",
    "Matrix",
    "MatrixSize",
    # Errors
    "Math3DError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "HierarchyError",
    # Configuration
    "CONFIG",
    "TOLERANCE_CONFIG",
    "Math3DConfig",
    "ToleranceConfig",
    "ToleranceSpec",
    "__version__",
]
