"""Fixed-size 3D value types.

All types are immutable; every operation returns a new value.
"""

from math3d.geometry.fixed_vector import FixedVector
from math3d.geometry.matrix4x4 import Matrix4x4
from math3d.geometry.quaternion import AngleAxis, Quaternion
from math3d.geometry.vector3 import Vector3
from math3d.geometry.vector4 import Vector4

__all__ = [
    "FixedVector",
    "Vector3",
    "Vector4",
    "Quaternion",
    "AngleAxis",
    "Matrix4x4",
]
