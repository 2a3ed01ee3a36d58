"""Shared utilities for math3d.

This module contains the scalar helpers and array-level rotation kernels
used by both the quaternion and the 4x4 matrix types.
"""

from math3d.shared.numeric import (
    is_integer,
    is_number,
    is_number_sequence,
    normalize_degrees,
)
from math3d.shared.rotation import (
    axis_angle_to_quaternion,
    canonicalize_quaternion,
    euler_zxy_to_quaternion,
    quaternion_multiply,
    quaternion_rotate_vector,
    quaternion_to_axis_angle,
    quaternion_to_euler_zxy,
    quaternion_to_rotation_matrix,
)

__all__ = [
    # Rotation kernels
    "quaternion_multiply",
    "canonicalize_quaternion",
    "quaternion_rotate_vector",
    "quaternion_to_rotation_matrix",
    "euler_zxy_to_quaternion",
    "quaternion_to_euler_zxy",
    "axis_angle_to_quaternion",
    "quaternion_to_axis_angle",
    # Scalar helpers
    "is_number",
    "is_integer",
    "is_number_sequence",
    "normalize_degrees",
]
