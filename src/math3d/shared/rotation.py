"""Array-level rotation kernels.

These functions operate on plain NumPy arrays and are the canonical
implementations behind :class:`~math3d.geometry.Quaternion` and the rotation
factories of :class:`~math3d.geometry.Matrix4x4`.

Quaternion Convention: (x, y, z, w) - scalar last
Euler Convention: degrees, applied in the order z, then x, then y
Handedness: left-handed, y-up, z-forward
"""

from __future__ import annotations

import math
from typing import TypeAlias

import numpy as np

from math3d.config import TOLERANCE_CONFIG
from math3d.shared.numeric import normalize_degrees

# Type aliases
ArrayLike: TypeAlias = np.ndarray | list | tuple


# ============================================================================
# Composition
# ============================================================================


def quaternion_multiply(q1: ArrayLike, q2: ArrayLike) -> np.ndarray:
    """Hamilton product ``q1 * q2``.

    The product applies ``q2`` first, then ``q1``.

    :param q1: First quaternion [4] or [N, 4] (x, y, z, w)
    :param q2: Second quaternion [4] or [N, 4] (x, y, z, w)
    :returns: Product quaternion, [4] if both inputs are 1D
    """
    q1 = np.asarray(q1, dtype=np.float64)
    q2 = np.asarray(q2, dtype=np.float64)
    single = q1.ndim == 1 and q2.ndim == 1

    # Handle 1D inputs
    if q1.ndim == 1:
        q1 = q1[np.newaxis, :]
    if q2.ndim == 1:
        q2 = q2[np.newaxis, :]

    x1, y1, z1, w1 = q1[:, 0], q1[:, 1], q1[:, 2], q1[:, 3]
    x2, y2, z2, w2 = q2[:, 0], q2[:, 1], q2[:, 2], q2[:, 3]

    x = x1 * w2 + y1 * z2 - z1 * y2 + w1 * x2
    y = -x1 * z2 + y1 * w2 + z1 * x2 + w1 * y2
    z = x1 * y2 - y1 * x2 + z1 * w2 + w1 * z2
    w = -x1 * x2 - y1 * y2 - z1 * z2 + w1 * w2

    result = np.stack([x, y, z, w], axis=1)
    return result[0] if single else result


def canonicalize_quaternion(q: ArrayLike) -> np.ndarray:
    """Pick the representative of ``q`` / ``-q`` with ``w > 0``.

    When ``w == 0`` the first non-zero component is made positive.

    :param q: Quaternion [4] (x, y, z, w)
    :returns: Quaternion [4] describing the same rotation
    """
    q = np.asarray(q, dtype=np.float64)
    # w first, then x, y, z
    for component in (q[3], q[0], q[1], q[2]):
        if component != 0:
            return -q if component < 0 else q.copy()
    return q.copy()


def quaternion_rotate_vector(q: ArrayLike, v: ArrayLike) -> np.ndarray:
    """Rotate a 3-vector by a unit quaternion.

    Uses the expanded form of ``R(q) @ v`` so that the result matches
    :func:`quaternion_to_rotation_matrix` applied to the same vector.

    :param q: Unit quaternion [4] (x, y, z, w)
    :param v: Vector [3]
    :returns: Rotated vector [3]
    """
    x, y, z, w = (float(c) for c in q)
    vx, vy, vz = (float(c) for c in v)

    x2 = x * 2
    y2 = y * 2
    z2 = z * 2
    xx = x * x2
    yy = y * y2
    zz = z * z2
    xy = x * y2
    xz = x * z2
    yz = y * z2
    wx = w * x2
    wy = w * y2
    wz = w * z2

    return np.array(
        [
            (1 - (yy + zz)) * vx + (xy - wz) * vy + (xz + wy) * vz,
            (xy + wz) * vx + (1 - (xx + zz)) * vy + (yz - wx) * vz,
            (xz - wy) * vx + (yz + wx) * vy + (1 - (xx + yy)) * vz,
        ],
        dtype=np.float64,
    )


def quaternion_to_rotation_matrix(q: ArrayLike) -> np.ndarray:
    """Unit quaternion to 3x3 rotation matrix.

    :param q: Quaternion [4] (x, y, z, w), assumed normalized
    :returns: 3x3 rotation matrix acting on column vectors
    """
    x, y, z, w = (float(c) for c in q)

    x2 = x * 2
    y2 = y * 2
    z2 = z * 2
    xx = x * x2
    yy = y * y2
    zz = z * z2
    xy = x * y2
    xz = x * z2
    yz = y * z2
    wx = w * x2
    wy = w * y2
    wz = w * z2

    R = np.empty((3, 3), dtype=np.float64)

    R[0, 0] = 1 - (yy + zz)
    R[0, 1] = xy - wz
    R[0, 2] = xz + wy

    R[1, 0] = xy + wz
    R[1, 1] = 1 - (xx + zz)
    R[1, 2] = yz - wx

    R[2, 0] = xz - wy
    R[2, 1] = yz + wx
    R[2, 2] = 1 - (xx + yy)

    return R


# ============================================================================
# Euler angles (z, then x, then y)
# ============================================================================


def euler_zxy_to_quaternion(euler: ArrayLike) -> np.ndarray:
    """Euler angles to quaternion.

    The rotation about z is applied first, then x, then y, i.e.
    ``q = qy * qx * qz``.

    :param euler: Euler angles [3] (x, y, z) in degrees
    :returns: Quaternion [4] (x, y, z, w), not normalized
    """
    half = np.radians(np.asarray(euler, dtype=np.float64)) / 2

    cx, sx = math.cos(half[0]), math.sin(half[0])
    cy, sy = math.cos(half[1]), math.sin(half[1])
    cz, sz = math.cos(half[2]), math.sin(half[2])

    return np.array(
        [
            sy * cx * sz + cy * sx * cz,
            sy * cx * cz - cy * sx * sz,
            cy * cx * sz - sy * sx * cz,
            cy * cx * cz + sy * sx * sz,
        ],
        dtype=np.float64,
    )


def quaternion_to_euler_zxy(q: ArrayLike) -> np.ndarray:
    """Unit quaternion to Euler angles, inverse of :func:`euler_zxy_to_quaternion`.

    At the gimbal-lock poles (``x*w - y*z`` at +/-0.5) the result is exactly
    ``(90, 0, 0)`` or ``(-90, 0, 0)``. Otherwise every angle is wrapped into
    ``[0, 360)``.

    :param q: Quaternion [4] (x, y, z, w)
    :returns: Euler angles [3] (x, y, z) in degrees
    """
    x, y, z, w = (float(c) for c in q)

    pole = x * w - y * z
    if TOLERANCE_CONFIG.gimbal_pole.is_close(pole, 0.5):
        return np.array([90.0, 0.0, 0.0], dtype=np.float64)
    if TOLERANCE_CONFIG.gimbal_pole.is_close(pole, -0.5):
        return np.array([-90.0, 0.0, 0.0], dtype=np.float64)

    # asin argument can drift past 1 by an ulp near the poles
    rx = math.asin(max(-1.0, min(1.0, 2 * pole)))
    ry = math.atan2(2 * (x * z + y * w), 1 - 2 * (x * x + y * y))
    rz = math.atan2(2 * (x * y + z * w), 1 - 2 * (x * x + z * z))

    return np.array(
        [normalize_degrees(math.degrees(r)) for r in (rx, ry, rz)],
        dtype=np.float64,
    )


# ============================================================================
# Angle-axis
# ============================================================================


def axis_angle_to_quaternion(axis: ArrayLike, angle: float) -> np.ndarray:
    """Axis and angle to quaternion.

    :param axis: Unit rotation axis [3]
    :param angle: Rotation angle in degrees
    :returns: Quaternion [4] (x, y, z, w)
    """
    axis = np.asarray(axis, dtype=np.float64)
    half_angle = math.radians(angle) / 2
    sin_half = math.sin(half_angle)

    return np.array(
        [axis[0] * sin_half, axis[1] * sin_half, axis[2] * sin_half, math.cos(half_angle)],
        dtype=np.float64,
    )


def quaternion_to_axis_angle(q: ArrayLike) -> tuple[np.ndarray, float]:
    """Unit quaternion to axis and angle.

    The axis is the normalized vector part and the angle is
    ``2 * atan2(|xyz|, w)``. When the vector part vanishes (zero or
    subnormal squared norm) the rotation is the identity: the axis is a zero
    vector and the angle is 0.

    :param q: Quaternion [4] (x, y, z, w)
    :returns: Tuple of (axis [3], angle in degrees)
    """
    x, y, z, w = (float(c) for c in q)

    sin_sq = x * x + y * y + z * z
    if sin_sq < TOLERANCE_CONFIG.angle_axis.epsilon:
        return np.zeros(3, dtype=np.float64), 0.0

    s = math.sqrt(sin_sq)
    angle = math.degrees(2 * math.atan2(s, w))
    return np.array([x / s, y / s, z / s], dtype=np.float64), angle
